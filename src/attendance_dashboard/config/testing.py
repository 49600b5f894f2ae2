import os

SECRET_KEY = "test-secret"

DATA_PATH = os.getenv("DATA_PATH", "data/data.json")

ID_SEED = 0

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
