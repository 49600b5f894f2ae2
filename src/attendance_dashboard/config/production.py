import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_PATH = os.getenv("DATA_PATH", "data/data.json")

ID_SEED = int(os.getenv("ID_SEED", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
