import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Initial record set (JSON array or CSV)
DATA_PATH = os.getenv("DATA_PATH", "data/data.json")

# Ids for new records start above this value
ID_SEED = int(os.getenv("ID_SEED", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
