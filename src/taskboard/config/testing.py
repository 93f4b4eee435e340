import os

from .base import db_config_from_env

DB_CONFIG = db_config_from_env(default_password="12345")

HOST = "127.0.0.1"
PORT = 4000

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = None

CORS_ORIGINS = "*"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
