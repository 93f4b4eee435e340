import os

from .base import cors_origins_from_env, db_config_from_env, port_from_env

DB_CONFIG = db_config_from_env()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = port_from_env()

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

CORS_ORIGINS = cors_origins_from_env()

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
