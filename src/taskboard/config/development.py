import os

from .base import cors_origins_from_env, db_config_from_env, port_from_env

DB_CONFIG = db_config_from_env(default_password="taskboard")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = port_from_env()

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE")

CORS_ORIGINS = cors_origins_from_env()

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
