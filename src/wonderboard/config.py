# src/wonderboard/config.py

"""Runtime configuration read from environment variables."""

import os

# Which repository implementation backs the API: "sql" or "file"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql").lower()

# Database URL with SQLite fallback for development
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./wonderboard.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "20"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))

# JSON document used by the file backend
DATA_FILE = os.getenv("DATA_FILE", "./data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SUPPORTED_BACKENDS = ("sql", "file")
