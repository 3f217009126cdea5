"""Application configuration."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).parent

DATA_DIR = Path(os.environ.get("DATA_DIR", str(BASE_DIR.parent / "data")))
DATA_DIR.mkdir(parents=True, exist_ok=True)

DATABASE_URL = os.environ.get("DATABASE_URL", "").strip() or f"sqlite:///{DATA_DIR}/academic.db"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# Password recovery
RESET_TOKEN_TTL_MINUTES = int(os.environ.get("RESET_TOKEN_TTL_MINUTES", "60"))

# Credential hashing cost
BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "12"))
