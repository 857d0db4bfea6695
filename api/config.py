"""Application configuration and constants."""
import logging
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_list_env(name: str, default: list[str]) -> list[str]:
    """Parse comma-separated list from environment variable."""
    raw = os.environ.get(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


def _default_database_url() -> str:
    db_dir = Path(os.environ.get("DB_DIR", Path.cwd() / "data"))
    db_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_dir / 'testbank.db'}"


# Database
DATABASE_URL = os.environ.get("DATABASE_URL") or _default_database_url()

# Authentication
SECRET_KEY = os.environ.get(
    "SECRET_KEY",
    "CHANGE_ME_IN_PRODUCTION_USE_openssl_rand_hex_32"
)
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = _parse_int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 60)

# HTTP
CORS_ORIGINS = _parse_list_env(
    "CORS_ORIGINS", ["http://localhost:5173", "http://127.0.0.1:5173"]
)
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = _parse_int_env("PORT", 3001)

# Logging
LOG_LEVEL = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

# Test bank rules
TEST_STATUSES = ("draft", "published")
MAX_TEST_DURATION_MINUTES = 1440
