# bookapi/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Always load backend/bookapi/.env; real environment variables take precedence
load_dotenv(Path(__file__).with_name(".env"))

STORE_BACKENDS = ("memory", "mongo")


def _bool_env(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _int_env(name: str, default: int) -> int:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return int(v.strip())
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return float(v.strip())
    except ValueError:
        return default


@dataclass
class Settings:
    APP_NAME: str = field(default_factory=lambda: os.getenv("APP_NAME", "Book API"))
    API_PREFIX: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").strip().rstrip("/"))
    DEBUG: bool = field(default_factory=lambda: _bool_env("DEBUG", False))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").strip().upper())

    HOST: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: _int_env("PORT", 8080))

    STORE_BACKEND: str = field(default_factory=lambda: os.getenv("STORE_BACKEND", "memory").strip().lower())  # memory|mongo
    SEED_BOOKS: bool = field(default_factory=lambda: _bool_env("SEED_BOOKS", True))

    MONGODB_URI: str = field(default_factory=lambda: os.getenv("MONGODB_URI", "mongodb://localhost:27017"))
    MONGODB_DB: str = field(default_factory=lambda: os.getenv("MONGODB_DB", "bookdb"))
    MONGODB_COLLECTION: str = field(default_factory=lambda: os.getenv("MONGODB_COLLECTION", "books"))

    # seconds
    MONGODB_CONNECT_TIMEOUT: float = field(default_factory=lambda: _float_env("MONGODB_CONNECT_TIMEOUT", 10.0))
    MONGODB_OPERATION_TIMEOUT: float = field(default_factory=lambda: _float_env("MONGODB_OPERATION_TIMEOUT", 5.0))
    MONGODB_DISCONNECT_TIMEOUT: float = field(default_factory=lambda: _float_env("MONGODB_DISCONNECT_TIMEOUT", 5.0))


settings = Settings()
