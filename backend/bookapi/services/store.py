# bookapi/services/store.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from bookapi.settings import STORE_BACKENDS, Settings, settings as default_settings
from bookapi.services.memory_store import MemoryBookStore

if TYPE_CHECKING:
    from bookapi.db.mongo_store import MongoBookStore

logger = logging.getLogger(__name__)

BookStore = Union[MemoryBookStore, "MongoBookStore"]


def open_store(cfg: Optional[Settings] = None) -> BookStore:
    cfg = cfg or default_settings
    if cfg.STORE_BACKEND not in STORE_BACKENDS:
        raise ValueError(f"unknown STORE_BACKEND {cfg.STORE_BACKEND!r}, expected one of {STORE_BACKENDS}")

    logger.info("[store] backend=%s", cfg.STORE_BACKEND)
    if cfg.STORE_BACKEND == "mongo":
        from bookapi.db.mongo_store import MongoBookStore

        return MongoBookStore.connect(
            cfg.MONGODB_URI,
            cfg.MONGODB_DB,
            cfg.MONGODB_COLLECTION,
            connect_timeout=cfg.MONGODB_CONNECT_TIMEOUT,
            timeout=cfg.MONGODB_OPERATION_TIMEOUT,
            disconnect_timeout=cfg.MONGODB_DISCONNECT_TIMEOUT,
        )

    store = MemoryBookStore()
    if cfg.SEED_BOOKS:
        store.initialize()
    return store


def close_store(store: BookStore) -> None:
    disconnect = getattr(store, "disconnect", None)
    if disconnect is not None:
        disconnect()
