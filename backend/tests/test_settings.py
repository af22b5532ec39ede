from unittest.mock import patch

import pytest

from bookapi.main import create_app
from bookapi.services import store as store_module
from bookapi.services.memory_store import MemoryBookStore
from bookapi.settings import Settings


def test_defaults(monkeypatch):
    for key in ("STORE_BACKEND", "PORT", "MONGODB_DB", "MONGODB_CONNECT_TIMEOUT", "MONGODB_OPERATION_TIMEOUT", "SEED_BOOKS"):
        monkeypatch.delenv(key, raising=False)

    s = Settings()

    assert s.STORE_BACKEND == "memory"
    assert s.PORT == 8080
    assert s.MONGODB_DB == "bookdb"
    assert s.MONGODB_CONNECT_TIMEOUT == 10.0
    assert s.MONGODB_OPERATION_TIMEOUT == 5.0
    assert s.SEED_BOOKS is True


def test_env_overrides_and_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", " Mongo ")
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("MONGODB_OPERATION_TIMEOUT", "2.5")
    monkeypatch.setenv("SEED_BOOKS", "no")

    s = Settings()

    assert s.STORE_BACKEND == "mongo"
    assert s.PORT == 8080
    assert s.MONGODB_OPERATION_TIMEOUT == 2.5
    assert s.SEED_BOOKS is False


def test_open_store_memory_seeding(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("SEED_BOOKS", "false")
    assert store_module.open_store(Settings()).list_all() == []

    monkeypatch.setenv("SEED_BOOKS", "true")
    store = store_module.open_store(Settings())
    assert isinstance(store, MemoryBookStore)
    assert [b.id for b in store.list_all()] == [1]


def test_open_store_mongo_uses_settings(monkeypatch):
    for key in ("MONGODB_DB", "MONGODB_CONNECT_TIMEOUT", "MONGODB_OPERATION_TIMEOUT", "MONGODB_DISCONNECT_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("STORE_BACKEND", "mongo")
    monkeypatch.setenv("MONGODB_URI", "mongodb://db:27017")
    monkeypatch.setenv("MONGODB_COLLECTION", "catalog")

    with patch("bookapi.db.mongo_store.MongoBookStore.connect") as connect:
        store_module.open_store(Settings())

    connect.assert_called_once_with(
        "mongodb://db:27017",
        "bookdb",
        "catalog",
        connect_timeout=10.0,
        timeout=5.0,
        disconnect_timeout=5.0,
    )


def test_unknown_backend_rejected(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "redis")
    with pytest.raises(ValueError):
        store_module.open_store(Settings())
    with pytest.raises(ValueError):
        create_app(backend="redis")
