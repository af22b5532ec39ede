import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from bookapi.main import create_app  # noqa: E402
from bookapi.services.memory_store import MemoryBookStore  # noqa: E402


@pytest.fixture
def memory_store():
    store = MemoryBookStore()
    store.initialize()
    return store


@pytest.fixture
def memory_client(memory_store):
    app = create_app(store=memory_store, backend="memory")
    with TestClient(app) as client:
        yield client
