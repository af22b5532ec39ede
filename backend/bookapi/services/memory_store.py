# bookapi/services/memory_store.py
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from bookapi.schemas.book import UPDATABLE_FIELDS, Book

logger = logging.getLogger(__name__)

SEED_BOOK = Book(id=1, title="1984", author="George Orwell", isbn="10239", year=1994)


class MemoryBookStore:
    """Process-local book store.

    Every method holds the lock for its whole body, reads included. Records
    are copied in and out, so nothing a caller holds aliases stored state.
    """

    def __init__(self):
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def initialize(self) -> None:
        with self._lock:
            self._books[SEED_BOOK.id] = SEED_BOOK.model_copy()
            self._next_id = SEED_BOOK.id + 1
        logger.info("[memory] seeded book store with %r", SEED_BOOK.title)

    def list_all(self) -> List[Book]:
        with self._lock:
            return [b.model_copy() for b in self._books.values()]

    def get_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            b = self._books.get(book_id)
            return b.model_copy() if b is not None else None

    def create(self, book: Book) -> Book:
        with self._lock:
            b = book.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._books[b.id] = b
            return b.model_copy()

    def update(self, book_id: int, book: Book) -> Optional[Book]:
        with self._lock:
            current = self._books.get(book_id)
            if current is None:
                return None
            patch = {k: getattr(book, k) for k in UPDATABLE_FIELDS}
            b = current.model_copy(update=patch)
            self._books[book_id] = b
            return b.model_copy()

    def delete(self, book_id: int) -> bool:
        with self._lock:
            if book_id not in self._books:
                return False
            del self._books[book_id]
            return True

    def clear_all(self) -> None:
        with self._lock:
            self._books = {}
            self._next_id = 1
