# bookapi/errors.py
from __future__ import annotations


class BookStoreError(Exception):
    """Base class for everything a book store raises."""


class StoreError(BookStoreError):
    """The backing database failed a query, insert, update or delete."""


class StoreConnectionError(StoreError):
    """The database could not be reached or did not answer the liveness ping."""


class BookNotFoundError(BookStoreError):
    def __init__(self, book_id: object):
        super().__init__(f"book {book_id} not found")
        self.book_id = book_id


class InvalidBookIdError(BookStoreError, ValueError):
    def __init__(self, book_id: object):
        super().__init__(f"invalid book id: {book_id!r}")
        self.book_id = book_id
