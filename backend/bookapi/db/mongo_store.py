# bookapi/db/mongo_store.py
from __future__ import annotations

import logging
from typing import List, Optional

import pymongo
from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from bookapi.db.mongo_client import close_client, open_client
from bookapi.errors import BookNotFoundError, InvalidBookIdError, StoreError
from bookapi.schemas.book import DocumentBook

logger = logging.getLogger(__name__)

# encoding a document can fail before the driver sends anything
WRITE_ERRORS = (PyMongoError, BSONError, OverflowError)


def parse_object_id(book_id: str) -> ObjectId:
    # ObjectId(None) would mint a fresh id, so only strings are accepted
    if not isinstance(book_id, str):
        raise InvalidBookIdError(book_id)
    try:
        return ObjectId(book_id)
    except InvalidId as e:
        raise InvalidBookIdError(book_id) from e


class MongoBookStore:
    """Book store backed by one MongoDB collection.

    Concurrency is left to the database and the driver's connection pool, so
    the store holds no lock. Each call runs under its own ``pymongo.timeout``
    and fails with ``StoreError`` rather than blocking past it. Nothing is
    retried.
    """

    def __init__(
        self,
        collection: Collection,
        client: Optional[MongoClient] = None,
        *,
        timeout: float = 5.0,
        disconnect_timeout: float = 5.0,
    ):
        self._collection = collection
        self._client = client
        self.timeout = timeout
        self.disconnect_timeout = disconnect_timeout

    @classmethod
    def connect(
        cls,
        uri: str,
        db_name: str,
        collection_name: str = "books",
        *,
        connect_timeout: float = 10.0,
        timeout: float = 5.0,
        disconnect_timeout: float = 5.0,
    ) -> "MongoBookStore":
        client = open_client(uri, timeout=connect_timeout)
        collection = client[db_name][collection_name]
        logger.info("[db] using collection %s.%s", db_name, collection_name)
        return cls(collection, client, timeout=timeout, disconnect_timeout=disconnect_timeout)

    def disconnect(self) -> None:
        if self._client is None:
            return
        close_client(self._client, timeout=self.disconnect_timeout)
        self._client = None

    def list_all(self) -> List[DocumentBook]:
        try:
            with pymongo.timeout(self.timeout):
                return [DocumentBook.from_document(d) for d in self._collection.find({})]
        except PyMongoError as e:
            raise StoreError(f"failed to list books: {e}") from e
        except ValidationError as e:
            raise StoreError(f"failed to decode book: {e}") from e

    def get_by_id(self, book_id: str) -> DocumentBook:
        oid = parse_object_id(book_id)
        try:
            with pymongo.timeout(self.timeout):
                doc = self._collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(f"failed to fetch book {book_id}: {e}") from e
        if doc is None:
            raise BookNotFoundError(book_id)
        try:
            return DocumentBook.from_document(doc)
        except ValidationError as e:
            raise StoreError(f"failed to decode book {book_id}: {e}") from e

    def create(self, book: DocumentBook) -> DocumentBook:
        # caller-supplied ids are dropped; the database assigns _id
        doc = book.to_document()
        try:
            with pymongo.timeout(self.timeout):
                res = self._collection.insert_one(doc)
        except WRITE_ERRORS as e:
            raise StoreError(f"failed to insert book: {e}") from e
        return book.model_copy(update={"id": str(res.inserted_id)})

    def update(self, book_id: str, book: DocumentBook) -> DocumentBook:
        oid = parse_object_id(book_id)
        try:
            with pymongo.timeout(self.timeout):
                res = self._collection.update_one({"_id": oid}, {"$set": book.to_document()})
        except WRITE_ERRORS as e:
            raise StoreError(f"failed to update book {book_id}: {e}") from e
        if res.matched_count == 0:
            raise BookNotFoundError(book_id)
        # answer with what is stored now, not with the caller's input
        return self.get_by_id(book_id)

    def delete(self, book_id: str) -> bool:
        oid = parse_object_id(book_id)
        try:
            with pymongo.timeout(self.timeout):
                res = self._collection.delete_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(f"failed to delete book {book_id}: {e}") from e
        if res.deleted_count == 0:
            raise BookNotFoundError(book_id)
        return True
