# bookapi/db/mongo_client.py
from __future__ import annotations

import logging

import pymongo
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from bookapi.errors import StoreConnectionError

logger = logging.getLogger(__name__)


def open_client(uri: str, timeout: float = 10.0) -> MongoClient:
    """Connect to MongoDB and prove the connection with a ping round-trip."""
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=int(timeout * 1000))
    except PyMongoError as e:
        raise StoreConnectionError(f"invalid MongoDB configuration: {e}") from e
    try:
        with pymongo.timeout(timeout):
            client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreConnectionError(f"cannot reach MongoDB: {e}") from e
    logger.info("[db] connected to MongoDB")
    return client


def close_client(client: MongoClient, timeout: float = 5.0) -> None:
    # A failed teardown at shutdown is logged; the process keeps exiting normally.
    try:
        with pymongo.timeout(timeout):
            client.close()
    except PyMongoError:
        logger.exception("[db] MongoDB disconnect failed")
        return
    logger.info("[db] disconnected from MongoDB")
