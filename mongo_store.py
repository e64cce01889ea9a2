"""Thin pymongo wrapper: connect, ping, unique index, batch insert, close.

pymongo exceptions are translated into the seeder's own error types here so
callers never need to import ``pymongo.errors``.
"""

from __future__ import annotations

import re
from typing import Any, Sequence
from urllib.parse import quote_plus

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import (
    BulkWriteError,
    ConfigurationError,
    ConnectionFailure,
    NetworkTimeout,
    OperationFailure,
)
from pymongo.server_api import ServerApi

from errors import PartialInsertError, SeedError, StoreConnectionError
from logger import get_logger

logger = get_logger(__name__)

DUPLICATE_KEY_CODE = 11000
UNIQUE_INDEX_NAME = "kana_type_kana_unique"
UNIQUE_INDEX_KEYS = [("kana_type", ASCENDING), ("kana", ASCENDING)]

_CREDENTIALS_RE = re.compile(r"(://[^:/@]+:)[^@]*@")


def build_connection_uri(username: str, password: str, cluster: str, app_name: str = "Cluster0") -> str:
    return (
        f"mongodb+srv://{quote_plus(username)}:{quote_plus(password)}@{cluster}/"
        f"?retryWrites=true&w=majority&appName={quote_plus(app_name)}"
    )


def mask_uri(uri: str) -> str:
    return _CREDENTIALS_RE.sub(r"\1****@", uri)


def connect(
    uri: str,
    *,
    server_selection_timeout_ms: int = 5000,
    insert_timeout_ms: int = 30000,
) -> MongoClient:
    """Create a client pinned to Stable API v1.

    The client connects lazily; only URI parsing and SRV resolution can fail here.
    """
    logger.info("Connecting to %s", mask_uri(uri))
    try:
        return MongoClient(
            uri,
            server_api=ServerApi("1"),
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            connectTimeoutMS=server_selection_timeout_ms,
            socketTimeoutMS=insert_timeout_ms,
        )
    except ConfigurationError as exc:
        raise StoreConnectionError(f"Invalid MongoDB target {mask_uri(uri)}: {exc}") from exc


def health_check(client: MongoClient) -> None:
    try:
        client.admin.command("ping")
    except (ConnectionFailure, OperationFailure, ConfigurationError) as exc:
        raise StoreConnectionError(f"MongoDB ping failed: {exc}") from exc
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")


def ensure_unique_index(collection: Collection) -> None:
    try:
        collection.create_index(UNIQUE_INDEX_KEYS, unique=True, name=UNIQUE_INDEX_NAME)
    except ConnectionFailure as exc:
        raise StoreConnectionError(f"Lost connection creating {UNIQUE_INDEX_NAME}: {exc}") from exc
    except OperationFailure as exc:
        # Usually duplicates left behind by a seeder without the index
        raise SeedError(f"Could not create unique index {UNIQUE_INDEX_NAME} on {collection.name}: {exc}") from exc


def insert_batch(collection: Collection, documents: Sequence[dict[str, Any]]) -> int:
    """Insert every document in one unordered request and return how many landed.

    Duplicate-key rejections count as skipped, any other write error as failed;
    either raises PartialInsertError. A write concern error means none of the
    inserted documents are known to be durable, so the whole batch counts as failed.
    """
    if not documents:
        return 0
    try:
        result = collection.insert_many(list(documents), ordered=False)
    except BulkWriteError as exc:
        details = exc.details or {}
        write_errors = details.get("writeErrors", [])
        concern_errors = details.get("writeConcernErrors", [])
        inserted = details.get("nInserted", 0)
        skipped = sum(1 for err in write_errors if err.get("code") == DUPLICATE_KEY_CODE)
        failed = len(write_errors) - skipped
        for err in write_errors:
            if err.get("code") != DUPLICATE_KEY_CODE:
                logger.error("Write error at index %s: %s", err.get("index"), err.get("errmsg"))
        if concern_errors:
            for err in concern_errors:
                logger.error("Write concern error %s: %s", err.get("code"), err.get("errmsg"))
            failed += inserted
            inserted = 0
        raise PartialInsertError(inserted, skipped, failed) from exc
    except NetworkTimeout as exc:
        # Unknown how much of the batch was applied
        raise PartialInsertError(0, 0, len(documents)) from exc
    except ConnectionFailure as exc:
        raise StoreConnectionError(f"Lost connection during insert: {exc}") from exc
    return len(result.inserted_ids)


def close(client: MongoClient | None) -> None:
    if client is not None:
        client.close()
