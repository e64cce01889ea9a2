"""Seed the kana_mappings collection with the static kana table."""

from __future__ import annotations

from typing import Sequence

from pymongo.collection import Collection

from config import Config, load_config, require_mongo_settings
from errors import PartialInsertError
from kana_dataset import KanaRecord, build_dataset, to_documents
from logger import get_logger
from mongo_store import (
    build_connection_uri,
    close,
    connect,
    ensure_unique_index,
    health_check,
    insert_batch,
)

logger = get_logger(__name__)


def seed(collection: Collection, dataset: Sequence[KanaRecord]) -> int:
    """Insert ``dataset`` into ``collection`` and return the inserted count.

    Pings first and never touches the collection if the ping fails. Records are
    keyed on (kana_type, kana) by a unique index, so a second run inserts nothing
    and raises PartialInsertError with every record counted as skipped.
    """
    health_check(collection.database.client)
    ensure_unique_index(collection)

    logger.info("Inserting %d kana records into %s", len(dataset), collection.full_name)
    inserted = insert_batch(collection, to_documents(dataset))
    if inserted != len(dataset):
        raise PartialInsertError(inserted, 0, len(dataset) - inserted)
    logger.info("Inserted data successfully! (%d records)", inserted)
    return inserted


def run_seed(settings: Config | None = None) -> int:
    """Build the dataset, connect with ``settings`` and seed; always closes the client.

    Settings are read from the environment when not given.
    """
    dataset = build_dataset()
    if settings is None:
        settings = load_config()
    require_mongo_settings(settings)

    uri = build_connection_uri(
        settings.mongo_username,
        settings.mongo_password,
        settings.mongo_cluster,
        settings.mongo_app_name,
    )
    client = None
    try:
        client = connect(
            uri,
            server_selection_timeout_ms=settings.mongo_ping_timeout_ms,
            insert_timeout_ms=settings.mongo_insert_timeout_ms,
        )
        collection = client[settings.mongo_database][settings.mongo_collection]
        return seed(collection, dataset)
    finally:
        close(client)
