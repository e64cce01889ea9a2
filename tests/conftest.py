from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from pymongo.errors import BulkWriteError, ServerSelectionTimeoutError


class FakeCollection:
    """In-memory stand-in for a pymongo Collection with a (kana_type, kana) unique index."""

    def __init__(self, client: FakeClient, name: str = "kana_mappings") -> None:
        self.name = name
        self.full_name = f"jp_syllabaries.{name}"
        self.database = SimpleNamespace(client=client)
        self.rows: dict[tuple[str, str], dict[str, Any]] = {}
        self.indexes: list[dict[str, Any]] = []
        self.insert_calls = 0

    def create_index(self, keys, unique: bool = False, name: str = ""):
        self.indexes.append({"keys": list(keys), "unique": unique, "name": name})
        return name

    def insert_many(self, documents, ordered: bool = True):
        self.insert_calls += 1
        inserted_ids: list[Any] = []
        write_errors: list[dict[str, Any]] = []
        for index, doc in enumerate(documents):
            key = (doc["kana_type"], doc["kana"])
            if key in self.rows:
                write_errors.append({"index": index, "code": 11000, "errmsg": f"E11000 duplicate key {key}"})
                continue
            doc["_id"] = len(self.rows) + 1
            self.rows[key] = doc
            inserted_ids.append(doc["_id"])
        if write_errors:
            raise BulkWriteError(
                {
                    "writeErrors": write_errors,
                    "writeConcernErrors": [],
                    "nInserted": len(inserted_ids),
                    "nUpserted": 0,
                    "nMatched": 0,
                    "nModified": 0,
                    "nRemoved": 0,
                    "upserted": [],
                }
            )
        return SimpleNamespace(inserted_ids=inserted_ids)


class FakeClient:
    def __init__(self, reachable: bool = True) -> None:
        self.reachable = reachable
        self.closed = False
        self.pings = 0
        self.collection = FakeCollection(self)
        self.admin = SimpleNamespace(command=self._command)

    def _command(self, name: str):
        self.pings += 1
        if not self.reachable:
            raise ServerSelectionTimeoutError("nowhere.example.net:27017: timed out")
        return {"ok": 1.0}

    def __getitem__(self, name: str):
        return {"kana_mappings": self.collection}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def unreachable_client() -> FakeClient:
    return FakeClient(reachable=False)
