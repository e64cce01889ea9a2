"""Exceptions raised while building and seeding the kana mappings."""

from __future__ import annotations

from typing import Sequence


class SeedError(Exception):
    """Base class for every failure the seeder reports."""

    kind = "seed_error"


class ConfigError(SeedError):
    """A required environment value is missing or invalid."""

    kind = "config_error"

    def __init__(
        self, message: str, *, missing: Sequence[str] = (), invalid: Sequence[str] = ()
    ) -> None:
        super().__init__(message)
        self.missing = list(missing)
        self.invalid = list(invalid)


class StoreConnectionError(SeedError):
    """The document store could not be reached or refused our credentials."""

    kind = "connection_error"


class PartialInsertError(SeedError):
    """Some records in the batch were not inserted."""

    kind = "partial_insert_error"

    def __init__(self, succeeded: int, skipped: int, failed: int = 0) -> None:
        super().__init__(
            f"Inserted {succeeded} records; {skipped} skipped as duplicates, {failed} failed"
        )
        self.succeeded = succeeded
        self.skipped = skipped
        self.failed = failed

    @property
    def only_duplicates(self) -> bool:
        return self.skipped > 0 and self.failed == 0


class DatasetIntegrityError(SeedError):
    """The static kana table violates one of its own invariants."""

    kind = "dataset_integrity_error"
