"""Custom exception hierarchy for pyeventpayloads."""

from __future__ import annotations

from pathlib import Path


class EventPayloadError(Exception):
    """Base exception for all pyeventpayloads errors."""


class PayloadStoreConfigError(EventPayloadError):
    """Invalid or missing configuration."""


class SchemaStoreError(EventPayloadError):
    """The schema store data is unusable."""


class SchemaLoadError(SchemaStoreError):
    """A schema data file could not be read, decoded or validated."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message)


class InvalidReferenceError(SchemaStoreError):
    """A deduplicated parameter points outside the objects table.

    This means the schema store itself is malformed. It is never raised
    for unknown events or actions, which are reported as ``None``.
    """

    def __init__(self, index: int, *, table_size: int) -> None:
        self.index = index
        self.table_size = table_size
        super().__init__(f"Unknown object {index} (objects table has {table_size} entries)")
