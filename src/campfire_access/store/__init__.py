"""
campfire_access.store

Read-only adapters over the tabular entry list.

Responsibilities:
- Define the `RecordStore` interface and its failure type.
- Build the configured backend from settings.
"""

from __future__ import annotations

from campfire_access.store.base import Cell, RecordStore, StoreUnavailable
from campfire_access.store.csv_store import CsvWorkbookStore
from campfire_access.store.memory import InMemoryStore
from campfire_access.store.sql_store import SqlTableStore

__all__ = [
    "Cell",
    "CsvWorkbookStore",
    "InMemoryStore",
    "RecordStore",
    "SqlTableStore",
    "StoreUnavailable",
]
