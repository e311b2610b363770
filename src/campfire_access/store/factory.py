"""
campfire_access.store.factory

Build the configured record store.
"""

from __future__ import annotations

from campfire_access.access.records import SHEET_HEADER
from campfire_access.db.session import create_engine
from campfire_access.settings import Settings
from campfire_access.store.base import RecordStore
from campfire_access.store.csv_store import CsvWorkbookStore
from campfire_access.store.memory import InMemoryStore
from campfire_access.store.sql_store import SqlTableStore


def build_store(settings: Settings) -> RecordStore:
    if settings.store_backend == "sql":
        return SqlTableStore(create_engine(settings))
    if settings.store_backend == "memory":
        # Header-only sheet: every lookup is "not found" until rows are supplied.
        return InMemoryStore({settings.sheet_name: [list(SHEET_HEADER)]})
    return CsvWorkbookStore(settings.workbook_dir)
