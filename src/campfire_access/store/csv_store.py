"""
campfire_access.store.csv_store

CSV workbook store: one `<sheet_name>.csv` file per sheet in a directory.

Responsibilities:
- Read a sheet exported from a spreadsheet, header row included.
- Map missing files and decode errors to `StoreUnavailable`.
"""

from __future__ import annotations

import asyncio
import csv
from pathlib import Path

from campfire_access.store.base import Cell, StoreUnavailable


def _read_rows(path: Path) -> list[list[Cell]]:
    # utf-8-sig: spreadsheet exports often prepend a BOM.
    with path.open(newline="", encoding="utf-8-sig") as fh:
        return [row for row in csv.reader(fh)]


class CsvWorkbookStore:
    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def _path(self, sheet_name: str) -> Path:
        return self._directory / f"{sheet_name}.csv"

    async def get_values(self, sheet_name: str) -> list[list[Cell]]:
        path = self._path(sheet_name)
        if not path.is_file():
            raise StoreUnavailable(sheet_name=sheet_name, reason=f"no such file: {path}")
        try:
            return await asyncio.to_thread(_read_rows, path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise StoreUnavailable(sheet_name=sheet_name, reason=str(e)) from e

    async def sheet_names(self) -> list[str]:
        if not self._directory.is_dir():
            return []
        return sorted(p.stem for p in self._directory.glob("*.csv"))


# --- Module Notes -----------------------------------------------------------
# The file is re-read on every lookup so staff edits are visible without a restart;
# the read runs in a worker thread to keep the event loop free.
