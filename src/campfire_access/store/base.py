"""
campfire_access.store.base

Record store contract.

Responsibilities:
- Describe a sheet as a list of rows, header first, in store order.
- Signal missing/unreadable sheets with `StoreUnavailable`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

# Sheet cells come back untyped (numbers, dates, blanks) depending on the backend.
Cell = Any


@dataclass(eq=False)
class StoreUnavailable(Exception):
    """
    The sheet could not be located or read.
    """

    sheet_name: str
    reason: str

    def __str__(self) -> str:
        return f"sheet {self.sheet_name!r} unavailable: {self.reason}"


@runtime_checkable
class RecordStore(Protocol):
    async def get_values(self, sheet_name: str) -> list[list[Cell]]:
        """
        Return every row of the sheet including the header row (index 0).
        """
        ...

    async def sheet_names(self) -> list[str]: ...


# --- Module Notes -----------------------------------------------------------
# Stores never write. Whoever edits the entry list owns its lifecycle.
