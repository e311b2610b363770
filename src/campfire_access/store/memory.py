"""
campfire_access.store.memory

In-process sheet store.

Responsibilities:
- Serve fixed rows for local runs and tests.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from campfire_access.store.base import Cell, StoreUnavailable


class InMemoryStore:
    def __init__(self, sheets: Mapping[str, Sequence[Sequence[Cell]]] | None = None) -> None:
        self._sheets = {name: [list(r) for r in rows] for name, rows in (sheets or {}).items()}

    async def get_values(self, sheet_name: str) -> list[list[Cell]]:
        rows = self._sheets.get(sheet_name)
        if rows is None:
            raise StoreUnavailable(sheet_name=sheet_name, reason="sheet not found")
        # Copies so callers cannot mutate the backing rows.
        return [list(r) for r in rows]

    async def sheet_names(self) -> list[str]:
        return list(self._sheets)
