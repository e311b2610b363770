"""
campfire_access.access.records

Domain types for the entry check.

Responsibilities:
- Interpret one sheet row as a `Record` (fixed column order).
- Derive an `AccessDecision` and its display `Pattern`.
- Carry lookup outcomes as an explicit `LookupResult` (decision or error kind).
"""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

from campfire_access.store.base import Cell

# Column positions in the entry list (A..F).
COL_ID = 0
COL_NAME = 1
COL_RETURN_ITEM = 2
COL_ENTRY_ACCESS = 3
COL_REHEARSAL_ACCESS = 4
COL_NOTE = 5

# Header row as exported from the staff spreadsheet.
SHEET_HEADER = ("CAMPFIRE_ID", "氏名", "リターン内容", "入場権利", "リハ見学権利", "備考")


class Pattern(enum.StrEnum):
    # Consumed by the client to pick a screen; treat values as a stable API contract.
    both = "both"
    entrance_only = "entrance_only"
    none = "none"
    not_found = "not_found"


class LookupErrorKind(enum.StrEnum):
    store_unavailable = "STORE_UNAVAILABLE"


def cell_text(cell: Cell) -> str:
    # Falsy cells (None, "", 0, False) read as blank.
    if not cell or (isinstance(cell, float) and math.isnan(cell)):
        return ""
    # Spreadsheet numbers arrive as floats; 12345.0 is the ID "12345".
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def _optional(text: str) -> str | None:
    return text if text.strip() else None


@dataclass(frozen=True, slots=True)
class Record:
    identifier: str
    display_name: str | None
    reward_description: str | None
    entry_access: str
    rehearsal_access: str
    note: str | None

    @classmethod
    def from_row(cls, row: Sequence[Cell]) -> Record:
        # Short rows happen when trailing cells are blank in the sheet export.
        cells = [cell_text(c) for c in row] + [""] * max(0, COL_NOTE + 1 - len(row))
        return cls(
            identifier=cells[COL_ID].strip(),
            display_name=_optional(cells[COL_NAME]),
            reward_description=_optional(cells[COL_RETURN_ITEM]),
            entry_access=cells[COL_ENTRY_ACCESS].strip(),
            rehearsal_access=cells[COL_REHEARSAL_ACCESS].strip(),
            note=_optional(cells[COL_NOTE]),
        )

    def decide(self, *, granted_marker: str) -> AccessDecision:
        return AccessDecision(
            found=True,
            entry_access=self.entry_access == granted_marker,
            rehearsal_access=self.rehearsal_access == granted_marker,
            profile=Profile(
                display_name=self.display_name,
                reward_description=self.reward_description,
                rehearsal_access=self.rehearsal_access or None,
                note=self.note,
            ),
        )


@dataclass(frozen=True, slots=True)
class Profile:
    display_name: str | None = None
    reward_description: str | None = None
    # Raw flag text as written in the sheet, e.g. "有".
    rehearsal_access: str | None = None
    note: str | None = None


@dataclass(frozen=True, slots=True)
class AccessDecision:
    """
    Derived from a record; access flags are only meaningful when `found`.
    """

    found: bool
    entry_access: bool = False
    rehearsal_access: bool = False
    profile: Profile | None = None

    @classmethod
    def not_found(cls) -> AccessDecision:
        return cls(found=False)

    @property
    def pattern(self) -> Pattern:
        if not self.found:
            return Pattern.not_found
        if not self.entry_access:
            return Pattern.none
        if self.rehearsal_access:
            return Pattern.both
        return Pattern.entrance_only


@dataclass(frozen=True, slots=True)
class LookupResult:
    decision: AccessDecision | None = None
    error: LookupErrorKind | None = None
    detail: str | None = None

    @classmethod
    def success(cls, decision: AccessDecision) -> LookupResult:
        return cls(decision=decision)

    @classmethod
    def failure(cls, error: LookupErrorKind, detail: str) -> LookupResult:
        return cls(error=error, detail=detail)

    @property
    def ok(self) -> bool:
        return self.error is None


# --- Module Notes -----------------------------------------------------------
# "Not found" is a successful lookup with `found=False`; only store problems are errors.
