"""
campfire_access.access.service

Lookup service: identifier -> access decision.

Responsibilities:
- Scan the configured sheet (header skipped) for the first matching identifier.
- Convert store failures into an explicit `LookupResult` failure.
"""

from __future__ import annotations

from campfire_access.access.records import (
    COL_ID,
    AccessDecision,
    LookupErrorKind,
    LookupResult,
    Record,
    cell_text,
)
from campfire_access.observability.logging import get_logger
from campfire_access.store.base import RecordStore, StoreUnavailable

log = get_logger(__name__)


class LookupService:
    def __init__(self, *, store: RecordStore, sheet_name: str, granted_marker: str) -> None:
        self._store = store
        self._sheet_name = sheet_name
        self._granted_marker = granted_marker

    async def lookup(self, identifier: str) -> LookupResult:
        wanted = identifier.strip()
        if not wanted:
            raise ValueError("identifier must not be empty")

        try:
            values = await self._store.get_values(self._sheet_name)
        except StoreUnavailable as e:
            log.error("lookup.store_unavailable", sheet=e.sheet_name, reason=e.reason)
            return LookupResult.failure(LookupErrorKind.store_unavailable, str(e))

        # Row 0 is the header; first match in store order wins.
        for row in values[1:]:
            if not row or cell_text(row[COL_ID]).strip() != wanted:
                continue
            record = Record.from_row(row)
            decision = record.decide(granted_marker=self._granted_marker)
            log.info(
                "lookup.found",
                campfire_id=wanted,
                entry_access=record.entry_access,
                rehearsal_access=record.rehearsal_access,
            )
            return LookupResult.success(decision)

        log.info("lookup.not_found", campfire_id=wanted, rows=max(0, len(values) - 1))
        return LookupResult.success(AccessDecision.not_found())


# --- Module Notes -----------------------------------------------------------
# Duplicate identifiers are not validated; later rows are never consulted once a match is found.
