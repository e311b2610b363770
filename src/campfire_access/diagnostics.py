"""
campfire_access.diagnostics

Entry-list structure check.

Responsibilities:
- Report whether the configured sheet is readable and what its first rows look like.
- Back the readiness probe and the `python -m campfire_access.diagnostics` command.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict, dataclass, field

from campfire_access.access.handler import ValidationError, require_identifier
from campfire_access.access.service import LookupService
from campfire_access.observability.logging import configure_logging, get_logger
from campfire_access.settings import get_settings
from campfire_access.store.base import Cell, RecordStore, StoreUnavailable
from campfire_access.store.factory import build_store

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SheetStructure:
    sheet_name: str
    found: bool
    row_count: int = 0
    column_count: int = 0
    header: list[Cell] | None = None
    first_data_row: list[Cell] | None = None
    available_sheets: list[str] = field(default_factory=list)
    reason: str | None = None


async def describe_sheet(store: RecordStore, sheet_name: str) -> SheetStructure:
    try:
        values = await store.get_values(sheet_name)
    except StoreUnavailable as e:
        try:
            available = await store.sheet_names()
        except StoreUnavailable:
            available = []
        log.warning("sheet.unavailable", sheet=sheet_name, reason=e.reason, available=available)
        return SheetStructure(
            sheet_name=sheet_name,
            found=False,
            available_sheets=available,
            reason=e.reason,
        )

    return SheetStructure(
        sheet_name=sheet_name,
        found=True,
        row_count=len(values),
        column_count=len(values[0]) if values else 0,
        header=values[0] if values else None,
        first_data_row=values[1] if len(values) > 1 else None,
    )


async def _run(identifier: str | None) -> int:
    settings = get_settings()
    store = build_store(settings)
    try:
        structure = await describe_sheet(store, settings.sheet_name)
        print(json.dumps(asdict(structure), ensure_ascii=False, indent=2, default=str))
        if identifier is None:
            return 0 if structure.found else 1

        svc = LookupService(
            store=store,
            sheet_name=settings.sheet_name,
            granted_marker=settings.granted_marker,
        )
        result = await svc.lookup(identifier)
        report = {
            "ok": result.ok,
            "error": result.error,
            "decision": asdict(result.decision) if result.decision else None,
            "pattern": result.decision.pattern if result.decision else None,
        }
        print(json.dumps(report, ensure_ascii=False, indent=2, default=str))
        return 0 if result.ok else 1
    finally:
        dispose = getattr(store, "dispose", None)
        if dispose is not None:
            await dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check the entry-list sheet structure.")
    parser.add_argument("identifier", nargs="?", help="optionally look up one campfireId")
    args = parser.parse_args(argv)

    identifier: str | None = None
    if args.identifier is not None:
        try:
            identifier = require_identifier(args.identifier)
        except ValidationError as e:
            report = {"ok": False, "error": e.message}
            print(json.dumps(report, ensure_ascii=False), file=sys.stderr)
            return 2

    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    return asyncio.run(_run(identifier))


if __name__ == "__main__":
    raise SystemExit(main())


# --- Module Notes -----------------------------------------------------------
# Run this after editing the sheet layout; a wrong sheet name shows up as `available_sheets`.
