"""
campfire_access.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that verifies the entry-list sheet is readable.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from campfire_access.api.deps import settings_dep, store_dep
from campfire_access.diagnostics import describe_sheet
from campfire_access.settings import Settings
from campfire_access.store.base import RecordStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(
    store: RecordStore = Depends(store_dep),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any] | JSONResponse:
    structure = await describe_sheet(store, settings.sheet_name)
    if not structure.found:
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "sheet": structure.sheet_name},
        )
    # Header row is not a participant.
    return {"status": "ready", "sheet": structure.sheet_name, "rows": max(0, structure.row_count - 1)}
