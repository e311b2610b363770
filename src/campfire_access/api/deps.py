"""
campfire_access.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the record store and the lookup service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Depends, Request

from campfire_access.access.service import LookupService
from campfire_access.settings import Settings
from campfire_access.store.base import RecordStore


def settings_dep(request: Request) -> Settings:
    # The settings the app was built with, not a fresh env read.
    return request.app.state.settings  # type: ignore[attr-defined]


def store_dep(request: Request) -> RecordStore:
    return request.app.state.store  # type: ignore[attr-defined]


def lookup_service(
    store: RecordStore = Depends(store_dep),
    settings: Settings = Depends(settings_dep),
) -> LookupService:
    return LookupService(
        store=store,
        sheet_name=settings.sheet_name,
        granted_marker=settings.granted_marker,
    )
