"""
tests.conftest

Shared fixtures: an entry-list sheet, an in-memory store and an app wired to it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from campfire_access.access.records import SHEET_HEADER
from campfire_access.api.app import create_app
from campfire_access.settings import Settings
from campfire_access.store.memory import InMemoryStore

SHEET = "入場者リスト"

ROWS: list[list[Any]] = [
    list(SHEET_HEADER),
    ["abc123", "Taro", "T-Shirt", "有", "有", ""],
    ["def456", "Hanako", "Sticker", "有", "無", "VIP"],
    ["ghi789", "Jiro", "", "無", "有", ""],
    ["  pad01 ", "Padded", "Towel", " 有 ", "", ""],
    ["dup001", "First", "Cap", "有", "", ""],
    ["dup001", "Second", "Cap", "無", "", ""],
    ["short1", "Short"],
    [12345, "Numeric", None, "有", None],
]


def sheet(*rows: Sequence[Any]) -> list[list[Any]]:
    return [list(SHEET_HEADER), *(list(r) for r in rows)]


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", store_backend="memory", sheet_name=SHEET)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore({SHEET: ROWS})


@pytest.fixture
def app(settings: Settings, store: InMemoryStore) -> FastAPI:
    return create_app(settings=settings, store=store)


def asgi_client(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
