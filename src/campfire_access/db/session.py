"""
campfire_access.db.session

Async SQLAlchemy engine helpers.

Responsibilities:
- Create the async engine from settings.
- Create the entry-list table for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from campfire_access.db import models  # noqa: F401  # registers EntryListRow on Base.metadata
from campfire_access.db.base import Base
from campfire_access.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
    )


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create the entry-list table if it doesn't exist.
    Never touches rows.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Module Notes -----------------------------------------------------------
# In prod the table is owned by whoever maintains the entry list; this service only reads.
