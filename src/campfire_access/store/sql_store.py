"""
campfire_access.store.sql_store

SQL table store backed by an async SQLAlchemy engine.

Responsibilities:
- Treat a table named after the sheet as the entry list.
- Present it like a sheet: column names as the header row, data rows in store order.
"""

from __future__ import annotations

from sqlalchemy import MetaData, Table, select
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from campfire_access.store.base import Cell, StoreUnavailable


class SqlTableStore:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def dispose(self) -> None:
        await self._engine.dispose()

    async def get_values(self, sheet_name: str) -> list[list[Cell]]:
        try:
            async with self._engine.connect() as conn:
                table = await conn.run_sync(
                    lambda sync_conn: Table(sheet_name, MetaData(), autoload_with=sync_conn)
                )
                # Primary key columns only define store order; they are not sheet columns.
                pk = list(table.primary_key.columns)
                if not pk:
                    raise StoreUnavailable(
                        sheet_name=sheet_name, reason="table has no primary key"
                    )
                columns = [c for c in table.columns if not c.primary_key]
                stmt = select(*columns).order_by(*pk)
                rows = (await conn.execute(stmt)).all()
        except NoSuchTableError as e:
            raise StoreUnavailable(sheet_name=sheet_name, reason="table not found") from e
        except SQLAlchemyError as e:
            raise StoreUnavailable(sheet_name=sheet_name, reason=str(e)) from e

        header: list[Cell] = [c.name for c in columns]
        return [header, *(list(r) for r in rows)]

    async def sheet_names(self) -> list[str]:
        try:
            async with self._engine.connect() as conn:
                meta = MetaData()
                await conn.run_sync(meta.reflect)
        except SQLAlchemyError as e:
            raise StoreUnavailable(sheet_name="*", reason=str(e)) from e
        return sorted(meta.tables)


# --- Module Notes -----------------------------------------------------------
# The table is reflected on every read so staff-side schema edits need no restart.
# A table without a primary key has no stable order, so it is refused.
# `campfire_access.db.models.EntryListRow` documents the expected shape.
