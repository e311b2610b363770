"""
tests.test_stores

CSV and SQL record store backends.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
import textwrap
import threading
from pathlib import Path

import pytest
from sqlalchemy import insert, text

from campfire_access.access.records import Pattern
from campfire_access.access.service import LookupService
from campfire_access.db.models import DEFAULT_TABLE_NAME, EntryListRow
from campfire_access.db.session import create_engine, init_db
from campfire_access.settings import Settings
from campfire_access.store.base import StoreUnavailable
from campfire_access.store import csv_store
from campfire_access.store.csv_store import CsvWorkbookStore
from campfire_access.store.factory import build_store
from campfire_access.store.memory import InMemoryStore
from campfire_access.store.sql_store import SqlTableStore


def _row(campfire_id: str, **values: str) -> dict[str, str | None]:
    # executemany needs the same keys in every parameter set.
    row: dict[str, str | None] = dict.fromkeys(
        ("name", "return_item", "entry_access", "rehearsal_access", "note")
    )
    row.update(values)
    return {"campfire_id": campfire_id, **row}


def _write_sheet(directory: Path, name: str, text: str, *, bom: bool = False) -> None:
    encoding = "utf-8-sig" if bom else "utf-8"
    (directory / f"{name}.csv").write_text(text, encoding=encoding)


@pytest.mark.asyncio
async def test_csv_store_reads_rows_in_order(tmp_path: Path) -> None:
    _write_sheet(
        tmp_path,
        "入場者リスト",
        "CAMPFIRE_ID,氏名,リターン内容,入場権利,リハ見学権利,備考\n"
        "abc123,Taro,T-Shirt,有,有,\n"
        'def456,"Hanako, Jr.",Sticker,有,無,VIP\n',
        bom=True,
    )
    store = CsvWorkbookStore(tmp_path)
    values = await store.get_values("入場者リスト")
    # BOM must not leak into the first header cell.
    assert values[0][0] == "CAMPFIRE_ID"
    assert values[1] == ["abc123", "Taro", "T-Shirt", "有", "有", ""]
    assert values[2][1] == "Hanako, Jr."
    assert await store.sheet_names() == ["入場者リスト"]


@pytest.mark.asyncio
async def test_csv_store_missing_sheet(tmp_path: Path) -> None:
    store = CsvWorkbookStore(tmp_path)
    with pytest.raises(StoreUnavailable) as exc:
        await store.get_values("入場者リスト")
    assert exc.value.sheet_name == "入場者リスト"


@pytest.mark.asyncio
async def test_csv_store_undecodable_sheet(tmp_path: Path) -> None:
    (tmp_path / "broken.csv").write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(StoreUnavailable):
        await CsvWorkbookStore(tmp_path).get_values("broken")


@pytest.mark.asyncio
async def test_csv_store_missing_directory(tmp_path: Path) -> None:
    assert await CsvWorkbookStore(tmp_path / "nope").sheet_names() == []


@pytest.mark.asyncio
async def test_memory_store_returns_copies() -> None:
    store = InMemoryStore({"s": [["h"], ["a"]]})
    values = await store.get_values("s")
    values[1][0] = "changed"
    assert (await store.get_values("s"))[1] == ["a"]


@pytest.mark.asyncio
async def test_sql_store_presents_table_as_sheet(tmp_path: Path) -> None:
    settings = Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'entry.db'}")
    engine = create_engine(settings)
    await init_db(engine)
    async with engine.begin() as conn:
        await conn.execute(
            insert(EntryListRow.__table__),
            [
                _row("dup001", name="First", entry_access="有"),
                _row(
                    "abc123",
                    name="Taro",
                    return_item="T-Shirt",
                    entry_access="有",
                    rehearsal_access="有",
                ),
                _row("dup001", name="Second", entry_access="無"),
            ],
        )

    store = SqlTableStore(engine)
    try:
        values = await store.get_values(DEFAULT_TABLE_NAME)
        assert values[0] == [
            "campfire_id", "name", "return_item", "entry_access", "rehearsal_access", "note",
        ]
        assert [r[0] for r in values[1:]] == ["dup001", "abc123", "dup001"]
        assert await store.sheet_names() == [DEFAULT_TABLE_NAME]

        svc = LookupService(store=store, sheet_name=DEFAULT_TABLE_NAME, granted_marker="有")
        both = await svc.lookup("abc123")
        assert both.decision is not None
        assert both.decision.pattern is Pattern.both
        dup = await svc.lookup("dup001")
        assert dup.decision is not None
        assert dup.decision.profile is not None
        assert dup.decision.profile.display_name == "First"

        with pytest.raises(StoreUnavailable):
            await store.get_values("missing_table")
    finally:
        await store.dispose()


def test_build_store_by_backend(tmp_path: Path) -> None:
    csv_settings = Settings(store_backend="csv", workbook_dir=tmp_path)
    assert isinstance(build_store(csv_settings), CsvWorkbookStore)
    assert isinstance(build_store(Settings(store_backend="memory")), InMemoryStore)
    assert isinstance(
        build_store(Settings(store_backend="sql", database_url="sqlite+aiosqlite:///:memory:")),
        SqlTableStore,
    )


@pytest.mark.asyncio
async def test_csv_store_reads_off_the_event_loop_thread(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_sheet(tmp_path, "s", "h\nabc123\n")
    loop_thread = threading.get_ident()
    seen: list[int] = []
    real_read = csv_store._read_rows

    def recording_read(path: Path) -> list[list[str]]:
        seen.append(threading.get_ident())
        return real_read(path)

    monkeypatch.setattr(csv_store, "_read_rows", recording_read)
    assert await CsvWorkbookStore(tmp_path).get_values("s") == [["h"], ["abc123"]]
    assert seen and seen[0] != loop_thread


def test_init_db_creates_entry_table_without_importing_models(tmp_path: Path) -> None:
    # Fresh interpreter: nothing but `db.session` is imported before `init_db`.
    script = textwrap.dedent(
        f"""
        import asyncio, json
        from sqlalchemy import inspect
        from campfire_access.db.session import create_engine, init_db
        from campfire_access.settings import Settings

        async def main():
            engine = create_engine(
                Settings(database_url="sqlite+aiosqlite:///{(tmp_path / 'fresh.db').as_posix()}")
            )
            await init_db(engine)
            async with engine.connect() as conn:
                names = await conn.run_sync(lambda c: inspect(c).get_table_names())
            await engine.dispose()
            print(json.dumps(names))

        asyncio.run(main())
        """
    )
    src = str(Path(__file__).resolve().parents[1] / "src")
    pythonpath = os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH")]))
    env = {**os.environ, "PYTHONPATH": pythonpath}
    out = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True, env=env
    )
    assert json.loads(out.stdout.strip().splitlines()[-1]) == [DEFAULT_TABLE_NAME]


@pytest.mark.asyncio
async def test_sql_store_refuses_table_without_primary_key(tmp_path: Path) -> None:
    settings = Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'nopk.db'}")
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.execute(text("CREATE TABLE loose_sheet (campfire_id TEXT, name TEXT)"))
        await conn.execute(text("INSERT INTO loose_sheet VALUES ('abc123', 'Taro')"))

    store = SqlTableStore(engine)
    try:
        with pytest.raises(StoreUnavailable) as exc:
            await store.get_values("loose_sheet")
        assert exc.value.reason == "table has no primary key"
    finally:
        await store.dispose()


@pytest.mark.asyncio
async def test_sql_store_database_error_is_store_unavailable(tmp_path: Path) -> None:
    # The parent directory does not exist, so sqlite cannot open the file.
    url = f"sqlite+aiosqlite:///{tmp_path / 'no_such_dir' / 'entry.db'}"
    store = SqlTableStore(create_engine(Settings(env="test", database_url=url)))
    try:
        with pytest.raises(StoreUnavailable) as exc:
            await store.get_values(DEFAULT_TABLE_NAME)
        assert exc.value.sheet_name == DEFAULT_TABLE_NAME
        assert exc.value.reason != "table not found"
        with pytest.raises(StoreUnavailable):
            await store.sheet_names()
    finally:
        await store.dispose()
