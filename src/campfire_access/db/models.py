"""
campfire_access.db.models

Schema of the default entry-list table.

Responsibilities:
- Mirror the sheet's fixed column order (ID, name, reward, entry, rehearsal, note).
- Provide a surrogate key that fixes store order.
"""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campfire_access.db.base import Base

DEFAULT_TABLE_NAME = "入場者リスト"


class EntryListRow(Base):
    __tablename__ = DEFAULT_TABLE_NAME

    # Store order; excluded from the sheet view by `SqlTableStore`.
    row_no: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    campfire_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    return_item: Mapped[str | None] = mapped_column(String(256), nullable=True)
    entry_access: Mapped[str | None] = mapped_column(String(16), nullable=True)
    rehearsal_access: Mapped[str | None] = mapped_column(String(16), nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Module Notes -----------------------------------------------------------
# Identifiers are deliberately not unique: the lookup takes the first row in store order.
