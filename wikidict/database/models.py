"""Cached wiktextract record table."""

from __future__ import annotations

from sqlalchemy import Index, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class CachedRecordModel(Base):
    __tablename__ = "wiktextract"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    lang: Mapped[str] = mapped_column(String(32), nullable=False)
    entry: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    __table_args__ = (
        Index("idx_wiktextract_lang", "lang"),
    )
