"""Betting round model.

A round is created open and closed exactly once. The partial unique index
allows at most one row with ``is_open`` set.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Index, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loto.models.base import Base

if TYPE_CHECKING:
    from loto.models.draw import Draw
    from loto.models.ticket import Ticket


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Round(Base):
    """A discrete betting period."""

    __tablename__ = "rounds"
    __table_args__ = (
        Index(
            "uq_rounds_single_open",
            "is_open",
            unique=True,
            sqlite_where=text("is_open = 1"),
            postgresql_where=text("is_open"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    tickets: Mapped[list[Ticket]] = relationship("Ticket", back_populates="round", lazy="select")
    draw: Mapped[Draw | None] = relationship("Draw", back_populates="round", uselist=False, lazy="select")
