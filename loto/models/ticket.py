"""Ticket model. Immutable once admitted."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loto.models.base import Base
from loto.models.round import utcnow

if TYPE_CHECKING:
    from loto.models.round import Round


def new_ticket_id() -> str:
    return str(uuid.uuid4())


class Ticket(Base):
    """A participant's chosen numbers for one round."""

    __tablename__ = "tickets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_ticket_id)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    personal_id: Mapped[str] = mapped_column(String(20), nullable=False)
    numbers_csv: Mapped[str] = mapped_column(Text, nullable=False)
    round_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rounds.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    submitter_ref: Mapped[str | None] = mapped_column(String(255), nullable=True)

    round: Mapped[Round] = relationship("Round", back_populates="tickets")

    @property
    def numbers(self) -> list[int]:
        return [int(n) for n in self.numbers_csv.split(",") if n]
