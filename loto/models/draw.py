"""Published winning numbers, at most one row per round."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loto.models.base import Base
from loto.models.round import utcnow

if TYPE_CHECKING:
    from loto.models.round import Round


class Draw(Base):
    """Winning numbers for a closed round."""

    __tablename__ = "draws"
    __table_args__ = (UniqueConstraint("round_id", name="uq_draws_round_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    numbers_csv: Mapped[str] = mapped_column(Text, nullable=False)  # given order
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    round_id: Mapped[int] = mapped_column(Integer, ForeignKey("rounds.id", ondelete="RESTRICT"), nullable=False)

    round: Mapped[Round] = relationship("Round", back_populates="draw")

    @property
    def numbers(self) -> list[int]:
        return [int(n) for n in self.numbers_csv.split(",") if n]
