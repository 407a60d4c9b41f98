"""Repository layer for Draw persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from loto.models.draw import Draw


class DrawRepository:
    """Insert and lookup for draws (one per round)."""

    def get_for_round(self, session: Session, round_id: int) -> Draw | None:
        stmt = select(Draw).where(Draw.round_id == round_id)
        return session.scalars(stmt).first()

    def create(self, session: Session, *, round_id: int, numbers: Sequence[int]) -> Draw:
        draw = Draw(round_id=round_id, numbers_csv=",".join(str(int(n)) for n in numbers))
        session.add(draw)
        session.flush()  # uq_draws_round_id rejects a second draw here
        return draw
