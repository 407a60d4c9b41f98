"""Repository layer for Round persistence."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from loto.models.round import Round
from loto.models.ticket import Ticket


class RoundRepository:
    """Queries over the rounds table. The open round is always a query, never cached."""

    def get_open(self, session: Session, *, for_update: bool = False, read: bool = False) -> Round | None:
        """Current open round; ``read`` takes a shared lock instead of an exclusive one."""

        stmt = select(Round).where(Round.is_open.is_(True)).order_by(Round.id.desc()).limit(1)
        if for_update:
            stmt = stmt.with_for_update(read=read)
        return session.scalars(stmt).first()

    def get_latest(self, session: Session) -> Round | None:
        stmt = select(Round).order_by(Round.id.desc()).limit(1)
        return session.scalars(stmt).first()

    def get_by_id(self, session: Session, round_id: int) -> Round | None:
        return session.get(Round, round_id)

    def close_all_open(self, session: Session) -> int:
        """Close every open round; returns the number of rows changed."""

        result = session.execute(
            update(Round).where(Round.is_open.is_(True)).values(is_open=False),
            execution_options={"synchronize_session": "fetch"},
        )
        return int(result.rowcount or 0)

    def create_open(self, session: Session) -> Round:
        round_ = Round(is_open=True)
        session.add(round_)
        session.flush()  # assign PK, enforce single-open index
        return round_

    def close(self, session: Session, round_: Round) -> Round:
        round_.is_open = False
        session.flush()
        return round_

    def count_open(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Round).where(Round.is_open.is_(True))
        return int(session.scalar(stmt) or 0)

    def count_tickets(self, session: Session, round_id: int) -> int:
        stmt = select(func.count()).select_from(Ticket).where(Ticket.round_id == round_id)
        return int(session.scalar(stmt) or 0)
