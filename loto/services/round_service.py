"""Round lifecycle: open and close betting rounds.

A round moves Open -> Closed exactly once. At most one round is open at any
time; the open round is always looked up in the store, and the store's
partial unique index backs the check-then-act in ``open_new_round``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from loto.models.round import Round
from loto.repositories.draw_repository import DrawRepository
from loto.repositories.round_repository import RoundRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundTransition:
    """Outcome of a lifecycle call. ``changed=False`` marks a no-op."""

    changed: bool
    round: Round | None


@dataclass(frozen=True)
class RoundStatus:
    is_open: bool
    open_round_id: int | None
    tickets_in_open_round: int | None
    latest_round_id: int | None
    latest_draw_numbers: list[int] | None


class RoundService:
    """Round Lifecycle Manager."""

    def __init__(
        self,
        repository: RoundRepository | None = None,
        draw_repository: DrawRepository | None = None,
    ) -> None:
        self._repo = repository or RoundRepository()
        self._draws = draw_repository or DrawRepository()

    def get_open_round(self, session: Session) -> Round | None:
        return self._repo.get_open(session)

    def get_latest_round(self, session: Session) -> Round | None:
        return self._repo.get_latest(session)

    def open_new_round(self, session: Session) -> RoundTransition:
        current = self._repo.get_open(session, for_update=True)
        if current is not None:
            logger.debug("Round %s already open; nothing to do", current.id)
            return RoundTransition(changed=False, round=current)

        swept = self._repo.close_all_open(session)
        if swept:
            logger.warning("Closed %d stray open round(s) before opening a new one", swept)
        new_round = self._repo.create_open(session)
        logger.info("Opened round %s", new_round.id)
        return RoundTransition(changed=True, round=new_round)

    def close_open_round(self, session: Session) -> RoundTransition:
        current = self._repo.get_open(session, for_update=True)
        if current is None:
            logger.debug("No open round to close")
            return RoundTransition(changed=False, round=None)

        self._repo.close(session, current)
        logger.info("Closed round %s", current.id)
        return RoundTransition(changed=True, round=current)

    def get_status(self, session: Session) -> RoundStatus:
        """Summary for the landing page: betting state, ticket count, last result."""

        open_round = self._repo.get_open(session)
        latest = self._repo.get_latest(session)

        tickets = None
        if open_round is not None:
            tickets = self._repo.count_tickets(session, open_round.id)

        drawn = None
        if open_round is None and latest is not None:
            draw = self._draws.get_for_round(session, latest.id)
            if draw is not None:
                drawn = draw.numbers

        return RoundStatus(
            is_open=open_round is not None,
            open_round_id=open_round.id if open_round is not None else None,
            tickets_in_open_round=tickets,
            latest_round_id=latest.id if latest is not None else None,
            latest_draw_numbers=drawn,
        )
