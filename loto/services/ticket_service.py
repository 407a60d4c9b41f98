"""Ticket admission and public ticket lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from loto.errors import AdmissionClosedError, NotFoundError
from loto.models.ticket import Ticket
from loto.repositories.draw_repository import DrawRepository
from loto.repositories.round_repository import RoundRepository
from loto.repositories.ticket_repository import TicketRepository
from loto.validation import NumberRules, validate_ticket_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketView:
    ticket_id: str
    personal_id: str
    numbers: list[int]
    round_id: int
    drawn_numbers: list[int] | None

    @property
    def is_drawn(self) -> bool:
        return self.drawn_numbers is not None


def ticket_url(base_url: str, ticket_id: str) -> str:
    return f"{base_url.rstrip('/')}/t/{ticket_id}"


class TicketService:
    """Ticket use-cases."""

    def __init__(
        self,
        rules: NumberRules | None = None,
        base_url: str = "http://localhost:8000",
        repository: TicketRepository | None = None,
        round_repository: RoundRepository | None = None,
        draw_repository: DrawRepository | None = None,
    ) -> None:
        self._rules = rules or NumberRules()
        self._base_url = base_url
        self._repo = repository or TicketRepository()
        self._rounds = round_repository or RoundRepository()
        self._draws = draw_repository or DrawRepository()

    def submit_ticket(
        self,
        session: Session,
        personal_id: Any,
        numbers_raw: Any,
        submitter_ref: str | None = None,
    ) -> Ticket:
        """Admit a ticket into the open round.

        Raises:
            AdmissionClosedError: no round is open.
            ValidationError subclasses: the first failing input rule.
        """

        # Shared lock: closing the round waits until this admission commits.
        open_round = self._rounds.get_open(session, for_update=True, read=True)
        if open_round is None:
            raise AdmissionClosedError()

        data = validate_ticket_input(personal_id, numbers_raw, self._rules, submitter_ref)
        ticket = self._repo.create(
            session,
            round_id=open_round.id,
            personal_id=data.personal_id,
            numbers=data.numbers,
            submitter_ref=data.submitter_ref,
        )
        logger.info("Admitted ticket into round %s: %s", open_round.id, self.ticket_url(ticket.id))
        return ticket

    def ticket_url(self, ticket_id: str) -> str:
        return ticket_url(self._base_url, ticket_id)

    def get_ticket_view(self, session: Session, ticket_id: str) -> TicketView:
        ticket = self._repo.get_by_id(session, ticket_id)
        if ticket is None:
            raise NotFoundError(message=f"Ticket {ticket_id} not found")

        draw = self._draws.get_for_round(session, ticket.round_id)
        return TicketView(
            ticket_id=ticket.id,
            personal_id=ticket.personal_id,
            numbers=ticket.numbers,
            round_id=ticket.round_id,
            drawn_numbers=draw.numbers if draw is not None else None,
        )
