"""Repository layer for Ticket persistence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from loto.models.ticket import Ticket


class TicketRepository:
    """Insert and lookup for tickets. Tickets are never updated or deleted."""

    def get_by_id(self, session: Session, ticket_id: str) -> Ticket | None:
        return session.get(Ticket, ticket_id)

    def create(
        self,
        session: Session,
        *,
        round_id: int,
        personal_id: str,
        numbers: Sequence[int],
        submitter_ref: str | None = None,
    ) -> Ticket:
        ticket = Ticket(
            round_id=round_id,
            personal_id=personal_id,
            numbers_csv=",".join(str(int(n)) for n in numbers),
            submitter_ref=submitter_ref,
        )
        session.add(ticket)
        session.flush()
        return ticket
