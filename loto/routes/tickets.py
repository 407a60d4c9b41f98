"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from loto.auth import current_submitter_ref
from loto.db import get_session
from loto.schemas.ticket import TicketSchema, TicketSubmitSchema, TicketViewSchema
from loto.services.ticket_service import TicketService
from loto.utils.responses import ok
from loto.validation import NumberRules

tickets_bp = Blueprint("tickets", __name__)

_submit_schema = TicketSubmitSchema()
_ticket_schema = TicketSchema()
_view_schema = TicketViewSchema()


def _service() -> TicketService:
    return TicketService(
        rules=NumberRules.from_config(current_app.config),
        base_url=str(current_app.config["PUBLIC_BASE_URL"]),
    )


@tickets_bp.post("/tickets")
def submit_ticket():
    """Admit a ticket; accepts JSON or an HTML form post."""

    if request.is_json:
        payload = request.get_json(silent=True)
    else:
        payload = request.form.to_dict()
    # A malformed body must still report closed admission first.
    data = _submit_schema.load(payload if isinstance(payload, dict) else {})

    service = _service()
    ticket = service.submit_ticket(
        get_session(),
        personal_id=data["personal_id"],
        numbers_raw=data["numbers"],
        submitter_ref=current_submitter_ref(),
    )

    url = service.ticket_url(ticket.id)
    body = {**_ticket_schema.dump(ticket), "url": url}
    resp, status = ok(body, status_code=201)
    resp.headers["Location"] = url
    return resp, status


@tickets_bp.get("/t/<ticket_id>")
def get_ticket(ticket_id: str):
    """Public ticket page data: chosen numbers and, once drawn, the result."""

    view = _service().get_ticket_view(get_session(), ticket_id)
    return ok(_view_schema.dump(view))
