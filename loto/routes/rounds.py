"""Public round state routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint

from loto.db import get_session
from loto.schemas.round import RoundSchema, RoundStatusSchema
from loto.services.round_service import RoundService
from loto.utils.responses import ok

rounds_bp = Blueprint("rounds", __name__)

_round_schema = RoundSchema()
_status_schema = RoundStatusSchema()
_service = RoundService()


@rounds_bp.get("/")
@rounds_bp.get("/status")
def get_status():
    """Betting state, tickets in the open round and the latest result."""

    status = _service.get_status(get_session())
    return ok(_status_schema.dump(status))


@rounds_bp.get("/rounds/open")
def get_open_round():
    round_ = _service.get_open_round(get_session())
    return ok(_round_schema.dump(round_) if round_ is not None else None)


@rounds_bp.get("/rounds/latest")
def get_latest_round():
    round_ = _service.get_latest_round(get_session())
    return ok(_round_schema.dump(round_) if round_ is not None else None)
