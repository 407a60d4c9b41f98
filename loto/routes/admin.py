"""Admin lifecycle routes (controllers). No business logic here.

Every call answers 204, including no-ops such as opening while a round is
already open.
"""

from __future__ import annotations

from flask import Blueprint, current_app, request

from loto.auth import require_admin
from loto.db import get_session
from loto.schemas.draw import DrawPublishSchema
from loto.services.draw_service import DrawService
from loto.services.round_service import RoundService
from loto.utils.responses import no_content
from loto.validation import NumberRules

admin_bp = Blueprint("admin", __name__)

_publish_schema = DrawPublishSchema()
_round_service = RoundService()


@admin_bp.post("/new-round")
@require_admin
def open_new_round():
    _round_service.open_new_round(get_session())
    return no_content()


@admin_bp.post("/close")
@require_admin
def close_round():
    _round_service.close_open_round(get_session())
    return no_content()


@admin_bp.post("/store-results")
@require_admin
def store_results():
    payload = request.get_json(silent=True)
    data = _publish_schema.load(payload if isinstance(payload, dict) else {})

    service = DrawService(
        rules=NumberRules.from_config(current_app.config),
        validation_mode=str(current_app.config.get("DRAW_VALIDATION", "shape")),
    )
    service.publish_draw(get_session(), data["numbers"])
    return no_content()
