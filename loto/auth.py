"""Caller identity for request handlers.

The services never see credentials. Handlers learn two things here: whether
the caller may run admin lifecycle operations, and an optional opaque
identity to attach to submitted tickets.
"""

from __future__ import annotations

import hmac
import logging
from functools import wraps
from typing import Callable, TypeVar

from flask import current_app, request

from loto.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

SUBMITTER_HEADER = "X-User-Sub"


def _bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def is_admin_request() -> bool:
    if current_app.config.get("SKIP_ADMIN_AUTH"):
        return True

    expected = current_app.config.get("ADMIN_API_TOKEN")
    if not expected:
        raise ForbiddenError("Admin API is not configured")

    token = _bearer_token()
    if token is None:
        return False
    return hmac.compare_digest(token.encode(), str(expected).encode())


def require_admin(view: F) -> F:
    """Reject callers without the admin bearer token."""

    @wraps(view)
    def wrapper(*args, **kwargs):  # type: ignore[no-untyped-def]
        if not is_admin_request():
            logger.warning("Rejected admin call to %s from %s", request.path, request.remote_addr)
            raise UnauthorizedError("Valid admin bearer token required")
        return view(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_submitter_ref() -> str | None:
    """Identity subject forwarded by the upstream auth layer, if any."""

    value = (request.headers.get(SUBMITTER_HEADER) or "").strip()
    return value[:255] or None
