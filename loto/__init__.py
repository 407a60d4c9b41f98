"""Loto 6/45 rounds service (Flask application package)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied on top of the environment config.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from loto.config import get_config
    from loto.db import init_db
    from loto.error_handlers import register_error_handlers
    from loto.logging_config import configure_logging
    from loto.routes.admin import admin_bp
    from loto.routes.health import health_bp
    from loto.routes.rounds import rounds_bp
    from loto.routes.tickets import tickets_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(rounds_bp)
    app.register_blueprint(tickets_bp)
    app.register_blueprint(admin_bp)

    return app
