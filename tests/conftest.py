from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from loto import create_app
from loto.db import create_app_engine
from loto.models.base import Base

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture()
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'app.db'}",
            "ADMIN_API_TOKEN": ADMIN_TOKEN,
            "SKIP_ADMIN_AUTH": False,
            "PUBLIC_BASE_URL": "https://loto.example",
            "DRAW_VALIDATION": "shape",
        }
    )
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture()
def session(tmp_path):
    from loto import models  # noqa: F401

    engine = create_app_engine(f"sqlite:///{tmp_path / 'service.db'}")
    Base.metadata.create_all(bind=engine)
    with Session(engine, autoflush=False, expire_on_commit=False) as s:
        yield s
    engine.dispose()
