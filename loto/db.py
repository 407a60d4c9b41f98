"""SQLAlchemy engine + session management.

Uses a session-per-request pattern.
"""

from __future__ import annotations

from flask import Flask, g
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from loto.models.base import Base


def create_app_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        engine = create_engine(database_url, future=True)

        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
            # Let SQLAlchemy emit BEGIN itself (see _begin_immediate).
            dbapi_connection.isolation_level = None
            # SQLite ignores FOREIGN KEY clauses unless asked per connection.
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        # SQLite has no row locks; take the write lock up front so a
        # check-then-write runs serialized against other transactions.
        @event.listens_for(engine, "begin")
        def _begin_immediate(conn) -> None:  # type: ignore[no-untyped-def]
            conn.exec_driver_sql("BEGIN IMMEDIATE")

        return engine

    return create_engine(database_url, pool_pre_ping=True, future=True)


def init_db(app: Flask) -> None:
    """Initialize database engine and per-request sessions."""

    engine = create_app_engine(str(app.config["DATABASE_URL"]))
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Import models so they register with Base.metadata.
    from loto import models  # noqa: F401

    # Production would use migrations; scripts/create_tables.py does the same.
    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = getattr(g, "db", None)
        if session is None:
            return

        try:
            if exc is None:
                session.commit()
            else:
                session.rollback()
        finally:
            session.close()


def rollback_session() -> None:
    """Discard pending work of the current request's session, if any.

    Error handlers turn exceptions into responses, so teardown sees no
    exception and would otherwise try to commit a failed transaction.
    """

    session: Session | None = getattr(g, "db", None)
    if session is not None:
        session.rollback()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session
