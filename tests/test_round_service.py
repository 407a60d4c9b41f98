import random

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from loto.models.round import Round
from loto.repositories.round_repository import RoundRepository
from loto.services.round_service import RoundService


def _open_count(session):
    return session.scalar(select(func.count()).select_from(Round).where(Round.is_open.is_(True)))


def test_no_rounds_initially(session):
    service = RoundService()
    assert service.get_open_round(session) is None
    assert service.get_latest_round(session) is None


def test_open_new_round(session):
    result = RoundService().open_new_round(session)
    assert result.changed is True
    assert result.round.is_open is True
    assert result.round.created_at is not None
    assert RoundService().get_open_round(session).id == result.round.id


def test_open_twice_is_noop(session):
    service = RoundService()
    first = service.open_new_round(session)
    second = service.open_new_round(session)

    assert second.changed is False
    assert second.round.id == first.round.id
    assert _open_count(session) == 1
    assert session.scalar(select(func.count()).select_from(Round)) == 1


def test_close_open_round(session):
    service = RoundService()
    opened = service.open_new_round(session).round

    result = service.close_open_round(session)
    assert result.changed is True
    assert result.round.id == opened.id
    assert result.round.is_open is False
    assert service.get_open_round(session) is None
    assert service.get_latest_round(session).id == opened.id


def test_close_without_open_round_is_noop(session):
    result = RoundService().close_open_round(session)
    assert result.changed is False
    assert result.round is None


def test_closed_round_is_never_reopened(session):
    service = RoundService()
    first = service.open_new_round(session).round
    service.close_open_round(session)
    second = service.open_new_round(session).round

    assert second.id > first.id
    session.refresh(first)
    assert first.is_open is False
    assert service.get_latest_round(session).id == second.id


def test_at_most_one_open_round_for_any_sequence(session):
    service = RoundService()
    rng = random.Random(645)
    for _ in range(60):
        if rng.random() < 0.5:
            service.open_new_round(session)
        else:
            service.close_open_round(session)
        assert _open_count(session) <= 1


def test_store_rejects_second_open_round(session):
    repo = RoundRepository()
    repo.create_open(session)
    with pytest.raises(IntegrityError):
        repo.create_open(session)
    session.rollback()


def test_open_sweeps_stray_open_rows(session, monkeypatch):
    service = RoundService()
    stray = service.open_new_round(session).round

    # Pretend the lookup missed the open row; the sweep must close it first.
    monkeypatch.setattr(RoundRepository, "get_open", lambda self, s, **kw: None)
    result = service.open_new_round(session)

    assert result.changed is True
    session.refresh(stray)
    assert stray.is_open is False
    assert _open_count(session) == 1


def test_status_while_open(session):
    service = RoundService()
    opened = service.open_new_round(session).round

    status = service.get_status(session)
    assert status.is_open is True
    assert status.open_round_id == opened.id
    assert status.tickets_in_open_round == 0
    assert status.latest_round_id == opened.id
    assert status.latest_draw_numbers is None


def test_status_when_empty(session):
    status = RoundService().get_status(session)
    assert status.is_open is False
    assert status.open_round_id is None
    assert status.tickets_in_open_round is None
    assert status.latest_round_id is None
