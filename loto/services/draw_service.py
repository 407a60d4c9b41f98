"""Publishing the winning numbers of the latest closed round."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from loto.errors import BettingStillActiveError, DrawAlreadyExistsError, NoRoundsExistError
from loto.models.draw import Draw
from loto.repositories.draw_repository import DrawRepository
from loto.repositories.round_repository import RoundRepository
from loto.validation import NumberRules, validate_draw_input

logger = logging.getLogger(__name__)


class DrawService:
    """Draw Publication Service."""

    def __init__(
        self,
        rules: NumberRules | None = None,
        validation_mode: str = "shape",
        repository: DrawRepository | None = None,
        round_repository: RoundRepository | None = None,
    ) -> None:
        self._rules = rules or NumberRules()
        self._mode = validation_mode
        self._repo = repository or DrawRepository()
        self._rounds = round_repository or RoundRepository()

    def publish_draw(self, session: Session, numbers: Any) -> Draw:
        if self._rounds.get_open(session) is not None:
            raise BettingStillActiveError()

        latest = self._rounds.get_latest(session)
        if latest is None:
            raise NoRoundsExistError()

        if self._repo.get_for_round(session, latest.id) is not None:
            raise DrawAlreadyExistsError(details={"round_id": latest.id})

        data = validate_draw_input(numbers, self._rules, self._mode)
        draw = self._repo.create(session, round_id=latest.id, numbers=data.numbers)
        logger.info("Published draw for round %s: %s", latest.id, list(data.numbers))
        return draw
