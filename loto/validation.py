"""Parse-and-validate boundary for ticket and draw numbers.

Request payloads arrive loosely typed (a comma-separated form field or a
JSON array). Everything here turns them into ``ValidatedTicketInput`` /
``ValidatedDrawInput`` or raises the typed error for the first rule that
fails, in this order: personal id, count, range, duplicates.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from marshmallow import ValidationError as MarshmallowValidationError
from marshmallow import validate

from loto.errors import (
    DuplicateNumbersError,
    InvalidCountError,
    InvalidPersonalIdError,
    InvalidRangeError,
    MissingOrInvalidNumbersError,
)

PERSONAL_ID_MAX_LENGTH = 20
# Plain ASCII digits, optionally with a zero fraction ("7", "+7", "7.0").
_INTEGER_TOKEN_RE = re.compile(r"([+-]?\d+)(?:\.0*)?", re.ASCII)

DRAW_VALIDATION_MODES = ("shape", "strict")


@dataclass(frozen=True)
class NumberRules:
    """Allowed size and value range of a set of numbers."""

    min_count: int = 6
    max_count: int = 10
    min_value: int = 1
    max_value: int = 45

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> NumberRules:
        return cls(
            min_count=int(config.get("TICKET_MIN_NUMBERS", 6)),
            max_count=int(config.get("TICKET_MAX_NUMBERS", 10)),
            min_value=int(config.get("NUMBER_MIN", 1)),
            max_value=int(config.get("NUMBER_MAX", 45)),
        )


@dataclass(frozen=True)
class ValidatedTicketInput:
    personal_id: str
    numbers: tuple[int, ...]
    submitter_ref: str | None = None


@dataclass(frozen=True)
class ValidatedDrawInput:
    numbers: tuple[int, ...]


def _first_message(exc: MarshmallowValidationError) -> str:
    messages = exc.messages
    if isinstance(messages, list) and messages:
        return str(messages[0])
    return str(messages)


_personal_id_validators = (
    validate.Length(
        min=1,
        max=PERSONAL_ID_MAX_LENGTH,
        error=f"personalId must be 1-{PERSONAL_ID_MAX_LENGTH} characters",
    ),
    validate.Regexp(r"\A[A-Za-z0-9]+\Z", error="personalId may contain only letters and digits"),
)


def validate_personal_id(personal_id: Any) -> str:
    if not isinstance(personal_id, str):
        raise InvalidPersonalIdError("personalId is required")
    try:
        for validator in _personal_id_validators:
            validator(personal_id)
    except MarshmallowValidationError as exc:
        raise InvalidPersonalIdError(_first_message(exc)) from exc
    return personal_id


def split_numbers(numbers_raw: Any) -> list[Any]:
    """Split raw numbers into tokens without judging their values.

    A string is split on commas; blank tokens are dropped.
    """

    if isinstance(numbers_raw, str):
        return [tok.strip() for tok in numbers_raw.split(",") if tok.strip()]
    if isinstance(numbers_raw, (list, tuple)):
        return list(numbers_raw)
    raise InvalidCountError("numbers must be a comma-separated list")


def to_integer(token: Any) -> int | None:
    """Return the integral value of a token, or None if it has none."""

    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token
    if isinstance(token, str):
        match = _INTEGER_TOKEN_RE.fullmatch(token.strip())
        if match is None:
            return None
        return int(match.group(1))
    if isinstance(token, float):
        if math.isfinite(token) and token.is_integer():
            return int(token)
    return None


def check_numbers(tokens: list[Any], rules: NumberRules) -> tuple[int, ...]:
    """Apply count, range and uniqueness rules, in that order."""

    count = validate.Length(
        min=rules.min_count,
        max=rules.max_count,
        error=f"Choose between {rules.min_count} and {rules.max_count} numbers",
    )
    try:
        count(tokens)
    except MarshmallowValidationError as exc:
        raise InvalidCountError(_first_message(exc), details={"count": len(tokens)}) from exc

    in_range = validate.Range(
        min=rules.min_value,
        max=rules.max_value,
        error=f"All numbers must be whole numbers between {rules.min_value} and {rules.max_value}",
    )
    numbers: list[int] = []
    bad: list[Any] = []
    message = None
    for token in tokens:
        value = to_integer(token)
        try:
            if value is None:
                raise MarshmallowValidationError(in_range.error)
            numbers.append(in_range(value))
        except MarshmallowValidationError as exc:
            message = message or _first_message(exc)
            bad.append(token)
    if bad:
        raise InvalidRangeError(message, details={"invalid": [str(b) for b in bad]})

    if len(set(numbers)) != len(numbers):
        dupes = sorted({n for n in numbers if numbers.count(n) > 1})
        raise DuplicateNumbersError(details={"duplicates": dupes})

    return tuple(numbers)


def validate_ticket_input(
    personal_id: Any,
    numbers_raw: Any,
    rules: NumberRules | None = None,
    submitter_ref: str | None = None,
) -> ValidatedTicketInput:
    rules = rules or NumberRules()
    pid = validate_personal_id(personal_id)
    numbers = check_numbers(split_numbers(numbers_raw), rules)
    return ValidatedTicketInput(personal_id=pid, numbers=numbers, submitter_ref=submitter_ref or None)


def validate_draw_input(
    numbers: Any,
    rules: NumberRules | None = None,
    mode: str = "shape",
) -> ValidatedDrawInput:
    """Validate administrator-supplied winning numbers.

    ``shape`` only requires a list of integers, of any size. ``strict`` also
    applies the ticket count, range and uniqueness rules.
    """

    if mode not in DRAW_VALIDATION_MODES:
        raise ValueError(f"Unknown draw validation mode: {mode!r}")

    if not isinstance(numbers, (list, tuple)):
        raise MissingOrInvalidNumbersError()
    if any(isinstance(n, bool) or not isinstance(n, int) for n in numbers):
        raise MissingOrInvalidNumbersError()

    if mode == "strict":
        return ValidatedDrawInput(numbers=check_numbers(list(numbers), rules or NumberRules()))
    return ValidatedDrawInput(numbers=tuple(int(n) for n in numbers))
