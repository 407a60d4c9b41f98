"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(
        self,
        message: str = "Validation error",
        details: Any | None = None,
        code: str = "validation_error",
    ) -> None:
        super().__init__(code=code, message=message, status_code=400, details=details)


class ConflictError(AppError):
    """Conflict (e.g., unique constraint)."""

    def __init__(
        self,
        message: str = "Conflict",
        details: Any | None = None,
        code: str = "conflict",
    ) -> None:
        super().__init__(code=code, message=message, status_code=409, details=details)


class UnauthorizedError(AppError):
    """Missing or invalid credentials."""

    def __init__(self, message: str = "Unauthorized", details: Any | None = None) -> None:
        super().__init__(code="unauthorized", message=message, status_code=401, details=details)


class ForbiddenError(AppError):
    """Caller may not perform this operation."""

    def __init__(
        self,
        message: str = "Forbidden",
        details: Any | None = None,
        code: str = "forbidden",
    ) -> None:
        super().__init__(code=code, message=message, status_code=403, details=details)


# Ticket admission


class AdmissionClosedError(ForbiddenError):
    def __init__(self, message: str = "Ticket admission is closed", details: Any | None = None) -> None:
        super().__init__(message, details, code="admission_closed")


class InvalidPersonalIdError(ValidationError):
    def __init__(
        self,
        message: str = "personalId must be 1-20 letters or digits",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, details, code="invalid_personal_id")


class InvalidCountError(ValidationError):
    def __init__(self, message: str = "Wrong amount of numbers", details: Any | None = None) -> None:
        super().__init__(message, details, code="invalid_count")


class InvalidRangeError(ValidationError):
    def __init__(self, message: str = "Numbers out of range", details: Any | None = None) -> None:
        super().__init__(message, details, code="invalid_range")


class DuplicateNumbersError(ValidationError):
    def __init__(self, message: str = "Numbers must be unique", details: Any | None = None) -> None:
        super().__init__(message, details, code="duplicate_numbers")


# Draw publication


class BettingStillActiveError(ValidationError):
    def __init__(
        self,
        message: str = "Betting is still active for the current round",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, details, code="betting_still_active")


class NoRoundsExistError(ValidationError):
    def __init__(self, message: str = "No rounds have been created", details: Any | None = None) -> None:
        super().__init__(message, details, code="no_rounds_exist")


class DrawAlreadyExistsError(ConflictError):
    def __init__(
        self,
        message: str = "Results for the latest round already exist",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, details, code="draw_already_exists")


class MissingOrInvalidNumbersError(ValidationError):
    def __init__(
        self,
        message: str = 'Field "numbers" must be a list of integers',
        details: Any | None = None,
    ) -> None:
        super().__init__(message, details, code="missing_or_invalid_numbers")
