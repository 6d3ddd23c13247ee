"""Identity number validator exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from idcard_validator.models.identity_number import FailureReason


class IdCardValidatorError(Exception):
    """Base exception for all validator errors."""


class InvalidIdentityNumberError(IdCardValidatorError, ValueError):
    """An identity number failed validation where a parsed value was required."""

    def __init__(self, reason: FailureReason) -> None:
        self.reason = reason
        super().__init__(f"Invalid identity number: {reason.value} check failed")


class AreaCodeDataError(IdCardValidatorError):
    """The area code dataset is malformed or cannot be read."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
