"""Pydantic data models for the identity number validator."""

from idcard_validator.models.config import Settings
from idcard_validator.models.identity_number import (
    FailureCategory,
    FailureReason,
    IdentityNumber,
    ValidationResult,
)

__all__ = [
    "FailureCategory",
    "FailureReason",
    "IdentityNumber",
    "Settings",
    "ValidationResult",
]
