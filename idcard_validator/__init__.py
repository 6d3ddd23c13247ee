"""Validation of 18-character resident identity numbers."""

from idcard_validator.core import (
    AreaCodeDataError,
    AreaCodeRegistry,
    IdCardValidatorError,
    InvalidIdentityNumberError,
    check_identity_number,
    compute_check_code,
    get_default_registry,
    is_valid_birth_date,
    is_valid_check_code,
    parse_identity_number,
    validate,
)
from idcard_validator.models import (
    FailureCategory,
    FailureReason,
    IdentityNumber,
    Settings,
    ValidationResult,
)

__all__ = [
    "AreaCodeDataError",
    "AreaCodeRegistry",
    "FailureCategory",
    "FailureReason",
    "IdCardValidatorError",
    "IdentityNumber",
    "InvalidIdentityNumberError",
    "Settings",
    "ValidationResult",
    "check_identity_number",
    "compute_check_code",
    "get_default_registry",
    "is_valid_birth_date",
    "is_valid_check_code",
    "parse_identity_number",
    "validate",
]
