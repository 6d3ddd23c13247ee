"""Validation core -- pure functions for identity number checks."""

from __future__ import annotations

from idcard_validator.core.area_codes import AreaCodeRegistry, get_default_registry
from idcard_validator.core.birth_date import is_valid_birth_date, parse_birth_code
from idcard_validator.core.check_code import (
    CHECK_CODE_TABLE,
    WEIGHTING_FACTORS,
    compute_check_code,
    is_valid_check_code,
)
from idcard_validator.core.exceptions import (
    AreaCodeDataError,
    IdCardValidatorError,
    InvalidIdentityNumberError,
)
from idcard_validator.core.validator import (
    CARD_NUMBER_PATTERN,
    check_identity_number,
    normalize_identity_number,
    parse_identity_number,
    validate,
)

__all__ = [
    # area_codes
    "AreaCodeRegistry",
    "get_default_registry",
    # birth_date
    "is_valid_birth_date",
    "parse_birth_code",
    # check_code
    "CHECK_CODE_TABLE",
    "WEIGHTING_FACTORS",
    "compute_check_code",
    "is_valid_check_code",
    # exceptions
    "AreaCodeDataError",
    "IdCardValidatorError",
    "InvalidIdentityNumberError",
    # validator
    "CARD_NUMBER_PATTERN",
    "check_identity_number",
    "normalize_identity_number",
    "parse_identity_number",
    "validate",
]
