"""Top-level identity number validation pipeline.

Checks run in a fixed order and stop at the first failure:
length, structural pattern, area code, birth date, check code.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from idcard_validator.core.area_codes import AreaCodeRegistry, get_default_registry
from idcard_validator.core.birth_date import is_valid_birth_date
from idcard_validator.core.check_code import is_valid_check_code
from idcard_validator.core.exceptions import InvalidIdentityNumberError
from idcard_validator.models.identity_number import (
    FailureReason,
    IdentityNumber,
    ValidationResult,
)

if TYPE_CHECKING:
    from datetime import datetime

logger = structlog.get_logger(__name__)

CARD_NUMBER_LENGTH = 18

# Century prefix 18, 19 or 20-99; \d limited to ASCII digits
CARD_NUMBER_PATTERN = re.compile(r"^[1-9]\d{5}(18|19|[2-9]\d)\d{9}[0-9Xx]$", re.ASCII)

# Surrounding whitespace plus the byte order mark, which str.strip() keeps
_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def normalize_identity_number(value: object) -> str:
    """Coerce a loosely typed value to a trimmed string.

    Leading and trailing whitespace and byte order marks are removed.
    None and values whose str() raises normalize to the empty string.
    """
    if value is None:
        return ""
    try:
        text = str(value)
    except Exception:
        return ""
    return _TRIM_PATTERN.sub("", text)


def _reject(reason: FailureReason) -> ValidationResult:
    logger.debug("identity_number_rejected", reason=reason.value, category=reason.category.value)
    return ValidationResult(is_valid=False, reason=reason)


def _run_checks(
    card_number: str,
    registry: AreaCodeRegistry | None,
    now: datetime | None,
) -> ValidationResult:
    if not card_number:
        return _reject(FailureReason.EMPTY)
    if len(card_number) != CARD_NUMBER_LENGTH:
        return _reject(FailureReason.LENGTH)
    if not CARD_NUMBER_PATTERN.match(card_number):
        return _reject(FailureReason.PATTERN)

    if registry is None:
        registry = get_default_registry()
    if not registry.contains(int(card_number[:6])):
        return _reject(FailureReason.AREA_CODE)

    if not is_valid_birth_date(card_number[6:14], now=now):
        return _reject(FailureReason.BIRTH_DATE)

    if not is_valid_check_code(card_number):
        return _reject(FailureReason.CHECK_CODE)

    return ValidationResult(is_valid=True)


def check_identity_number(
    value: object,
    *,
    registry: AreaCodeRegistry | None = None,
    now: datetime | None = None,
) -> ValidationResult:
    """Run the validation pipeline and report which check failed, if any.

    Never raises for malformed input. ``registry`` defaults to the packaged
    area codes and ``now`` to the current UTC time.
    """
    return _run_checks(normalize_identity_number(value), registry, now)


def validate(value: object) -> bool:
    """Return True if value is a valid 18-character identity number.

    Accepts any value; it is coerced with str() and trimmed. None,
    empty strings and anything that fails a check yield False. A broken
    area code dataset or IDCARD_AREA_CODES_PATH setting is not a check
    failure: it raises AreaCodeDataError.
    """
    return check_identity_number(value).is_valid


def parse_identity_number(
    value: object,
    *,
    registry: AreaCodeRegistry | None = None,
    now: datetime | None = None,
) -> IdentityNumber:
    """Validate value and split it into its fields.

    Raises InvalidIdentityNumberError with the failing reason when the
    number is not valid.
    """
    card_number = normalize_identity_number(value)
    result = _run_checks(card_number, registry, now)
    if result.reason is not None:
        raise InvalidIdentityNumberError(result.reason)
    return IdentityNumber.from_string(card_number)
