"""Identity number and validation result models."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FailureCategory(StrEnum):
    FORMAT = "format"
    SEMANTIC = "semantic"
    CHECKSUM = "checksum"


class FailureReason(StrEnum):
    EMPTY = "empty"
    LENGTH = "length"
    PATTERN = "pattern"
    AREA_CODE = "area_code"
    BIRTH_DATE = "birth_date"
    CHECK_CODE = "check_code"

    @property
    def category(self) -> FailureCategory:
        """Failure class this reason belongs to."""
        return _REASON_CATEGORIES[self]


_REASON_CATEGORIES: dict[FailureReason, FailureCategory] = {
    FailureReason.EMPTY: FailureCategory.FORMAT,
    FailureReason.LENGTH: FailureCategory.FORMAT,
    FailureReason.PATTERN: FailureCategory.FORMAT,
    FailureReason.AREA_CODE: FailureCategory.SEMANTIC,
    FailureReason.BIRTH_DATE: FailureCategory.SEMANTIC,
    FailureReason.CHECK_CODE: FailureCategory.CHECKSUM,
}


class ValidationResult(BaseModel):
    """Outcome of running the validation pipeline on one input."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: FailureReason | None = None

    @property
    def category(self) -> FailureCategory | None:
        """Failure class of the rejection, None when valid."""
        if self.reason is None:
            return None
        return self.reason.category

    def __bool__(self) -> bool:
        return self.is_valid


class IdentityNumber(BaseModel):
    """A validated 18-character identity number split into its fields."""

    model_config = ConfigDict(frozen=True, strict=True)

    area_code: str = Field(pattern=r"^[1-9][0-9]{5}$")
    birth_code: str = Field(pattern=r"^[0-9]{8}$")
    sequence_code: str = Field(pattern=r"^[0-9]{3}$")
    check_char: str = Field(pattern=r"^[0-9Xx]$")

    @classmethod
    def from_string(cls, card_number: str) -> IdentityNumber:
        """Split an 18-character number into its fixed-width fields."""
        return cls(
            area_code=card_number[:6],
            birth_code=card_number[6:14],
            sequence_code=card_number[14:17],
            check_char=card_number[17:],
        )

    @property
    def birth_date(self) -> date:
        return datetime.strptime(self.birth_code, "%Y%m%d").date()

    @property
    def gender(self) -> Literal["male", "female"]:
        """Odd sequence codes are assigned to men, even ones to women."""
        return "male" if int(self.sequence_code[-1]) % 2 else "female"

    def __str__(self) -> str:
        return f"{self.area_code}{self.birth_code}{self.sequence_code}{self.check_char}"
