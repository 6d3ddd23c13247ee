"""Unit tests for the Pydantic models.

Tests validation logic and derived values for every model in
idcard_validator/models/. No mocking -- real pydantic constructors only.
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from idcard_validator.models.config import Settings
from idcard_validator.models.identity_number import (
    FailureCategory,
    FailureReason,
    IdentityNumber,
    ValidationResult,
)

# ---------------------------------------------------------------------------
# IdentityNumber
# ---------------------------------------------------------------------------


class TestIdentityNumber:
    """Tests for IdentityNumber."""

    def test_from_string_splits_fields(self) -> None:
        number = IdentityNumber.from_string("11010519491231002X")
        assert number.area_code == "110105"
        assert number.birth_code == "19491231"
        assert number.sequence_code == "002"
        assert number.check_char == "X"

    def test_str_round_trips_input(self) -> None:
        assert str(IdentityNumber.from_string("11010519491231002x")) == "11010519491231002x"

    def test_birth_date(self) -> None:
        assert IdentityNumber.from_string("11010519491231002X").birth_date == date(1949, 12, 31)

    def test_gender_odd_sequence_is_male(self) -> None:
        assert IdentityNumber.from_string("440524188001010014").gender == "male"

    def test_gender_even_sequence_is_female(self) -> None:
        assert IdentityNumber.from_string("11010519491231002X").gender == "female"

    def test_frozen(self) -> None:
        number = IdentityNumber.from_string("440524188001010014")
        with pytest.raises(ValidationError):
            number.area_code = "110105"  # type: ignore[misc]

    def test_area_code_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IdentityNumber(
                area_code="010105", birth_code="19491231", sequence_code="002", check_char="X"
            )

    def test_short_birth_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IdentityNumber(
                area_code="110105", birth_code="1949123", sequence_code="002", check_char="X"
            )

    def test_bad_check_char_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IdentityNumber(
                area_code="110105", birth_code="19491231", sequence_code="002", check_char="Y"
            )

    def test_strict_rejects_integers(self) -> None:
        with pytest.raises(ValidationError):
            IdentityNumber(
                area_code=110105,  # type: ignore[arg-type]
                birth_code="19491231",
                sequence_code="002",
                check_char="X",
            )


# ---------------------------------------------------------------------------
# ValidationResult / FailureReason
# ---------------------------------------------------------------------------


class TestFailureReason:
    """Tests for FailureReason categories."""

    @pytest.mark.parametrize(
        ("reason", "category"),
        [
            (FailureReason.EMPTY, FailureCategory.FORMAT),
            (FailureReason.LENGTH, FailureCategory.FORMAT),
            (FailureReason.PATTERN, FailureCategory.FORMAT),
            (FailureReason.AREA_CODE, FailureCategory.SEMANTIC),
            (FailureReason.BIRTH_DATE, FailureCategory.SEMANTIC),
            (FailureReason.CHECK_CODE, FailureCategory.CHECKSUM),
        ],
    )
    def test_category(self, reason: FailureReason, category: FailureCategory) -> None:
        assert reason.category == category

    def test_values_are_strings(self) -> None:
        assert FailureReason.AREA_CODE == "area_code"
        assert FailureCategory.CHECKSUM == "checksum"


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_valid(self) -> None:
        result = ValidationResult(is_valid=True)
        assert bool(result) is True
        assert result.reason is None
        assert result.category is None

    def test_invalid(self) -> None:
        result = ValidationResult(is_valid=False, reason=FailureReason.BIRTH_DATE)
        assert bool(result) is False
        assert result.category == FailureCategory.SEMANTIC

    def test_reason_from_string(self) -> None:
        result = ValidationResult(is_valid=False, reason="check_code")
        assert result.reason is FailureReason.CHECK_CODE

    def test_unknown_reason_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ValidationResult(is_valid=False, reason="spelling")

    def test_frozen(self) -> None:
        result = ValidationResult(is_valid=True)
        with pytest.raises(ValidationError):
            result.is_valid = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.area_codes_path is None
        assert settings.log_level == "INFO"

    def test_log_level_uppercased(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="VERBOSE")

    def test_area_codes_path_must_exist(self, tmp_path) -> None:
        with pytest.raises(ValidationError, match="area_codes_path does not exist"):
            Settings(area_codes_path=str(tmp_path / "missing.txt"))

    def test_area_codes_path_existing_file(self, tmp_path) -> None:
        path = tmp_path / "codes.txt"
        path.write_text("110101\n", encoding="utf-8")
        assert Settings(area_codes_path=str(path)).area_codes_path == str(path)

    def test_blank_area_codes_path_is_none(self) -> None:
        assert Settings(area_codes_path="  ").area_codes_path is None

    def test_env_prefix(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "codes.txt"
        path.write_text("110101\n", encoding="utf-8")
        monkeypatch.setenv("IDCARD_AREA_CODES_PATH", str(path))
        monkeypatch.setenv("IDCARD_LOG_LEVEL", "warning")
        settings = Settings()
        assert settings.area_codes_path == str(path)
        assert settings.log_level == "WARNING"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings().log_level == "INFO"
