"""Shared test fixtures for the identity number validator."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from idcard_validator.core.area_codes import AreaCodeRegistry, get_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ignore ambient IDCARD_* variables and rebuild the default registry per test."""
    monkeypatch.delenv("IDCARD_AREA_CODES_PATH", raising=False)
    monkeypatch.delenv("IDCARD_LOG_LEVEL", raising=False)
    get_default_registry.cache_clear()
    yield
    get_default_registry.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed validation moment: 2024-06-01 12:00 UTC."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def small_registry() -> AreaCodeRegistry:
    """A registry holding only the area codes used by the sample numbers."""
    return AreaCodeRegistry({110101, 110105, 360426, 440524})


@pytest.fixture
def valid_numbers() -> list[str]:
    """Identity numbers whose check characters were computed by hand."""
    return [
        "11010519491231002X",
        "440524188001010014",
        "360426199101010071",
        "110101199003077758",
        "110101199001011237",
        "110101200002290018",
    ]
