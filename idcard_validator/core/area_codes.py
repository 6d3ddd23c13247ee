"""Administrative area code registry.

The default dataset ships as ``idcard_validator/data/area_codes.txt``: a
snapshot of province, prefecture and county codes, including codes retired
by boundary changes that still appear on issued cards. Codes are separated by
whitespace; ``#`` starts a comment.
"""

from __future__ import annotations

import re
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from idcard_validator.core.exceptions import AreaCodeDataError
from idcard_validator.models.config import Settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = structlog.get_logger(__name__)

_CODE_PATTERN = re.compile(r"[1-9][0-9]{5}")


class AreaCodeRegistry:
    """Read-only set of valid 6-digit area codes."""

    __slots__ = ("_codes",)

    def __init__(self, codes: Iterable[int]) -> None:
        self._codes = frozenset(codes)

    @classmethod
    def from_text(cls, text: str) -> AreaCodeRegistry:
        """Build a registry from the whitespace-separated text format.

        Raises AreaCodeDataError on any token that is not a 6-digit code.
        """
        codes: set[int] = set()
        for line_number, line in enumerate(text.splitlines(), start=1):
            content = line.split("#", 1)[0]
            for token in content.split():
                if not _CODE_PATTERN.fullmatch(token):
                    msg = f"invalid area code {token!r}"
                    raise AreaCodeDataError(msg, line_number=line_number)
                codes.add(int(token))
        return cls(codes)

    @classmethod
    def from_path(cls, path: str | Path) -> AreaCodeRegistry:
        """Build a registry from a text file on disk."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            msg = f"cannot read area code file {path}: {e}"
            raise AreaCodeDataError(msg) from e
        return cls.from_text(text)

    def contains(self, code: int) -> bool:
        """Return True if code is a registered area code."""
        return code in self._codes

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._codes))


def _packaged_area_codes() -> str:
    """Read the area code snapshot bundled with the package."""
    return files("idcard_validator").joinpath("data", "area_codes.txt").read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_default_registry() -> AreaCodeRegistry:
    """Return the process-wide registry, loading it on first use.

    Uses the file named by IDCARD_AREA_CODES_PATH when set, otherwise the
    packaged snapshot.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        msg = f"invalid area code settings: {e}"
        raise AreaCodeDataError(msg) from e
    if settings.area_codes_path:
        registry = AreaCodeRegistry.from_path(settings.area_codes_path)
        source = settings.area_codes_path
    else:
        registry = AreaCodeRegistry.from_text(_packaged_area_codes())
        source = "packaged"
    logger.info("area_codes_loaded", source=source, count=len(registry))
    return registry
