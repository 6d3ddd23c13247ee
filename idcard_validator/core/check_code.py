"""Weighted mod-11 check character computation."""

from __future__ import annotations

import re

WEIGHTING_FACTORS: tuple[int, ...] = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# Remainder of the weighted sum -> expected check character
CHECK_CODE_TABLE: dict[int, str] = {
    0: "1",
    1: "0",
    2: "x",
    3: "9",
    4: "8",
    5: "7",
    6: "6",
    7: "5",
    8: "4",
    9: "3",
    10: "2",
}

_BODY_PATTERN = re.compile(r"[0-9]{17}")


def compute_check_code(body: str) -> str:
    """Compute the expected check character for a 17-digit body.

    Returns the table value, so remainder 2 yields lowercase "x".
    Raises ValueError if body is not exactly 17 ASCII digits.
    """
    if not _BODY_PATTERN.fullmatch(body):
        msg = "body must be exactly 17 ASCII digits"
        raise ValueError(msg)
    total = sum(int(digit) * weight for digit, weight in zip(body, WEIGHTING_FACTORS))
    return CHECK_CODE_TABLE[total % 11]


def is_valid_check_code(card_number: str) -> bool:
    """Check that the 18th character matches the checksum of the first 17.

    Expects an 18-character number that already passed the structural check.
    Comparison is case-insensitive, so both "X" and "x" match.
    """
    return compute_check_code(card_number[:17]) == card_number[17:].lower()
