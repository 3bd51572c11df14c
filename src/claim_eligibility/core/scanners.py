"""Numeric scanners shared by query extraction, clause scoring and decisions.

Both scanners are deliberately naive: they report the *first* figure they find
and never look at the surrounding words. Callers isolate the relevant text.
"""

from __future__ import annotations

import re
from typing import Optional

# Parsed integers are bounded to a signed 32-bit value; anything larger counts
# as a parse failure.
INT_MAX = 2**31 - 1

_DIGIT_RUN = re.compile(r"\d+", re.ASCII)

# 1-3 leading digits followed by any mix of digits and commas, so that Indian
# grouping ("1,50,000") and western grouping ("150,000") both survive. Group
# widths are not validated.
_AMOUNT = re.compile(r"(\d{1,3}[,\d]*)\s*(?:inr|rs|rupees)?", re.IGNORECASE | re.ASCII)
_AMOUNT_FALLBACK = re.compile(r"(\d{5,7})", re.ASCII)


def parse_int(digits: str) -> Optional[int]:
    """Parse a run of ASCII digits, returning ``None`` when it is out of range."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(INT_MAX)):
        return None
    value = int(significant)
    if value > INT_MAX:
        return None
    return value


def first_int(text: str) -> Optional[int]:
    """Return the value of the first run of digits in *text*.

    >>> first_int("abc123xyz45")
    123
    >>> first_int("") is None
    True
    """
    match = _DIGIT_RUN.search(text)
    if match is None:
        return None
    return parse_int(match.group(0))


def extract_amount(text: str) -> Optional[int]:
    """Locate a monetary figure in *text*.

    The primary pattern accepts comma-grouped figures with an optional
    currency marker (``inr``, ``rs``, ``rupees``); commas are stripped before
    parsing. If that fails to match or to parse, any standalone 5-7 digit run
    is used instead.

    >>> extract_amount("Rs. 1,50,000")
    150000
    >>> extract_amount("no numbers here") is None
    True
    """
    if not text:
        return None

    match = _AMOUNT.search(text)
    if match:
        value = parse_int(match.group(1).replace(",", ""))
        if value is not None:
            return value

    fallback = _AMOUNT_FALLBACK.search(text)
    if fallback:
        return parse_int(fallback.group(1))
    return None
