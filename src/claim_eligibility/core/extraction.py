"""Heuristic extraction of claim facts from a free-text query.

Every field has its own extractor returning ``None`` when nothing is found;
a miss in one field never affects another. Matching runs on a lowercased copy
of the query, so extracted text (location, procedure) is lowercase too.
"""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from claim_eligibility.core.scanners import first_int, parse_int
from claim_eligibility.schemas.query import ParsedQuery

_AGE_PATTERNS = (
    re.compile(r"(\d{2})\s*-\s*year", re.ASCII),
    re.compile(r"(\d{2})\s*year", re.ASCII),
)
_MONTHS = re.compile(r"(\d+)\s*-?\s*month", re.ASCII)
_YEARS = re.compile(r"(\d+)\s*-?\s*year", re.ASCII)
_LOCATION = re.compile(r"in\s+([A-Za-z\-]+)", re.ASCII)

# Checked in order; "male" is also a substring of "female", so a query that
# mentions "female" resolves to "male".
_SEX_KEYWORDS = ("male", "female")

_PROCEDURE_ANCHOR = "surgery"
_WINDOW_BEFORE = 20
_WINDOW_SIZE = 40
_PROCEDURE_OVERRIDES = (
    ("knee", "knee surgery"),
    ("cataract", "cataract surgery"),
)


def parse_query(query: str) -> ParsedQuery:
    """Extract a :class:`ParsedQuery` from a raw query string."""
    text = query.lower()

    age = extract_age(text)
    sex = extract_sex(text)
    policy_months = extract_policy_months(text)
    location = extract_location(text)
    procedure = extract_procedure(text)

    parsed = ParsedQuery(
        age=-1 if age is None else age,
        sex=sex or "",
        procedure=procedure or "",
        location=location or "",
        policy_months=-1 if policy_months is None else policy_months,
    )
    logger.debug(
        "Parsed query — age={age} sex={sex!r} procedure={procedure!r} "
        "location={location!r} policy_months={months}",
        age=parsed.age,
        sex=parsed.sex,
        procedure=parsed.procedure,
        location=parsed.location,
        months=parsed.policy_months,
    )
    return parsed


def extract_age(text: str) -> Optional[int]:
    """Two digits followed by "year" ("45-year", "45 year").

    Without such a phrase the first number anywhere in the text is taken,
    even if it belongs to something else (e.g. a policy tenure).
    """
    for pattern in _AGE_PATTERNS:
        match = pattern.search(text)
        if match:
            return parse_int(match.group(1))
    return first_int(text)


def extract_sex(text: str) -> Optional[str]:
    for keyword in _SEX_KEYWORDS:
        if keyword in text:
            return keyword
    return None


def extract_policy_months(text: str) -> Optional[int]:
    """Policy tenure: "<n> month" as-is, otherwise "<n> year" times twelve."""
    match = _MONTHS.search(text)
    if match:
        return parse_int(match.group(1))

    match = _YEARS.search(text)
    if match:
        years = parse_int(match.group(1))
        return None if years is None else years * 12
    return None


def extract_location(text: str) -> Optional[str]:
    match = _LOCATION.search(text)
    if match:
        return match.group(1)
    return None


def extract_procedure(text: str) -> Optional[str]:
    """Find the procedure in two stages.

    1. Anchor on "surgery" and cut a window starting up to 20 characters
       before it. The first keyword override found in the window replaces the
       window text; with no override the raw window is kept.
    2. Without the anchor, every keyword found anywhere in the text is applied
       in order, so the last one wins ("cataract" over "knee").
    """
    pos = text.find(_PROCEDURE_ANCHOR)
    if pos != -1:
        start = max(pos - _WINDOW_BEFORE, 0)
        window = text[start:start + _WINDOW_SIZE]
        for keyword, canonical in _PROCEDURE_OVERRIDES:
            if keyword in window:
                return canonical
        return window

    procedure = None
    for keyword, canonical in _PROCEDURE_OVERRIDES:
        if keyword in text:
            procedure = canonical
    return procedure
