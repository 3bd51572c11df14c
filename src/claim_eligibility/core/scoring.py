"""Clause relevance scoring and ranking."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from claim_eligibility.core.scanners import first_int
from claim_eligibility.schemas.decision import ScoredClause
from claim_eligibility.schemas.query import ParsedQuery

PROCEDURE_WEIGHT = 2.0
LOCATION_WEIGHT = 1.2
TENURE_WEIGHT = 0.8
KNEE_WEIGHT = 1.0

DEFAULT_TOP_K = 8


def score_clause(clause: str, parsed: ParsedQuery) -> float:
    """Return the additive relevance score of *clause* for *parsed*.

    Signals (comparison is case-insensitive):

    * procedure phrase appears in the clause: +2.0
    * location appears in the clause: +1.2
    * clause talks about months and the first number in it is a duration the
      policy has already been held for: +0.8
    * both the clause and the procedure mention "knee": +1.0, on top of the
      procedure bonus
    """
    text = clause.lower()
    score = 0.0

    if parsed.procedure and parsed.procedure.lower() in text:
        score += PROCEDURE_WEIGHT
    if parsed.location and parsed.location.lower() in text:
        score += LOCATION_WEIGHT
    if parsed.policy_months > 0 and "month" in text:
        months = first_int(text)
        if months is not None and 0 < months <= parsed.policy_months:
            score += TENURE_WEIGHT
    if "knee" in text and "knee" in parsed.procedure:
        score += KNEE_WEIGHT

    return score


def rank_clauses(
    clauses: Iterable[str],
    parsed: ParsedQuery,
    top_k: int = DEFAULT_TOP_K,
) -> list[ScoredClause]:
    """Score *clauses* and return at most *top_k* of them, best first.

    Clauses scoring zero are dropped. Equal scores keep their input order.
    """
    scored: list[ScoredClause] = []
    for clause in clauses:
        score = score_clause(clause, parsed)
        if score > 0:
            scored.append(ScoredClause(text=clause, score=score))

    ranked = sorted(scored, key=lambda item: item.score, reverse=True)[:top_k]

    logger.debug(
        "Ranked {n} relevant clauses, keeping {k}",
        n=len(scored),
        k=len(ranked),
    )
    for position, item in enumerate(ranked, start=1):
        logger.debug(
            "#{pos} score={score:.2f} | {preview}",
            pos=position,
            score=item.score,
            preview=item.text[:120],
        )
    return ranked
