"""End-to-end evaluation: query + clauses → coverage decision."""

from __future__ import annotations

import time
from collections.abc import Iterable

from loguru import logger

from claim_eligibility.core.decision import DEFAULT_DOC_ID, derive_decision
from claim_eligibility.core.extraction import parse_query
from claim_eligibility.core.scoring import DEFAULT_TOP_K, rank_clauses
from claim_eligibility.schemas.decision import ClaimDecision


def evaluate_claim(
    query: str,
    clauses: Iterable[str],
    top_k: int = DEFAULT_TOP_K,
    doc_id: str = DEFAULT_DOC_ID,
) -> ClaimDecision:
    """Extract facts from *query*, rank *clauses* against them and decide.

    Parameters
    ----------
    query:
        Free-text description of the claimant and procedure.
    clauses:
        Policy clause strings, in document order.
    top_k:
        Maximum number of ranked clauses inspected and cited.
    doc_id:
        Document identifier cited in the justification trail.

    Returns
    -------
    ClaimDecision
        The decision record, including the parsed facts and justification.
    """
    clauses = list(clauses)
    logger.info(
        "Evaluating query against {n} policy clauses",
        n=len(clauses),
    )
    start = time.time()

    parsed = parse_query(query)
    ranked = rank_clauses(clauses, parsed, top_k=top_k)
    decision = derive_decision(parsed, ranked, doc_id=doc_id)

    logger.debug(
        "Evaluation finished in {ms:.1f}ms",
        ms=(time.time() - start) * 1000,
    )
    return decision
