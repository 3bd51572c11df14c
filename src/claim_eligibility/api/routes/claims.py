"""Claim evaluation API routes.

Endpoints
---------
POST /api/v1/claims/process
    Accept a ``ClaimRequest`` JSON body and return a ``ClaimDecision``.

GET  /api/v1/health
    Lightweight health-check.
"""

from __future__ import annotations

import traceback

from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from claim_eligibility.core.pipeline import evaluate_claim
from claim_eligibility.schemas.decision import ClaimDecision
from claim_eligibility.schemas.query import ClaimRequest

router = APIRouter()


@router.post(
    "/claims/process",
    response_model=ClaimDecision,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="Evaluate an insurance claim",
    description=(
        "Decide coverage for a free-text query. Without ``policyClauses`` the "
        "currently loaded policy is used."
    ),
)
async def process_claim(body: ClaimRequest, request: Request) -> ClaimDecision:
    """Run the extraction, ranking and decision steps for one query."""
    cfg = request.app.state.cfg

    if body.policy_clauses is None:
        policy = request.app.state.policy
        clauses = policy.clauses
        logger.info(
            "API: evaluating query against active policy {doc}",
            doc=policy.doc_id,
        )
    else:
        clauses = body.policy_clauses
        logger.info("API: evaluating query against {n} supplied clauses", n=len(clauses))

    try:
        decision = evaluate_claim(
            body.query,
            clauses,
            top_k=cfg.engine.top_k,
            doc_id=cfg.engine.doc_id,
        )
    except Exception as exc:
        logger.error(
            "Evaluation failed: {err}\n{tb}",
            err=exc,
            tb=traceback.format_exc(),
        )
        raise HTTPException(
            status_code=500,
            detail=f"Evaluation error: {exc}",
        ) from exc

    if decision.approved:
        logger.info("API: approved, amount {amount}", amount=decision.amount)
    else:
        logger.info("API: rejected, {reason}", reason=decision.reason)
    return decision


@router.get(
    "/health",
    summary="Health check",
    description="Returns service health status and the size of the active policy.",
)
async def health(request: Request) -> dict:
    """Return a lightweight health-check response."""
    policy = request.app.state.policy
    return {"status": "healthy", "policy": policy.doc_id, "clauses": len(policy.clauses)}
