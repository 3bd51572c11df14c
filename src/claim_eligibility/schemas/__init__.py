"""Pydantic schemas for the claim eligibility system."""

from claim_eligibility.schemas.decision import (
    REFER_TO_CLAUSE,
    CitedClause,
    ClaimDecision,
    ErrorDocument,
    ScoredClause,
    Verdict,
)
from claim_eligibility.schemas.query import ClaimRequest, ParsedQuery

__all__ = [
    "REFER_TO_CLAUSE",
    "CitedClause",
    "ClaimDecision",
    "ClaimRequest",
    "ErrorDocument",
    "ParsedQuery",
    "ScoredClause",
    "Verdict",
]
