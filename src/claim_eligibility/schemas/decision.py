"""Pydantic models for clause ranking and the coverage decision."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from claim_eligibility.schemas.query import ParsedQuery

REFER_TO_CLAUSE = "Refer to clause"


class Verdict(str, Enum):
    """Final outcome of a claim."""

    APPROVED = "Approved"
    REJECTED = "Rejected"


class ScoredClause(BaseModel):
    """A policy clause paired with its relevance to a parsed query."""

    model_config = ConfigDict(frozen=True)

    text: str
    score: float = Field(..., ge=0)


class CitedClause(BaseModel):
    """One entry of the justification trail."""

    doc_id: str = Field(..., description="Synthetic identifier of the policy document")
    text: str = Field(..., description="Clause text, verbatim")
    score: float = Field(..., ge=0, description="Relevance score of the clause")


class ClaimDecision(BaseModel):
    """Coverage decision returned for a query.

    Field names on the wire are capitalised (``Decision``, ``Amount`` ...);
    ``WaitingMonthsRequired`` and ``PolicyMonths`` only appear when the claim
    was rejected for falling inside a waiting period.
    """

    model_config = ConfigDict(populate_by_name=True)

    decision: Verdict = Field(..., alias="Decision")
    amount: Union[int, Literal["Refer to clause"]] = Field(..., alias="Amount")
    reason: str = Field(..., alias="Reason")
    waiting_months_required: Optional[int] = Field(default=None, alias="WaitingMonthsRequired")
    policy_months: Optional[int] = Field(default=None, alias="PolicyMonths")
    parsed_query: ParsedQuery = Field(..., alias="ParsedQuery")
    justification: list[CitedClause] = Field(default_factory=list, alias="Justification")

    @property
    def approved(self) -> bool:
        return self.decision is Verdict.APPROVED

    def to_wire(self) -> dict:
        """Dump using wire field names, dropping absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorDocument(BaseModel):
    """Minimal document emitted when the input cannot be processed."""

    error: Literal["no-input", "bad-json"]
