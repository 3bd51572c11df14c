"""The policy the API evaluates queries against when none is supplied."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ActivePolicy(BaseModel):
    """Clauses of the currently loaded policy document."""

    doc_id: str = Field(..., description="Identifier of the loaded policy document")
    clauses: list[str] = Field(default_factory=list, description="Policy clauses, in order")
