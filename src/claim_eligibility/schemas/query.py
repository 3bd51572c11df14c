"""Pydantic models for the incoming query and the facts extracted from it."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClaimRequest(BaseModel):
    """Incoming request document — a free-text query plus policy clauses."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "query": "46-year-old male, knee surgery in Pune, 3-month policy",
                    "policyClauses": [
                        "Knee surgery is covered after a waiting period of 6 months.",
                        "Maximum payable limit is Rs. 2,00,000 per claim.",
                    ],
                }
            ]
        },
    )

    query: str = Field(default="", description="Natural-language description of the claim")
    policy_clauses: Optional[list[str]] = Field(
        default=None,
        alias="policyClauses",
        description="Policy clause strings; omitted means no clauses were supplied",
    )

    @field_validator("policy_clauses", mode="before")
    @classmethod
    def _ignore_non_array(cls, value: Any) -> Any:
        # Anything other than an array counts as "not supplied".
        if not isinstance(value, list):
            return None
        return value


class ParsedQuery(BaseModel):
    """Structured facts extracted from a query.

    Unknown values keep their wire sentinels: ``-1`` for the integer fields
    and ``""`` for the text fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age: int = Field(default=-1, ge=-1, description="Claimant age in years, -1 if unknown")
    sex: str = Field(default="", description='"male", "female" or "" if unknown')
    procedure: str = Field(default="", description="Procedure phrase, lowercase")
    location: str = Field(default="", description="Location token, lowercase")
    policy_months: int = Field(
        default=-1,
        ge=-1,
        alias="policyMonths",
        description="How long the policy has been held, in months; -1 if unknown",
    )

    @property
    def has_policy_months(self) -> bool:
        return self.policy_months >= 0
