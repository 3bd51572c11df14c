"""Tests for Pydantic schemas: ClaimRequest, ParsedQuery, ClaimDecision, ErrorDocument."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from claim_eligibility.schemas.decision import (
    REFER_TO_CLAUSE,
    CitedClause,
    ClaimDecision,
    ErrorDocument,
    ScoredClause,
    Verdict,
)
from claim_eligibility.schemas.query import ClaimRequest, ParsedQuery

# ═══════════════════════════════════════════════════════════════════════
# ClaimRequest
# ═══════════════════════════════════════════════════════════════════════


class TestClaimRequest:
    """Test suite for :class:`ClaimRequest`."""

    def test_defaults(self) -> None:
        request = ClaimRequest.model_validate_json("{}")
        assert request.query == ""
        assert request.policy_clauses is None

    def test_wire_names(self) -> None:
        request = ClaimRequest.model_validate_json(
            '{"query": "knee surgery", "policyClauses": ["a", "b"]}'
        )
        assert request.query == "knee surgery"
        assert request.policy_clauses == ["a", "b"]

    def test_non_array_clauses_ignored(self) -> None:
        request = ClaimRequest.model_validate_json('{"policyClauses": "not a list"}')
        assert request.policy_clauses is None

    def test_non_string_clause_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClaimRequest.model_validate_json('{"policyClauses": ["ok", 5]}')

    def test_non_string_query_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClaimRequest.model_validate_json('{"query": 42}')

    def test_top_level_array_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClaimRequest.model_validate_json("[1, 2]")

    def test_invalid_json_rejected(self) -> None:
        with pytest.raises(ValidationError, match="json_invalid|Invalid JSON"):
            ClaimRequest.model_validate_json("{query:")


# ═══════════════════════════════════════════════════════════════════════
# ParsedQuery
# ═══════════════════════════════════════════════════════════════════════


class TestParsedQuery:
    """Test suite for :class:`ParsedQuery`."""

    def test_sentinel_defaults(self) -> None:
        parsed = ParsedQuery()
        assert parsed.age == -1
        assert parsed.policy_months == -1
        assert parsed.sex == parsed.procedure == parsed.location == ""
        assert parsed.has_policy_months is False

    def test_zero_months_is_known(self) -> None:
        assert ParsedQuery(policy_months=0).has_policy_months is True

    def test_wire_dump(self) -> None:
        parsed = ParsedQuery(age=46, sex="male", policy_months=3)
        assert parsed.model_dump(by_alias=True) == {
            "age": 46,
            "sex": "male",
            "procedure": "",
            "location": "",
            "policyMonths": 3,
        }

    def test_below_sentinel_rejected(self) -> None:
        with pytest.raises(ValidationError, match="greater_than_equal"):
            ParsedQuery(age=-2)

    def test_frozen(self) -> None:
        parsed = ParsedQuery()
        with pytest.raises(ValidationError):
            parsed.age = 30  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════
# ClaimDecision and friends
# ═══════════════════════════════════════════════════════════════════════


class TestClaimDecision:
    """Test suite for :class:`ClaimDecision`."""

    def test_wire_omits_waiting_fields_when_absent(self) -> None:
        decision = ClaimDecision(
            decision=Verdict.APPROVED,
            amount=REFER_TO_CLAUSE,
            reason="ok",
            parsed_query=ParsedQuery(),
        )
        wire = decision.to_wire()
        assert set(wire) == {"Decision", "Amount", "Reason", "ParsedQuery", "Justification"}
        assert wire["Decision"] == "Approved"
        assert wire["Amount"] == "Refer to clause"
        assert decision.approved is True

    def test_wire_includes_waiting_fields(self) -> None:
        decision = ClaimDecision(
            decision=Verdict.REJECTED,
            amount=0,
            reason="waiting",
            waiting_months_required=6,
            policy_months=3,
            parsed_query=ParsedQuery(policy_months=3),
            justification=[CitedClause(doc_id="policy_sample", text="t", score=3.0)],
        )
        wire = decision.to_wire()
        assert wire["WaitingMonthsRequired"] == 6
        assert wire["PolicyMonths"] == 3
        assert wire["ParsedQuery"]["policyMonths"] == 3
        assert wire["Justification"] == [{"doc_id": "policy_sample", "text": "t", "score": 3.0}]

    def test_amount_marker_is_literal(self) -> None:
        with pytest.raises(ValidationError):
            ClaimDecision(
                decision=Verdict.APPROVED,
                amount="see policy",
                reason="ok",
                parsed_query=ParsedQuery(),
            )

    def test_round_trip_by_alias(self) -> None:
        decision = ClaimDecision(
            decision=Verdict.APPROVED,
            amount=200000,
            reason="ok",
            parsed_query=ParsedQuery(age=46),
        )
        restored = ClaimDecision.model_validate(decision.to_wire())
        assert restored == decision


class TestSmallModels:
    def test_scored_clause_score_non_negative(self) -> None:
        with pytest.raises(ValidationError, match="greater_than_equal"):
            ScoredClause(text="x", score=-0.1)

    def test_error_document(self) -> None:
        assert ErrorDocument(error="bad-json").model_dump_json() == '{"error":"bad-json"}'

    def test_error_document_unknown_code(self) -> None:
        with pytest.raises(ValidationError):
            ErrorDocument(error="boom")
