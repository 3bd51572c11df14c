"""Tests for heuristic query extraction."""

from __future__ import annotations

import pytest

from claim_eligibility.core.extraction import (
    extract_age,
    extract_location,
    extract_policy_months,
    extract_procedure,
    extract_sex,
    parse_query,
)
from claim_eligibility.schemas.query import ParsedQuery

# ═══════════════════════════════════════════════════════════════════════
# Full queries
# ═══════════════════════════════════════════════════════════════════════


class TestParseQuery:
    """End-to-end extraction of every field."""

    def test_typical_query(self) -> None:
        parsed = parse_query("45-year-old male, knee surgery in Pune, 3-month policy")
        assert parsed == ParsedQuery(
            age=45,
            sex="male",
            procedure="knee surgery",
            location="pune",
            policy_months=3,
        )

    def test_female_resolves_to_male(self) -> None:
        # "male" is a substring of "female" and is checked first.
        parsed = parse_query("female patient needs cataract surgery")
        assert parsed.sex == "male"
        assert parsed.procedure == "cataract surgery"

    def test_unknown_fields_keep_sentinels(self) -> None:
        parsed = parse_query("please check my claim")
        assert parsed.age == -1
        assert parsed.sex == ""
        assert parsed.procedure == ""
        assert parsed.location == ""
        assert parsed.policy_months == -1

    def test_empty_query(self) -> None:
        assert parse_query("") == ParsedQuery()

    def test_year_policy_converted_to_months(self) -> None:
        parsed = parse_query("2-year policy")
        assert parsed.policy_months == 24
        # No two-digit "year" phrase, so age falls back to the first number.
        assert parsed.age == 2

    def test_huge_number_keeps_sentinels(self) -> None:
        parsed = parse_query("policy " + "1" * 5000 + " month, knee surgery")
        assert parsed.age == -1
        assert parsed.policy_months == -1
        assert parsed.procedure == "knee surgery"

    def test_matching_is_case_insensitive(self) -> None:
        parsed = parse_query("60 YEAR OLD MALE, KNEE SURGERY IN DELHI")
        assert parsed.age == 60
        assert parsed.sex == "male"
        assert parsed.procedure == "knee surgery"
        assert parsed.location == "delhi"


# ═══════════════════════════════════════════════════════════════════════
# Individual extractors
# ═══════════════════════════════════════════════════════════════════════


class TestAge:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("45-year-old", 45),
            ("45 - year old", 45),
            ("45 year old", 45),
            ("45year old", 45),
        ],
    )
    def test_year_phrase(self, text: str, expected: int) -> None:
        assert extract_age(text) == expected

    def test_fallback_captures_unrelated_number(self) -> None:
        assert extract_age("male, knee surgery, 3 month policy") == 3

    def test_single_digit_year_is_not_an_age_phrase(self) -> None:
        # "5-year" needs two digits; the fallback finds the 30 first.
        assert extract_age("30 days claim on 5-year policy") == 30

    def test_no_numbers(self) -> None:
        assert extract_age("no numbers") is None


class TestSex:
    def test_male(self) -> None:
        assert extract_sex("46m male") == "male"

    def test_female_matches_male_first(self) -> None:
        assert extract_sex("a female claimant") == "male"

    def test_unknown(self) -> None:
        assert extract_sex("a claimant") is None


class TestPolicyMonths:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3-month policy", 3),
            ("3 month policy", 3),
            ("3 - months old", 3),
            ("policy 14 months old", 14),
            ("2-year policy", 24),
            ("1 year old policy", 12),
        ],
    )
    def test_tenure(self, text: str, expected: int) -> None:
        assert extract_policy_months(text) == expected

    def test_month_phrase_wins_over_year(self) -> None:
        assert extract_policy_months("45-year-old, 3-month policy") == 3

    def test_age_phrase_mistaken_for_tenure(self) -> None:
        # Without "month" the first "<n> year" is used, even the age.
        assert extract_policy_months("45-year-old, 2-year policy") == 540

    def test_absent(self) -> None:
        assert extract_policy_months("knee surgery") is None


class TestLocation:
    def test_city(self) -> None:
        assert extract_location("knee surgery in pune, 3-month policy") == "pune"

    def test_hyphenated(self) -> None:
        assert extract_location("treated in navi-mumbai") == "navi-mumbai"

    def test_captures_unrelated_word(self) -> None:
        assert extract_location("patient in good health") == "good"

    def test_matches_inside_words(self) -> None:
        assert extract_location("surgery within limit") == "limit"

    def test_absent(self) -> None:
        assert extract_location("knee surgery, pune") is None


class TestProcedure:
    def test_knee_override(self) -> None:
        assert extract_procedure("46m, knee surgery in pune") == "knee surgery"

    def test_cataract_override(self) -> None:
        assert extract_procedure("cataract surgery needed") == "cataract surgery"

    def test_knee_wins_inside_window(self) -> None:
        assert extract_procedure("cataract and knee surgery") == "knee surgery"

    def test_raw_window_kept(self) -> None:
        text = "the claimant requires open heart surgery after the cardiac event last week"
        assert extract_procedure(text) == "requires open heart surgery after the ca"

    def test_window_clamped_at_start(self) -> None:
        assert extract_procedure("bypass surgery") == "bypass surgery"

    def test_keyword_outside_window_ignored(self) -> None:
        text = "knee pain for many months, now needs spinal surgery"
        assert extract_procedure(text) == "s, now needs spinal surgery"

    def test_fallback_knee(self) -> None:
        assert extract_procedure("knee replacement") == "knee surgery"

    def test_fallback_cataract_overrides_knee(self) -> None:
        assert extract_procedure("knee pain and cataract treatment") == "cataract surgery"

    def test_absent(self) -> None:
        assert extract_procedure("dental cleaning") is None
