"""Shared fixtures for the claim eligibility test suite."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from loguru import logger
from omegaconf import OmegaConf

from claim_eligibility.schemas.query import ParsedQuery

# ---------------------------------------------------------------------------
# Clause fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def knee_clauses() -> list[str]:
    """A knee-surgery waiting period plus a payable limit."""
    return [
        "Knee surgery is covered after a waiting period of 6 months.",
        "Maximum payable limit is Rs. 2,00,000 per claim.",
    ]


@pytest.fixture()
def policy_file(tmp_path: Path) -> Path:
    """Write a small plain-text policy and return its path."""
    path = tmp_path / "policy.txt"
    path.write_text(
        "Knee surgery is covered after a waiting period of 6 months.\r\n"
        "\n"
        "   Maximum payable limit is Rs. 2,00,000 per claim.   \n"
        "Cosmetic surgery is excluded.\n",
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# ParsedQuery fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def knee_query_short_policy() -> ParsedQuery:
    """Knee surgery on a 3-month-old policy."""
    return ParsedQuery(
        age=46,
        sex="male",
        procedure="knee surgery",
        location="pune",
        policy_months=3,
    )


@pytest.fixture()
def knee_query_long_policy() -> ParsedQuery:
    """Knee surgery on a 12-month-old policy."""
    return ParsedQuery(
        age=46,
        sex="male",
        procedure="knee surgery",
        location="pune",
        policy_months=12,
    )


# ---------------------------------------------------------------------------
# Config fixture (test overrides)
# ---------------------------------------------------------------------------


@pytest.fixture()
def test_cfg(policy_file: Path) -> Any:
    """Return a minimal OmegaConf DictConfig with test overrides."""
    cfg_dict = {
        "engine": {"top_k": 8, "doc_id": "policy_sample"},
        "data": {"sample_policy": str(policy_file)},
        "logging": {"level": "WARNING", "colored": False, "format": "pretty"},
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
            "debug": False,
            "cors_origins": ["http://localhost:8501"],
        },
    }
    return OmegaConf.create(cfg_dict)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks bound to per-test capture streams once a test finishes."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="WARNING")
