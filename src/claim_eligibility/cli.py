"""Command-line entry point: one request document on stdin, one decision on stdout.

Usage::

    claim-eligibility < request.json
    claim-eligibility engine.top_k=5 logging.level=DEBUG < request.json

The request is ``{"query": "...", "policyClauses": ["...", ...]}``. On
success the decision is written pretty-printed and the exit code is 0. Empty
input or input that is not a valid request document produces
``{"error":"no-input"}`` or ``{"error":"bad-json"}`` and exit code 1.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loguru import logger
from pydantic import ValidationError

from claim_eligibility.config import load_config
from claim_eligibility.core.pipeline import evaluate_claim
from claim_eligibility.logging.setup import setup_logging
from claim_eligibility.schemas.decision import ClaimDecision, ErrorDocument
from claim_eligibility.schemas.query import ClaimRequest

if TYPE_CHECKING:
    from omegaconf import DictConfig

EXIT_OK = 0
EXIT_ERROR = 1


def render_decision(decision: ClaimDecision) -> str:
    """Serialise *decision* with a 2-space indent and a trailing newline."""
    return json.dumps(decision.to_wire(), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def render_error(code: str) -> str:
    """Serialise a compact error document (no whitespace, no newline)."""
    return ErrorDocument(error=code).model_dump_json()


def process_input(raw: str, cfg: DictConfig) -> tuple[str, int]:
    """Turn the raw stdin payload into ``(output_document, exit_code)``."""
    if not raw:
        logger.warning("No input received on stdin")
        return render_error("no-input"), EXIT_ERROR

    try:
        request = ClaimRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "Rejected malformed request ({n} errors): {err}",
            n=exc.error_count(),
            err=exc.errors()[0]["msg"],
        )
        return render_error("bad-json"), EXIT_ERROR

    decision = evaluate_claim(
        request.query,
        request.policy_clauses or [],
        top_k=cfg.engine.top_k,
        doc_id=cfg.engine.doc_id,
    )
    return render_decision(decision), EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Read stdin, write the decision document, return the exit code."""
    cfg = load_config(sys.argv[1:] if argv is None else argv)
    setup_logging(cfg.logging)

    raw = sys.stdin.read()
    output, code = process_input(raw, cfg)

    sys.stdout.write(output)
    sys.stdout.flush()
    return code


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
