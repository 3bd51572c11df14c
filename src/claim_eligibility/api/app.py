"""FastAPI application factory.

``create_app`` builds a fully configured ``FastAPI`` instance with:

* CORS middleware
* Request-context middleware (request ids, access log, JSON 500s)
* Claim-evaluation and policy routes
* The sample policy loaded as the active policy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from claim_eligibility.api.middleware import request_context
from claim_eligibility.api.routes.claims import router as claims_router
from claim_eligibility.api.routes.policies import router as policies_router
from claim_eligibility.api.state import ActivePolicy
from claim_eligibility.core.policy import SAMPLE_DOC_ID, load_policy_clauses
from claim_eligibility.logging.setup import setup_logging

if TYPE_CHECKING:
    from omegaconf import DictConfig


def create_app(cfg: DictConfig) -> FastAPI:
    """Build and return a fully configured :class:`FastAPI` application.

    Parameters
    ----------
    cfg:
        The composed Hydra configuration.

    Returns
    -------
    FastAPI
        Ready-to-run application instance.
    """
    setup_logging(cfg.logging)

    app = FastAPI(
        title="Claim Eligibility",
        description="Heuristic insurance claim eligibility from free-text queries",
        version="1.0.0",
    )
    app.state.cfg = cfg

    # ── Active policy ────────────────────────────────────────────────────
    try:
        clauses = load_policy_clauses(cfg.data.sample_policy)
    except FileNotFoundError as exc:
        logger.warning("Sample policy unavailable, starting empty: {e}", e=exc)
        clauses = []
    app.state.policy = ActivePolicy(doc_id=SAMPLE_DOC_ID, clauses=clauses)

    # ── CORS ─────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request ids, access log, 500 fallback ────────────────────────────
    app.middleware("http")(request_context)

    # ── Routes ───────────────────────────────────────────────────────────
    app.include_router(claims_router, prefix="/api/v1")
    app.include_router(policies_router, prefix="/api/v1")

    logger.info("Application ready with {n} policy clauses", n=len(clauses))
    return app
