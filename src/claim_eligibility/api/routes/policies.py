"""Policy document routes: load the sample policy or upload a new one."""

from __future__ import annotations

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from loguru import logger

from claim_eligibility.api.state import ActivePolicy
from claim_eligibility.core.policy import (
    SAMPLE_DOC_ID,
    UPLOADED_DOC_ID,
    load_policy_clauses,
    split_clauses,
)

router = APIRouter(prefix="/policies")


@router.get("/active", response_model=ActivePolicy, summary="Currently loaded policy")
async def active_policy(request: Request) -> ActivePolicy:
    return request.app.state.policy


@router.post("/sample", summary="Load the sample policy")
async def load_sample(request: Request) -> dict:
    """Make the configured sample policy the active one."""
    path = request.app.state.cfg.data.sample_policy
    try:
        clauses = load_policy_clauses(path)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    request.app.state.policy = ActivePolicy(doc_id=SAMPLE_DOC_ID, clauses=clauses)
    return {"ok": True, "doc_id": SAMPLE_DOC_ID, "clauses": len(clauses)}


@router.post("/upload", summary="Upload a plain-text policy")
async def upload_policy(
    request: Request,
    policy: UploadFile = File(..., description="Plain-text policy, one clause per line"),
) -> dict:
    """Replace the active policy with the uploaded document."""
    try:
        raw = await policy.read()
    finally:
        await policy.close()

    clauses = split_clauses(raw.decode("utf-8", errors="replace"))
    if not clauses:
        raise HTTPException(status_code=400, detail="Uploaded policy contains no clauses.")

    request.app.state.policy = ActivePolicy(doc_id=UPLOADED_DOC_ID, clauses=clauses)
    logger.info(
        "Policy {name} uploaded — {n} clauses",
        name=policy.filename,
        n=len(clauses),
    )
    return {"ok": True, "doc_id": UPLOADED_DOC_ID, "clauses": len(clauses)}
