"""Policy documents: splitting plain text into clauses and loading files."""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

SAMPLE_POLICY_PATH = Path(__file__).resolve().parent.parent / "data" / "policy_sample.txt"
SAMPLE_DOC_ID = "policy_sample"
UPLOADED_DOC_ID = "policy_uploaded"

_LINE_BREAK = re.compile(r"\r?\n")


def split_clauses(text: str) -> list[str]:
    """Split a policy document into clauses, one per non-blank line."""
    lines = (line.strip() for line in _LINE_BREAK.split(text))
    return [line for line in lines if line]


def load_policy_clauses(path: str | Path | None = None) -> list[str]:
    """Read a plain-text policy file and return its clauses.

    Parameters
    ----------
    path:
        Policy file to read. ``None`` or an empty string selects the sample
        policy shipped with the package.

    Raises
    ------
    FileNotFoundError
        If the policy file does not exist.
    """
    policy_file = Path(path) if path else SAMPLE_POLICY_PATH
    if not policy_file.exists():
        msg = f"Policy file not found: {policy_file}"
        logger.error(msg)
        raise FileNotFoundError(msg)

    clauses = split_clauses(policy_file.read_text(encoding="utf-8"))
    logger.info(
        "Loaded {n} clauses from {path}",
        n=len(clauses),
        path=policy_file,
    )
    return clauses
