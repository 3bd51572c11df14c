"""Justification viewer — the cited clauses, best match first."""

from __future__ import annotations

from typing import Any

from html import escape

import streamlit as st


def render_justification(decision: dict[str, Any]) -> None:
    """Render the justification trail in an expander."""
    cited = decision.get("Justification", [])

    with st.expander(f"🔍 Matched Clauses ({len(cited)})", expanded=bool(cited)):
        if not cited:
            st.caption("No policy clause matched the query.")
            return

        for entry in cited:
            st.markdown(
                f"""
                <div class="clause-step">
                    <small style="color:#7f8c8d;">
                        {entry.get('doc_id', 'policy')} • score {entry.get('score', 0):.3f}
                    </small>
                    <br/>{escape(entry.get('text', ''))}
                </div>
                """,
                unsafe_allow_html=True,
            )
