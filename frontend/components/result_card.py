"""Result card — the decision, amount and extracted facts."""

from __future__ import annotations

from typing import Any

import streamlit as st


def render_result_card(decision: dict[str, Any]) -> None:
    """Render a decision document as a styled dashboard card.

    Parameters
    ----------
    decision:
        The ``ClaimDecision`` document returned by the API.
    """
    verdict = decision.get("Decision", "—")
    amount = decision.get("Amount", 0)
    reason = decision.get("Reason", "")
    approved = verdict == "Approved"

    if approved:
        badge = '<span class="badge-approved">✅ APPROVED</span>'
    else:
        badge = '<span class="badge-denied">❌ REJECTED</span>'

    st.markdown(
        f"""
        <div class="card">
            <div style="display:flex; justify-content:space-between; align-items:center;">
                <h3 style="margin:0;">Eligibility</h3>
                {badge}
            </div>
            <p style="margin:0.8rem 0 0 0;">{reason}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    amount_text = f"₹{amount:,}" if isinstance(amount, int) else str(amount)
    col1, col2 = st.columns(2)

    with col1:
        st.markdown(
            f"""
            <div class="metric-card">
                <div class="label">Amount</div>
                <div class="value" style="color: {'#27ae60' if approved else '#c0392b'}">
                    {amount_text}
                </div>
            </div>
            """,
            unsafe_allow_html=True,
        )

    with col2:
        required = decision.get("WaitingMonthsRequired")
        waiting_text = (
            f"{decision.get('PolicyMonths')} / {required} months" if required is not None else "—"
        )
        st.markdown(
            f"""
            <div class="metric-card">
                <div class="label">Waiting Period</div>
                <div class="value">{waiting_text}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )

    parsed = decision.get("ParsedQuery", {})
    if parsed:
        st.markdown("#### 🧾 Extracted Facts")
        st.table(
            {
                "field": list(parsed.keys()),
                "value": [_display(value) for value in parsed.values()],
            }
        )


def _display(value: Any) -> str:
    if value in (-1, ""):
        return "unknown"
    return str(value)
