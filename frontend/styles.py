"""CSS for the Streamlit page: header banner, decision badges, metric and clause cards."""

from __future__ import annotations

import streamlit as st

_ACCENT = "#2471a3"
_APPROVED = "#1e8449"
_APPROVED_BG = "#e9f7ef"
_REJECTED = "#b03a2e"
_REJECTED_BG = "#fdedec"
_PANEL = "#f4f6f7"
_BORDER = "#d5dbdb"
_MUTED = "#7f8c8d"


def _build_css() -> str:
    return f"""
<style>
.app-header {{
    background: linear-gradient(120deg, #154360 0%, {_ACCENT} 100%);
    color: white;
    padding: 1.4rem 2rem;
    border-radius: 10px;
    margin-bottom: 1.2rem;
}}
.app-header h1 {{ margin: 0; font-size: 1.7rem; }}
.app-header p {{ margin: 0.3rem 0 0 0; opacity: 0.85; }}

.card {{
    border: 1px solid {_BORDER};
    border-radius: 10px;
    padding: 1.3rem;
    margin: 1rem 0;
}}

.badge-approved, .badge-denied {{
    display: inline-block;
    font-weight: 700;
    padding: 0.35rem 1.1rem;
    border-radius: 20px;
}}
.badge-approved {{ background: {_APPROVED_BG}; color: {_APPROVED}; border: 2px solid {_APPROVED}; }}
.badge-denied {{ background: {_REJECTED_BG}; color: {_REJECTED}; border: 2px solid {_REJECTED}; }}

.metric-card {{
    background: {_PANEL};
    border-radius: 8px;
    padding: 0.9rem 1.1rem;
    text-align: center;
}}
.metric-card .label {{
    font-size: 0.78rem;
    color: {_MUTED};
    text-transform: uppercase;
    letter-spacing: 0.05em;
}}
.metric-card .value {{ font-size: 1.35rem; font-weight: 700; }}

.clause-step {{
    background: {_PANEL};
    border-left: 3px solid {_ACCENT};
    padding: 0.7rem 1rem;
    margin: 0.45rem 0;
    border-radius: 0 6px 6px 0;
}}
</style>
"""


def inject_global_styles() -> None:
    """Inject the page CSS."""
    st.markdown(_build_css(), unsafe_allow_html=True)


def render_header() -> None:
    st.markdown(
        """
        <div class="app-header">
            <h1>🛡️ Claim Eligibility Checker</h1>
            <p>Policy clause matching, waiting periods &amp; payable limits</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
