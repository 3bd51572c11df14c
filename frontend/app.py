"""Streamlit frontend — Claim Eligibility Checker.

Run with::

    streamlit run frontend/app.py --server.port 8501
"""

from __future__ import annotations

import json

import streamlit as st
from api_client import APIError, EligibilityAPIClient
from components.justification_viewer import render_justification
from components.query_form import SAMPLE_QUERIES, render_query_form
from components.result_card import render_result_card
from styles import inject_global_styles, render_header

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Claim Eligibility Checker",
    page_icon="🛡️",
    layout="wide",
    initial_sidebar_state="expanded",
)

inject_global_styles()

if "history" not in st.session_state:
    st.session_state.history: list[dict] = []

client = EligibilityAPIClient()

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.markdown("### ⚙️ Policy")

    try:
        health = client.health_check()
        st.success(
            f"Connected — `{health.get('policy', '?')}` ({health.get('clauses', 0)} clauses)"
        )
    except APIError as exc:
        st.error(f"API error: {exc}")

    if st.button("Load Sample Policy", key="btn_sample"):
        try:
            loaded = client.load_sample_policy()
            st.info(f"Loaded `{loaded['doc_id']}` — {loaded['clauses']} clauses")
        except APIError as exc:
            st.error(f"Could not load sample: {exc}")

    uploaded = st.file_uploader("Upload policy (.txt)", type=["txt"], key="policy_upload")
    if uploaded is not None and st.button("Use Uploaded Policy", key="btn_upload"):
        try:
            loaded = client.upload_policy(uploaded.name, uploaded.getvalue())
            st.info(f"Loaded `{loaded['doc_id']}` — {loaded['clauses']} clauses")
        except APIError as exc:
            st.error(f"Upload failed: {exc}")

    st.divider()

    st.markdown("**Quick Load Sample Query**")
    sample_choice = st.selectbox(
        "Select a sample",
        options=["— Select —"] + list(SAMPLE_QUERIES.keys()),
        key="sample_select",
    )
    if sample_choice != "— Select —":
        st.session_state["form_query"] = SAMPLE_QUERIES[sample_choice]

    if st.session_state.history:
        st.divider()
        st.markdown("**📜 History**")
        for entry in reversed(st.session_state.history):
            status = "✅" if entry["decision"].get("Decision") == "Approved" else "❌"
            st.caption(f"{status} {entry['query'][:60]}")

        if st.button("Clear History", key="btn_clear"):
            st.session_state.history = []
            st.rerun()

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

render_header()

st.markdown("### Ask About a Claim")
query = render_query_form()

if query is not None:
    with st.spinner("Checking eligibility…"):
        try:
            result = client.process_query(query)
        except APIError as exc:
            st.error(f"API returned an error: {exc}")
            result = None

    if result is not None:
        st.session_state.history.append({"query": query, "decision": result})

        st.divider()
        st.markdown("### Decision")
        render_result_card(result)
        render_justification(result)

        with st.expander("{ } Raw Response", expanded=False):
            st.code(json.dumps(result, indent=2), language="json")

elif not st.session_state.history:
    st.markdown(
        """
        <div class="card" style="text-align:center; padding:3rem;">
            <h3 style="color:#7f8c8d;">No queries checked yet</h3>
            <p>Describe a claim above or pick a sample query from the sidebar.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
