"""Query input form with a few ready-made examples."""

from __future__ import annotations

import streamlit as st

SAMPLE_QUERIES: dict[str, str] = {
    "Knee surgery, 3-month policy": "46-year-old male, knee surgery in Pune, 3-month policy",
    "Knee surgery, 1-year policy": "46-year-old male, knee surgery in Pune, 12-month policy",
    "Cataract surgery": "62-year-old female, cataract surgery in Mumbai, 2-year policy",
    "Dental treatment": "30 year old, root canal treatment in Delhi, 8-month policy",
}


def render_query_form() -> str | None:
    """Render the query box and return the query once submitted.

    Returns
    -------
    str | None
        The stripped query, or ``None`` if the user has not submitted yet.
    """
    query = st.text_area(
        "Describe the claim",
        value=SAMPLE_QUERIES["Knee surgery, 3-month policy"],
        height=100,
        key="form_query",
        help="Age, procedure, location and policy age in plain words.",
    )

    if st.button("🚀 Check Eligibility", key="btn_query", type="primary", use_container_width=True):
        if not query.strip():
            st.error("Type a query first.")
            return None
        return query.strip()

    return None
