"""Streamlit frontend components."""

from components.justification_viewer import render_justification
from components.query_form import render_query_form
from components.result_card import render_result_card

__all__ = ["render_justification", "render_query_form", "render_result_card"]
