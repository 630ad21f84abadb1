"""
Layout helpers for the Streamlit application (page setup, filter controls).
"""

from __future__ import annotations

from typing import List

import streamlit as st

from promise_tracker.config import ALL, SCORE_PILL_COLORS
from promise_tracker.data.filters import FilterCriteria
from promise_tracker.data.status import status_label, status_options


def setup_page(title: str = "Promise Tracker") -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=title,
        layout="wide",
        page_icon=":ballot_box_with_check:",
    )


def score_pill(label: str) -> None:
    background, color = SCORE_PILL_COLORS[label]
    st.markdown(
        f'<span style="background:{background};color:{color};padding:2px 12px;'
        f'border-radius:999px;font-weight:600;">{label}</span>',
        unsafe_allow_html=True,
    )


def filter_controls_ui(categories: List[str], key_prefix: str = "pt") -> FilterCriteria:
    """Search box plus category and status selectors, laid out in one row."""
    col_search, col_category, col_status = st.columns([2, 1, 1])
    with col_search:
        query = st.text_input(
            "Search promises",
            key=f"{key_prefix}_search",
            placeholder="Search by promise or category",
        )
    with col_category:
        category = st.selectbox(
            "Category",
            options=[ALL] + categories,
            format_func=lambda v: "All categories" if v == ALL else (v or "(none)"),
            key=f"{key_prefix}_category",
        )
    with col_status:
        labels = dict(status_options())
        status = st.selectbox(
            "Status",
            options=list(labels),
            format_func=lambda v: labels.get(v, v),
            key=f"{key_prefix}_status",
        )
    return FilterCriteria(query=query or "", category=category, status=status)


def active_filter_summary(criteria: FilterCriteria) -> str:
    if criteria.is_empty:
        return "Active Filters: All promises"
    badges = []
    query = criteria.normalized().query
    if query:
        badges.append(f'Search: "{query}"')
    if criteria.category != ALL:
        badges.append(f"Category: {criteria.category or '(none)'}")
    if criteria.status != ALL:
        badges.append(f"Status: {status_label(criteria.status)}")
    return "Active Filters: " + " | ".join(badges)
