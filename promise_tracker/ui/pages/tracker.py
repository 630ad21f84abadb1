from __future__ import annotations

import streamlit as st

from promise_tracker.data.filters import serialize_criteria
from promise_tracker.ui.components.charts import render_plotly, score_gauge
from promise_tracker.ui.components.formatting import escape_markdown, format_number
from promise_tracker.ui.components.kpi import cards_from_metrics, render_kpi_cards
from promise_tracker.ui.components.tables import render_promise_table
from promise_tracker.ui.layout import active_filter_summary, filter_controls_ui, score_pill
from promise_tracker.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    model = context.model

    render_kpi_cards(cards_from_metrics(model.cards))

    st.subheader("Accountability Score")
    col_gauge, col_text = st.columns([1, 2])
    with col_gauge:
        render_plotly(score_gauge(model.score))
    with col_text:
        score_pill(model.score.label)
        st.caption(model.score.description)

    st.subheader("Promises")
    criteria = filter_controls_ui(model.categories)
    visible = model.update(criteria)
    st.session_state["pt_active_filters"] = serialize_criteria(criteria)
    st.markdown(f"**{escape_markdown(active_filter_summary(criteria))}**")
    st.caption(f"Showing {format_number(len(visible))} of {format_number(model.cards.total)} promises.")
    render_promise_table(visible)
