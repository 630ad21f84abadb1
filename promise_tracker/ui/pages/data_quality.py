from __future__ import annotations

import pandas as pd
import streamlit as st

from promise_tracker.data.quality import build_quality_overview, missing_values_summary
from promise_tracker.ui.components.formatting import format_number, format_percent
from promise_tracker.ui.components.kpi import KpiCard, render_kpi_cards
from promise_tracker.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    dataset = context.model.dataset
    st.subheader("Data Quality")

    overview = build_quality_overview(dataset)
    render_kpi_cards(
        [
            KpiCard("Records", overview["row_count"]),
            KpiCard(
                "Blank Promise Text",
                overview["blank_promise_count"],
                help_text="Rows whose promise text is empty or whitespace.",
            ),
            KpiCard(
                "Unrecognised Statuses",
                sum(overview["unknown_statuses"].values()),
                help_text="Shown with their raw code in the promise table.",
            ),
        ],
        columns=3,
    )

    missing = missing_values_summary(dataset)
    missing["missing_pct"] = missing["missing_pct"].apply(lambda v: format_percent(v, decimals=1))
    st.markdown("**Missing optional fields**")
    st.dataframe(missing, use_container_width=True, hide_index=True)

    if overview["unknown_statuses"]:
        st.markdown("**Unrecognised status codes** (shown verbatim in the table)")
        unknown = pd.DataFrame(
            list(overview["unknown_statuses"].items()),
            columns=["status", "count"],
        )
        st.dataframe(unknown, use_container_width=True, hide_index=True)

    st.caption(f"Data source: {context.settings.data_source} · {format_number(len(dataset))} records loaded.")
