"""
Promise table rendering and export.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from promise_tracker.data.records import PromiseRecord, records_to_frame
from promise_tracker.data.status import status_label


def promises_display_frame(promises: Sequence[PromiseRecord]) -> pd.DataFrame:
    display = records_to_frame(promises)
    if not display.empty:
        display["status"] = display["status"].map(status_label)
    return display


def render_promise_table(
    promises: Sequence[PromiseRecord],
    height: int = 500,
    export_file_name: str = "promises_filtered.csv",
) -> None:
    if not promises:
        st.info("No promises match the current filters.")
        return

    display_df = promises_display_frame(promises)
    st.dataframe(
        display_df,
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config={
            "promise": st.column_config.TextColumn("Promise", width="large"),
            "category": st.column_config.TextColumn("Category"),
            "status": st.column_config.TextColumn("Status"),
            "deadline": st.column_config.TextColumn("Deadline"),
            "source_url": st.column_config.LinkColumn("Source", display_text="link"),
        },
    )

    csv_bytes = records_to_frame(promises).to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
