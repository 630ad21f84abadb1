from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from promise_tracker.data.metrics import CardMetrics
from promise_tracker.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    icon: str = ""
    help_text: Optional[str] = None


CARD_ICONS = {
    "Total Promises": "◎",
    "In Progress": "◷",
    "Completed": "✓",
    "Broken": "✕",
}


def cards_from_metrics(metrics: CardMetrics) -> List[KpiCard]:
    return [KpiCard(label=label, value=value, icon=CARD_ICONS.get(label, "")) for label, value in metrics.as_cards()]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No promises to summarise.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                label = f"{card.icon} {card.label}" if card.icon else card.label
                st.metric(label=label, value=format_number(card.value))
                if card.help_text:
                    st.caption(card.help_text)
