"""
Plotly figures for the accountability score.
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from promise_tracker.config import SCORE_COLORS
from promise_tracker.data.metrics import ScoreResult, classify_score

DEFAULT_TEMPLATE = "plotly_white"
TRACK_COLOR = "#e8eef7"


def score_color(pct: float) -> str:
    return SCORE_COLORS[classify_score(pct)]


def score_gauge(score: ScoreResult) -> go.Figure:
    color = score_color(score.pct)
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=score.pct,
            number={"suffix": "%"},
            gauge={
                "axis": {"range": [0, 100], "visible": False},
                "bar": {"color": color, "thickness": 1.0},
                "bgcolor": TRACK_COLOR,
                "borderwidth": 0,
            },
        )
    )
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        height=240,
        margin=dict(l=20, r=20, t=20, b=0),
    )
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
