"""
Plotly figures for the dashboard, styled alike.
"""

from __future__ import annotations

from typing import Mapping, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

TEMPLATE = "plotly_white"
PALETTE = ["#4e73df", "#f6c23e", "#36b9cc", "#1cc88a", "#858796", "#e74a3b"]


def _style(fig: go.Figure, title: Optional[str]) -> go.Figure:
    fig.update_layout(
        template=TEMPLATE,
        colorway=PALETTE,
        title=title,
        showlegend=False,
        margin=dict(l=40, r=20, t=50 if title else 20, b=40),
    )
    fig.update_xaxes(showgrid=False, title=None)
    fig.update_yaxes(showgrid=True, zeroline=True, rangemode="tozero")
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def counts_frame(counts: Mapping[str, int], key: str, value: str = "Anzahl") -> pd.DataFrame:
    """Counts as a two-column frame, largest first; ties keep their input order."""
    frame = pd.DataFrame({key: list(counts.keys()), value: list(counts.values())})
    return frame.sort_values(value, ascending=False, kind="stable")


def bar_chart(df: pd.DataFrame, x: str, y: str, title: Optional[str] = None) -> go.Figure:
    fig = px.bar(df, x=x, y=y, color=x, text_auto=True)
    fig.update_traces(textposition="outside", cliponaxis=False)
    return _style(fig, title)
