from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from municipal_dashboard.ui.components.formatting import format_number

SAMPLE_BADGE = "Beispieldaten"


@dataclass(frozen=True)
class KpiCard:
    label: str
    value: Optional[int] = None
    help_text: Optional[str] = None


def render_kpi_cards(cards: Sequence[KpiCard], columns: Optional[int] = None, sample: bool = False) -> None:
    """
    Render count cards in one row (or rows of ``columns``). Cards computed
    from sample data carry a grey badge so they cannot pass for live figures.
    """
    cards = list(cards)
    if not cards:
        return

    per_row = max(columns or len(cards), 1)
    for start in range(0, len(cards), per_row):
        row = cards[start:start + per_row]
        for col, card in zip(st.columns(len(row)), row):
            col.metric(
                label=card.label,
                value=format_number(card.value),
                delta=SAMPLE_BADGE if sample else None,
                delta_color="off",
                help=card.help_text,
            )
