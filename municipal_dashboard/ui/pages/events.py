from __future__ import annotations

import pandas as pd
import streamlit as st

from municipal_dashboard.api.models import Event
from municipal_dashboard.data.filters import apply_event_filters
from municipal_dashboard.data.stats import event_stats
from municipal_dashboard.ui.components.formatting import EVENT_STATUS_LABELS
from municipal_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from municipal_dashboard.ui.components.tables import add_link_columns, render_table
from municipal_dashboard.ui.layout import event_filters_ui
from municipal_dashboard.ui.pages.context import PageContext
from municipal_dashboard.ui.pages.helpers import ensure_loaded, render_source_notice, working_frame

COLUMNS = [
    "id",
    "title",
    "start_date",
    "location",
    "organizer",
    "status",
    "participants",
    "view_url",
    "edit_url",
]

HEADERS = {
    "id": "ID",
    "title": "Titel",
    "start_date": "Beginn",
    "location": "Ort",
    "organizer": "Veranstalter",
    "status": "Status",
    "participants": "Teilnehmer",
    "view_url": "Ansehen",
    "edit_url": "Bearbeiten",
}

COLUMN_CONFIG = {
    "start_date": {"type": "datetime"},
    "status": {"type": "label", "labels": EVENT_STATUS_LABELS},
}


def _participants(row: pd.Series) -> str:
    current = int(row.get("current_participants") or 0)
    cap = row.get("max_participants")
    if cap is None or pd.isna(cap):
        return str(current)
    text = f"{current} / {int(cap)}"
    if current > cap:
        text += " ⚠️"
    return text


def render(context: PageContext) -> None:
    st.subheader("Veranstaltungen")
    st.link_button("➕ Neue Veranstaltung", f"{context.settings.base_path}/events/new")

    controller = context.controllers["events"]
    filters = event_filters_ui()

    state = ensure_loaded(controller, filters)
    if not render_source_notice(state):
        return

    df = working_frame(state, Event)
    stats = event_stats(df, context.now)
    render_kpi_cards(
        [
            KpiCard("Gesamt", stats.total),
            KpiCard("Bevorstehend", stats.upcoming),
            KpiCard("Vergangen", stats.past),
            KpiCard("Überbucht", stats.over_capacity, help_text="Mehr Teilnehmer als Plätze"),
        ],
        sample=state.is_sample,
    )
    if stats.over_capacity:
        st.warning(f"{stats.over_capacity} Veranstaltung(en) haben mehr Anmeldungen als Plätze.")

    filtered = apply_event_filters(df, filters, now=context.now)
    if not filtered.empty:
        filtered = filtered.assign(participants=filtered.apply(_participants, axis=1))
    st.markdown(f"#### Veranstaltungen ({len(filtered)})")
    render_table(
        add_link_columns(filtered, context.settings.base_path, "events"),
        COLUMNS,
        HEADERS,
        COLUMN_CONFIG,
        export_file_name="veranstaltungen.csv",
        timezone=context.settings.timezone,
    )
