from __future__ import annotations

import streamlit as st

from municipal_dashboard.api.models import Report
from municipal_dashboard.data.filters import apply_report_filters, category_options
from municipal_dashboard.data.stats import report_stats
from municipal_dashboard.ui.components.formatting import PRIORITY_LABELS, REPORT_STATUS_LABELS
from municipal_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from municipal_dashboard.ui.components.tables import add_link_columns, render_table
from municipal_dashboard.ui.layout import report_filters_ui
from municipal_dashboard.ui.pages.context import PageContext
from municipal_dashboard.ui.pages.helpers import ensure_loaded, render_source_notice, working_frame

COLUMNS = [
    "id",
    "title",
    "category",
    "status",
    "priority",
    "location",
    "assigned_to",
    "created_at",
    "view_url",
    "edit_url",
]

HEADERS = {
    "id": "ID",
    "title": "Titel",
    "category": "Kategorie",
    "status": "Status",
    "priority": "Priorität",
    "location": "Ort",
    "assigned_to": "Zuständig",
    "created_at": "Erstellt",
    "view_url": "Ansehen",
    "edit_url": "Bearbeiten",
}

COLUMN_CONFIG = {
    "status": {"type": "label", "labels": REPORT_STATUS_LABELS},
    "priority": {"type": "label", "labels": PRIORITY_LABELS},
    "created_at": {"type": "date"},
}


def render(context: PageContext) -> None:
    st.subheader("Berichte verwalten")
    st.caption("Bürgermeldungen sichten, filtern und bearbeiten")
    st.link_button("➕ Neuer Bericht", f"{context.settings.base_path}/reports/new")

    controller = context.controllers["reports"]
    previous = working_frame(controller.state, Report)
    filters = report_filters_ui(category_options(previous))

    state = ensure_loaded(controller, filters)
    if not render_source_notice(state):
        return

    df = working_frame(state, Report)
    stats = report_stats(df, context.now)
    render_kpi_cards(
        [
            KpiCard("Gesamte Berichte", stats.total),
            KpiCard("Offen", stats.pending),
            KpiCard("In Bearbeitung", stats.in_progress),
            KpiCard("Erledigt", stats.resolved),
            KpiCard("Neu diesen Monat", stats.new_this_month),
        ],
        sample=state.is_sample,
    )

    filtered = apply_report_filters(df, filters)
    st.markdown(f"#### Berichte ({len(filtered)})")
    render_table(
        add_link_columns(filtered, context.settings.base_path, "reports"),
        COLUMNS,
        HEADERS,
        COLUMN_CONFIG,
        export_file_name="berichte.csv",
        timezone=context.settings.timezone,
    )
