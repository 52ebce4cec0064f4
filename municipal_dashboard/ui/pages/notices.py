from __future__ import annotations

import streamlit as st

from municipal_dashboard.api.models import Notice
from municipal_dashboard.data.filters import apply_notice_filters, notice_category_options
from municipal_dashboard.data.stats import notice_stats
from municipal_dashboard.ui.components.formatting import NOTICE_STATUS_LABELS, PRIORITY_LABELS
from municipal_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from municipal_dashboard.ui.components.tables import add_link_columns, render_table
from municipal_dashboard.ui.layout import notice_filters_ui
from municipal_dashboard.ui.pages.context import PageContext
from municipal_dashboard.ui.pages.helpers import ensure_loaded, render_source_notice, working_frame

COLUMNS = [
    "id",
    "title",
    "categories",
    "status",
    "priority",
    "author",
    "valid_from",
    "valid_until",
    "view_url",
    "edit_url",
]

HEADERS = {
    "id": "ID",
    "title": "Titel",
    "categories": "Kategorien",
    "status": "Status",
    "priority": "Priorität",
    "author": "Autor",
    "valid_from": "Gültig ab",
    "valid_until": "Gültig bis",
    "view_url": "Ansehen",
    "edit_url": "Bearbeiten",
}

COLUMN_CONFIG = {
    "categories": {"type": "set"},
    "status": {"type": "label", "labels": NOTICE_STATUS_LABELS},
    "priority": {"type": "label", "labels": PRIORITY_LABELS},
    "valid_from": {"type": "date"},
    "valid_until": {"type": "date", "missing": "unbegrenzt"},
}


def render(context: PageContext) -> None:
    st.subheader("Bekanntmachungen")
    st.link_button("➕ Neue Bekanntmachung", f"{context.settings.base_path}/notices/new")

    controller = context.controllers["notices"]
    previous = working_frame(controller.state, Notice)
    filters = notice_filters_ui(notice_category_options(previous))

    state = ensure_loaded(controller, filters)
    if not render_source_notice(state):
        return

    df = working_frame(state, Notice)
    stats = notice_stats(df, context.now)
    render_kpi_cards(
        [
            KpiCard("Gesamt", stats.total),
            KpiCard("Veröffentlicht", stats.published),
            KpiCard("Aktuell gültig", stats.active),
            KpiCard("Entwürfe", stats.draft),
        ],
        sample=state.is_sample,
    )

    filtered = apply_notice_filters(df, filters)
    st.markdown(f"#### Bekanntmachungen ({len(filtered)})")
    render_table(
        add_link_columns(filtered, context.settings.base_path, "notices"),
        COLUMNS,
        HEADERS,
        COLUMN_CONFIG,
        export_file_name="bekanntmachungen.csv",
        timezone=context.settings.timezone,
    )
