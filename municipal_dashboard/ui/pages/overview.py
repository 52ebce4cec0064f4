from __future__ import annotations

from typing import Optional

import streamlit as st

from municipal_dashboard.data.stats import OverviewStats, category_counts
from municipal_dashboard.logging_config import get_logger
from municipal_dashboard.ui.components.charts import bar_chart, counts_frame, render_plotly
from municipal_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from municipal_dashboard.ui.pages.context import (
    PageContext,
    derived_overview_stats,
    load_overview,
    overview_reports_frame,
    pending_overview_loads,
)

logger = get_logger(__name__)


def _stats_from_endpoint(context: PageContext) -> Optional[OverviewStats]:
    response = context.client.get_stats()
    if response.success and response.data is not None:
        return OverviewStats.from_api(response.data)
    logger.warning(f"Stats endpoint unavailable, deriving counts from page data: {response.error}")
    return None


def _ensure_initial_loads(context: PageContext) -> None:
    if not pending_overview_loads(context.controllers):
        return
    with st.spinner("Laden..."):
        load_overview(context.controllers)


def render(context: PageContext) -> None:
    st.subheader("Dashboard")
    st.caption("Willkommen im Aukrug Verwaltungsdashboard")

    _ensure_initial_loads(context)
    reports = context.controllers["overview_reports"].state
    notices = context.controllers["overview_notices"].state
    events = context.controllers["overview_events"].state

    reports_df = overview_reports_frame(context.controllers)
    stats = _stats_from_endpoint(context) if context.settings.use_stats_endpoint else None
    derived = stats is None
    if derived:
        stats = derived_overview_stats(context.controllers)

    sample_sources = [name for name, state in (
        ("Berichte", reports),
        ("Bekanntmachungen", notices),
        ("Veranstaltungen", events),
    ) if state.is_sample]
    if sample_sources:
        st.warning("Beispieldaten für: " + ", ".join(sample_sources) + ". Die API ist nicht erreichbar.")

    render_kpi_cards(
        [
            KpiCard("Gesamte Berichte", stats.total_reports),
            KpiCard("Offene Berichte", stats.pending_reports),
            KpiCard("Erledigte Berichte", stats.resolved_reports),
            KpiCard("Bekanntmachungen", stats.total_notices),
            KpiCard("Veranstaltungen", stats.total_events),
        ],
        sample=derived and bool(sample_sources),
    )

    st.markdown("#### Berichte nach Kategorie")
    counts = category_counts(reports_df)
    if counts:
        render_plotly(bar_chart(counts_frame(counts, "Kategorie"), x="Kategorie", y="Anzahl"))
    else:
        st.info("Keine Berichte vorhanden.")

    st.markdown("#### Schnellaktionen")
    base = context.settings.base_path
    cols = st.columns(4)
    cols[0].link_button("Neuer Bericht", f"{base}/reports/new", use_container_width=True)
    cols[1].link_button("Neue Bekanntmachung", f"{base}/notices/new", use_container_width=True)
    cols[2].link_button("Neue Veranstaltung", f"{base}/events/new", use_container_width=True)
    cols[3].link_button("Einstellungen", f"{base}/settings", use_container_width=True)
