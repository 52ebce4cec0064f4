"""
Layout helpers for the Streamlit application (page setup, sidebar and the
per-page filter rows).
"""

from __future__ import annotations

from typing import Dict, List, Optional

import streamlit as st

from municipal_dashboard.api.models import (
    EVENT_STATUSES,
    NOTICE_PRIORITIES,
    NOTICE_STATUSES,
    REPORT_STATUSES,
    USER_STATUSES,
)
from municipal_dashboard.config import Settings
from municipal_dashboard.data.filters import EventFilters, NoticeFilters, ReportFilters, UserFilters
from municipal_dashboard.ui.components.formatting import (
    EVENT_STATUS_LABELS,
    NOTICE_STATUS_LABELS,
    PRIORITY_LABELS,
    REPORT_STATUS_LABELS,
    ROLE_LABELS,
    USER_STATUS_LABELS,
)

ALL = ""
UPCOMING_OPTIONS = {"Alle Termine": None, "Bevorstehend": True, "Vergangen": False}


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Aukrug Verwaltungsdashboard",
        layout="wide",
        page_icon=":classical_building:",
    )


def sidebar(settings: Settings) -> bool:
    """Render the sidebar; returns True when the user asked for a reload."""
    st.sidebar.header("Aukrug Verwaltung")
    st.sidebar.caption(f"API: `{settings.api_url}`")
    if settings.use_sample_data:
        st.sidebar.caption("Beispieldaten bei API-Fehlern: aktiv")
    reload_requested = st.sidebar.button("🔄 Daten neu laden", key="md_reload")
    if st.sidebar.button("Filter zurücksetzen", key="md_reset_filters", type="primary"):
        _clear_state_prefixes(["md_reports_", "md_notices_", "md_events_", "md_community_"])
        st.rerun()
    return reload_requested


def _select(label: str, key: str, options: List[str], labels: Dict[str, str], all_label: str) -> Optional[str]:
    choice = st.selectbox(
        label,
        options=[ALL] + list(options),
        key=key,
        format_func=lambda v: all_label if v == ALL else labels.get(v, v),
    )
    return choice or None


def _search(key: str, placeholder: str) -> Optional[str]:
    term = st.text_input("Suche", key=key, placeholder=placeholder).strip()
    return term or None


def report_filters_ui(categories: List[str]) -> ReportFilters:
    col_status, col_category, col_search = st.columns(3)
    with col_status:
        status = _select("Status", "md_reports_status", list(REPORT_STATUSES), REPORT_STATUS_LABELS, "Alle Status")
    with col_category:
        category = _select("Kategorie", "md_reports_category", categories, {}, "Alle Kategorien")
    with col_search:
        search = _search("md_reports_search", "Titel, Beschreibung oder Kategorie")
    return ReportFilters(status=status, category=category, search=search)


def user_filters_ui() -> UserFilters:
    col_role, col_status, col_search = st.columns(3)
    with col_role:
        role = _select("Rolle", "md_community_role", list(ROLE_LABELS), ROLE_LABELS, "Alle Rollen")
    with col_status:
        status = _select("Status", "md_community_status", list(USER_STATUSES), USER_STATUS_LABELS, "Alle Status")
    with col_search:
        search = _search("md_community_search", "Name, Benutzername oder E-Mail")
    return UserFilters(role=role, status=status, search=search)


def notice_filters_ui(categories: List[str]) -> NoticeFilters:
    col_status, col_priority, col_category, col_search = st.columns(4)
    with col_status:
        status = _select("Status", "md_notices_status", list(NOTICE_STATUSES), NOTICE_STATUS_LABELS, "Alle Status")
    with col_priority:
        priority = _select(
            "Priorität", "md_notices_priority", list(NOTICE_PRIORITIES), PRIORITY_LABELS, "Alle Prioritäten"
        )
    with col_category:
        category = _select("Kategorie", "md_notices_category", categories, {}, "Alle Kategorien")
    with col_search:
        search = _search("md_notices_search", "Titel oder Inhalt")
    return NoticeFilters(status=status, priority=priority, category=category, search=search)


def event_filters_ui() -> EventFilters:
    col_status, col_when, col_search = st.columns(3)
    with col_status:
        status = _select("Status", "md_events_status", list(EVENT_STATUSES), EVENT_STATUS_LABELS, "Alle Status")
    with col_when:
        when = st.selectbox("Zeitraum", options=list(UPCOMING_OPTIONS), key="md_events_upcoming")
    with col_search:
        search = _search("md_events_search", "Titel, Beschreibung oder Ort")
    return EventFilters(status=status, upcoming=UPCOMING_OPTIONS[when], search=search)


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]
