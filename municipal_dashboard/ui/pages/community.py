from __future__ import annotations

import streamlit as st

from municipal_dashboard.api.models import User
from municipal_dashboard.data.filters import apply_user_filters
from municipal_dashboard.data.stats import user_stats
from municipal_dashboard.ui.components.formatting import USER_STATUS_LABELS
from municipal_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from municipal_dashboard.ui.components.tables import add_link_columns, render_table
from municipal_dashboard.ui.layout import user_filters_ui
from municipal_dashboard.ui.pages.context import PageContext
from municipal_dashboard.ui.pages.helpers import ensure_loaded, render_source_notice, working_frame

COLUMNS = [
    "display_name",
    "username",
    "email",
    "roles",
    "status",
    "created_at",
    "last_login",
    "view_url",
    "edit_url",
]

HEADERS = {
    "display_name": "Name",
    "username": "Benutzername",
    "email": "E-Mail",
    "roles": "Rollen",
    "status": "Status",
    "created_at": "Registriert",
    "last_login": "Letzter Login",
    "view_url": "Ansehen",
    "edit_url": "Bearbeiten",
}

COLUMN_CONFIG = {
    "roles": {"type": "roles"},
    "status": {"type": "label", "labels": USER_STATUS_LABELS},
    "created_at": {"type": "date"},
    "last_login": {"type": "date", "missing": "Nie"},
}


def render(context: PageContext) -> None:
    st.subheader("Gemeinschaftsübersicht")
    st.caption("Verwalte Benutzer und Gemeinschaftsaktivitäten")

    controller = context.controllers["community"]
    filters = user_filters_ui()

    state = ensure_loaded(controller, filters)
    if not render_source_notice(state):
        return

    df = working_frame(state, User)
    stats = user_stats(df, context.now)
    render_kpi_cards(
        [
            KpiCard("Gesamte Benutzer", stats.total_users),
            KpiCard("Aktive Benutzer", stats.active_users),
            KpiCard("Neu diesen Monat", stats.new_this_month),
            KpiCard("Jetzt online", stats.online_now, help_text="Login in den letzten 30 Minuten"),
        ],
        sample=state.is_sample,
    )

    filtered = apply_user_filters(df, filters)
    st.markdown(f"#### Benutzer ({len(filtered)})")
    render_table(
        add_link_columns(filtered, context.settings.base_path, "community/users"),
        COLUMNS,
        HEADERS,
        COLUMN_CONFIG,
        export_file_name="benutzer.csv",
        timezone=context.settings.timezone,
    )
