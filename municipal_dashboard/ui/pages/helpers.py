from __future__ import annotations

from typing import Any, Optional

import pandas as pd
import streamlit as st

from municipal_dashboard.data.loader import PageController, PageState, records_to_frame


def ensure_loaded(controller: PageController, filters: Any) -> PageState:
    """Run the controller's load on first render and whenever the filters change."""
    if controller.needs_load(filters):
        with st.spinner("Laden..."):
            controller.load(filters)
    return controller.state


def working_frame(state: PageState, record_type: Optional[type] = None) -> pd.DataFrame:
    return records_to_frame(state.records, record_type)


def render_source_notice(state: PageState) -> bool:
    """
    Show where the current data came from. Returns False when there is
    nothing to render below the notice.
    """
    if state.is_sample:
        st.warning(
            f"Beispieldaten: Die API ist nicht erreichbar ({state.error}). "
            "Die angezeigten Einträge sind keine echten Daten."
        )
        return True
    if state.error:
        st.error(f"Daten konnten nicht geladen werden: {state.error}")
        return False
    return True
