import municipal_dashboard.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from municipal_dashboard.api.client import ApiClient
from municipal_dashboard.config import TABS, get_settings
from municipal_dashboard.data.stats import local_now
from municipal_dashboard.logging_config import setup_logging
from municipal_dashboard.ui.layout import setup_page, sidebar
from municipal_dashboard.ui.pages import community, events, notices, overview, reports
from municipal_dashboard.ui.pages.context import PageContext, build_controllers


PAGE_RENDERERS = {
    "overview": overview.render,
    "reports": reports.render,
    "notices": notices.render,
    "events": events.render,
    "community": community.render,
}


@st.cache_resource(show_spinner=False)
def _api_client() -> ApiClient:
    return ApiClient()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    setup_page()
    st.title("Aukrug Verwaltungsdashboard")

    client = _api_client()
    if sidebar(settings) or "md_controllers" not in st.session_state:
        st.session_state["md_controllers"] = build_controllers(client, settings)

    context = PageContext(
        settings=settings,
        client=client,
        now=local_now(settings.timezone),
        controllers=st.session_state["md_controllers"],
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
