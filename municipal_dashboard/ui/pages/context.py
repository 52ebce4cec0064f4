from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from municipal_dashboard.api.client import ApiClient
from municipal_dashboard.api.models import Event, Notice, Report
from municipal_dashboard.config import Settings
from municipal_dashboard.data.filters import EventFilters, NoticeFilters, ReportFilters
from municipal_dashboard.data.loader import PageController, records_to_frame
from municipal_dashboard.data.sample_data import (
    SAMPLE_EVENTS,
    SAMPLE_NOTICES,
    SAMPLE_REPORTS,
    SAMPLE_USERS,
)
from municipal_dashboard.data.stats import OverviewStats, overview_stats

# Controllers owned by the overview; list-page filters never reach them
OVERVIEW_FILTERS = {
    "overview_reports": ReportFilters(),
    "overview_notices": NoticeFilters(),
    "overview_events": EventFilters(),
}


def build_controllers(client: ApiClient, settings: Settings) -> Dict[str, PageController]:
    """One controller per list page, keyed like the tabs in `config.TABS`, plus the overview's own."""
    sample = settings.use_sample_data
    return {
        "reports": PageController("Reports", client.get_reports, SAMPLE_REPORTS, sample),
        "notices": PageController("Notices", client.get_notices, SAMPLE_NOTICES, sample),
        "events": PageController("Events", client.get_events, SAMPLE_EVENTS, sample),
        "community": PageController("Users", client.get_users, SAMPLE_USERS, sample),
        "overview_reports": PageController("Overview reports", client.get_reports, SAMPLE_REPORTS, sample),
        "overview_notices": PageController("Overview notices", client.get_notices, SAMPLE_NOTICES, sample),
        "overview_events": PageController("Overview events", client.get_events, SAMPLE_EVENTS, sample),
    }


def pending_overview_loads(controllers: Dict[str, PageController]) -> List[str]:
    return [key for key in OVERVIEW_FILTERS if controllers[key].needs_load(OVERVIEW_FILTERS[key])]


def load_overview(controllers: Dict[str, PageController]) -> None:
    for key in pending_overview_loads(controllers):
        controllers[key].load(OVERVIEW_FILTERS[key])


def overview_reports_frame(controllers: Dict[str, PageController]) -> pd.DataFrame:
    return records_to_frame(controllers["overview_reports"].state.records, Report)


def derived_overview_stats(controllers: Dict[str, PageController]) -> OverviewStats:
    """Headline counts over the unfiltered overview loads."""
    return overview_stats(
        overview_reports_frame(controllers),
        records_to_frame(controllers["overview_notices"].state.records, Notice),
        records_to_frame(controllers["overview_events"].state.records, Event),
    )


@dataclass
class PageContext:
    settings: Settings
    client: ApiClient
    now: pd.Timestamp
    controllers: Dict[str, PageController] = field(default_factory=dict)
