"""
Aggregate statistics over a page's working data set.

All functions are pure: they depend only on the frame they are given and an
explicit ``now``, so the same snapshot always yields the same numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import pandas as pd

from municipal_dashboard.api.models import ApiStats
from municipal_dashboard.config import DEFAULT_TIMEZONE

ONLINE_WINDOW = pd.Timedelta(minutes=30)


def local_now(timezone: str = DEFAULT_TIMEZONE) -> pd.Timestamp:
    return pd.Timestamp.now(tz=timezone)


def _aware(now: pd.Timestamp) -> pd.Timestamp:
    now = pd.Timestamp(now)
    return now.tz_localize("UTC") if now.tzinfo is None else now


def _dates(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df:
        return pd.Series(pd.NaT, index=df.index, dtype="datetime64[ns, UTC]")
    return pd.to_datetime(df[column], utc=True, errors="coerce", format="ISO8601")


def _count(df: pd.DataFrame, column: str, value: str) -> int:
    if df.empty or column not in df:
        return 0
    return int((df[column] == value).sum())


def month_start(now: pd.Timestamp) -> pd.Timestamp:
    """Midnight of the first day of ``now``'s month, in ``now``'s timezone."""
    now = _aware(now)
    return now.normalize().replace(day=1)


def count_new_this_month(df: pd.DataFrame, now: pd.Timestamp) -> int:
    if df.empty:
        return 0
    created = _dates(df, "created_at")
    return int((created >= month_start(now)).sum())


def count_online_now(df: pd.DataFrame, now: pd.Timestamp, window: pd.Timedelta = ONLINE_WINDOW) -> int:
    if df.empty:
        return 0
    last_login = _dates(df, "last_login")
    return int((last_login >= _aware(now) - window).sum())


@dataclass(frozen=True)
class ReportStats:
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    resolved: int = 0
    closed: int = 0
    new_this_month: int = 0
    by_category: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class UserStats:
    total_users: int = 0
    active_users: int = 0
    new_this_month: int = 0
    online_now: int = 0


@dataclass(frozen=True)
class NoticeStats:
    total: int = 0
    published: int = 0
    draft: int = 0
    archived: int = 0
    active: int = 0


@dataclass(frozen=True)
class EventStats:
    total: int = 0
    upcoming: int = 0
    past: int = 0
    over_capacity: int = 0


@dataclass(frozen=True)
class OverviewStats:
    total_reports: Optional[int] = None
    pending_reports: Optional[int] = None
    resolved_reports: Optional[int] = None
    total_notices: Optional[int] = None
    total_events: Optional[int] = None

    @classmethod
    def from_api(cls, stats: ApiStats) -> "OverviewStats":
        return cls(
            total_reports=stats.reports_total,
            pending_reports=stats.reports_pending,
            resolved_reports=stats.reports_resolved,
            total_notices=stats.notices_total,
            total_events=stats.events_total,
        )


def category_counts(df: pd.DataFrame) -> Dict[str, int]:
    if df.empty or "category" not in df:
        return {}
    counts = df["category"].dropna().value_counts()
    return {str(k): int(v) for k, v in counts.items()}


def report_stats(df: pd.DataFrame, now: pd.Timestamp) -> ReportStats:
    return ReportStats(
        total=int(len(df)),
        pending=_count(df, "status", "pending"),
        in_progress=_count(df, "status", "in_progress"),
        resolved=_count(df, "status", "resolved"),
        closed=_count(df, "status", "closed"),
        new_this_month=count_new_this_month(df, now),
        by_category=category_counts(df),
    )


def user_stats(df: pd.DataFrame, now: pd.Timestamp) -> UserStats:
    return UserStats(
        total_users=int(len(df)),
        active_users=_count(df, "status", "active"),
        new_this_month=count_new_this_month(df, now),
        online_now=count_online_now(df, now),
    )


def notice_stats(df: pd.DataFrame, now: pd.Timestamp) -> NoticeStats:
    if df.empty:
        return NoticeStats()
    now = _aware(now)
    valid_from = _dates(df, "valid_from")
    valid_until = _dates(df, "valid_until")
    active = (
        (df["status"] == "published")
        & (valid_from.isna() | (valid_from <= now))
        & (valid_until.isna() | (valid_until >= now))
    )
    return NoticeStats(
        total=int(len(df)),
        published=_count(df, "status", "published"),
        draft=_count(df, "status", "draft"),
        archived=_count(df, "status", "archived"),
        active=int(active.sum()),
    )


def event_stats(df: pd.DataFrame, now: pd.Timestamp) -> EventStats:
    if df.empty:
        return EventStats()
    start = _dates(df, "start_date")
    upcoming = start >= _aware(now)
    over_capacity = 0
    if {"max_participants", "current_participants"}.issubset(df.columns):
        cap = pd.to_numeric(df["max_participants"], errors="coerce")
        current = pd.to_numeric(df["current_participants"], errors="coerce").fillna(0)
        over_capacity = int((cap.notna() & (current > cap)).sum())
    return EventStats(
        total=int(len(df)),
        upcoming=int(upcoming.sum()),
        past=int((start.notna() & ~upcoming).sum()),
        over_capacity=over_capacity,
    )


def overview_stats(
    reports_df: Optional[pd.DataFrame],
    notices_df: Optional[pd.DataFrame],
    events_df: Optional[pd.DataFrame],
) -> OverviewStats:
    """Dashboard headline counts derived from whatever each page has loaded."""
    return OverviewStats(
        total_reports=int(len(reports_df)) if reports_df is not None else None,
        pending_reports=_count(reports_df, "status", "pending") if reports_df is not None else None,
        resolved_reports=_count(reports_df, "status", "resolved") if reports_df is not None else None,
        total_notices=int(len(notices_df)) if notices_df is not None else None,
        total_events=int(len(events_df)) if events_df is not None else None,
    )
