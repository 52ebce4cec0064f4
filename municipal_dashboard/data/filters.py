"""
Filter objects and the pure functions that apply them to a page's working
data set.

Every ``apply_*`` function is order-preserving and only ever removes rows:
a row survives when each active predicate accepts it, and an empty or
``None`` filter value places no constraint on its field.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

REPORT_SEARCH_COLUMNS = ("title", "description", "category")
USER_SEARCH_COLUMNS = ("display_name", "username", "email")
NOTICE_SEARCH_COLUMNS = ("title", "excerpt", "content")
EVENT_SEARCH_COLUMNS = ("title", "description", "location")


@dataclass(frozen=True)
class ReportFilters:
    status: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None
    limit: Optional[int] = None
    page: Optional[int] = None


@dataclass(frozen=True)
class UserFilters:
    role: Optional[str] = None
    status: Optional[str] = None
    search: Optional[str] = None
    limit: Optional[int] = None
    page: Optional[int] = None


@dataclass(frozen=True)
class NoticeFilters:
    status: Optional[str] = None
    priority: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None
    limit: Optional[int] = None
    page: Optional[int] = None


@dataclass(frozen=True)
class EventFilters:
    status: Optional[str] = None
    upcoming: Optional[bool] = None
    search: Optional[str] = None
    limit: Optional[int] = None
    page: Optional[int] = None


def serialize_filters(filters: Any) -> Dict[str, Any]:
    """
    Convert a filter dataclass to the dictionary of its defined values, in
    field declaration order. This is what the API client turns into a query
    string.
    """
    if filters is None:
        return {}
    if isinstance(filters, dict):
        items = filters.items()
    else:
        items = ((f.name, getattr(filters, f.name)) for f in fields(filters))
    return {key: value for key, value in items if value is not None and value != ""}


def _search_mask(df: pd.DataFrame, columns: Iterable[str], term: str) -> pd.Series:
    needle = term.lower()
    mask = pd.Series(False, index=df.index)
    for column in columns:
        if column in df:
            mask |= df[column].fillna("").astype(str).str.lower().str.contains(needle, regex=False)
    return mask


def _contains(series: pd.Series, value: str) -> pd.Series:
    return series.apply(lambda values: value in values if values is not None else False).astype(bool)


def apply_report_filters(df: pd.DataFrame, filters: ReportFilters) -> pd.DataFrame:
    if df.empty:
        return df
    filtered = df
    if filters.status and "status" in filtered:
        filtered = filtered[filtered["status"] == filters.status]
    if filters.category and "category" in filtered:
        filtered = filtered[filtered["category"] == filters.category]
    if filters.search:
        filtered = filtered[_search_mask(filtered, REPORT_SEARCH_COLUMNS, filters.search)]
    return filtered


def apply_user_filters(df: pd.DataFrame, filters: UserFilters) -> pd.DataFrame:
    if df.empty:
        return df
    filtered = df
    if filters.role and "roles" in filtered:
        filtered = filtered[_contains(filtered["roles"], filters.role)]
    if filters.status and "status" in filtered:
        filtered = filtered[filtered["status"] == filters.status]
    if filters.search:
        filtered = filtered[_search_mask(filtered, USER_SEARCH_COLUMNS, filters.search)]
    return filtered


def apply_notice_filters(df: pd.DataFrame, filters: NoticeFilters) -> pd.DataFrame:
    if df.empty:
        return df
    filtered = df
    if filters.status and "status" in filtered:
        filtered = filtered[filtered["status"] == filters.status]
    if filters.priority and "priority" in filtered:
        filtered = filtered[filtered["priority"] == filters.priority]
    if filters.category and "categories" in filtered:
        filtered = filtered[_contains(filtered["categories"], filters.category)]
    if filters.search:
        filtered = filtered[_search_mask(filtered, NOTICE_SEARCH_COLUMNS, filters.search)]
    return filtered


def apply_event_filters(
    df: pd.DataFrame,
    filters: EventFilters,
    now: Optional[pd.Timestamp] = None,
) -> pd.DataFrame:
    if df.empty:
        return df
    filtered = df
    if filters.status and "status" in filtered:
        filtered = filtered[filtered["status"] == filters.status]
    if filters.upcoming is not None and "start_date" in filtered:
        now = pd.Timestamp.now(tz="UTC") if now is None else pd.Timestamp(now)
        if now.tzinfo is None:
            now = now.tz_localize("UTC")
        start = pd.to_datetime(filtered["start_date"], utc=True, errors="coerce", format="ISO8601")
        if filters.upcoming:
            filtered = filtered[start >= now]
        else:
            filtered = filtered[start < now]
    if filters.search:
        filtered = filtered[_search_mask(filtered, EVENT_SEARCH_COLUMNS, filters.search)]
    return filtered


def category_options(df: pd.DataFrame) -> List[str]:
    """Distinct report categories of the working data set, for the category selector."""
    if df.empty or "category" not in df:
        return []
    return sorted(c for c in df["category"].dropna().unique().tolist() if c)


def notice_category_options(df: pd.DataFrame) -> List[str]:
    if df.empty or "categories" not in df:
        return []
    values = set()
    for categories in df["categories"].dropna():
        values.update(categories)
    return sorted(values)
