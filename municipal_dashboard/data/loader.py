"""
Page controllers: load a resource through the API client, fall back to
labelled sample data when allowed, and keep the result in an explicit state
container.

State only changes through `reduce`, driven by three events:
`FiltersChanged`, `LoadSucceeded` and `LoadFailed`. Each `FiltersChanged`
issues a new request sequence number and results carrying an older number
are dropped, so a slow response can never overwrite a newer filter's data.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from municipal_dashboard.api.client import ApiResponse
from municipal_dashboard.data.filters import serialize_filters
from municipal_dashboard.logging_config import get_logger

logger = get_logger(__name__)

SOURCE_NONE = "none"
SOURCE_LIVE = "live"
SOURCE_SAMPLE = "sample"

DATE_COLUMNS = (
    "created_at",
    "updated_at",
    "last_login",
    "start_date",
    "end_date",
    "valid_from",
    "valid_until",
)


@dataclass(frozen=True)
class Ok:
    records: Tuple[Any, ...]


@dataclass(frozen=True)
class Err:
    reason: str


LoadResult = Union[Ok, Err]


@dataclass(frozen=True)
class FiltersChanged:
    filters: Any


@dataclass(frozen=True)
class LoadSucceeded:
    seq: int
    records: Tuple[Any, ...]


@dataclass(frozen=True)
class LoadFailed:
    seq: int
    reason: str
    fallback: Optional[Tuple[Any, ...]] = None


PageEvent = Union[FiltersChanged, LoadSucceeded, LoadFailed]


@dataclass(frozen=True)
class PageState:
    records: Tuple[Any, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    source: str = SOURCE_NONE
    filters: Any = None
    request_seq: int = 0

    @property
    def is_sample(self) -> bool:
        return self.source == SOURCE_SAMPLE


def reduce(state: PageState, event: PageEvent) -> PageState:
    if isinstance(event, FiltersChanged):
        # Previous records stay visible until the new load resolves
        return replace(
            state,
            loading=True,
            error=None,
            filters=event.filters,
            request_seq=state.request_seq + 1,
        )

    if event.seq != state.request_seq:
        logger.debug(f"Dropping stale result for request {event.seq} (current {state.request_seq})")
        return state

    if isinstance(event, LoadSucceeded):
        return replace(state, records=tuple(event.records), loading=False, error=None, source=SOURCE_LIVE)

    if event.fallback is not None:
        return replace(
            state,
            records=tuple(event.fallback),
            loading=False,
            error=event.reason,
            source=SOURCE_SAMPLE,
        )
    return replace(state, records=(), loading=False, error=event.reason, source=SOURCE_NONE)


Fetch = Callable[[Mapping[str, Any]], ApiResponse]


@dataclass
class PageController:
    """Orchestrates load -> fallback for one dashboard page."""

    name: str
    fetch: Fetch
    sample_records: Sequence[Any] = ()
    use_sample_data: bool = True
    state: PageState = field(default_factory=PageState)

    def dispatch(self, event: PageEvent) -> PageState:
        self.state = reduce(self.state, event)
        return self.state

    def needs_load(self, filters: Any) -> bool:
        return self.state.request_seq == 0 or filters != self.state.filters

    def begin(self, filters: Any) -> int:
        self.dispatch(FiltersChanged(filters))
        return self.state.request_seq

    def fetch_result(self, filters: Any) -> LoadResult:
        try:
            response = self.fetch(serialize_filters(filters))
        except Exception as exc:
            return Err(str(exc) or type(exc).__name__)
        if response.success and response.data is not None:
            return Ok(tuple(response.data))
        return Err(response.error or "API request failed")

    def resolve(self, seq: int, result: LoadResult) -> PageState:
        if isinstance(result, Ok):
            return self.dispatch(LoadSucceeded(seq, result.records))

        fallback = None
        if self.use_sample_data:
            logger.warning(f"{self.name} load failed, using sample data: {result.reason}")
            fallback = tuple(self.sample_records)
        else:
            logger.warning(f"{self.name} load failed: {result.reason}")
        return self.dispatch(LoadFailed(seq, result.reason, fallback))

    def load(self, filters: Any) -> PageState:
        seq = self.begin(filters)
        return self.resolve(seq, self.fetch_result(filters))


def records_to_frame(records: Iterable[Any], record_type: Optional[type] = None) -> pd.DataFrame:
    """
    Convert model snapshots into a DataFrame with one column per dataclass
    field (also when there are no records) and parsed timestamp columns.
    """
    records = list(records)
    if record_type is None and records:
        record_type = type(records[0])
    columns = [f.name for f in fields(record_type)] if record_type is not None else []
    rows = [{name: getattr(record, name) for name in columns} for record in records]
    df = pd.DataFrame(rows, columns=columns)
    for column in DATE_COLUMNS:
        if column in df.columns:
            df[column] = pd.to_datetime(df[column], utc=True, errors="coerce", format="ISO8601")
    return df
