"""
HTTP client for the WordPress dashboard API.

Every call returns an `ApiResponse` envelope; transport errors, non-2xx
responses and malformed payloads are reported through `success=False` and a
plain error string instead of being raised.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar, Union
from urllib.parse import urlencode

import httpx

from municipal_dashboard.api.models import ApiStats, Event, Notice, Report, User
from municipal_dashboard.config import get_settings
from municipal_dashboard.logging_config import get_logger

T = TypeVar("T")
M = TypeVar("M")

logger = get_logger("municipal_dashboard.api")

DEFAULT_ERROR = "API request failed"
DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[T]":
        return cls(success=False, error=error)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Serialise a filter mapping as a query string.

    Only defined values are included (``None`` and ``""`` are skipped) and
    keys keep the mapping's iteration order.
    """
    if not params:
        return ""
    pairs = [(key, _query_value(value)) for key, value in params.items() if value is not None and value != ""]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def _payload(partial: Union[Mapping[str, Any], Any]) -> Dict[str, Any]:
    if dataclasses.is_dataclass(partial) and not isinstance(partial, type):
        partial = partial.to_dict() if hasattr(partial, "to_dict") else dataclasses.asdict(partial)
    return {key: value for key, value in dict(partial).items() if value is not None}


class ApiClient:
    """Single point of HTTP access for the dashboard pages."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = get_settings()
        if base_url is None:
            base_url = settings.api_url
            timeout = timeout if timeout is not None else settings.api_timeout
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            headers={**DEFAULT_HEADERS, **(headers or {})},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        body: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse[Any]:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._client.request(method, url, json=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            return ApiResponse.fail(str(exc) or type(exc).__name__)

        try:
            data = response.json() if response.content else None
        except ValueError as exc:
            if response.is_success:
                logger.warning(f"{method} {url} returned malformed JSON: {exc}")
                return ApiResponse.fail(str(exc))
            data = None

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning(f"{method} {url} -> {response.status_code}: {message or DEFAULT_ERROR}")
            return ApiResponse.fail(str(message) if message else DEFAULT_ERROR)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return ApiResponse.ok(data)

    def _parsed(self, response: ApiResponse[Any], parse: Callable[[Any], M], resource: str) -> ApiResponse[M]:
        if not response.success:
            return ApiResponse.fail(response.error or DEFAULT_ERROR)
        if response.data is None:
            return ApiResponse.ok(None, message=response.message)
        try:
            return ApiResponse.ok(parse(response.data), message=response.message)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(f"Malformed {resource} payload: {exc}")
            return ApiResponse.fail(f"Malformed {resource} payload: {exc}")

    def _list(self, endpoint: str, model, params: Optional[Mapping[str, Any]], resource: str):
        response = self.request(f"{endpoint}{build_query(params)}")
        return self._parsed(response, lambda rows: [model.from_dict(row) for row in rows], resource)

    def _one(self, endpoint: str, model, resource: str, method: str = "GET", body=None):
        response = self.request(endpoint, method, body=body)
        return self._parsed(response, model.from_dict, resource)

    # Reports
    def get_reports(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse[List[Report]]:
        return self._list("/reports", Report, params, "report")

    def get_report(self, report_id: int) -> ApiResponse[Report]:
        return self._one(f"/reports/{report_id}", Report, "report")

    def create_report(self, report) -> ApiResponse[Report]:
        return self._one("/reports", Report, "report", "POST", _payload(report))

    def update_report(self, report_id: int, report) -> ApiResponse[Report]:
        return self._one(f"/reports/{report_id}", Report, "report", "PUT", _payload(report))

    def delete_report(self, report_id: int) -> ApiResponse[Any]:
        return self.request(f"/reports/{report_id}", "DELETE")

    # Notices
    def get_notices(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse[List[Notice]]:
        return self._list("/notices", Notice, params, "notice")

    def get_notice(self, notice_id: int) -> ApiResponse[Notice]:
        return self._one(f"/notices/{notice_id}", Notice, "notice")

    def create_notice(self, notice) -> ApiResponse[Notice]:
        return self._one("/notices", Notice, "notice", "POST", _payload(notice))

    def update_notice(self, notice_id: int, notice) -> ApiResponse[Notice]:
        return self._one(f"/notices/{notice_id}", Notice, "notice", "PUT", _payload(notice))

    def delete_notice(self, notice_id: int) -> ApiResponse[Any]:
        return self.request(f"/notices/{notice_id}", "DELETE")

    # Events
    def get_events(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse[List[Event]]:
        return self._list("/events", Event, params, "event")

    def get_event(self, event_id: int) -> ApiResponse[Event]:
        return self._one(f"/events/{event_id}", Event, "event")

    def create_event(self, event) -> ApiResponse[Event]:
        return self._one("/events", Event, "event", "POST", _payload(event))

    def update_event(self, event_id: int, event) -> ApiResponse[Event]:
        return self._one(f"/events/{event_id}", Event, "event", "PUT", _payload(event))

    def delete_event(self, event_id: int) -> ApiResponse[Any]:
        return self.request(f"/events/{event_id}", "DELETE")

    # Users
    def get_users(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse[List[User]]:
        return self._list("/users", User, params, "user")

    def get_user(self, user_id: int) -> ApiResponse[User]:
        return self._one(f"/users/{user_id}", User, "user")

    # Statistics
    def get_stats(self) -> ApiResponse[ApiStats]:
        return self._one("/stats", ApiStats, "stats")
