"""
Typed snapshots of the records served by the WordPress dashboard API.

Timestamps are kept as the ISO-8601 strings the API sends; the DataFrame
conversion in `municipal_dashboard.data.loader` parses them for filtering
and statistics.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

import pandas as pd

REPORT_STATUSES = ("pending", "in_progress", "resolved", "closed")
REPORT_PRIORITIES = ("low", "medium", "high", "critical")
NOTICE_STATUSES = ("draft", "published", "archived")
NOTICE_PRIORITIES = ("low", "medium", "high")
EVENT_STATUSES = ("draft", "published", "cancelled")
USER_STATUSES = ("active", "inactive", "suspended")


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise ValueError(f"missing required field '{key}'")
    return payload[key]


def _choice(payload: Mapping[str, Any], key: str, allowed: Tuple[str, ...]) -> str:
    value = str(_require(payload, key))
    if value not in allowed:
        raise ValueError(f"'{key}' must be one of {', '.join(allowed)}; got '{value}'")
    return value


def _optional_str(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _strings(payload: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    values = payload.get(key) or ()
    if isinstance(values, str):
        raise ValueError(f"'{key}' must be a list of strings")
    return tuple(str(v) for v in values)


def _utc(value: Any) -> pd.Timestamp:
    ts = pd.Timestamp(value)
    return ts.tz_localize("UTC") if ts.tzinfo is None else ts


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Coordinates":
        try:
            return cls(lat=float(payload["lat"]), lng=float(payload["lng"]))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid coordinates: {payload!r}") from exc


@dataclass(frozen=True)
class Report:
    id: int
    title: str
    description: str
    status: str
    priority: str
    category: str
    created_at: str
    updated_at: str
    location: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    attachments: Tuple[str, ...] = ()
    reporter_name: Optional[str] = None
    reporter_email: Optional[str] = None
    assigned_to: Optional[str] = None
    resolution_notes: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Report":
        coordinates = payload.get("coordinates")
        return cls(
            id=int(_require(payload, "id")),
            title=str(_require(payload, "title")),
            description=str(payload.get("description") or ""),
            status=_choice(payload, "status", REPORT_STATUSES),
            priority=_choice(payload, "priority", REPORT_PRIORITIES),
            category=str(payload.get("category") or ""),
            created_at=str(_require(payload, "created_at")),
            updated_at=str(payload.get("updated_at") or payload["created_at"]),
            location=_optional_str(payload, "location"),
            coordinates=Coordinates.from_dict(coordinates) if coordinates else None,
            attachments=_strings(payload, "attachments"),
            reporter_name=_optional_str(payload, "reporter_name"),
            reporter_email=_optional_str(payload, "reporter_email"),
            assigned_to=_optional_str(payload, "assigned_to"),
            resolution_notes=_optional_str(payload, "resolution_notes"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["attachments"] = list(self.attachments)
        return _drop_none(data)


@dataclass(frozen=True)
class Notice:
    id: int
    title: str
    content: str
    status: str
    priority: str
    created_at: str
    updated_at: str
    author: str
    categories: FrozenSet[str] = frozenset()
    excerpt: Optional[str] = None
    valid_from: Optional[str] = None
    valid_until: Optional[str] = None
    attachments: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Notice":
        return cls(
            id=int(_require(payload, "id")),
            title=str(_require(payload, "title")),
            content=str(payload.get("content") or ""),
            status=_choice(payload, "status", NOTICE_STATUSES),
            priority=_choice(payload, "priority", NOTICE_PRIORITIES),
            created_at=str(_require(payload, "created_at")),
            updated_at=str(payload.get("updated_at") or payload["created_at"]),
            author=str(payload.get("author") or ""),
            categories=frozenset(_strings(payload, "categories")),
            excerpt=_optional_str(payload, "excerpt"),
            valid_from=_optional_str(payload, "valid_from"),
            valid_until=_optional_str(payload, "valid_until"),
            attachments=_strings(payload, "attachments"),
        )

    def is_active(self, now: pd.Timestamp) -> bool:
        """Published and inside its validity window; open ends are unbounded."""
        if self.status != "published":
            return False
        now = _utc(now)
        if self.valid_from and _utc(self.valid_from) > now:
            return False
        if self.valid_until and _utc(self.valid_until) < now:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["categories"] = sorted(self.categories)
        data["attachments"] = list(self.attachments)
        return _drop_none(data)


@dataclass(frozen=True)
class Event:
    id: int
    title: str
    description: str
    start_date: str
    status: str
    created_at: str
    updated_at: str
    registration_required: bool = False
    current_participants: int = 0
    max_participants: Optional[int] = None
    end_date: Optional[str] = None
    location: Optional[str] = None
    organizer: Optional[str] = None
    contact_info: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Event":
        max_participants = payload.get("max_participants")
        return cls(
            id=int(_require(payload, "id")),
            title=str(_require(payload, "title")),
            description=str(payload.get("description") or ""),
            start_date=str(_require(payload, "start_date")),
            status=_choice(payload, "status", EVENT_STATUSES),
            created_at=str(_require(payload, "created_at")),
            updated_at=str(payload.get("updated_at") or payload["created_at"]),
            registration_required=bool(payload.get("registration_required", False)),
            current_participants=int(payload.get("current_participants") or 0),
            max_participants=int(max_participants) if max_participants is not None else None,
            end_date=_optional_str(payload, "end_date"),
            location=_optional_str(payload, "location"),
            organizer=_optional_str(payload, "organizer"),
            contact_info=_optional_str(payload, "contact_info"),
        )

    @property
    def over_capacity(self) -> bool:
        # The API does not enforce the participant cap
        return self.max_participants is not None and self.current_participants > self.max_participants

    @property
    def spots_left(self) -> Optional[int]:
        if self.max_participants is None:
            return None
        return max(self.max_participants - self.current_participants, 0)

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(asdict(self))


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    display_name: str
    roles: Tuple[str, ...]
    created_at: str
    status: str
    last_login: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "User":
        # dict.fromkeys de-duplicates while keeping the API's order for display
        roles = tuple(dict.fromkeys(_strings(payload, "roles")))
        if not roles:
            raise ValueError("'roles' must contain at least one role")
        return cls(
            id=int(_require(payload, "id")),
            username=str(_require(payload, "username")),
            email=str(payload.get("email") or ""),
            display_name=str(payload.get("display_name") or payload["username"]),
            roles=roles,
            created_at=str(_require(payload, "created_at")),
            status=_choice(payload, "status", USER_STATUSES),
            last_login=_optional_str(payload, "last_login"),
        )

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["roles"] = list(self.roles)
        return _drop_none(data)


@dataclass(frozen=True)
class ApiStats:
    """Aggregate counts served by `GET /stats`."""

    reports_total: int = 0
    reports_pending: int = 0
    reports_resolved: int = 0
    reports_by_category: Dict[str, int] = field(default_factory=dict)
    notices_total: int = 0
    notices_published: int = 0
    notices_draft: int = 0
    events_total: int = 0
    events_upcoming: int = 0
    events_past: int = 0
    users_total: int = 0
    users_active: int = 0
    users_new_this_month: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ApiStats":
        reports = payload.get("reports") or {}
        notices = payload.get("notices") or {}
        events = payload.get("events") or {}
        users = payload.get("users") or {}
        try:
            return cls(
                reports_total=int(reports.get("total", 0)),
                reports_pending=int(reports.get("pending", 0)),
                reports_resolved=int(reports.get("resolved", 0)),
                reports_by_category={str(k): int(v) for k, v in (reports.get("by_category") or {}).items()},
                notices_total=int(notices.get("total", 0)),
                notices_published=int(notices.get("published", 0)),
                notices_draft=int(notices.get("draft", 0)),
                events_total=int(events.get("total", 0)),
                events_upcoming=int(events.get("upcoming", 0)),
                events_past=int(events.get("past", 0)),
                users_total=int(users.get("total", 0)),
                users_active=int(users.get("active", 0)),
                users_new_this_month=int(users.get("new_this_month", 0)),
            )
        except AttributeError as exc:
            raise ValueError(f"invalid stats payload: {exc}") from exc
