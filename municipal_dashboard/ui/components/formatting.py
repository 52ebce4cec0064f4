"""
Utility helpers for formatting numbers, dates and the German display labels
of status, priority and role values.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from municipal_dashboard.config import DEFAULT_TIMEZONE

REPORT_STATUS_LABELS = {
    "pending": "Offen",
    "in_progress": "In Bearbeitung",
    "resolved": "Erledigt",
    "closed": "Geschlossen",
}

PRIORITY_LABELS = {
    "low": "Niedrig",
    "medium": "Mittel",
    "high": "Hoch",
    "critical": "Kritisch",
}

NOTICE_STATUS_LABELS = {
    "draft": "Entwurf",
    "published": "Veröffentlicht",
    "archived": "Archiviert",
}

EVENT_STATUS_LABELS = {
    "draft": "Entwurf",
    "published": "Veröffentlicht",
    "cancelled": "Abgesagt",
}

USER_STATUS_LABELS = {
    "active": "Aktiv",
    "inactive": "Inaktiv",
    "suspended": "Gesperrt",
}

ROLE_LABELS = {
    "administrator": "Administrator",
    "moderator": "Moderator",
    "resident": "Einwohner",
    "volunteer": "Freiwilliger",
    "tourist": "Tourist",
}


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        # de-DE grouping: 1.234,5
        text = f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def label(value: Optional[str], labels: dict) -> str:
    if value is None or value == "":
        return "–"
    return labels.get(value, value)


def format_roles(roles: Optional[Iterable[str]]) -> str:
    if not roles:
        return "–"
    return ", ".join(label(role, ROLE_LABELS) for role in roles)


def format_date(value, missing: str = "–", timezone: str = DEFAULT_TIMEZONE) -> str:
    """Render a timestamp as dd.mm.yyyy (de-DE) on the ``timezone`` clock, or ``missing`` when absent."""
    if value is None:
        return missing
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return missing
    return ts.tz_convert(timezone).strftime("%d.%m.%Y")


def format_datetime(value, missing: str = "–", timezone: str = DEFAULT_TIMEZONE) -> str:
    if value is None:
        return missing
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return missing
    return ts.tz_convert(timezone).strftime("%d.%m.%Y %H:%M")
