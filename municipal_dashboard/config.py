"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

DEFAULT_API_BASE_URL = "/dashboard/api/wp"
DEFAULT_API_ORIGIN = "http://localhost:3000"
DEFAULT_BASE_PATH = "/dashboard"
DEFAULT_TIMEZONE = "Europe/Berlin"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "Dashboard"),
    TabConfig("reports", "Berichte"),
    TabConfig("notices", "Bekanntmachungen"),
    TabConfig("events", "Veranstaltungen"),
    TabConfig("community", "Gemeinschaft"),
]


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    api_origin: str = DEFAULT_API_ORIGIN
    api_timeout: Optional[float] = None
    use_sample_data: bool = True
    use_stats_endpoint: bool = False
    base_path: str = DEFAULT_BASE_PATH
    timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"

    @property
    def api_url(self) -> str:
        """Absolute API base URL; relative paths are resolved against the origin."""
        if self.api_base_url.startswith(("http://", "https://")):
            return self.api_base_url.rstrip("/")
        return self.api_origin.rstrip("/") + "/" + self.api_base_url.strip("/")


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY


def _timeout(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"WP_API_TIMEOUT must be a number of seconds, got {value!r}") from exc


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve settings from the process environment (or an explicit mapping)."""
    env = os.environ if environ is None else environ
    return Settings(
        api_base_url=env.get("WP_BASE_URL") or DEFAULT_API_BASE_URL,
        api_origin=env.get("WP_API_ORIGIN") or DEFAULT_API_ORIGIN,
        api_timeout=_timeout(env.get("WP_API_TIMEOUT")),
        use_sample_data=_flag(env.get("DASHBOARD_SAMPLE_DATA"), True),
        use_stats_endpoint=_flag(env.get("DASHBOARD_USE_STATS_ENDPOINT"), False),
        base_path=(env.get("DASHBOARD_BASE_PATH") or DEFAULT_BASE_PATH).rstrip("/"),
        timezone=env.get("DASHBOARD_TIMEZONE") or DEFAULT_TIMEZONE,
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )
