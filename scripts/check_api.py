"""Quick smoke check for the dashboard API.

Run with `python scripts/check_api.py` to call every list endpoint plus
`/stats` against the configured base URL and print each envelope outcome.
Exits non-zero when any call fails.
"""

from __future__ import annotations

import municipal_dashboard.bootstrap_env  # noqa: F401  loads .env / secrets
from municipal_dashboard.api.client import ApiClient
from municipal_dashboard.config import get_settings
from municipal_dashboard.logging_config import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    failures = []
    with ApiClient() as client:
        print("Checking", settings.api_url)
        checks = {
            "reports": client.get_reports,
            "notices": client.get_notices,
            "events": client.get_events,
            "users": client.get_users,
        }
        for name, fetch in checks.items():
            response = fetch()
            if response.success:
                print(f"  {name:<8} ok     {len(response.data or [])} records")
            else:
                print(f"  {name:<8} FAILED {response.error}")
                failures.append(name)

        stats = client.get_stats()
        if stats.success:
            print(f"  {'stats':<8} ok")
        else:
            print(f"  {'stats':<8} FAILED {stats.error}")
            failures.append("stats")

    if failures:
        raise SystemExit(f"Failed endpoints: {failures}")
    print("API check passed.")


if __name__ == "__main__":
    main()
