import pandas as pd

from municipal_dashboard.api.models import ApiStats, Event, Notice, Report, User
from municipal_dashboard.data.loader import records_to_frame
from municipal_dashboard.data.sample_data import SAMPLE_EVENTS, SAMPLE_NOTICES, SAMPLE_REPORTS, SAMPLE_USERS
from municipal_dashboard.data.stats import (
    OverviewStats,
    category_counts,
    count_new_this_month,
    count_online_now,
    event_stats,
    month_start,
    notice_stats,
    overview_stats,
    report_stats,
    user_stats,
)


def logins(now, *minutes_ago):
    rows = [
        {"id": i, "last_login": (now - pd.Timedelta(minutes=m)).tz_convert("UTC").isoformat()}
        for i, m in enumerate(minutes_ago, start=1)
    ]
    return pd.DataFrame(rows)


class TestMonthStart:
    def test_start_of_month_in_local_time(self, now):
        assert month_start(now) == pd.Timestamp("2024-01-01 00:00:00", tz="Europe/Berlin")

    def test_naive_is_treated_as_utc(self):
        assert month_start(pd.Timestamp("2024-02-29 23:00:00")) == pd.Timestamp("2024-02-01", tz="UTC")


class TestUserCounts:
    def test_new_this_month(self, now):
        df = records_to_frame(SAMPLE_USERS, User)
        assert count_new_this_month(df, now) == 1

    def test_online_window(self, now):
        df = logins(now, 10, 29, 40, 600)
        assert count_online_now(df, now) == 2

    def test_custom_window(self, now):
        df = logins(now, 10, 40)
        assert count_online_now(df, now, window=pd.Timedelta(hours=1)) == 2

    def test_missing_last_login_is_offline(self, now):
        df = pd.DataFrame({"id": [1, 2], "last_login": [None, "not a date"]})
        assert count_online_now(df, now) == 0

    def test_user_stats(self, now):
        stats = user_stats(records_to_frame(SAMPLE_USERS, User), now)
        assert stats.total_users == 4
        assert stats.active_users == 4
        assert stats.new_this_month == 1
        assert stats.online_now == 0

    def test_empty(self, now):
        stats = user_stats(records_to_frame([], User), now)
        assert (stats.total_users, stats.new_this_month, stats.online_now) == (0, 0, 0)


class TestReportStats:
    def test_counts(self, now):
        stats = report_stats(records_to_frame(SAMPLE_REPORTS, Report), now)
        assert stats.total == 3
        assert stats.pending == 1
        assert stats.in_progress == 1
        assert stats.resolved == 1
        assert stats.closed == 0
        assert stats.new_this_month == 3

    def test_category_counts(self):
        df = pd.DataFrame({"category": ["Beleuchtung", "Sauberkeit", "Beleuchtung", None]})
        assert category_counts(df) == {"Beleuchtung": 2, "Sauberkeit": 1}


class TestNoticeStats:
    def test_counts(self, now):
        stats = notice_stats(records_to_frame(SAMPLE_NOTICES, Notice), now)
        assert stats.total == 3
        assert stats.published == 2
        assert stats.draft == 1
        assert stats.archived == 0
        assert stats.active == 2

    def test_expired_notice_is_not_active(self):
        later = pd.Timestamp("2024-03-01 12:00:00", tz="Europe/Berlin")
        stats = notice_stats(records_to_frame(SAMPLE_NOTICES, Notice), later)
        assert stats.active == 1

    def test_active_matches_model(self, now):
        expected = sum(notice.is_active(now) for notice in SAMPLE_NOTICES)
        assert notice_stats(records_to_frame(SAMPLE_NOTICES, Notice), now).active == expected


class TestEventStats:
    def test_counts(self, now):
        stats = event_stats(records_to_frame(SAMPLE_EVENTS, Event), now)
        assert stats.total == 3
        assert stats.upcoming == 2
        assert stats.past == 1
        assert stats.over_capacity == 0

    def test_over_capacity(self, now):
        df = pd.DataFrame({
            "start_date": ["2024-02-01T10:00:00Z"] * 3,
            "max_participants": [10, None, 5],
            "current_participants": [12, 500, 5],
        })
        assert event_stats(df, now).over_capacity == 1


class TestOverviewStats:
    def test_derived_from_frames(self):
        reports = records_to_frame(SAMPLE_REPORTS, Report)
        stats = overview_stats(reports, records_to_frame(SAMPLE_NOTICES, Notice), None)
        assert stats == OverviewStats(
            total_reports=3,
            pending_reports=1,
            resolved_reports=1,
            total_notices=3,
            total_events=None,
        )

    def test_from_api(self):
        api = ApiStats(reports_total=24, reports_pending=8, reports_resolved=16, notices_total=12, events_total=6)
        assert OverviewStats.from_api(api) == OverviewStats(24, 8, 16, 12, 6)
