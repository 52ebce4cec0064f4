import pandas as pd
import pytest

from municipal_dashboard.api.models import ApiStats, Coordinates, Event, Notice, Report, User


def notice_payload(**overrides):
    payload = {
        "id": 1,
        "title": "Sperrung der Dorfstraße",
        "content": "Kanalarbeiten",
        "status": "published",
        "priority": "high",
        "valid_from": "2024-01-08T00:00:00Z",
        "valid_until": "2024-02-02T23:59:59Z",
        "created_at": "2024-01-05T08:00:00Z",
        "updated_at": "2024-01-05T08:00:00Z",
        "author": "Bauamt",
        "categories": ["Verkehr", "Bauarbeiten"],
    }
    payload.update(overrides)
    return payload


def event_payload(**overrides):
    payload = {
        "id": 2,
        "title": "Erste-Hilfe-Kurs",
        "description": "Auffrischungskurs",
        "start_date": "2024-02-10T09:00:00Z",
        "registration_required": True,
        "max_participants": 20,
        "current_participants": 14,
        "status": "published",
        "created_at": "2024-01-04T09:30:00Z",
        "updated_at": "2024-01-14T17:00:00Z",
    }
    payload.update(overrides)
    return payload


class TestReport:
    def test_from_dict(self, report_payload):
        report = Report.from_dict(report_payload(attachments=["foto.jpg"]))

        assert report.status == "pending"
        assert report.priority == "high"
        assert report.coordinates == Coordinates(lat=54.1234, lng=9.5678)
        assert report.attachments == ("foto.jpg",)
        assert report.assigned_to is None

    def test_missing_required_field(self, report_payload):
        payload = report_payload()
        del payload["title"]
        with pytest.raises(ValueError, match="title"):
            Report.from_dict(payload)

    def test_unknown_priority(self, report_payload):
        with pytest.raises(ValueError, match="priority"):
            Report.from_dict(report_payload(priority="urgent"))

    def test_updated_at_defaults_to_created_at(self, report_payload):
        payload = report_payload()
        del payload["updated_at"]
        assert Report.from_dict(payload).updated_at == payload["created_at"]

    def test_to_dict_drops_missing_values(self, report_payload):
        data = Report.from_dict(report_payload()).to_dict()
        assert "resolution_notes" not in data
        assert data["coordinates"] == {"lat": 54.1234, "lng": 9.5678}

    def test_snapshots_are_immutable(self, report_payload):
        report = Report.from_dict(report_payload())
        with pytest.raises(AttributeError):
            report.status = "closed"


class TestNotice:
    def test_categories_have_set_semantics(self):
        a = Notice.from_dict(notice_payload(categories=["Verkehr", "Bauarbeiten"]))
        b = Notice.from_dict(notice_payload(categories=["Bauarbeiten", "Verkehr", "Verkehr"]))
        assert a == b
        assert a.categories == frozenset({"Verkehr", "Bauarbeiten"})

    def test_is_active_inside_window(self):
        notice = Notice.from_dict(notice_payload())
        assert notice.is_active(pd.Timestamp("2024-01-20T12:00:00Z")) is True
        assert notice.is_active(pd.Timestamp("2024-03-01T12:00:00Z")) is False
        assert notice.is_active(pd.Timestamp("2024-01-01T12:00:00Z")) is False

    def test_open_window_and_drafts(self):
        open_ended = Notice.from_dict(notice_payload(valid_from=None, valid_until=None))
        draft = Notice.from_dict(notice_payload(status="draft"))
        now = pd.Timestamp("2024-01-20 12:00:00", tz="Europe/Berlin")
        assert open_ended.is_active(now) is True
        assert draft.is_active(now) is False

    def test_categories_serialise_sorted(self):
        assert Notice.from_dict(notice_payload()).to_dict()["categories"] == ["Bauarbeiten", "Verkehr"]


class TestEvent:
    def test_capacity(self):
        event = Event.from_dict(event_payload())
        assert event.over_capacity is False
        assert event.spots_left == 6

    def test_over_capacity_is_flagged_not_rejected(self):
        event = Event.from_dict(event_payload(current_participants=25))
        assert event.over_capacity is True
        assert event.spots_left == 0

    def test_no_cap(self):
        event = Event.from_dict(event_payload(max_participants=None, current_participants=300))
        assert event.over_capacity is False
        assert event.spots_left is None

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            Event.from_dict(event_payload(status="postponed"))


class TestUser:
    def test_roles_are_deduplicated_in_order(self, user_payload):
        user = User.from_dict(user_payload(roles=["volunteer", "resident", "volunteer"]))
        assert user.roles == ("volunteer", "resident")
        assert user.has_role("resident")
        assert not user.has_role("administrator")

    def test_roles_must_not_be_empty(self, user_payload):
        with pytest.raises(ValueError, match="roles"):
            User.from_dict(user_payload(roles=[]))

    def test_missing_last_login(self, user_payload):
        user = User.from_dict(user_payload(last_login=None))
        assert user.last_login is None
        assert "last_login" not in user.to_dict()


class TestApiStats:
    def test_missing_sections_default_to_zero(self):
        stats = ApiStats.from_dict({"reports": {"total": 3}})
        assert stats.reports_total == 3
        assert stats.events_total == 0
        assert stats.reports_by_category == {}

    def test_invalid_section(self):
        with pytest.raises(ValueError):
            ApiStats.from_dict({"reports": ["not", "a", "mapping"]})
