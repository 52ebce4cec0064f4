"""
Shared fixtures: an API client wired to an in-memory transport, a fixed
"now" and raw API payloads.
"""
import httpx
import pandas as pd
import pytest

from municipal_dashboard.api.client import ApiClient

BASE_URL = "http://testserver/dashboard/api/wp"


def _report_payload(**overrides):
    payload = {
        "id": 1,
        "title": "Schlagloch in der Hauptstraße",
        "description": "Großes Schlagloch vor Haus Nr. 15.",
        "status": "pending",
        "priority": "high",
        "category": "Straßenschäden",
        "location": "Hauptstraße 15, Aukrug",
        "coordinates": {"lat": 54.1234, "lng": 9.5678},
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
        "reporter_name": "Max Mustermann",
        "reporter_email": "max@example.com",
    }
    payload.update(overrides)
    return payload


def _user_payload(**overrides):
    payload = {
        "id": 1,
        "username": "max.mustermann",
        "email": "max@example.com",
        "display_name": "Max Mustermann",
        "roles": ["resident"],
        "created_at": "2023-03-20T14:15:00Z",
        "last_login": "2024-01-14T18:45:00Z",
        "status": "active",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def report_payload():
    """Factory for a raw `/reports` item; keyword arguments override fields."""
    return _report_payload


@pytest.fixture
def user_payload():
    """Factory for a raw `/users` item."""
    return _user_payload


@pytest.fixture
def make_client():
    """Build an ApiClient whose requests are answered by ``handler``."""
    clients = []

    def _make(handler, **kwargs):
        client = ApiClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def now():
    return pd.Timestamp("2024-01-20 12:00:00", tz="Europe/Berlin")
