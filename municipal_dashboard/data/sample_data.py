"""
Fixed sample records shown (and labelled as such) when the API is unavailable.
"""

from __future__ import annotations

from typing import Tuple

from municipal_dashboard.api.models import Coordinates, Event, Notice, Report, User

SAMPLE_REPORTS: Tuple[Report, ...] = (
    Report(
        id=1,
        title="Schlagloch in der Hauptstraße",
        description="Großes Schlagloch vor Haus Nr. 15 in der Hauptstraße. Gefährlich für Radfahrer.",
        status="pending",
        priority="high",
        category="Straßenschäden",
        location="Hauptstraße 15, Aukrug",
        coordinates=Coordinates(lat=54.1234, lng=9.5678),
        created_at="2024-01-15T10:30:00Z",
        updated_at="2024-01-15T10:30:00Z",
        reporter_name="Max Mustermann",
        reporter_email="max@example.com",
    ),
    Report(
        id=2,
        title="Defekte Straßenlaterne",
        description="Straßenlaterne am Sportplatz ist seit 3 Tagen defekt.",
        status="in_progress",
        priority="medium",
        category="Beleuchtung",
        location="Am Sportplatz, Aukrug",
        created_at="2024-01-14T16:45:00Z",
        updated_at="2024-01-15T09:15:00Z",
        reporter_name="Anna Schmidt",
        reporter_email="anna@example.com",
        assigned_to="Stadtwerke Team",
    ),
    Report(
        id=3,
        title="Überfüllter Mülleimer",
        description="Mülleimer am Bushaltestelle ist überfüllt und riecht unangenehm.",
        status="resolved",
        priority="low",
        category="Sauberkeit",
        location="Bushaltestelle Dorfstraße",
        created_at="2024-01-13T14:20:00Z",
        updated_at="2024-01-14T11:30:00Z",
        reporter_name="Klaus Weber",
        reporter_email="klaus@example.com",
        assigned_to="Reinigungsservice",
        resolution_notes="Mülleimer geleert und gereinigt.",
    ),
)

SAMPLE_NOTICES: Tuple[Notice, ...] = (
    Notice(
        id=1,
        title="Sperrung der Dorfstraße",
        content="Wegen Kanalarbeiten ist die Dorfstraße zwischen Nr. 2 und Nr. 20 voll gesperrt.",
        excerpt="Kanalarbeiten in der Dorfstraße",
        status="published",
        priority="high",
        valid_from="2024-01-08T00:00:00Z",
        valid_until="2024-02-02T23:59:59Z",
        created_at="2024-01-05T08:00:00Z",
        updated_at="2024-01-05T08:00:00Z",
        author="Bauamt",
        categories=frozenset({"Verkehr", "Bauarbeiten"}),
    ),
    Notice(
        id=2,
        title="Sitzung der Gemeindevertretung",
        content="Die nächste öffentliche Sitzung der Gemeindevertretung findet im Bürgerhaus statt.",
        status="published",
        priority="medium",
        created_at="2024-01-10T12:00:00Z",
        updated_at="2024-01-11T09:00:00Z",
        author="Gemeindebüro",
        categories=frozenset({"Politik"}),
    ),
    Notice(
        id=3,
        title="Neue Öffnungszeiten der Bücherei",
        content="Ab Februar ist die Bücherei zusätzlich samstags von 10 bis 13 Uhr geöffnet.",
        status="draft",
        priority="low",
        created_at="2024-01-12T15:30:00Z",
        updated_at="2024-01-12T15:30:00Z",
        author="Gemeindebüro",
        categories=frozenset({"Kultur"}),
    ),
)

SAMPLE_EVENTS: Tuple[Event, ...] = (
    Event(
        id=1,
        title="Dorffest Aukrug",
        description="Jährliches Dorffest mit Musik, Flohmarkt und Kinderprogramm.",
        start_date="2024-06-15T11:00:00Z",
        end_date="2024-06-15T22:00:00Z",
        location="Festplatz Innien",
        organizer="Heimatverein Aukrug",
        registration_required=False,
        current_participants=0,
        status="published",
        created_at="2024-01-02T10:00:00Z",
        updated_at="2024-01-09T14:00:00Z",
    ),
    Event(
        id=2,
        title="Erste-Hilfe-Kurs",
        description="Auffrischungskurs für Vereinsmitglieder und Interessierte.",
        start_date="2024-02-10T09:00:00Z",
        end_date="2024-02-10T16:00:00Z",
        location="Feuerwehrhaus Bünzen",
        organizer="Freiwillige Feuerwehr",
        contact_info="kurs@example.com",
        registration_required=True,
        max_participants=20,
        current_participants=14,
        status="published",
        created_at="2024-01-04T09:30:00Z",
        updated_at="2024-01-14T17:00:00Z",
    ),
    Event(
        id=3,
        title="Seniorennachmittag",
        description="Kaffee und Kuchen im Bürgerhaus.",
        start_date="2023-12-13T15:00:00Z",
        location="Bürgerhaus",
        registration_required=False,
        current_participants=0,
        status="cancelled",
        created_at="2023-11-20T08:00:00Z",
        updated_at="2023-12-10T08:00:00Z",
    ),
)

SAMPLE_USERS: Tuple[User, ...] = (
    User(
        id=1,
        username="admin",
        email="admin@aukrug.de",
        display_name="Administrator",
        roles=("administrator",),
        created_at="2023-01-15T10:00:00Z",
        last_login="2024-01-15T09:30:00Z",
        status="active",
    ),
    User(
        id=2,
        username="max.mustermann",
        email="max@example.com",
        display_name="Max Mustermann",
        roles=("resident",),
        created_at="2023-03-20T14:15:00Z",
        last_login="2024-01-14T18:45:00Z",
        status="active",
    ),
    User(
        id=3,
        username="anna.schmidt",
        email="anna@example.com",
        display_name="Anna Schmidt",
        roles=("resident", "volunteer"),
        created_at="2023-06-10T11:30:00Z",
        last_login="2024-01-13T16:20:00Z",
        status="active",
    ),
    User(
        id=4,
        username="tourist.user",
        email="tourist@example.com",
        display_name="Tourist User",
        roles=("tourist",),
        created_at="2024-01-10T09:00:00Z",
        last_login="2024-01-12T12:15:00Z",
        status="active",
    ),
)
