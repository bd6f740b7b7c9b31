"""Tests for the client-facing projections."""

import uuid
from datetime import datetime, timedelta, timezone

from chatterbox.shared.models import FacebookPassport, LocalPassport, User
from chatterbox.shared.schemas import message as message_schemas
from chatterbox.shared.schemas import to_client_view, to_message_view

from tests.factories import MessageFactory


def test_client_view_has_id_and_no_passports():
    user_id = uuid.uuid4()
    user = User(
        id=user_id,
        username="alice",
        name="Alice",
        avatar_url="/avatar/default",
        passports=[
            LocalPassport(password_hash="$2b$04$digest"),
            FacebookPassport(access_token="secret-token", profile_id="1"),
        ],
    )

    view = to_client_view(user).model_dump()

    assert view["id"] == user_id
    assert view["username"] == "alice"
    assert "passports" not in view
    dumped = str(view)
    assert "$2b$04$digest" not in dumped
    assert "secret-token" not in dumped


def test_message_view_derived_fields():
    now = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
    message = MessageFactory(
        id=uuid.uuid4(),
        created_at=now - timedelta(seconds=45),
        geo={"city": "Lyon", "country_name": "France"},
    )

    view = to_message_view(message, now)

    assert view.creator.name == "guest"
    assert view.friendly_timestamp == "45 seconds ago"
    assert view.location == "Lyon/France"
    assert view.footer == "45 seconds ago, Lyon/France"
    assert view.geo.time_zone is None


def test_message_view_reads_the_clock_once(monkeypatch):
    created_at = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
    ticks = iter([created_at + timedelta(seconds=29), created_at + timedelta(seconds=31)])

    class SteppingClock(datetime):
        @classmethod
        def now(cls, tz=None):
            return next(ticks)

    monkeypatch.setattr(message_schemas, "datetime", SteppingClock)
    view = to_message_view(MessageFactory(id=uuid.uuid4(), created_at=created_at))

    assert view.friendly_timestamp == "just now"
    assert view.footer == "just now"
