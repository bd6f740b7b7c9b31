"""Tests for the message presentation helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from chatterbox.shared.utils.message_format import footer, friendly_timestamp, location

from tests.factories import MessageFactory

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFriendlyTimestamp:

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "just now"),
            (29, "just now"),
            (30, "30 seconds ago"),
            (45, "45 seconds ago"),
            (59, "59 seconds ago"),
            (60, "a minute ago"),
            (119, "a minute ago"),
            (120, "2 minutes ago"),
            (59 * 60, "59 minutes ago"),
            (60 * 60, "1 hour ago"),
            (2 * 60 * 60 - 1, "1 hour ago"),
            (2 * 60 * 60, "2 hours ago"),
            (23 * 60 * 60, "23 hours ago"),
            (24 * 60 * 60, "yesterday"),
            (2 * 24 * 60 * 60, "2 days ago"),
            (6 * 24 * 60 * 60, "6 days ago"),
            (7 * 24 * 60 * 60, "a long time ago"),
        ],
    )
    def test_buckets(self, seconds, expected):
        assert friendly_timestamp(NOW - timedelta(seconds=seconds), NOW) == expected

    def test_rounds_to_nearest_second(self):
        assert friendly_timestamp(NOW - timedelta(seconds=29.6), NOW) == "30 seconds ago"

    def test_naive_datetimes_are_utc(self):
        created_at = (NOW - timedelta(seconds=45)).replace(tzinfo=None)
        assert friendly_timestamp(created_at, NOW) == "45 seconds ago"

    def test_defaults_to_current_time(self):
        assert friendly_timestamp(datetime.now(timezone.utc)) == "just now"


class TestLocation:

    def test_time_zone_wins(self):
        geo = {"time_zone": "Europe/Paris", "city": "Lyon", "country_name": "France"}
        assert location(geo) == "Europe/Paris"
        assert location({"time_zone": "Europe/Paris"}) == "Europe/Paris"

    def test_city_and_country(self):
        assert location({"city": "Lyon", "country_name": "France"}) == "Lyon/France"

    @pytest.mark.parametrize("geo", [None, {}, {"city": "Lyon"}, {"country_name": "France"}])
    def test_not_enough_information(self, geo):
        assert location(geo) is None


class TestFooter:

    def test_without_location(self):
        assert footer(NOW - timedelta(seconds=45), {}, NOW) == "45 seconds ago"

    def test_with_location(self):
        geo = {"time_zone": "Europe/Paris"}
        assert footer(NOW - timedelta(minutes=5), geo, NOW) == "5 minutes ago, Europe/Paris"

    def test_message_properties(self):
        message = MessageFactory(
            created_at=NOW - timedelta(seconds=45),
            geo={"time_zone": "Europe/Paris"},
        )
        assert message.location == "Europe/Paris"
        assert message.footer_at(NOW) == "45 seconds ago, Europe/Paris"

    def test_unsaved_message_reads_just_now(self):
        message = MessageFactory(geo={"time_zone": "Europe/Paris"})
        assert message.created_at is None
        assert message.friendly_timestamp == "just now"
        assert message.footer == "just now, Europe/Paris"
