"""Tests for the field rule tables."""

import pytest

from chatterbox.shared.validation.rules import (
    MESSAGE_RULES,
    PASSPORT_RULES,
    USER_RULES,
    Rule,
    run_rules,
)


class TestUserRules:

    @pytest.mark.parametrize("username", ["a", "x" * 31])
    def test_valid_username_lengths(self, username):
        assert run_rules(USER_RULES, {"username": username}) == []

    def test_username_too_long(self):
        errors = run_rules(USER_RULES, {"username": "x" * 32})
        assert [e.field for e in errors] == ["username"]
        assert errors[0].message == f"{'x' * 32} is not a valid username!"

    @pytest.mark.parametrize("username", [None, ""])
    def test_username_required(self, username):
        errors = run_rules(USER_RULES, {"username": username})
        assert errors[0].message == "a unique username is required"

    def test_name_is_optional(self):
        assert run_rules(USER_RULES, {"username": "alice", "name": ""}) == []

    def test_name_bounds(self):
        assert run_rules(USER_RULES, {"username": "alice", "name": "n" * 63}) == []
        errors = run_rules(USER_RULES, {"username": "alice", "name": "n" * 64})
        assert [e.field for e in errors] == ["name"]

    def test_all_violations_reported(self):
        errors = run_rules(USER_RULES, {"username": "", "name": "n" * 64})
        assert [e.field for e in errors] == ["username", "name"]


class TestPassportRules:

    def test_unknown_type(self):
        errors = run_rules(PASSPORT_RULES, {"type": "myspace"})
        assert errors[0].message == "`myspace` is not a valid passport type"

    def test_password_is_redacted(self):
        errors = run_rules(PASSPORT_RULES, {"type": "local", "password": "p" * 64}, prefix="passports.0.")
        assert len(errors) == 1
        assert errors[0].field == "passports.0.password"
        assert errors[0].value == "***"
        assert "p" * 64 not in errors[0].message

    def test_password_bounds(self):
        assert run_rules(PASSPORT_RULES, {"type": "local", "password": "p" * 63}) == []

    def test_password_byte_limit(self):
        assert run_rules(PASSPORT_RULES, {"type": "local", "password": "\u00e9" * 36}) == []
        errors = run_rules(PASSPORT_RULES, {"type": "local", "password": "\u00e9" * 37})
        assert [e.field for e in errors] == ["password"]
        assert errors[0].value == "***"


class TestMessageRules:

    def test_required_fields(self):
        errors = run_rules(MESSAGE_RULES, {})
        assert [e.field for e in errors] == ["creator.id", "creator.name", "text"]

    def test_text_too_long(self):
        values = {"creator.id": "1", "creator.name": "guest", "text": "t" * 256}
        assert [e.field for e in run_rules(MESSAGE_RULES, values)] == ["text"]

    def test_geo_fields_optional_but_bounded(self):
        values = {"creator.id": "1", "creator.name": "guest", "text": "hi", "geo.city": "c" * 256}
        assert [e.field for e in run_rules(MESSAGE_RULES, values)] == ["geo.city"]


def test_custom_rule():
    rule = Rule("age", lambda value: value >= 18, "{value} is too young")
    assert rule.check(21) is None
    assert rule.check(None) is None
    assert rule.check(12).message == "12 is too young"
