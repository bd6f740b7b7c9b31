"""Tests for passport variants, lookup and password verification."""

import pytest

from chatterbox.shared.core.exceptions import ValidationError
from chatterbox.shared.models import (
    FacebookPassport,
    GooglePassport,
    LocalPassport,
    PassportType,
    User,
)
from chatterbox.shared.utils.passports import (
    build_passport,
    get_passport_by_type,
    verify_password,
    verify_password_async,
)
from chatterbox.shared.validation import validate_and_prepare


# ===================================================================
# LocalPassport
# ===================================================================
class TestLocalPassport:

    def test_password_is_staged_not_stored(self):
        passport = LocalPassport(password="  s3cret  ")
        assert passport.pending_password == "s3cret"
        assert passport.password_hash is None
        assert passport.has_password

    def test_empty_password_clears_credential(self):
        passport = LocalPassport(password_hash="$2b$04$existing")
        passport.set_password("   ")
        assert passport.pending_password is None
        assert passport.password_hash is None
        assert not passport.has_password

    def test_mark_hashed(self):
        passport = LocalPassport(password="s3cret")
        passport.mark_hashed("$2b$04$digest")
        assert passport.password_hash == "$2b$04$digest"
        assert passport.pending_password is None


# ===================================================================
# build_passport / get_passport_by_type
# ===================================================================
class TestBuildPassport:

    def test_local(self):
        passport = build_passport("local", password="s3cret", access_token="ignored")
        assert isinstance(passport, LocalPassport)
        assert passport.pending_password == "s3cret"

    def test_social_ignores_password(self):
        passport = build_passport("facebook", password="s3cret", access_token="tok", profile_id="42")
        assert isinstance(passport, FacebookPassport)
        assert passport.access_token == "tok"
        assert passport.profile_id == "42"
        assert passport.provider is PassportType.FACEBOOK
        assert not hasattr(passport, "pending_password")

    def test_unknown_type(self):
        with pytest.raises(ValidationError) as exc_info:
            build_passport("twitter")
        assert exc_info.value.fields == ["type"]
        assert "`twitter` is not a valid passport type" in exc_info.value.errors[0].message

    def test_missing_type(self):
        with pytest.raises(ValidationError) as exc_info:
            build_passport(None)
        assert exc_info.value.errors[0].message == "a passport type is required"


class TestGetPassportByType:

    def test_first_match_wins(self):
        first = LocalPassport(password="one")
        second = LocalPassport(password="two")
        google = GooglePassport(profile_id="g")
        assert get_passport_by_type([google, first, second], "local") is first
        assert get_passport_by_type([google, first], PassportType.GOOGLE) is google

    def test_absent(self):
        assert get_passport_by_type([GooglePassport()], "local") is None
        assert get_passport_by_type([], "facebook") is None


# ===================================================================
# verify_password
# ===================================================================
class TestVerifyPassword:

    def test_correct_and_wrong_password(self, hasher):
        user = User(username="alice", passports=[LocalPassport(password="s3cret")])
        validate_and_prepare(user, hasher)

        assert verify_password(user, "s3cret", hasher) is True
        assert verify_password(user, "wrong", hasher) is False

    def test_no_local_passport_skips_hasher(self, hasher):
        user = User(username="alice", passports=[FacebookPassport(profile_id="1")])
        assert verify_password(user, "s3cret", hasher) is False
        assert hasher.verify_calls == 0

    def test_empty_candidate_skips_hasher(self, hasher):
        user = User(username="alice", passports=[LocalPassport(password_hash="$2b$04$x")])
        assert verify_password(user, "", hasher) is False
        assert verify_password(user, None, hasher) is False
        assert hasher.verify_calls == 0

    def test_unhashed_passport_never_matches(self, hasher):
        user = User(username="alice", passports=[LocalPassport(password="s3cret")])
        assert verify_password(user, "s3cret", hasher) is False
        assert hasher.verify_calls == 0

    async def test_async_variant(self, hasher):
        user = User(username="alice", passports=[LocalPassport(password="s3cret")])
        validate_and_prepare(user, hasher)
        assert await verify_password_async(user, "s3cret", hasher) is True
        assert await verify_password_async(user, "nope", hasher) is False
