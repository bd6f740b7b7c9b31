"""Tests for the bcrypt PasswordHasher."""

import pytest

from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher


@pytest.fixture
def plain_hasher():
    return PasswordHasher(rounds=4)


class TestHash:

    def test_digest_is_not_the_plaintext(self, plain_hasher):
        digest = plain_hasher.hash("s3cret")
        assert digest
        assert digest != "s3cret"
        assert digest.startswith("$2b$04$")

    def test_same_password_hashes_differently(self, plain_hasher):
        first = plain_hasher.hash("s3cret")
        second = plain_hasher.hash("s3cret")
        assert first != second
        assert plain_hasher.verify("s3cret", first)
        assert plain_hasher.verify("s3cret", second)

    async def test_hash_async(self, plain_hasher):
        digest = await plain_hasher.hash_async("s3cret")
        assert await plain_hasher.verify_async("s3cret", digest)


class TestVerify:

    def test_wrong_password(self, plain_hasher):
        digest = plain_hasher.hash("s3cret")
        assert plain_hasher.verify("S3cret", digest) is False

    @pytest.mark.parametrize("digest", [None, ""])
    def test_missing_digest(self, plain_hasher, digest):
        assert plain_hasher.verify("s3cret", digest) is False

    def test_empty_candidate(self, plain_hasher):
        assert plain_hasher.verify("", plain_hasher.hash("s3cret")) is False

    def test_unrecognised_digest(self, plain_hasher):
        assert plain_hasher.verify("s3cret", "not-a-bcrypt-hash") is False


def test_process_hasher_uses_configured_rounds():
    hasher = get_password_hasher()
    assert hasher is get_password_hasher()
    assert hasher.rounds == 4
