"""Tests for UserRepository and MessageRepository against SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from chatterbox.shared.core.exceptions import (
    DuplicateResourceError,
    MissingLocalPassportError,
    ValidationError,
)
from chatterbox.shared.models import FacebookPassport, LocalPassport
from chatterbox.shared.repositories import MessageRepository, UserRepository
from chatterbox.shared.utils.passports import verify_password

from tests.factories import MessageFactory, UserFactory


@pytest.fixture
def users(session, hasher):
    return UserRepository(session, hasher)


@pytest.fixture
def messages(session):
    return MessageRepository(session)


# ===================================================================
# UserRepository
# ===================================================================
class TestUserRepository:

    async def test_save_assigns_id_and_timestamps(self, users):
        user = await users.save(UserFactory(username="alice"))
        assert user.id is not None
        assert user.created_at is not None
        assert user.updated_at is not None
        assert user.name == "alice"
        assert user.avatar_url == "/avatar/default"

    async def test_save_hashes_once(self, users, hasher):
        user = await users.save(UserFactory())
        digest = user.local_passport.password_hash

        user.name = "Renamed"
        await users.save(user)

        assert hasher.hash_calls == 1
        assert user.local_passport.password_hash == digest

    async def test_reloaded_user_is_not_rehashed(self, users, session, hasher):
        user = await users.save(UserFactory(username="dave"))
        digest = user.local_passport.password_hash
        session.expunge_all()

        loaded = await users.get_by_username("dave")
        assert loaded is not user
        await users.save(loaded)

        assert hasher.hash_calls == 1
        assert loaded.local_passport.password_hash == digest
        assert verify_password(loaded, "s3cret", hasher)

    async def test_invalid_user_is_not_written(self, users):
        with pytest.raises(MissingLocalPassportError):
            await users.save(UserFactory(username="eve", passports=[FacebookPassport()]))
        assert await users.username_exists("eve") is False

    async def test_validation_errors_propagate(self, users):
        with pytest.raises(ValidationError):
            await users.save(UserFactory(username="x" * 40))

    async def test_duplicate_username(self, users):
        await users.save(UserFactory(username="alice"))
        with pytest.raises(DuplicateResourceError):
            await users.save(UserFactory(username="alice"))

    async def test_other_integrity_errors_propagate(self, users, monkeypatch):
        async def failing_add(instance):
            raise IntegrityError("INSERT INTO passports", {}, Exception("FOREIGN KEY constraint failed"))

        monkeypatch.setattr(users, "add", failing_add)
        with pytest.raises(IntegrityError):
            await users.save(UserFactory(username="ivy"))

    async def test_lookup_by_username(self, users):
        user = await users.save(UserFactory(username="frank"))
        assert await users.get_by_username(" frank ") is user
        assert await users.get_by_username("nobody") is None
        assert await users.username_exists("frank")

    async def test_create(self, users):
        user = await users.create(username="gina", passports=[LocalPassport(password="pw")])
        assert await users.get(user.id) is user
        assert await users.count() == 1

    async def test_passports_persist(self, users, session):
        user = UserFactory(
            username="hal",
            passports=[LocalPassport(password="pw"), FacebookPassport(access_token="t", profile_id="9")],
        )
        await users.save(user)
        session.expunge_all()

        loaded = await users.get(user.id)
        assert {p.type for p in loaded.passports} == {"local", "facebook"}
        assert loaded.get_passport_by_type("facebook").profile_id == "9"

    async def test_delete(self, users):
        user = await users.save(UserFactory())
        assert await users.delete(user.id) is True
        assert await users.get(user.id) is None
        assert await users.delete(user.id) is False


# ===================================================================
# MessageRepository
# ===================================================================
class TestMessageRepository:

    async def test_save_normalizes(self, messages):
        message = await messages.save(
            MessageFactory(text="  hello  ", geo={"city": " Lyon ", "country_name": ""})
        )
        assert message.id is not None
        assert message.created_at is not None
        assert message.text == "hello"
        assert message.geo_city == "Lyon"
        assert message.geo_country_name is None

    async def test_invalid_message(self, messages):
        with pytest.raises(ValidationError) as exc_info:
            await messages.save(MessageFactory(text="", creator_name=""))
        assert exc_info.value.fields == ["creator.name", "text"]

    async def test_list_recent_newest_first(self, messages):
        now = datetime.now(timezone.utc)
        for minutes, text in [(10, "old"), (0, "new"), (5, "middle")]:
            await messages.save(MessageFactory(text=text, created_at=now - timedelta(minutes=minutes)))

        recent = await messages.list_recent()
        assert [m.text for m in recent] == ["new", "middle", "old"]
        assert [m.text for m in await messages.list_recent(offset=1, limit=1)] == ["middle"]

    async def test_create_from_creator_snapshot(self, messages, users):
        user = await users.save(UserFactory())
        message = await messages.create(creator_id=user.id, creator_name=user.name, text="hi")
        assert message.creator_id == user.id
        assert message.creator_name == user.name
        assert message.creator_avatar_url is None
