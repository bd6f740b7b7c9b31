"""
API-level tests for the health, user and message endpoints.

Uses httpx.AsyncClient with ASGITransport (no real HTTP, runs in-process
against the FastAPI app) backed by the SQLite test database.
"""

import uuid

import pytest

REG_DATA = {"username": "viewuser", "password": "ViewPass1!"}


async def register(client, **overrides):
    r = await client.post("/users", json={**REG_DATA, **overrides})
    assert r.status_code == 201, r.text
    return r.json()


# ===================================================================
# Health
# ===================================================================
class TestHealth:

    async def test_health(self, client):
        r = await client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"
        assert r.json()["service"] == "chatterbox"

    async def test_ready_and_live(self, client):
        assert (await client.get("/ready")).json() == {"status": "ready"}
        assert (await client.get("/live")).json() == {"status": "alive"}

    async def test_request_id_header(self, client):
        r = await client.get("/live")
        assert len(r.headers["X-Request-ID"]) == 32

        r = await client.get("/live", headers={"X-Request-ID": "abc-123"})
        assert r.headers["X-Request-ID"] == "abc-123"


# ===================================================================
# Users
# ===================================================================
class TestUsers:

    async def test_register(self, client):
        body = await register(client)
        assert body["username"] == "viewuser"
        assert body["name"] == "viewuser"
        assert body["avatar_url"] == "/avatar/default"
        assert uuid.UUID(body["id"])
        assert "passports" not in body
        assert "ViewPass1!" not in str(body)

    async def test_duplicate_username(self, client):
        await register(client)
        r = await client.post("/users", json=REG_DATA)
        assert r.status_code == 409
        assert r.json()["error"]["code"] == "CONFLICT"

    async def test_field_errors(self, client):
        r = await client.post("/users", json={"username": "u" * 40, "password": "p" * 80})
        assert r.status_code == 400
        error = r.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        fields = [e["field"] for e in error["details"]["errors"]]
        assert fields == ["username", "passports.0.password"]
        assert "p" * 80 not in r.text

    async def test_empty_password(self, client):
        r = await client.post("/users", json={"username": "alice", "password": ""})
        assert r.status_code == 400
        assert r.json()["error"]["code"] == "MISSING_PASSWORD"

    async def test_malformed_body(self, client):
        r = await client.post("/users", json={"username": "alice", "password": 12345})
        assert r.status_code == 400
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"
        assert "12345" not in r.text

    async def test_get_user(self, client):
        created = await register(client)
        r = await client.get(f"/users/{created['id']}")
        assert r.status_code == 200
        assert r.json() == created

    async def test_get_unknown_user(self, client):
        r = await client.get(f"/users/{uuid.uuid4()}")
        assert r.status_code == 404
        assert r.json()["error"]["code"] == "NOT_FOUND"

    async def test_login(self, client):
        created = await register(client)
        r = await client.post("/users/login", json=REG_DATA)
        assert r.status_code == 200
        assert r.json()["id"] == created["id"]

    async def test_login_wrong_password(self, client):
        await register(client)
        r = await client.post("/users/login", json={**REG_DATA, "password": "wrong"})
        assert r.status_code == 401
        assert r.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_change_password(self, client):
        created = await register(client)
        r = await client.put(f"/users/{created['id']}/password", json={"password": "n3w"})
        assert r.status_code == 200

        assert (await client.post("/users/login", json=REG_DATA)).status_code == 401
        r = await client.post("/users/login", json={**REG_DATA, "password": "n3w"})
        assert r.status_code == 200

    async def test_error_body_documented(self, client):
        schema = (await client.get("/openapi.json")).json()
        responses = schema["paths"]["/users"]["post"]["responses"]
        assert responses["409"]["content"]["application/json"]["schema"]["$ref"].endswith(
            "/ErrorResponse"
        )

    async def test_link_passport(self, client):
        created = await register(client)
        r = await client.post(
            f"/users/{created['id']}/passports",
            json={"type": "facebook", "access_token": "tok", "profile_id": "42"},
        )
        assert r.status_code == 200
        assert "tok" not in r.text
        assert (await client.post("/users/login", json=REG_DATA)).status_code == 200


# ===================================================================
# Messages
# ===================================================================
class TestMessages:

    async def test_post_and_read(self, client):
        user = await register(client, name="View User")
        r = await client.post(
            "/messages",
            json={"creator_id": user["id"], "text": " Hello! ", "geo": {"time_zone": "Europe/Paris"}},
        )
        assert r.status_code == 201
        message = r.json()
        assert message["text"] == "Hello!"
        assert message["creator"]["name"] == "View User"
        assert message["location"] == "Europe/Paris"
        assert message["footer"] == "just now, Europe/Paris"

        r = await client.get(f"/messages/{message['id']}")
        assert r.status_code == 200
        assert r.json()["id"] == message["id"]

        r = await client.get("/messages")
        assert [m["id"] for m in r.json()] == [message["id"]]

    async def test_unknown_creator(self, client):
        r = await client.post("/messages", json={"creator_id": str(uuid.uuid4()), "text": "hi"})
        assert r.status_code == 404

    async def test_empty_text(self, client):
        user = await register(client)
        r = await client.post("/messages", json={"creator_id": user["id"], "text": "   "})
        assert r.status_code == 400
        assert [e["field"] for e in r.json()["error"]["details"]["errors"]] == ["text"]

    async def test_unknown_message(self, client):
        assert (await client.get(f"/messages/{uuid.uuid4()}")).status_code == 404

    @pytest.mark.parametrize("query", ["limit=0", "limit=101", "skip=-1"])
    async def test_bad_pagination(self, client, query):
        assert (await client.get(f"/messages?{query}")).status_code == 400
