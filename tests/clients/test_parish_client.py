"""Tests for the async API client using an in-process httpx transport."""

import httpx
import orjson
import pytest

from app.clients import (
    ApiClientError,
    AuthSession,
    FileTokenStore,
    InMemoryTokenStore,
    ParishApiClient,
)


def envelope(results, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"success": True, "results": results})


def failure(errcode: str, errmesg: str, status_code: int) -> httpx.Response:
    return httpx.Response(
        status_code, json={"success": False, "errcode": errcode, "errmesg": errmesg}
    )


class TestParishApiClient:
    """Envelope handling, session headers and resource paths."""

    async def test_login_stores_token_and_sends_bearer(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/api/admin/login":
                return envelope({"token": "tok-1", "user": {"username": "admin"}})
            return envelope({"username": "admin"})

        client = ParishApiClient("http://parish.test/", transport=httpx.MockTransport(handler))

        user = await client.login("admin", "secret")
        await client.verify()

        assert user == {"username": "admin"}
        assert client.session.is_authenticated
        assert orjson.loads(seen[0].content) == {"username": "admin", "password": "secret"}
        assert "authorization" not in seen[0].headers
        assert seen[1].headers["authorization"] == "Bearer tok-1"

    async def test_error_raises_with_server_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return failure("E_NOT_FOUND", "News not found", 404)

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        with pytest.raises(ApiClientError) as exc_info:
            await client.news.get("abc")

        assert exc_info.value.status_code == 404
        assert exc_info.value.errcode == "E_NOT_FOUND"
        assert exc_info.value.message == "News not found"

    async def test_non_json_error_uses_reason_phrase(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        with pytest.raises(ApiClientError) as exc_info:
            await client.churches.list()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    async def test_start_rejects_blank_title_without_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        with pytest.raises(ApiClientError) as exc_info:
            await client.live_stream.start("   ")

        assert exc_info.value.errcode == "E_INVALID_PARAMS"

    async def test_start_sends_trimmed_title_and_delay(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return envelope({"stream_id": "s1", "status": "live"}, 201)

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        result = await client.live_stream.start(
            " Sunday Mass ", tag="special", publish_delay_hours=0
        )

        assert result["stream_id"] == "s1"
        assert seen[0].url.path == "/api/live-stream/admin/start"
        assert orjson.loads(seen[0].content) == {
            "title": "Sunday Mass",
            "tag": "special",
            "publish_delay_hours": 0,
        }

    async def test_none_params_are_dropped(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return envelope([])

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        await client.news.list(category="Event")

        assert seen[0].url.path == "/api/news"
        assert dict(seen[0].url.params) == {"category": "Event"}

    def test_resources_expose_only_served_routes(self):
        client = ParishApiClient("http://parish.test")

        assert not hasattr(client.gallery, "get")
        assert not hasattr(client.churches, "list_admin")
        assert not hasattr(client.documents, "create")
        assert not hasattr(client.messages, "update")
        assert not hasattr(client.offerings, "update")
        assert not hasattr(client.prayer_requests, "get")
        assert hasattr(client.news, "get")
        assert hasattr(client.families, "delete_member")

    async def test_offering_receipt_and_thanksgiving_paths(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return envelope({"ok": True})

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        await client.offerings.by_receipt("VND202600001")
        await client.thanksgivings.set_status("t1", "approved")
        await client.messages.set_status("m1", "read")

        assert [(r.method, r.url.path) for r in seen] == [
            ("GET", "/api/venda/receipt/VND202600001"),
            ("PUT", "/api/thanksgivings/t1/status"),
            ("PATCH", "/api/contact/m1/status"),
        ]

    async def test_youtube_auth_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/youtube/auth-url"
            return envelope({"url": "https://accounts.google.com/o/oauth2/auth?x=1"})

        client = ParishApiClient("http://parish.test", transport=httpx.MockTransport(handler))

        assert (await client.youtube_auth_url()).startswith("https://accounts.google.com")

    async def test_logout_clears_session(self):
        session = AuthSession(InMemoryTokenStore())
        session.set("tok", {"username": "admin"})
        client = ParishApiClient("http://parish.test", session=session)

        client.logout()

        assert not session.is_authenticated
        assert session.auth_headers() == {}


class TestFileTokenStore:
    """Session persistence across client instances."""

    def test_session_survives_reload(self, tmp_path):
        path = tmp_path / "session.json"
        AuthSession(FileTokenStore(path)).set("tok-2", {"phone": "9876543210"})

        restored = AuthSession(FileTokenStore(path))

        assert restored.token == "tok-2"
        assert restored.user == {"phone": "9876543210"}

    def test_unreadable_file_is_ignored(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("not json")

        assert FileTokenStore(path).load() is None
        assert not AuthSession(FileTokenStore(path)).is_authenticated

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / "session.json"
        session = AuthSession(FileTokenStore(path))
        session.set("tok")

        session.clear()

        assert not path.exists()
