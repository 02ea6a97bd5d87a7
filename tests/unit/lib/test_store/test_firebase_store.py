"""Unit tests for the Realtime Database REST store."""

import json
from urllib.parse import quote

import httpx
import pytest

from voter_lookup.lib.store import FirebaseRealtimeStore, StoreReadError
from voter_lookup.lib.store.firebase import is_valid_path

BASE = "https://voter-roll-test.firebaseio.com"


def _json_response(request: httpx.Request, data: object, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(data, ensure_ascii=False).encode(),
        headers={"content-type": "application/json"},
        request=request,
    )


def _store(handler, **kwargs) -> FirebaseRealtimeStore:
    return FirebaseRealtimeStore(BASE, transport=httpx.MockTransport(handler), **kwargs)


class TestUrlFor:
    """Tests for REST URL construction."""

    def test_simple_path(self) -> None:
        store = FirebaseRealtimeStore(BASE + "/")
        assert store.url_for("voters/UXM8227381") == f"{BASE}/voters/UXM8227381.json"

    def test_devanagari_key_is_percent_encoded(self) -> None:
        store = FirebaseRealtimeStore(BASE)
        url = store.url_for("name_index_last/बधाले")
        assert url == f"{BASE}/name_index_last/{quote('बधाले')}.json"

    def test_leading_and_trailing_slashes_ignored(self) -> None:
        store = FirebaseRealtimeStore(BASE)
        assert store.url_for("/voters/") == f"{BASE}/voters.json"


class TestGet:
    """Tests for value reads."""

    async def test_returns_decoded_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/voters/UXM8227381.json"
            return _json_response(request, {"full_name": "मंगेश रामदास बधाले"})

        async with _store(handler) as store:
            assert await store.get("voters/UXM8227381") == {"full_name": "मंगेश रामदास बधाले"}

    async def test_null_is_none(self) -> None:
        async with _store(lambda request: _json_response(request, None)) as store:
            assert await store.get("voters/NOPE") is None

    async def test_auth_token_sent(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return _json_response(request, None)

        async with _store(handler, auth_token="secret-token") as store:
            await store.get("voters/UXM1")
        assert seen["auth"] == "secret-token"

    async def test_no_auth_param_without_token(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return _json_response(request, None)

        async with _store(handler) as store:
            await store.get("voters/UXM1")
        assert "auth" not in seen


class TestKeys:
    """Tests for shallow key listing."""

    async def test_uses_shallow_query(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["shallow"] == "true"
            return _json_response(request, {"UXM1": True, "UXM2": True})

        async with _store(handler) as store:
            assert await store.keys("voters") == ["UXM1", "UXM2"]

    async def test_missing_path_has_no_keys(self) -> None:
        async with _store(lambda request: _json_response(request, None)) as store:
            assert await store.keys("voters") == []

    async def test_list_voter_ids(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/voters.json"
            return _json_response(request, {"UXM1": True})

        async with _store(handler) as store:
            assert await store.list_voter_ids() == ["UXM1"]


class TestErrors:
    """Transport and service failures raise StoreReadError."""

    async def test_http_error_status(self) -> None:
        async with _store(lambda request: _json_response(request, {"error": "boom"}, 500)) as store:
            with pytest.raises(StoreReadError, match="HTTP 500") as exc_info:
                await store.get("voters/UXM1")
        assert exc_info.value.status_code == 500
        assert exc_info.value.path == "voters/UXM1"

    async def test_permission_denied(self) -> None:
        async with _store(lambda request: _json_response(request, {"error": "Permission denied"}, 401)) as store:
            with pytest.raises(StoreReadError) as exc_info:
                await store.get("name_index/x")
        assert exc_info.value.status_code == 401

    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _store(handler) as store:
            with pytest.raises(StoreReadError, match="Connection"):
                await store.get("voters/UXM1")

    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        async with _store(handler) as store:
            with pytest.raises(StoreReadError, match="timed out"):
                await store.get("voters/UXM1")

    async def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>", request=request)

        async with _store(handler) as store:
            with pytest.raises(StoreReadError, match="Invalid JSON"):
                await store.get("voters/UXM1")


class TestConvenienceReads:
    """get_record and get_index_members on top of get()."""

    async def test_index_members_skip_false_flags(self) -> None:
        body = {"UXM1": True, "UXM2": False, "UXM3": True}
        async with _store(lambda request: _json_response(request, body)) as store:
            assert await store.get_index_members("name_index_last", "बधाले") == {"UXM1", "UXM3"}

    async def test_index_members_non_object(self) -> None:
        async with _store(lambda request: _json_response(request, "oops")) as store:
            assert await store.get_index_members("name_index_last", "बधाले") == set()

    async def test_record_non_object(self) -> None:
        async with _store(lambda request: _json_response(request, [1, 2])) as store:
            assert await store.get_record("UXM1") is None


class TestForbiddenKeys:
    """Keys Firebase cannot store are answered as absent without a request."""

    @pytest.mark.parametrize("key", ["UXM.1", "UXM#1", "UXM$1", "UXM[1]"])
    async def test_get_skips_request(self, key: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError(f"unexpected request to {request.url}")

        async with _store(handler) as store:
            assert await store.get(f"voters/{key}") is None
            assert await store.get_record(key) is None

    async def test_keys_skip_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError(f"unexpected request to {request.url}")

        async with _store(handler) as store:
            assert await store.keys("name_index/a.b") == []
            assert await store.get_index_members("name_index_last", "badale.") == set()

    def test_is_valid_path(self) -> None:
        assert is_valid_path("name_index_last/बधाले")
        assert not is_valid_path("voters/UXM.1")
