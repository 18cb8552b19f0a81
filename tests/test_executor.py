"""Tests for the httpx-backed request executor."""

import json
import logging

import httpx
import pytest

from drone_client import Client, DroneHTTPError
from drone_client.adapters.http_client import HttpRequestExecutor
from drone_client.core.config import ClientConfig
from drone_client.core.interfaces import RequestExecutor

from .conftest import SERVER, TOKEN


def make_executor(handler, url=SERVER):
    config = ClientConfig(url=url, token=TOKEN)
    return HttpRequestExecutor(config, transport=httpx.MockTransport(handler))


class TestHttpRequestExecutor:
    """Tests for status classification and decoding."""

    def test_implements_protocol(self, recorder):
        assert isinstance(make_executor(recorder), RequestExecutor)

    @pytest.mark.asyncio
    async def test_success_decodes_json(self, recorder):
        recorder.respond(200, {"id": 1, "login": "octocat"})
        executor = make_executor(recorder)

        result = await executor.request("GET", "/api/user")

        assert result == {"id": 1, "login": "octocat"}
        assert str(recorder.last.url) == f"{SERVER}/api/user"
        assert recorder.last.headers["Authorization"] == f"Bearer {TOKEN}"
        await executor.aclose()

    @pytest.mark.asyncio
    async def test_error_status_exposes_status_and_headers(self, recorder):
        recorder.respond(404, {"message": "Not Found"}, headers={"X-Reason": "not-found"})
        executor = make_executor(recorder)

        with pytest.raises(DroneHTTPError) as excinfo:
            await executor.request("GET", "/api/repos/octocat/missing")

        error = excinfo.value
        assert error.status == 404
        assert error.status_code == 404
        assert error.headers["x-reason"] == "not-found"
        assert "404" in str(error)
        assert json.loads(error.body) == {"message": "Not Found"}

    @pytest.mark.asyncio
    async def test_redirect_status_is_an_error(self, recorder):
        recorder.respond(302, None, headers={"Location": "/login"})
        executor = make_executor(recorder)

        with pytest.raises(DroneHTTPError) as excinfo:
            await executor.request("GET", "/api/user")
        assert excinfo.value.status == 302

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, recorder):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        recorder.handler = refuse
        executor = make_executor(recorder)

        with pytest.raises(httpx.ConnectError):
            await executor.request("GET", "/api/user")
        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decode_error(self, recorder):
        recorder.respond(200, "<html>not json</html>")
        executor = make_executor(recorder)

        with pytest.raises(json.JSONDecodeError):
            await executor.request("GET", "/api/user")

    @pytest.mark.asyncio
    async def test_empty_body_resolves_to_none(self, recorder):
        recorder.respond(204, None)
        executor = make_executor(recorder)

        assert await executor.request("DELETE", "/api/queue") is None

    @pytest.mark.asyncio
    async def test_none_query_values_dropped(self, recorder):
        executor = make_executor(recorder)

        await executor.request("GET", "/api/repos", params={"page": 2, "per_page": None})

        assert dict(recorder.last.url.params) == {"page": "2"}

    @pytest.mark.asyncio
    async def test_boolean_query_values(self, recorder):
        executor = make_executor(recorder)

        await executor.request("DELETE", "/api/repos/a/b", params={"remove": False})

        assert recorder.last.url.params["remove"] == "false"

    @pytest.mark.asyncio
    async def test_form_body(self, recorder):
        executor = make_executor(recorder)

        await executor.request("POST", "/api/user/repos", data={"async": True})

        assert recorder.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert recorder.last.content == b"async=true"

    @pytest.mark.asyncio
    async def test_json_body(self, recorder):
        executor = make_executor(recorder)

        await executor.request("POST", "/api/nodes", json={"addr": "tcp://10.0.0.2:2376"})

        assert recorder.last.headers["Content-Type"] == "application/json"
        assert json.loads(recorder.last.content) == {"addr": "tcp://10.0.0.2:2376"}

    @pytest.mark.asyncio
    async def test_base_url_path_prefix_kept(self, recorder):
        executor = make_executor(recorder, url="https://example.com/drone")

        await executor.request("GET", "/api/user")

        assert recorder.last.url.path == "/drone/api/user"

    @pytest.mark.asyncio
    async def test_client_context_manager(self, recorder):
        recorder.respond(200, {"login": "octocat"})
        async with Client({"url": SERVER, "token": TOKEN}, transport=httpx.MockTransport(recorder)) as client:
            assert await client.get_self() == {"login": "octocat"}


class TestRequestLogging:
    """DEBUG records emitted around each request."""

    @pytest.mark.asyncio
    async def test_request_and_status_logged_without_token(self, recorder, caplog):
        caplog.set_level(logging.DEBUG, logger="drone_client")
        recorder.respond(200, {"login": "octocat"})
        executor = make_executor(recorder)

        await executor.request("GET", "/api/user", params={"latest": True})

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("start request GET /api/user") for message in messages)
        assert "response status code 200" in messages
        assert all(TOKEN not in message for message in messages)
        assert TOKEN not in caplog.text

    @pytest.mark.asyncio
    async def test_error_status_logged(self, recorder, caplog):
        caplog.set_level(logging.DEBUG, logger="drone_client")
        recorder.respond(500, "boom")
        executor = make_executor(recorder)

        with pytest.raises(DroneHTTPError):
            await executor.request("DELETE", "/api/queue")

        assert "response status code 500" in caplog.messages
