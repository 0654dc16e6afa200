"""Unit tests – HTTP adapter error mapping."""
from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from flagman.adapters.http import HttpxHttpClient
from flagman.kernel.errors import RemoteError


class TestHttpxErrorMapping:
    @respx.mock
    def test_expected_status_returns_response(self) -> None:
        respx.get("http://svc/ok").mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> httpx.Response:
            async with HttpxHttpClient() as client:
                return await client.get("http://svc/ok", operation="list")

        assert asyncio.run(run()).json() == {"ok": True}

    @respx.mock
    def test_custom_expected_statuses(self) -> None:
        respx.delete("http://svc/gone").mock(return_value=httpx.Response(404))

        async def run() -> httpx.Response:
            async with HttpxHttpClient() as client:
                return await client.delete("http://svc/gone", operation="delete", expected=(200, 404))

        assert asyncio.run(run()).status_code == 404

    @respx.mock
    def test_unexpected_status_raises_remote_error(self) -> None:
        respx.get("http://svc/err").mock(return_value=httpx.Response(503))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.get("http://svc/err", operation="list", target=2)

        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(run())
        err = exc_info.value
        assert err.status_code == 503
        assert err.to_dict()["code"] == "remote_error"
        assert err.detail["target"] == 2

    @respx.mock
    def test_default_headers_sent(self) -> None:
        route = respx.get("http://svc/ok").mock(return_value=httpx.Response(200))

        async def run() -> None:
            async with HttpxHttpClient(headers={"PRIVATE-TOKEN": "abc"}) as client:
                await client.get("http://svc/ok", operation="list")

        asyncio.run(run())
        assert route.calls.last.request.headers["private-token"] == "abc"

    @respx.mock
    def test_base_url_path_is_kept(self) -> None:
        route = respx.get("http://svc/api/v4/projects/1/feature_flags").mock(return_value=httpx.Response(200))

        async def run() -> None:
            async with HttpxHttpClient(base_url="http://svc/api/v4") as client:
                await client.get("/projects/1/feature_flags", operation="list")

        asyncio.run(run())
        assert route.called

    @respx.mock
    def test_invalid_url_raises_remote_error(self) -> None:
        respx.get("http://svc/bad").mock(side_effect=httpx.InvalidURL("bad url"))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.get("http://svc/bad", operation="list", target=4)

        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.target == 4
        assert isinstance(exc_info.value.cause, httpx.InvalidURL)
