from __future__ import annotations

import inspect

import httpx
import pytest

from timekit_client import AsyncTimekitClient, AuthError
from timekit_client.request import encode_basic_auth


@pytest.mark.asyncio
async def test_operations_return_awaitables(recorder) -> None:
    recorder.response = httpx.Response(200, json={"data": [{"id": "c1"}]})
    async with AsyncTimekitClient(http_transport=recorder.transport()) as client:
        client.configure(timezone="UTC")
        pending = client.get_calendars()
        assert inspect.isawaitable(pending)
        assert await pending == {"data": [{"id": "c1"}]}

    assert recorder.last.url.path == "/v2/calendars"
    assert recorder.last.headers["Timekit-Timezone"] == "UTC"


@pytest.mark.asyncio
async def test_auth_captures_credentials_after_success(recorder) -> None:
    body = {"data": {"email": "a@b.com", "api_token": "tok123"}}
    recorder.response = httpx.Response(200, json=body)
    async with AsyncTimekitClient(http_transport=recorder.transport()) as client:
        pending = client.auth("a@b.com", "pw")
        assert client.get_user() == {"email": None, "api_token": None}

        assert await pending == body
        assert client.get_user() == {"email": "a@b.com", "api_token": "tok123"}

        await client.get_events("2020-01-01", "2020-01-31")

    assert recorder.last.headers["Authorization"] == encode_basic_auth("a@b.com", "tok123")
    assert dict(recorder.last.url.params) == {"start": "2020-01-01", "end": "2020-01-31"}


@pytest.mark.asyncio
async def test_auth_failure_propagates_and_keeps_user(recorder) -> None:
    recorder.response = httpx.Response(403, json={"error": "forbidden"})
    async with AsyncTimekitClient(http_transport=recorder.transport()) as client:
        client.set_user("old@b.com", "old")
        with pytest.raises(AuthError):
            await client.auth("a@b.com", "pw")
        assert client.get_user() == {"email": "old@b.com", "api_token": "old"}


def test_sync_close_is_rejected() -> None:
    client = AsyncTimekitClient()
    with pytest.raises(TypeError):
        client.close()


def test_sync_with_is_rejected_on_entry() -> None:
    client = AsyncTimekitClient()
    body_ran = False
    with pytest.raises(TypeError):
        with client:
            body_ran = True
    assert body_ran is False
