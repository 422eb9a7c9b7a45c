from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .errors import ApiError, AuthError, NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = "timekit-client/0.1.0"


def _parse_response(method: str, url: str, r: httpx.Response) -> Any:
    logger.debug("%s %s -> %s", method, url, r.status_code)

    # Try parse body as json for better errors / output
    data: Any = None
    text = None
    try:
        data = r.json()
    except ValueError:
        text = r.text

    if r.status_code >= 400:
        msg = f"{method} {url} failed with {r.status_code}"
        details = None

        if isinstance(data, dict):
            details = json.dumps(data, ensure_ascii=False)
            for key in ("error", "message", "detail"):
                if isinstance(data.get(key), str) and data[key]:
                    msg = data[key]
                    break
        elif text:
            details = text[:1000]

        if r.status_code in (401, 403):
            raise AuthError(r.status_code, msg, details, data)
        raise ApiError(r.status_code, msg, details, data)

    return data if data is not None else r.text


class Transport:
    def __init__(self, *, timeout_s: float = 15.0, http_transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(
            timeout=timeout_s,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(
            self,
            method: str,
            url: str,
            *,
            headers: dict[str, str],
            params: dict[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        try:
            r = self._client.request(method, url, headers=headers, params=params, json=json_body)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        return _parse_response(method, url, r)


class AsyncTransport:
    def __init__(self, *, timeout_s: float = 15.0, http_transport: httpx.AsyncBaseTransport | None = None):
        self._client = httpx.AsyncClient(
            timeout=timeout_s,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            transport=http_transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
            self,
            method: str,
            url: str,
            *,
            headers: dict[str, str],
            params: dict[str, Any] | None = None,
            json_body: Any | None = None,
    ) -> Any:
        try:
            r = await self._client.request(method, url, headers=headers, params=params, json=json_body)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        return _parse_response(method, url, r)
