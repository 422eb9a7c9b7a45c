from __future__ import annotations

from typing import Any

from .client import TimekitClient
from .transport import AsyncTransport


class AsyncTimekitClient(TimekitClient):
    """Asyncio flavour of :class:`TimekitClient`.

    API methods return the transport's awaitable as-is; ``auth`` wraps it so
    the credentials are stored once the call has succeeded.
    """

    def _make_transport(self, timeout_s: float, http_transport: Any):
        return AsyncTransport(timeout_s=timeout_s, http_transport=http_transport)

    def close(self) -> None:
        raise TypeError("AsyncTimekitClient must be closed with 'await client.aclose()'")

    async def aclose(self) -> None:
        await self._t.aclose()

    def __enter__(self):
        raise TypeError("use 'async with AsyncTimekitClient(...)'")

    async def __aenter__(self) -> "AsyncTimekitClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
