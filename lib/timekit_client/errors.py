from __future__ import annotations

from typing import Any


class TimekitClientError(Exception):
    """Base client error."""


class NetworkError(TimekitClientError):
    """Transport/network layer error."""


class ApiError(TimekitClientError):
    def __init__(
            self,
            status_code: int,
            message: str,
            details: str | None = None,
            payload: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.payload = payload


class AuthError(ApiError):
    """Auth-related API error."""


class RedirectUnavailableError(TimekitClientError):
    """Redirect requested but the client has no navigator."""
