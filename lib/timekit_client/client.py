from __future__ import annotations

import logging
from typing import Any, Mapping

from .config_types import ClientConfig, UserCredentials
from .errors import RedirectUnavailableError
from .navigation import Navigator
from .request import RequestSpec, build_headers, build_url, google_signup_url
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 15.0


class TimekitClient:
    """Session object for the Timekit API.

    Holds the client configuration and the authenticated user, and shapes
    every call (absolute URL, Timekit headers, Basic auth) before handing it
    to the transport. Results and errors from the transport are returned
    unchanged.

    ``timeout_s`` is fixed for the lifetime of the client's connection pool,
    so it is a constructor argument rather than a ``configure`` option.
    """

    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            user: UserCredentials | None = None,
            navigator: Navigator | None = None,
            timeout_s: float = DEFAULT_TIMEOUT_S,
            http_transport: Any = None,
    ):
        self._cfg = cfg if cfg is not None else ClientConfig()
        self._user = user if user is not None else UserCredentials()
        self._navigator = navigator
        self._t = self._make_transport(timeout_s, http_transport)

    def _make_transport(self, timeout_s: float, http_transport: Any):
        return Transport(timeout_s=timeout_s, http_transport=http_transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "TimekitClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- config / user state ---
    def configure(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
        merged = dict(options or {})
        merged.update(kwargs)
        self._cfg.merge(merged)
        return self._cfg.snapshot()

    def get_config(self) -> dict[str, Any]:
        return self._cfg.snapshot()

    def set_user(self, email: str | None = None, api_token: str | None = None) -> None:
        self._user.update(email, api_token)

    def get_user(self) -> dict[str, str | None]:
        return self._user.snapshot()

    # --- request plumbing ---
    def _request(self, spec: RequestSpec) -> Any:
        url = build_url(self._cfg, spec.path)
        headers = build_headers(self._cfg, self._user)
        params = None
        if spec.params is not None:
            params = {k: v for k, v in spec.params.items() if v is not None}
        return self._t.request(spec.method, url, headers=headers, params=params, json_body=spec.data)

    def _store_auth_payload(self, body: Any) -> None:
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            logger.debug("auth response carried no user data")
            return
        self.set_user(data.get("email"), data.get("api_token"))

    def _capture_user(self, result: Any) -> Any:
        self._store_auth_payload(result)
        return result

    # --- API methods ---
    def auth(self, email: str, password: str) -> Any:
        """Authenticate and keep the returned email/api_token for later calls."""
        result = self._request(RequestSpec("/auth", "POST", data={"email": email, "password": password}))
        return self._capture_user(result)

    def find_time(
            self,
            emails: list[str],
            filters: dict[str, Any] | None = None,
            future: str | None = None,
            length: str | None = None,
            sort: str | None = None,
    ) -> Any:
        body = {
            "emails": emails,
            "filters": filters,
            "future": future,
            "length": length,
            "sort": sort,
        }
        return self._request(RequestSpec("/findtime", "POST", data=body))

    def get_accounts(self) -> Any:
        return self._request(RequestSpec("/accounts", "GET"))

    def account_google_signup(self, should_redirect: bool = False) -> str | None:
        """Build the Google signup URL, or send the navigator there.

        No network call is made. With ``should_redirect`` the URL is handed to
        the injected navigator and nothing is returned.
        """
        url = google_signup_url(self._cfg)
        if not should_redirect:
            return url
        if self._navigator is None:
            raise RedirectUnavailableError("no navigator configured for redirect")
        self._navigator.navigate(url)
        return None

    def get_account_google_calendars(self) -> Any:
        return self._request(RequestSpec("/accounts/google/calendars", "GET"))

    def account_sync(self) -> Any:
        return self._request(RequestSpec("/accounts/sync", "GET"))

    def get_calendars(self) -> Any:
        return self._request(RequestSpec("/calendars", "GET"))

    def get_calendar(self, token: str) -> Any:
        return self._request(RequestSpec(f"/calendars/{token}", "GET"))

    def get_contacts(self) -> Any:
        return self._request(RequestSpec("/contacts/", "GET"))

    def get_events(self, start: str | None = None, end: str | None = None) -> Any:
        return self._request(RequestSpec("/events", "GET", params={"start": start, "end": end}))

    def get_availability(self, start: str | None = None, end: str | None = None, email: str | None = None) -> Any:
        params = {"start": start, "end": end, "email": email}
        return self._request(RequestSpec("/events/availability", "GET", params=params))

    def get_meetings(self) -> Any:
        return self._request(RequestSpec("/meetings", "GET"))

    def get_meeting(self, token: str) -> Any:
        return self._request(RequestSpec(f"/meetings/{token}", "GET"))

    def create_meeting(self, what: str, where: str, suggestions: list[dict[str, Any]]) -> Any:
        body = {"what": what, "where": where, "suggestions": suggestions}
        return self._request(RequestSpec("/meetings", "POST", data=body))

    def update_meeting(self, token: str, data: dict[str, Any]) -> Any:
        return self._request(RequestSpec(f"/meetings/{token}", "PUT", data=data))

    def set_meeting_availability(self, suggestion_id: int | str, available: bool) -> Any:
        body = {"suggestion_id": suggestion_id, "available": available}
        return self._request(RequestSpec("/meetings/availability", "POST", data=body))

    def book_meeting(self, suggestion_id: int | str) -> Any:
        return self._request(RequestSpec("/meetings/book", "POST", data={"suggestion_id": suggestion_id}))

    def invite_to_meeting(self, token: str, emails: list[str]) -> Any:
        return self._request(RequestSpec(f"/meetings/{token}/invite", "POST", data={"emails": emails}))

    def create_user(
            self,
            first_name: str,
            last_name: str,
            email: str,
            password: str,
            timezone: str | None = None,
    ) -> Any:
        body = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
            "timezone": timezone,
        }
        return self._request(RequestSpec("/users", "POST", data=body))

    def get_user_info(self) -> Any:
        return self._request(RequestSpec("/users/me", "GET"))

    def update_user(self, data: dict[str, Any]) -> Any:
        return self._request(RequestSpec("/users/me", "PUT", data=data))

    def get_user_properties(self) -> Any:
        return self._request(RequestSpec("/properties", "GET"))

    def get_user_property(self, key: str) -> Any:
        return self._request(RequestSpec(f"/properties/{key}", "GET"))

    def set_user_properties(self, data: dict[str, Any]) -> Any:
        return self._request(RequestSpec("/properties", "PUT", data=data))
