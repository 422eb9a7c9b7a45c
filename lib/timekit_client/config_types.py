from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

DEFAULT_APP = "demo"
DEFAULT_API_BASE_URL = "https://api.timekit.io/"
DEFAULT_API_VERSION = "v2"


@dataclass
class ClientConfig:
    app: str = DEFAULT_APP
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    input_timestamp_format: str | None = None
    output_timestamp_format: str | None = None
    timezone: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def merge(self, options: Mapping[str, Any]) -> None:
        """Shallow-merge options; keys that are not fields are kept in ``extra``."""
        known = {f.name for f in fields(self) if f.name != "extra"}
        for key, value in options.items():
            if key in known:
                setattr(self, key, value)
            else:
                self.extra[key] = value

    def snapshot(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return data


@dataclass
class UserCredentials:
    email: str | None = None
    api_token: str | None = None

    def update(self, email: str | None = None, api_token: str | None = None) -> None:
        # falsy values keep what is already stored
        if email:
            self.email = email
        if api_token:
            self.api_token = api_token

    def is_complete(self) -> bool:
        return bool(self.email and self.api_token)

    def snapshot(self) -> dict[str, str | None]:
        return {"email": self.email, "api_token": self.api_token}
