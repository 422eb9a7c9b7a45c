from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from .config_types import ClientConfig, UserCredentials

HEADER_APP = "Timekit-App"
HEADER_INPUT_TIMESTAMP_FORMAT = "Timekit-InputTimestampFormat"
HEADER_OUTPUT_TIMESTAMP_FORMAT = "Timekit-OutputTimestampFormat"
HEADER_TIMEZONE = "Timekit-Timezone"

GOOGLE_SIGNUP_PATH = "/accounts/google/signup"


@dataclass(frozen=True)
class RequestSpec:
    path: str
    method: str
    data: Any = None
    params: dict[str, Any] | None = None


def build_url(cfg: ClientConfig, path: str) -> str:
    return f"{cfg.api_base_url}{cfg.api_version}{path}"


def encode_basic_auth(email: str, api_token: str) -> str:
    raw = f"{email}:{api_token}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


def build_headers(cfg: ClientConfig, user: UserCredentials) -> dict[str, str]:
    headers = {HEADER_APP: str(cfg.app)}
    if user.is_complete():
        headers["Authorization"] = encode_basic_auth(user.email, user.api_token)
    if cfg.input_timestamp_format:
        headers[HEADER_INPUT_TIMESTAMP_FORMAT] = cfg.input_timestamp_format
    if cfg.output_timestamp_format:
        headers[HEADER_OUTPUT_TIMESTAMP_FORMAT] = cfg.output_timestamp_format
    if cfg.timezone:
        headers[HEADER_TIMEZONE] = cfg.timezone
    return headers


def google_signup_url(cfg: ClientConfig) -> str:
    return f"{build_url(cfg, GOOGLE_SIGNUP_PATH)}?{HEADER_APP}={cfg.app}"
