from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from timekit_client.config_types import DEFAULT_API_BASE_URL, DEFAULT_API_VERSION, DEFAULT_APP

APP_NAME = "timekit"
CONFIG_FILENAME = "config.toml"
ENV_API_BASE_URL = "TIMEKIT_API_BASE_URL"


@dataclass
class AuthConfig:
    email: str = ""
    api_token: str = ""


@dataclass
class AppConfig:
    app: str = DEFAULT_APP
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    input_timestamp_format: str | None = None
    output_timestamp_format: str | None = None
    timezone: str | None = None
    auth: AuthConfig = field(default_factory=AuthConfig)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None) -> str:
    """Base URL with a scheme and exactly one trailing slash (the version is appended as-is)."""
    value = (raw or "").strip()
    if not value:
        return ""
    lowered = value.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        host = value.split("/", 1)[0].split(":", 1)[0].lower()
        scheme = "http://" if host in {"localhost", "127.0.0.1", "0.0.0.0"} else "https://"
        value = f"{scheme}{value}"
    return value.rstrip("/") + "/"


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "app": cfg.app,
            "api_base_url": cfg.api_base_url,
            "api_version": cfg.api_version,
            "input_timestamp_format": cfg.input_timestamp_format,
            "output_timestamp_format": cfg.output_timestamp_format,
            "timezone": cfg.timezone,
            "auth": {
                "email": cfg.auth.email,
                "api_token": cfg.auth.api_token,
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.app = str(data.get("app") or cfg.app)
    cfg.api_base_url = normalize_base_url(str(data.get("api_base_url") or "")) or cfg.api_base_url
    cfg.api_version = str(data.get("api_version") or cfg.api_version)
    cfg.input_timestamp_format = _optional_str(data.get("input_timestamp_format"))
    cfg.output_timestamp_format = _optional_str(data.get("output_timestamp_format"))
    cfg.timezone = _optional_str(data.get("timezone"))
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth = AuthConfig(
            email=str(auth_raw.get("email") or ""),
            api_token=str(auth_raw.get("api_token") or ""),
        )
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        cfg = default_config()
    else:
        cfg = from_toml(data)
    env_base_url = os.getenv(ENV_API_BASE_URL, "").strip()
    if env_base_url:
        cfg.api_base_url = normalize_base_url(env_base_url)
    return cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
