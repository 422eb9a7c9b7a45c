from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer
from timekit_client import TimekitClient, TimekitClientError, WebbrowserNavigator
from timekit_client.config_types import ClientConfig, UserCredentials

from . import console
from .config import AppConfig, normalize_base_url


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> TimekitClient:
    base_url = normalize_base_url(base_url_override) or cfg.api_base_url
    return TimekitClient(
        ClientConfig(
            app=cfg.app,
            api_base_url=base_url,
            api_version=cfg.api_version,
            input_timestamp_format=cfg.input_timestamp_format,
            output_timestamp_format=cfg.output_timestamp_format,
            timezone=cfg.timezone,
        ),
        user=UserCredentials(email=cfg.auth.email or None, api_token=cfg.auth.api_token or None),
        navigator=WebbrowserNavigator(),
    )


@contextmanager
def api_errors(action: str) -> Iterator[None]:
    """Turn client errors into a console message and exit code 2."""
    try:
        yield
    except TimekitClientError as e:
        status = getattr(e, "status_code", None)
        if status in (401, 403):
            console.err(f"{action} failed: unauthorized. Run: timekit auth login")
        else:
            console.err(f"{action} failed: {e}")
        raise typer.Exit(code=2)
