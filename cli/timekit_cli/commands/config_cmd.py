from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_base_url, save_config

app = typer.Typer(help="Show or change client settings.")


@app.command("show")
def show_config():
    cfg = load_config()
    token_state = "(set)" if cfg.auth.api_token else "(empty)"
    console.plain(f"path={config_path()}")
    console.plain(f"app={cfg.app} api_base_url={cfg.api_base_url} api_version={cfg.api_version}")
    console.plain(
        f"input_timestamp_format={cfg.input_timestamp_format or '-'} "
        f"output_timestamp_format={cfg.output_timestamp_format or '-'} "
        f"timezone={cfg.timezone or '-'}"
    )
    console.plain(f"email={cfg.auth.email or '-'} api_token={token_state}")


@app.command("set")
def set_config(
        app_name: str | None = typer.Option(None, "--app", help="Timekit app identifier."),
        api_base_url: str | None = typer.Option(None, "--api-base-url", help="API base URL."),
        api_version: str | None = typer.Option(None, "--api-version", help="API version segment, e.g. v2."),
        input_timestamp_format: str | None = typer.Option(None, "--input-timestamp-format"),
        output_timestamp_format: str | None = typer.Option(None, "--output-timestamp-format"),
        timezone: str | None = typer.Option(None, "--timezone", help="Timezone sent with every request."),
):
    cfg = load_config()
    if app_name is not None:
        cfg.app = app_name
    if api_base_url is not None:
        cfg.api_base_url = normalize_base_url(api_base_url) or cfg.api_base_url
    if api_version is not None:
        cfg.api_version = api_version
    # empty string clears the optional headers
    if input_timestamp_format is not None:
        cfg.input_timestamp_format = input_timestamp_format or None
    if output_timestamp_format is not None:
        cfg.output_timestamp_format = output_timestamp_format or None
    if timezone is not None:
        cfg.timezone = timezone or None
    save_config(cfg)
    console.ok("Config updated.")
