from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..formatting import parse_json_option, print_record
from ..http import api_errors, make_client

app = typer.Typer(help="Timekit users.")


@app.command("create")
def create_user(
        first_name: str = typer.Option(..., "--first-name"),
        last_name: str = typer.Option(..., "--last-name"),
        email: str = typer.Option(..., "--email"),
        password: str = typer.Option(..., "--password", prompt=True, hide_input=True, confirmation_prompt=True),
        timezone: str | None = typer.Option(None, "--timezone", help="IANA timezone, e.g. Europe/Copenhagen."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Creating user"):
            data = client.create_user(first_name, last_name, email, password, timezone)
    finally:
        client.close()
    if json_out:
        console.print_json(data)
        return
    console.ok(f"User {email} created.")


@app.command("update")
def update_user(
        data_json: str = typer.Option(..., "--data", help='Fields to update as JSON, e.g. {"timezone": "UTC"}.'),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        payload = parse_json_option(data_json, option="--data")
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Updating user"):
            data = client.update_user(payload)
    finally:
        client.close()
    print_record(data, json_out=json_out)
