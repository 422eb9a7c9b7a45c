from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..formatting import print_items, print_record, unwrap
from ..http import api_errors, make_client

app = typer.Typer(help="Key/value properties stored on the user.")


@app.command("list")
def list_properties(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing properties"):
            data = client.get_user_properties()
    finally:
        client.close()
    if isinstance(unwrap(data), list):
        print_items(data, title="Properties", columns=("key", "value"), json_out=json_out)
    else:
        print_record(data, json_out=json_out)


@app.command("get")
def get_property(
        key: str = typer.Argument(..., help="Property key."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Fetching property"):
            data = client.get_user_property(key)
    finally:
        client.close()
    print_record(data, json_out=json_out)


@app.command("set")
def set_properties(
        pairs: list[str] = typer.Argument(..., help="key=value pairs."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    payload: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            console.err(f"Invalid property '{pair}', expected key=value.")
            raise typer.Exit(code=2)
        payload[key.strip()] = value
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Saving properties"):
            client.set_user_properties(payload)
    finally:
        client.close()
    console.ok(f"Saved {len(payload)} propert{'y' if len(payload) == 1 else 'ies'}.")
