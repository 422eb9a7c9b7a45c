from __future__ import annotations

import typer

from ..config import load_config
from ..formatting import print_items, print_record
from ..http import api_errors, make_client

app = typer.Typer(help="Calendars synced to Timekit.")


@app.command("list")
def list_calendars(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing calendars"):
            data = client.get_calendars()
    finally:
        client.close()
    print_items(data, title="Calendars", columns=("id", "name", "provider_id"), json_out=json_out)


@app.command("get")
def get_calendar(
        token: str = typer.Argument(..., help="Calendar id/token."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Fetching calendar"):
            data = client.get_calendar(token)
    finally:
        client.close()
    print_record(data, json_out=json_out)


def contacts_impl(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """List contacts synced from providers."""
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing contacts"):
            data = client.get_contacts()
    finally:
        client.close()
    print_items(data, title="Contacts", columns=("email", "name"), json_out=json_out)
