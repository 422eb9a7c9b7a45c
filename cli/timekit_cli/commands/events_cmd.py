from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..formatting import parse_json_option, print_items
from ..http import api_errors, make_client

app = typer.Typer(help="Events and availability.")

EVENT_COLUMNS = ("start", "end", "what", "where")


@app.command("list")
def list_events(
        start: str = typer.Option(..., "--start", help="Range start, passed to the API as-is."),
        end: str = typer.Option(..., "--end", help="Range end, passed to the API as-is."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing events"):
            data = client.get_events(start, end)
    finally:
        client.close()
    print_items(data, title="Events", columns=EVENT_COLUMNS, json_out=json_out)


@app.command("availability")
def availability(
        start: str = typer.Option(..., "--start", help="Range start."),
        end: str = typer.Option(..., "--end", help="Range end."),
        email: str | None = typer.Option(None, "--email", help="Query another Timekit user."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Fetching availability"):
            data = client.get_availability(start, end, email)
    finally:
        client.close()
    print_items(data, title="Busy", columns=("start", "end"), json_out=json_out)


def findtime_impl(
        emails: list[str] = typer.Option(..., "--email", help="Participant email (repeatable)."),
        filters: str | None = typer.Option(None, "--filters", help="Filters as JSON."),
        future: str | None = typer.Option(None, "--future", help="How far ahead to search, e.g. '2 days'."),
        length: str | None = typer.Option(None, "--length", help="Slot length, e.g. '30 minutes'."),
        sort: str | None = typer.Option(None, "--sort", help="Sort order, e.g. asc."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Find mutual availability across users."""
    parsed_filters = None
    if filters is not None:
        try:
            parsed_filters = parse_json_option(filters, option="--filters")
        except ValueError as e:
            console.err(str(e))
            raise typer.Exit(code=2)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("findtime"):
            data = client.find_time(emails, parsed_filters, future, length, sort)
    finally:
        client.close()
    print_items(data, title="Free slots", columns=("start", "end"), json_out=json_out)
