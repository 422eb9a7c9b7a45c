from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..formatting import parse_json_option, print_items, print_record
from ..http import api_errors, make_client

app = typer.Typer(help="Meeting proposals and bookings.")


def _json_arg(raw: str, option: str):
    try:
        return parse_json_option(raw, option=option)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


@app.command("list")
def list_meetings(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing meetings"):
            data = client.get_meetings()
    finally:
        client.close()
    print_items(data, title="Meetings", columns=("token", "what", "where"), json_out=json_out)


@app.command("get")
def get_meeting(
        token: str = typer.Argument(..., help="Meeting token."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Fetching meeting"):
            data = client.get_meeting(token)
    finally:
        client.close()
    print_record(data, json_out=json_out)


@app.command("create")
def create_meeting(
        what: str = typer.Option(..., "--what", help="Meeting title."),
        where: str = typer.Option(..., "--where", help="Meeting location."),
        suggestions: str = typer.Option(..., "--suggestions", help='Suggested slots as JSON, e.g. [{"start": ..., "end": ...}].'),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    parsed = _json_arg(suggestions, "--suggestions")
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Creating meeting"):
            data = client.create_meeting(what, where, parsed)
    finally:
        client.close()
    print_record(data, json_out=json_out)


@app.command("update")
def update_meeting(
        token: str = typer.Argument(..., help="Meeting token."),
        data_json: str = typer.Option(..., "--data", help="Fields to update as JSON."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    payload = _json_arg(data_json, "--data")
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Updating meeting"):
            data = client.update_meeting(token, payload)
    finally:
        client.close()
    print_record(data, json_out=json_out)


@app.command("availability")
def set_availability(
        suggestion_id: str = typer.Argument(..., help="Suggestion id."),
        available: bool = typer.Option(True, "--available/--unavailable", help="Mark the slot (un)available."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Setting availability"):
            client.set_meeting_availability(suggestion_id, available)
    finally:
        client.close()
    state = "available" if available else "unavailable"
    console.ok(f"Suggestion {suggestion_id} marked {state}.")


@app.command("book")
def book_meeting(
        suggestion_id: str = typer.Argument(..., help="Suggestion id to book."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Booking meeting"):
            client.book_meeting(suggestion_id)
    finally:
        client.close()
    console.ok(f"Suggestion {suggestion_id} booked. Invites sent.")


@app.command("invite")
def invite(
        token: str = typer.Argument(..., help="Meeting token."),
        emails: list[str] = typer.Option(..., "--email", help="Invitee email (repeatable)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Inviting"):
            client.invite_to_meeting(token, emails)
    finally:
        client.close()
    console.ok(f"Invited {len(emails)} address(es) to {token}.")
