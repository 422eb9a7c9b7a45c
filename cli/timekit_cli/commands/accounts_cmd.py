from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..formatting import print_items
from ..http import api_errors, make_client

app = typer.Typer(help="Connected provider accounts.")


@app.command("list")
def list_accounts(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing accounts"):
            data = client.get_accounts()
    finally:
        client.close()
    print_items(data, title="Accounts", columns=("id", "provider", "email"), json_out=json_out)


@app.command("sync")
def sync_accounts(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Account sync"):
            data = client.account_sync()
    finally:
        client.close()
    if json_out:
        console.print_json(data)
        return
    console.ok("Sync started.")


@app.command("google-calendars")
def google_calendars(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        with api_errors("Listing Google calendars"):
            data = client.get_account_google_calendars()
    finally:
        client.close()
    print_items(data, title="Google calendars", columns=("id", "summary", "primary"), json_out=json_out)


@app.command("google-signup")
def google_signup(
        open_browser: bool = typer.Option(False, "--open", help="Open the signup page in a browser."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        url = client.account_google_signup()
        if open_browser:
            with api_errors("Redirect"):
                client.account_google_signup(should_redirect=True)
    finally:
        client.close()
    console.plain(url, soft_wrap=True)
