from __future__ import annotations

import typer

from .. import console
from ..config import load_config, save_config
from ..http import api_errors, make_client

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
        email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
        password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        with api_errors("Login"):
            client.auth(email, password)
        user = client.get_user()
    finally:
        client.close()

    if not user.get("api_token"):
        console.err("Login failed: no api_token in response.")
        raise typer.Exit(code=2)

    cfg.auth.email = user.get("email") or email
    cfg.auth.api_token = user["api_token"]
    save_path = save_config(cfg)
    console.ok(f"Login successful. Token saved to {save_path}.")


@app.command("logout", help="Clear stored email and API token.")
def logout():
    cfg = load_config()
    cfg.auth.email = ""
    cfg.auth.api_token = ""
    save_path = save_config(cfg)
    console.ok(f"Credentials cleared from {save_path}.")


def whoami_impl(
        base_url: str | None = typer.Option(None, "--base-url", help="Override API base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Show the authenticated user."""
    cfg = load_config()
    if not cfg.auth.api_token:
        console.err("Not logged in. Run: timekit auth login")
        raise typer.Exit(code=2)
    client = make_client(cfg, base_url_override=base_url)
    try:
        with api_errors("whoami"):
            data = client.get_user_info()
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    user = data.get("data") if isinstance(data, dict) else None
    if not isinstance(user, dict):
        console.print_json(data)
        return
    name = " ".join(p for p in (user.get("first_name"), user.get("last_name")) if p)
    console.plain(f"email={user.get('email') or cfg.auth.email}")
    if name:
        console.plain(f"name={name}")
    if user.get("timezone"):
        console.plain(f"timezone={user['timezone']}")
