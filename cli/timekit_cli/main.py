from __future__ import annotations

import typer

from .commands import accounts_cmd, auth_cmd, calendars_cmd, config_cmd, events_cmd, meetings_cmd, properties_cmd
from .commands import users_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="timekit",
        help="Timekit API command line client",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.command("whoami")(auth_cmd.whoami_impl)
    app.add_typer(config_cmd.app, name="config")
    app.add_typer(accounts_cmd.app, name="accounts")
    app.add_typer(calendars_cmd.app, name="calendars")
    app.command("contacts")(calendars_cmd.contacts_impl)
    app.add_typer(events_cmd.app, name="events")
    app.command("findtime")(events_cmd.findtime_impl)
    app.add_typer(meetings_cmd.app, name="meetings")
    app.add_typer(users_cmd.app, name="users")
    app.add_typer(properties_cmd.app, name="properties")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
