from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def print_json(data) -> None:
    console.print_json(data=data)


def plain(msg: str, **kwargs) -> None:
    """Print server/config text as-is, without markup parsing."""
    console.print(msg, markup=False, **kwargs)


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")
