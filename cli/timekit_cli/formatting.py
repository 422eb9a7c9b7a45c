from __future__ import annotations

import json
from typing import Any, Iterable

from rich.markup import escape
from rich.table import Table

from . import console


def unwrap(payload: Any) -> Any:
    """Strip the ``{"data": ...}`` envelope the API puts around results."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def print_items(payload: Any, *, title: str, columns: Iterable[str], json_out: bool = False) -> None:
    items = unwrap(payload)
    if json_out or not isinstance(items, list):
        console.print_json(payload)
        return
    columns = list(columns)
    table = Table(title=title)
    for i, name in enumerate(columns):
        table.add_column(name, style="bold" if i == 0 else None)
    for item in items:
        if not isinstance(item, dict):
            continue
        table.add_row(*(escape(cell(item.get(name))) for name in columns))
    console.console.print(table)


def print_record(payload: Any, *, json_out: bool = False) -> None:
    record = unwrap(payload)
    if json_out or not isinstance(record, dict):
        console.print_json(payload)
        return
    for key, value in record.items():
        console.plain(f"{key}: {cell(value)}")


def parse_json_option(raw: str, *, option: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ValueError(f"{option} must be valid JSON: {e}") from e
