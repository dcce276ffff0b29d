"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from datetime import datetime, timezone

import click

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive command-line datetimes as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def echo_table(headers: list[tuple[str, str]], rows: list[list[object]]) -> None:
    """Print rows under headers; each header is (title, format spec)."""
    click.echo(" ".join(f"{title:{spec}}" for title, spec in headers))
    width = sum(int(spec.strip("<>")) for _, spec in headers) + len(headers) - 1
    click.echo("-" * width)
    for row in rows:
        click.echo(
            " ".join(f"{str(value):{spec}}" for value, (_, spec) in zip(row, headers))
        )
