"""Implementation of the 'classify' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from autotag.core.commits import aggregate, classify

if TYPE_CHECKING:
    from rich.console import Console

_BUMP_STYLES = {
    "major": "red",
    "minor": "yellow",
    "patch": "green",
    "none": "dim",
}


def run_classify(messages: list[str], console: Console) -> None:
    """Show the bump type of each message and their aggregate."""
    table = Table(title="Commit classification")
    table.add_column("Message")
    table.add_column("Bump", justify="right")

    for message in messages:
        bump_type = classify(message)
        style = _BUMP_STYLES[bump_type.value]
        table.add_row(escape(message), f"[{style}]{bump_type}[/]")

    console.print(table)

    overall = aggregate(messages)
    console.print(f"Aggregate increment: [bold {_BUMP_STYLES[overall.value]}]{overall}[/]")
