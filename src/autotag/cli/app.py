"""Typer application for the autotag command line."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from autotag import __version__
from autotag.logging import configure_logging

app = typer.Typer(
    name="autotag",
    help="Compute the next semantic version from commit messages.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"autotag {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log warnings and errors.")
    ] = False,
    json_log: Annotated[bool, typer.Option("--json-log", help="Emit logs as JSON.")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """autotag: commit-message driven semantic versioning."""
    configure_logging(verbose=verbose, quiet=quiet, json_log=json_log)


@app.command("next")
def next_command(
    path: Annotated[str | None, typer.Argument(help="Project directory (defaults to cwd).")] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Ignore tags that are not exactly MAJOR.MINOR.PATCH.")
    ] = False,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the release plan as JSON.")
    ] = False,
    show_plan: Annotated[
        bool, typer.Option("--plan", help="Print a summary of the decision.")
    ] = False,
) -> None:
    """Print the tag for the next release."""
    from autotag.cli.commands.next import run_next

    run_next(path, strict, as_json, show_plan, console, err_console)


@app.command("classify")
def classify_command(
    messages: Annotated[list[str], typer.Argument(help="Commit messages to classify.")],
) -> None:
    """Classify commit messages and show the aggregate increment."""
    from autotag.cli.commands.classify import run_classify

    run_classify(messages, console)
