"""Implementation of the 'next' command.

The next command prints the version the next release should be
tagged with. It never modifies the repository.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from autotag.config import load_config
from autotag.core.release import compute_next_version
from autotag.exceptions import AutotagError, ConfigError, GitError
from autotag.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from autotag.core.release import ReleasePlan


def run_next(
    path: str | None,
    strict: bool,
    as_json: bool,
    show_plan: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the next command.

    Args:
        path: Optional path to the project directory
        strict: Ignore tags that are not exactly MAJOR.MINOR.PATCH
        as_json: Print the full plan as JSON
        show_plan: Print a summary panel instead of the bare tag
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if strict:
        config = config.model_copy(update={"strict_versions": True})

    # Initialize git repository
    try:
        repo = GitRepository(project_path)
    except GitError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        plan = compute_next_version(repo, config)
    except AutotagError as e:
        err_console.print(f"[red]Error resolving next version:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if as_json:
        console.print_json(json.dumps(plan.to_dict()))
    elif show_plan:
        console.print(_plan_panel(plan))
    else:
        console.print(plan.tag, highlight=False)


def _plan_panel(plan: ReleasePlan) -> Panel:
    if plan.is_first_release:
        header = f"First release! Next version is [green]{plan.tag}[/]"
    else:
        header = f"[cyan]{plan.latest_tag}[/] -> [green]{plan.tag}[/] ([bold]{plan.bump}[/] bump)"

    lines = [header, ""]
    if plan.commits:
        lines.append(f"[bold]Commits considered ({len(plan.commits)}):[/]")
        lines.extend(f"  - {escape(message)}" for message in plan.commits)
    else:
        lines.append("[dim]No commits since last release.[/]")

    return Panel("\n".join(lines), title="[green]Next Version[/]", border_style="green")
