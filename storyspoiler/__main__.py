"""CLI for the storyspoiler API test harness.

Usage:
    python -m storyspoiler list                            # Show scenarios in order
    python -m storyspoiler run                             # Run the full sequence
    python -m storyspoiler run create_story list_stories   # Run a subset, in order
    python -m storyspoiler run --report results.md         # Also write a report file
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from storyspoiler.config import BASE_URL, DEFAULT_PASSWORD, DEFAULT_USERNAME, HarnessConfig
from storyspoiler.models import Credentials
from storyspoiler.report import render_report, render_scenarios, write_report
from storyspoiler.runner import run_scenarios
from storyspoiler.scenarios import list_scenarios, select_scenarios

app = typer.Typer(
    name="storyspoiler",
    help="End-to-end API tests for the Story Spoiler service",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("list")
def cmd_list() -> None:
    """Show the scenarios in execution order."""
    render_scenarios(list_scenarios(), console)


@app.command("run")
def cmd_run(
    names: Optional[List[str]] = typer.Argument(None, help="Scenario names to run (default: all)"),
    base_url: str = typer.Option(BASE_URL, "--base-url", help="Story Spoiler service root URL"),
    username: str = typer.Option(DEFAULT_USERNAME, "--username", "-u", help="Test account user name"),
    password: str = typer.Option(DEFAULT_PASSWORD, "--password", "-p", help="Test account password"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout in seconds"),
    report_path: Optional[Path] = typer.Option(None, "--report", help="Write a .md or .json report"),
) -> None:
    """Run all scenarios, or the named ones, in their fixed order."""
    config = HarnessConfig(
        base_url=base_url,
        credentials=Credentials(username=username, password=password),
        timeout_s=timeout,
    )
    try:
        select_scenarios(names)
    except KeyError as e:
        console.print(f"[red]Unknown scenario:[/red] {e.args[0]}. Run 'list' to see the names.")
        raise typer.Exit(1)

    report = run_scenarios(config, console, names=names)

    render_report(report, console)
    if report_path:
        path = write_report(report, report_path)
        console.print(f"Report written to {path}")

    raise typer.Exit(report.exit_code)


if __name__ == "__main__":
    app()
