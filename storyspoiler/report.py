"""Storyspoiler report: renders a run as a Rich table or a markdown/JSON file.

Shows one row per scenario with status, wall clock and failure message,
followed by the overall verdict.
"""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storyspoiler.models import RunReport, ScenarioOutcome, Status
from storyspoiler.scenarios import Scenario

_VERDICT_STYLE = {
    "pass": "green",
    "partial": "yellow",
    "fail": "red",
    "aborted": "red",
}

STATUS_STYLE = {
    Status.PASSED: "green",
    Status.FAILED: "red",
    Status.ERROR: "red",
    Status.SKIPPED: "yellow",
}


def _fmt_elapsed(outcome: ScenarioOutcome) -> str:
    """Wall clock for a scenario, "--" when it never ran."""
    if outcome.status == Status.SKIPPED:
        return "--"
    return f"{outcome.elapsed_s:.2f}s"


def render_scenarios(scenarios: list[Scenario], console: Console) -> None:
    """Render the available scenarios as a Rich table."""
    table = Table(title="Story Spoiler Scenarios", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name", style="green", min_width=15)
    table.add_column("Description", min_width=30)
    table.add_column("Requires")

    for s in scenarios:
        table.add_row(str(s.order), s.name, s.description, ", ".join(s.requires) or "--")

    console.print()
    console.print(table)
    console.print()


def render_report(report: RunReport, console: Console) -> None:
    """Render a Rich table for a finished run."""
    table = Table(
        title=f"Story Spoiler: {report.base_url}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right")
    table.add_column("Scenario", min_width=16)
    table.add_column("Status", min_width=8)
    table.add_column("Time", justify="right")
    table.add_column("Message", style="dim")

    for o in report.outcomes:
        style = STATUS_STYLE[o.status]
        table.add_row(
            str(o.order),
            o.name,
            f"[{style}]{o.status.value}[/{style}]",
            _fmt_elapsed(o),
            escape(o.message),
        )

    console.print()
    console.print(table)
    if report.aborted:
        console.print(f"[red]Run aborted:[/red] {escape(report.aborted)}")
    color = _VERDICT_STYLE.get(report.verdict, "white")
    console.print(
        f"Verdict: [{color}]{report.verdict}[/{color}] "
        f"({report.passed}/{report.total} passed)"
    )
    console.print()


def _markdown(report: RunReport) -> str:
    lines: list[str] = []
    lines.append("# Story Spoiler Results")
    lines.append("")
    lines.append(f"*Run {report.timestamp} against `{report.base_url}`*")
    lines.append("")
    if report.aborted:
        lines.append(f"**Aborted:** {report.aborted}")
        lines.append("")

    lines.append("| # | Scenario | Status | Time | Message |")
    lines.append("|---|----------|--------|------|---------|")
    for o in report.outcomes:
        message = o.message.replace("|", "\\|").replace("\n", " ")
        lines.append(f"| {o.order} | {o.name} | **{o.status.value}** | {_fmt_elapsed(o)} | {message} |")

    lines.append("")
    lines.append(f"Verdict: **{report.verdict}** ({report.passed}/{report.total} passed)")
    return "\n".join(lines) + "\n"


def write_report(report: RunReport, path: Path) -> Path:
    """Write the report to `path`: JSON for a .json suffix, markdown otherwise."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".json":
        path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
    else:
        path.write_text(_markdown(report), encoding="utf-8")
    return path
