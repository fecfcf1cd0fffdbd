"""Storyspoiler runner: orchestrates setup → scenario → teardown per step.

Data flow per scenario:
1. Skip if the context lacks a field the scenario requires (story_id)
2. Setup: fetch a token and open an authenticated client
3. Run the scenario's call and assertions
4. Teardown: close the client, even when an assertion fails
5. Record the outcome and wall clock time

An authentication failure during setup aborts the whole run.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Iterable, Optional

import requests
from rich.console import Console
from rich.markup import escape

from storyspoiler.client import AuthenticationError, open_client
from storyspoiler.config import HarnessConfig
from storyspoiler.models import RunReport, ScenarioOutcome, Status
from storyspoiler.report import STATUS_STYLE
from storyspoiler.scenarios import Scenario, ScenarioContext, select_scenarios


def run_one(
    scenario: Scenario,
    config: HarnessConfig,
    ctx: ScenarioContext,
) -> ScenarioOutcome:
    """Execute a single scenario with its own setup and teardown.

    Raises:
        AuthenticationError: setup could not obtain a token.
    """
    missing = ctx.missing(scenario.requires)
    if missing:
        return ScenarioOutcome(
            name=scenario.name,
            order=scenario.order,
            status=Status.SKIPPED,
            message=f"requires {', '.join(missing)} from create_story",
        )

    start = time.monotonic()
    status = Status.PASSED
    message = ""
    try:
        with open_client(config) as client:
            scenario.run(client, ctx)
    except AssertionError as e:
        status, message = Status.FAILED, str(e)
    except requests.RequestException as e:
        status, message = Status.ERROR, f"{type(e).__name__}: {e}"
    elapsed = time.monotonic() - start

    return ScenarioOutcome(
        name=scenario.name,
        order=scenario.order,
        status=status,
        message=message,
        elapsed_s=round(elapsed, 2),
    )


def run_scenarios(
    config: HarnessConfig,
    console: Console,
    names: Optional[Iterable[str]] = None,
) -> RunReport:
    """Run all (or the named) scenarios strictly in order.

    Args:
        config: Target service and credentials.
        console: Rich Console for status output.
        names: Scenario names to run; None or empty runs the full sequence.

    Returns:
        RunReport with one outcome per executed scenario. If setup failed
        authentication, `aborted` holds the reason and later scenarios are
        absent from the report.

    Raises:
        KeyError: an unknown scenario name was requested.
    """
    scenarios = select_scenarios(names)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    report = RunReport(base_url=config.base_url, timestamp=timestamp)
    ctx = ScenarioContext()

    console.print(f"\n[bold]Target:[/bold] {config.base_url}")
    console.print(f"  Scenarios: {len(scenarios)}")

    for scenario in scenarios:
        console.print(f"  [{scenario.order}] {scenario.name} ...")
        try:
            outcome = run_one(scenario, config, ctx)
        except AuthenticationError as e:
            report.aborted = str(e)
            console.print(f"  [bold red]ABORTED[/bold red] during setup: {escape(str(e))}")
            break
        report.outcomes.append(outcome)

        style = STATUS_STYLE[outcome.status]
        line = f"      [{style}]{outcome.status.value}[/{style}] ({outcome.elapsed_s:.2f}s)"
        if outcome.message:
            line += f" [dim]{escape(outcome.message)}[/dim]"
        console.print(line)

    return report
