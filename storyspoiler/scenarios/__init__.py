"""Scenario registry for storyspoiler.

Scenarios live in storyspoiler/scenarios/story.py as plain functions taking
(client, context). The registry keeps them in their fixed execution order:
edit_story and delete_story consume the id that create_story stores.
"""

from __future__ import annotations

from typing import Iterable, Optional

from storyspoiler.scenarios.base import Scenario, ScenarioContext
from storyspoiler.scenarios.story import SCENARIOS

__all__ = ["Scenario", "ScenarioContext", "list_scenarios", "load_scenario", "select_scenarios"]


def list_scenarios() -> list[Scenario]:
    """All scenarios sorted by their order number."""
    return sorted(SCENARIOS, key=lambda s: s.order)


def load_scenario(name: str) -> Optional[Scenario]:
    """Look up a single scenario by name, None if unknown."""
    for scenario in SCENARIOS:
        if scenario.name == name:
            return scenario
    return None


def select_scenarios(names: Optional[Iterable[str]] = None) -> list[Scenario]:
    """Return the named scenarios in registry order (all when names is empty).

    Raises:
        KeyError: if any name is not a registered scenario.
    """
    names = list(names or [])
    if not names:
        return list_scenarios()
    unknown = [n for n in names if load_scenario(n) is None]
    if unknown:
        raise KeyError(", ".join(unknown))
    wanted = set(names)
    return [s for s in list_scenarios() if s.name in wanted]
