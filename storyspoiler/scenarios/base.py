"""Scenario descriptor and the context threaded through an ordered run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from storyspoiler.client import StoryClient


@dataclass
class ScenarioContext:
    """State handed from one scenario to the next.

    `story_id` is written once by create_story and read by edit_story and
    delete_story.
    """

    story_id: Optional[str] = None

    def missing(self, requires: tuple[str, ...]) -> list[str]:
        """Names of required fields that are still unset."""
        return [name for name in requires if getattr(self, name, None) is None]


@dataclass
class Scenario:
    """One ordered HTTP call plus its assertions."""

    order: int
    name: str
    description: str
    run: Callable[[StoryClient, ScenarioContext], None]
    requires: tuple[str, ...] = field(default_factory=tuple)
