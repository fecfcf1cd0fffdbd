"""Data models for the storyspoiler harness.

Credentials, StoryPayload, ApiResponse, JsonDocument, ScenarioOutcome,
RunReport: the typed structures that flow through client → scenarios →
runner → report.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class Credentials:
    """Test-account login for the authentication endpoint."""

    username: str
    password: str

    def to_dict(self) -> dict:
        return {"userName": self.username, "password": self.password}


@dataclass
class StoryPayload:
    """Request body for the create and edit endpoints."""

    title: str = ""
    description: str = ""
    url: Optional[str] = ""

    def to_dict(self) -> dict:
        d = {"Title": self.title, "Description": self.description}
        # The missing-fields probe sends only Title and Description
        if self.url is not None:
            d["Url"] = self.url
        return d


@dataclass
class ApiResponse:
    """The service's `{msg, storyId}` response envelope."""

    msg: Optional[str] = None
    story_id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> ApiResponse:
        story_id = d.get("storyId")
        return cls(
            msg=d.get("msg"),
            story_id=str(story_id) if story_id is not None else None,
        )


class JsonKind(str, Enum):
    """Top-level shape of a parsed response body."""

    ARRAY = "array"
    OBJECT = "object"
    SCALAR = "scalar"
    INVALID = "invalid"


@dataclass
class JsonDocument:
    """Tagged result of parsing a response body.

    Exactly one of `value` (for ARRAY/OBJECT/SCALAR) or `error` (for INVALID)
    is meaningful.
    """

    kind: JsonKind
    value: Any = None
    error: str = ""

    @classmethod
    def parse(cls, text: Optional[str]) -> JsonDocument:
        if not text or not text.strip():
            return cls(kind=JsonKind.INVALID, error="empty body")
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            return cls(kind=JsonKind.INVALID, error=str(e))
        if isinstance(value, list):
            return cls(kind=JsonKind.ARRAY, value=value)
        if isinstance(value, dict):
            return cls(kind=JsonKind.OBJECT, value=value)
        return cls(kind=JsonKind.SCALAR, value=value)


class Status(str, Enum):
    """Outcome of a single scenario."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class ScenarioOutcome:
    """Result of running one scenario."""

    name: str
    order: int
    status: Status
    message: str = ""
    elapsed_s: float = 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "order": self.order,
            "status": self.status.value,
            "message": self.message,
            "elapsed_s": self.elapsed_s,
        }


@dataclass
class RunReport:
    """All outcomes of one harness run, in execution order."""

    base_url: str
    timestamp: str
    outcomes: list[ScenarioOutcome] = field(default_factory=list)
    aborted: str = ""

    def count(self, status: Status) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def passed(self) -> int:
        return self.count(Status.PASSED)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def verdict(self) -> str:
        if self.aborted:
            return "aborted"
        if self.total == 0:
            return "no-tests"
        if self.passed == self.total:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 all passed, 1 anything else, 2 aborted setup."""
        if self.aborted:
            return 2
        return 0 if self.verdict in ("pass", "no-tests") else 1

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "base_url": self.base_url,
            "timestamp": self.timestamp,
            "aborted": self.aborted,
            "verdict": self.verdict,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
