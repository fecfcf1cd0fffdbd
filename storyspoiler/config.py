"""Fixed endpoints, test-account credentials and expected messages.

`HarnessConfig` bundles the values a run needs. Defaults point at the live
Story Spoiler deployment; the CLI can override base URL and credentials.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from storyspoiler.models import Credentials

BASE_URL = "https://d3s5nxhwblsjbi.cloudfront.net"

DEFAULT_USERNAME = "bospoinerstory123"
DEFAULT_PASSWORD = "987654321"

# Endpoint paths (story id is appended for edit/delete)
AUTH_PATH = "/api/User/Authentication"
CREATE_PATH = "/api/Story/Create"
EDIT_PATH = "/api/Story/Edit/{story_id}"
LIST_PATH = "/api/Story/All"
DELETE_PATH = "/api/Story/Delete/{story_id}"

# Response messages asserted by the scenarios
MSG_CREATED = "Successfully created!"
MSG_EDITED = "Successfully edited"
MSG_DELETED = "Deleted successfully!"
MSG_NOT_FOUND = "No spoilers..."
MSG_UNABLE_TO_DELETE = "Unable to delete this story spoiler!"

NON_EXISTING_STORY_ID = "non-existing-id"


def default_credentials() -> Credentials:
    return Credentials(username=DEFAULT_USERNAME, password=DEFAULT_PASSWORD)


@dataclass
class HarnessConfig:
    """Settings for one harness run.

    Args:
        base_url: Root URL of the Story Spoiler service, no trailing slash.
        credentials: Test-account login used by every scenario's setup.
        timeout_s: Per-request timeout. None leaves the transport default.
        trust_env: Whether requests honours proxy/netrc environment settings.
    """

    base_url: str = BASE_URL
    credentials: Credentials = field(default_factory=default_credentials)
    timeout_s: Optional[float] = None
    trust_env: bool = True

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"
