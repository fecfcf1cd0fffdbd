"""Authenticated HTTP client for the Story Spoiler API.

Setup is two steps: `fetch_token()` logs in with the test account, then
`StoryClient` attaches the token as a bearer credential to every request.
`open_client()` wraps both and guarantees the session is closed afterwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional
from urllib.parse import quote

import requests
from requests.auth import AuthBase

from storyspoiler.config import (
    AUTH_PATH,
    CREATE_PATH,
    DELETE_PATH,
    EDIT_PATH,
    LIST_PATH,
    HarnessConfig,
)
from storyspoiler.models import JsonDocument, JsonKind, StoryPayload


class AuthenticationError(RuntimeError):
    """No usable access token could be obtained. Fatal for the whole run."""


class BearerAuth(AuthBase):
    """Attach `Authorization: Bearer <token>` to outgoing requests."""

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r


def _new_session(config: HarnessConfig) -> requests.Session:
    session = requests.Session()
    session.trust_env = config.trust_env
    session.headers.update({"Accept": "application/json"})
    return session


def fetch_token(config: HarnessConfig, session: Optional[requests.Session] = None) -> str:
    """Log in with the configured credentials and return the access token.

    Raises:
        AuthenticationError: non-200 status, non-JSON body, or a missing or
            blank `accessToken` field.
    """
    own_session = session is None
    s = session or _new_session(config)
    try:
        resp = s.post(
            config.url(AUTH_PATH),
            json=config.credentials.to_dict(),
            timeout=config.timeout_s,
        )
    finally:
        if own_session:
            s.close()

    if resp.status_code != 200:
        raise AuthenticationError(
            f"Authentication failed: {AUTH_PATH} returned {resp.status_code}"
        )
    doc = JsonDocument.parse(resp.text)
    token = doc.value.get("accessToken") if doc.kind == JsonKind.OBJECT else None
    if not isinstance(token, str) or not token.strip():
        raise AuthenticationError("Authentication failed, token is null or empty.")
    return token


class StoryClient:
    """Thin wrapper over a bearer-authenticated `requests.Session`.

    Every method returns the raw `requests.Response`; judging it is the
    caller's job.
    """

    def __init__(self, config: HarnessConfig, token: str):
        self.config = config
        self.session = _new_session(config)
        self.session.auth = BearerAuth(token)

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        return self.session.request(
            method, self.config.url(path), timeout=self.config.timeout_s, **kwargs,
        )

    def create(self, payload: StoryPayload) -> requests.Response:
        return self._request("POST", CREATE_PATH, json=payload.to_dict())

    def edit(self, story_id: str, payload: StoryPayload) -> requests.Response:
        path = EDIT_PATH.format(story_id=quote(story_id, safe=""))
        return self._request("PUT", path, json=payload.to_dict())

    def list_all(self) -> requests.Response:
        return self._request("GET", LIST_PATH)

    def delete(self, story_id: str) -> requests.Response:
        path = DELETE_PATH.format(story_id=quote(story_id, safe=""))
        return self._request("DELETE", path)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> StoryClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


@contextmanager
def open_client(config: HarnessConfig) -> Iterator[StoryClient]:
    """Authenticate and yield a ready client; always closes it on exit."""
    token = fetch_token(config)
    with StoryClient(config, token) as client:
        yield client
