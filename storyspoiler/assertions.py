"""Response checks shared by the CLI runner and the pytest suite.

Each helper raises AssertionError with an expected/actual message so a
failure reads the same whether pytest or the runner reports it.
"""

from __future__ import annotations

import requests

from storyspoiler.models import ApiResponse, JsonDocument, JsonKind

_BODY_PREVIEW = 200


def _describe(response: requests.Response) -> str:
    body = response.text or ""
    if len(body) > _BODY_PREVIEW:
        body = body[:_BODY_PREVIEW] + "..."
    return f"{response.request.method} {response.url} -> {response.status_code} {body!r}"


def expect_status(response: requests.Response, expected: int) -> None:
    if response.status_code != expected:
        raise AssertionError(
            f"expected status {expected}, got {response.status_code}: {_describe(response)}"
        )


def parse_api_response(response: requests.Response) -> ApiResponse:
    """Deserialize the `{msg, storyId}` envelope, failing on any other shape."""
    doc = JsonDocument.parse(response.text)
    if doc.kind != JsonKind.OBJECT:
        detail = doc.error or f"got JSON {doc.kind.value}"
        raise AssertionError(f"expected a JSON object ({detail}): {_describe(response)}")
    return ApiResponse.from_dict(doc.value)


def expect_message(response: requests.Response, expected: str) -> ApiResponse:
    body = parse_api_response(response)
    if body.msg != expected:
        raise AssertionError(f"expected msg {expected!r}, got {body.msg!r}")
    return body


def expect_story_id(body: ApiResponse) -> str:
    if body.story_id is None:
        raise AssertionError("expected a storyId in the response, got None")
    return body.story_id


def expect_non_empty_array(response: requests.Response) -> list:
    doc = JsonDocument.parse(response.text)
    if doc.kind != JsonKind.ARRAY:
        detail = doc.error or f"got JSON {doc.kind.value}"
        raise AssertionError(f"expected a JSON array ({detail}): {_describe(response)}")
    if not doc.value:
        raise AssertionError("expected a non-empty array, got []")
    return doc.value
