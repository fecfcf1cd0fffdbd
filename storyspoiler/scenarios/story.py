"""The Story Spoiler CRUD scenarios, in execution order.

Happy path first (create, edit, list, delete on one story), then the
negative probes (missing fields, unknown id for edit and delete).
"""

from __future__ import annotations

from storyspoiler.assertions import (
    expect_message,
    expect_non_empty_array,
    expect_status,
    expect_story_id,
)
from storyspoiler.client import StoryClient
from storyspoiler.config import (
    MSG_CREATED,
    MSG_DELETED,
    MSG_EDITED,
    MSG_NOT_FOUND,
    MSG_UNABLE_TO_DELETE,
    NON_EXISTING_STORY_ID,
)
from storyspoiler.models import StoryPayload
from storyspoiler.scenarios.base import Scenario, ScenarioContext


def create_story(client: StoryClient, ctx: ScenarioContext) -> None:
    resp = client.create(StoryPayload(title="Test Story", description="Description2234", url=""))
    expect_status(resp, 201)
    body = expect_message(resp, MSG_CREATED)
    ctx.story_id = expect_story_id(body)


def edit_story(client: StoryClient, ctx: ScenarioContext) -> None:
    payload = StoryPayload(title="Test Story Edited", description="Description2234", url="")
    resp = client.edit(ctx.story_id, payload)
    expect_status(resp, 200)
    expect_message(resp, MSG_EDITED)


def list_stories(client: StoryClient, ctx: ScenarioContext) -> None:
    resp = client.list_all()
    expect_status(resp, 200)
    expect_non_empty_array(resp)


def delete_story(client: StoryClient, ctx: ScenarioContext) -> None:
    resp = client.delete(ctx.story_id)
    expect_status(resp, 200)
    expect_message(resp, MSG_DELETED)


def create_without_required_fields(client: StoryClient, ctx: ScenarioContext) -> None:
    resp = client.create(StoryPayload(title="", description="", url=None))
    expect_status(resp, 400)


def edit_nonexistent_story(client: StoryClient, ctx: ScenarioContext) -> None:
    payload = StoryPayload(
        title="Test Story with non existing Id", description="Description", url="",
    )
    resp = client.edit(NON_EXISTING_STORY_ID, payload)
    expect_status(resp, 404)
    expect_message(resp, MSG_NOT_FOUND)


def delete_nonexistent_story(client: StoryClient, ctx: ScenarioContext) -> None:
    resp = client.delete(NON_EXISTING_STORY_ID)
    expect_status(resp, 400)
    expect_message(resp, MSG_UNABLE_TO_DELETE)


SCENARIOS = [
    Scenario(1, "create_story", "Create a story with all required fields", create_story),
    Scenario(2, "edit_story", "Edit the created story", edit_story, requires=("story_id",)),
    Scenario(3, "list_stories", "List all stories (non-empty array)", list_stories),
    Scenario(4, "delete_story", "Delete the created story", delete_story, requires=("story_id",)),
    Scenario(5, "create_without_required_fields", "Create with empty title and description -> 400",
             create_without_required_fields),
    Scenario(6, "edit_nonexistent_story", "Edit an unknown story id -> 404", edit_nonexistent_story),
    Scenario(7, "delete_nonexistent_story", "Delete an unknown story id -> 400", delete_nonexistent_story),
]
