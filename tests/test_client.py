"""Tests for storyspoiler.client against the fake service."""

from unittest.mock import patch

import pytest
import requests

from storyspoiler.client import AuthenticationError, BearerAuth, StoryClient, fetch_token, open_client
from storyspoiler.config import HarnessConfig
from storyspoiler.models import Credentials, StoryPayload


class TestFetchToken:

    def test_valid_credentials_return_non_empty_token(self, fake_config):
        token = fetch_token(fake_config)
        assert isinstance(token, str)
        assert token.strip()

    def test_invalid_credentials_fail_cleanly(self, fake_config):
        config = HarnessConfig(
            base_url=fake_config.base_url,
            credentials=Credentials("nobody", "wrong"),
        )
        with pytest.raises(AuthenticationError, match="returned 401"):
            fetch_token(config)

    def test_blank_token_is_fatal(self, fake_config, fake_service):
        fake_service.blank_token = True
        with pytest.raises(AuthenticationError, match="null or empty"):
            fetch_token(fake_config)

    def test_sends_user_name_and_password(self, fake_config, fake_service):
        fetch_token(fake_config)
        assert fake_service.calls[-1][:2] == ("POST", "/api/User/Authentication")

    def test_connection_error_propagates(self):
        # Nothing listens on port 9 on loopback
        config = HarnessConfig(base_url="http://127.0.0.1:9", timeout_s=2, trust_env=False)
        with pytest.raises(requests.ConnectionError):
            fetch_token(config)


class TestStoryClient:

    def test_bearer_header_attached(self, fake_config, fake_service):
        token = fetch_token(fake_config)
        with StoryClient(fake_config, token) as client:
            resp = client.list_all()
        assert resp.status_code == 200
        assert fake_service.calls[-1] == ("GET", "/api/Story/All", f"Bearer {token}")

    def test_without_valid_token_is_rejected(self, fake_config):
        with StoryClient(fake_config, "not-a-token") as client:
            assert client.list_all().status_code == 401

    def test_crud_round_trip(self, fake_config, fake_service):
        with open_client(fake_config) as client:
            created = client.create(StoryPayload("T", "D", ""))
            story_id = created.json()["storyId"]
            assert created.status_code == 201
            assert client.edit(story_id, StoryPayload("T2", "D", "")).status_code == 200
            assert fake_service.stories[story_id]["title"] == "T2"
            assert client.delete(story_id).status_code == 200
            assert story_id not in fake_service.stories

    def test_story_id_is_path_quoted(self, fake_config):
        with open_client(fake_config) as client:
            resp = client.delete("a b")
        assert resp.request.path_url == "/api/Story/Delete/a%20b"

    def test_bearer_auth_sets_header(self):
        req = requests.Request("GET", "http://example.invalid/").prepare()
        BearerAuth("tok")(req)
        assert req.headers["Authorization"] == "Bearer tok"


class TestOpenClient:

    def test_closes_session_when_body_raises(self, fake_config):
        with patch.object(requests.Session, "close", autospec=True) as close:
            with pytest.raises(AssertionError):
                with open_client(fake_config):
                    raise AssertionError("boom")
        assert close.called

    def test_auth_failure_raises_before_yield(self, fake_config, fake_service):
        fake_service.blank_token = True
        entered = False
        with pytest.raises(AuthenticationError):
            with open_client(fake_config):
                entered = True
        assert not entered
