"""Shared fixtures: the --live switch, a fake Story Spoiler server, and configs."""

import io

import pytest
from rich.console import Console

from fake_service import FakeStoryService, ServerThread
from storyspoiler.config import BASE_URL, HarnessConfig

_PROXY_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run the scenario sequence against the live Story Spoiler service",
    )
    parser.addoption(
        "--live-base-url",
        default=BASE_URL,
        help="Root URL the live suite targets (default: the public deployment)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live: talks to the live Story Spoiler service (needs --live)"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="Live API tests disabled. Pass --live to run.")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def fake_service():
    return FakeStoryService()


@pytest.fixture
def fake_server(fake_service, monkeypatch):
    """Serve `fake_service` on a loopback port for the duration of a test."""
    for var in _PROXY_VARS:
        monkeypatch.delenv(var, raising=False)
    server = ServerThread(fake_service.create_app()).start()
    yield server
    server.stop()


@pytest.fixture
def fake_config(fake_server):
    """HarnessConfig pointing at the fake server with the default credentials."""
    return HarnessConfig(base_url=fake_server.base_url, timeout_s=5)


@pytest.fixture
def console():
    """A console writing into a buffer; read it back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=200)
