"""Ordered end-to-end suite against the live Story Spoiler service.

Skipped unless pytest runs with --live. Parametrization keeps the registry
order, so create_story stores the id before edit_story and delete_story
read it from the module-scoped context. A single scenario can be run with
-k, e.g. `pytest --live -k list_stories`.
"""

import pytest

from storyspoiler.client import AuthenticationError, StoryClient, fetch_token
from storyspoiler.config import HarnessConfig
from storyspoiler.scenarios import ScenarioContext, list_scenarios

pytestmark = pytest.mark.live


@pytest.fixture(scope="module")
def live_config(request):
    return HarnessConfig(base_url=request.config.getoption("--live-base-url"))


@pytest.fixture(scope="module")
def ctx():
    return ScenarioContext()


@pytest.fixture
def client(live_config):
    """Fresh token and client per scenario; closed after each one."""
    try:
        token = fetch_token(live_config)
    except AuthenticationError as e:
        pytest.exit(str(e), returncode=2)
    with StoryClient(live_config, token) as c:
        yield c


@pytest.mark.parametrize("scenario", list_scenarios(), ids=lambda s: f"{s.order}-{s.name}")
def test_scenario(scenario, ctx, request):
    missing = ctx.missing(scenario.requires)
    if missing:
        pytest.skip(f"requires {', '.join(missing)} from create_story")
    client = request.getfixturevalue("client")
    scenario.run(client, ctx)
