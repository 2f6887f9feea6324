"""Global test configuration and fixtures for WanderMap."""

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from tests.factories import (
    JourneyFactory,
    MapPointFactory,
    StoryFactory,
    UserStatsFactory,
)
from tests.utils.fake_api import FakeTravelApi


@pytest.fixture
def journey_factory():
    return JourneyFactory


@pytest.fixture
def story_factory():
    return StoryFactory


@pytest.fixture
def stats_factory():
    return UserStatsFactory


@pytest.fixture
def point_factory():
    return MapPointFactory


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch):
    """Keep developer environment variables out of the settings under test."""
    for name in (
        "CLUSTER_RADIUS_PX",
        "TILE_SIZE",
        "LOCAL_CLUSTER_RADIUS_KM",
        "SPIDERIFY_RADIUS_DEG",
        "CLUSTER_STRATEGY",
        "TRAVEL_API_URL",
        "TRAVEL_API_TOKEN",
        "TRAVEL_API_MAX_RETRIES",
        "TRAVEL_API_RETRY_DELAY",
        "ENVIRONMENT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def paris_points(point_factory):
    """Three points within ~1km of each other around central Paris."""
    return [
        point_factory.build(id="paris-1", lat=48.8566, lng=2.3522, place_name="Paris"),
        point_factory.build(id="paris-2", lat=48.8606, lng=2.3376, place_name="Paris"),
        point_factory.build(id="paris-3", lat=48.8530, lng=2.3499, place_name="Paris"),
    ]


@pytest.fixture
def world_points(paris_points, point_factory):
    """Paris trio, then London and New York, in that input order."""
    return [
        *paris_points,
        point_factory.build(id="london", lat=51.5074, lng=-0.1278, place_name="London"),
        point_factory.build(id="nyc", lat=40.7128, lng=-74.0060, place_name="New York"),
    ]


@pytest_asyncio.fixture
async def fake_api():
    """Fake travel API served on a local port for the duration of a test."""
    api = FakeTravelApi()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", api.handle)
    server = test_utils.TestServer(app)
    await server.start_server()
    api.url = str(server.make_url(""))
    yield api
    await server.close()
