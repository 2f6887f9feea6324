"""End-to-end flow: fake travel API -> view -> clusters -> spiderify/gallery."""

import pytest

from wandermap.clients.travel_api import TravelApiClient
from wandermap.main import init_app, load_travel_map
from wandermap.modules.map.clustering import ClusterType
from wandermap.modules.map.points import MapMode
from wandermap.utils.settings.travel_api import TravelApiSettings
from tests.utils.fake_api import ok


def _journey(journey_id, lat, lng, place):
    return {
        "id": journey_id,
        "title": f"Trip to {place}",
        "images": [f"https://img.example/{journey_id}.jpg"],
        "location": {
            "coordinates": {"latitude": lat, "longitude": lng},
            "city": place,
            "place_name": place,
        },
    }


@pytest.fixture
def scripted_api(fake_api):
    fake_api.script(
        "/api/journeys/my-journeys",
        ok(
            {
                "journeys": [
                    _journey("j1", 48.8566, 2.3522, "Paris"),
                    _journey("j2", 48.8606, 2.3376, "Paris"),
                    _journey("j3", 40.7128, -74.0060, "New York"),
                    {"id": "j4", "destinations": ["Paris, France"]},
                ]
            }
        ),
    )
    fake_api.script(
        "/api/stories",
        ok(
            {
                "stories": [
                    {"id": "s1", "placeName": "Paris", "lat": 48.8566, "lng": 2.3522,
                     "images": ["s1a.jpg", "s1b.jpg"]},
                    {"id": "s2", "placeName": "Paris", "lat": 48.857, "lng": 2.353,
                     "photo": "s2.jpg"},
                ]
            }
        ),
    )
    fake_api.script(
        "/api/users/profile/stats",
        ok({"countriesVisited": 2, "citiesVisited": 2, "totalDistance": 5837000,
            "totalTrips": 3}),
    )
    return fake_api


@pytest.mark.asyncio
async def test_travel_map_flow(scripted_api):
    init_app()
    client = TravelApiClient(
        TravelApiSettings(TRAVEL_API_URL=scripted_api.url), token="session-token"
    )

    view = await load_travel_map(zoom=6, client=client)

    assert [p.id for p in view.points] == ["j1", "j2", "j3"]
    paris, new_york = view.clusters
    assert paris.label == "Paris (2)"
    assert paris.type == ClusterType.LOCAL
    assert new_york.type == ClusterType.SINGLE
    assert view.achievements[2].value == "5837k"

    view.select_cluster(paris.id)
    assert [leg.point.id for leg in view.spider_legs()] == ["j1", "j2"]

    view.set_mode(MapMode.MEMORIES)
    [memories] = view.clusters
    gallery = view.select_cluster(memories.id)
    assert gallery.photos == ["s1a.jpg", "s1b.jpg", "s2.jpg"]
    assert gallery.title == "Paris (2)"
