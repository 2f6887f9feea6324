from wandermap.clients.travel_api import TravelApiClient
from wandermap.modules.map.points import MapMode
from wandermap.modules.map.service import TravelMapService
from wandermap.modules.map.view import TravelMapView
from wandermap.utils.logger import setup_logging
from wandermap.utils.settings.app import AppSettings


def init_app():
    """Configure logging for the host application."""
    settings = AppSettings()
    logger = setup_logging(settings.is_production, settings.LOG_LEVEL)
    logger.info("WanderMap initialized", environment=settings.ENVIRONMENT)
    return logger


async def load_travel_map(
    token: str | None = None,
    zoom: float | None = None,
    mode: MapMode = MapMode.JOURNEYS,
    client: TravelApiClient | None = None,
) -> TravelMapView:
    """Build a map view for the signed-in user and load it from the API."""
    view = TravelMapView(zoom=zoom, mode=mode)
    service = TravelMapService(client or TravelApiClient(token=token))
    return await service.load(view)
