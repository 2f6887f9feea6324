from wandermap.clients.travel_api import TravelApiClient
from wandermap.utils.logger import get_logger


class BaseService:
    """Base service class with travel API client injection."""

    def __init__(self, client: TravelApiClient | None = None):
        self.client = client or TravelApiClient()
        self.logger = get_logger(self.__class__.__name__)
