"""Client for the remote travel API (journeys, stories, user stats)."""

import asyncio
from typing import Any

import aiohttp
import structlog
from pydantic import ValidationError

from wandermap.core.exceptions import WanderMapException
from wandermap.core.messages import MessageCode
from wandermap.modules.map.records import (
    JourneyRecord,
    StoryRecord,
    UserStats,
    parse_records,
)
from wandermap.utils.logger import get_logger
from wandermap.utils.settings.travel_api import TravelApiSettings

logger = get_logger(__name__)

MY_JOURNEYS_ENDPOINT = "/journeys/my-journeys"
STORIES_ENDPOINT = "/stories"
USER_STATS_ENDPOINT = "/users/profile/stats"


class TravelApiClient:
    """Client for fetching map data from the travel API."""

    def __init__(
        self, settings: TravelApiSettings | None = None, token: str | None = None
    ):
        self.settings = settings or TravelApiSettings()
        self.base_url = self.settings.base_url
        self.timeout = self.settings.TRAVEL_API_TIMEOUT
        self.max_retries = self.settings.TRAVEL_API_MAX_RETRIES
        self.retry_delay = self.settings.TRAVEL_API_RETRY_DELAY
        if token is None and self.settings.TRAVEL_API_TOKEN is not None:
            token = self.settings.TRAVEL_API_TOKEN.get_secret_value()
        self.token = token

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def get_my_journeys(
        self, session: aiohttp.ClientSession | None = None
    ) -> list[JourneyRecord]:
        payload = await self._get(MY_JOURNEYS_ENDPOINT, session)
        return parse_records(self._data_list(payload, "journeys"), JourneyRecord)

    async def get_stories(
        self, session: aiohttp.ClientSession | None = None
    ) -> list[StoryRecord]:
        payload = await self._get(STORIES_ENDPOINT, session)
        return parse_records(self._data_list(payload, "stories"), StoryRecord)

    async def get_user_stats(
        self, session: aiohttp.ClientSession | None = None
    ) -> UserStats:
        payload = await self._get(USER_STATS_ENDPOINT, session)
        data = payload.get("data") or {}
        try:
            return UserStats.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid user stats payload: {e}")
            raise WanderMapException(
                MessageCode.INVALID_RESPONSE,
                details={"endpoint": USER_STATS_ENDPOINT},
            ) from e

    def _data_list(self, payload: dict[str, Any], key: str) -> list:
        """``data.<key>`` when it is a list, else an empty list."""
        data = payload.get("data")
        items = data.get(key) if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.warning(f"Response has no '{key}' list, treating as empty")
            return []
        return items

    async def _get(
        self, endpoint: str, session: aiohttp.ClientSession | None
    ) -> dict[str, Any]:
        if session is None:
            async with self.session() as own_session:
                return await self._get_with_retries(own_session, endpoint)
        return await self._get_with_retries(session, endpoint)

    async def _get_with_retries(
        self, session: aiohttp.ClientSession, endpoint: str
    ) -> dict[str, Any]:
        """GET with exponential backoff on connection errors, timeouts and 5xx."""
        url = f"{self.base_url}{endpoint}"
        attempts = self.max_retries + 1
        last_error: WanderMapException | None = None

        for attempt in range(1, attempts + 1):
            with structlog.contextvars.bound_contextvars(
                endpoint=endpoint, attempt=attempt
            ):
                try:
                    return await self._get_once(session, url, endpoint)
                except asyncio.TimeoutError as e:
                    logger.warning(f"Travel API request timed out: {e}")
                    last_error = WanderMapException(
                        MessageCode.EXTERNAL_SERVICE_TIMEOUT,
                        details={"endpoint": endpoint},
                    )
                except aiohttp.ClientError as e:
                    logger.warning(f"Travel API request failed: {e}")
                    last_error = WanderMapException(
                        MessageCode.EXTERNAL_SERVICE_ERROR,
                        details={"endpoint": endpoint, "error": str(e)},
                    )
                except WanderMapException as e:
                    if e.status_code is None or e.status_code < 500:
                        raise
                    logger.warning(f"Travel API server error {e.status_code}")
                    last_error = e

            if attempt < attempts:
                await asyncio.sleep(self.retry_delay * 2 ** (attempt - 1))

        logger.error(
            f"Travel API unavailable after {attempts} attempts",
            endpoint=endpoint,
            message_code=last_error.message_code.value,
        )
        raise last_error

    async def _get_once(
        self, session: aiohttp.ClientSession, url: str, endpoint: str
    ) -> dict[str, Any]:
        async with session.get(
            url,
            headers=self._headers(),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        ) as response:
            if response.status in (401, 403):
                logger.error(f"Travel API rejected credentials: {response.status}")
                raise WanderMapException(
                    MessageCode.UNAUTHORIZED,
                    status_code=response.status,
                    details={"endpoint": endpoint},
                )
            if response.status >= 400:
                body = await response.text()
                if response.status < 500:
                    logger.error(f"Travel API error {response.status}: {body[:200]}")
                raise WanderMapException(
                    MessageCode.EXTERNAL_SERVICE_ERROR,
                    status_code=response.status,
                    details={"endpoint": endpoint},
                )
            try:
                payload = await response.json(content_type=None)
            except ValueError as e:
                logger.error(f"Travel API returned non-JSON body: {e}")
                raise WanderMapException(
                    MessageCode.INVALID_RESPONSE,
                    status_code=response.status,
                    details={"endpoint": endpoint},
                ) from e

        if not isinstance(payload, dict):
            logger.error("Travel API returned a non-object JSON body")
            raise WanderMapException(
                MessageCode.INVALID_RESPONSE, details={"endpoint": endpoint}
            )
        return payload
