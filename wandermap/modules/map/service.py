"""Loading of travel map data from the remote API."""

import asyncio
from dataclasses import dataclass

from wandermap.core.base import BaseService
from wandermap.core.exceptions import WanderMapException
from wandermap.modules.map.records import JourneyRecord, StoryRecord, UserStats
from wandermap.modules.map.view import TravelMapView


@dataclass
class MapData:
    journeys: list[JourneyRecord]
    stories: list[StoryRecord]
    stats: UserStats


class TravelMapService(BaseService):
    """Fetches journeys, stories and stats for the travel map."""

    async def fetch(self) -> MapData:
        """Issue the three requests concurrently over one session.

        If one request fails the others are cancelled and awaited before the
        session closes.
        """
        async with self.client.session() as session:
            tasks = [
                asyncio.create_task(self.client.get_user_stats(session)),
                asyncio.create_task(self.client.get_my_journeys(session)),
                asyncio.create_task(self.client.get_stories(session)),
            ]
            try:
                stats, journeys, stories = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        return MapData(journeys=journeys, stories=stories, stats=stats)

    async def load(self, view: TravelMapView) -> TravelMapView:
        """Fetch map data and replace the view's data with it.

        On failure the view keeps its previous data and the error propagates
        so the caller can show it.
        """
        try:
            data = await self.fetch()
        except WanderMapException as e:
            self.logger.error(
                "Failed to load travel map data",
                message_code=e.message_code.value,
                details=e.details,
            )
            raise

        view.load(data.journeys, data.stories, data.stats)
        self.logger.info(
            "Travel map data loaded",
            journeys=len(data.journeys),
            stories=len(data.stories),
            points=len(view.points),
        )
        return view
