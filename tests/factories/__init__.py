"""Test factories for WanderMap records and points."""

from .base import RecordFactory
from .records import (
    CoordinatesFactory,
    LocationFactory,
    DestinationFactory,
    JourneyFactory,
    StoryFactory,
    UserStatsFactory,
)
from .points import MapPointFactory

__all__ = [
    "RecordFactory",
    "CoordinatesFactory",
    "LocationFactory",
    "DestinationFactory",
    "JourneyFactory",
    "StoryFactory",
    "UserStatsFactory",
    "MapPointFactory",
]
