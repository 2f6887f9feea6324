"""Extraction of map points from journey and story records."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wandermap.modules.map.records import (
    Coordinates,
    DestinationRecord,
    JourneyRecord,
    LocationRecord,
    StoryRecord,
    parse_records,
)
from wandermap.utils.settings.map import map_settings


class MapMode(str, Enum):
    """Which dataset the travel map displays."""

    JOURNEYS = "journeys"
    MEMORIES = "memories"


@dataclass(frozen=True)
class MapPoint:
    id: str
    lat: float
    lng: float
    title: str | None = None
    place_name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    photo: str | None = None
    photos: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.place_name or self.title or "Location"

    @property
    def gallery_photos(self) -> list[str]:
        if self.photos:
            return [p for p in self.photos if p]
        return [self.photo] if self.photo else []


def is_valid_coordinate(lat: float | None, lng: float | None) -> bool:
    """True for finite, in-range degrees. Zero is a valid coordinate."""
    if lat is None or lng is None:
        return False
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


def _coordinates_of(location: LocationRecord | None) -> Coordinates | None:
    if location is None or location.coordinates is None:
        return None
    coords = location.coordinates
    if not is_valid_coordinate(coords.latitude, coords.longitude):
        return None
    return coords


def _primary_destination(journey: JourneyRecord) -> DestinationRecord | None:
    for destination in journey.destinations:
        if isinstance(destination, DestinationRecord) and is_valid_coordinate(
            destination.lat, destination.lng
        ):
            return destination
    return None


def _journey_point(journey: JourneyRecord) -> MapPoint | None:
    location = journey.location
    photos = tuple(journey.images or journey.photos)
    destination = _primary_destination(journey)

    if destination is not None:
        lat, lng = destination.lat, destination.lng
        place_name = destination.name or (location.place_name if location else None)
        city = destination.city or (location.city if location else None)
        country = destination.country or (location.country if location else None)
    else:
        coords = _coordinates_of(location)
        if coords is None:
            return None
        lat, lng = coords.latitude, coords.longitude
        place_name = location.place_name or location.city
        city = location.city
        country = location.country

    return MapPoint(
        id=journey.id,
        lat=lat,
        lng=lng,
        title=journey.title,
        place_name=place_name,
        city=city,
        state=location.state if location else None,
        country=country,
        photo=photos[0] if photos else None,
        photos=photos,
    )


def _story_point(story: StoryRecord) -> MapPoint | None:
    location = story.location
    if is_valid_coordinate(story.lat, story.lng):
        lat, lng = story.lat, story.lng
    else:
        coords = _coordinates_of(location)
        if coords is None:
            return None
        lat, lng = coords.latitude, coords.longitude

    photo = story.photo or story.featured_image or story.media
    if not photo and story.images:
        photo = story.images[0]

    return MapPoint(
        id=story.id,
        lat=lat,
        lng=lng,
        title=story.title,
        place_name=story.place_name
        or (location.place_name or location.city if location else None),
        city=location.city if location else None,
        state=location.state if location else None,
        country=location.country if location else None,
        photo=photo,
        photos=tuple(story.images),
    )


def extract_journey_points(
    journeys: Iterable[JourneyRecord | Mapping[str, Any]],
) -> list[MapPoint]:
    """One point per journey with a usable coordinate, in input order.

    The first destination carrying coordinates wins over the journey's
    geotagged location. Journeys with neither are skipped.
    """
    points = []
    for journey in parse_records(journeys, JourneyRecord):
        point = _journey_point(journey)
        if point is not None:
            points.append(point)
    return points


def extract_story_points(
    stories: Iterable[StoryRecord | Mapping[str, Any]],
) -> list[MapPoint]:
    """One point per geotagged story, in input order."""
    points = []
    for story in parse_records(stories, StoryRecord):
        point = _story_point(story)
        if point is not None:
            points.append(point)
    return points


def extract_points(
    mode: MapMode,
    journeys: Iterable[JourneyRecord | Mapping[str, Any]],
    stories: Iterable[StoryRecord | Mapping[str, Any]],
) -> list[MapPoint]:
    if MapMode(mode) is MapMode.JOURNEYS:
        return extract_journey_points(journeys)
    return extract_story_points(stories)


def map_center(
    points: list[MapPoint], default: tuple[float, float] | None = None
) -> tuple[float, float]:
    """Midpoint of the bounding box of the points, [lat, lng]."""
    if not points:
        return default if default is not None else map_settings.DEFAULT_CENTER
    lats = [p.lat for p in points]
    lngs = [p.lng for p in points]
    return (max(lats) + min(lats)) / 2, (max(lngs) + min(lngs)) / 2
