"""Journey, story and stats records as returned by the travel API.

Record shapes vary between API versions, so every field except ``id`` is
optional and unknown fields are ignored. Both snake_case and camelCase keys
are accepted. A field of the wrong type reads as empty instead of rejecting
the whole record, so only a missing coordinate keeps a record off the map.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from wandermap.utils.logger import get_logger

logger = get_logger(__name__)


def _optional_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _nested(value: Any) -> Any:
    """Nested records are kept only when they are objects."""
    return value if isinstance(value, (Mapping, BaseModel)) else None


class RecordModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )


class Coordinates(RecordModel):

    latitude: float | None = Field(
        default=None, validation_alias=AliasChoices("latitude", "lat")
    )
    longitude: float | None = Field(
        default=None, validation_alias=AliasChoices("longitude", "lng", "lon")
    )

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def lenient_float(cls, value):
        return _optional_float(value)


class LocationRecord(RecordModel):
    """Geotagged location attached to a journey or story."""

    coordinates: Coordinates | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    place_name: str | None = Field(
        default=None, validation_alias=AliasChoices("place_name", "placeName")
    )

    @field_validator("coordinates", mode="before")
    @classmethod
    def object_or_none(cls, value):
        return _nested(value)

    @field_validator("country", "state", "city", "place_name", mode="before")
    @classmethod
    def lenient_str(cls, value):
        return _optional_str(value)


class DestinationRecord(RecordModel):
    """Journey destination; older journeys only carry a plain name string."""

    name: str | None = Field(
        default=None, validation_alias=AliasChoices("name", "place_name", "placeName")
    )
    lat: float | None = Field(default=None, validation_alias=AliasChoices("lat", "latitude"))
    lng: float | None = Field(
        default=None, validation_alias=AliasChoices("lng", "longitude", "lon")
    )
    country: str | None = None
    city: str | None = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def lenient_float(cls, value):
        return _optional_float(value)

    @field_validator("name", "country", "city", mode="before")
    @classmethod
    def lenient_str(cls, value):
        return _optional_str(value)


class JourneyRecord(RecordModel):
    id: str
    title: str | None = None
    images: list[str] = []
    photos: list[str] = []
    destinations: list[DestinationRecord | str] = []
    tags: list[str] = []
    location: LocationRecord | None = None
    created_at: str | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )

    @field_validator("images", "photos", "tags", mode="before")
    @classmethod
    def strings_only(cls, value):
        return _str_list(value)

    @field_validator("destinations", mode="before")
    @classmethod
    def usable_destinations(cls, value):
        if not isinstance(value, list):
            return []
        return [
            item for item in value if isinstance(item, (str, Mapping, BaseModel))
        ]

    @field_validator("location", mode="before")
    @classmethod
    def object_or_none(cls, value):
        return _nested(value)

    @field_validator("title", "created_at", mode="before")
    @classmethod
    def lenient_str(cls, value):
        return _optional_str(value)


class StoryRecord(RecordModel):
    id: str
    title: str | None = None
    place_name: str | None = Field(
        default=None, validation_alias=AliasChoices("place_name", "placeName")
    )
    lat: float | None = Field(default=None, validation_alias=AliasChoices("lat", "latitude"))
    lng: float | None = Field(
        default=None, validation_alias=AliasChoices("lng", "longitude", "lon")
    )
    photo: str | None = None
    featured_image: str | None = Field(
        default=None, validation_alias=AliasChoices("featured_image", "featuredImage")
    )
    media: str | None = None
    images: list[str] = []
    location: LocationRecord | None = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def lenient_float(cls, value):
        return _optional_float(value)

    @field_validator("images", mode="before")
    @classmethod
    def strings_only(cls, value):
        return _str_list(value)

    @field_validator("location", mode="before")
    @classmethod
    def object_or_none(cls, value):
        return _nested(value)

    @field_validator(
        "title", "place_name", "photo", "featured_image", "media", mode="before"
    )
    @classmethod
    def lenient_str(cls, value):
        return _optional_str(value)


class UserStats(RecordModel):
    """Travel statistics shown above the map."""

    countries_visited: int = Field(
        default=0, validation_alias=AliasChoices("countries_visited", "countriesVisited")
    )
    cities_visited: int = Field(
        default=0, validation_alias=AliasChoices("cities_visited", "citiesVisited")
    )
    total_distance: float = Field(
        default=0.0, validation_alias=AliasChoices("total_distance", "totalDistance")
    )
    total_trips: int = Field(
        default=0, validation_alias=AliasChoices("total_trips", "totalTrips")
    )

    @field_validator(
        "countries_visited", "cities_visited", "total_distance", "total_trips",
        mode="before",
    )
    @classmethod
    def none_to_zero(cls, value):
        return 0 if value is None else value


RecordT = TypeVar("RecordT", bound=RecordModel)


def parse_records(records: Iterable[Any], model: type[RecordT]) -> list[RecordT]:
    """Validate raw records into ``model``, skipping the ones that do not fit."""
    parsed = []
    for record in records:
        if isinstance(record, model):
            parsed.append(record)
            continue
        if not isinstance(record, Mapping):
            logger.debug("Skipping non-mapping record", record_type=type(record).__name__)
            continue
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as e:
            logger.debug(
                "Skipping malformed record",
                model=model.__name__,
                record_id=record.get("id"),
                errors=e.error_count(),
            )
    return parsed
