"""Travel map clustering settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClusterStrategy(str, Enum):
    """How points are grouped into clusters."""

    DISTANCE = "distance"
    AREA = "area"


class MapSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Pixel radius of a cluster marker, converted to degrees per zoom level
    CLUSTER_RADIUS_PX: float = Field(default=40.0, gt=0)
    TILE_SIZE: int = Field(default=256, gt=0)

    # Multi-point clusters tighter than this are "local" (spiderify candidates)
    LOCAL_CLUSTER_RADIUS_KM: float = Field(default=5.0, gt=0)
    SPIDERIFY_RADIUS_DEG: float = Field(default=0.01, gt=0)  # ~1km at equator

    DEFAULT_ZOOM: int = Field(default=3, ge=0)
    DEFAULT_CENTER: tuple[float, float] = (20.0, 0.0)  # [lat, lng]
    CLUSTER_STRATEGY: ClusterStrategy = ClusterStrategy.DISTANCE


map_settings = MapSettings()


__all__ = ["ClusterStrategy", "MapSettings", "map_settings"]
