"""State of the travel map screen, owned by the calling UI layer."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from wandermap.core.exceptions import WanderMapException
from wandermap.core.messages import MessageCode
from wandermap.modules.map.clustering import Cluster, build_clusters
from wandermap.modules.map.points import MapMode, MapPoint, extract_points, map_center
from wandermap.modules.map.records import JourneyRecord, StoryRecord, UserStats
from wandermap.modules.map.spiderify import SpiderLeg, spiderify
from wandermap.utils.settings.map import ClusterStrategy, map_settings


@dataclass
class Gallery:
    """Photo viewer opened from a memories cluster."""

    title: str
    photos: list[str] = field(default_factory=list)
    index: int = 0

    @property
    def current(self) -> str | None:
        if not self.photos:
            return None
        return self.photos[self.index]

    def next(self) -> str | None:
        if self.photos:
            self.index = (self.index + 1) % len(self.photos)
        return self.current

    def previous(self) -> str | None:
        if self.photos:
            self.index = (self.index - 1) % len(self.photos)
        return self.current


@dataclass(frozen=True)
class Achievement:
    label: str
    value: int | str


class TravelMapView:
    """Zoom, mode, spiderify and gallery state with memoized clustering.

    Points are recomputed only when the data or the mode changes, clusters
    only when the points, the zoom or the strategy change.
    """

    def __init__(
        self,
        zoom: float | None = None,
        mode: MapMode = MapMode.JOURNEYS,
        strategy: ClusterStrategy | None = None,
    ):
        self._journeys: list[JourneyRecord | dict] = []
        self._stories: list[StoryRecord | dict] = []
        self._data_version = 0
        self._zoom = map_settings.DEFAULT_ZOOM if zoom is None else self._checked_zoom(zoom)
        self._mode = MapMode(mode)
        self._strategy = ClusterStrategy(strategy or map_settings.CLUSTER_STRATEGY)

        self.stats: UserStats | None = None
        self.user_location: tuple[float, float] | None = None
        self.spiderified_cluster_id: str | None = None
        self.gallery: Gallery | None = None

        self._points_key: tuple | None = None
        self._points: list[MapPoint] = []
        self._clusters_key: tuple | None = None
        self._clusters: list[Cluster] = []

    @staticmethod
    def _checked_zoom(zoom: float) -> float:
        if not isinstance(zoom, (int, float)) or not math.isfinite(zoom) or zoom < 0:
            raise WanderMapException(
                MessageCode.INVALID_INPUT, details={"zoom": repr(zoom)}
            )
        return zoom

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def mode(self) -> MapMode:
        return self._mode

    def load(
        self,
        journeys: Iterable[JourneyRecord | dict],
        stories: Iterable[StoryRecord | dict],
        stats: UserStats | None = None,
    ) -> None:
        """Replace the map data; the latest load always wins."""
        self._journeys = list(journeys)
        self._stories = list(stories)
        if stats is not None:
            self.stats = stats
        self._data_version += 1
        self.spiderified_cluster_id = None
        self.gallery = None

    def set_zoom(self, zoom: float) -> None:
        zoom = self._checked_zoom(zoom)
        if zoom != self._zoom:
            # Cluster ids are only stable within one zoom level
            self.spiderified_cluster_id = None
        self._zoom = zoom

    def set_mode(self, mode: MapMode) -> None:
        mode = MapMode(mode)
        if mode is not self._mode:
            self.spiderified_cluster_id = None
            self.gallery = None
        self._mode = mode

    @property
    def points(self) -> list[MapPoint]:
        key = (self._data_version, self._mode)
        if key != self._points_key:
            self._points = extract_points(self._mode, self._journeys, self._stories)
            self._points_key = key
        return self._points

    @property
    def clusters(self) -> list[Cluster]:
        points = self.points
        key = (self._points_key, self._zoom, self._strategy)
        if key != self._clusters_key:
            self._clusters = build_clusters(points, self._zoom, self._strategy)
            self._clusters_key = key
        return self._clusters

    @property
    def center(self) -> tuple[float, float]:
        if self.user_location is not None:
            return self.user_location
        return map_center(self.points)

    def get_cluster(self, cluster_id: str) -> Cluster:
        for cluster in self.clusters:
            if cluster.id == cluster_id:
                return cluster
        raise WanderMapException(
            MessageCode.CLUSTER_NOT_FOUND, details={"cluster_id": cluster_id}
        )

    def toggle_spiderify(self, cluster_id: str) -> str | None:
        """Expand a cluster, or collapse it when it is already expanded."""
        self.get_cluster(cluster_id)
        if self.spiderified_cluster_id == cluster_id:
            self.spiderified_cluster_id = None
        else:
            self.spiderified_cluster_id = cluster_id
        return self.spiderified_cluster_id

    def spider_legs(self, cluster_id: str | None = None) -> list[SpiderLeg]:
        """Spiderify layout of ``cluster_id``, or of the expanded cluster."""
        cluster_id = cluster_id or self.spiderified_cluster_id
        if cluster_id is None:
            return []
        return spiderify(self.get_cluster(cluster_id))

    def select_cluster(self, cluster_id: str) -> Gallery | None:
        """Handle a click on a cluster marker.

        In memories mode this opens a gallery of every member photo. In
        journeys mode a multi-point cluster toggles its spiderified layout.
        """
        cluster = self.get_cluster(cluster_id)
        if self._mode is MapMode.MEMORIES:
            photos = [photo for p in cluster.points for photo in p.gallery_photos]
            if photos:
                self.gallery = Gallery(title=cluster.label, photos=photos)
            return self.gallery
        if cluster.count > 1:
            self.toggle_spiderify(cluster_id)
        return None

    def close_gallery(self) -> None:
        self.gallery = None

    @property
    def achievements(self) -> list[Achievement]:
        stats = self.stats or UserStats()
        thousands_km = math.floor(stats.total_distance / 1000 + 0.5)
        return [
            Achievement("Countries", stats.countries_visited),
            Achievement("Cities", stats.cities_visited),
            Achievement("KM Traveled", f"{thousands_km}k"),
            Achievement("Trips", stats.total_trips),
        ]
