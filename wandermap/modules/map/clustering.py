"""Zoom-dependent clustering of travel map points."""

import math
from dataclasses import dataclass, field
from enum import Enum

from wandermap.modules.map.points import MapPoint
from wandermap.utils.settings.map import ClusterStrategy, map_settings

EARTH_RADIUS_KM = 6371.0
# Beyond this the radius is far below any coordinate precision
MAX_ZOOM = 30

# Zoom bands for area clustering
COUNTRY_ZOOM_MAX = 5
STATE_ZOOM_MAX = 10


class ClusterType(str, Enum):
    SINGLE = "single"
    LOCAL = "local"
    REGIONAL = "regional"


@dataclass
class Cluster:
    id: str
    lat: float
    lng: float
    label: str
    type: ClusterType
    points: list[MapPoint] = field(default_factory=list)
    radius_km: float = 0.0

    @property
    def count(self) -> int:
        return len(self.points)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in km."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat, dlng = math.radians(lat2 - lat1), math.radians(lng2 - lng1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def degree_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Equirectangular distance in degrees of latitude.

    Longitude is scaled by the cosine of the mean latitude. No antimeridian
    wraparound.
    """
    dlat = lat2 - lat1
    dlng = (lng2 - lng1) * math.cos(math.radians((lat1 + lat2) / 2))
    return math.hypot(dlat, dlng)


def cluster_radius_deg(zoom: float) -> float:
    """Marker radius in degrees at a zoom level; halves with every zoom step."""
    zoom = min(max(zoom, 0), MAX_ZOOM)
    degrees_per_pixel = 360.0 / (map_settings.TILE_SIZE * 2**zoom)
    return map_settings.CLUSTER_RADIUS_PX * degrees_per_pixel


def _centroid(points: list[MapPoint]) -> tuple[float, float]:
    """Arithmetic mean of member coordinates."""
    if len(points) == 1:
        return points[0].lat, points[0].lng
    n = len(points)
    return sum(p.lat for p in points) / n, sum(p.lng for p in points) / n


def _max_radius(points: list[MapPoint], clat: float, clng: float) -> float:
    if len(points) <= 1:
        return 0.0
    return max(haversine_km(clat, clng, p.lat, p.lng) for p in points)


def _shared_name(points: list[MapPoint]) -> str | None:
    names = {p.place_name or p.city for p in points}
    if len(names) == 1:
        return names.pop()
    return None


def _label(points: list[MapPoint]) -> str:
    if len(points) == 1:
        return points[0].display_name
    name = _shared_name(points)
    if name:
        return f"{name} ({len(points)})"
    return f"{len(points)} places"


def _cluster_type(count: int, radius_km: float) -> ClusterType:
    if count == 1:
        return ClusterType.SINGLE
    if radius_km <= map_settings.LOCAL_CLUSTER_RADIUS_KM:
        return ClusterType.LOCAL
    return ClusterType.REGIONAL


def _build_cluster(
    cluster_id: str, points: list[MapPoint], label: str | None = None
) -> Cluster:
    clat, clng = _centroid(points)
    radius_km = _max_radius(points, clat, clng)
    return Cluster(
        id=cluster_id,
        lat=clat,
        lng=clng,
        label=label or _label(points),
        type=_cluster_type(len(points), radius_km),
        points=points,
        radius_km=radius_km,
    )


def cluster_points(points: list[MapPoint], zoom: float) -> list[Cluster]:
    """Greedy grid clustering in input order.

    Each unassigned point seeds a cluster and absorbs every later unassigned
    point within the zoom radius of the seed. Clusters come back in seed order.
    """
    if not points:
        return []

    radius = cluster_radius_deg(zoom)
    assigned = [False] * len(points)
    clusters = []

    for i, seed in enumerate(points):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [seed]
        for j in range(i + 1, len(points)):
            if assigned[j]:
                continue
            other = points[j]
            if degree_distance(seed.lat, seed.lng, other.lat, other.lng) <= radius:
                members.append(other)
                assigned[j] = True

        cluster_id = seed.id if len(members) == 1 else f"cluster-{seed.id}"
        clusters.append(_build_cluster(cluster_id, members))

    return clusters


def _group(points: list[MapPoint], key) -> dict[str, list[MapPoint]]:
    groups: dict[str, list[MapPoint]] = {}
    for p in points:
        groups.setdefault(key(p), []).append(p)
    return groups


def cluster_by_area(points: list[MapPoint], zoom: float) -> list[Cluster]:
    """Level-of-detail clustering by country, then state, then single points.

    Points without any country or state fall back to ``cluster_points``.
    """
    if not points:
        return []
    if not any(p.country or p.state for p in points):
        return cluster_points(points, zoom)

    if zoom < COUNTRY_ZOOM_MAX:
        clusters = []
        for country, members in _group(points, lambda p: p.country or "Unknown").items():
            noun = "place" if len(members) == 1 else "places"
            clusters.append(
                _build_cluster(
                    f"country-{country}", members, f"{country} ({len(members)} {noun})"
                )
            )
        return clusters

    if zoom < STATE_ZOOM_MAX:
        clusters = []
        groups = _group(
            points,
            lambda p: f"{p.country or 'Unknown'}-{p.state or p.city or 'Unknown'}",
        )
        for key, members in groups.items():
            first = members[0]
            state = first.state or first.city or "Unknown"
            clusters.append(
                _build_cluster(f"state-{key}", members, f"{state} ({len(members)})")
            )
        return clusters

    return [_build_cluster(p.id, [p]) for p in points]


def build_clusters(
    points: list[MapPoint],
    zoom: float,
    strategy: ClusterStrategy | None = None,
) -> list[Cluster]:
    strategy = ClusterStrategy(strategy or map_settings.CLUSTER_STRATEGY)
    if strategy is ClusterStrategy.AREA:
        return cluster_by_area(points, zoom)
    return cluster_points(points, zoom)
