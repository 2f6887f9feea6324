"""Radial layout of a clicked cluster's markers."""

import math
from dataclasses import dataclass

from wandermap.modules.map.clustering import Cluster
from wandermap.modules.map.points import MapPoint
from wandermap.utils.settings.map import map_settings


@dataclass(frozen=True)
class SpiderLeg:
    point: MapPoint
    lat: float
    lng: float


def spiderify(cluster: Cluster, radius_deg: float | None = None) -> list[SpiderLeg]:
    """Place each member on a circle around the cluster centroid.

    Point ``i`` sits at angle ``i * 2pi / count``; the longitude offset is
    stretched by ``1 / cos(lat)`` so the circle stays round on the map.
    A single-point cluster yields its point at its own position.
    """
    if cluster.count <= 1:
        return [SpiderLeg(point=p, lat=p.lat, lng=p.lng) for p in cluster.points]

    radius = map_settings.SPIDERIFY_RADIUS_DEG if radius_deg is None else radius_deg
    angle_step = 2 * math.pi / cluster.count
    # Clamp near the poles where cos(lat) -> 0
    lng_scale = max(math.cos(math.radians(cluster.lat)), 1e-6)

    legs = []
    for index, point in enumerate(cluster.points):
        angle = index * angle_step
        legs.append(
            SpiderLeg(
                point=point,
                lat=cluster.lat + radius * math.cos(angle),
                lng=cluster.lng + radius * math.sin(angle) / lng_scale,
            )
        )
    return legs
