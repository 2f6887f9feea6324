"""Travel map point extraction, clustering and view state."""

from .points import MapMode, MapPoint, extract_points, map_center
from .clustering import Cluster, ClusterType, build_clusters, cluster_points
from .spiderify import SpiderLeg, spiderify
from .view import Gallery, TravelMapView

__all__ = [
    "MapMode",
    "MapPoint",
    "extract_points",
    "map_center",
    "Cluster",
    "ClusterType",
    "build_clusters",
    "cluster_points",
    "SpiderLeg",
    "spiderify",
    "Gallery",
    "TravelMapView",
]
