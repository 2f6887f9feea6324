"""Tests for the radial spiderify layout."""

import copy
import math

import pytest

from wandermap.modules.map.clustering import cluster_points
from wandermap.modules.map.spiderify import spiderify


@pytest.fixture
def paris_cluster(paris_points):
    return cluster_points(paris_points, 5)[0]


class TestSpiderify:
    def test_single_point_stays_in_place(self, point_factory):
        point = point_factory.build(lat=1.5, lng=2.5)
        [cluster] = cluster_points([point], 10)

        [leg] = spiderify(cluster)
        assert leg.point == point
        assert (leg.lat, leg.lng) == (1.5, 2.5)

    def test_one_leg_per_point_in_order(self, paris_cluster, paris_points):
        legs = spiderify(paris_cluster)
        assert [leg.point for leg in legs] == paris_points

    def test_first_leg_points_north(self, paris_cluster):
        first = spiderify(paris_cluster)[0]
        assert first.lat == pytest.approx(paris_cluster.lat + 0.01)
        assert first.lng == pytest.approx(paris_cluster.lng)

    def test_legs_lie_on_circle(self, paris_cluster):
        scale = math.cos(math.radians(paris_cluster.lat))
        for leg in spiderify(paris_cluster, radius_deg=0.02):
            dlat = leg.lat - paris_cluster.lat
            dlng = (leg.lng - paris_cluster.lng) * scale
            assert math.hypot(dlat, dlng) == pytest.approx(0.02)

    def test_even_angle_steps(self, point_factory):
        points = point_factory.build_batch(4, lat=0.0, lng=0.0)
        [cluster] = cluster_points(points, 3)

        legs = spiderify(cluster, radius_deg=1.0)
        positions = [(round(leg.lat, 9), round(leg.lng, 9)) for leg in legs]
        assert positions == [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)]

    def test_does_not_mutate_cluster(self, paris_cluster):
        before = copy.deepcopy(paris_cluster)
        spiderify(paris_cluster)
        assert paris_cluster == before
