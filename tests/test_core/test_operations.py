"""
Unit-тесты операций без состояния: центроиды, распределение точек,
границы и случайные позиции.
"""

import numpy as np
import pytest
from kmeans2d.core.distance import euclidean_distance, manhattan_distance
from kmeans2d.core.engine import (
    KMeans,
    calculate_centroid,
    calculate_centroids,
    clear_clusters,
    compute_bounds,
    compute_max_x,
    compute_max_y,
    compute_min_x,
    compute_min_y,
    compute_random_position,
    distribute_points,
    first_empty_cluster,
    has_empty_clusters,
    set_random_position,
)
from kmeans2d.core.geometry import BoundingBox, Cluster, Point, Position


def _corner_clusters():
    return [
        Cluster.at(0.1, 0.1),
        Cluster.at(0.1, 0.9),
        Cluster.at(0.9, 0.9),
        Cluster.at(0.9, 0.1),
    ]


class TestCentroids:
    """Тесты пересчёта центроидов."""

    def test_square_centroid(self, square_points):
        cluster = Cluster()
        cluster.add_points(square_points)

        centroid = calculate_centroid(cluster)

        # значение должно совпасть точно, без допуска
        assert centroid == Position(0.5, 0.5)

    def test_empty_cluster_centroid_is_none(self):
        assert calculate_centroid(Cluster.at(3.0, 4.0)) is None

    def test_centroid_changed_then_stable(self, square_points):
        cluster = Cluster.at(0.0, 0.0)
        cluster.add_points(square_points)

        assert calculate_centroids([cluster]) is True
        assert cluster.centroid == Position(0.5, 0.5)
        assert calculate_centroids([cluster]) is False

    def test_empty_cluster_keeps_centroid(self, square_points):
        """Пустой кластер не меняет центроид и не считается изменением."""
        full = Cluster.at(0.5, 0.5)
        full.add_points(square_points)
        empty = Cluster.at(7.0, 7.0)

        assert calculate_centroids([full, empty]) is False
        assert empty.centroid == Position(7.0, 7.0)

    def test_static_aliases(self, square_points):
        cluster = Cluster()
        cluster.add_points(square_points)
        assert KMeans.calculate_centroid(cluster) == Position(0.5, 0.5)
        assert KMeans.calculate_centroids([cluster]) is True


class TestDistributePoints:
    """Тесты шага назначения."""

    def test_one_point_per_corner(self, square_points):
        clusters = _corner_clusters()

        distribute_points(clusters, square_points, euclidean_distance)

        assert [c.size for c in clusters] == [1, 1, 1, 1]

    def test_duplicate_point_goes_to_same_cluster(self, square_points):
        clusters = _corner_clusters()
        square_points[0] = Point(0.0, 1.0)

        distribute_points(clusters, square_points, euclidean_distance)

        assert clusters[1].size == 2
        assert clusters[0].is_empty()
        assert has_empty_clusters(clusters)
        assert first_empty_cluster(clusters) is clusters[0]

    def test_tie_goes_to_first_cluster(self):
        """При равных расстояниях выигрывает первый кластер в списке."""
        clusters = [Cluster.at(-1.0, 0.0), Cluster.at(1.0, 0.0)]
        point = Point(0.0, 0.0)

        distribute_points(clusters, [point], euclidean_distance)
        assert clusters[0].points == [point]
        assert clusters[1].is_empty()

        clear_clusters(clusters)
        distribute_points(list(reversed(clusters)), [point], euclidean_distance)
        assert clusters[1].points == [point]
        assert clusters[0].is_empty()

    def test_each_point_assigned_once(self, some_points):
        clusters = [Cluster.at(0.0, 0.0), Cluster.at(20.0, 20.0), Cluster.at(40.0, 30.0)]

        distribute_points(clusters, some_points, manhattan_distance)

        assigned = [p for c in clusters for p in c.points]
        assert len(assigned) == len(some_points)
        assert {id(p) for p in assigned} == {id(p) for p in some_points}

    def test_huge_coordinates_assigned(self):
        """Расстояние порядка 1e200 не переполняется, точка получает кластер."""
        cluster = Cluster.at(0.0, 0.0)
        point = Point(1e200, 0.0)

        distribute_points([cluster], [point], euclidean_distance)

        assert cluster.points == [point]
        assert euclidean_distance(cluster.centroid, point) == 1e200

    def test_nan_distance_falls_back_to_first_cluster(self):
        clusters = [Cluster.at(0.0, 0.0), Cluster.at(1.0, 1.0)]
        point = Point(0.5, 0.5)

        distribute_points(clusters, [point], lambda a, b: float("nan"))

        assert clusters[0].points == [point]
        assert clusters[1].is_empty()

    def test_no_clusters_is_noop(self, square_points):
        distribute_points([], square_points, euclidean_distance)


class TestBounds:
    """Тесты вычисления границ."""

    def test_square_bounds(self, square_points):
        assert compute_min_x(square_points) == 0.0
        assert compute_max_x(square_points) == 1.0
        assert compute_min_y(square_points) == 0.0
        assert compute_max_y(square_points) == 1.0

    def test_bounds_enclose_points(self, some_points):
        box = compute_bounds(some_points)

        assert box == BoundingBox(min_x=5.0, max_x=42.0, min_y=5.0, max_y=32.0)
        assert all(box.contains(p) for p in some_points)

    def test_empty_collection_defaults_to_zero(self):
        assert compute_bounds([]) == BoundingBox(0.0, 0.0, 0.0, 0.0)


class TestRandomPosition:
    """Тесты случайных позиций."""

    def test_within_bounds(self, some_points, rng):
        min_x, max_x = compute_min_x(some_points), compute_max_x(some_points)
        min_y, max_y = compute_min_y(some_points), compute_max_y(some_points)
        cluster = Cluster()

        for _ in range(1000):
            set_random_position(cluster, min_x, min_y, max_x, max_y, rng)
            c = cluster.centroid
            assert min_x <= c.x <= max_x
            assert min_y <= c.y <= max_y

    @pytest.mark.parametrize(
        "bounds",
        [(-1.0, -1.0, 1.0, 1.0), (100.0, -50.0, 100.5, -49.0), (3.0, 3.0, 3.0, 3.0)],
    )
    def test_explicit_bounds(self, bounds, rng):
        min_x, min_y, max_x, max_y = bounds
        for _ in range(200):
            p = compute_random_position(min_x, min_y, max_x, max_y, rng)
            assert min_x <= p.x <= max_x
            assert min_y <= p.y <= max_y

    def test_seeded_generator_is_reproducible(self):
        a = compute_random_position(0.0, 0.0, 10.0, 10.0, np.random.default_rng(7))
        b = compute_random_position(0.0, 0.0, 10.0, 10.0, np.random.default_rng(7))
        assert a == b

    def test_default_generator(self):
        p = compute_random_position(0.0, 0.0, 1.0, 1.0)
        assert 0.0 <= p.x <= 1.0
        assert 0.0 <= p.y <= 1.0
