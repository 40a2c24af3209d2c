"""
kmeans2d: кластеризация двумерных точек алгоритмом Ллойда.

Пример:
    >>> from kmeans2d import KMeans, Point, setup_logger
    >>> points = [Point(0.0, 0.0), Point(0.0, 1.0), Point(10.0, 10.0)]
    >>> km = KMeans(2, points, logger=setup_logger())
    >>> km.calculate_clusters()
    >>> len(km.clusters)
    2
"""

__version__ = "0.1.0"

from .config import DistanceId, KMeansConfig
from .core import (
    BoundingBox,
    Cluster,
    KMeans,
    Point,
    Position,
    euclidean_distance,
    manhattan_distance,
)
from .utils.logging import setup_logger

__all__ = [
    "DistanceId",
    "KMeansConfig",
    "BoundingBox",
    "Cluster",
    "KMeans",
    "Point",
    "Position",
    "euclidean_distance",
    "manhattan_distance",
    "setup_logger",
    "__version__",
]
