from .geometry import BoundingBox, Cluster, Point, Position
from .distance import (
    DistanceMethod,
    distance,
    euclidean_distance,
    get_distance,
    manhattan_distance,
)
from .engine import (
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

__all__ = [
    "BoundingBox",
    "Cluster",
    "Point",
    "Position",
    "DistanceMethod",
    "distance",
    "euclidean_distance",
    "get_distance",
    "manhattan_distance",
    "KMeans",
    "calculate_centroid",
    "calculate_centroids",
    "clear_clusters",
    "compute_bounds",
    "compute_max_x",
    "compute_max_y",
    "compute_min_x",
    "compute_min_y",
    "compute_random_position",
    "distribute_points",
    "first_empty_cluster",
    "has_empty_clusters",
    "set_random_position",
]
