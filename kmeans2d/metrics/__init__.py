from .timers import Timer
from .metrics import inertia, cluster_sizes, count_empty_clusters

__all__ = [
    "Timer",
    "inertia",
    "cluster_sizes",
    "count_empty_clusters",
]
