"""
Метрики качества кластеризации.

Модуль предоставляет функции для оценки результата запуска: суммарное
расстояние точек до своих центроидов и распределение размеров кластеров.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from kmeans2d.core.distance import DistanceMethod, euclidean_distance
from kmeans2d.core.geometry import Cluster


def inertia(
    clusters: Sequence[Cluster],
    method: DistanceMethod = euclidean_distance,
    squared: bool = True,
) -> float:
    """
    Вычисляет инерцию: сумму расстояний точек до центроидов своих кластеров.

    Args:
        clusters: Кластеры с назначенными точками
        method: Функция расстояния
        squared: Возводить ли расстояния в квадрат (классическая WCSS)

    Returns:
        Сумма (квадратов) расстояний; 0.0 для пустого списка
    """
    distances = np.array(
        [method(c.centroid, p) for c in clusters for p in c.points],
        dtype=np.float64,
    )
    if squared:
        distances = distances * distances
    return float(distances.sum())


def cluster_sizes(clusters: Sequence[Cluster]) -> List[int]:
    """Количество точек в каждом кластере, в порядке списка."""
    return [c.size for c in clusters]


def count_empty_clusters(clusters: Sequence[Cluster]) -> int:
    """Сколько кластеров осталось без точек."""
    return sum(1 for c in clusters if c.is_empty())
