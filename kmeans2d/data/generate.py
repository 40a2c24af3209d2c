"""
Генерация синтетических наборов двумерных точек.

Использует sklearn.make_blobs; результат — список Point, готовый для
передачи в KMeans. Применяется в тестах и для ручных прогонов.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.preprocessing import StandardScaler

from kmeans2d.core.geometry import Point


@dataclass(frozen=True)
class PointSetConfig:
    """Параметры набора точек."""

    N: int
    K: int
    cluster_std: float = 1.0
    center_box: tuple[float, float] = (-10.0, 10.0)
    normalize: bool = False
    seed: Optional[int] = None


def points_from_array(data: np.ndarray) -> List[Point]:
    """
    Преобразует массив (N, 2) в список Point.

    Raises:
        ValueError: Если массив не двумерный или число столбцов не 2
    """
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError(f"Expected array of shape (N, 2), got {data.shape}")
    return [Point(float(x), float(y)) for x, y in data]


def make_points(config: PointSetConfig) -> List[Point]:
    """
    Генерирует N точек вокруг K центров.

    Args:
        config: Параметры набора

    Returns:
        Список из config.N точек
    """
    data, _ = make_blobs(
        n_samples=config.N,
        n_features=2,
        centers=config.K,
        cluster_std=config.cluster_std,
        center_box=config.center_box,
        random_state=config.seed,
    )

    if config.normalize:
        data = StandardScaler().fit_transform(data)

    return points_from_array(data)
