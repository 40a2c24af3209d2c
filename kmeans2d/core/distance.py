# core/distance.py
from __future__ import annotations

import math
from typing import Callable, Dict

from kmeans2d.config import DistanceId
from kmeans2d.core.geometry import Cluster, Position

DistanceMethod = Callable[[Position, Position], float]
"""Функция расстояния: неотрицательна, симметрична, 0 только для совпадающих позиций."""


def euclidean_distance(p0: Position, p1: Position) -> float:
    """
    sqrt((x0 - x1)^2 + (y0 - y1)^2) — метрика по умолчанию.

    Через math.hypot: квадраты разностей не переполняются при больших
    координатах.
    """
    return math.hypot(p0.x - p1.x, p0.y - p1.y)


def manhattan_distance(p0: Position, p1: Position) -> float:
    """|x0 - x1| + |y0 - y1|."""
    return abs(p0.x - p1.x) + abs(p0.y - p1.y)


_REGISTRY: Dict[DistanceId, DistanceMethod] = {
    DistanceId.EUCLIDEAN: euclidean_distance,
    DistanceId.MANHATTAN: manhattan_distance,
}


def get_distance(name: DistanceId | str) -> DistanceMethod:
    """
    Возвращает функцию расстояния по идентификатору.

    Raises:
        ValueError: Если метрика неизвестна
    """
    try:
        return _REGISTRY[DistanceId(name)]
    except ValueError:
        raise ValueError(
            f"Unknown distance method: {name!r}. "
            f"Available: {[d.value for d in DistanceId]}"
        ) from None


def distance(
    target: Cluster | Position, point: Position, method: DistanceMethod
) -> float:
    """Расстояние от центроида кластера (или от позиции) до точки."""
    if isinstance(target, Cluster):
        target = target.centroid
    return method(target, point)
