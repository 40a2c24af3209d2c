"""
Геометрические примитивы для двумерного K-means.

Position — неизменяемая пара координат, Point — входное наблюдение,
Cluster — изменяемая запись «центроид + назначенные точки».
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List


@dataclass(frozen=True)
class Position:
    """Неизменяемая позиция (x, y). Сравнение — точное по значениям."""

    x: float
    y: float


@dataclass(frozen=True)
class Point(Position):
    """Входная точка. Кластеры хранят ссылки на экземпляры, а не копии."""


@dataclass(frozen=True)
class BoundingBox:
    """Ограничивающий прямоугольник набора точек."""

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    def contains(self, position: Position) -> bool:
        return (
            self.min_x <= position.x <= self.max_x
            and self.min_y <= position.y <= self.max_y
        )


@dataclass(eq=False)
class Cluster:
    """
    Кластер: текущий центроид и список назначенных ему точек.

    Равенство — по идентичности объекта: два кластера с одинаковым
    центроидом остаются разными кластерами.
    """

    centroid: Position = field(default_factory=lambda: Position(0.0, 0.0))
    points: List[Point] = field(default_factory=list)

    @classmethod
    def at(cls, x: float, y: float) -> Cluster:
        """Пустой кластер с центроидом в (x, y)."""
        return cls(centroid=Position(x, y))

    def add_point(self, point: Point) -> None:
        self.points.append(point)

    def add_points(self, points: Iterable[Point]) -> None:
        self.points.extend(points)

    def clear_points(self) -> None:
        self.points.clear()

    def is_empty(self) -> bool:
        return not self.points

    @property
    def size(self) -> int:
        return len(self.points)
