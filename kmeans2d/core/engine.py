from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from kmeans2d.config import KMeansConfig
from kmeans2d.core.distance import DistanceMethod, get_distance
from kmeans2d.core.geometry import BoundingBox, Cluster, Point, Position
from kmeans2d.metrics.timers import Timer
from kmeans2d.utils.logging import format_run_prefix


# --- Операции без состояния: используются движком и доступны напрямую ---


def calculate_centroid(cluster: Cluster) -> Optional[Position]:
    """
    Центроид кластера — покоординатное среднее его точек.

    Для пустого кластера среднее не определено: возвращается None, а не
    NaN и не исключение. Решение о том, что делать с таким кластером,
    остаётся за вызывающим кодом.
    """
    n = len(cluster.points)
    if n == 0:
        return None
    sum_x = sum(p.x for p in cluster.points)
    sum_y = sum(p.y for p in cluster.points)
    return Position(sum_x / n, sum_y / n)


def calculate_centroids(clusters: Sequence[Cluster]) -> bool:
    """
    Пересчитывает центроиды всех кластеров на месте.

    Сначала считаются все новые центроиды, затем они сравниваются со
    старыми (точное равенство) и применяются. Центроид пустого кластера
    не меняется и изменением не считается.

    Returns:
        True, если хотя бы один центроид изменился
    """
    new_centroids = [calculate_centroid(c) for c in clusters]
    changed = any(
        new is not None and new != c.centroid
        for c, new in zip(clusters, new_centroids)
    )
    for c, new in zip(clusters, new_centroids):
        if new is not None:
            c.centroid = new
    return changed


def distribute_points(
    clusters: Sequence[Cluster],
    points: Sequence[Point],
    method: DistanceMethod,
) -> None:
    """
    Назначает каждую точку ближайшему кластеру.

    Линейный проход с заменой только при строго меньшем расстоянии: при
    равенстве побеждает первый кластер в порядке списка. Точка всегда
    получает кластер, даже если все расстояния бесконечны или NaN.
    """
    if not clusters:
        return
    for point in points:
        nearest = clusters[0]
        best = method(nearest.centroid, point)
        for cluster in clusters[1:]:
            d = method(cluster.centroid, point)
            if d < best:
                best = d
                nearest = cluster
        nearest.add_point(point)


def clear_clusters(clusters: Sequence[Cluster]) -> None:
    for c in clusters:
        c.clear_points()


def has_empty_clusters(clusters: Sequence[Cluster]) -> bool:
    return any(c.is_empty() for c in clusters)


def first_empty_cluster(clusters: Sequence[Cluster]) -> Optional[Cluster]:
    return next((c for c in clusters if c.is_empty()), None)


def compute_min_x(points: Sequence[Position]) -> float:
    return min((p.x for p in points), default=0.0)


def compute_max_x(points: Sequence[Position]) -> float:
    return max((p.x for p in points), default=0.0)


def compute_min_y(points: Sequence[Position]) -> float:
    return min((p.y for p in points), default=0.0)


def compute_max_y(points: Sequence[Position]) -> float:
    return max((p.y for p in points), default=0.0)


def compute_bounds(points: Sequence[Position]) -> BoundingBox:
    """Ограничивающий прямоугольник; для пустого набора все границы 0.0."""
    return BoundingBox(
        min_x=compute_min_x(points),
        max_x=compute_max_x(points),
        min_y=compute_min_y(points),
        max_y=compute_max_y(points),
    )


def compute_random_position(
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
    rng: Optional[np.random.Generator] = None,
) -> Position:
    """Случайная позиция, равномерно и независимо по каждой оси внутри границ."""
    if rng is None:
        rng = np.random.default_rng()
    return Position(
        min_x + (max_x - min_x) * rng.random(),
        min_y + (max_y - min_y) * rng.random(),
    )


def set_random_position(
    cluster: Cluster,
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """Переставляет центроид кластера в случайную точку внутри границ."""
    cluster.centroid = compute_random_position(min_x, min_y, max_x, max_y, rng)


class KMeans:
    """
    K-means (алгоритм Ллойда) для двумерных точек.

    Центроиды инициализируются случайно внутри ограничивающего
    прямоугольника точек, затем чередуются шаги назначения и пересчёта,
    пока центроиды не перестанут меняться. Если на стабильной итерации
    есть пустые кластеры, первый из них пересаживается в случайную точку
    (не более ``config.reposition_limit`` раз за запуск).

    Собирает тайминги по аналогии с другими реализациями:
    - t_assign_total: очистка + назначение точек;
    - t_update_total: пересчёт центроидов;
    - t_iter_total: сумма двух предыдущих.

    Экземпляр не потокобезопасен: для параллельных запусков нужны
    отдельные экземпляры (список точек можно разделять, точки неизменяемы).
    """

    calculate_centroid = staticmethod(calculate_centroid)
    calculate_centroids = staticmethod(calculate_centroids)
    distribute_points = staticmethod(distribute_points)
    compute_min_x = staticmethod(compute_min_x)
    compute_max_x = staticmethod(compute_max_x)
    compute_min_y = staticmethod(compute_min_y)
    compute_max_y = staticmethod(compute_max_y)
    compute_bounds = staticmethod(compute_bounds)
    compute_random_position = staticmethod(compute_random_position)
    set_random_position = staticmethod(set_random_position)

    def __init__(
        self,
        n_clusters: int,
        points: Sequence[Point],
        distance: Optional[DistanceMethod] = None,
        *,
        config: Optional[KMeansConfig] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Any | None = None,
    ):
        if n_clusters < 0:
            raise ValueError(f"n_clusters must be non-negative, got {n_clusters}")
        if n_clusters > len(points):
            raise ValueError(
                f"Too many clusters required for given point list: "
                f"n_clusters={n_clusters}, n_points={len(points)}"
            )

        self.config = config if config is not None else KMeansConfig()
        self.K = n_clusters
        self.points: Sequence[Point] = points
        self.distance: DistanceMethod = (
            distance if distance is not None else get_distance(self.config.distance)
        )
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.logger = logger

        self._bounds: BoundingBox | None = None
        self._clusters: List[Cluster] = []
        self._prefix = format_run_prefix(len(points), n_clusters)

        self._t_assign = Timer()
        self._t_update = Timer()

        # статистика последнего запуска
        self.n_iters_actual: int = 0
        self.n_repositions: int = 0
        self.converged: bool = False

    @property
    def n_clusters(self) -> int:
        return self.K

    def calculate_clusters(self) -> None:
        """
        Полный запуск: границы → случайные центроиды → цикл Ллойда.

        Повторный вызов заново случайно инициализирует центроиды.
        """
        self._bounds = compute_bounds(self.points)
        self._t_assign.reset()
        self._t_update.reset()
        self.n_iters_actual = 0
        self.n_repositions = 0
        self.converged = False

        self._clusters = self._make_clusters(self.K)
        if not self._clusters:
            self.converged = True
            self._log(logging.INFO, "No clusters requested, nothing to do")
            return

        max_iters = self.config.max_iters
        changed = True
        while changed:
            if max_iters is not None and self.n_iters_actual >= max_iters:
                self._log(
                    logging.WARNING,
                    f"Stopped after max_iters={max_iters} without convergence",
                )
                return

            with self._t_assign:
                clear_clusters(self._clusters)
                distribute_points(self._clusters, self.points, self.distance)
            with self._t_update:
                changed = calculate_centroids(self._clusters)
            self.n_iters_actual += 1

            i = self.n_iters_actual
            if i == 1 or i % self.config.log_every == 0 or not changed:
                status = " (stable)" if not changed else ""
                self._log(
                    logging.INFO,
                    f"  Iteration {i}{status} "
                    f"(T_assign={self._t_assign.elapsed:.6f}s, "
                    f"T_update={self._t_update.elapsed:.6f}s)",
                )

            if not changed:
                changed = self._reposition_empty_cluster()

        self.converged = True
        self._log(
            logging.INFO,
            f"  Convergence reached after {self.n_iters_actual} iterations "
            f"({self.n_repositions} repositions)",
        )

    def fit_predict(self) -> np.ndarray:
        """Запускает кластеризацию и возвращает метки точек."""
        self.calculate_clusters()
        return self.labels

    def _make_clusters(self, n: int) -> List[Cluster]:
        clusters = []
        for _ in range(n):
            cluster = Cluster()
            self._set_random_position(cluster)
            clusters.append(cluster)
        return clusters

    def _set_random_position(self, cluster: Cluster) -> None:
        b = self._bounds
        set_random_position(cluster, b.min_x, b.min_y, b.max_x, b.max_y, self.rng)

    def _reposition_empty_cluster(self) -> bool:
        """
        Пересаживает первый пустой кластер, если лимит ещё не исчерпан.

        Returns:
            True, если пересадка выполнена и цикл нужно продолжить
        """
        empty = first_empty_cluster(self._clusters)
        if empty is None:
            return False
        limit = self.config.reposition_limit
        if self.n_repositions >= limit:
            self._log(
                logging.WARNING,
                f"Reposition limit {limit} exhausted, "
                f"{sum(1 for c in self._clusters if c.is_empty())} cluster(s) left empty",
            )
            return False

        self._set_random_position(empty)
        self.n_repositions += 1
        self._log(
            logging.INFO,
            f"  Empty cluster {self._clusters.index(empty)} repositioned to "
            f"({empty.centroid.x:.4f}, {empty.centroid.y:.4f}) "
            f"[{self.n_repositions}/{limit}]",
        )
        return True

    def _log(self, level: int, msg: str) -> None:
        if self.logger:
            self.logger.log(level, f"{self._prefix} {msg}")

    @property
    def clusters(self) -> List[Cluster]:
        """Кластеры последнего запуска. Изменять снаружи не следует."""
        return self._clusters

    @property
    def bounds(self) -> BoundingBox | None:
        return self._bounds

    @property
    def min_x(self) -> float | None:
        return self._bounds.min_x if self._bounds else None

    @property
    def max_x(self) -> float | None:
        return self._bounds.max_x if self._bounds else None

    @property
    def min_y(self) -> float | None:
        return self._bounds.min_y if self._bounds else None

    @property
    def max_y(self) -> float | None:
        return self._bounds.max_y if self._bounds else None

    @property
    def t_assign_total(self) -> float:
        return self._t_assign.total

    @property
    def t_update_total(self) -> float:
        return self._t_update.total

    @property
    def t_iter_total(self) -> float:
        return self._t_assign.total + self._t_update.total

    @property
    def centroids(self) -> np.ndarray:
        """Центроиды в виде массива (K, 2)."""
        return np.array(
            [[c.centroid.x, c.centroid.y] for c in self._clusters],
            dtype=np.float64,
        ).reshape(len(self._clusters), 2)

    @property
    def labels(self) -> np.ndarray:
        """
        Индекс кластера для каждой входной точки (в порядке ``points``).

        -1 — точка не назначена ни одному кластеру (например, K = 0).
        """
        positions: Dict[int, List[int]] = {}
        for idx, p in enumerate(self.points):
            positions.setdefault(id(p), []).append(idx)

        labels = np.full(len(self.points), -1, dtype=np.int64)
        for k, cluster in enumerate(self._clusters):
            for p in cluster.points:
                labels[positions[id(p)]] = k
        return labels
