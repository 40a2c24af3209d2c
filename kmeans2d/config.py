from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DistanceId(str, Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


# Сколько раз за один запуск можно пересадить пустой кластер
REPOSITION_LIMIT = 10


@dataclass(frozen=True)
class KMeansConfig:
    """
    Параметры одного запуска KMeans.

    reposition_limit: лимит пересадок пустых кластеров за запуск;
    max_iters: необязательный жёсткий предел итераций (None — без предела,
        цикл останавливается только по сходимости);
    seed: seed генератора, если генератор не передан явно;
    log_every: как часто логировать итерации (первая и сходимость — всегда);
    distance: метрика по умолчанию, если функция не передана явно.
    """

    reposition_limit: int = REPOSITION_LIMIT
    max_iters: Optional[int] = None
    seed: Optional[int] = None
    log_every: int = 10
    distance: DistanceId = DistanceId.EUCLIDEAN

    def __post_init__(self) -> None:
        if self.reposition_limit < 0:
            raise ValueError(
                f"reposition_limit must be non-negative, got {self.reposition_limit}"
            )
        if self.max_iters is not None and self.max_iters < 1:
            raise ValueError(f"max_iters must be positive, got {self.max_iters}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be positive, got {self.log_every}")
