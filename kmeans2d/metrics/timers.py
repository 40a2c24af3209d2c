"""
Таймер шагов алгоритма.

Timer — контекстный менеджер поверх time.perf_counter(). В отличие от
одноразового замера, он накапливает сумму по всем входам (кругам), что
удобно для подсчёта суммарного времени шага за весь запуск.
"""
from __future__ import annotations

import time
from typing import Any


class Timer:
    """
    Накопительный таймер.

    Пример:
        timer = Timer()
        for _ in range(3):
            with timer:
                step()
        timer.elapsed  # длительность последнего круга
        timer.total    # сумма по всем кругам
        timer.laps     # 3
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0
        self.total: float = 0.0
        self.laps: int = 0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        self.total += self.elapsed
        self.laps += 1

    def reset(self) -> None:
        """Обнуляет накопленные значения перед новым запуском."""
        self.start = self.end = self.elapsed = self.total = 0.0
        self.laps = 0
