"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest

from kmeans2d.core.geometry import Point


@pytest.fixture
def rng():
    """Генератор с фиксированным seed для воспроизводимых прогонов."""
    return np.random.default_rng(42)


@pytest.fixture
def square_points():
    """Четыре угла единичного квадрата."""
    return [
        Point(0.0, 0.0),
        Point(0.0, 1.0),
        Point(1.0, 1.0),
        Point(1.0, 0.0),
    ]


@pytest.fixture
def some_points():
    """Три явно разделённые группы точек на плоскости."""
    return [
        Point(5.0, 5.0),
        Point(9.0, 8.0),
        Point(13.0, 7.0),
        Point(5.0, 12.0),
        Point(10.0, 16.0),
        Point(15.0, 11.0),
        Point(34.0, 22.0),
        Point(39.0, 21.0),
        Point(31.0, 27.0),
        Point(36.0, 26.0),
        Point(42.0, 27.0),
        Point(32.0, 30.0),
        Point(37.0, 30.0),
        Point(16.0, 30.0),
        Point(17.0, 28.0),
        Point(15.0, 31.0),
        Point(18.0, 32.0),
        Point(14.0, 25.0),
    ]
