from .generate import PointSetConfig, make_points, points_from_array

__all__ = ["PointSetConfig", "make_points", "points_from_array"]
