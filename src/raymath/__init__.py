# raymath/__init__.py
from raymath.vector import EPSILON, DegenerateVectorError, Vector3
from raymath.utils import nearest, sort_by_distance

__all__ = [
    "EPSILON",
    "DegenerateVectorError",
    "Vector3",
    "nearest",
    "sort_by_distance",
]
