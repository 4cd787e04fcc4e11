# raymath/utils.py
from functools import cmp_to_key
from typing import Iterable, List

from raymath.vector import Vector3


def sort_by_distance(origin: Vector3, points: Iterable[Vector3]) -> List[Vector3]:
    """
    Returns the points ordered nearest-first relative to origin.
    Equally distant points keep their input order.
    """
    return sorted(points, key=cmp_to_key(origin.compare_distances))


def nearest(origin: Vector3, points: Iterable[Vector3]) -> Vector3:
    """
    Returns the point closest to origin, e.g. the first intersection along a ray.
    On ties the earliest point wins.
    """
    closest = None
    for p in points:
        if closest is None or origin.compare_distances(p, closest) < 0:
            closest = p
    if closest is None:
        raise ValueError("nearest() needs at least one point.")
    return closest
