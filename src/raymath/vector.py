# raymath/vector.py
import logging
import math
import numbers

import numpy as np

logger = logging.getLogger(__name__)

# Squared-distance tolerance used by Vector3 equality.
EPSILON = 1e-10


class DegenerateVectorError(ArithmeticError):
    """
    Raised when an operation needs a direction but the vector has zero length.
    """


class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    reflection and tolerance-based equality.

    Two vectors compare equal when their squared distance is below EPSILON.
    That relation is not transitive: a == b and b == c does not imply a == c
    near the threshold. Instances are therefore unhashable.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, data) -> "Vector3":
        """
        Builds a vector from any length-3 sequence or numpy array.
        """
        if len(data) != 3:
            raise ValueError(
                f"Vector3 needs exactly three coordinates, got {len(data)}."
            )
        return cls(data[0], data[1], data[2])

    def to_array(self, dtype=np.float64) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vector3 is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Vector3 is immutable, cannot delete '{name}'")

    # Instances never change, so a copy can be the instance itself.
    def __copy__(self) -> "Vector3":
        return self

    def __deepcopy__(self, memo) -> "Vector3":
        return self

    def __reduce__(self):
        return (type(self), (self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    # Arithmetic

    def add(self, other: "Vector3") -> "Vector3":
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def mul(self, scalar: float) -> "Vector3":
        return type(self)(self.x * scalar, self.y * scalar, self.z * scalar)

    def neg(self) -> "Vector3":
        """
        Returns the negated vector; v.add(v.neg()) equals the zero vector.
        """
        return self.mul(-1)

    def sub(self, other: "Vector3") -> "Vector3":
        return self.add(other.neg())

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Right-handed cross product.
        """
        return type(self)(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def point_mult(self, other: "Vector3") -> "Vector3":
        """
        Coordinate-wise (Hadamard) product.
        """
        return type(self)(self.x * other.x, self.y * other.y, self.z * other.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector3":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        return self.mul(1 / t)

    def __neg__(self) -> "Vector3":
        return self.neg()

    # Geometry

    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def squared_distance(self, other: "Vector3") -> float:
        difference = self.sub(other)
        return difference.dot(difference)

    def distance(self, other: "Vector3") -> float:
        return math.sqrt(self.squared_distance(other))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way.

        Coordinates are scaled by the largest magnitude first, so vectors
        near the overflow or underflow limits of a float normalize too.
        Raises DegenerateVectorError for a zero vector or non-finite
        coordinates instead of returning infinite or NaN coordinates.
        """
        if not all(math.isfinite(c) for c in self):
            logger.debug("normalize() called on non-finite %r", self)
            raise DegenerateVectorError(f"cannot normalize non-finite {self!r}")
        m = max(abs(self.x), abs(self.y), abs(self.z))
        if m == 0:
            logger.debug("normalize() called on zero-length %r", self)
            raise DegenerateVectorError(f"cannot normalize zero-length {self!r}")
        scaled = type(self)(self.x / m, self.y / m, self.z / m)
        return scaled.mul(1 / scaled.length())

    def get_perp(self) -> "Vector3":
        """
        Returns some vector v with self.dot(v) == 0. Not normalized.

        Vectors on the z axis (the zero vector included) get (1, 1, 0);
        everything else gets (-y, x, 0).
        """
        if self.x == 0 and self.y == 0:
            return type(self)(1, 1, 0)
        return type(self)(-self.y, self.x, 0)

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Mirrors self about normal: 2 * (self . normal) * normal - self.

        normal should be unit length; it is not normalized here.
        """
        return normal.mul(2 * self.dot(normal)).sub(self)

    # Comparison

    def equals(self, other) -> bool:
        if not isinstance(other, Vector3):
            return False
        return self.squared_distance(other) < EPSILON

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def compare_distances(self, u: "Vector3", v: "Vector3") -> int:
        """
        Returns -1 if u is closer to self than v, 0 if both are equally far
        and 1 otherwise. The squared distances are compared exactly.
        """
        du = self.squared_distance(u)
        dv = self.squared_distance(v)
        return (du > dv) - (du < dv)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"
