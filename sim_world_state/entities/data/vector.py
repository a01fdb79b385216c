import math
from typing import TypeVar

import numpy as np

T = TypeVar("T", bound="VectorBase")

# position data: millimeters
# velocity data: millimeters per second


class VectorBase:
    __slots__ = ("_x", "_y")

    def xy_is_zero(self) -> bool:
        """2D: True only if both horizontal components are exactly zero."""
        return self._x == 0.0 and self._y == 0.0

    def angle_to(self, other: T) -> float:
        """
        2D: Calculate the angle from this vector to another vector in radians.
        """
        return math.atan2(other._y - self._y, other._x - self._x)


class Vector2D(VectorBase):
    __slots__ = ()

    def __init__(self, *coords):
        # Handle (1, 2), ((1, 2)), [1, 2], np.array([1, 2])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray)):
                self._x = float(c[0])
                self._y = float(c[1])
            else:
                raise TypeError(f"Invalid single argument type for Vector2D: {type(c)}")
        elif len(coords) == 2:
            self._x = float(coords[0])
            self._y = float(coords[1])
        else:
            raise TypeError(f"Vector2D requires 2 coordinates, got {len(coords)}")

    def __iter__(self):
        yield self._x
        yield self._y

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self.x, other.x) and math.isclose(self.y, other.y)

    def __array__(self, dtype=None, copy=True):
        return np.array([self.x, self.y], dtype=dtype, copy=copy)

    def mag(self) -> float:
        return math.hypot(self._x, self._y)

    def rotate(self, angle: float) -> "Vector2D":
        """Return a copy rotated counter-clockwise by angle (radians)."""
        c, s = math.cos(angle), math.sin(angle)
        return Vector2D(c * self._x - s * self._y, s * self._x + c * self._y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"


class Vector3D(VectorBase):
    __slots__ = ("_z",)

    def __init__(self, *coords):
        # Handle (1, 2, 3), ((1, 2, 3)), [1, 2, 3], np.array([1, 2, 3])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray)):
                self._x = float(c[0])
                self._y = float(c[1])
                self._z = float(c[2])
            else:
                raise TypeError(f"Invalid single argument type for Vector3D: {type(c)}")
        elif len(coords) == 3:
            self._x = float(coords[0])
            self._y = float(coords[1])
            self._z = float(coords[2])
        else:
            raise TypeError(f"Vector3D requires 3 coordinates, got {len(coords)}")

    @classmethod
    def zero(cls) -> "Vector3D":
        return cls(0.0, 0.0, 0.0)

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z

    def __add__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3D":
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3D":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3D":
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return math.isclose(self.x, other.x) and math.isclose(self.y, other.y) and math.isclose(self.z, other.z)

    def __array__(self, dtype=None, copy=True):
        return np.array([self.x, self.y, self.z], dtype=dtype, copy=copy)

    def with_xy(self, xy: Vector2D) -> "Vector3D":
        """Return a copy with the horizontal components replaced, keeping z."""
        return Vector3D(xy.x, xy.y, self._z)

    def flip_xy(self) -> "Vector3D":
        """Return a copy with both horizontal components negated (180 degree field rotation)."""
        return Vector3D(-self._x, -self._y, self._z)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def to_2d(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def __repr__(self):
        return f"Vector3D(x={self.x}, y={self.y}, z={self.z})"
