from __future__ import annotations

import math
from typing import Iterator

import numpy as np

from gamemath.types import Number


class Vector2:
    """
    A class for storing vectors in R^2. In the game world it usually holds a
    horizontal ``(x, z)`` position, with the z coordinate stored in ``y``.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: Number = 0, y: Number = 0):
        """
        Creates a Vector2 instance.

        Args:
            x: The x component.
            y: The y component.
        """
        self._x = x
        self._y = y

    @property
    def x(self) -> Number:
        return self._x

    @property
    def y(self) -> Number:
        return self._y

    def add(self, b: Vector2) -> Vector2:
        """
        Adds a given vector to this vector.

        Args:
            b: the vector to add to this vector.

        Return:
            The addition of the two vectors.
        """
        return Vector2(self._x + b.x, self._y + b.y)

    def subtract(self, b: Vector2) -> Vector2:
        """
        Subtracts a given vector from this vector.

        Args:
            b: the vector to be subtracted from this vector.

        Return:
            The subtraction of the two vectors.
        """
        return Vector2(self._x - b.x, self._y - b.y)

    def multiply(self, b: Number) -> Vector2:
        """
        Scalar multiplies a given scalar value to this vector.

        Args:
            b: the scalar value to be multiplied to this vector.

        Return:
            The vector * scalar product.
        """
        return Vector2(self._x * b, self._y * b)

    def divide(self, b: Number) -> Vector2:
        """
        Scalar divides this vector by a scalar value. Dividing by zero gives
        infinite or NaN components instead of raising.

        Args:
            b: the scalar value by which this vector is to be divided.

        Return:
            The vector / scalar product.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y = np.divide(np.array([self._x, self._y], dtype=float), float(b))
        return Vector2(float(x), float(y))

    def floor(self) -> Vector2:
        return Vector2(math.floor(self._x), math.floor(self._y))

    def dot(self, b: Vector2) -> float:
        """
        Computes the dot product between this vector and a given vector.

        Args:
            b: the given second vector with which to compute the dot product.

        Returns:
            The scalar-valued dot product.
        """
        return self._x * b.x + self._y * b.y

    def cross(self, b: Vector2) -> float:
        """
        Computes the cross product between this vector and a given vector

        Args:
            b: the given second vector with which to compute the cross product.

        Return:
            The scalar valued cross product (cross products are scalar in R^2).
        """
        return self._x * b.y - self._y * b.x

    def distance_squared(self, b: Vector2) -> float:
        dx = b.x - self._x
        dy = b.y - self._y
        return dx * dx + dy * dy

    def distance(self, b: Vector2) -> float:
        """
        Computes the L^2 (Euclidean) distance between this vector and a second given vector. AKA: the distance formula.

        Args:
            b: the given second vector.

        Return:
            The L^2 distance between the two vectors.
        """
        return math.sqrt(self.distance_squared(b))

    def length_squared(self) -> float:
        return self._x * self._x + self._y * self._y

    def length(self) -> float:
        """
        Computes the magnitude of this vector |v|.

        Return:
            The magnitude (scalar) of this vector.
        """
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector2:
        """
        Normalizes this vector so that it becomes unit length (magnitude = 1).
        The zero vector is returned unchanged.

        Return:
            The normalized, unit vector.
        """
        len_sq = self.length_squared()
        if len_sq > 0:
            mag_inv = 1.0 / math.sqrt(len_sq)
            return Vector2(self._x * mag_inv, self._y * mag_inv)
        return Vector2(0, 0)

    def heading(self) -> float:
        """
        Computes the heading angle of this vector, in radians, in range [-pi, pi].

        Return:
            The heading angle of this vector.
        """
        return math.atan2(self._y, self._x)

    def __iter__(self) -> Iterator[Number]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __str__(self) -> str:
        return f"Vector2(x={self._x},y={self._y})"

    __repr__ = __str__
