from __future__ import annotations

import logging
import math
from typing import Iterator, Tuple

import numpy as np
from numpy import ndarray

from gamemath.logging import LOGGER_ID, MathValueError
from gamemath.misc.rounding import RoundingMode, round_half
from gamemath.misc.side import Side, get_opposite_side
from gamemath.types import Number, Vec3Like

module_logger = logging.getLogger(f"{LOGGER_ID}.vec3")

INTERMEDIATE_EPSILON = 0.0000001
"""Squared axis delta below which a segment is treated as parallel to the iso-plane of that axis."""


class Vector3:
    """
    A class for storing vectors in :math:`R^3`, used both for positions and
    directions in the game world. The y axis is vertical, north is towards
    negative z and west is towards negative x.

    Components are stored exactly as given, so a vector built from integers
    stays an integer (block) vector until an operation produces floats.
    Instances are immutable; every operation returns a new vector. Use
    :class:`MutableVector3` where a single instance has to be reused.

    Args:
        x: The vector x-coordinate. Defaults to 0.
        y: The vector y-coordinate. Defaults to 0.
        z: The vector z-coordinate. Defaults to 0.
    """

    __slots__ = ("_x", "_y", "_z")

    # make numpy defer to the reflected operators instead of treating vectors as sequences
    __array_ufunc__ = None

    SIDE_DOWN = Side.DOWN
    SIDE_UP = Side.UP
    SIDE_NORTH = Side.NORTH
    SIDE_SOUTH = Side.SOUTH
    SIDE_WEST = Side.WEST
    SIDE_EAST = Side.EAST

    def __init__(self, x: Number = 0, y: Number = 0, z: Number = 0):
        self._x = x
        self._y = y
        self._z = z

    @classmethod
    def from_iterable(cls, values: Vec3Like) -> Vector3:
        """
        Creates a vector from any sequence of three numbers.

        Args:
            values: An ``(x, y, z)`` tuple, list or ``NumPy`` array.

        Returns:
            The new vector.
        """
        if isinstance(values, ndarray):
            values = values.tolist()
        values = list(values)
        if len(values) != 3:
            raise MathValueError(
                f"Expected exactly 3 components, got {len(values)}: {values}"
            )
        return cls(*values)

    @property
    def x(self) -> Number:
        return self._x

    @property
    def y(self) -> Number:
        return self._y

    @property
    def z(self) -> Number:
        return self._z

    def get_x(self) -> Number:
        return self._x

    def get_y(self) -> Number:
        return self._y

    def get_z(self) -> Number:
        return self._z

    def get_floor_x(self) -> int:
        return math.floor(self._x)

    def get_floor_y(self) -> int:
        return math.floor(self._y)

    def get_floor_z(self) -> int:
        return math.floor(self._z)

    def add(self, x: Vector3 | Number, y: Number = 0, z: Number = 0) -> Vector3:
        """
        Vector addition. Accepts either another vector or up to three scalars.

        Args:
            x: A vector to be added to this vector, or the amount to add to the x-coordinate.
            y: The amount to add to the y-coordinate. Ignored if ``x`` is a vector.
            z: The amount to add to the z-coordinate. Ignored if ``x`` is a vector.

        Returns:
            The sum.
        """
        if isinstance(x, Vector3):
            return Vector3(self._x + x.x, self._y + x.y, self._z + x.z)
        return Vector3(self._x + x, self._y + y, self._z + z)

    def subtract(self, x: Vector3 | Number, y: Number = 0, z: Number = 0) -> Vector3:
        """
        Vector subtraction, the counterpart of :meth:`add` taking the same arguments.

        Returns:
            The difference.
        """
        if isinstance(x, Vector3):
            return self.add(-x.x, -x.y, -x.z)
        return self.add(-x, -y, -z)

    def multiply(self, number: Number) -> Vector3:
        """
        Scalar multiplication.

        Args:
            number: A scalar value to be multiplied to this vector.

        Returns:
            This vector multiplied by the given scalar value.
        """
        return Vector3(self._x * number, self._y * number, self._z * number)

    def divide(self, number: Number) -> Vector3:
        """
        Scalar division. The result always has float components. Division by
        zero follows floating-point semantics and yields ``inf``, ``-inf`` or
        ``nan`` components instead of raising.

        Args:
            number: A scalar value by which to divide this vector.

        Returns:
            This vector divided by the given scalar value.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y, z = np.divide(self.to_numpy(), float(number))
        return Vector3(float(x), float(y), float(z))

    def ceil(self) -> Vector3:
        return Vector3(math.ceil(self._x), math.ceil(self._y), math.ceil(self._z))

    def floor(self) -> Vector3:
        return Vector3(math.floor(self._x), math.floor(self._y), math.floor(self._z))

    def round(self, precision: int = 0, mode: int = RoundingMode.HALF_UP) -> Vector3:
        """
        Rounds every component. Ties are broken by ``mode``, which rounds
        away from zero by default (``1.25`` becomes ``1.3`` with one digit of precision).

        Args:
            precision: Number of fractional digits to keep. With a precision
                       of zero or less the components are converted to ``int``.
            mode: One of the :class:`~gamemath.misc.rounding.RoundingMode` members.

        Returns:
            The rounded vector.
        """
        if precision > 0:
            return Vector3(
                round_half(self._x, precision, mode),
                round_half(self._y, precision, mode),
                round_half(self._z, precision, mode),
            )
        return Vector3(
            int(round_half(self._x, precision, mode)),
            int(round_half(self._y, precision, mode)),
            int(round_half(self._z, precision, mode)),
        )

    def abs(self) -> Vector3:
        return Vector3(abs(self._x), abs(self._y), abs(self._z))

    def get_side(self, side: int, step: int = 1) -> Vector3:
        """
        Returns the position ``step`` blocks away towards the given side.
        An unknown side leaves the vector as it is.

        Args:
            side: One of the :class:`~gamemath.misc.side.Side` members.
            step: How far to move. Defaults to 1.

        Returns:
            The neighbouring position, or this vector if ``side`` is not valid.
        """
        if side == Side.DOWN:
            return Vector3(self._x, self._y - step, self._z)
        if side == Side.UP:
            return Vector3(self._x, self._y + step, self._z)
        if side == Side.NORTH:
            return Vector3(self._x, self._y, self._z - step)
        if side == Side.SOUTH:
            return Vector3(self._x, self._y, self._z + step)
        if side == Side.WEST:
            return Vector3(self._x - step, self._y, self._z)
        if side == Side.EAST:
            return Vector3(self._x + step, self._y, self._z)
        module_logger.debug(f"Ignoring unknown side {side!r} in get_side.")
        return self

    def down(self, step: int = 1) -> Vector3:
        return self.get_side(Side.DOWN, step)

    def up(self, step: int = 1) -> Vector3:
        return self.get_side(Side.UP, step)

    def north(self, step: int = 1) -> Vector3:
        return self.get_side(Side.NORTH, step)

    def south(self, step: int = 1) -> Vector3:
        return self.get_side(Side.SOUTH, step)

    def west(self, step: int = 1) -> Vector3:
        return self.get_side(Side.WEST, step)

    def east(self, step: int = 1) -> Vector3:
        return self.get_side(Side.EAST, step)

    def sides(self, step: int = 1) -> Iterator[Tuple[Side, Vector3]]:
        """
        Iterates over the six neighbours of this position.

        Args:
            step: How far each neighbour is from this position. Defaults to 1.

        Returns:
            ``(side, position)`` pairs in the order of the :class:`~gamemath.misc.side.Side` values.
        """
        for side in Side:
            yield side, self.get_side(side, step)

    @staticmethod
    def get_opposite_side(side: int) -> Side:
        """
        Returns the side opposite to the given one.

        Args:
            side: 0-5, one of the :class:`~gamemath.misc.side.Side` members.

        Raises:
            MathValueError: If an invalid side is supplied.
        """
        return get_opposite_side(side)

    def as_vector3(self) -> Vector3:
        """
        Returns a plain :class:`Vector3` copy of this vector.
        """
        return Vector3(self._x, self._y, self._z)

    def as_mutable(self) -> MutableVector3:
        return MutableVector3(self._x, self._y, self._z)

    def distance_squared(self, pos: Vector3) -> float:
        """
        The squared Euclidean distance between this vector and a given vector.
        Prefer this over :meth:`distance` when only comparing distances.

        Args:
            pos: The given vector.

        Returns:
            The squared distance between the two vectors.
        """
        dx = self._x - pos.x
        dy = self._y - pos.y
        dz = self._z - pos.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, pos: Vector3) -> float:
        """
        The :math:`L^2` (Euclidean) distance between this vector and a given vector.

        Args:
            pos: The given vector.

        Returns:
            The distance between the two vectors.
        """
        return math.sqrt(self.distance_squared(pos))

    def max_plain_distance(self, x, z: Number = 0) -> float:
        """
        The largest of the horizontal (x and z) coordinate differences, ignoring height.

        Args:
            x: A :class:`Vector3`, a :class:`~gamemath.misc.vec2.Vector2` holding an ``(x, z)`` pair in its
               ``x`` and ``y`` fields, or the x-coordinate to compare against.
            z: The z-coordinate to compare against. Only used when ``x`` is a number.

        Returns:
            The Chebyshev distance in the horizontal plane.
        """
        if isinstance(x, Vector3):
            return self.max_plain_distance(x.x, x.z)
        if hasattr(x, "x") and hasattr(x, "y"):
            return self.max_plain_distance(x.x, x.y)
        return max(abs(self._x - x), abs(self._z - z))

    def length(self) -> float:
        """
        The length (magnitude) of this vector. [ ie :math:`length := |vector|` ]

        Returns:
            The length of this vector (a scalar value).
        """
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z

    def normalize(self) -> Vector3:
        """
        Returns this vector scaled to unit length (:math:`length = 1`), or the
        zero vector when this vector has no length.

        Returns:
            The normalized vector.
        """
        len_sq = self.length_squared()
        if len_sq > 0:
            return self.divide(math.sqrt(len_sq))
        return Vector3(0, 0, 0)

    def dot(self, v: Vector3) -> float:
        """
        The dot product between this vector and a given vector.

        Args:
            v: The given vector.

        Returns:
            The dot product between the two vectors (a scalar value).
        """
        return self._x * v.x + self._y * v.y + self._z * v.z

    def cross(self, v: Vector3) -> Vector3:
        """
        The (right-handed) cross product between this vector and a given vector.

        Args:
            v: The given vector.

        Returns:
            The cross product between the two vectors (a vector value).
        """
        return Vector3(
            self._y * v.z - self._z * v.y,
            self._z * v.x - self._x * v.z,
            self._x * v.y - self._y * v.x,
        )

    def equals(self, v: Vector3) -> bool:
        """
        Whether all components are equal. No tolerance is applied.
        """
        return self._x == v.x and self._y == v.y and self._z == v.z

    def _intermediate(self, v: Vector3, axis: int, value: float) -> Vector3 | None:
        start = self.to_tuple()
        diff = (v.x - self._x, v.y - self._y, v.z - self._z)

        if diff[axis] * diff[axis] < INTERMEDIATE_EPSILON:
            return None

        f = (value - start[axis]) / diff[axis]
        if f < 0 or f > 1:
            return None

        coords = [start[i] + diff[i] * f for i in range(3)]
        coords[axis] = value
        return Vector3(*coords)

    def get_intermediate_with_x_value(self, v: Vector3, x: float) -> Vector3 | None:
        """
        Returns the point on the segment between this vector and ``v`` whose
        x-coordinate equals ``x``.

        Args:
            v: The other end of the segment.
            x: The x-coordinate to look for.

        Returns:
            The point on the segment, or ``None`` if the segment does not
            cross that x-coordinate or runs (almost) parallel to it.
        """
        return self._intermediate(v, 0, x)

    def get_intermediate_with_y_value(self, v: Vector3, y: float) -> Vector3 | None:
        """
        Same as :meth:`get_intermediate_with_x_value`, for the y-coordinate.
        """
        return self._intermediate(v, 1, y)

    def get_intermediate_with_z_value(self, v: Vector3, z: float) -> Vector3 | None:
        """
        Same as :meth:`get_intermediate_with_x_value`, for the z-coordinate.
        """
        return self._intermediate(v, 2, z)

    def to_tuple(self) -> Tuple[Number, Number, Number]:
        return (self._x, self._y, self._z)

    def to_numpy(self) -> ndarray:
        """
        Returns the components as a ``NumPy`` array of floats.
        """
        return np.array([self._x, self._y, self._z], dtype=float)

    def __add__(self, b: Vector3) -> Vector3:
        if not isinstance(b, Vector3):
            return NotImplemented
        return self.add(b)

    def __sub__(self, b: Vector3) -> Vector3:
        if not isinstance(b, Vector3):
            return NotImplemented
        return self.subtract(b)

    def __mul__(self, b: Number) -> Vector3:
        if isinstance(b, Vector3):
            return NotImplemented
        return self.multiply(b)

    __rmul__ = __mul__

    def __truediv__(self, b: Number) -> Vector3:
        if isinstance(b, Vector3):
            return NotImplemented
        return self.divide(b)

    def __neg__(self) -> Vector3:
        return Vector3(-self._x, -self._y, -self._z)

    def __abs__(self) -> Vector3:
        return self.abs()

    def __round__(self, ndigits: int | None = None) -> Vector3:
        return self.round(ndigits or 0)

    def __floor__(self) -> Vector3:
        return self.floor()

    def __ceil__(self) -> Vector3:
        return self.ceil()

    def __getitem__(self, n: int) -> Number:
        """
        Returns the n-th element of the vector, starting by zero.

        Args:
            n: The index of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if n == 0:
            return self._x
        if n == 1:
            return self._y
        if n == 2:
            return self._z
        raise IndexError(f"Vector3 does not have an element at index {n}.")

    def __iter__(self) -> Iterator[Number]:
        yield self._x
        yield self._y
        yield self._z

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z))

    def __str__(self) -> str:
        return f"Vector3(x={self._x},y={self._y},z={self._z})"

    __repr__ = __str__


class MutableVector3(Vector3):
    """
    A :class:`Vector3` whose components can be overwritten in place. Meant for
    hot paths that reuse one instance instead of allocating a new vector for
    every step. All operations inherited from :class:`Vector3` still return new
    (immutable) vectors; only the attribute setters, :meth:`set_components` and
    :meth:`from_object_add` modify the receiver.
    """

    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_vector(cls, v: Vector3) -> MutableVector3:
        return cls(v.x, v.y, v.z)

    @property
    def x(self) -> Number:
        return self._x

    @x.setter
    def x(self, value: Number) -> None:
        self._x = value

    @property
    def y(self) -> Number:
        return self._y

    @y.setter
    def y(self, value: Number) -> None:
        self._y = value

    @property
    def z(self) -> Number:
        return self._z

    @z.setter
    def z(self, value: Number) -> None:
        self._z = value

    def set_components(self, x: Number, y: Number, z: Number) -> MutableVector3:
        """
        Overwrites all three components.

        Returns:
            This vector, to allow chaining.
        """
        self._x = x
        self._y = y
        self._z = z
        return self

    def from_object_add(
        self, pos: Vector3, x: Number, y: Number, z: Number
    ) -> MutableVector3:
        """
        Sets this vector to ``pos`` offset by ``(x, y, z)``.

        Returns:
            This vector, to allow chaining.
        """
        self._x = pos.x + x
        self._y = pos.y + y
        self._z = pos.z + z
        return self
