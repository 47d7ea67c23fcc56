from __future__ import annotations

from enum import IntEnum

from gamemath.logging import MathValueError


class Side(IntEnum):
    """
    The six axis-aligned directions of the game world. Members are ordered
    so that the two sides of the same axis are adjacent and differ only in
    the lowest bit, i.e. ``side ^ 1`` is always the opposite side.
    """

    DOWN = 0
    UP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5

    @property
    def opposite(self) -> Side:
        """
        The side facing the other way along the same axis.
        """
        return Side(self ^ 0x01)

    @property
    def axis(self) -> str:
        """
        Name of the axis this side lies on: ``'y'`` for down/up, ``'z'`` for north/south and ``'x'`` for west/east.
        """
        return _AXES[self >> 1]

    @property
    def is_positive(self) -> bool:
        """
        Whether moving towards this side increases the coordinate on its axis.
        """
        return bool(self & 0x01)


_AXES = ("y", "z", "x")

SIDE_DOWN = Side.DOWN
SIDE_UP = Side.UP
SIDE_NORTH = Side.NORTH
SIDE_SOUTH = Side.SOUTH
SIDE_WEST = Side.WEST
SIDE_EAST = Side.EAST


def get_opposite_side(side: int) -> Side:
    """
    Returns the side opposite to the given one.

    Args:
        side: One of the :class:`Side` members or its integer value (0-5).

    Returns:
        The opposite side.

    Raises:
        MathValueError: If ``side`` is not between 0 and 5.
    """
    if isinstance(side, int) and 0 <= side <= 5:
        return Side(side ^ 0x01)
    raise MathValueError(f"Invalid side {side} given to get_opposite_side")
