import os

from gamemath.logging import (MathError, MathValueError, config_logging,
                              set_up_simple_logging)
from gamemath.misc import (SIDE_DOWN, SIDE_EAST, SIDE_NORTH, SIDE_SOUTH,
                           SIDE_UP, SIDE_WEST, MutableVector3, RoundingMode,
                           Side, Vector2, Vector3, get_opposite_side,
                           round_half)


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
