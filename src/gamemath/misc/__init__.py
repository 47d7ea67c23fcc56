from gamemath.misc.rounding import RoundingMode, round_half
from gamemath.misc.side import (SIDE_DOWN, SIDE_EAST, SIDE_NORTH, SIDE_SOUTH,
                                SIDE_UP, SIDE_WEST, Side, get_opposite_side)
from gamemath.misc.vec2 import Vector2
from gamemath.misc.vec3 import INTERMEDIATE_EPSILON, MutableVector3, Vector3
