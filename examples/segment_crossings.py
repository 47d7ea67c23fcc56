import logging
import math

from gamemath import Side, Vector3, set_up_simple_logging

logger = logging.getLogger('gamemath.examples')


def crossings(start, end):
    """
    Yields every point where the segment between ``start`` and ``end``
    crosses a block boundary, ordered by distance from ``start``.
    """
    points = []
    for axis, method in (('x', start.get_intermediate_with_x_value),
                         ('y', start.get_intermediate_with_y_value),
                         ('z', start.get_intermediate_with_z_value)):
        lo, hi = sorted((getattr(start, axis), getattr(end, axis)))
        for value in range(math.ceil(lo), math.floor(hi) + 1):
            point = method(end, float(value))
            if point is not None:
                points.append(point)
    points.sort(key=start.distance_squared)
    yield from points


def main():
    set_up_simple_logging(level=logging.DEBUG)

    start = Vector3(0.5, 64.2, 0.5)
    end = Vector3(4.25, 66.8, -2.75)

    logger.info(f'Walking from {start} to {end}, {start.distance(end):.3f} blocks.')
    for point in crossings(start, end):
        logger.info(f'crosses {point.round(3)} in block {point.floor()}')

    block = end.floor()
    below = block.get_side(Side.DOWN)
    logger.info(f'block below the end point: {below}, '
                f'seen from {Vector3.get_opposite_side(Side.DOWN).name.lower()}')
    logger.info(f'horizontal distance to spawn: {block.max_plain_distance(0, 0)}')


if __name__ == '__main__':
    main()
