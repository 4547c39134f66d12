"""Space filling curve over an integer cuboid."""

from typing import List

from .coordinate import Coordinate, Orientation


def space_filling_curve(corner1: Coordinate, corner2: Coordinate,
                        orientation: Orientation) -> List[Coordinate]:
    """
    Returns coordinates that completely fill the cuboid between ``corner1`` and
    ``corner2`` as a 3D snake with the given orientation.

    The tertiary direction is the outermost loop and always advances in its own
    sign. The secondary sweep reverses each time the tertiary index advances and
    the primary sweep reverses each time the secondary index advances, so every
    two successive coordinates are exactly one step apart and no coordinate
    repeats. The first coordinate is the corner picked by the orientation's
    signs. The last one depends on the parity of the cuboid's extents and is
    not necessarily the opposite corner.

    Args:
        corner1: One corner of the cuboid (inclusive).
        corner2: The diagonally opposite corner (inclusive). Either corner may be
                 the larger one.
        orientation: Directional frame of the traversal.

    Returns:
        A list of (dx+1)*(dy+1)*(dz+1) coordinates.
    """
    low = Coordinate.minimum(corner1, corner2)
    high = Coordinate.maximum(corner1, corner2)

    t_direction = orientation.tertiary
    s_direction = orientation.secondary
    p_direction = orientation.primary

    t_values = _axis_range(low.get(t_direction.axis), high.get(t_direction.axis),
                           t_direction.is_positive)

    result: List[Coordinate] = []
    backwards_secondary = False
    backwards_primary = False
    for t in t_values:
        s_values = _axis_range(low.get(s_direction.axis), high.get(s_direction.axis),
                               s_direction.is_positive ^ backwards_secondary)
        for s in s_values:
            p_values = _axis_range(low.get(p_direction.axis), high.get(p_direction.axis),
                                   p_direction.is_positive ^ backwards_primary)
            for p in p_values:
                result.append(
                    Coordinate()
                    .plus(p, p_direction.axis)
                    .plus(s, s_direction.axis)
                    .plus(t, t_direction.axis)
                )
            backwards_primary = not backwards_primary
        backwards_secondary = not backwards_secondary
    return result


def _axis_range(low: int, high: int, ascending: bool) -> range:
    if ascending:
        return range(low, high + 1)
    return range(high, low - 1, -1)
