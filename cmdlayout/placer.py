"""
Cube-size search: lays a chain out in the smallest cube the chain placer can
fill, growing the cube until the chain fits or the bounding box is used up.

Usage:
    from cmdlayout.placer import place
    blocks = place(chain, Coordinate(0, 0, 0), Coordinate(16, 16, 16),
                   Orientation.parse("+x+z+y"),
                   lambda index, command, coordinate, direction: (index, coordinate))
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .chain_placer import CommandBlock, PlacementAttempt, try_place_chain
from .coordinate import Coordinate, Direction, Orientation
from .curve import space_filling_curve

logger = logging.getLogger(__name__)

R = TypeVar("R")

ChainPlacer = Callable[[Sequence[Any], Sequence[Coordinate]], PlacementAttempt]
BlockFactory = Callable[[int, Any, Coordinate, Direction], R]


class NotEnoughSpaceError(Exception):
    """Raised when a chain does not fit into its bounding box."""

    def __init__(self, chain_size: int, min_corner: Coordinate, max_corner: Coordinate,
                 reason: str = ""):
        message = f"Not enough space for {chain_size} commands between {min_corner} and {max_corner}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.chain_size = chain_size
        self.min_corner = min_corner
        self.max_corner = max_corner
        self.reason = reason


def place(chain: Sequence[Any], min_corner: Coordinate, max_corner: Coordinate,
          orientation: Orientation, factory: BlockFactory,
          chain_placer: Optional[ChainPlacer] = None) -> List[R]:
    """
    Places the commands of ``chain`` between ``min_corner`` and ``max_corner``
    and turns every placed block into a result with ``factory``.

    Args:
        chain: The commands to place, in chain order.
        min_corner: Minimal corner of the bounding box (inclusive).
        max_corner: Maximal corner of the bounding box (exclusive).
        orientation: Directional frame of the curve the chain follows.
        factory: Called as ``factory(index, command, coordinate, direction)``
                 once per placed block, in ascending index order.
        chain_placer: Strategy assigning commands to curve coordinates.
                      Defaults to ``try_place_chain``.

    Returns:
        The factory results, in chain order.

    Raises:
        ValueError: If an argument is None or the bounding box is empty.
        NotEnoughSpaceError: If the chain does not fit into the bounding box.
    """
    if factory is None:
        raise ValueError("factory must not be None")
    blocks = place_blocks(chain, min_corner, max_corner, orientation, chain_placer)
    return [
        factory(index, block.command, block.coordinate, block.direction)
        for index, block in enumerate(blocks)
    ]


def place_blocks(chain: Sequence[Any], min_corner: Coordinate, max_corner: Coordinate,
                 orientation: Orientation,
                 chain_placer: Optional[ChainPlacer] = None) -> List[CommandBlock]:
    """Same as ``place`` but returns the CommandBlocks themselves."""
    _check_arguments(chain, min_corner, max_corner, orientation)
    if chain_placer is None:
        chain_placer = try_place_chain

    extent = max_corner - min_corner
    max_extent = max(extent.x, extent.y, extent.z)
    last_inclusive = max_corner - Coordinate.uniform(1)

    side_length = initial_side_length(len(chain))
    while True:
        estimated_max = Coordinate.minimum(
            last_inclusive, min_corner + Coordinate.uniform(side_length - 1)
        )
        curve = space_filling_curve(min_corner, estimated_max, orientation)
        attempt = chain_placer(chain, curve)
        if attempt.ok:
            logger.info("Placed %d commands in %d blocks within %s..%s (side length %d)",
                        len(chain), len(attempt.blocks), min_corner, estimated_max, side_length)
            return list(attempt.blocks)

        logger.debug("Side length %d too small: %s", side_length, attempt.reason)
        if side_length >= max_extent:
            raise NotEnoughSpaceError(len(chain), min_corner, max_corner, attempt.reason)
        side_length += 1


def initial_side_length(count: int) -> int:
    """
    Smallest cube side length whose volume holds ``count`` cells, at least 1.

    Uses integer arithmetic so exact cubes such as 27 are not rounded up.
    """
    if count <= 1:
        return 1
    side = max(1, int(round(count ** (1.0 / 3.0))))
    while side ** 3 < count:
        side += 1
    while side > 1 and (side - 1) ** 3 >= count:
        side -= 1
    return side


def _check_arguments(chain, min_corner, max_corner, orientation) -> None:
    for name, value in (("chain", chain), ("min_corner", min_corner),
                        ("max_corner", max_corner), ("orientation", orientation)):
        if value is None:
            raise ValueError(f"{name} must not be None")
    for axis in ("x", "y", "z"):
        if getattr(min_corner, axis) >= getattr(max_corner, axis):
            raise ValueError(f"min_corner.{axis} >= max_corner.{axis}")
