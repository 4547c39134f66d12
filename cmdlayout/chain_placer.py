"""
Assigns the commands of a chain to the coordinates of a curve.

A chain placer is any callable ``(chain, curve) -> PlacementAttempt``. The
search in ``cmdlayout.placer`` calls it once per candidate cuboid, so it must
never return a partially placed chain: either every command gets a block or
the attempt fails with a reason.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .chain import NOP, is_conditional
from .coordinate import Coordinate, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandBlock:
    """A command placed at a coordinate, facing the next block of the chain."""
    command: Any
    coordinate: Coordinate
    direction: Direction


@dataclass(frozen=True)
class PlacementAttempt:
    """Outcome of one placement attempt: blocks on success, a reason on failure."""
    blocks: Optional[Tuple[CommandBlock, ...]] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.blocks is not None

    @staticmethod
    def success(blocks: Sequence[CommandBlock]) -> "PlacementAttempt":
        return PlacementAttempt(blocks=tuple(blocks))

    @staticmethod
    def failure(reason: str) -> "PlacementAttempt":
        return PlacementAttempt(blocks=None, reason=reason)


def try_place_chain(chain: Sequence[Any], curve: Sequence[Coordinate]) -> PlacementAttempt:
    """
    Places ``chain`` along ``curve``, consuming coordinates strictly in order.

    Each block faces the following coordinate of the curve. A conditional
    command only sees the block behind it, so it has to sit on a straight run
    together with its predecessor. Commands are grouped into an unconditional
    head plus its conditional followers; whenever a group would put one of its
    conditional commands on a turn, a NOP block is placed at the current
    coordinate and the group is tried again one coordinate later.

    Args:
        chain: The commands, in chain order.
        curve: Adjacent coordinates to place the commands on.

    Returns:
        A successful PlacementAttempt with one block per command (plus any NOP
        padding), or a failed one if the curve is too short.
    """
    facings = _curve_facings(curve)
    blocks: List[CommandBlock] = []
    position = 0
    for group in _split_groups(chain):
        while True:
            end = position + len(group)
            if end > len(curve):
                return PlacementAttempt.failure(
                    f"{len(chain)} commands do not fit on a curve of {len(curve)} coordinates"
                    f" ({len(blocks)} blocks placed before running out)"
                )
            if _group_fits(group, position, facings):
                break
            blocks.append(CommandBlock(NOP, curve[position], facings[position]))
            position += 1

        for offset, command in enumerate(group):
            index = position + offset
            blocks.append(CommandBlock(command, curve[index], facings[index]))
        position = end

    padding = len(blocks) - len(chain)
    if padding:
        logger.debug("Inserted %d NOP blocks to keep conditional commands off turns", padding)
    return PlacementAttempt.success(blocks)


def _split_groups(chain: Sequence[Any]) -> List[List[Any]]:
    groups: List[List[Any]] = []
    for command in chain:
        if groups and is_conditional(command):
            groups[-1].append(command)
        else:
            groups.append([command])
    return groups


def _group_fits(group: List[Any], position: int, facings: List[Direction]) -> bool:
    # Every member after the head is conditional
    for offset in range(1, len(group)):
        index = position + offset
        if facings[index] != facings[index - 1]:
            return False
    return True


def _curve_facings(curve: Sequence[Coordinate]) -> List[Direction]:
    """Facing of a block on each curve coordinate: towards the next coordinate."""
    facings = [Direction.from_delta(curve[i + 1] - curve[i]) for i in range(len(curve) - 1)]
    if facings:
        facings.append(facings[-1])
    elif curve:
        facings.append(Direction.UP)
    return facings
