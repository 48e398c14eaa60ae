"""Bounded single-axis search for the nearest matching elevator block.

Offsets are visited in strictly increasing distance from the origin, so the
first match is the nearest one and the scan returns immediately.

Downward offsets start at -2: the block at -1 is the pad the player is
standing on. Upward offsets start at +1 (the player's feet block).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from block_elevator.config.types import Direction
from block_elevator.domain.geometry import Position
from block_elevator.domain.host import BlockHandle

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

BlockLookup = Callable[[Position], BlockHandle | None]
"""Resolve an integer position to the block there, or ``None``."""

DOWN_FIRST_OFFSET = 2


def scan_offsets(direction: Direction, max_steps: int) -> Iterator[int]:
    """Yield signed y offsets in visiting order."""
    if direction is Direction.DOWN:
        for step in range(DOWN_FIRST_OFFSET, max_steps + 1):
            yield -step
    else:
        for step in range(1, max_steps + 1):
            yield step


def _out_of_bounds(direction: Direction, check_y: float, lower_bound: int, upper_bound: int) -> bool:
    if direction is Direction.DOWN:
        return check_y <= lower_bound
    return check_y >= upper_bound


def scan_vertical(
    origin: Position,
    direction: Direction,
    max_steps: int,
    lower_bound: int,
    upper_bound: int,
    block_lookup: BlockLookup,
    target_block_type: str,
) -> Position | None:
    """Return the nearest block of *target_block_type* along the y axis.

    *origin* must be block-aligned. Scanning stops at the first bound hit
    (``y <= lower_bound`` going down, ``y >= upper_bound`` going up) or once
    *max_steps* is exhausted. Missing blocks count as non-matches.
    """
    for offset in scan_offsets(direction, max_steps):
        check_y = origin.y + offset
        if _out_of_bounds(direction, check_y, lower_bound, upper_bound):
            logger.debug(
                "%s scan from %s stopped at bound (y=%s)", direction.value, origin, check_y
            )
            return None
        candidate = origin.with_y(check_y)
        block = block_lookup(candidate)
        if block is None or block.type_id != target_block_type:
            continue
        return candidate
    return None


class VerticalScanner:
    """Scanner bound to one host dimension and one set of region limits."""

    def __init__(
        self,
        block_lookup: BlockLookup,
        max_steps: int,
        lower_bound: int,
        upper_bound: int,
    ) -> None:
        self.block_lookup = block_lookup
        self.max_steps = max_steps
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def scan(self, origin: Position, direction: Direction, target_block_type: str) -> Position | None:
        return scan_vertical(
            origin,
            direction,
            self.max_steps,
            self.lower_bound,
            self.upper_bound,
            self.block_lookup,
            target_block_type,
        )
