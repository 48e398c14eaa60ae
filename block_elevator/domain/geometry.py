"""Typed world coordinates.

``Position`` is used both for continuous player locations and for
block-aligned coordinates. Block lookups always go through
:meth:`Position.floored`; teleport targets go through
:func:`landing_position`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Immutable point in a dimension."""

    x: float
    y: float
    z: float

    def floored(self) -> Position:
        """Return the block-aligned position containing this point."""
        return Position(math.floor(self.x), math.floor(self.y), math.floor(self.z))

    def with_y(self, y: float) -> Position:
        return Position(self.x, y, self.z)

    def below(self) -> Position:
        return Position(self.x, self.y - 1, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def landing_position(block: Position) -> Position:
    """Centre of the block's top face: ``(x + 0.5, y + 1, z + 0.5)``."""
    return Position(block.x + 0.5, block.y + 1, block.z + 0.5)
