"""Interfaces consumed from the host world simulation.

The elevator core never owns the world. It reads players and blocks and
issues teleports through these protocols; any concrete host (a game
server bridge, :class:`~block_elevator.domain.voxel_world.VoxelWorld`)
only needs to provide the listed members.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from block_elevator.domain.geometry import Position


class PlayerHandle(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def location(self) -> Position: ...

    @property
    def is_sneaking(self) -> bool: ...

    @property
    def is_jumping(self) -> bool: ...


class BlockHandle(Protocol):
    @property
    def type_id(self) -> str: ...


class WorldHost(Protocol):
    """Read access to dimensions, players and blocks plus the teleport action."""

    def list_regions(self) -> Iterable[str]: ...

    def list_players(self, region: str) -> Iterable[PlayerHandle]: ...

    def get_block(self, region: str, position: Position) -> BlockHandle | None:
        """Return the block at the integer *position*, or ``None`` if unloaded/absent."""
        ...

    def teleport(self, player: PlayerHandle, position: Position) -> None: ...
