"""In-memory host world with sparse blocks and scripted players.

Implements :class:`~block_elevator.domain.host.WorldHost` so the elevator
core can run without a game server. Blocks are stored sparsely per
dimension; any coordinate without an entry reads as absent.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from block_elevator.config.constants import DIMENSIONS
from block_elevator.domain.geometry import Position

BlockKey = tuple[str, int, int, int]
"""(dimension, x, y, z) of one placed block."""


@dataclass(frozen=True)
class Block:
    """A single placed block."""

    type_id: str


@dataclass
class SimPlayer:
    """Player driven by scenario inputs."""

    id: str
    dimension: str
    location: Position
    is_sneaking: bool = False
    is_jumping: bool = False


def _block_key(dimension: str, position: Position) -> BlockKey:
    aligned = position.floored()
    return (dimension, int(aligned.x), int(aligned.y), int(aligned.z))


@dataclass
class VoxelWorld:
    """Sparse multi-dimension block world."""

    dimensions: tuple[str, ...] = DIMENSIONS
    blocks: dict[BlockKey, Block] = field(default_factory=dict)
    players: dict[str, SimPlayer] = field(default_factory=dict)

    def _require_dimension(self, dimension: str) -> None:
        if dimension not in self.dimensions:
            raise ValueError(f"unknown dimension: {dimension}")

    def set_block(self, dimension: str, position: Position, type_id: str) -> None:
        self._require_dimension(dimension)
        self.blocks[_block_key(dimension, position)] = Block(type_id=type_id)

    def remove_block(self, dimension: str, position: Position) -> None:
        self.blocks.pop(_block_key(dimension, position), None)

    def add_player(self, player: SimPlayer) -> SimPlayer:
        self._require_dimension(player.dimension)
        if player.id in self.players:
            raise ValueError(f"duplicate player id: {player.id}")
        self.players[player.id] = player
        return player

    def player(self, player_id: str) -> SimPlayer:
        try:
            return self.players[player_id]
        except KeyError as exc:
            raise ValueError(f"unknown player id: {player_id}") from exc

    def set_input(
        self,
        player_id: str,
        sneaking: bool | None = None,
        jumping: bool | None = None,
    ) -> None:
        """Update held inputs; ``None`` leaves that input unchanged."""
        player = self.player(player_id)
        if sneaking is not None:
            player.is_sneaking = sneaking
        if jumping is not None:
            player.is_jumping = jumping

    # -- WorldHost -----------------------------------------------------------

    def list_regions(self) -> Iterable[str]:
        return self.dimensions

    def list_players(self, region: str) -> list[SimPlayer]:
        return [p for p in self.players.values() if p.dimension == region]

    def get_block(self, region: str, position: Position) -> Block | None:
        return self.blocks.get(_block_key(region, position))

    def teleport(self, player: SimPlayer, position: Position) -> None:
        self.player(player.id).location = position
