"""Teleport execution and cooldown bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from block_elevator.config.types import Direction
from block_elevator.domain.geometry import Position, landing_position
from block_elevator.domain.host import PlayerHandle
from block_elevator.domain.player_state import PlayerState

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

TeleportAction = Callable[[PlayerHandle, Position], None]


@dataclass(frozen=True)
class TeleportEvent:
    """Record of one dispatched teleport."""

    tick: int
    dimension: str
    player_id: str
    direction: Direction
    block_type: str
    block: Position
    landing: Position


class TeleportDispatcher:
    """Move a player onto a found block and set the matching cooldown flag.

    Callers must already have checked input gating and cooldown; the
    dispatcher does not re-validate.
    """

    def __init__(self, teleport: TeleportAction) -> None:
        self._teleport = teleport

    def dispatch(
        self,
        player: PlayerHandle,
        state: PlayerState,
        found_block: Position,
        direction: Direction,
    ) -> None:
        target = landing_position(found_block)
        self._teleport(player, target)
        if direction is Direction.DOWN:
            state.has_teleported_down = True
        else:
            state.has_teleported_up = True
        logger.debug("teleported %s %s to %s", player.id, direction.value, target)

    def dispatch_down(self, player: PlayerHandle, state: PlayerState, found_block: Position) -> None:
        self.dispatch(player, state, found_block, Direction.DOWN)

    def dispatch_up(self, player: PlayerHandle, state: PlayerState, found_block: Position) -> None:
        self.dispatch(player, state, found_block, Direction.UP)
