"""Per-tick elevator pass over every dimension, player and pad type.

Per (player, direction) the cooldown flag walks through three states:

- idle: flag clear, waiting for the triggering input;
- armed: input held while standing on a pad, flag still clear;
- teleported: flag set, held until the input is released.

Sneaking triggers the down scan and jumping the up scan. Each gate requires
the other input to be released, so holding both fires nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from block_elevator.config.types import Direction, ElevatorConfig
from block_elevator.domain.dispatcher import TeleportDispatcher, TeleportEvent
from block_elevator.domain.geometry import Position, landing_position
from block_elevator.domain.host import PlayerHandle, WorldHost
from block_elevator.domain.player_state import PlayerState, PlayerStateStore
from block_elevator.domain.scanner import VerticalScanner

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

TeleportListener = Callable[[TeleportEvent], None]


def down_gate_open(player: PlayerHandle, state: PlayerState) -> bool:
    return player.is_sneaking and not player.is_jumping and not state.has_teleported_down


def up_gate_open(player: PlayerHandle, state: PlayerState) -> bool:
    return player.is_jumping and not player.is_sneaking and not state.has_teleported_up


class TickOrchestrator:
    """Drive one synchronous elevator pass per call to :meth:`tick`.

    The host owns the timer; nothing here schedules itself. The store is
    not locked, so two ticks must never run concurrently on one instance.
    """

    def __init__(
        self,
        config: ElevatorConfig | None = None,
        store: PlayerStateStore | None = None,
        on_teleport: TeleportListener | None = None,
    ) -> None:
        self.config = config or ElevatorConfig()
        self.store = store if store is not None else PlayerStateStore()
        self.on_teleport = on_teleport
        self.tick_count = 0

    def tick(self, world: WorldHost) -> None:
        available = set(world.list_regions())
        dispatcher = TeleportDispatcher(world.teleport)
        seen: set[str] = set()
        for dimension in self.config.dimensions:
            if dimension not in available:
                logger.debug("dimension %s not available on host, skipped", dimension)
                continue
            bounds = self.config.region_bounds(dimension)
            scanner = VerticalScanner(
                block_lookup=partial(world.get_block, dimension),
                max_steps=self.config.max_scan_steps,
                lower_bound=bounds.lower,
                upper_bound=bounds.upper,
            )
            for player in list(world.list_players(dimension)):
                seen.add(player.id)
                self._process_player(world, dimension, player, scanner, dispatcher)
        if self.config.prune_departed_players:
            self.store.prune(seen)
        self.tick_count += 1

    def _process_player(
        self,
        world: WorldHost,
        dimension: str,
        player: PlayerHandle,
        scanner: VerticalScanner,
        dispatcher: TeleportDispatcher,
    ) -> None:
        state = self.store.get_or_create(player.id)
        PlayerStateStore.reset(state, player.is_sneaking, player.is_jumping)

        for block_type in self.config.allowed_blocks:
            # Re-read every pass: an earlier pad type may have moved the player.
            origin = player.location.floored()
            support = world.get_block(dimension, origin.below())
            if support is None or support.type_id != block_type:
                continue

            if down_gate_open(player, state):
                found = scanner.scan(origin, Direction.DOWN, block_type)
                if found is not None:
                    dispatcher.dispatch_down(player, state, found)
                    self._emit(dimension, player, Direction.DOWN, block_type, found)

            if up_gate_open(player, state):
                found = scanner.scan(origin, Direction.UP, block_type)
                if found is not None:
                    dispatcher.dispatch_up(player, state, found)
                    self._emit(dimension, player, Direction.UP, block_type, found)

    def _emit(
        self,
        dimension: str,
        player: PlayerHandle,
        direction: Direction,
        block_type: str,
        block: Position,
    ) -> None:
        if self.on_teleport is None:
            return
        self.on_teleport(
            TeleportEvent(
                tick=self.tick_count,
                dimension=dimension,
                player_id=player.id,
                direction=direction,
                block_type=block_type,
                block=block,
                landing=landing_position(block),
            )
        )
