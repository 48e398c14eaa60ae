"""Per-player teleport cooldown flags.

Each direction is armed while its flag is ``False``. A successful teleport
sets the flag; releasing the triggering input (sneak for down, jump for
up) clears it again, so holding the input never fires twice.

Entries are created lazily the first time a player is observed and are
kept for the lifetime of the store unless :meth:`PlayerStateStore.prune`
is called.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass
class PlayerState:
    """Mutable cooldown record for one player."""

    has_teleported_down: bool = False
    has_teleported_up: bool = False


class PlayerStateStore:
    """Mapping from player id to :class:`PlayerState`."""

    def __init__(self) -> None:
        self._states: dict[str, PlayerState] = {}

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._states

    def get_or_create(self, player_id: str) -> PlayerState:
        """Return the record for *player_id*, inserting a cleared one if missing."""
        state = self._states.get(player_id)
        if state is None:
            state = PlayerState()
            self._states[player_id] = state
        return state

    @staticmethod
    def reset(state: PlayerState, is_sneaking: bool, is_jumping: bool) -> None:
        """Re-arm each direction whose triggering input is released."""
        if not is_sneaking:
            state.has_teleported_down = False
        if not is_jumping:
            state.has_teleported_up = False

    def prune(self, active_ids: Iterable[str]) -> int:
        """Drop entries whose player is not in *active_ids*; return the count removed."""
        keep = set(active_ids)
        stale = [player_id for player_id in self._states if player_id not in keep]
        for player_id in stale:
            del self._states[player_id]
        if stale:
            logger.debug("pruned %d departed player state(s)", len(stale))
        return len(stale)
