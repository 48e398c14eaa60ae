"""Domain layer: coordinates, host protocols, cooldown state, scanning and dispatch."""

from block_elevator.domain.dispatcher import TeleportDispatcher, TeleportEvent
from block_elevator.domain.geometry import Position, landing_position
from block_elevator.domain.host import BlockHandle, PlayerHandle, WorldHost
from block_elevator.domain.player_state import PlayerState, PlayerStateStore
from block_elevator.domain.scanner import VerticalScanner, scan_offsets, scan_vertical
from block_elevator.domain.voxel_world import Block, SimPlayer, VoxelWorld

__all__ = [
    "Block",
    "BlockHandle",
    "PlayerHandle",
    "PlayerState",
    "PlayerStateStore",
    "Position",
    "SimPlayer",
    "TeleportDispatcher",
    "TeleportEvent",
    "VerticalScanner",
    "VoxelWorld",
    "WorldHost",
    "landing_position",
    "scan_offsets",
    "scan_vertical",
]
