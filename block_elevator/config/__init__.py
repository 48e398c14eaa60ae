"""Configuration layer: constants and typed config dataclasses."""

from block_elevator.config.constants import (
    ALLOWED_BLOCKS,
    DIMENSIONS,
    FLUSH_THRESHOLD,
    LOWER_BOUND,
    MAX_SCAN_STEPS,
    NETHER,
    OVERWORLD,
    PRIMARY_DIMENSION,
    PRIMARY_UPPER_BOUND,
    SHARED_UPPER_BOUND,
    THE_END,
    TICK_INTERVAL,
)
from block_elevator.config.types import (
    Direction,
    ElevatorConfig,
    RegionBounds,
    RunConfig,
    RunResult,
)

__all__ = [
    "ALLOWED_BLOCKS",
    "DIMENSIONS",
    "Direction",
    "ElevatorConfig",
    "FLUSH_THRESHOLD",
    "LOWER_BOUND",
    "MAX_SCAN_STEPS",
    "NETHER",
    "OVERWORLD",
    "PRIMARY_DIMENSION",
    "PRIMARY_UPPER_BOUND",
    "RegionBounds",
    "RunConfig",
    "RunResult",
    "SHARED_UPPER_BOUND",
    "THE_END",
    "TICK_INTERVAL",
]
