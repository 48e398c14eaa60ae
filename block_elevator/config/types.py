"""Configuration dataclasses for the elevator core and the scenario engine.

All frozen dataclasses that parameterise a tick pass or a scenario run live
here, together with the small enums shared between layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from block_elevator.config.constants import (
    ALLOWED_BLOCKS,
    DIMENSIONS,
    LOWER_BOUND,
    MAX_SCAN_STEPS,
    PRIMARY_DIMENSION,
    PRIMARY_UPPER_BOUND,
    SHARED_UPPER_BOUND,
    TICK_INTERVAL,
)

__all__ = [
    "Direction",
    "ElevatorConfig",
    "RegionBounds",
    "RunConfig",
    "RunResult",
]


class Direction(Enum):
    """Vertical travel direction of an elevator scan."""

    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class RegionBounds:
    """Vertical limits applied to scans inside one dimension."""

    lower: int
    upper: int


@dataclass(frozen=True)
class ElevatorConfig:
    """Static policy values read by every tick."""

    max_scan_steps: int = MAX_SCAN_STEPS
    lower_bound: int = LOWER_BOUND
    primary_upper_bound: int = PRIMARY_UPPER_BOUND
    shared_upper_bound: int = SHARED_UPPER_BOUND
    primary_dimension: str = PRIMARY_DIMENSION
    dimensions: tuple[str, ...] = DIMENSIONS
    allowed_blocks: tuple[str, ...] = ALLOWED_BLOCKS
    prune_departed_players: bool = False
    """Drop cooldown entries of players not seen during a tick."""

    def __post_init__(self) -> None:
        if self.max_scan_steps < 1:
            raise ValueError("max_scan_steps must be >= 1")
        if not self.dimensions:
            raise ValueError("dimensions must not be empty")
        if len(set(self.dimensions)) != len(self.dimensions):
            raise ValueError("dimensions must be distinct")
        if self.primary_dimension not in self.dimensions:
            raise ValueError("primary_dimension must be one of dimensions")
        if not self.allowed_blocks:
            raise ValueError("allowed_blocks must not be empty")
        if len(set(self.allowed_blocks)) != len(self.allowed_blocks):
            raise ValueError("allowed_blocks must be distinct")
        if self.primary_upper_bound <= self.lower_bound:
            raise ValueError("primary_upper_bound must be > lower_bound")
        if self.shared_upper_bound <= self.lower_bound:
            raise ValueError("shared_upper_bound must be > lower_bound")

    def upper_bound_for(self, dimension: str) -> int:
        """Return the upward scan ceiling for *dimension*."""
        if dimension == self.primary_dimension:
            return self.primary_upper_bound
        return self.shared_upper_bound

    def region_bounds(self, dimension: str) -> RegionBounds:
        return RegionBounds(lower=self.lower_bound, upper=self.upper_bound_for(dimension))


@dataclass(frozen=True)
class RunConfig:
    """Knobs for one scenario run driven by the simulation engine."""

    ticks: int = 20
    tick_interval: int = TICK_INTERVAL
    """Host ticks between orchestrator passes (1 = every tick)."""
    run_id: str = "run"

    def __post_init__(self) -> None:
        if self.ticks < 1:
            raise ValueError("ticks must be >= 1")
        if self.tick_interval < 1:
            raise ValueError("tick_interval must be >= 1")
        if not self.run_id:
            raise ValueError("run_id must not be empty")


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one scenario run."""

    run_id: str
    ticks_run: int
    teleports: int
    teleports_down: int
    teleports_up: int
    final_positions: dict[str, tuple[float, float, float]]
