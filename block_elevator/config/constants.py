"""Centralized domain constants for the block elevator.

All magic numbers and identifiers shared across modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

ALLOWED_BLOCKS: tuple[str, ...] = (
    "minecraft:diamond_block",
    "minecraft:netherite_block",
    "minecraft:emerald_block",
    "minecraft:lapis_block",
    "minecraft:gold_block",
    "minecraft:iron_block",
    "minecraft:copper_block",
)
"""Block types that act as elevator pads, in processing order."""

OVERWORLD = "minecraft:overworld"
NETHER = "minecraft:nether"
THE_END = "minecraft:the_end"

DIMENSIONS: tuple[str, ...] = (NETHER, OVERWORLD, THE_END)
"""Dimensions scanned every tick, in processing order."""

PRIMARY_DIMENSION = OVERWORLD
"""Dimension that uses ``PRIMARY_UPPER_BOUND`` instead of the shared bound."""

MAX_SCAN_STEPS = 100
"""Maximum vertical distance (in blocks) searched in either direction."""

LOWER_BOUND = -65
"""Downward scans stop once the checked y is at or below this value."""

PRIMARY_UPPER_BOUND = 340
"""Upward scans in the primary dimension stop once the checked y reaches this."""

SHARED_UPPER_BOUND = 255
"""Upward scan ceiling shared by the nether and the end."""

TICK_INTERVAL = 1
"""Host ticks between two orchestrator passes."""

FLUSH_THRESHOLD = 8_192
"""Flush teleport log rows to Parquet once this in-memory row count is reached."""
