"""Parquet schema definitions for elevator run artifacts."""

from __future__ import annotations

import pyarrow as pa

TELEPORT_LOG_SCHEMA_VERSION = 1
SUMMARY_SCHEMA_VERSION = 1

TELEPORT_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("dimension", pa.string()),
        ("player_id", pa.string()),
        ("direction", pa.string()),
        ("block_type", pa.string()),
        ("block_x", pa.int64()),
        ("block_y", pa.int64()),
        ("block_z", pa.int64()),
        ("landing_x", pa.float64()),
        ("landing_y", pa.float64()),
        ("landing_z", pa.float64()),
    ],
    metadata={"schema_version": str(TELEPORT_LOG_SCHEMA_VERSION)},
)


def empty_teleport_columns() -> dict[str, list[int | float | str]]:
    """Return one empty column buffer per ``TELEPORT_LOG_SCHEMA`` field."""
    return {f.name: [] for f in TELEPORT_LOG_SCHEMA}
