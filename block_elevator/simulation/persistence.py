"""Parquet persistence helpers for the teleport log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from block_elevator.io.schemas import TELEPORT_LOG_SCHEMA


def flush_teleport_columns(
    columns: dict[str, list[int | float | str]],
    teleport_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated teleport rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TELEPORT_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(teleport_log_path, TELEPORT_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def write_empty_teleport_log(teleport_log_path: Path) -> None:
    """Write a zero-row log so every run leaves a readable file behind."""
    pq.write_table(TELEPORT_LOG_SCHEMA.empty_table(), teleport_log_path)
