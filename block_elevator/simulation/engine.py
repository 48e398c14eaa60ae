"""Scenario engine: drive the orchestrator over an in-memory world.

The engine plays the host role: it owns the tick counter, applies scripted
inputs, calls :meth:`TickOrchestrator.tick` every ``tick_interval`` host
ticks and persists the teleport log.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path

import pyarrow.parquet as pq

from block_elevator.config.constants import FLUSH_THRESHOLD
from block_elevator.config.types import Direction, ElevatorConfig, RunConfig, RunResult
from block_elevator.domain.dispatcher import TeleportEvent
from block_elevator.io.paths import logs_dir, summary_path, teleport_log_path
from block_elevator.io.scenario import Scenario
from block_elevator.io.schemas import SUMMARY_SCHEMA_VERSION, empty_teleport_columns
from block_elevator.simulation.orchestrator import TickOrchestrator
from block_elevator.simulation.persistence import (
    flush_teleport_columns,
    write_empty_teleport_log,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def resolve_config(scenario: Scenario, config: ElevatorConfig | None = None) -> ElevatorConfig:
    """Explicit *config* wins; otherwise apply the scenario's overrides to defaults."""
    if config is not None:
        return config
    return ElevatorConfig(**(scenario.config_overrides or {}))


def run_scenario(
    scenario: Scenario,
    out_dir: Path,
    run_config: RunConfig | None = None,
    config: ElevatorConfig | None = None,
) -> RunResult:
    """Run *scenario* for ``run_config.ticks`` host ticks and persist outputs."""
    run_cfg = run_config or RunConfig()
    elevator_cfg = resolve_config(scenario, config)
    world = scenario.build_world(elevator_cfg)

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = teleport_log_path(out_dir)

    columns = empty_teleport_columns()
    direction_counts: Counter[Direction] = Counter()
    writer: pq.ParquetWriter | None = None

    def record(event: TeleportEvent) -> None:
        direction_counts[event.direction] += 1
        columns["run_id"].append(run_cfg.run_id)
        columns["tick"].append(event.tick)
        columns["dimension"].append(event.dimension)
        columns["player_id"].append(event.player_id)
        columns["direction"].append(event.direction.value)
        columns["block_type"].append(event.block_type)
        columns["block_x"].append(int(event.block.x))
        columns["block_y"].append(int(event.block.y))
        columns["block_z"].append(int(event.block.z))
        columns["landing_x"].append(float(event.landing.x))
        columns["landing_y"].append(float(event.landing.y))
        columns["landing_z"].append(float(event.landing.z))

    orchestrator = TickOrchestrator(config=elevator_cfg, on_teleport=record)

    try:
        for host_tick in range(run_cfg.ticks):
            for player_id, change in scenario.inputs_at(host_tick):
                world.set_input(player_id, sneaking=change.sneaking, jumping=change.jumping)
            if host_tick % run_cfg.tick_interval == 0:
                orchestrator.tick(world)
            if len(columns["run_id"]) >= FLUSH_THRESHOLD:
                writer = flush_teleport_columns(columns, log_path, writer)
        writer = flush_teleport_columns(columns, log_path, writer)
    finally:
        if writer is not None:
            writer.close()
    if writer is None:
        write_empty_teleport_log(log_path)

    result = RunResult(
        run_id=run_cfg.run_id,
        ticks_run=run_cfg.ticks,
        teleports=sum(direction_counts.values()),
        teleports_down=direction_counts[Direction.DOWN],
        teleports_up=direction_counts[Direction.UP],
        final_positions={pid: p.location.as_tuple() for pid, p in world.players.items()},
    )
    summary_path(out_dir).write_text(
        json.dumps(result_to_summary(result), ensure_ascii=False, indent=2)
    )
    logger.info(
        "run %s finished: %d ticks, %d teleports", result.run_id, result.ticks_run, result.teleports
    )
    return result


def result_to_summary(result: RunResult) -> dict[str, object]:
    """JSON-friendly view of a :class:`RunResult`."""
    return {
        "run_id": result.run_id,
        "ticks_run": result.ticks_run,
        "teleports": result.teleports,
        "teleports_down": result.teleports_down,
        "teleports_up": result.teleports_up,
        "final_positions": {pid: list(pos) for pid, pos in result.final_positions.items()},
        "schema_version": SUMMARY_SCHEMA_VERSION,
    }
