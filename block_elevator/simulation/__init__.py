"""Simulation layer: tick orchestration, scenario engine and Parquet persistence."""

from block_elevator.simulation.engine import resolve_config, result_to_summary, run_scenario
from block_elevator.simulation.orchestrator import TickOrchestrator
from block_elevator.simulation.persistence import flush_teleport_columns

__all__ = [
    "TickOrchestrator",
    "flush_teleport_columns",
    "resolve_config",
    "result_to_summary",
    "run_scenario",
]
