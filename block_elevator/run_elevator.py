"""CLI entrypoint for running an elevator scenario.

Layering: built-in defaults < the scenario's ``config`` section < CLI flags.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from block_elevator.config.types import ElevatorConfig, RunConfig
from block_elevator.io.scenario import load_scenario
from block_elevator.simulation.engine import result_to_summary, run_scenario

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> None:
    """Run one scenario and print its summary as JSON."""
    parser = argparse.ArgumentParser(description="Simulate vertical block elevators")
    parser.add_argument("--scenario", type=Path, required=True, help="Scenario JSON file")
    parser.add_argument("--ticks", type=int, default=20)
    parser.add_argument("--tick-interval", type=int, default=1)
    parser.add_argument("--out-dir", type=Path, default=Path("data"))
    parser.add_argument("--run-id", type=str, default="run")
    parser.add_argument("--max-scan-steps", type=int, default=None)
    parser.add_argument("--lower-bound", type=int, default=None)
    parser.add_argument(
        "--prune-departed-players", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        scenario = load_scenario(args.scenario)
        overrides = dict(scenario.config_overrides or {})
        if args.max_scan_steps is not None:
            overrides["max_scan_steps"] = args.max_scan_steps
        if args.lower_bound is not None:
            overrides["lower_bound"] = args.lower_bound
        if args.prune_departed_players is not None:
            overrides["prune_departed_players"] = args.prune_departed_players
        config = ElevatorConfig(**overrides)
        run_config = RunConfig(
            ticks=args.ticks, tick_interval=args.tick_interval, run_id=args.run_id
        )
        result = run_scenario(scenario, out_dir=args.out_dir, run_config=run_config, config=config)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    print(json.dumps(result_to_summary(result), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
