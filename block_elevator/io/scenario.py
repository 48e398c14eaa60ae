"""Scenario documents: initial blocks, players and scripted inputs.

A scenario is a JSON object::

    {
      "config": {"lower_bound": -65, ...},
      "blocks": [{"dimension": "minecraft:overworld", "x": 0, "y": 9, "z": 0,
                  "type": "minecraft:diamond_block"}],
      "players": [{"id": "p1", "dimension": "minecraft:overworld",
                   "location": [0.5, 10, 0.5],
                   "inputs": [{"tick": 0, "sneaking": true}]}]
    }

Input changes apply at the start of their host tick and persist until a
later change overrides them.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from block_elevator.config.types import ElevatorConfig
from block_elevator.domain.geometry import Position
from block_elevator.domain.voxel_world import SimPlayer, VoxelWorld

_TUPLE_FIELDS = {"dimensions", "allowed_blocks"}
_BOOL_FIELDS = {"prune_departed_players"}
_STR_FIELDS = {"primary_dimension"}


@dataclass(frozen=True)
class BlockSpec:
    dimension: str
    position: Position
    type_id: str


@dataclass(frozen=True)
class InputChange:
    tick: int
    sneaking: bool | None = None
    jumping: bool | None = None


@dataclass(frozen=True)
class PlayerSpec:
    player_id: str
    dimension: str
    location: Position
    inputs: tuple[InputChange, ...] = ()


@dataclass(frozen=True)
class Scenario:
    """Parsed scenario document."""

    blocks: tuple[BlockSpec, ...] = ()
    players: tuple[PlayerSpec, ...] = ()
    config_overrides: dict[str, Any] | None = None

    def build_world(self, config: ElevatorConfig) -> VoxelWorld:
        """Materialise a fresh :class:`VoxelWorld` with initial inputs cleared."""
        world = VoxelWorld(dimensions=config.dimensions)
        for block in self.blocks:
            world.set_block(block.dimension, block.position, block.type_id)
        for spec in self.players:
            world.add_player(
                SimPlayer(id=spec.player_id, dimension=spec.dimension, location=spec.location)
            )
        return world

    def inputs_at(self, tick: int) -> list[tuple[str, InputChange]]:
        """Return input changes scheduled for host *tick*, in document order."""
        return [
            (spec.player_id, change)
            for spec in self.players
            for change in spec.inputs
            if change.tick == tick
        ]


def _require(raw: dict[str, Any], key: str, where: str) -> Any:
    if key not in raw:
        raise ValueError(f"{where} missing required key: {key}")
    return raw[key]


def _as_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer value")
    return value


def _as_bool(value: Any, label: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{label} must be a boolean value")
    return value


def _as_number(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number")
    return value


def _parse_block(raw: Any, index: int) -> BlockSpec:
    where = f"blocks[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object")
    type_id = _require(raw, "type", where)
    if not isinstance(type_id, str) or not type_id:
        raise ValueError(f"{where}.type must be a non-empty string")
    position = Position(
        _as_int(_require(raw, "x", where), f"{where}.x"),
        _as_int(_require(raw, "y", where), f"{where}.y"),
        _as_int(_require(raw, "z", where), f"{where}.z"),
    )
    return BlockSpec(dimension=str(_require(raw, "dimension", where)), position=position, type_id=type_id)


def _parse_input(raw: Any, where: str) -> InputChange:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object")
    tick = _as_int(_require(raw, "tick", where), f"{where}.tick")
    if tick < 0:
        raise ValueError(f"{where}.tick must be >= 0")
    sneaking = _as_bool(raw["sneaking"], f"{where}.sneaking") if "sneaking" in raw else None
    jumping = _as_bool(raw["jumping"], f"{where}.jumping") if "jumping" in raw else None
    return InputChange(tick=tick, sneaking=sneaking, jumping=jumping)


def _parse_player(raw: Any, index: int) -> PlayerSpec:
    where = f"players[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object")
    player_id = _require(raw, "id", where)
    if not isinstance(player_id, str) or not player_id:
        raise ValueError(f"{where}.id must be a non-empty string")
    location = _require(raw, "location", where)
    if not isinstance(location, list) or len(location) != 3:
        raise ValueError(f"{where}.location must be [x, y, z]")
    x, y, z = (_as_number(v, f"{where}.location") for v in location)
    inputs = raw.get("inputs", [])
    if not isinstance(inputs, list):
        raise ValueError(f"{where}.inputs must be a list")
    return PlayerSpec(
        player_id=player_id,
        dimension=str(_require(raw, "dimension", where)),
        location=Position(x, y, z),
        inputs=tuple(_parse_input(item, f"{where}.inputs[{i}]") for i, item in enumerate(inputs)),
    )


def _parse_config_overrides(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError("config must be an object")
    known = {f.name for f in fields(ElevatorConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        label = f"config.{key}"
        if key in _TUPLE_FIELDS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{label} must be a list of strings")
            overrides[key] = tuple(value)
        elif key in _BOOL_FIELDS:
            overrides[key] = _as_bool(value, label)
        elif key in _STR_FIELDS:
            if not isinstance(value, str):
                raise ValueError(f"{label} must be a string")
            overrides[key] = value
        else:
            overrides[key] = _as_int(value, label)
    return overrides


def parse_scenario(payload: Any) -> Scenario:
    """Validate a decoded JSON document and return a :class:`Scenario`."""
    if not isinstance(payload, dict):
        raise ValueError("scenario must be a JSON object")
    blocks = payload.get("blocks", [])
    players = payload.get("players", [])
    if not isinstance(blocks, list):
        raise ValueError("blocks must be a list")
    if not isinstance(players, list):
        raise ValueError("players must be a list")
    parsed_players = tuple(_parse_player(raw, i) for i, raw in enumerate(players))
    ids = [p.player_id for p in parsed_players]
    if len(set(ids)) != len(ids):
        raise ValueError("player ids must be distinct")
    overrides = _parse_config_overrides(payload["config"]) if "config" in payload else None
    return Scenario(
        blocks=tuple(_parse_block(raw, i) for i, raw in enumerate(blocks)),
        players=parsed_players,
        config_overrides=overrides,
    )


def load_scenario(path: Path) -> Scenario:
    """Read and parse a scenario JSON file."""
    try:
        payload = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"scenario is not valid JSON: {exc}") from exc
    return parse_scenario(payload)
