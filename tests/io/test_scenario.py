"""Tests for block_elevator.io.scenario."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from block_elevator.config.constants import NETHER, OVERWORLD
from block_elevator.config.types import ElevatorConfig
from block_elevator.domain.geometry import Position
from block_elevator.io.scenario import InputChange, load_scenario, parse_scenario

DIAMOND = "minecraft:diamond_block"


def _payload() -> dict[str, Any]:
    return {
        "config": {"lower_bound": -10, "dimensions": [OVERWORLD, NETHER]},
        "blocks": [
            {"dimension": OVERWORLD, "x": 0, "y": 9, "z": 0, "type": DIAMOND},
            {"dimension": OVERWORLD, "x": 0, "y": 5, "z": 0, "type": DIAMOND},
        ],
        "players": [
            {
                "id": "p1",
                "dimension": OVERWORLD,
                "location": [0.5, 10, 0.5],
                "inputs": [{"tick": 0, "sneaking": True}, {"tick": 3, "sneaking": False}],
            }
        ],
    }


class TestParseScenario:
    def test_parses_blocks_players_and_inputs(self) -> None:
        scenario = parse_scenario(_payload())
        assert len(scenario.blocks) == 2
        assert scenario.blocks[0].position == Position(0, 9, 0)
        player = scenario.players[0]
        assert player.player_id == "p1"
        assert player.location == Position(0.5, 10, 0.5)
        assert player.inputs[1] == InputChange(tick=3, sneaking=False, jumping=None)

    def test_config_overrides_become_tuples(self) -> None:
        scenario = parse_scenario(_payload())
        assert scenario.config_overrides == {
            "lower_bound": -10,
            "dimensions": (OVERWORLD, NETHER),
        }

    def test_empty_document_is_valid(self) -> None:
        scenario = parse_scenario({})
        assert scenario.blocks == ()
        assert scenario.players == ()
        assert scenario.config_overrides is None

    def test_inputs_at_tick(self) -> None:
        scenario = parse_scenario(_payload())
        assert scenario.inputs_at(3) == [("p1", InputChange(tick=3, sneaking=False))]
        assert scenario.inputs_at(1) == []

    def test_build_world(self) -> None:
        scenario = parse_scenario(_payload())
        world = scenario.build_world(ElevatorConfig(dimensions=(OVERWORLD, NETHER)))
        assert world.get_block(OVERWORLD, Position(0, 5, 0)) is not None
        assert world.player("p1").is_sneaking is False

    def test_build_world_rejects_unconfigured_dimension(self) -> None:
        payload = _payload()
        payload["players"][0]["dimension"] = "minecraft:moon"
        scenario = parse_scenario(payload)
        with pytest.raises(ValueError, match="unknown dimension"):
            scenario.build_world(ElevatorConfig())

    @pytest.mark.parametrize(
        ("mutate", "message"),
        [
            (lambda p: p.__setitem__("blocks", {}), "blocks must be a list"),
            (lambda p: p["blocks"][0].pop("y"), r"blocks\[0\] missing required key: y"),
            (lambda p: p["blocks"][0].__setitem__("x", 1.5), "must be an integer"),
            (lambda p: p["blocks"][0].__setitem__("type", ""), "non-empty string"),
            (lambda p: p["players"][0].__setitem__("location", [0, 1]), r"\[x, y, z\]"),
            (
                lambda p: p["players"][0]["inputs"][0].__setitem__("sneaking", 1),
                "must be a boolean",
            ),
            (lambda p: p["players"][0]["inputs"][0].__setitem__("tick", -1), ">= 0"),
            (lambda p: p["players"].append(dict(p["players"][0])), "distinct"),
            (lambda p: p["config"].__setitem__("bogus", 1), "unknown config keys: bogus"),
            (lambda p: p["config"].__setitem__("max_scan_steps", "5"), "must be an integer"),
            (
                lambda p: p["config"].__setitem__("prune_departed_players", "yes"),
                "must be a boolean",
            ),
            (lambda p: p["config"].__setitem__("allowed_blocks", [1]), "list of strings"),
        ],
    )
    def test_rejects_malformed_documents(self, mutate: Any, message: str) -> None:
        payload = _payload()
        mutate(payload)
        with pytest.raises(ValueError, match=message):
            parse_scenario(payload)

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_location(self, bad: float) -> None:
        payload = _payload()
        payload["players"][0]["location"] = [bad, 10, 0]
        with pytest.raises(ValueError, match="must be a finite number"):
            parse_scenario(payload)

    def test_rejects_non_finite_location_from_json_text(self) -> None:
        text = json.dumps(_payload()).replace("[0.5, 10, 0.5]", "[Infinity, 10, NaN]")
        with pytest.raises(ValueError, match="must be a finite number"):
            parse_scenario(json.loads(text))

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            parse_scenario([])


class TestLoadScenario:
    def test_round_trips_file(self, tmp_path: Path) -> None:
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps(_payload()))
        assert load_scenario(path) == parse_scenario(_payload())

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "scenario.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_scenario(path)
