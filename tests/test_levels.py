"""Tests for level validation, the built-in catalog and JSON loading."""

import sys
import os
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import ValidationError

from mazebot.config import SimulationConfig
from mazebot.core.enums import CellKind, Orientation
from mazebot.core.levels import LEVELS, dump_level, load_levels, parse_level
from mazebot.core.models import Position
from mazebot.core.world_state import WorldState


def _level_data(**overrides) -> dict:
    data = {
        "id": 7,
        "title": "Tiny",
        "template": [[1, 1, 1], [1, 4, 5], [1, 1, 1]],
        "agent_start": {"row": 1, "col": 1, "orientation": 1},
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class TestCatalog:
    def test_five_levels(self):
        assert sorted(LEVELS) == [1, 2, 3, 4, 5]

    def test_all_fifteen_square(self):
        for level in LEVELS.values():
            assert level.size == 15
            assert all(len(row) == 15 for row in level.template)

    def test_every_level_has_a_goal(self):
        for level in LEVELS.values():
            assert any(CellKind.GOAL in row for row in level.template), level.title

    def test_only_last_level_has_monster(self):
        assert LEVELS[5].monster_start_pos == Position(7, 7)
        assert LEVELS[5].static_monster
        assert all(LEVELS[i].monster_start_pos is None for i in range(1, 5))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_valid(self):
        level = parse_level(_level_data())
        assert level.id == 7
        assert level.agent_start_pos == Position(1, 1)
        assert level.agent_start.orientation == Orientation.EAST

    def test_non_square(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(template=[[1, 1, 1], [1, 4, 5]]))

    def test_unknown_cell(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(template=[[1, 1, 1], [1, 4, 9], [1, 1, 1]]))

    def test_start_in_wall(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(agent_start={"row": 0, "col": 0, "orientation": 1}))

    def test_start_out_of_bounds(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(agent_start={"row": 3, "col": 1, "orientation": 1}))

    def test_bad_orientation(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(agent_start={"row": 1, "col": 1, "orientation": 4}))

    def test_monster_start_in_wall(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(monster_start=[0, 1]))

    def test_monster_start_out_of_bounds(self):
        with pytest.raises(ValidationError):
            parse_level(_level_data(monster_start=[1, 3]))

    def test_negative_monster_start_means_none(self):
        level = parse_level(_level_data(monster_start=[-1, -1]))
        assert level.monster_start_pos is None


# ---------------------------------------------------------------------------
# JSON files
# ---------------------------------------------------------------------------

class TestLoadLevels:
    def test_level_list(self, tmp_path):
        path = tmp_path / "levels.json"
        path.write_text(json.dumps({"levels": [_level_data(), _level_data(id=8, title="Other")]}))
        levels = load_levels(path)
        assert sorted(levels) == [7, 8]
        assert levels[8].title == "Other"

    def test_single_level(self, tmp_path):
        path = tmp_path / "one.json"
        path.write_text(json.dumps(_level_data(monster_start=[1, 2])))
        levels = load_levels(path)
        assert levels[7].monster_start_pos == Position(1, 2)

    def test_dumped_builtin_reloads(self, tmp_path):
        path = tmp_path / "l4.json"
        path.write_text(json.dumps(dump_level(LEVELS[4])))
        assert load_levels(path)[4] == LEVELS[4]

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"levels": [_level_data(template=[])]}))
        with pytest.raises(ValidationError):
            load_levels(path)


# ---------------------------------------------------------------------------
# Fresh worlds
# ---------------------------------------------------------------------------

class TestFreshWorld:
    def test_template_not_shared(self):
        config = SimulationConfig()
        first = WorldState.from_level(LEVELS[4], config)
        assert first.grid.consume_gas(1, 12)
        second = WorldState.from_level(LEVELS[4], config)
        assert second.grid.kind_at(1, 12) == CellKind.GAS

    def test_start_marked_visited(self):
        world = WorldState.from_level(LEVELS[1], SimulationConfig())
        assert world.visited == {(7, 2)}
        assert len(world.explored) == 9
        assert world.agent.orientation == Orientation.EAST
        assert world.agent.fuel == 100

    def test_small_template_is_padded(self):
        world = WorldState.from_level(parse_level(_level_data()), SimulationConfig())
        assert world.grid.size == 15
        assert world.grid.kind_at(1, 2) == CellKind.GOAL
        assert world.grid.kind_at(1, 3) == CellKind.WALL

    def test_template_larger_than_grid_rejected(self):
        big = parse_level(_level_data(
            template=[[0] * 20 for _ in range(20)],
            agent_start={"row": 19, "col": 19, "orientation": 1},
        ))
        with pytest.raises(ValueError, match="larger than"):
            WorldState.from_level(big, SimulationConfig())

    def test_template_matching_grid_size_accepted(self):
        level = parse_level(_level_data(
            template=[[0] * 5 for _ in range(5)],
            agent_start={"row": 4, "col": 4, "orientation": 1},
            monster_start=[2, 2],
        ))
        world = WorldState.from_level(level, SimulationConfig(grid_size=5))
        assert world.agent.pos == Position(4, 4)
        assert world.monster.pos == Position(2, 2)
