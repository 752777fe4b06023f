"""Tests for the headless ``run`` command."""

import sys
import os
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazebot.__main__ import main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    # keep pytest's capture handlers on the root logger
    monkeypatch.setattr("mazebot.utils.logging.setup_logging", lambda level="INFO": None)


def _script(tmp_path, source: str) -> str:
    path = tmp_path / "bot.py"
    path.write_text(source, encoding="utf-8")
    return str(path)


class TestRunCommand:
    def test_wins_level_one(self, tmp_path, capsys):
        code = main(["run", "--level", "1", "--script", _script(tmp_path, "move_front()")])
        out = capsys.readouterr().out
        assert code == 0
        assert "WON" in out
        assert "Efficiency: 100%" in out

    def test_replay_file(self, tmp_path):
        replay = tmp_path / "replay.json"
        main(["run", "--script", _script(tmp_path, "move_front()"), "--replay", str(replay)])
        data = json.loads(replay.read_text(encoding="utf-8"))
        assert data["total_ticks"] == 10

    def test_max_ticks(self, tmp_path, capsys):
        code = main(["run", "--script", _script(tmp_path, "turn_left()"), "--max-ticks", "3"])
        assert code == 0
        assert "RUNNING after 3 ticks" in capsys.readouterr().out

    def test_unknown_level(self, tmp_path):
        assert main(["run", "--level", "9", "--script", _script(tmp_path, "")]) == 2

    def test_syntax_error(self, tmp_path):
        assert main(["run", "--script", _script(tmp_path, "x = = 1")]) == 2

    def test_runtime_fault(self, tmp_path):
        assert main(["run", "--script", _script(tmp_path, "1 / 0")]) == 1

    def test_extra_levels_file(self, tmp_path, capsys):
        levels = tmp_path / "levels.json"
        levels.write_text(json.dumps({
            "levels": [{
                "id": 9,
                "title": "Short hop",
                "template": [[1, 1, 1], [4, 0, 5], [1, 1, 1]],
                "agent_start": {"row": 1, "col": 0, "orientation": 1},
            }]
        }))
        code = main([
            "run", "--level", "9", "--levels-file", str(levels),
            "--script", _script(tmp_path, "move_front()"),
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Short hop" in out
        assert "Optimal: 2" in out

    def test_extra_levels_keep_builtins(self, tmp_path, capsys):
        levels = tmp_path / "levels.json"
        levels.write_text(json.dumps({
            "id": 9,
            "title": "Short hop",
            "template": [[1, 1, 1], [4, 0, 5], [1, 1, 1]],
            "agent_start": {"row": 1, "col": 0, "orientation": 1},
        }))
        code = main([
            "run", "--level", "1", "--levels-file", str(levels),
            "--script", _script(tmp_path, "move_front()"),
        ])
        assert code == 0
        assert "Level 1" in capsys.readouterr().out

    def test_oversized_level_rejected(self, tmp_path):
        levels = tmp_path / "levels.json"
        levels.write_text(json.dumps({
            "id": 9,
            "title": "Too big",
            "template": [[0] * 20 for _ in range(20)],
            "agent_start": {"row": 19, "col": 19, "orientation": 1},
        }))
        code = main([
            "run", "--level", "9", "--levels-file", str(levels),
            "--script", _script(tmp_path, "move_front()"),
        ])
        assert code == 2
