"""Tests for efficiency scoring."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazebot.core.scoring import Score, efficiency


class TestEfficiency:
    @pytest.mark.parametrize(
        "optimal, actual, expected",
        [
            (10, 10, 100),
            (10, 20, 50),
            (10, 5, 100),
            (2, 3, 67),
            (1, 8, 13),
            (3, 8, 38),
            (10, 0, 0),
            (0, 7, 0),
        ],
    )
    def test_values(self, optimal, actual, expected):
        assert efficiency(optimal, actual) == expected

    def test_score_property(self):
        score = Score(optimal=10, actual=12, goal_reachable=True)
        assert score.efficiency == 83

    def test_unreachable_goal_scores_zero(self):
        assert Score(optimal=0, actual=4, goal_reachable=False).efficiency == 0
