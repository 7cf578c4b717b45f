"""Tests for display projections and achievements."""
import pytest

from lamumu.hud import achievements, distance, project
from lamumu.powerup import activate


@pytest.mark.parametrize("score,expected", [(0, 0), (9, 0), (10, 1), (1234, 123)])
def test_distance_floor(score, expected):
    assert distance(score) == expected


def test_project(state):
    state.session.score = 57
    state.session.currency = 30
    view = project(state)
    assert view.distance == 5
    assert view.currency == 30
    assert view.powerup_fraction == 0.0
    assert not view.powerup_active


def test_project_powerup_fraction(state):
    activate(state.powerup)
    state.powerup.remaining = 75
    view = project(state)
    assert view.powerup_active
    assert view.powerup_fraction == 0.25


def test_no_achievements_for_short_run(state):
    state.session.score = 100
    assert achievements(state) == []


def test_all_achievements(state):
    state.session.score = 20_000
    state.session.currency = 200
    activate(state.powerup)
    assert achievements(state) == [
        "Space Explorer",
        "Stellar Navigator",
        "Cosmic Champion",
        "Galaxy Master",
        "Token Collector",
        "Treasure Hunter",
        "Wealth Master",
        "Power User",
        "Perfect Balance",
    ]


def test_thresholds_are_strict(state):
    state.session.score = 510  # distance 51
    state.session.currency = 30
    assert achievements(state) == ["Space Explorer"]
