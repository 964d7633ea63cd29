"""
Shared fixtures for simulator tests.
"""

import pytest

from playoff_odds.simulator import LeagueSimulationSettings, TeamSeasonState


class ConstantSource:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        return self.value


class FailingSource:
    """Random source that raises after a number of good draws."""

    def __init__(self, good_draws: int = 0):
        self.good_draws = good_draws
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        if self.calls > self.good_draws:
            raise RuntimeError("entropy pool exhausted")
        return 0.5


@pytest.fixture
def final_week_teams():
    """Four teams with no games left: A 3-0, B 2-1, C 1-2, D 0-3."""
    return [
        TeamSeasonState(team_id="A", wins=3, losses=0, points_for=360.0, points_against=300.0, remaining_schedule=[]),
        TeamSeasonState(team_id="B", wins=2, losses=1, points_for=330.0, points_against=310.0, remaining_schedule=[]),
        TeamSeasonState(team_id="C", wins=1, losses=2, points_for=310.0, points_against=330.0, remaining_schedule=[]),
        TeamSeasonState(team_id="D", wins=0, losses=3, points_for=290.0, points_against=350.0, remaining_schedule=[]),
    ]


@pytest.fixture
def final_week_settings():
    return LeagueSimulationSettings(playoff_spots=2, regular_season_weeks=4, current_week=4)


@pytest.fixture
def mock_teams():
    """Four-team league with three weeks left."""
    return [
        TeamSeasonState(team_id=1, wins=8, losses=2, points_for=1200.0, points_against=1000.0, remaining_schedule=[2, 3, 4]),
        TeamSeasonState(team_id=2, wins=6, losses=4, points_for=1100.0, points_against=1050.0, remaining_schedule=[1, 4, 3]),
        TeamSeasonState(team_id=3, wins=4, losses=6, points_for=1000.0, points_against=1100.0, remaining_schedule=[4, 1, 2]),
        TeamSeasonState(team_id=4, wins=2, losses=8, points_for=900.0, points_against=1200.0, remaining_schedule=[3, 2, 1]),
    ]


@pytest.fixture
def mock_settings():
    return LeagueSimulationSettings(playoff_spots=2, regular_season_weeks=14, current_week=11)


@pytest.fixture
def two_weeks_left_teams():
    """
    A 9-3, B 8-4, C 8-4, D 3-9 with games A-B, C-D, A-C, B-D left.

    D is mathematically eliminated from a two-team playoff.
    """
    return [
        TeamSeasonState(team_id="A", wins=9, losses=3, points_for=1400.0, remaining_schedule=["B", "C"]),
        TeamSeasonState(team_id="B", wins=8, losses=4, points_for=1350.0, remaining_schedule=["A", "D"]),
        TeamSeasonState(team_id="C", wins=8, losses=4, points_for=1300.0, remaining_schedule=["D", "A"]),
        TeamSeasonState(team_id="D", wins=3, losses=9, points_for=1100.0, remaining_schedule=["C", "B"]),
    ]


@pytest.fixture
def two_weeks_left_settings():
    return LeagueSimulationSettings(playoff_spots=2, regular_season_weeks=14, current_week=12)


@pytest.fixture
def constant_source():
    """Factory for constant random sources."""
    return ConstantSource


@pytest.fixture
def failing_source():
    """Factory for random sources that start raising after N draws."""
    return FailingSource
