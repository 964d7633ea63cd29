"""
Tests for remaining-schedule projection and matchup building.
"""

import pytest

from playoff_odds.simulator import (
    InvalidTeamError,
    LeagueSimulationSettings,
    TeamSeasonState,
    build_matchups,
    project_league_schedules,
    project_remaining_schedule,
)
from playoff_odds.simulator.schedule import fill_remaining_schedules, games_remaining


class TestProjectRemainingSchedule:
    """Tests for project_remaining_schedule."""

    def test_cycles_through_other_teams(self):
        """Each remaining week takes the next opponent in league order."""
        assert project_remaining_schedule(1, [1, 2, 3, 4], 11, 14) == [2, 3, 4]

    def test_wraps_around_when_weeks_exceed_opponents(self):
        assert project_remaining_schedule(1, [1, 2, 3, 4], 9, 14) == [2, 3, 4, 2, 3]

    def test_length_matches_remaining_weeks(self):
        ids = list(range(1, 13))
        schedule = project_remaining_schedule(5, ids, 8, 14)
        assert len(schedule) == 6
        assert 5 not in schedule

    def test_season_over_returns_empty(self):
        assert project_remaining_schedule(1, [1, 2, 3], 14, 14) == []
        assert project_remaining_schedule(1, [1, 2, 3], 15, 14) == []

    def test_no_other_teams_returns_empty(self):
        assert project_remaining_schedule(1, [1], 3, 14) == []
        assert project_remaining_schedule(1, [], 3, 14) == []

    def test_projection_is_idempotent(self):
        """Same inputs always give the same schedule."""
        ids = ["a", "b", "c", "d", "e"]
        first = project_remaining_schedule("c", ids, 5, 13)
        second = project_remaining_schedule("c", ids, 5, 13)
        assert first == second

    def test_project_league_schedules(self):
        settings = LeagueSimulationSettings(playoff_spots=2, regular_season_weeks=14, current_week=12)
        schedules = project_league_schedules([1, 2, 3], settings)
        assert schedules == {1: [2, 3], 2: [1, 3], 3: [1, 2]}


class TestBuildMatchups:
    """Tests for build_matchups."""

    def test_mutual_schedule_produces_one_game(self):
        teams = [
            TeamSeasonState(team_id="A", remaining_schedule=["B"]),
            TeamSeasonState(team_id="B", remaining_schedule=["A"]),
        ]
        games = build_matchups(teams, 1)
        assert len(games) == 1
        assert (games[0].home_team_id, games[0].away_team_id) == ("A", "B")

    def test_conflicting_schedule_skips_used_teams(self):
        """Round-robin projections can double-book a team; only the first pairing plays."""
        teams = [
            TeamSeasonState(team_id=t, remaining_schedule=project_remaining_schedule(t, ["A", "B", "C", "D"], 13, 14))
            for t in ["A", "B", "C", "D"]
        ]
        games = build_matchups(teams, 1)
        assert [(g.home_team_id, g.away_team_id) for g in games] == [("A", "B")]

    def test_full_weekly_pairings(self, mock_teams):
        games = build_matchups(mock_teams, 3)
        assert [(g.week, g.home_team_id, g.away_team_id) for g in games] == [
            (0, 1, 2), (0, 3, 4),
            (1, 1, 3), (1, 2, 4),
            (2, 1, 4), (2, 2, 3),
        ]
        assert games_remaining(games) == {1: 3, 2: 3, 3: 3, 4: 3}

    def test_no_weeks_no_games(self, final_week_teams):
        assert build_matchups(final_week_teams, 0) == []


class TestFillRemainingSchedules:
    """Tests for fill_remaining_schedules."""

    def test_projects_missing_schedules(self):
        settings = LeagueSimulationSettings(playoff_spots=1, regular_season_weeks=10, current_week=8)
        teams = [TeamSeasonState(team_id=1), TeamSeasonState(team_id=2, remaining_schedule=[1])]
        filled = fill_remaining_schedules(teams, settings)

        assert filled[0].remaining_schedule == [2, 2]
        assert filled[1].remaining_schedule == [1]
        # Caller's objects are left alone
        assert teams[0].remaining_schedule is None

    def test_unknown_opponent_raises(self):
        settings = LeagueSimulationSettings(playoff_spots=1, regular_season_weeks=10, current_week=8)
        teams = [TeamSeasonState(team_id=1, remaining_schedule=[99]), TeamSeasonState(team_id=2)]
        with pytest.raises(InvalidTeamError, match="unknown teams"):
            fill_remaining_schedules(teams, settings)

    def test_duplicate_ids_raise(self):
        settings = LeagueSimulationSettings(playoff_spots=1, regular_season_weeks=10, current_week=8)
        teams = [TeamSeasonState(team_id=1), TeamSeasonState(team_id=1)]
        with pytest.raises(InvalidTeamError, match="unique"):
            fill_remaining_schedules(teams, settings)

    def test_schedule_longer_than_season_raises(self):
        settings = LeagueSimulationSettings(playoff_spots=1, regular_season_weeks=10, current_week=9)
        teams = [
            TeamSeasonState(team_id=1, remaining_schedule=[2, 2]),
            TeamSeasonState(team_id=2, remaining_schedule=[1]),
        ]
        with pytest.raises(InvalidTeamError, match="weeks remain"):
            fill_remaining_schedules(teams, settings)

    def test_self_scheduled_raises(self):
        with pytest.raises(InvalidTeamError, match="itself"):
            TeamSeasonState(team_id=1, remaining_schedule=[1])
