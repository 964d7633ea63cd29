"""
Remaining-schedule projection.

Leagues rarely hand us their real future matchups, so we project one: every
team cycles through the rest of the league in order. The projection ignores
byes and matchups already played; it is deterministic so the only randomness
in a simulation comes from game outcomes.
"""

from typing import Dict, List, Sequence

from .errors import InvalidTeamError
from .models import Game, LeagueSimulationSettings, TeamId, TeamSeasonState


def project_remaining_schedule(
    team_id: TeamId,
    league_team_ids: Sequence[TeamId],
    current_week: int,
    regular_season_weeks: int
) -> List[TeamId]:
    """
    Project a team's opponents for the rest of the regular season.

    Args:
        team_id: The team to build a schedule for
        league_team_ids: Every team in the league (may include team_id)
        current_week: Current week number
        regular_season_weeks: Number of regular season weeks

    Returns:
        Opponent IDs, one per remaining week
    """
    others = [tid for tid in league_team_ids if tid != team_id]
    remaining_weeks = regular_season_weeks - current_week

    if not others or remaining_weeks <= 0:
        return []

    return [others[week % len(others)] for week in range(remaining_weeks)]


def project_league_schedules(
    team_ids: Sequence[TeamId],
    settings: LeagueSimulationSettings
) -> Dict[TeamId, List[TeamId]]:
    """Project remaining schedules for every team in a league."""
    return {
        tid: project_remaining_schedule(
            tid, team_ids, settings.current_week, settings.regular_season_weeks
        )
        for tid in team_ids
    }


def fill_remaining_schedules(
    teams: Sequence[TeamSeasonState],
    settings: LeagueSimulationSettings
) -> List[TeamSeasonState]:
    """
    Return copies of the teams with any missing schedule projected and every
    schedule checked against the league.

    Raises:
        InvalidTeamError: If a schedule names an unknown team or runs past the
            end of the regular season
    """
    team_ids = [t.team_id for t in teams]
    known = set(team_ids)
    if len(known) != len(team_ids):
        raise InvalidTeamError("Team IDs must be unique within a league")

    filled = []
    for team in teams:
        team = team.copy()
        if team.remaining_schedule is None:
            team.remaining_schedule = project_remaining_schedule(
                team.team_id, team_ids, settings.current_week, settings.regular_season_weeks
            )
        else:
            team.remaining_schedule = list(team.remaining_schedule)

        unknown = [opp for opp in team.remaining_schedule if opp not in known]
        if unknown:
            raise InvalidTeamError(
                f"Team {team.team_id} is scheduled against unknown teams: {unknown}"
            )
        if team.team_id in team.remaining_schedule:
            raise InvalidTeamError(f"Team {team.team_id} cannot be scheduled against itself")
        if len(team.remaining_schedule) > settings.remaining_weeks:
            raise InvalidTeamError(
                f"Team {team.team_id} has {len(team.remaining_schedule)} games scheduled "
                f"but only {settings.remaining_weeks} weeks remain"
            )
        filled.append(team)

    return filled


def build_matchups(teams: Sequence[TeamSeasonState], remaining_weeks: int) -> List[Game]:
    """
    Turn per-team schedules into league games.

    Each week, teams are visited in order and paired with their scheduled
    opponent unless either side already has a game that week. A pairing that
    appears in both teams' schedules therefore produces one game, not two.
    """
    by_id = {t.team_id: t for t in teams}
    games = []

    for week in range(remaining_weeks):
        used = set()
        for team in teams:
            if team.team_id in used:
                continue
            schedule = team.remaining_schedule or []
            if week >= len(schedule):
                continue

            opponent_id = schedule[week]
            if opponent_id not in by_id or opponent_id in used:
                continue

            games.append(Game(week=week, home_team_id=team.team_id, away_team_id=opponent_id))
            used.add(team.team_id)
            used.add(opponent_id)

    return games


def games_remaining(games: Sequence[Game]) -> Dict[TeamId, int]:
    """Count remaining games per team."""
    counts: Dict[TeamId, int] = {}
    for game in games:
        counts[game.home_team_id] = counts.get(game.home_team_id, 0) + 1
        counts[game.away_team_id] = counts.get(game.away_team_id, 0) + 1
    return counts
