"""
Standings order used to seed the playoffs.

Tiebreaker order:
1. Win percentage (ties count as half a win)
2. Total points for
3. Input order (stable sort), so identical inputs always rank identically
"""

from typing import Iterable, List

from .models import TeamId, TeamSeasonState


def standings_key(team: TeamSeasonState):
    """Sort key placing the best team first."""
    return (-team.win_pct, -team.points_for)


def rank_teams(teams: Iterable[TeamSeasonState]) -> List[TeamId]:
    """
    Rank teams by the league's standings order.

    Args:
        teams: Teams in league input order

    Returns:
        Team IDs from first place to last place
    """
    return [t.team_id for t in sorted(teams, key=standings_key)]
