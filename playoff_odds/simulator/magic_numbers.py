"""
Magic number calculations for clinching and elimination.

Magic number = wins needed from the remaining games to guarantee a spot no
matter how every other game goes. None if already clinched or if no number of
wins is enough.

Everything is measured in final win percentage (ties count as half a win), the
same key the standings use. A rival only counts as safely behind when its best
possible percentage is strictly lower, since equal percentages fall through to
points for, which cannot be known ahead of time.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from .models import Game, MagicNumbers, TeamId, TeamSeasonState


def _final_pct(effective_wins: float, games_played: int, games_left: int) -> float:
    total = games_played + games_left
    if total == 0:
        return 0.0
    return effective_wins / total


def _effective_wins(team: TeamSeasonState) -> float:
    return team.wins + 0.5 * team.ties


def calculate_magic_numbers(
    teams: Sequence[TeamSeasonState],
    remaining: Sequence[Game],
    playoff_spots: int
) -> Dict[TeamId, MagicNumbers]:
    """
    Calculate magic numbers for each team.

    Accounts for direct matchups: when a team wins out, rivals lose the games
    they still have against it.

    Args:
        teams: Current team standings
        remaining: Remaining league games
        playoff_spots: Number of playoff spots

    Returns:
        Dict mapping team_id -> MagicNumbers
    """
    games_remaining = defaultdict(int)
    games_between = defaultdict(lambda: defaultdict(int))

    for game in remaining:
        games_remaining[game.home_team_id] += 1
        games_remaining[game.away_team_id] += 1
        games_between[game.home_team_id][game.away_team_id] += 1
        games_between[game.away_team_id][game.home_team_id] += 1

    def max_pct(team: TeamSeasonState, minus_games_vs: Optional[TeamId] = None) -> float:
        left = games_remaining[team.team_id]
        wins_possible = left
        if minus_games_vs is not None:
            wins_possible -= games_between[team.team_id][minus_games_vs]
        return _final_pct(_effective_wins(team) + wins_possible, team.games_played, left)

    def min_pct(team: TeamSeasonState) -> float:
        return _final_pct(_effective_wins(team), team.games_played, games_remaining[team.team_id])

    def wins_to_clinch(team: TeamSeasonState, others: List[TeamSeasonState], spots: int) -> Optional[int]:
        left = games_remaining[team.team_id]

        # Conservative: rivals win every game they have left
        rival_max = [max_pct(other) for other in others]
        for needed in range(left + 1):
            team_pct = _final_pct(_effective_wins(team) + needed, team.games_played, left)
            threats = sum(1 for pct in rival_max if pct >= team_pct)
            if threats < spots:
                return needed

        # Winning out also hands rivals a loss in every game against this team
        team_pct = _final_pct(_effective_wins(team) + left, team.games_played, left)
        threats = sum(1 for other in others if max_pct(other, minus_games_vs=team.team_id) >= team_pct)
        if threats < spots:
            return left

        return None

    magic_numbers = {}

    for team in teams:
        others = [t for t in teams if t.team_id != team.team_id]

        # === Playoffs (top N) ===
        magic_playoff = wins_to_clinch(team, others, playoff_spots)
        clinched_playoffs = magic_playoff == 0

        # === #1 seed ===
        magic_first = wins_to_clinch(team, others, 1)
        clinched_first = magic_first == 0

        # === Elimination ===
        best_pct = max_pct(team)
        locked_ahead = sum(1 for other in others if min_pct(other) > best_pct)
        eliminated = locked_ahead >= playoff_spots

        magic_numbers[team.team_id] = MagicNumbers(
            team_id=team.team_id,
            magic_playoffs=None if clinched_playoffs else magic_playoff,
            magic_first_seed=None if clinched_first else magic_first,
            clinched_playoffs=clinched_playoffs,
            clinched_first_seed=clinched_first,
            eliminated=eliminated,
        )

    return magic_numbers
