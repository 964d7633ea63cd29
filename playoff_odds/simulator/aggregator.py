"""
Reduce simulation tallies to per-team probabilities.
"""

from typing import Dict, List, Sequence

from .magic_numbers import calculate_magic_numbers
from .models import (
    Game,
    LeagueSimulationSettings,
    ProbabilityResult,
    TeamId,
    TeamSeasonState,
    TrialTally,
)
from .scenarios import generate_clinch_elimination_scenarios
from .schedule import games_remaining


def round_probability(value: float) -> float:
    """Display value: one decimal place."""
    return round(value, 1)


def strength_of_schedule(
    team_id: TeamId,
    remaining: Sequence[Game],
    teams_by_id: Dict[TeamId, TeamSeasonState]
) -> float:
    """
    Mean current win percentage of the opponents a team actually meets in the
    remaining games (0-1, higher is harder). 0.5 when there is nothing to
    measure.
    """
    pcts = []
    for game in remaining:
        if game.home_team_id == team_id:
            opponent = teams_by_id[game.away_team_id]
        elif game.away_team_id == team_id:
            opponent = teams_by_id[game.home_team_id]
        else:
            continue
        if opponent.games_played > 0:
            pcts.append(opponent.win_pct)

    if not pcts:
        return 0.5
    return sum(pcts) / len(pcts)


def aggregate_results(
    teams: Sequence[TeamSeasonState],
    remaining: Sequence[Game],
    tally: TrialTally,
    settings: LeagueSimulationSettings
) -> List[ProbabilityResult]:
    """
    Build one ProbabilityResult per team.

    Args:
        teams: Current standings, in the order results should be returned
        remaining: Remaining league games
        tally: Counters from every completed trial
        settings: League settings

    Returns:
        ProbabilityResult list, empty if no trials were run
    """
    if tally.trials == 0 or not teams:
        return []

    n = tally.trials
    teams_by_id = {t.team_id: t for t in teams}
    left = games_remaining(remaining)
    magic_numbers = calculate_magic_numbers(teams, remaining, settings.playoff_spots)
    scenarios = generate_clinch_elimination_scenarios(magic_numbers, left)

    results = []
    for team in teams:
        stats = tally.teams[team.team_id]
        magic = magic_numbers[team.team_id]
        clinch, elimination = scenarios[team.team_id]

        results.append(ProbabilityResult(
            team_id=team.team_id,
            current_record=team.record_str,
            playoff_probability=stats.playoff_appearances / n * 100,
            championship_probability=stats.first_place / n * 100,
            projected_wins=stats.total_wins / n,
            projected_losses=stats.total_losses / n,
            strength_of_schedule=strength_of_schedule(team.team_id, remaining, teams_by_id),
            magic_playoffs=magic.magic_playoffs,
            magic_first_seed=magic.magic_first_seed,
            clinch_scenarios=tuple(clinch),
            elimination_scenarios=tuple(elimination),
        ))

    return results
