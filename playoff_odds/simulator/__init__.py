"""
Fantasy Football Playoff Simulator

Monte Carlo simulation to calculate playoff probabilities.
"""

from .models import (
    TeamSeasonState,
    LeagueSimulationSettings,
    Game,
    TrialOutcome,
    TeamTally,
    TrialTally,
    MagicNumbers,
    ProbabilityResult,
    SimulationSummary,
)
from .errors import SimulationError, InvalidSettingsError, InvalidTeamError, RandomSourceError
from .random_source import RandomSource, SeededRandom
from .schedule import project_remaining_schedule, project_league_schedules, build_matchups
from .standings import rank_teams
from .engine import (
    SIMULATION_COUNT,
    PlayoffSimulator,
    SimulationOptions,
    simulate,
    simulate_trial,
    win_probability,
)
from .magic_numbers import calculate_magic_numbers
from .scenarios import generate_clinch_elimination_scenarios
from .aggregator import aggregate_results, round_probability

__all__ = [
    # Models
    "TeamSeasonState",
    "LeagueSimulationSettings",
    "Game",
    "TrialOutcome",
    "TeamTally",
    "TrialTally",
    "MagicNumbers",
    "ProbabilityResult",
    "SimulationSummary",
    # Errors
    "SimulationError",
    "InvalidSettingsError",
    "InvalidTeamError",
    "RandomSourceError",
    # Randomness
    "RandomSource",
    "SeededRandom",
    # Schedule
    "project_remaining_schedule",
    "project_league_schedules",
    "build_matchups",
    # Standings
    "rank_teams",
    # Engine
    "SIMULATION_COUNT",
    "PlayoffSimulator",
    "SimulationOptions",
    "simulate",
    "simulate_trial",
    "win_probability",
    # Magic numbers
    "calculate_magic_numbers",
    # Scenarios
    "generate_clinch_elimination_scenarios",
    # Aggregation
    "aggregate_results",
    "round_probability",
]
