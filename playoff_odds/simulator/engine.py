"""
Monte Carlo simulation engine for playoff probability calculations.
"""

import logging
import math
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .aggregator import aggregate_results
from .errors import InvalidSettingsError
from .models import (
    Game,
    LeagueSimulationSettings,
    ProbabilityResult,
    SimulationSummary,
    TeamId,
    TeamSeasonState,
    TrialOutcome,
    TrialTally,
)
from .random_source import RandomSource, SeededRandom, draw, normal, shard_seeds
from .schedule import build_matchups, fill_remaining_schedules
from .standings import rank_teams


logger = logging.getLogger(__name__)

SIMULATION_COUNT = 10000

# Slope of the logistic win-probability curve
LOGISTIC_SCALE = 4.0

WIN_PCT_WEIGHT = 0.5
POINTS_WEIGHT = 0.5

MIN_GAME_SCORE = 50.0
SCORE_STDDEV_RATIO = 0.15


@dataclass
class SimulationOptions:
    """Per-call simulation options."""

    simulation_count: int = SIMULATION_COUNT
    random_seed: Optional[int] = None
    workers: int = 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SimulationOptions':
        def pick(*keys, default=None):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return default

        return cls(
            simulation_count=pick("simulation_count", "simulationCount", default=SIMULATION_COUNT),
            random_seed=pick("random_seed", "randomSeed"),
            workers=pick("workers", default=1),
        )


def team_strengths(teams: Sequence[TeamSeasonState]) -> Dict[TeamId, float]:
    """
    Rate each team from its win percentage and scoring.

    Scoring is measured against the league average so the two components sit
    on comparable scales.
    """
    if not teams:
        return {}

    league_avg = sum(t.avg_points_for for t in teams) / len(teams)

    strengths = {}
    for team in teams:
        points_ratio = team.avg_points_for / league_avg if league_avg > 0 else 1.0
        strengths[team.team_id] = WIN_PCT_WEIGHT * team.win_pct + POINTS_WEIGHT * points_ratio
    return strengths


def win_probability(strength: float, opponent_strength: float, scale: float = LOGISTIC_SCALE) -> float:
    """Probability that a team beats an opponent, given both strengths."""
    x = scale * (strength - opponent_strength)
    # Split on sign so exp() never overflows
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def game_score(avg_points: float, source: RandomSource) -> float:
    """Simulated points scored by a team in one game."""
    return max(MIN_GAME_SCORE, normal(source, avg_points, avg_points * SCORE_STDDEV_RATIO))


def simulate_trial(
    teams: Sequence[TeamSeasonState],
    games: Sequence[Game],
    game_odds: Sequence[float],
    source: RandomSource
) -> TrialOutcome:
    """
    Play out one season.

    Args:
        teams: Current standings (not modified)
        games: Remaining games
        game_odds: Probability that the home team wins, one per game
        source: Random source for this trial

    Returns:
        TrialOutcome with final standings and ranking
    """
    sim_teams = {t.team_id: t.copy() for t in teams}
    avg_points = {t.team_id: t.avg_points_for for t in teams}

    for game, home_odds in zip(games, game_odds):
        home = sim_teams[game.home_team_id]
        away = sim_teams[game.away_team_id]

        if draw(source) < home_odds:
            home.wins += 1
            away.losses += 1
        else:
            away.wins += 1
            home.losses += 1

        home_points = game_score(avg_points[home.team_id], source)
        away_points = game_score(avg_points[away.team_id], source)
        home.points_for += home_points
        home.points_against += away_points
        away.points_for += away_points
        away.points_against += home_points

    return TrialOutcome(teams=sim_teams, ranking=rank_teams(sim_teams.values()))


def run_trials(
    teams: Sequence[TeamSeasonState],
    games: Sequence[Game],
    playoff_spots: int,
    n_simulations: int,
    source: RandomSource,
    scale: float = LOGISTIC_SCALE,
    progress_callback: Optional[Callable[[float], None]] = None
) -> TrialTally:
    """
    Run a batch of trials and tally the results.

    Raises:
        RandomSourceError: If the random source fails; no partial tally is returned
    """
    strengths = team_strengths(teams)
    game_odds = [
        win_probability(strengths[g.home_team_id], strengths[g.away_team_id], scale)
        for g in games
    ]

    tally = TrialTally.empty([t.team_id for t in teams])

    for sim_idx in range(n_simulations):
        if progress_callback and sim_idx % 100 == 0:
            progress_callback(sim_idx / n_simulations * 100)

        outcome = simulate_trial(teams, games, game_odds, source)
        tally.record(outcome, playoff_spots)

    return tally


def _run_shard(
    teams: List[TeamSeasonState],
    games: List[Game],
    playoff_spots: int,
    n_simulations: int,
    seed: Optional[int],
    scale: float
) -> TrialTally:
    """Worker process entry point: one private random stream per shard."""
    return run_trials(teams, games, playoff_spots, n_simulations, SeededRandom(seed), scale)


def shard_sizes(n_simulations: int, workers: int) -> List[int]:
    """Split a trial count as evenly as possible across workers."""
    base, extra = divmod(n_simulations, workers)
    sizes = [base + (1 if i < extra else 0) for i in range(workers)]
    return [size for size in sizes if size > 0]


class PlayoffSimulator:
    """
    Playoff probability engine for one league configuration.

    The random source is fixed at construction. When none is injected, a
    ``SeededRandom`` is created from ``random_seed``; with ``workers > 1`` each
    worker process instead gets its own stream derived from that seed.
    """

    def __init__(
        self,
        settings: LeagueSimulationSettings,
        simulation_count: int = SIMULATION_COUNT,
        random_seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
        workers: int = 1,
        logistic_scale: float = LOGISTIC_SCALE,
        progress_callback: Optional[Callable[[float], None]] = None
    ):
        if isinstance(simulation_count, bool) or not isinstance(simulation_count, int) or simulation_count < 0:
            raise InvalidSettingsError(
                f"simulation_count must be a non-negative integer, got {simulation_count!r}"
            )
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise InvalidSettingsError(f"workers must be a positive integer, got {workers!r}")

        self.settings = settings
        self.simulation_count = simulation_count
        self.random_seed = random_seed
        self.random_source = random_source
        self.workers = workers
        self.logistic_scale = logistic_scale
        self.progress_callback = progress_callback

    def run(self, teams: Sequence[Union[TeamSeasonState, Mapping[str, Any]]]) -> SimulationSummary:
        """
        Simulate the rest of the regular season.

        Args:
            teams: Current standings, as TeamSeasonState objects or mappings

        Returns:
            SimulationSummary with one ProbabilityResult per team, in input order

        Raises:
            InvalidSettingsError: If the settings are invalid for this league
            InvalidTeamError: If a team's record or schedule is malformed
            RandomSourceError: If the random source fails mid-simulation
        """
        teams = [t if isinstance(t, TeamSeasonState) else TeamSeasonState.from_dict(t) for t in teams]
        spots = self.settings.playoff_spots

        if not teams:
            logger.debug("No teams supplied; nothing to simulate")
            return SimulationSummary(probabilities=[], total_simulations=0, avg_playoff_spots=spots)

        self.settings.validate(len(teams))
        teams = fill_remaining_schedules(teams, self.settings)

        if self.simulation_count == 0:
            return SimulationSummary(probabilities=[], total_simulations=0, avg_playoff_spots=spots)

        games = build_matchups(teams, self.settings.remaining_weeks)
        logger.info(
            "Simulating %d seasons for %d teams (%d games remaining, %d workers)",
            self.simulation_count, len(teams), len(games), self.workers
        )

        tally = self._simulate(teams, games)

        if self.progress_callback:
            self.progress_callback(100)

        probabilities = aggregate_results(teams, games, tally, self.settings)
        return SimulationSummary(
            probabilities=probabilities,
            total_simulations=tally.trials,
            avg_playoff_spots=spots,
        )

    def _simulate(self, teams: List[TeamSeasonState], games: List[Game]) -> TrialTally:
        spots = self.settings.playoff_spots

        if self.random_source is not None or self.workers == 1:
            source = self.random_source or SeededRandom(self.random_seed)
            return run_trials(
                teams, games, spots, self.simulation_count, source,
                self.logistic_scale, self.progress_callback
            )

        sizes = shard_sizes(self.simulation_count, self.workers)
        seeds = shard_seeds(self.random_seed, len(sizes))

        tally = TrialTally.empty([t.team_id for t in teams])
        # spawn: the API calls this from a worker thread
        context = multiprocessing.get_context("spawn")
        with ProcessPoolExecutor(max_workers=len(sizes), mp_context=context) as pool:
            futures = [
                pool.submit(_run_shard, teams, games, spots, size, seed, self.logistic_scale)
                for size, seed in zip(sizes, seeds)
            ]
            for done, future in enumerate(as_completed(futures), start=1):
                tally = tally + future.result()
                if self.progress_callback:
                    self.progress_callback(done / len(futures) * 100)

        return tally


def simulate(
    teams: Sequence[Union[TeamSeasonState, Mapping[str, Any]]],
    settings: Union[LeagueSimulationSettings, Mapping[str, Any]],
    options: Optional[Union[SimulationOptions, Mapping[str, Any]]] = None
) -> List[ProbabilityResult]:
    """
    Calculate playoff probabilities for every team in a league.

    Args:
        teams: Current standings with remaining schedules
        settings: Playoff spots, regular season length and current week
        options: Simulation count, random seed and worker count

    Returns:
        One ProbabilityResult per team, in input order (empty if there is
        nothing to simulate)
    """
    if not isinstance(settings, LeagueSimulationSettings):
        settings = LeagueSimulationSettings.from_dict(settings)
    if options is None:
        options = SimulationOptions()
    elif not isinstance(options, SimulationOptions):
        options = SimulationOptions.from_dict(options)

    simulator = PlayoffSimulator(
        settings,
        simulation_count=options.simulation_count,
        random_seed=options.random_seed,
        workers=options.workers,
    )
    return simulator.run(teams).probabilities
