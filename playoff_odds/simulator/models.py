"""
Data models for the playoff simulator.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import InvalidSettingsError, InvalidTeamError


TeamId = Union[int, str]

DEFAULT_AVG_POINTS = 100.0


@dataclass
class TeamSeasonState:
    """A team's record to date and the opponents it still has to play."""

    team_id: TeamId
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0
    remaining_schedule: Optional[List[TeamId]] = None

    def __post_init__(self):
        for name in ("wins", "losses", "ties"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidTeamError(
                    f"Team {self.team_id}: {name} must be a non-negative integer, got {value!r}"
                )
        for name in ("points_for", "points_against"):
            value = getattr(self, name)
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not math.isfinite(value) or value < 0):
                raise InvalidTeamError(
                    f"Team {self.team_id}: {name} must be a finite non-negative number, got {value!r}"
                )
        if self.remaining_schedule is not None and self.team_id in self.remaining_schedule:
            raise InvalidTeamError(f"Team {self.team_id} cannot be scheduled against itself")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TeamSeasonState':
        """Build a team from a snake_case or camelCase mapping."""
        def pick(*keys, default=None):
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        team_id = pick("team_id", "teamId", "id")
        if team_id is None:
            raise InvalidTeamError(f"Team entry is missing an id: {data!r}")

        schedule = pick("remaining_schedule", "remainingSchedule")
        return cls(
            team_id=team_id,
            wins=pick("wins", default=0),
            losses=pick("losses", default=0),
            ties=pick("ties", default=0),
            points_for=pick("points_for", "pointsFor", default=0.0),
            points_against=pick("points_against", "pointsAgainst", default=0.0),
            remaining_schedule=list(schedule) if schedule is not None else None,
        )

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def record_str(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def win_pct(self) -> float:
        total = self.games_played
        if total == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / total

    @property
    def avg_points_for(self) -> float:
        if self.games_played == 0:
            return DEFAULT_AVG_POINTS
        return self.points_for / self.games_played

    def copy(self) -> 'TeamSeasonState':
        """Create a scratch copy of this team for one simulation trial."""
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "team_id": self.team_id,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "remaining_schedule": list(self.remaining_schedule or []),
            "record": self.record_str,
            "win_pct": self.win_pct,
        }


@dataclass(frozen=True)
class LeagueSimulationSettings:
    """League configuration for one simulation call."""

    playoff_spots: int = 6
    regular_season_weeks: int = 14
    current_week: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LeagueSimulationSettings':
        """Build settings from a snake_case or camelCase mapping."""
        def pick(*keys):
            for key in keys:
                if key in data:
                    return data[key]
            raise InvalidSettingsError(f"Missing league setting: {keys[0]}")

        return cls(
            playoff_spots=pick("playoff_spots", "playoffSpots", "playoffTeams"),
            regular_season_weeks=pick("regular_season_weeks", "regularSeasonWeeks"),
            current_week=pick("current_week", "currentWeek"),
        )

    @property
    def remaining_weeks(self) -> int:
        return max(self.regular_season_weeks - self.current_week, 0)

    def validate(self, team_count: int) -> None:
        """
        Check the settings against the number of teams in the league.

        Raises:
            InvalidSettingsError: If the settings cannot describe a valid season
        """
        for name in ("playoff_spots", "regular_season_weeks", "current_week"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")

        if self.regular_season_weeks <= 0:
            raise InvalidSettingsError(
                f"regular_season_weeks must be positive, got {self.regular_season_weeks}"
            )
        if self.current_week < 1 or self.current_week > self.regular_season_weeks:
            raise InvalidSettingsError(
                f"current_week must be between 1 and {self.regular_season_weeks}, "
                f"got {self.current_week}"
            )
        if self.playoff_spots <= 0:
            raise InvalidSettingsError(
                f"playoff_spots must be positive, got {self.playoff_spots}"
            )
        if self.playoff_spots > team_count:
            raise InvalidSettingsError(
                f"playoff_spots ({self.playoff_spots}) exceeds the number of teams ({team_count})"
            )


@dataclass(frozen=True)
class Game:
    """A remaining game, resolved once for both teams."""

    week: int
    home_team_id: TeamId
    away_team_id: TeamId


@dataclass
class TrialOutcome:
    """Final standings of one simulated season."""

    teams: Dict[TeamId, TeamSeasonState]
    ranking: List[TeamId] = field(default_factory=list)

    def rank_of(self, team_id: TeamId) -> int:
        """1-based finishing position of a team."""
        return self.ranking.index(team_id) + 1

    @property
    def total_wins(self) -> int:
        return sum(t.wins for t in self.teams.values())

    @property
    def total_losses(self) -> int:
        return sum(t.losses for t in self.teams.values())


@dataclass
class TeamTally:
    """Counters accumulated for one team across trials."""

    team_id: TeamId
    playoff_appearances: int = 0
    first_place: int = 0
    total_wins: int = 0
    total_losses: int = 0

    def __add__(self, other: 'TeamTally') -> 'TeamTally':
        return TeamTally(
            team_id=self.team_id,
            playoff_appearances=self.playoff_appearances + other.playoff_appearances,
            first_place=self.first_place + other.first_place,
            total_wins=self.total_wins + other.total_wins,
            total_losses=self.total_losses + other.total_losses,
        )

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "playoff_appearances": self.playoff_appearances,
            "first_place": self.first_place,
            "total_wins": self.total_wins,
            "total_losses": self.total_losses,
        }


@dataclass
class TrialTally:
    """
    Aggregate counters for a batch of trials.

    Merging is plain addition, so shards run on separate workers combine to the
    same totals in any order.
    """

    trials: int = 0
    teams: Dict[TeamId, TeamTally] = field(default_factory=dict)

    @classmethod
    def empty(cls, team_ids: List[TeamId]) -> 'TrialTally':
        return cls(trials=0, teams={tid: TeamTally(team_id=tid) for tid in team_ids})

    def record(self, outcome: TrialOutcome, playoff_spots: int) -> None:
        """Add one trial's final standings to the counters."""
        self.trials += 1

        for position, team_id in enumerate(outcome.ranking):
            tally = self.teams[team_id]
            if position < playoff_spots:
                tally.playoff_appearances += 1
            if position == 0:
                tally.first_place += 1

        for team_id, team in outcome.teams.items():
            self.teams[team_id].total_wins += team.wins
            self.teams[team_id].total_losses += team.losses

    def __add__(self, other: 'TrialTally') -> 'TrialTally':
        merged = {tid: TeamTally(team_id=tid) + tally for tid, tally in self.teams.items()}
        for tid, tally in other.teams.items():
            merged[tid] = merged.get(tid, TeamTally(team_id=tid)) + tally
        return TrialTally(trials=self.trials + other.trials, teams=merged)


@dataclass
class MagicNumbers:
    """Wins a team needs from its remaining games to guarantee a spot."""

    team_id: TeamId
    magic_playoffs: Optional[int] = None
    magic_first_seed: Optional[int] = None
    clinched_playoffs: bool = False
    clinched_first_seed: bool = False
    eliminated: bool = False


@dataclass(frozen=True)
class ProbabilityResult:
    """Simulated outlook for one team."""

    team_id: TeamId
    current_record: str
    playoff_probability: float
    championship_probability: float
    projected_wins: float
    projected_losses: float
    strength_of_schedule: float = 0.5
    magic_playoffs: Optional[int] = None
    magic_first_seed: Optional[int] = None
    clinch_scenarios: Tuple[str, ...] = ()
    elimination_scenarios: Tuple[str, ...] = ()
    team_name: Optional[str] = None

    def with_name(self, name: str) -> 'ProbabilityResult':
        """Return a copy decorated with a display name."""
        return replace(self, team_name=name)

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "team_name": self.team_name,
            "current_record": self.current_record,
            "playoff_probability": self.playoff_probability,
            "championship_probability": self.championship_probability,
            "projected_wins": self.projected_wins,
            "projected_losses": self.projected_losses,
            "strength_of_schedule": self.strength_of_schedule,
            "magic_playoffs": self.magic_playoffs,
            "magic_first_seed": self.magic_first_seed,
            "clinch_scenarios": list(self.clinch_scenarios),
            "elimination_scenarios": list(self.elimination_scenarios),
        }


@dataclass
class SimulationSummary:
    """Results from a Monte Carlo simulation."""

    probabilities: List[ProbabilityResult]
    total_simulations: int
    avg_playoff_spots: int

    def to_dict(self) -> dict:
        return {
            "probabilities": [p.to_dict() for p in self.probabilities],
            "total_simulations": self.total_simulations,
            "avg_playoff_spots": self.avg_playoff_spots,
        }
