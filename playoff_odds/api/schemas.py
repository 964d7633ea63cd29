"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..core.config import DEFAULT_SIMULATIONS, DEFAULT_WORKERS, MAX_SIMULATIONS


TeamIdField = Union[int, str]


# ============== Simulation Schemas ==============

class TeamStanding(BaseModel):
    """Current standing for one team."""
    team_id: TeamIdField
    name: Optional[str] = Field(None, max_length=255)  # Display name, not used by the engine
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    ties: int = Field(default=0, ge=0)
    points_for: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    points_against: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    remaining_schedule: Optional[List[TeamIdField]] = None  # Projected when omitted


class LeagueSettingsInput(BaseModel):
    """League settings for a simulation."""
    playoff_spots: int = 6
    regular_season_weeks: int = 14
    current_week: int


class SimulationOptionsInput(BaseModel):
    """Simulation tuning options."""
    simulation_count: int = Field(default=DEFAULT_SIMULATIONS, ge=0, le=MAX_SIMULATIONS)
    random_seed: Optional[int] = None
    workers: int = Field(default=DEFAULT_WORKERS, ge=1, le=32)


class SimulationRunRequest(BaseModel):
    """Run a simulation request."""
    teams: List[TeamStanding]
    settings: LeagueSettingsInput
    options: SimulationOptionsInput = Field(default_factory=SimulationOptionsInput)


class TeamResult(BaseModel):
    """Simulation results for a single team."""
    team_id: TeamIdField
    team_name: Optional[str] = None
    current_record: str
    playoff_probability: float
    championship_probability: float
    projected_wins: float
    projected_losses: float
    strength_of_schedule: float
    magic_playoffs: Optional[int] = None
    magic_first_seed: Optional[int] = None
    clinch_scenarios: List[str]
    elimination_scenarios: List[str]


class SimulationResultsResponse(BaseModel):
    """Full simulation results response."""
    probabilities: List[TeamResult]
    total_simulations: int
    avg_playoff_spots: int


# ============== Schedule Schemas ==============

class ScheduleProjectionRequest(BaseModel):
    """Project a team's remaining opponents."""
    team_id: TeamIdField
    team_ids: List[TeamIdField]
    current_week: int
    regular_season_weeks: int


class ScheduleProjectionResponse(BaseModel):
    """Projected remaining opponents, one per week."""
    team_id: TeamIdField
    opponents: List[TeamIdField]
