"""
Simulation API routes.
"""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, status

from ..schemas import (
    ScheduleProjectionRequest,
    ScheduleProjectionResponse,
    SimulationResultsResponse,
    SimulationRunRequest,
    TeamResult
)
from ...core.config import LOGISTIC_SCALE_SETTING
from ...simulator import (
    InvalidSettingsError,
    InvalidTeamError,
    LeagueSimulationSettings,
    PlayoffSimulator,
    RandomSourceError,
    SimulationSummary,
    TeamSeasonState,
    project_remaining_schedule
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulations"])


def run_simulation(request: SimulationRunRequest) -> SimulationSummary:
    """
    Build engine inputs from a request and run the simulation.

    Runs synchronously; callers on the event loop should push it to a thread.
    """
    teams = [
        TeamSeasonState(
            team_id=team.team_id,
            wins=team.wins,
            losses=team.losses,
            ties=team.ties,
            points_for=team.points_for,
            points_against=team.points_against,
            remaining_schedule=team.remaining_schedule
        )
        for team in request.teams
    ]
    settings = LeagueSimulationSettings(
        playoff_spots=request.settings.playoff_spots,
        regular_season_weeks=request.settings.regular_season_weeks,
        current_week=request.settings.current_week
    )

    simulator = PlayoffSimulator(
        settings,
        simulation_count=request.options.simulation_count,
        random_seed=request.options.random_seed,
        workers=request.options.workers,
        logistic_scale=LOGISTIC_SCALE_SETTING
    )
    return simulator.run(teams)


@router.post("/simulations/run", response_model=SimulationResultsResponse)
async def run_simulation_endpoint(request: SimulationRunRequest) -> SimulationResultsResponse:
    """
    Run a playoff probability simulation for a league.

    The simulation is CPU-bound, so it runs in a worker thread to keep the
    event loop responsive.
    """
    try:
        summary = await asyncio.to_thread(run_simulation, request)
    except (InvalidSettingsError, InvalidTeamError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except RandomSourceError:
        logger.exception("Simulation aborted by random source failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate playoff probabilities"
        )

    # Team names are display decoration; the engine only knows IDs
    names = {team.team_id: team.name or f"Team {team.team_id}" for team in request.teams}

    team_results = [
        TeamResult(**result.with_name(names[result.team_id]).to_dict())
        for result in summary.probabilities
    ]

    return SimulationResultsResponse(
        probabilities=team_results,
        total_simulations=summary.total_simulations,
        avg_playoff_spots=summary.avg_playoff_spots
    )


@router.post("/schedules/project", response_model=ScheduleProjectionResponse)
async def project_schedule(request: ScheduleProjectionRequest) -> ScheduleProjectionResponse:
    """
    Project a team's remaining opponents with a round-robin rotation.
    """
    opponents = project_remaining_schedule(
        request.team_id,
        request.team_ids,
        request.current_week,
        request.regular_season_weeks
    )
    return ScheduleProjectionResponse(team_id=request.team_id, opponents=opponents)
