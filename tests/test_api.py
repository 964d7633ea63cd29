"""
Tests for the HTTP API.
"""

import json

import pytest
import pytest_asyncio
from unittest.mock import patch
from httpx import ASGITransport, AsyncClient

from playoff_odds.main import app
from playoff_odds.simulator import RandomSourceError


@pytest.fixture
def final_week_payload():
    return {
        "teams": [
            {"team_id": "A", "name": "Alpha", "wins": 3, "losses": 0, "points_for": 360, "remaining_schedule": []},
            {"team_id": "B", "name": "Beta", "wins": 2, "losses": 1, "points_for": 330, "remaining_schedule": []},
            {"team_id": "C", "wins": 1, "losses": 2, "points_for": 310, "remaining_schedule": []},
            {"team_id": "D", "wins": 0, "losses": 3, "points_for": 290, "remaining_schedule": []},
        ],
        "settings": {"playoff_spots": 2, "regular_season_weeks": 4, "current_week": 4},
        "options": {"simulation_count": 200, "random_seed": 7},
    }


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestHealth:
    """Tests for service info endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/api/health"


class TestSimulationRoutes:
    """Tests for /api/simulations/run."""

    @pytest.mark.asyncio
    async def test_run_final_week(self, client, final_week_payload):
        response = await client.post("/api/simulations/run", json=final_week_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["total_simulations"] == 200
        assert data["avg_playoff_spots"] == 2

        by_id = {t["team_id"]: t for t in data["probabilities"]}
        assert by_id["A"]["team_name"] == "Alpha"
        assert by_id["C"]["team_name"] == "Team C"
        assert by_id["A"]["playoff_probability"] == 100.0
        assert by_id["B"]["playoff_probability"] == 100.0
        assert by_id["C"]["playoff_probability"] == 0.0
        assert by_id["D"]["elimination_scenarios"] == ["Eliminated from playoff contention"]
        assert by_id["A"]["clinch_scenarios"] == ["Clinched a playoff spot", "Clinched the #1 seed"]

    @pytest.mark.asyncio
    async def test_empty_league(self, client):
        payload = {"teams": [], "settings": {"playoff_spots": 4, "current_week": 3}}
        response = await client.post("/api/simulations/run", json=payload)
        assert response.status_code == 200
        assert response.json()["probabilities"] == []

    @pytest.mark.asyncio
    async def test_invalid_settings_return_400(self, client, final_week_payload):
        final_week_payload["settings"]["playoff_spots"] = 5
        response = await client.post("/api/simulations/run", json=final_week_payload)
        assert response.status_code == 400
        assert "playoff_spots" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_opponent_returns_400(self, client, final_week_payload):
        final_week_payload["settings"]["current_week"] = 3
        final_week_payload["teams"][0]["remaining_schedule"] = ["Z"]
        response = await client.post("/api/simulations/run", json=final_week_payload)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_negative_wins_rejected(self, client, final_week_payload):
        final_week_payload["teams"][0]["wins"] = -1
        response = await client.post("/api/simulations/run", json=final_week_payload)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_non_finite_points_rejected(self, client, final_week_payload):
        final_week_payload["teams"][0]["points_for"] = float("inf")
        response = await client.post(
            "/api/simulations/run",
            content=json.dumps(final_week_payload),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_random_source_failure_returns_500(self, client, final_week_payload):
        with patch(
            "playoff_odds.api.routes.simulations_routes.run_simulation",
            side_effect=RandomSourceError("bad draw")
        ):
            response = await client.post("/api/simulations/run", json=final_week_payload)

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to calculate playoff probabilities"


class TestScheduleRoutes:
    """Tests for /api/schedules/project."""

    @pytest.mark.asyncio
    async def test_project_schedule(self, client):
        payload = {"team_id": 1, "team_ids": [1, 2, 3, 4], "current_week": 9, "regular_season_weeks": 14}
        response = await client.post("/api/schedules/project", json=payload)
        assert response.status_code == 200
        assert response.json() == {"team_id": 1, "opponents": [2, 3, 4, 2, 3]}
