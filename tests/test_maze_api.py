"""Tests for maze solving endpoints."""

import inspect

import pytest
from httpx import AsyncClient

from .conftest import CROSS_MAZE, NO_OPENING_MAZE, WALLED_OFF_MAZE


@pytest.mark.asyncio
async def test_list_strategies(client: AsyncClient):
    """Test GET /v1/maze/strategies."""
    response = await client.get("/v1/maze/strategies")
    assert response.status_code == 200
    data = response.json()
    assert data["strategies"] == ["right-hand"]
    assert data["default"] == "right-hand"


@pytest.mark.asyncio
async def test_solve_maze(client: AsyncClient):
    """Test POST /v1/maze/solve with a solvable maze."""
    response = await client.post("/v1/maze/solve", json={"grid_data": CROSS_MAZE})
    assert response.status_code == 200
    data = response.json()
    assert data["path"] == "F R F 2L F R F"
    assert data["moves"] == 6
    assert data["steps"] == 6
    assert data["width"] == 3
    assert data["height"] == 3
    assert data["entry"] == {"row": 1, "col": 0}
    assert data["exit"] == {"row": 1, "col": 2}
    assert data["strategy"] == "right-hand"


@pytest.mark.asyncio
async def test_solve_maze_unknown_strategy(client: AsyncClient):
    """Unknown strategy names fall back to the right-hand rule."""
    response = await client.post(
        "/v1/maze/solve",
        json={"grid_data": CROSS_MAZE, "strategy": "teleport"},
    )
    assert response.status_code == 200
    assert response.json()["strategy"] == "right-hand"


@pytest.mark.asyncio
async def test_solve_entry_is_exit(client: AsyncClient):
    response = await client.post("/v1/maze/solve", json={"grid_data": " "})
    assert response.status_code == 200
    data = response.json()
    assert data["path"] == ""
    assert data["moves"] == 0
    assert data["steps"] == 0


@pytest.mark.asyncio
async def test_solve_no_entry_or_exit(client: AsyncClient):
    response = await client.post("/v1/maze/solve", json={"grid_data": NO_OPENING_MAZE})
    assert response.status_code == 400
    assert "left edge" in response.json()["detail"]


@pytest.mark.asyncio
async def test_solve_unsolvable(client: AsyncClient):
    response = await client.post("/v1/maze/solve", json={"grid_data": WALLED_OFF_MAZE})
    assert response.status_code == 422
    assert "step" in response.json()["detail"]


@pytest.mark.asyncio
async def test_solve_blank_lines_only(client: AsyncClient):
    response = await client.post("/v1/maze/solve", json={"grid_data": "\n\n"})
    assert response.status_code == 400
    assert "empty" in response.json()["detail"]


@pytest.mark.asyncio
async def test_solve_rejects_missing_grid(client: AsyncClient):
    response = await client.post("/v1/maze/solve", json={})
    assert response.status_code == 422


def test_solve_runs_in_threadpool():
    """The solve handler is synchronous so FastAPI runs it off the event loop."""
    from mazerunner.api.routes.maze import solve_maze

    assert not inspect.iscoroutinefunction(solve_maze)
