"""Maze routes for solving mazes."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from mazerunner.config import get_settings
from mazerunner.core import (
    MazeLoadError,
    MazeSolver,
    MazeUnsolvableError,
    NoEntryOrExitError,
    available_strategies,
    get_strategy,
)
from mazerunner.schemas.maze import (
    MazePosition,
    SolveRequest,
    SolveResponse,
    StrategyListResponse,
)

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.get(
    "/strategies",
    response_model=StrategyListResponse,
)
async def list_strategies() -> StrategyListResponse:
    """List the registered solving strategies."""
    return StrategyListResponse(
        strategies=available_strategies(),
        default=settings.default_strategy,
    )


@router.post(
    "/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
def solve_maze(
    request: Request,
    solve_data: SolveRequest,
) -> SolveResponse:
    """Solve a maze given as text.

    Walls are `#`, open cells are spaces. The entry is the first opening on
    the left edge and the exit the first opening on the right edge.
    """
    if len(solve_data.grid_data) > settings.max_maze_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maze exceeds {settings.max_maze_chars} characters",
        )

    strategy = get_strategy(
        solve_data.strategy or settings.default_strategy,
        step_limit_factor=settings.step_limit_factor,
    )

    try:
        solver = MazeSolver.from_text(
            solve_data.grid_data, strategy=strategy, settings=settings
        )
        solution = solver.solve()
    except (MazeLoadError, NoEntryOrExitError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except MazeUnsolvableError as e:
        logger.info(f"Unsolvable maze submitted: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return SolveResponse(
        path=solution.rendered_path,
        moves=len(solution.moves),
        steps=len(solution.moves),
        width=solution.width,
        height=solution.height,
        entry=MazePosition(**solution.entry.to_dict()),
        exit=MazePosition(**solution.exit.to_dict()),
        strategy=solution.strategy,
    )
