"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class SolveRequest(BaseModel):
    """Schema for a solve request."""

    grid_data: str = Field(..., min_length=1)
    strategy: Optional[str] = Field(
        None, description="Strategy name; unknown names use the right-hand rule"
    )


class SolveResponse(BaseModel):
    """Schema for a solved maze."""

    path: str
    moves: int = Field(..., ge=0)
    steps: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    entry: MazePosition
    exit: MazePosition
    strategy: str


class StrategyListResponse(BaseModel):
    """Schema for the list of available strategies."""

    strategies: list[str]
    default: str
