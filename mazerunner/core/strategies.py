"""
Maze solving strategies.

Classic wall-following algorithm: keep your right hand on the wall.
Works for any simply-connected maze (no isolated loops).

Strategy:
1. Always try to turn right and step
2. If can't turn right, go straight
3. If can't go straight, turn left in place and try again

The solver stops at the exit or once its step count passes
step_limit_factor * rows * cols, whichever comes first.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .maze_grid import MazeError, MazeGrid, Heading, Move, Position

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "right-hand"
DEFAULT_STEP_LIMIT_FACTOR = 2


class MazeUnsolvableError(MazeError):
    """Exception raised when a strategy gives up before reaching the exit."""

    def __init__(self, message: str, steps: int = 0, step_limit: int = 0):
        super().__init__(message)
        self.steps = steps
        self.step_limit = step_limit


class MazeSolvingStrategy(ABC):
    """Interface for maze solving algorithms."""

    name: str = ""

    @abstractmethod
    def solve(self, grid: MazeGrid, entry: Position, exit: Position) -> list[Move]:
        """
        Solve the maze and return the raw move sequence.

        Args:
            grid: Maze grid to traverse.
            entry: Start position on the left edge.
            exit: Goal position on the right edge.

        Returns:
            Moves in emission order. Empty when entry equals exit.

        Raises:
            MazeUnsolvableError: If the exit could not be reached.
        """


class RightHandRuleStrategy(MazeSolvingStrategy):
    """Right-hand rule maze solver."""

    name = DEFAULT_STRATEGY

    def __init__(self, step_limit_factor: int = DEFAULT_STEP_LIMIT_FACTOR):
        if step_limit_factor < 1:
            raise ValueError("step_limit_factor must be at least 1")
        self.step_limit_factor = step_limit_factor

    def step_limit(self, grid: MazeGrid) -> int:
        """Maximum number of transitions allowed for this grid."""
        return self.step_limit_factor * grid.area

    def solve(self, grid: MazeGrid, entry: Position, exit: Position) -> list[Move]:
        heading = Heading.EAST
        position = entry
        path: list[Move] = []

        # (row, col, heading) states seen so far; only used to report cycles
        visited = {(position.row, position.col, heading)}
        revisits = 0

        step_limit = self.step_limit(grid)
        steps = 0

        while position != exit:
            steps += 1
            if steps > step_limit:
                logger.error(
                    f"Step limit of {step_limit} exceeded at "
                    f"({position.row}, {position.col}) facing {heading.value}; "
                    f"{revisits} repeated states seen"
                )
                raise MazeUnsolvableError(
                    f"Exit not reached within {step_limit} steps",
                    steps=steps - 1,
                    step_limit=step_limit,
                )

            right = heading.right
            ahead_right = position.step(right)
            ahead = position.step(heading)

            if grid.is_open(ahead_right.row, ahead_right.col):
                heading = right
                position = ahead_right
                path.append(Move.TURN_RIGHT_FORWARD)
            elif grid.is_open(ahead.row, ahead.col):
                position = ahead
                path.append(Move.FORWARD)
            else:
                heading = heading.left
                path.append(Move.TURN_LEFT)

            state = (position.row, position.col, heading)
            if state in visited:
                if revisits == 0:
                    logger.warning(
                        f"Cycle detected: revisiting ({position.row}, {position.col}) "
                        f"facing {heading.value} after {steps} steps"
                    )
                revisits += 1
            else:
                visited.add(state)

        logger.debug(
            f"Reached exit ({exit.row}, {exit.col}) in {steps} steps "
            f"({len(visited)} distinct states, {revisits} repeated)"
        )
        return path


STRATEGIES: dict[str, type[MazeSolvingStrategy]] = {
    RightHandRuleStrategy.name: RightHandRuleStrategy,
}


def available_strategies() -> list[str]:
    """Names of all registered strategies."""
    return sorted(STRATEGIES)


def get_strategy(name: Optional[str] = None, **kwargs) -> MazeSolvingStrategy:
    """
    Instantiate a strategy by name.

    Args:
        name: Strategy name, case-insensitive. None selects the default.
        **kwargs: Passed to the strategy constructor.

    Returns:
        Strategy instance. Unknown names fall back to the right-hand rule.
    """
    key = (name or DEFAULT_STRATEGY).strip().lower()
    strategy_cls = STRATEGIES.get(key)
    if strategy_cls is None:
        logger.warning(
            f"Unknown strategy '{name}', falling back to '{DEFAULT_STRATEGY}'"
        )
        strategy_cls = STRATEGIES[DEFAULT_STRATEGY]
    return strategy_cls(**kwargs)
