"""
Maze Runner solver facade.

Ties the pipeline together:
- Maze loading from a file or text
- Entry/exit detection
- Solving with a pluggable strategy
- Path factorization
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from mazerunner.config import Settings, get_settings

from .maze_grid import MazeGrid, MazeLoadError, Move, Position, locate_entry_exit
from .maze_parser import load_maze_file, parse_maze_text
from .path_factorizer import FactorizedPath, factorize
from .strategies import MazeSolvingStrategy, get_strategy

logger = logging.getLogger(__name__)


@dataclass
class MazeSolution:
    """Result of a successful solve."""
    width: int
    height: int
    entry: Position
    exit: Position
    strategy: str
    moves: list[Move] = field(default_factory=list)
    path: FactorizedPath = field(default_factory=FactorizedPath)

    @property
    def rendered_path(self) -> str:
        """Factorized path as printed, e.g. `2F R F L`."""
        return self.path.render()


class MazeSolver:
    """
    Loads a maze, solves it and factorizes the resulting path.

    Example usage:
        solver = MazeSolver("mazes/small.txt")
        solver.load_maze()
        solver.display_maze()
        print(solver.solve_maze())   # e.g. "F R F 2L F R F"
    """

    def __init__(
        self,
        file_path: Optional[Path | str] = None,
        strategy: Optional[MazeSolvingStrategy] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the solver.

        Args:
            file_path: Path to the maze file. Not needed when the grid is
                supplied through from_text().
            strategy: Strategy to solve with. Defaults to the configured one.
            settings: Settings override, mainly for tests.
        """
        self.settings = settings or get_settings()
        self.file_path = Path(file_path) if file_path is not None else None
        self.strategy = strategy or get_strategy(
            self.settings.default_strategy,
            step_limit_factor=self.settings.step_limit_factor,
        )

        self.grid: Optional[MazeGrid] = None
        self.entry: Optional[Position] = None
        self.exit: Optional[Position] = None

    @classmethod
    def from_text(
        cls,
        maze_text: str,
        strategy: Optional[MazeSolvingStrategy] = None,
        settings: Optional[Settings] = None,
    ) -> "MazeSolver":
        """
        Build a solver over in-memory maze text.

        Raises:
            MazeLoadError: If the text is empty.
            NoEntryOrExitError: If either edge has no opening.
        """
        solver = cls(strategy=strategy, settings=settings)
        solver._use_grid(parse_maze_text(maze_text))
        return solver

    def _use_grid(self, grid: MazeGrid) -> None:
        """Attach a grid and locate its entry and exit."""
        entry, exit = locate_entry_exit(grid)
        self.grid = grid
        self.entry = entry
        self.exit = exit
        logger.debug(
            f"Entry at ({entry.row}, {entry.col}), exit at ({exit.row}, {exit.col})"
        )

    def load_maze(self) -> MazeGrid:
        """
        Load the maze file and locate its entry and exit.

        Returns:
            The loaded grid.

        Raises:
            MazeLoadError: If no file path was given, or the file is
                missing, unreadable, or empty.
            NoEntryOrExitError: If either edge has no opening.
        """
        if self.file_path is None:
            raise MazeLoadError("No maze file path configured")

        self._use_grid(load_maze_file(self.file_path))
        return self.grid

    def display_maze(self) -> None:
        """Log the maze layout."""
        if self.grid is None:
            logger.info("No maze loaded; cannot display.")
            return
        logger.info("Maze Layout:")
        for line in self.grid.render().split("\n"):
            logger.info(line)

    def set_strategy(self, strategy: MazeSolvingStrategy) -> None:
        """Switch the solving strategy at runtime."""
        self.strategy = strategy

    def solve(self) -> MazeSolution:
        """
        Solve the loaded maze.

        Loads the maze file first if nothing is loaded yet.

        Returns:
            MazeSolution with raw moves and the factorized path.

        Raises:
            MazeLoadError: If the maze could not be loaded.
            NoEntryOrExitError: If either edge has no opening.
            MazeUnsolvableError: If the strategy fails to reach the exit.
        """
        if self.grid is None:
            self.load_maze()

        moves = self.strategy.solve(self.grid, self.entry, self.exit)
        path = factorize(moves)
        logger.info(
            f"Solved {self.grid.height}x{self.grid.width} maze with "
            f"'{self.strategy.name}' in {len(moves)} moves"
        )

        return MazeSolution(
            width=self.grid.width,
            height=self.grid.height,
            entry=self.entry,
            exit=self.exit,
            strategy=self.strategy.name,
            moves=moves,
            path=path,
        )

    def solve_maze(self) -> str:
        """Solve the maze and return the rendered factorized path."""
        return self.solve().rendered_path


def solve_maze_file(
    file_path: Path | str,
    strategy_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Load, solve and factorize a maze file in one call.

    Args:
        file_path: Path to the maze file.
        strategy_name: Strategy to use; defaults to the configured one.
        settings: Settings override.

    Returns:
        The factorized path string. Empty when entry and exit coincide.
    """
    settings = settings or get_settings()
    strategy = get_strategy(
        strategy_name or settings.default_strategy,
        step_limit_factor=settings.step_limit_factor,
    )
    solver = MazeSolver(file_path, strategy=strategy, settings=settings)
    return solver.solve_maze()
