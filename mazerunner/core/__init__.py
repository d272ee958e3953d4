# Core module
from .maze_grid import (
    Cell,
    Heading,
    MazeError,
    MazeGrid,
    MazeLoadError,
    Move,
    NoEntryOrExitError,
    Position,
    locate_entry_exit,
)
from .maze_parser import load_maze_file, pad_rows, parse_maze_text
from .path_factorizer import FactorizedPath, PathRun, factorize, factorize_raw_path
from .strategies import (
    MazeSolvingStrategy,
    MazeUnsolvableError,
    RightHandRuleStrategy,
    available_strategies,
    get_strategy,
)
from .maze_solver import MazeSolution, MazeSolver, solve_maze_file

__all__ = [
    "Cell",
    "Heading",
    "MazeError",
    "MazeGrid",
    "MazeLoadError",
    "Move",
    "NoEntryOrExitError",
    "Position",
    "locate_entry_exit",
    "load_maze_file",
    "pad_rows",
    "parse_maze_text",
    "FactorizedPath",
    "PathRun",
    "factorize",
    "factorize_raw_path",
    "MazeSolvingStrategy",
    "MazeUnsolvableError",
    "RightHandRuleStrategy",
    "available_strategies",
    "get_strategy",
    "MazeSolution",
    "MazeSolver",
    "solve_maze_file",
]
