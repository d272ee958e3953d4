"""
Maze grid model.

Immutable cell grid built once from raw text rows, plus the cardinal
headings and positions used to walk it.

Maze Format:
    # = Wall (impassable)
      = Open path (space)
    Any other character is treated as a wall.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class MazeError(Exception):
    """Base exception for all maze failures."""

    pass


class MazeLoadError(MazeError):
    """Exception raised when a maze cannot be read or has no rows."""

    pass


class NoEntryOrExitError(MazeError):
    """Exception raised when the left or right edge has no open cell."""

    pass


class Cell(Enum):
    """Types of cells in the maze."""
    OPEN = " "
    WALL = "#"

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        """Convert character to Cell. Unknown characters are walls."""
        mapping = {
            " ": cls.OPEN,
            "#": cls.WALL,
        }
        return mapping.get(char, cls.WALL)


class Heading(Enum):
    """Cardinal headings, declared in clockwise order."""
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (drow, dcol) for one step in this heading."""
        deltas = {
            Heading.EAST: (0, 1),
            Heading.SOUTH: (1, 0),
            Heading.WEST: (0, -1),
            Heading.NORTH: (-1, 0),
        }
        return deltas[self]

    @property
    def right(self) -> "Heading":
        """Heading after a 90 degree clockwise turn."""
        order = list(Heading)
        return order[(order.index(self) + 1) % 4]

    @property
    def left(self) -> "Heading":
        """Heading after a 90 degree counter-clockwise turn."""
        order = list(Heading)
        return order[(order.index(self) + 3) % 4]


class Move(Enum):
    """Atomic solver actions. The value is the rendered move code."""
    FORWARD = "F"
    TURN_RIGHT_FORWARD = "R F"
    TURN_LEFT = "L"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """Row/column position in the maze, 0-indexed."""
    row: int
    col: int

    def step(self, heading: Heading) -> "Position":
        """Return the adjacent position in the given heading."""
        drow, dcol = heading.delta
        return Position(self.row + drow, self.col + dcol)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


class MazeGrid:
    """
    Read-only maze grid.

    The column bound is the length of row 0. Cells missing from a shorter
    row read as walls, so ragged input never raises on lookup.

    Example usage:
        grid = MazeGrid.from_lines(["# #", "   ", "# #"])
        grid.is_open(1, 1)   # True
        grid.is_open(0, 0)   # False
        grid.is_open(-1, 5)  # False (out of bounds)
    """

    def __init__(self, rows: Sequence[Sequence[Cell]]):
        """
        Initialize grid from rows of cells.

        Args:
            rows: Rows of Cell values. Must contain at least one non-empty row.

        Raises:
            MazeLoadError: If there are no rows or the first row is empty.
        """
        if not rows:
            raise MazeLoadError("Maze has no rows")
        if not rows[0]:
            raise MazeLoadError("Maze has no columns")

        self._rows: tuple[tuple[Cell, ...], ...] = tuple(tuple(row) for row in rows)
        self.height: int = len(self._rows)
        self.width: int = len(self._rows[0])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MazeGrid":
        """Build a grid from text rows."""
        return cls([[Cell.from_char(char) for char in line] for line in lines])

    @property
    def area(self) -> int:
        """Number of cells inside the grid bounds."""
        return self.height * self.width

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position. Out of bounds = wall."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            return Cell.WALL
        cells = self._rows[row]
        if col >= len(cells):
            return Cell.WALL
        return cells[col]

    def is_open(self, row: int, col: int) -> bool:
        """Check if the cell is inside the grid and open."""
        return self.get_cell(row, col) == Cell.OPEN

    def walk(
        self,
        start: Position,
        moves: Iterable[Move],
        heading: Heading = Heading.EAST,
    ) -> Position:
        """
        Replay a move sequence from a start position.

        Args:
            start: Position to start from.
            moves: Moves to apply in order.
            heading: Initial heading.

        Returns:
            Final position after all moves.

        Raises:
            ValueError: If a move steps onto a wall or out of bounds.
        """
        position = start
        for index, move in enumerate(moves):
            if move == Move.TURN_LEFT:
                heading = heading.left
                continue
            if move == Move.TURN_RIGHT_FORWARD:
                heading = heading.right
            position = position.step(heading)
            if not self.is_open(position.row, position.col):
                raise ValueError(
                    f"Move {index} ({move.value}) leads into a wall at "
                    f"({position.row}, {position.col})"
                )
        return position

    def render(self) -> str:
        """Render the grid as text, one line per row."""
        return "\n".join(
            "".join(cell.value for cell in row) for row in self._rows
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"MazeGrid(height={self.height}, width={self.width})"


def locate_entry_exit(grid: MazeGrid) -> tuple[Position, Position]:
    """
    Find the entry on the left edge and the exit on the right edge.

    Rows are scanned top to bottom and the first open cell on each edge
    wins; later openings on the same edge are ignored.

    Args:
        grid: Maze grid to scan.

    Returns:
        Tuple of (entry, exit) positions.

    Raises:
        NoEntryOrExitError: If either edge has no open cell.
    """
    exit_col = grid.width - 1
    entry_row = next(
        (row for row in range(grid.height) if grid.is_open(row, 0)), None
    )
    exit_row = next(
        (row for row in range(grid.height) if grid.is_open(row, exit_col)), None
    )

    if entry_row is None:
        raise NoEntryOrExitError("Maze has no open cell on the left edge (entry)")
    if exit_row is None:
        raise NoEntryOrExitError("Maze has no open cell on the right edge (exit)")

    return Position(entry_row, 0), Position(exit_row, exit_col)
