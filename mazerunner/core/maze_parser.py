"""
Maze Parser for Maze Runner.

Loads maze text from the filesystem and builds a MazeGrid.

Rows of different lengths are padded on the right with wall characters up
to the widest row, so a reader that trims trailing whitespace can only ever
close cells off, never shift the right edge inwards.
"""

import logging
from pathlib import Path

from .maze_grid import Cell, MazeGrid, MazeLoadError

logger = logging.getLogger(__name__)

PADDING_CHAR = Cell.WALL.value


def split_maze_lines(maze_text: str) -> list[str]:
    """
    Split maze text into rows.

    Rows are separated by "\\n" only, with a trailing "\\r" removed. Other
    control characters stay inside the row and read as walls. Spaces are
    kept, since they are open cells. Empty lines at the end are dropped.
    """
    lines = [line.removesuffix("\r") for line in maze_text.split("\n")]
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def pad_rows(lines: list[str], fill: str = PADDING_CHAR) -> list[str]:
    """Pad every row on the right with `fill` up to the widest row."""
    if not lines:
        return []
    width = max(len(line) for line in lines)
    return [line.ljust(width, fill) for line in lines]


def parse_maze_text(maze_text: str) -> MazeGrid:
    """
    Parse maze text into a grid.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        MazeGrid built from the padded rows.

    Raises:
        MazeLoadError: If the text has no rows or no columns.
    """
    lines = split_maze_lines(maze_text)
    if not lines:
        raise MazeLoadError("Maze text is empty")

    padded = pad_rows(lines)
    if padded != lines:
        logger.debug(f"Padded ragged maze rows to width {len(padded[0])}")

    return MazeGrid.from_lines(padded)


def load_maze_file(file_path: Path | str) -> MazeGrid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        MazeGrid for the file contents.

    Raises:
        MazeLoadError: If the file is missing, unreadable, or empty.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise MazeLoadError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeLoadError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeLoadError(f"Failed to read maze file: {e}") from e

    try:
        grid = parse_maze_text(maze_text)
    except MazeLoadError as e:
        raise MazeLoadError(f"{e}: {file_path}") from e

    logger.info(f"Loaded {grid.height}x{grid.width} maze from {file_path}")
    return grid
