"""Tests for the maze solver facade."""

import logging

import pytest

from mazerunner.core.maze_grid import MazeLoadError, NoEntryOrExitError, Position
from mazerunner.core.maze_solver import MazeSolution, MazeSolver, solve_maze_file
from mazerunner.core.strategies import MazeUnsolvableError, RightHandRuleStrategy

from .conftest import CROSS_MAZE, MAZES_DIR, NO_OPENING_MAZE, WALLED_OFF_MAZE


class TestLoadMaze:
    """Tests for loading through the facade."""

    def test_load_valid_maze(self, maze_file, settings):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        grid = solver.load_maze()

        assert grid is solver.grid
        assert solver.entry == Position(1, 0)
        assert solver.exit == Position(1, 2)

    def test_load_missing_file(self, settings):
        solver = MazeSolver("fake/path/doesNotExist.txt", settings=settings)

        with pytest.raises(MazeLoadError):
            solver.load_maze()

    def test_load_without_path(self, settings):
        with pytest.raises(MazeLoadError, match="No maze file path"):
            MazeSolver(settings=settings).load_maze()

    def test_load_all_walled(self, maze_file, settings):
        solver = MazeSolver(maze_file(NO_OPENING_MAZE), settings=settings)

        with pytest.raises(NoEntryOrExitError):
            solver.load_maze()
        assert solver.grid is None

    def test_display_maze_logs_layout(self, maze_file, settings, caplog):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        solver.load_maze()

        with caplog.at_level(logging.INFO, logger="mazerunner.core.maze_solver"):
            solver.display_maze()

        messages = [
            r.getMessage()
            for r in caplog.records
            if r.name == "mazerunner.core.maze_solver"
        ]
        assert messages == ["Maze Layout:", "# #", "   ", "# #"]

    def test_display_without_maze(self, settings, caplog):
        with caplog.at_level(logging.INFO, logger="mazerunner.core.maze_solver"):
            MazeSolver(settings=settings).display_maze()

        assert "No maze loaded" in caplog.text


class TestSolveMaze:
    """Tests for the load -> locate -> solve -> factorize pipeline."""

    def test_solve_simple_maze(self, maze_file, settings):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        assert solver.solve_maze() == "F R F 2L F R F"

    def test_solve_loads_on_demand(self, maze_file, settings):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        solution = solver.solve()

        assert isinstance(solution, MazeSolution)
        assert solution.width == 3
        assert solution.height == 3
        assert solution.entry == Position(1, 0)
        assert solution.exit == Position(1, 2)
        assert solution.strategy == "right-hand"
        assert solution.path.move_count == len(solution.moves) == 6

    def test_solution_replays_to_exit(self, maze_file, settings):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        solution = solver.solve()

        assert solver.grid.walk(solution.entry, solution.moves) == solution.exit

    def test_unsolvable_maze(self, maze_file, settings):
        solver = MazeSolver(maze_file(WALLED_OFF_MAZE), settings=settings)

        with pytest.raises(MazeUnsolvableError):
            solver.solve_maze()

    def test_missing_file_short_circuits(self, settings):
        with pytest.raises(MazeLoadError):
            MazeSolver("nope.txt", settings=settings).solve_maze()

    def test_single_cell_maze_gives_empty_path(self, maze_file, settings):
        solver = MazeSolver(maze_file(" "), settings=settings)
        assert solver.solve_maze() == ""

    def test_single_row_maze(self, maze_file, settings):
        solver = MazeSolver(maze_file("   "), settings=settings)
        assert solver.solve_maze() == "2F"

    def test_open_room_terminates(self, maze_file, settings):
        solver = MazeSolver(maze_file("   \n   \n   \n"), settings=settings)
        assert solver.solve_maze() == "R F F L 2F L 2F"

    def test_bundled_mazes(self, settings):
        solver = MazeSolver(MAZES_DIR / "small.txt", settings=settings)
        assert solver.solve_maze() == "F R F F L 2F R F F R F F 2L 3F"

        solver = MazeSolver(MAZES_DIR / "straight.txt", settings=settings)
        assert solver.solve_maze() == "6F"

    def test_grid_reused_across_solves(self, maze_file, settings):
        solver = MazeSolver(maze_file(CROSS_MAZE), settings=settings)
        first = solver.solve_maze()
        grid = solver.grid

        assert solver.solve_maze() == first
        assert solver.grid is grid

    def test_set_strategy(self, maze_file, settings):
        solver = MazeSolver(maze_file(WALLED_OFF_MAZE), settings=settings)
        solver.set_strategy(RightHandRuleStrategy(step_limit_factor=3))

        with pytest.raises(MazeUnsolvableError) as exc_info:
            solver.solve()
        assert exc_info.value.step_limit == 27

    def test_settings_control_step_limit(self, maze_file, settings):
        settings.step_limit_factor = 4
        solver = MazeSolver(maze_file(WALLED_OFF_MAZE), settings=settings)

        with pytest.raises(MazeUnsolvableError) as exc_info:
            solver.solve()
        assert exc_info.value.step_limit == 36


class TestFromText:
    """Tests for solving in-memory maze text."""

    def test_from_text(self, settings):
        solver = MazeSolver.from_text(CROSS_MAZE, settings=settings)
        assert solver.solve_maze() == "F R F 2L F R F"

    def test_from_text_no_entry(self, settings):
        with pytest.raises(NoEntryOrExitError):
            MazeSolver.from_text(NO_OPENING_MAZE, settings=settings)

    def test_from_text_empty(self, settings):
        with pytest.raises(MazeLoadError):
            MazeSolver.from_text("", settings=settings)


class TestSolveMazeFile:
    """Tests for the one-call entry point."""

    def test_solve_maze_file(self, maze_file, settings):
        assert solve_maze_file(maze_file(CROSS_MAZE), settings=settings) == "F R F 2L F R F"

    def test_unknown_strategy_uses_right_hand(self, maze_file, settings):
        path = solve_maze_file(maze_file(CROSS_MAZE), "wall-less", settings=settings)
        assert path == "F R F 2L F R F"

    def test_errors_propagate(self, maze_file, settings):
        with pytest.raises(NoEntryOrExitError):
            solve_maze_file(maze_file(NO_OPENING_MAZE), settings=settings)
        with pytest.raises(MazeUnsolvableError):
            solve_maze_file(maze_file(WALLED_OFF_MAZE), settings=settings)
