"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from mazerunner.config import Settings
from mazerunner.main import app

MAZES_DIR = Path(__file__).resolve().parent.parent / "mazes"

# Middle row open, corners walled
CROSS_MAZE = "# #\n   \n# #\n"

# Left and right edges open, solid wall in between
WALLED_OFF_MAZE = "  #\n###\n#  \n"

NO_OPENING_MAZE = "###\n###\n###\n"


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(
        _env_file=None,
        default_strategy="right-hand",
        step_limit_factor=2,
        log_level="INFO",
    )


@pytest.fixture
def maze_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing maze text to a temporary file."""

    def _write(content: str, filename: str = "maze.txt") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
