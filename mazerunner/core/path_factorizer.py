"""Run-length compression of raw move sequences."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .maze_grid import Move

Token = Union[Move, str]


def token_code(token: Token) -> str:
    """Move code for a token, so `Move.FORWARD` and `"F"` compare equal."""
    return token.value if isinstance(token, Move) else token


@dataclass(frozen=True)
class PathRun:
    """A maximal run of one repeated move."""
    count: int
    token: Token

    @property
    def code(self) -> str:
        """Rendered move code, without count."""
        return token_code(self.token)

    def render(self) -> str:
        """Render as `<count><code>`, or the bare code for a single move."""
        return f"{self.count}{self.code}" if self.count > 1 else self.code


@dataclass(frozen=True)
class FactorizedPath:
    """Run-length encoded move sequence."""
    runs: tuple[PathRun, ...] = ()

    def render(self) -> str:
        """Space-separated runs, e.g. `3F R F 2L`."""
        return " ".join(run.render() for run in self.runs)

    def expand(self) -> list[Token]:
        """Expand back into the raw token sequence."""
        return [run.token for run in self.runs for _ in range(run.count)]

    @property
    def move_count(self) -> int:
        """Number of raw moves represented."""
        return sum(run.count for run in self.runs)

    def __iter__(self) -> Iterator[PathRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __str__(self) -> str:
        return self.render()


def factorize(tokens: Iterable[Token]) -> FactorizedPath:
    """
    Group consecutive identical tokens into runs.

    Tokens are compared by move code, and each run keeps its first token.

    Args:
        tokens: Moves, or move codes as strings.

    Returns:
        FactorizedPath with one run per maximal block of equal tokens.
    """
    runs: list[PathRun] = []
    previous = None
    count = 0

    for token in tokens:
        if count and token_code(token) == token_code(previous):
            count += 1
            continue
        if count:
            runs.append(PathRun(count, previous))
        previous = token
        count = 1

    if count:
        runs.append(PathRun(count, previous))

    return FactorizedPath(tuple(runs))


def factorize_raw_path(path: str) -> str:
    """
    Factorize a space-separated raw path string.

    Each whitespace-separated word is one token, so `"F F F R R F F"`
    becomes `"3F 2R 2F"`.
    """
    return factorize(path.split()).render()
