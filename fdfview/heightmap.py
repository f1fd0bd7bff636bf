"""Loading a height map: rows of space-separated altitudes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from fdfview.chars import atoi
from fdfview.errors import ErrorCode, FdfError
from fdfview.lines import LineReader
from fdfview.printf import format_printf
from fdfview.strops import split


@dataclass(frozen=True)
class Point:
    """A map point: column, row and altitude."""

    x: int
    y: int
    z: int


@dataclass
class HeightMap:
    """A grid of points read from a map file."""

    path: str
    points: list[list[Point]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.points)

    @property
    def cols(self) -> int:
        return len(self.points[0]) if self.points else 0

    def format_raw(self) -> str:
        """Return the altitudes as text, one map row per line."""
        out: list[str] = []
        for row in self.points:
            for point in row:
                out.append(format_printf("%d", point.z))
                out.append(" " if point.z >= 10 or point.z < 0 else "  ")
            out.append("\n")
        return "".join(out)


def _parse_row(line: str, row: int, cols: int) -> list[Point]:
    words = split(line, " ")
    if len(words) < cols:
        raise ValueError(
            f"row {row} has {len(words)} values, expected at least {cols}"
        )
    return [Point(x, row, atoi(word)) for x, word in enumerate(words[:cols])]


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read a map file; the first row fixes the number of columns."""
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise FdfError(ErrorCode.OPEN_FILE) from exc
    with handle:
        lines = list(LineReader(handle))
    if not lines:
        raise FdfError(ErrorCode.EMPTY_FILE)
    cols = len(split(lines[0], " "))
    points = [_parse_row(line, row, cols) for row, line in enumerate(lines)]
    return HeightMap(path=os.fspath(path), points=points)