from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .disk import Disk, disk_symbol

Coord = Tuple[int, int]  # (x, y): x is the column, y is the row
Cell = Optional[Disk]
Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class Board:
    """Represents the grid of disks, row-major. Out-of-range reads are never an error."""
    rows: Tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Cell]]) -> 'Board':
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def empty(cls, width: int, height: int) -> 'Board':
        return cls(tuple(tuple(None for _ in range(width)) for _ in range(height)))

    @classmethod
    def standard(cls, width: int = 8, height: int = 8) -> 'Board':
        """Creates a board with the four centre cells filled and everything else empty."""
        if width < 2 or height < 2 or width % 2 or height % 2:
            raise ValueError("Board sides must be even numbers >= 2")
        cx, cy = width // 2, height // 2
        return cls.empty(width, height).with_disks(
            Disk.LIGHT, [(cx - 1, cy - 1), (cx, cy)]
        ).with_disks(
            Disk.DARK, [(cx, cy - 1), (cx - 1, cy)]
        )

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def contains(self, x: int, y: int) -> bool:
        """True when (x, y) addresses a real cell. Ragged rows are honoured."""
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def disk_at(self, x: int, y: int) -> Cell:
        """Gets the disk at (x, y); None for an empty cell or an out-of-range coordinate."""
        if not self.contains(x, y):
            return None
        return self.rows[y][x]

    def coords(self) -> Iterator[Coord]:
        """Iterates over all in-range coordinates, row by row."""
        for y, row in enumerate(self.rows):
            for x in range(len(row)):
                yield (x, y)

    def count_disks(self, disk: Disk) -> int:
        return sum(1 for row in self.rows for cell in row if cell is disk)

    def has_shape(self, width: int, height: int) -> bool:
        return len(self.rows) == height and all(len(row) == width for row in self.rows)

    def with_disks(self, disk: Disk, coords: Iterable[Coord]) -> 'Board':
        """Returns a new board with every coordinate in `coords` set to `disk`."""
        grid: List[List[Cell]] = [list(row) for row in self.rows]
        for x, y in coords:
            if not self.contains(x, y):
                raise IndexError(f"({x}, {y}) is outside the board")
            grid[y][x] = disk
        return Board.from_rows(grid)

    def pretty(self, highlight: Iterable[Coord] = ()) -> str:
        """Generates a human-readable rendering with column and row labels."""
        marks = set(highlight)
        lines: List[str] = ["   " + " ".join(str(x % 10) for x in range(self.width))]
        for y, row in enumerate(self.rows):
            cells: List[str] = []
            for x, cell in enumerate(row):
                if cell is None and (x, y) in marks:
                    cells.append("*")
                elif cell is None:
                    cells.append(".")
                else:
                    cells.append(disk_symbol(cell))
            lines.append(f"{y:>2} " + " ".join(cells))
        return "\n".join(lines)
