from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate

    def as_args(self) -> tuple[int, int, int, int]:
        return (*self.start, *self.end)

    def __str__(self) -> str:
        return f"{to_algebraic(self.start)} - {to_algebraic(self.end)}"


def to_algebraic(coord: Coordinate) -> str:
    """(0, 0) is 'a8', (7, 7) is 'h1'."""
    row, col = coord
    return f"{chr(ord('a') + col)}{8 - row}"
