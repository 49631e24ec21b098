"""Parsing of typed moves such as ``"a3 b4"``.

Files 'a'..'h' map to columns 0..7 and ranks '1'..'8' map to rows 7..0, so
'a8' is the top-left square (0, 0) and 'h1' the bottom-right one (7, 7).
"""

from __future__ import annotations

from pydantic import ValidationError

from .move import Coordinate
from .schemas import CoordinateModel, MoveRequest


class MoveFormatError(ValueError):
    """Raised when typed input cannot be read as a move."""


def _coordinate_model(token: str) -> CoordinateModel:
    if len(token) != 2:
        raise MoveFormatError(f"Coordinate '{token}' must be a file letter and a rank digit.")
    col = ord(token[0]) - ord("a")
    row = 8 - (ord(token[1]) - ord("0"))
    try:
        return CoordinateModel(row=row, col=col)
    except ValidationError as exc:
        raise MoveFormatError(f"Coordinate '{token}' is not on the board.") from exc


def parse_coordinate(token: str) -> Coordinate:
    return _coordinate_model(token).as_tuple()


def parse_move(line: str) -> MoveRequest:
    tokens = line.split()
    if len(tokens) < 2:
        raise MoveFormatError("Expected two coordinates, e.g. 'a3 b4'.")
    return MoveRequest(start=_coordinate_model(tokens[0]), end=_coordinate_model(tokens[1]))
