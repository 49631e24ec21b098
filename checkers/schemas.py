from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .board import BOARD_SIZE
from .move import Coordinate, Move


class CoordinateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0, le=BOARD_SIZE - 1)
    col: int = Field(..., ge=0, le=BOARD_SIZE - 1)

    def as_tuple(self) -> Coordinate:
        return (self.row, self.col)


class MoveRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: CoordinateModel
    end: CoordinateModel

    def to_move(self) -> Move:
        return Move(start=self.start.as_tuple(), end=self.end.as_tuple())
