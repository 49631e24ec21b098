"""Console checkers engine package."""

from .board import BOARD_SIZE, Board
from .game import Game
from .move import Coordinate, Move
from .notation import MoveFormatError, parse_coordinate, parse_move
from .pieces import Piece, Player, Rank
from .schemas import CoordinateModel, MoveRequest

__all__ = [
	"BOARD_SIZE",
	"Board",
	"Game",
	"Move",
	"Coordinate",
	"MoveFormatError",
	"parse_coordinate",
	"parse_move",
	"Piece",
	"Player",
	"Rank",
	"CoordinateModel",
	"MoveRequest",
]
