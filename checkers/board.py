from __future__ import annotations

import logging
from typing import Optional

from .pieces import Piece, Player, Rank

logger = logging.getLogger(__name__)

BOARD_SIZE = 8

Square = Optional[Piece]
SquareState = Optional[tuple[str, str]]
BoardState = tuple[tuple[SquareState, ...], ...]

_EMPTY_CELL = " .  "


class Board:
    def __init__(self) -> None:
        self.board: list[list[Square]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.boardSize = BOARD_SIZE
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def to_state(self) -> BoardState:
        return tuple(
            tuple(
                None if piece is None else (piece.owner.value, piece.rank.value)
                for piece in row
            )
            for row in self.board
        )

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        try:
            well_formed = len(state) == BOARD_SIZE and all(len(row) == BOARD_SIZE for row in state)
        except TypeError as exc:
            raise ValueError(f"Board state must be {BOARD_SIZE}x{BOARD_SIZE}.") from exc
        if not well_formed:
            raise ValueError(f"Board state must be {BOARD_SIZE}x{BOARD_SIZE}.")
        board = cls.empty()
        for row, cells in enumerate(state):
            for col, cell in enumerate(cells):
                if cell is None:
                    continue
                try:
                    owner_value, rank_value = cell
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"Square ({row}, {col}) must be None or an (owner, rank) pair.") from exc
                board.board[row][col] = Piece(Player(owner_value), Rank(rank_value))
        return board

    def copy(self) -> "Board":
        new_board = Board.empty()
        # Pieces are immutable, so sharing them between grids is safe.
        new_board.board = [list(row) for row in self.board]
        return new_board

    def getPiece(self, row: int, col: int) -> Square:
        if self._is_within_bounds(row, col):
            return self.board[row][col]
        return None

    def setPiece(self, row: int, col: int, piece: Square) -> None:
        if not self._is_within_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is outside the board.")
        self.board[row][col] = piece

    def getAllPieces(self) -> list[tuple[int, int, Piece]]:
        pieces: list[tuple[int, int, Piece]] = []
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                piece = self.board[row][col]
                if piece is not None:
                    pieces.append((row, col, piece))
        return pieces

    def piece_counts(self) -> dict[Player, int]:
        counts = {Player.PLAYER1: 0, Player.PLAYER2: 0}
        for _, _, piece in self.getAllPieces():
            counts[piece.owner] += 1
        return counts

    def isMoveValid(
        self,
        startRow: int,
        startCol: int,
        endRow: int,
        endCol: int,
        mover: Player,
    ) -> bool:
        return self._rejection_reason(startRow, startCol, endRow, endCol, mover) is None

    def tryMovePiece(
        self,
        startRow: int,
        startCol: int,
        endRow: int,
        endCol: int,
        mover: Player,
    ) -> bool:
        reason = self._rejection_reason(startRow, startCol, endRow, endCol, mover)
        if reason is not None:
            logger.debug(
                "Rejected move (%d, %d) -> (%d, %d) for %s: %s",
                startRow, startCol, endRow, endCol, mover.name, reason,
            )
            return False

        piece = self.board[startRow][startCol]
        self.board[endRow][endCol] = piece
        self.board[startRow][startCol] = None
        self._handle_promotion(piece, endRow, endCol)
        return True

    def is_game_over(self) -> bool:
        counts = self.piece_counts()
        return counts[Player.PLAYER1] == 0 or counts[Player.PLAYER2] == 0

    def render(self) -> str:
        lines = []
        for row in self.board:
            lines.append("".join(_EMPTY_CELL if p is None else f" {p.tag} " for p in row))
        return "\n".join(lines)

    def _rejection_reason(
        self,
        startRow: int,
        startCol: int,
        endRow: int,
        endCol: int,
        mover: Player,
    ) -> Optional[str]:
        if not (self._is_within_bounds(startRow, startCol) and self._is_within_bounds(endRow, endCol)):
            return "out of bounds"

        piece = self.board[startRow][startCol]
        if piece is None:
            return "no piece on the start square"
        if piece.owner != mover:
            return "piece belongs to the opponent"
        if self.board[endRow][endCol] is not None:
            return "destination is occupied"

        row_delta = endRow - startRow
        if abs(endCol - startCol) != 1:
            return "not a single diagonal step"
        if piece.is_king:
            if abs(row_delta) != 1:
                return "not a single diagonal step"
        elif row_delta != mover.forward:
            return "regular pieces only step forward"
        return None

    def _handle_promotion(self, piece: Piece, row: int, col: int) -> Piece:
        if not piece.is_king and row == self._last_row(piece.owner):
            promoted = piece.promote()
            self.board[row][col] = promoted
            logger.debug("Promoted %s piece at (%d, %d) to king", piece.owner.name, row, col)
            return promoted
        return piece

    def _last_row(self, player: Player) -> int:
        return self.boardSize - 1 if player is Player.PLAYER1 else 0

    def _set_start_pieces(self) -> None:
        rows_to_fill = 3

        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 1:
                    if row < rows_to_fill:
                        self.board[row][col] = Piece(Player.PLAYER1)
                    elif row >= self.boardSize - rows_to_fill:
                        self.board[row][col] = Piece(Player.PLAYER2)

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize
