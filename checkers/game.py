from __future__ import annotations

import logging
from typing import Callable, Optional

from .board import Board
from .notation import MoveFormatError, parse_move
from .pieces import Player

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

MOVE_PROMPT = "Enter your move (e.g., 'a3 b4'): "


class Game:
    """Turn loop for two players sharing one console."""

    def __init__(
        self,
        read_line: ReadLine = input,
        write: Write = print,
        board: Optional[Board] = None,
    ) -> None:
        self.read_line = read_line
        self.write = write
        self.board = board if board is not None else Board()
        self.current_player = Player.PLAYER1
        self.winner: Optional[Player] = None

    def reset(self) -> None:
        self.board = Board()
        self.current_player = Player.PLAYER1
        self.winner = None

    def switchTurn(self) -> None:
        self.current_player = self.current_player.opponent

    def displayBoard(self) -> None:
        self.write(self.board.render())

    def runTurn(self) -> bool:
        self.displayBoard()
        self.write(f"Player {self.current_player.number}'s turn:")
        line = self.read_line(MOVE_PROMPT)

        try:
            request = parse_move(line)
        except MoveFormatError as exc:
            logger.debug("Unparseable input %r: %s", line, exc)
            self.write("Invalid move format.")
            return False

        move = request.to_move()
        if not self.board.tryMovePiece(*move.as_args(), self.current_player):
            self.write("Invalid move. Try again.")
            return False

        logger.info("Player %d played %s", self.current_player.number, move)
        self.switchTurn()
        return True

    def start(self) -> Player:
        while not self.board.is_game_over():
            self.runTurn()

        # The side to move when the loop ends is credited with the loss.
        self.winner = self.current_player.opponent
        logger.info("Game over, player %d wins", self.winner.number)
        self.write("Game Over!")
        self.write(f"Player {self.winner.number} wins!")
        return self.winner
