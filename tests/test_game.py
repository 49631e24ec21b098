from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.board import Board  # noqa: E402
from checkers.game import Game  # noqa: E402
from checkers.pieces import Piece, Player, Rank  # noqa: E402


class ScriptedConsole:
    """Feeds canned lines to the game and records everything it writes."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


def make_game(lines: list[str], board: Board | None = None) -> tuple[Game, ScriptedConsole]:
    console = ScriptedConsole(lines)
    return Game(read_line=console.read_line, write=console.write, board=board), console


class RunTurnTests(unittest.TestCase):
    def test_player1_moves_first(self) -> None:
        game, console = make_game(["b6 a5"])
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertTrue(game.runTurn())
        self.assertIn("Player 1's turn:", console.output)
        self.assertEqual(game.current_player, Player.PLAYER2)
        self.assertEqual(game.board.getPiece(3, 0), Piece(Player.PLAYER1))

    def test_board_rendered_before_prompt(self) -> None:
        game, console = make_game(["b6 a5"])
        expected = game.board.render()
        game.runTurn()
        self.assertEqual(console.output[0], expected)
        self.assertEqual(len(console.prompts), 1)

    def test_malformed_input_keeps_turn(self) -> None:
        game, console = make_game(["a3", "z9 a1", ""])
        before = game.board.to_state()
        for _ in range(3):
            self.assertFalse(game.runTurn())
        self.assertEqual(console.output.count("Invalid move format."), 3)
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertEqual(game.board.to_state(), before)

    def test_illegal_move_keeps_turn(self) -> None:
        game, console = make_game(["b6 b5"])
        before = game.board.to_state()
        self.assertFalse(game.runTurn())
        self.assertIn("Invalid move. Try again.", console.output)
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertEqual(game.board.to_state(), before)

    def test_opening_scenario(self) -> None:
        game, console = make_game(["c3 b4", "a3 b4", "b6 a5", "a3 b4"])

        self.assertFalse(game.runTurn())
        self.assertFalse(game.runTurn())
        self.assertEqual(console.output.count("Invalid move. Try again."), 2)
        self.assertEqual(game.current_player, Player.PLAYER1)

        self.assertTrue(game.runTurn())
        self.assertEqual(game.current_player, Player.PLAYER2)

        self.assertTrue(game.runTurn())
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertEqual(game.board.getPiece(4, 1), Piece(Player.PLAYER2))
        self.assertIsNone(game.board.getPiece(5, 0))
        self.assertIn("Player 2's turn:", console.output)

    def test_switch_turn_alternates(self) -> None:
        game, _ = make_game([])
        game.switchTurn()
        self.assertEqual(game.current_player, Player.PLAYER2)
        game.switchTurn()
        self.assertEqual(game.current_player, Player.PLAYER1)


class StartTests(unittest.TestCase):
    def test_finished_board_announces_winner_without_prompting(self) -> None:
        board = Board.empty()
        board.setPiece(0, 1, Piece(Player.PLAYER1))
        game, console = make_game([], board=board)
        winner = game.start()
        self.assertEqual(console.prompts, [])
        self.assertEqual(console.output, ["Game Over!", "Player 2 wins!"])
        self.assertEqual(winner, Player.PLAYER2)
        self.assertEqual(game.winner, Player.PLAYER2)

    def test_winner_is_opponent_of_player_to_move(self) -> None:
        board = Board.empty()
        board.setPiece(5, 0, Piece(Player.PLAYER2))
        game, console = make_game([], board=board)
        game.current_player = Player.PLAYER2
        self.assertEqual(game.start(), Player.PLAYER1)
        self.assertEqual(console.output[-1], "Player 1 wins!")

    def test_loop_keeps_prompting_until_input_runs_out(self) -> None:
        game, console = make_game(["b6 a5", "oops", "a3 b4"])
        with self.assertRaises(EOFError):
            game.start()
        self.assertEqual(len(console.prompts), 4)
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertIsNone(game.winner)

    def test_reset_restores_initial_state(self) -> None:
        game, _ = make_game(["b6 a5"])
        game.runTurn()
        game.board.setPiece(4, 3, Piece(Player.PLAYER1, Rank.KING))
        game.winner = Player.PLAYER1
        game.reset()
        self.assertEqual(game.board.to_state(), Board().to_state())
        self.assertEqual(game.current_player, Player.PLAYER1)
        self.assertIsNone(game.winner)


if __name__ == "__main__":
    unittest.main()
