from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"

    @property
    def number(self) -> int:
        return 1 if self is Player.PLAYER1 else 2

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1

    @property
    def forward(self) -> int:
        """Row direction a regular piece of this player advances in."""
        return 1 if self is Player.PLAYER1 else -1


class Rank(Enum):
    REGULAR = "regular"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    owner: Player
    rank: Rank = Rank.REGULAR

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promote(self) -> "Piece":
        if self.is_king:
            return self
        return Piece(self.owner, Rank.KING)

    @property
    def tag(self) -> str:
        return f"P{self.owner.number}"

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "R"
        return f"{piece_type}({self.owner.name})"
