from __future__ import annotations

import enum
from typing import NamedTuple


class Side(enum.Enum):
    WHITE = 1
    BLACK = 2

    @property
    def other(self) -> Side:
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """Row step toward the opponent's back rank."""
        return -1 if self is Side.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Side.WHITE else 7

    def __str__(self) -> str:
        return self.name.capitalize()


class Square(NamedTuple):
    row: int  # 0-indexed, 0 = top (black's back rank)
    col: int  # 0-indexed, 0 = left


class Piece(NamedTuple):
    side: Side
    king: bool = False

    def promoted(self) -> Piece:
        return Piece(self.side, king=True)
