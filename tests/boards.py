from __future__ import annotations

import random

from checkersbot.game.board import Board, initial_board
from checkersbot.game.rules import apply, moves_for_side
from checkersbot.game.types import Piece, Side, Square


def make_board(pieces: dict[tuple[int, int], str]) -> Board:
    """Build a board from {(row, col): code}; codes are w, W, b, B (upper = king)."""
    sides = {"w": Side.WHITE, "b": Side.BLACK}
    return Board.from_pieces(
        {
            Square(*rc): Piece(sides[code.lower()], king=code.isupper())
            for rc, code in pieces.items()
        }
    )


def random_playout(seed: int, max_plies: int = 60) -> list[tuple[Board, Side]]:
    """Positions (with side to move) visited by a seeded random game from the start."""
    rng = random.Random(seed)
    board = initial_board()
    side = Side.WHITE
    positions = []
    for _ in range(max_plies):
        positions.append((board, side))
        moves = moves_for_side(board, side)
        if not moves:
            break
        board = apply(board, rng.choice(moves))
        side = side.other
    return positions


def sample_positions(seeds: range = range(8)) -> list[tuple[Board, Side]]:
    positions = []
    for seed in seeds:
        positions.extend(random_playout(seed))
    return positions
