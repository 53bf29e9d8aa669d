"""Static heuristics: per-move scoring for the lower bot tiers and
per-position scoring for search leaves.

Board scores are from black's viewpoint: positive = BLACK advantage.
"""

from __future__ import annotations

from checkersbot.game.board import BOARD_SIZE, Board
from checkersbot.game.rules import Move
from checkersbot.game.types import Side

# ---------------------------------------------------------------------------
# Move scoring weights
# ---------------------------------------------------------------------------

CAPTURE_BONUS = 100
PROMOTION_BONUS = 50     # destination on black's far rank
CENTER_WEIGHT = 5        # per unit of Manhattan distance closer to the centre
EDGE_PENALTY = 10        # destination on the leftmost or rightmost file

CENTER = (BOARD_SIZE - 1) / 2
MAX_CENTER_DISTANCE = BOARD_SIZE - 1

# ---------------------------------------------------------------------------
# Board scoring weights
# ---------------------------------------------------------------------------

MAN_VALUE = 10
KING_VALUE = 15


def score_move(move: Move) -> float:
    """Heuristic value of a single move for the black bot. Higher is better."""
    dest = move.destination
    score = 0.0

    score += CAPTURE_BONUS * len(move.captured)

    if dest.row == Side.BLACK.promotion_row:
        score += PROMOTION_BONUS

    center_distance = abs(dest.col - CENTER) + abs(dest.row - CENTER)
    score += (MAX_CENTER_DISTANCE - center_distance) * CENTER_WEIGHT

    if dest.col == 0 or dest.col == BOARD_SIZE - 1:
        score -= EDGE_PENALTY

    return score


def score_board(board: Board) -> int:
    """Material plus advancement. Positive favours BLACK, negative WHITE."""
    score = 0
    for square, piece in board.pieces():
        if piece.king:
            value = KING_VALUE
        elif piece.side is Side.BLACK:
            value = MAN_VALUE + square.row
        else:
            value = MAN_VALUE + (BOARD_SIZE - 1 - square.row)

        if piece.side is Side.BLACK:
            score += value
        else:
            score -= value
    return score
