"""Draughts rules: move generation, move application and win detection.

Captures are single hops: a turn never chains more than one jump. Capturing
is compulsory, both per piece and across the whole side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import Board, format_square, is_on_grid
from .types import Piece, Side, Square


@dataclass(frozen=True)
class Move:
    origin: Square
    destination: Square
    captured: tuple[Square, ...] = ()

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{format_square(self.origin)}{sep}{format_square(self.destination)}"


def _directions(piece: Piece) -> list[tuple[int, int]]:
    """Diagonal steps a piece may take: forward only for men, all four for kings."""
    rows = [piece.side.forward]
    if piece.king:
        rows.append(-piece.side.forward)
    # White-forward pair first, then black-forward pair
    rows.sort()
    return [(dr, dc) for dr in rows for dc in (-1, 1)]


# ---------------------------------------------------------------------------
# Move generation
# ---------------------------------------------------------------------------

def moves_for_piece(board: Board, square: Square) -> list[Move]:
    """Legal moves for the piece on `square`; captures only if any exist."""
    piece = board.get(square)
    if piece is None:
        return []

    steps: list[Move] = []
    captures: list[Move] = []
    for dr, dc in _directions(piece):
        adjacent = Square(square.row + dr, square.col + dc)
        if not is_on_grid(adjacent):
            continue
        neighbour = board.get(adjacent)
        if neighbour is None:
            steps.append(Move(square, adjacent))
        elif neighbour.side is not piece.side:
            landing = Square(adjacent.row + dr, adjacent.col + dc)
            if is_on_grid(landing) and board.is_empty(landing):
                captures.append(Move(square, landing, (adjacent,)))

    return captures if captures else steps


def moves_for_side(board: Board, side: Side) -> list[Move]:
    """All legal moves for `side`, with the forced-capture rule applied side-wide."""
    moves: list[Move] = []
    captures: list[Move] = []
    for square, _ in board.pieces(side):
        for move in moves_for_piece(board, square):
            if move.is_capture:
                captures.append(move)
            else:
                moves.append(move)
    return captures if captures else moves


# ---------------------------------------------------------------------------
# Move application
# ---------------------------------------------------------------------------

def apply(board: Board, move: Move) -> Board:
    """Return the board after `move`. The argument board is not modified.

    `move` must come from the move generator for this board; it is not
    validated here.
    """
    piece = board.get(move.origin)
    if piece is None:
        return board.with_changes({})

    if not piece.king and move.destination.row == piece.side.promotion_row:
        piece = piece.promoted()

    changes: dict[Square, Optional[Piece]] = {move.origin: None}
    for square in move.captured:
        changes[square] = None
    changes[move.destination] = piece
    return board.with_changes(changes)


# ---------------------------------------------------------------------------
# Terminal detection
# ---------------------------------------------------------------------------

def winner(board: Board) -> Optional[Side]:
    """Return the winning side, or None if the game is still open.

    A side wins when the opponent has no pieces, or when the opponent has
    no legal moves while it still has some. This does not look at whose
    turn it is.
    """
    if board.count(Side.WHITE) == 0:
        return Side.BLACK
    if board.count(Side.BLACK) == 0:
        return Side.WHITE

    white_moves = moves_for_side(board, Side.WHITE)
    black_moves = moves_for_side(board, Side.BLACK)
    if not white_moves and black_moves:
        return Side.BLACK
    if not black_moves and white_moves:
        return Side.WHITE
    return None
