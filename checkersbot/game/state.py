from __future__ import annotations

import logging
from typing import Optional

from .board import Board, initial_board
from .rules import Move, apply, moves_for_side, winner
from .types import Side, Square

logger = logging.getLogger(__name__)


class CheckersGameState:
    """Game session for one game of draughts. White (the human) moves first."""

    def __init__(self, board: Optional[Board] = None, current_player: Side = Side.WHITE) -> None:
        self.board = board if board is not None else initial_board()
        self.current_player = current_player
        self.last_move: Optional[Move] = None
        self._winner: Optional[Side] = None
        self._is_over = False

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Optional[Side]:
        return self._winner

    def legal_moves(self) -> list[Move]:
        if self._is_over:
            return []
        return moves_for_side(self.board, self.current_player)

    def moves_from(self, square: Square) -> list[Move]:
        """Legal moves for the side to move that start at `square`."""
        return [m for m in self.legal_moves() if m.origin == square]

    def selectable_squares(self) -> set[Square]:
        """Squares holding a piece of the side to move that has a legal move."""
        return {m.origin for m in self.legal_moves()}

    def apply_move(self, move: Move) -> None:
        """Apply a legal move for the current player and pass the turn."""
        assert not self._is_over, "Game is already over"
        assert move in self.legal_moves(), f"{move} is not a legal move"

        self.board = apply(self.board, move)
        self.last_move = move

        result = winner(self.board)
        if result is None and not moves_for_side(self.board, self.current_player.other):
            # Side to move is blocked but the detector saw no winner yet
            result = self.current_player
        if result is not None:
            self._finish(result)
            return

        self.current_player = self.current_player.other

    def resign(self) -> None:
        assert not self._is_over, "Game is already over"
        self._finish(self.current_player.other)

    def _finish(self, result: Side) -> None:
        self._winner = result
        self._is_over = True
        logger.info("Game over: %s wins", result)
