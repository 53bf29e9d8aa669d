"""Minimax with alpha-beta pruning. Black maximises, white minimises."""

from __future__ import annotations

import math

from checkersbot.game.board import Board
from checkersbot.game.rules import apply, moves_for_side, winner
from checkersbot.game.types import Side

from .heuristics import score_board

# Terminal scores dominate any heuristic value
WIN_SCORE = 1000

INF = math.inf


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
) -> float:
    """Alpha-beta minimax score of `board`.

    maximizing is True when black is to move. Returns +WIN_SCORE for a black
    win, -WIN_SCORE for a white win, and score_board() at depth 0. A side to
    move with no legal moves loses.
    """
    result = winner(board)
    if result is Side.BLACK:
        return WIN_SCORE
    if result is Side.WHITE:
        return -WIN_SCORE
    if depth == 0:
        return score_board(board)

    side = Side.BLACK if maximizing else Side.WHITE
    moves = moves_for_side(board, side)
    if not moves:
        return -WIN_SCORE if maximizing else WIN_SCORE

    if maximizing:
        best = -INF
        for move in moves:
            score = minimax(apply(board, move), depth - 1, alpha, beta, False)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = INF
    for move in moves:
        score = minimax(apply(board, move), depth - 1, alpha, beta, True)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best
