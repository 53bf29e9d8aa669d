"""Tests for the alpha-beta minimax search."""

import math

from boards import make_board, random_playout

from checkersbot.agent.heuristics import score_board
from checkersbot.agent.search import WIN_SCORE, minimax
from checkersbot.game.board import initial_board
from checkersbot.game.rules import apply, moves_for_side, winner
from checkersbot.game.types import Side

INF = math.inf


def plain_minimax(board, depth, maximizing):
    """Exhaustive minimax without pruning, same scoring rules."""
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
    scores = [plain_minimax(apply(board, m), depth - 1, not maximizing) for m in moves]
    return max(scores) if maximizing else min(scores)


class TestTerminalScores:
    def test_black_win_before_depth(self):
        b = make_board({(3, 2): "b"})
        assert minimax(b, 0, -INF, INF, True) == WIN_SCORE
        assert minimax(b, 3, -INF, INF, False) == WIN_SCORE

    def test_white_win_before_depth(self):
        b = make_board({(5, 2): "w"})
        assert minimax(b, 0, -INF, INF, True) == -WIN_SCORE

    def test_depth_zero_uses_board_score(self):
        b = make_board({(5, 2): "b", (6, 1): "w", (1, 2): "w"})
        assert minimax(b, 0, -INF, INF, True) == score_board(b)

    def test_stuck_side_to_move_loses(self):
        # Neither side can move, so winner() reports nothing
        b = make_board({(0, 1): "w", (7, 0): "b"})
        assert minimax(b, 2, -INF, INF, True) == -WIN_SCORE
        assert minimax(b, 2, -INF, INF, False) == WIN_SCORE

    def test_finds_winning_capture(self):
        # Black to move captures the last white piece
        b = make_board({(3, 2): "b", (4, 3): "w", (0, 7): "b"})
        assert minimax(b, 1, -INF, INF, True) == WIN_SCORE


class TestPruningMatchesExhaustive:
    def test_initial_board(self):
        b = initial_board()
        for depth in (1, 2, 3):
            for maximizing in (True, False):
                assert minimax(b, depth, -INF, INF, maximizing) == plain_minimax(b, depth, maximizing)

    def test_sampled_positions(self):
        boards = []
        for seed in range(6):
            positions = random_playout(seed, max_plies=30)
            boards.extend(board for board, _ in positions[10::10])
        assert boards
        for b in boards:
            for maximizing in (True, False):
                assert minimax(b, 3, -INF, INF, maximizing) == plain_minimax(b, 3, maximizing)

    def test_endgame_with_kings(self):
        b = make_board({(2, 1): "B", (3, 4): "b", (5, 2): "W", (6, 5): "w", (5, 6): "w"})
        for depth in (2, 3, 4):
            assert minimax(b, depth, -INF, INF, True) == plain_minimax(b, depth, True)
            assert minimax(b, depth, -INF, INF, False) == plain_minimax(b, depth, False)

    def test_board_not_mutated(self):
        b = initial_board()
        minimax(b, 3, -INF, INF, True)
        assert b == initial_board()
