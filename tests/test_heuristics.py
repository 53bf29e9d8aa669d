"""Tests for the move and board heuristics."""

from boards import make_board

from checkersbot.agent.heuristics import score_board, score_move
from checkersbot.game.board import initial_board
from checkersbot.game.rules import Move
from checkersbot.game.types import Square


class TestScoreMove:
    def test_central_step(self):
        # (3,4) is one unit from the centre
        assert score_move(Move(Square(2, 3), Square(3, 4))) == 30

    def test_capture_bonus(self):
        move = Move(Square(2, 3), Square(4, 5), (Square(3, 4),))
        assert score_move(move) == 100 + 25

    def test_edge_penalty(self):
        assert score_move(Move(Square(2, 1), Square(3, 0))) == 15 - 10
        assert score_move(Move(Square(2, 6), Square(3, 7))) == 15 - 10

    def test_promotion_bonus(self):
        assert score_move(Move(Square(6, 1), Square(7, 2))) == 50 + 10

    def test_corner_promotion(self):
        assert score_move(Move(Square(6, 1), Square(7, 0))) == 50 + 0 - 10

    def test_capture_outranks_quiet_move(self):
        capture = Move(Square(2, 1), Square(4, 3), (Square(3, 2),))
        quiet = Move(Square(2, 3), Square(3, 4))
        assert score_move(capture) > score_move(quiet)

    def test_only_looks_at_move(self):
        move = Move(Square(2, 3), Square(3, 4))
        assert score_move(move) == score_move(Move(Square(2, 5), Square(3, 4)))


class TestScoreBoard:
    def test_initial_board_is_balanced(self):
        assert score_board(initial_board()) == 0

    def test_black_man_advancement(self):
        assert score_board(make_board({(5, 2): "b"})) == 10 + 5

    def test_white_man_advancement(self):
        assert score_board(make_board({(6, 1): "w"})) == -(10 + 1)
        assert score_board(make_board({(1, 2): "w"})) == -(10 + 6)

    def test_kings_have_no_advancement(self):
        assert score_board(make_board({(7, 0): "B"})) == 15
        assert score_board(make_board({(0, 1): "W"})) == -15

    def test_sum_of_contributions(self):
        b = make_board({(5, 2): "b", (6, 1): "w", (3, 4): "B"})
        assert score_board(b) == (10 + 5) - (10 + 1) + 15

    def test_material_edge_for_black_is_positive(self):
        b = make_board({(2, 1): "b", (2, 3): "b", (5, 2): "w"})
        assert score_board(b) > 0
