import random

import pytest

from checkersbot.agent.policy import BotAgent
from checkersbot.game.state import CheckersGameState
from checkersbot.game.types import Side


def play_out(black: BotAgent, seed: int, max_plies: int = 150) -> CheckersGameState:
    """Play a seeded random White against `black` until the game ends or plies run out."""
    g = CheckersGameState()
    rng = random.Random(seed)
    for _ in range(max_plies):
        if g.is_over:
            break
        if g.current_player is Side.WHITE:
            move = rng.choice(g.legal_moves())
        else:
            move = black.select_move(g)
        assert move is not None
        assert move in g.legal_moves()
        g.apply_move(move)
    return g


def test_bot_agent_name():
    assert BotAgent(700).name == "BotAgent(elo=700)"


@pytest.mark.parametrize("rating", [100, 500, 900, 1300])
def test_bot_plays_legal_game_against_random(rating):
    g = play_out(BotAgent(rating, random.Random(4)), seed=4, max_plies=80 if rating >= 1200 else 150)
    total = g.board.count(Side.WHITE) + g.board.count(Side.BLACK)
    assert total <= 24
    if g.is_over:
        assert g.winner in (Side.WHITE, Side.BLACK)
        assert g.legal_moves() == []
