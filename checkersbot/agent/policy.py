"""Difficulty policy: maps an ELO-like rating to a move-selection strategy.

    rating <  400   random
    rating <  800   basic: captures, then promotions, then random
    rating < 1200   intermediate: random among the top-3 heuristic moves
    rating >= 1200  advanced: alpha-beta search, depth 3 (depth 4 from 1600)

The bot always plays black.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Optional

from checkersbot.game.board import Board
from checkersbot.game.rules import Move, apply, moves_for_side
from checkersbot.game.state import CheckersGameState
from checkersbot.game.types import Side

from .base import Agent
from .heuristics import score_move
from .search import INF, minimax

logger = logging.getLogger(__name__)

BOT_SIDE = Side.BLACK

# Tier thresholds (exclusive upper bounds)
RANDOM_MAX = 400
BASIC_MAX = 800
INTERMEDIATE_MAX = 1200

# Advanced tier search depths
SEARCH_DEPTH = 3
DEEP_SEARCH_DEPTH = 4
DEEP_SEARCH_MIN = 1600

# Intermediate tier samples among this many best-scored moves
TOP_CHOICES = 3

# Named strengths offered to players, weakest first
DIFFICULTY_PRESETS: dict[str, int] = {
    "Beginner": 200,
    "Easy": 600,
    "Medium": 1000,
    "Hard": 1400,
    "Expert": 1800,
}

DEFAULT_RATING = DIFFICULTY_PRESETS["Medium"]


class Tier(enum.Enum):
    RANDOM = "random"
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def tier_for_rating(rating: int) -> Tier:
    if rating < RANDOM_MAX:
        return Tier.RANDOM
    if rating < BASIC_MAX:
        return Tier.BASIC
    if rating < INTERMEDIATE_MAX:
        return Tier.INTERMEDIATE
    return Tier.ADVANCED


def search_depth(rating: int) -> int:
    """Search depth used by the advanced tier."""
    return DEEP_SEARCH_DEPTH if rating >= DEEP_SEARCH_MIN else SEARCH_DEPTH


def nearest_preset(rating: int) -> str:
    """Name of the preset closest to `rating` (earlier preset on ties)."""
    return min(DIFFICULTY_PRESETS, key=lambda name: abs(DIFFICULTY_PRESETS[name] - rating))


# ---------------------------------------------------------------------------
# Tier strategies
# ---------------------------------------------------------------------------

def _random_move(moves: list[Move], rng: random.Random) -> Move:
    return rng.choice(moves)


def _basic_move(moves: list[Move], rng: random.Random) -> Move:
    captures = [m for m in moves if m.is_capture]
    if captures:
        return rng.choice(captures)

    promotions = [m for m in moves if m.destination.row == BOT_SIDE.promotion_row]
    if promotions:
        return rng.choice(promotions)

    return rng.choice(moves)


def _intermediate_move(moves: list[Move], rng: random.Random) -> Move:
    ranked = sorted(moves, key=score_move, reverse=True)
    return rng.choice(ranked[:TOP_CHOICES])


def _advanced_move(board: Board, moves: list[Move], depth: int) -> Move:
    best_move = moves[0]
    best_score = -INF
    for move in moves:
        score = minimax(apply(board, move), depth - 1, -INF, INF, False)
        if score > best_score:
            best_score = score
            best_move = move
    logger.debug("Search depth %d picked %s (score %s)", depth, best_move, best_score)
    return best_move


def choose_move(
    board: Board,
    rating: int,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """Pick a move for the black bot at the given strength.

    Returns None when black has no legal move. `rng` drives the random
    tiers; pass a seeded random.Random for reproducible play.
    """
    moves = moves_for_side(board, BOT_SIDE)
    if not moves:
        return None
    if rng is None:
        rng = random.Random()

    tier = tier_for_rating(rating)
    if tier is Tier.RANDOM:
        move = _random_move(moves, rng)
    elif tier is Tier.BASIC:
        move = _basic_move(moves, rng)
    elif tier is Tier.INTERMEDIATE:
        move = _intermediate_move(moves, rng)
    else:
        move = _advanced_move(board, moves, search_depth(rating))

    logger.debug("Rating %d (%s tier) chose %s", rating, tier.value, move)
    return move


class BotAgent(Agent):
    """Black bot playing at a fixed rating."""

    def __init__(self, rating: int = DEFAULT_RATING, rng: Optional[random.Random] = None) -> None:
        self.rating = rating
        self.rng = rng if rng is not None else random.Random()

    @property
    def name(self) -> str:
        return f"BotAgent(elo={self.rating})"

    def select_move(self, game_state: CheckersGameState) -> Optional[Move]:
        if game_state.is_over:
            return None
        return choose_move(game_state.board, self.rating, self.rng)
