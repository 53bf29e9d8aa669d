from __future__ import annotations

import abc
from typing import Optional

from checkersbot.game.rules import Move
from checkersbot.game.state import CheckersGameState


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game_state: CheckersGameState) -> Optional[Move]:
        """Return the move this agent wants to play, or None if it has none."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
