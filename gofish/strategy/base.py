"""Base turn policy class.

Defines the interface that all automated players must implement.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gofish.models.card import Rank
from gofish.models.player import Player

if TYPE_CHECKING:
    from gofish.game.engine import Game


class TurnPolicy(ABC):
    """Abstract base class for turn policies.

    A policy is bound to one player of one game. On its turn the game
    calls `tick()`, which picks a rank and an opponent and asks.
    """

    def __init__(self, player: Player, game: Game, rng: random.Random | None = None):
        """Initialize policy.

        Args:
            player: Player this policy moves for
            game: Game the player sits in
            rng: Random source (defaults to the game's)
        """
        self.player = player
        self.game = game
        self.rng = rng or game.rng

    @abstractmethod
    def select_rank(self) -> Rank:
        """Select the rank to ask for.

        Returns:
            Rank to request
        """
        pass

    @abstractmethod
    def select_opponent(self) -> int:
        """Select the player to ask.

        Returns:
            Index of another player in the game
        """
        pass

    def tick(self) -> None:
        """Play one turn by asking the selected opponent for the selected rank."""
        rank = self.select_rank()
        opponent = self.select_opponent()
        self.game.ask(self.player, opponent, rank)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(player={self.player.name!r})"
