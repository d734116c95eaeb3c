"""Simple automated player.

Strategy:
- Rank: the one the player holds most of, lowest rank on ties
- Opponent: uniformly random among the other players, optionally
  restricted to players who still hold cards
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from gofish.models.card import Rank
from gofish.models.player import Player
from gofish.strategy.base import TurnPolicy

if TYPE_CHECKING:
    from gofish.game.engine import Game


class LargestGroupPolicy(TurnPolicy):
    """Ask a random opponent for the rank with the most cards in hand."""

    def __init__(
        self,
        player: Player,
        game: Game,
        rng: random.Random | None = None,
        consider_only_askable: bool = False,
    ):
        """Initialize policy.

        Args:
            player: Player this policy moves for
            game: Game the player sits in
            rng: Random source (defaults to the game's)
            consider_only_askable: Skip opponents with an empty hand. When
                nobody can be asked, any other player is picked.
        """
        super().__init__(player, game, rng)
        self.consider_only_askable = consider_only_askable

    def select_rank(self) -> Rank:
        best_rank = Rank(0)
        best_count = 0
        for rank, count in self.player.hand.rank_counts().items():
            if count > best_count:
                best_rank = rank
                best_count = count
        return best_rank

    def select_opponent(self) -> int:
        if self.consider_only_askable:
            candidates = [
                p.player_index
                for p in self.game.players
                if p.player_index != self.player.player_index and p.can_be_asked()
            ]
            if candidates:
                return self.rng.choice(candidates)

        # Re-sample until we hit someone other than ourselves
        num_players = self.game.num_players
        while True:
            index = self.rng.randrange(num_players)
            if index != self.player.player_index:
                return index
