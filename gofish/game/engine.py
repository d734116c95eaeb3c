"""Game engine for Go Fish."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from gofish.config import Config
from gofish.logging import GameLogger
from gofish.models.card import Card, Rank, make_standard_deck, shuffle
from gofish.models.game_state import AskResult, GameState, GameStatus
from gofish.models.hand import Book
from gofish.models.player import Player
from gofish.strategy.simple import LargestGroupPolicy
from gofish.utils.logger import GameDisplay

from .errors import ConfigurationError, ProtocolError

if TYPE_CHECKING:
    from gofish.strategy.base import TurnPolicy

logger = logging.getLogger(__name__)


class Game:
    """Go Fish game engine.

    Owns the players, the pool and the turn bookkeeping. Play advances one
    ask per `tick()`; a player without a turn policy suspends the game
    (`waiting`) until `ask()` is called on its behalf.
    """

    def __init__(
        self,
        names: list[str],
        config: Config | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Create players, shuffle and deal.

        Args:
            names: Player names in seat order.
            config: Configuration (uses defaults if not provided)
            rng: Random source for shuffling and AI decisions. Built from
                `config.game.seed` if omitted.
            game_logger: GameLogger instance for detailed logging

        Raises:
            ConfigurationError: If the number of players is out of range.
        """
        self.config = config or Config()
        self.rules = self.config.game
        self.game_logger = game_logger

        num_players = len(names)
        if not self.rules.min_players <= num_players <= self.rules.max_players:
            raise ConfigurationError(
                f"Only {self.rules.min_players}-{self.rules.max_players} players allowed, "
                f"got {num_players}"
            )

        self.rng = rng or random.Random(self.rules.seed)
        self.state = GameState()
        self._players = [Player(player_index=i, name=name) for i, name in enumerate(names)]
        self._pool: list[Card] = []

        self._on_ask: Callable[[AskResult], None] | None = None
        self._on_book: Callable[[Player, Book], None] | None = None
        self._on_game_end: Callable[[list[tuple[int, Player]]], None] | None = None

        self._deal_cards()

        if self.game_logger:
            self.game_logger.log_game_start(self._players, len(self._pool), self.rules.seed)

    def _deal_cards(self) -> None:
        """Shuffle, deal from the end of the deck and keep the rest as pool."""
        deck = make_standard_deck()
        shuffle(deck, self.rng)

        cards_per_player = self.rules.cards_for(len(self._players))
        for player in self._players:
            for _ in range(cards_per_player):
                player.add_card(deck.pop())
            for book in player.check_books():
                logger.info(f"{player.name} was dealt a book of {book.rank.name}")

        self._pool = deck
        logger.debug(
            f"Dealt {cards_per_player} cards to {len(self._players)} players, "
            f"{len(self._pool)} left in pool"
        )

    def set_callbacks(
        self,
        on_ask: Callable[[AskResult], None] | None = None,
        on_book: Callable[[Player, Book], None] | None = None,
        on_game_end: Callable[[list[tuple[int, Player]]], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_ask: Called after every ask with its outcome
            on_book: Called for each book formed during play (player, book)
            on_game_end: Called once when the last hand empties (ranking)
        """
        self._on_ask = on_ask
        self._on_book = on_book
        self._on_game_end = on_game_end

    def attach_ai(
        self,
        player: Player,
        consider_only_askable: bool | None = None,
    ) -> TurnPolicy:
        """Give a player the default automated policy.

        Args:
            player: Player of this game.
            consider_only_askable: Overrides `config.policy` when given.

        Returns:
            The attached policy.
        """
        if consider_only_askable is None:
            consider_only_askable = self.config.policy.consider_only_askable
        policy = LargestGroupPolicy(
            player,
            self,
            rng=self.rng,
            consider_only_askable=consider_only_askable,
        )
        player.set_ai(policy)
        return policy

    @property
    def players(self) -> list[Player]:
        """Get players in seat order."""
        return list(self._players)

    @property
    def num_players(self) -> int:
        return len(self._players)

    @property
    def active_player_index(self) -> int:
        return self.state.active_player_index

    @property
    def active_player(self) -> Player:
        return self._players[self.state.active_player_index]

    @property
    def waiting(self) -> bool:
        """True while a manual player's move is pending."""
        return self.state.waiting

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    def pool_is_empty(self) -> bool:
        """Check if there is nothing left to draw."""
        return len(self._pool) == 0

    def check_game_ended(self) -> bool:
        """Check if every hand is empty."""
        return all(p.card_count == 0 for p in self._players)

    @property
    def status(self) -> GameStatus:
        return GameStatus.ENDED if self.check_game_ended() else GameStatus.RUNNING

    def tick(self) -> None:
        """Advance the game by one turn, unless the active player is manual.

        Does nothing once the game has ended.
        """
        if self.check_game_ended():
            return

        self.state.tick_count += 1
        player = self.active_player
        if player.ai is not None:
            # Expected to call self.ask() and move to the next player
            player.ai.tick()
        else:
            self.state.waiting = True
            logger.debug(f"Waiting for {player.name} to ask")

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until the game ends, a manual player is up, or max_ticks.

        Args:
            max_ticks: Ceiling on ticks for this call (None = unbounded).

        Returns:
            Number of ticks executed.
        """
        ticks = 0
        while not self.check_game_ended():
            if max_ticks is not None and ticks >= max_ticks:
                logger.warning(f"Stopped after {ticks} ticks without finishing")
                break
            self.tick()
            ticks += 1
            if self.state.waiting:
                break
        return ticks

    def ask(self, asking_player: Player, asked_player_index: int, rank: Rank | int) -> AskResult:
        """Ask another player for every card of a rank.

        On a miss the asker draws one card from the pool, if any. Books are
        checked afterwards and the turn passes on, unless the
        extra-turn-on-hit rule is enabled and the ask was a hit.

        Args:
            asking_player: Must be the active player.
            asked_player_index: Seat of the player being asked.
            rank: Rank requested.

        Returns:
            Outcome of the ask.

        Raises:
            ProtocolError: If the asker is not the active player or the
                target is invalid. Nothing is changed in that case.
        """
        if asking_player is not self.active_player:
            raise ProtocolError(
                f"{asking_player} asked out of turn, active player is {self.active_player}"
            )
        if not 0 <= asked_player_index < len(self._players):
            raise ProtocolError(f"No player at index {asked_player_index}")
        if asked_player_index == asking_player.player_index:
            raise ProtocolError(f"{asking_player} cannot ask themselves")
        try:
            rank = Rank(rank)
        except ValueError as e:
            raise ProtocolError(f"Invalid rank: {rank}") from e

        asked_player = self._players[asked_player_index]
        logger.debug(f"{asking_player.name} asks {asked_player.name} for rank {rank.name}")

        drawn: Card | None = None
        received = asked_player.remove_cards_with_rank(rank)
        if not received:
            logger.debug(f"{asked_player.name} didn't have any such cards")
            drawn = self._take_from_pool(asking_player)
        else:
            logger.debug(f"{asked_player.name} had {len(received)} of those cards")
            for card in received:
                asking_player.add_card(card)

        self.state.turn_number += 1
        books = asking_player.check_books()
        for book in books:
            logger.info(f"{asking_player.name} made a book with rank {book.rank.name}")
            if self.game_logger:
                self.game_logger.log_book(self.state.turn_number, asking_player, book)
            if self._on_book:
                self._on_book(asking_player, book)

        if not (received and self.rules.grant_extra_turn_on_hit):
            self.state.active_player_index = (self.state.active_player_index + 1) % len(
                self._players
            )
        self.state.waiting = False

        result = AskResult(
            turn_number=self.state.turn_number,
            asking_player=asking_player.player_index,
            asked_player=asked_player_index,
            rank=rank,
            received=tuple(received),
            drawn=drawn,
            books=tuple(books),
            next_player=self.state.active_player_index,
        )
        logger.debug(str(result))
        if self.game_logger:
            self.game_logger.log_ask(result, len(self._pool))
        if self._on_ask:
            self._on_ask(result)

        # Only a new book can empty the last hand
        if books and self.check_game_ended():
            self._finish()

        return result

    def _take_from_pool(self, player: Player) -> Card | None:
        """Move the top pool card to the player's hand, if there is one."""
        if not self._pool:
            logger.debug("The pool was empty")
            return None
        card = self._pool.pop()
        player.add_card(card)
        logger.debug(f"{player.name} drew a {card.rank.name}")
        return card

    def _finish(self) -> None:
        """Report the final ranking."""
        ranking = self.scoreboard()
        winner = ranking[0][1]
        logger.info(
            f"Game ended after {self.state.turn_number} turns, "
            f"{winner.name} leads with {winner.book_count} books"
        )
        if self.game_logger:
            self.game_logger.log_game_end(self.state.turn_number, ranking)
        if self._on_game_end:
            self._on_game_end(ranking)

    def scoreboard(self) -> list[tuple[int, Player]]:
        """Rank players by number of books.

        Returns:
            (place, player) pairs starting at place 1. Ties keep seat order.
        """
        ordered = sorted(self._players, key=lambda p: (-p.book_count, p.player_index))
        return list(enumerate(ordered, 1))

    def print_scoreboard(self) -> None:
        """Print the final ranking to stdout."""
        GameDisplay().print_scoreboard(self.scoreboard())

    def __str__(self) -> str:
        return f"Game({self.status.value}, {self.state}, pool={len(self._pool)})"
