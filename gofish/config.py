"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, model_validator

from gofish.models.card import DECK_SIZE


class GameConfig(BaseModel):
    """Game configuration."""

    # Inclusive bounds on the number of players
    min_players: int = 2
    max_players: int = 10

    # House rule: 7 cards each for two players, 5 otherwise
    cards_per_player: int = 5
    cards_per_player_two_players: int = 7

    # Traditional rules let the asker go again after a hit
    grant_extra_turn_on_hit: bool = False

    seed: int | None = None  # None = unseeded
    max_ticks: int = 10000  # Safety ceiling for the CLI driving loop

    @model_validator(mode="after")
    def _check_bounds(self) -> "GameConfig":
        if self.min_players < 2:
            raise ValueError(f"min_players must be at least 2, got {self.min_players}")
        if self.max_players < self.min_players:
            raise ValueError(
                f"max_players ({self.max_players}) is below min_players ({self.min_players})"
            )
        if self.cards_per_player < 0 or self.cards_per_player_two_players < 0:
            raise ValueError("cards per player must not be negative")
        if self.max_players * self.cards_per_player > DECK_SIZE:
            raise ValueError(
                f"Cannot deal {self.cards_per_player} cards to {self.max_players} players"
            )
        if 2 * self.cards_per_player_two_players > DECK_SIZE:
            raise ValueError(
                f"Cannot deal {self.cards_per_player_two_players} cards to 2 players"
            )
        return self

    def cards_for(self, num_players: int) -> int:
        """Get the number of cards dealt to each of num_players players."""
        if num_players == 2:
            return self.cards_per_player_two_players
        return self.cards_per_player


class PolicyConfig(BaseModel):
    """Automated player configuration."""

    # Only ask opponents that still hold cards
    consider_only_askable: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogSettings(BaseModel):
    """Game event log (JSONL) configuration."""

    enabled: bool = False
    output_dir: str = "logs"  # File name is generated per game


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    policy: PolicyConfig = PolicyConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
