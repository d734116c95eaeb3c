"""Game logic."""

from .engine import Game
from .errors import ConfigurationError, ProtocolError

__all__ = [
    "ConfigurationError",
    "Game",
    "ProtocolError",
]
