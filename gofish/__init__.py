"""Go Fish card game simulator."""

from gofish.game import ConfigurationError, Game, ProtocolError
from gofish.strategy import LargestGroupPolicy, TurnPolicy

__all__ = [
    "ConfigurationError",
    "Game",
    "LargestGroupPolicy",
    "ProtocolError",
    "TurnPolicy",
]
