"""Errors raised by the game engine."""


class ConfigurationError(ValueError):
    """Game cannot be built with the given settings (e.g. player count)."""


class ProtocolError(RuntimeError):
    """An ask was made out of turn or against an invalid target."""
