"""Turn policies for automated players."""

from gofish.strategy.base import TurnPolicy
from gofish.strategy.simple import LargestGroupPolicy

__all__ = ["TurnPolicy", "LargestGroupPolicy"]
