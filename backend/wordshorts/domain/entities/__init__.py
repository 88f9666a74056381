"""Domain entities - objects with identity."""

from .deck import Deck, PartitionError
from .word import Word

__all__ = ["Deck", "PartitionError", "Word"]
