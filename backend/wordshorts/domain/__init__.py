# Domain layer - Business logic (NO adapter dependencies)

from .entities import Deck, PartitionError, Word
from .value_objects import (
    Axis,
    DeckStats,
    MediaItem,
    NavEvent,
    Stage,
    WordDetail,
)

__all__ = [
    "Axis",
    "Deck",
    "DeckStats",
    "MediaItem",
    "NavEvent",
    "PartitionError",
    "Stage",
    "Word",
    "WordDetail",
]
