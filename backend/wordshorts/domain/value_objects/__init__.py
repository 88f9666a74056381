"""Domain value objects - immutable objects without identity."""

from .deck_stats import DeckStats
from .media import MediaItem, WordDetail
from .nav_event import Axis, NavEvent
from .stage import Stage

__all__ = [
    "Axis",
    "DeckStats",
    "MediaItem",
    "NavEvent",
    "Stage",
    "WordDetail",
]
