"""Domain services - deck state, navigation and list windowing."""

from .deck_store import DEFAULT_DECK_ID, DeckStore, InitError
from .navigation import NavigationCursor
from .navigator import Navigator, NavigatorState, NavigatorWindow, Slide
from .virtualization import ListWindow, slide_window, visible_range, window
from .word_query import (
    StagedWord,
    WordOrder,
    filter_words,
    matches_query,
    query_deck,
    sort_alphabetically,
    staged_words,
)

__all__ = [
    "DEFAULT_DECK_ID",
    "DeckStore",
    "InitError",
    "NavigationCursor",
    "Navigator",
    "NavigatorState",
    "NavigatorWindow",
    "Slide",
    "ListWindow",
    "slide_window",
    "visible_range",
    "window",
    "StagedWord",
    "WordOrder",
    "filter_words",
    "matches_query",
    "query_deck",
    "sort_alphabetically",
    "staged_words",
]
