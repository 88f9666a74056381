"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    DeckStoreDep,
    NavigatorDep,
    VocabSourceDep,
    cleanup_dependencies,
    get_deck_store,
    get_navigator,
    get_vocab_source,
    init_dependencies,
)
from .routes import decks_router, navigator_router, vocab_router

__all__ = [
    # Routes
    "decks_router",
    "navigator_router",
    "vocab_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_deck_store",
    "get_navigator",
    "get_vocab_source",
    # Type aliases
    "DeckStoreDep",
    "NavigatorDep",
    "VocabSourceDep",
]
