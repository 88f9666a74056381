"""API routes module."""

from .decks import router as decks_router
from .navigator import router as navigator_router
from .vocab import router as vocab_router

__all__ = ["decks_router", "navigator_router", "vocab_router"]
