"""Infrastructure layer - storage implementations."""

from .deck_repository import InMemoryDeckRepository, SqliteDeckRepository

__all__ = [
    "InMemoryDeckRepository",
    "SqliteDeckRepository",
]
