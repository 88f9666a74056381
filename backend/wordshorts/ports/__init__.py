# Ports layer - Abstract interfaces (Protocols)

from .deck_repository import DeckRepository, PersistenceError
from .vocab_source import CatalogFormatError, NetworkError, VocabSource

__all__ = [
    "DeckRepository",
    "PersistenceError",
    "VocabSource",
    "NetworkError",
    "CatalogFormatError",
]
