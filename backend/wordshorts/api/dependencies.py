"""FastAPI dependency injection module.

Provides singleton instances of services for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends

from wordshorts.composition import (
    create_deck_repository,
    create_deck_store,
    create_navigator,
    create_vocab_source,
)
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.services.navigator import Navigator
from wordshorts.ports.deck_repository import DeckRepository
from wordshorts.ports.vocab_source import VocabSource

logger = logging.getLogger(__name__)


# Singletons stored at module level
_vocab_source: VocabSource | None = None
_deck_repository: DeckRepository | None = None
_deck_store: DeckStore | None = None
_navigator: Navigator | None = None


async def init_dependencies() -> None:
    """Initialize all singleton dependencies.

    Called during FastAPI lifespan startup. Bootstrap failures do not stop
    startup: the store comes up without decks.
    """
    global _vocab_source, _deck_repository, _deck_store, _navigator

    _vocab_source = create_vocab_source()
    _deck_repository = await create_deck_repository()
    _deck_store = create_deck_store(_vocab_source, _deck_repository)
    _navigator = create_navigator(_deck_store, _vocab_source)

    await _deck_store.bootstrap()
    deck = _deck_store.get_current_deck()
    if deck is not None:
        print(f"[API] Deck ready: {deck.name} ({len(deck.words)} words)")
        logger.info(f"Deck store ready with {len(_deck_store.decks)} deck(s)")
    else:
        print("[API] No deck available - serving empty state")
        logger.warning("Deck store initialized without decks")


async def cleanup_dependencies() -> None:
    """Cleanup dependencies on shutdown.

    Called during FastAPI lifespan shutdown. Closes connections.
    """
    global _vocab_source, _deck_repository

    if _vocab_source is not None and hasattr(_vocab_source, "close"):
        await _vocab_source.close()
    if _deck_repository is not None and hasattr(_deck_repository, "close"):
        _deck_repository.close()


def get_vocab_source() -> VocabSource:
    """Dependency: Get VocabSource instance."""
    if _vocab_source is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _vocab_source


def get_deck_store() -> DeckStore:
    """Dependency: Get DeckStore instance."""
    if _deck_store is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _deck_store


def get_navigator() -> Navigator:
    """Dependency: Get Navigator instance."""
    if _navigator is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _navigator


# Type aliases for dependency injection
VocabSourceDep = Annotated[VocabSource, Depends(get_vocab_source)]
DeckStoreDep = Annotated[DeckStore, Depends(get_deck_store)]
NavigatorDep = Annotated[Navigator, Depends(get_navigator)]
