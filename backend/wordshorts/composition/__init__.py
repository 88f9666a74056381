"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

import logging

from wordshorts.adapters.local_catalog import LocalCatalogAdapter
from wordshorts.adapters.vocab_api import VocabApiAdapter
from wordshorts.config import (
    get_catalog_adapter_type,
    get_deck_db_path,
    get_deck_store_type,
    get_default_deck_description,
    get_default_deck_name,
    get_vocab_api_base,
    get_vocab_api_timeout,
)
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.services.navigator import Navigator, NavigatorWindow
from wordshorts.infrastructure.deck_repository import (
    InMemoryDeckRepository,
    SqliteDeckRepository,
)
from wordshorts.ports.deck_repository import DeckRepository
from wordshorts.ports.vocab_source import VocabSource

logger = logging.getLogger(__name__)


def create_vocab_source() -> VocabSource:
    """Create the catalog adapter selected by CATALOG_ADAPTER.

    Raises:
        ValueError: If the adapter type is unknown
    """
    adapter_type = get_catalog_adapter_type()
    if adapter_type == "local":
        logger.info("Using local catalog adapter")
        return LocalCatalogAdapter(media_base=get_vocab_api_base())
    if adapter_type == "remote":
        return VocabApiAdapter(base_url=get_vocab_api_base(), timeout=get_vocab_api_timeout())
    raise ValueError(
        f"Invalid CATALOG_ADAPTER: '{adapter_type}'. " "Valid options: 'remote', 'local'"
    )


async def create_deck_repository() -> DeckRepository:
    """Create and initialize the repository selected by DECK_STORE.

    Raises:
        ValueError: If the store type is unknown
    """
    store_type = get_deck_store_type()
    if store_type == "memory":
        repository = InMemoryDeckRepository()
    elif store_type == "sqlite":
        repository = SqliteDeckRepository(get_deck_db_path())
    else:
        raise ValueError(f"Invalid DECK_STORE: '{store_type}'. " "Valid options: 'sqlite', 'memory'")
    await repository.initialize()
    return repository


def create_deck_store(vocab_source: VocabSource, repository: DeckRepository) -> DeckStore:
    """Create DeckStore with the configured default deck metadata."""
    return DeckStore(
        vocab_source=vocab_source,
        repository=repository,
        default_deck_name=get_default_deck_name(),
        default_deck_description=get_default_deck_description(),
    )


def create_navigator(store: DeckStore, vocab_source: VocabSource) -> Navigator:
    """Create a Navigator with a +-1 slide media window."""
    return Navigator(store, NavigatorWindow(vocab_source, radius=1))
