"""Tests for environment-driven wiring."""

import pytest

from wordshorts import config
from wordshorts.adapters.local_catalog import LocalCatalogAdapter
from wordshorts.adapters.vocab_api import VocabApiAdapter
from wordshorts.composition import (
    create_deck_repository,
    create_deck_store,
    create_vocab_source,
)
from wordshorts.infrastructure.deck_repository import (
    InMemoryDeckRepository,
    SqliteDeckRepository,
)


def test_vocab_source_selection(monkeypatch):
    monkeypatch.setenv("CATALOG_ADAPTER", "LOCAL")
    assert isinstance(create_vocab_source(), LocalCatalogAdapter)

    monkeypatch.setenv("CATALOG_ADAPTER", "remote")
    assert isinstance(create_vocab_source(), VocabApiAdapter)

    monkeypatch.setenv("CATALOG_ADAPTER", "ftp")
    with pytest.raises(ValueError, match="CATALOG_ADAPTER"):
        create_vocab_source()


@pytest.mark.asyncio
async def test_deck_repository_selection(monkeypatch, tmp_path):
    monkeypatch.setenv("DECK_STORE", "memory")
    assert isinstance(await create_deck_repository(), InMemoryDeckRepository)

    monkeypatch.setenv("DECK_STORE", "sqlite")
    monkeypatch.setenv("DECK_DB_PATH", str(tmp_path / "decks.db"))
    assert isinstance(await create_deck_repository(), SqliteDeckRepository)
    assert (tmp_path / "decks.db").exists()

    monkeypatch.setenv("DECK_STORE", "redis")
    with pytest.raises(ValueError, match="DECK_STORE"):
        await create_deck_repository()


@pytest.mark.asyncio
async def test_seeded_deck_uses_configured_name(monkeypatch):
    monkeypatch.setenv("DEFAULT_DECK_NAME", "Exam words")
    store = create_deck_store(LocalCatalogAdapter(), InMemoryDeckRepository())

    await store.bootstrap()

    assert store.get_current_deck().name == "Exam words"
    assert store.get_deck_stats().total == 6


def test_list_settings(monkeypatch):
    monkeypatch.delenv("LIST_OVERSCAN", raising=False)
    assert config.get_list_overscan() == 10
    monkeypatch.setenv("LIST_ROW_HEIGHT", "64")
    assert config.get_list_row_height() == 64.0
    monkeypatch.setenv("VOCAB_API_BASE", "https://vocab.test/")
    assert config.get_vocab_api_base() == "https://vocab.test"
