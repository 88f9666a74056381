"""Shared fixtures and fakes for the test suite."""

from __future__ import annotations

import asyncio

import pytest

from wordshorts.domain.entities.deck import Deck
from wordshorts.domain.entities.word import Word
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.value_objects.media import MediaItem, WordDetail
from wordshorts.infrastructure.deck_repository import InMemoryDeckRepository
from wordshorts.ports.deck_repository import PersistenceError
from wordshorts.ports.vocab_source import NetworkError


class FakeVocabSource:
    """In-memory VocabSource that records calls."""

    def __init__(
        self,
        words: list[Word] | None = None,
        details: dict[str, WordDetail] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.words = words or []
        self.details = details or {}
        self.error = error
        self.catalog_calls = 0
        self.detail_calls: list[str] = []

    async def fetch_catalog(self) -> list[Word]:
        self.catalog_calls += 1
        if self.error is not None:
            raise self.error
        return list(self.words)

    async def fetch_word_detail(self, word: str) -> WordDetail:
        self.detail_calls.append(word)
        if word not in self.details:
            raise NetworkError(f"Word not found: {word}")
        return self.details[word]

    def media_url(self, slug: str, path: str) -> str:
        return f"https://media.test/images/v3/{slug}/{path.rsplit('/', 1)[-1]}"


class FlakyDeckRepository(InMemoryDeckRepository):
    """In-memory repository whose writes can be made to fail or block."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_puts = False
        self.fail_reads = False
        self.put_count = 0
        self.gate: asyncio.Event | None = None

    async def get_all(self) -> list[Deck]:
        if self.fail_reads:
            raise PersistenceError("disk unavailable")
        return await super().get_all()

    async def put(self, deck: Deck) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_puts:
            raise PersistenceError("disk full")
        self.put_count += 1
        await super().put(deck)


def make_words(*texts: str) -> list[Word]:
    """Build catalog words with ids assigned by position."""
    return [
        Word(
            id=f"word-{i}",
            word=text,
            slug=text.lower(),
            meaning_en=f"{text} meaning",
            meaning_kr=None,
        )
        for i, text in enumerate(texts)
    ]


def make_detail(word: Word, media_count: int) -> WordDetail:
    return WordDetail(
        word=word.word,
        slug=word.slug,
        meaning_en=word.meaning_en,
        images=tuple(
            MediaItem(
                style_id="photo",
                style_name="Photo",
                path=f"v3/{word.slug}/{word.slug}_{n}.webp",
                variation=n,
            )
            for n in range(media_count)
        ),
    )


@pytest.fixture
def abc_words() -> list[Word]:
    """Catalog [A, B, C]."""
    return make_words("A", "B", "C")


@pytest.fixture
def vocab_source(abc_words: list[Word]) -> FakeVocabSource:
    return FakeVocabSource(words=abc_words)


@pytest.fixture
def repository() -> FlakyDeckRepository:
    return FlakyDeckRepository()


@pytest.fixture
def store(vocab_source: FakeVocabSource, repository: FlakyDeckRepository) -> DeckStore:
    """Deck store, not yet bootstrapped."""
    return DeckStore(vocab_source=vocab_source, repository=repository, default_deck_name="Test")
