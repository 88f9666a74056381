"""Tests for the navigator window and the store-backed navigator."""

from __future__ import annotations

import pytest
from conftest import FakeVocabSource, FlakyDeckRepository, make_detail, make_words

from wordshorts.domain.entities.word import Word
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.services.navigator import Navigator, NavigatorWindow
from wordshorts.domain.value_objects.nav_event import NavEvent
from wordshorts.domain.value_objects.stage import Stage


class BrokenVocabSource(FakeVocabSource):
    async def fetch_word_detail(self, word: str):
        raise RuntimeError("decoder crashed")


def source_with_media(words: list[Word], counts: dict[str, int]) -> FakeVocabSource:
    details = {w.word: make_detail(w, counts[w.word]) for w in words if w.word in counts}
    return FakeVocabSource(words=words, details=details)


class TestNavigatorWindow:
    """Test the live-media window around the cursor."""

    @pytest.mark.asyncio
    async def test_long_sequence_keeps_three_live(self):
        """Test only the cursor and its neighbours are materialized."""
        words = make_words(*[f"w{i}" for i in range(10_000)])
        source = FakeVocabSource(words=words, details={w.word: make_detail(w, 2) for w in words})
        window = NavigatorWindow(source)

        for index in (0, 1, 5_000, 9_999):
            await window.realign(words, index)
            assert len(window.live_word_ids) <= 3

        assert window.live_word_ids == ["word-9998", "word-9999"]
        assert len(source.detail_calls) == 2 + 1 + 3 + 2

    @pytest.mark.asyncio
    async def test_keeps_materialized_words_without_refetch(self):
        """Test sliding by one fetches only the newly exposed word."""
        words = make_words("A", "B", "C", "D")
        source = source_with_media(words, {"A": 1, "B": 1, "C": 1, "D": 1})
        window = NavigatorWindow(source)

        await window.realign(words, 1)
        await window.realign(words, 2)

        assert source.detail_calls == ["A", "B", "C", "D"]
        assert window.live_word_ids == ["word-1", "word-2", "word-3"]

    @pytest.mark.asyncio
    async def test_failed_fetch_leaves_slide_without_media(self):
        """Test a word whose media failed to load still renders."""
        words = make_words("A", "B")
        window = NavigatorWindow(source_with_media(words, {"A": 2}))

        await window.realign(words, 0)

        assert window.media_count("word-0") == 2
        assert window.media_count("word-1") == 0
        slide = window.slide(words, 1)
        assert slide.live
        assert slide.media_urls == ()

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self):
        """Test only network failures are absorbed."""
        words = make_words("A")
        window = NavigatorWindow(BrokenVocabSource(words=words))

        with pytest.raises(RuntimeError, match="decoder crashed"):
            await window.realign(words, 0)

    @pytest.mark.asyncio
    async def test_slides_resolve_media_urls(self):
        """Test live slides carry URLs, others are placeholders."""
        words = make_words("Alpha", "Beta", "Gamma", "Delta")
        window = NavigatorWindow(source_with_media(words, {"Alpha": 2, "Beta": 1}))

        await window.realign(words, 0)

        slides = window.slides(words, 0)
        assert [s.index for s in slides] == [0, 1]
        assert slides[0].media_urls == (
            "https://media.test/images/v3/alpha/alpha_0.webp",
            "https://media.test/images/v3/alpha/alpha_1.webp",
        )
        assert window.slide(words, 3).live is False
        assert window.media_count("word-3") is None

    def test_live_range_radius(self):
        window = NavigatorWindow(FakeVocabSource(), radius=2)
        assert window.live_range(5, 10) == range(3, 8)
        assert window.live_range(0, 0) == range(0)


class TestNavigator:
    """Test the navigator over the store's current words."""

    @pytest.fixture
    def source(self, abc_words: list[Word]) -> FakeVocabSource:
        return source_with_media(abc_words, {"A": 2, "B": 3, "C": 1})

    @pytest.fixture
    def deck_store(self, source: FakeVocabSource, repository: FlakyDeckRepository) -> DeckStore:
        return DeckStore(source, repository)

    @pytest.mark.asyncio
    async def test_sync_materializes_window(self, deck_store: DeckStore, source):
        """Test the initial state shows the first word and its neighbour."""
        await deck_store.bootstrap()
        navigator = Navigator(deck_store, NavigatorWindow(source))

        state = await navigator.sync()

        assert state.word_index == 0
        assert state.media_index == 0
        assert state.word_count == 3
        assert [s.index for s in state.slides] == [0, 1]
        assert state.viewed_word_ids == ("word-0",)
        assert state.playback is None

    @pytest.mark.asyncio
    async def test_dispatch_word_then_media(self, deck_store: DeckStore, source):
        """Test word swipes realign and media swipes request playback."""
        await deck_store.bootstrap()
        navigator = Navigator(deck_store, NavigatorWindow(source))
        await navigator.sync()

        honored, state = await navigator.dispatch(NavEvent.word(1, source_word_index=0))
        assert honored
        assert [s.index for s in state.slides] == [0, 1, 2]
        assert state.playback is None

        honored, state = await navigator.dispatch(NavEvent.media(2, source_word_index=1))
        assert honored
        assert (state.word_index, state.media_index) == (1, 2)
        assert state.playback == (1, 2)

        honored, state = await navigator.dispatch(NavEvent.media(2, source_word_index=1))
        assert honored
        assert state.playback is None

    @pytest.mark.asyncio
    async def test_dispatch_ignores_neighbour_media(self, deck_store: DeckStore, source):
        """Test media swipes on a prefetched slide change nothing."""
        await deck_store.bootstrap()
        navigator = Navigator(deck_store, NavigatorWindow(source))
        await navigator.sync()

        honored, state = await navigator.dispatch(NavEvent.media(1, source_word_index=1))

        assert not honored
        assert state.media_index == 0
        assert state.playback is None

    @pytest.mark.asyncio
    async def test_media_index_clamped_to_loaded_media(self, deck_store: DeckStore, source):
        """Test media swipes stop at the word's last medium."""
        await deck_store.bootstrap()
        navigator = Navigator(deck_store, NavigatorWindow(source))
        await navigator.sync()

        _, state = await navigator.dispatch(NavEvent.media(9, source_word_index=0))

        assert state.media_index == 1

    @pytest.mark.asyncio
    async def test_sync_follows_stage_transitions(self, deck_store: DeckStore, source):
        """Test moving the viewed word out of the stage clamps the cursor."""
        await deck_store.bootstrap()
        navigator = Navigator(deck_store, NavigatorWindow(source))
        await navigator.sync()
        await navigator.dispatch(NavEvent.word(2))

        await deck_store.move_word("word-2", Stage.MASTERED)
        state = await navigator.sync()

        assert state.word_count == 2
        assert state.word_index == 1
        assert [s.word.id for s in state.slides] == ["word-0", "word-1"]

    @pytest.mark.asyncio
    async def test_empty_stage(self, deck_store: DeckStore, source):
        """Test a stage without words yields an empty navigator."""
        await deck_store.bootstrap()
        deck_store.select_stage(Stage.MASTERED)
        navigator = Navigator(deck_store, NavigatorWindow(source))

        state = await navigator.sync()
        honored, _ = await navigator.dispatch(NavEvent.word(1))

        assert state.word_count == 0
        assert state.slides == ()
        assert not honored
