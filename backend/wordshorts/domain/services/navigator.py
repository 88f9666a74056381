"""Word x media navigator: live media for the slides around the cursor."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from wordshorts.domain.entities.word import Word
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.services.navigation import NavigationCursor
from wordshorts.domain.services.virtualization import slide_window
from wordshorts.domain.value_objects.media import WordDetail
from wordshorts.domain.value_objects.nav_event import Axis, NavEvent
from wordshorts.ports.vocab_source import NetworkError, VocabSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slide:
    """One word slide of the navigator.

    Live slides carry their media; placeholders carry only the word.
    """

    index: int
    word: Word
    live: bool
    media_urls: tuple[str, ...] = ()


class NavigatorWindow:
    """Keeps media sub-navigators only for slides within `radius` of the cursor.

    With the default radius of 1 at most three words have their media
    fetched at any time, however long the word sequence is.
    """

    def __init__(self, vocab_source: VocabSource, radius: int = 1):
        """Initialize window.

        Args:
            vocab_source: Port used to fetch word media
            radius: Slides on each side of the cursor kept live
        """
        self._vocab_source = vocab_source
        self._radius = radius
        # word id -> detail, None when the fetch failed
        self._live: dict[str, WordDetail | None] = {}

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def live_word_ids(self) -> list[str]:
        """Words whose media sub-navigator is currently materialized."""
        return list(self._live)

    def live_range(self, word_index: int, word_count: int) -> range:
        return slide_window(word_index, word_count, self._radius)

    async def realign(self, words: Sequence[Word], word_index: int) -> None:
        """Materialize media for slides near `word_index`, drop the rest.

        Already materialized words are kept without refetching. Fetch
        failures leave the slide live with no media.
        """
        window_words = [words[i] for i in self.live_range(word_index, len(words))]
        missing = [w for w in window_words if w.id not in self._live]

        results = await asyncio.gather(
            *[self._vocab_source.fetch_word_detail(w.word) for w in missing],
            return_exceptions=True,
        )

        fetched: dict[str, WordDetail | None] = {}
        for word, result in zip(missing, results, strict=True):
            if isinstance(result, NetworkError):
                logger.warning(f"Failed to load media for {word.word!r}: {result}")
                fetched[word.id] = None
            elif isinstance(result, BaseException):
                raise result
            else:
                fetched[word.id] = result

        live = {}
        for word in window_words:
            live[word.id] = fetched[word.id] if word.id in fetched else self._live.get(word.id)
        self._live = live

    def media_count(self, word_id: str) -> int | None:
        """Media count of a live word, or None if not materialized."""
        if word_id not in self._live:
            return None
        detail = self._live[word_id]
        return detail.media_count if detail else 0

    def slide(self, words: Sequence[Word], index: int) -> Slide:
        """Describe slide `index`: live with media URLs, or a placeholder."""
        word = words[index]
        if word.id not in self._live:
            return Slide(index=index, word=word, live=False)
        detail = self._live[word.id]
        urls = ()
        if detail is not None:
            urls = tuple(
                self._vocab_source.media_url(detail.slug, item.path) for item in detail.images
            )
        return Slide(index=index, word=word, live=True, media_urls=urls)

    def slides(self, words: Sequence[Word], word_index: int) -> list[Slide]:
        """Slides around the cursor, in index order."""
        return [self.slide(words, i) for i in self.live_range(word_index, len(words))]


@dataclass(frozen=True)
class NavigatorState:
    """Snapshot of the navigator for rendering."""

    word_index: int
    media_index: int
    word_count: int
    slides: tuple[Slide, ...]
    viewed_word_ids: tuple[str, ...]
    playback: tuple[int, int] | None = None


class Navigator:
    """Swipeable card navigator over the current stage of the current deck.

    Combines a NavigationCursor with a NavigatorWindow and reads its word
    sequence from the DeckStore.
    """

    def __init__(self, store: DeckStore, window: NavigatorWindow):
        self._store = store
        self._window = window
        self._pending_playback: tuple[int, int] | None = None
        self._cursor = NavigationCursor(
            media_count_for=window.media_count,
            on_playback=self._queue_playback,
        )

    @property
    def cursor(self) -> NavigationCursor:
        return self._cursor

    def _queue_playback(self, word_index: int, media_index: int) -> None:
        self._pending_playback = (word_index, media_index)

    async def sync(self) -> NavigatorState:
        """Pick up the store's current words and realign live media."""
        words = self._store.get_current_words()
        self._cursor.resize([w.id for w in words])
        await self._window.realign(words, self._cursor.word_index)
        return self.state(words)

    async def dispatch(self, event: NavEvent) -> tuple[bool, NavigatorState]:
        """Apply a swiper event and return the resulting state.

        Returns:
            (honored, state); state.playback is set when audio should play
        """
        words = self._store.get_current_words()
        self._cursor.resize([w.id for w in words])
        self._pending_playback = None

        honored = self._cursor.dispatch(event)
        if honored and event.axis == Axis.WORD:
            await self._window.realign(words, self._cursor.word_index)

        playback, self._pending_playback = self._pending_playback, None
        return honored, self.state(words, playback)

    def state(
        self, words: Sequence[Word], playback: tuple[int, int] | None = None
    ) -> NavigatorState:
        return NavigatorState(
            word_index=self._cursor.word_index,
            media_index=self._cursor.media_index,
            word_count=len(words),
            slides=tuple(self._window.slides(words, self._cursor.word_index)),
            viewed_word_ids=tuple(self._cursor.viewed_word_ids),
            playback=playback,
        )
