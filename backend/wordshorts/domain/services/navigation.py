"""Navigation cursor for the two-axis word x media swiper."""

import logging
from collections.abc import Callable, Sequence

from wordshorts.domain.value_objects.nav_event import Axis, NavEvent

logger = logging.getLogger(__name__)

MediaCountLookup = Callable[[str], int | None]
PlaybackHandler = Callable[[int, int], None]


class NavigationCursor:
    """Tracks the current word and, within it, the current medium.

    Rules:
    - Changing word always resets the media index to 0.
    - Media events are honored only when they come from the swiper of the
      active word slide. Neighbouring slides keep their own media swipers
      alive for prefetching and their events are ignored.
    - Playback fires on honored media events, at most once per
      (word_index, media_index) pair until the pair changes.

    The cursor does not follow stage transitions on its own. Consumers pass
    the new word sequence through resize() when their view changes.
    """

    def __init__(
        self,
        word_ids: Sequence[str] = (),
        media_count_for: MediaCountLookup | None = None,
        on_playback: PlaybackHandler | None = None,
    ):
        """Initialize cursor.

        Args:
            word_ids: Ids of the words along the word axis, in display order
            media_count_for: Lookup of a word's media count (None if unknown)
            on_playback: Called with (word_index, media_index) to play audio
        """
        self._word_ids: tuple[str, ...] = tuple(word_ids)
        self._media_count_for = media_count_for
        self._on_playback = on_playback
        self._word_index = 0
        self._media_index = 0
        self._last_played: tuple[int, int] | None = None
        self._viewed: dict[str, None] = {}
        self._mark_viewed()

    @property
    def word_index(self) -> int:
        return self._word_index

    @property
    def media_index(self) -> int:
        return self._media_index

    @property
    def word_count(self) -> int:
        return len(self._word_ids)

    @property
    def word_ids(self) -> tuple[str, ...]:
        return self._word_ids

    @property
    def current_word_id(self) -> str | None:
        if not self._word_ids:
            return None
        return self._word_ids[self._word_index]

    @property
    def viewed_word_ids(self) -> list[str]:
        """Words the cursor has landed on, in first-visit order."""
        return list(self._viewed)

    def dispatch(self, event: NavEvent) -> bool:
        """Apply a swiper event.

        Returns:
            True if the event was honored
        """
        match event.axis:
            case Axis.WORD:
                return self.go_to_word(event.index)
            case Axis.MEDIA:
                return self.go_to_media(event.index, event.source_word_index)
        return False

    def go_to_word(self, index: int) -> bool:
        """Move along the word axis. Resets the media index to 0."""
        if not self._word_ids:
            return False
        index = min(max(index, 0), len(self._word_ids) - 1)
        if index != self._word_index:
            self._word_index = index
            self._media_index = 0
            self._last_played = None
            self._mark_viewed()
        return True

    def go_to_media(self, index: int, source_word_index: int) -> bool:
        """Move along the media axis of the active word.

        Args:
            index: New media index
            source_word_index: Word slide owning the swiper that fired
        """
        if not self._word_ids:
            return False
        if source_word_index != self._word_index:
            logger.debug(
                f"Ignoring media event from slide {source_word_index} "
                f"(active slide is {self._word_index})"
            )
            return False

        index = max(index, 0)
        count = self._current_media_count()
        if count is not None:
            index = min(index, max(count - 1, 0))
        self._media_index = index
        self._play_once()
        return True

    def resize(self, word_ids: Sequence[str]) -> None:
        """Swap the word sequence, clamping the cursor into range."""
        self._word_ids = tuple(word_ids)
        if not self._word_ids:
            self._word_index = 0
            self._media_index = 0
            return
        last = len(self._word_ids) - 1
        if self._word_index > last:
            self._word_index = last
            self._media_index = 0
        self._mark_viewed()

    def _current_media_count(self) -> int | None:
        if self._media_count_for is None:
            return None
        word_id = self.current_word_id
        return self._media_count_for(word_id) if word_id else None

    def _play_once(self) -> None:
        key = (self._word_index, self._media_index)
        if key == self._last_played:
            return
        self._last_played = key
        if self._on_playback is not None:
            self._on_playback(*key)

    def _mark_viewed(self) -> None:
        word_id = self.current_word_id
        if word_id is not None:
            self._viewed.setdefault(word_id, None)
