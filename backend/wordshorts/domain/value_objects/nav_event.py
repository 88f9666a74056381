"""Navigation event value object for the word x media swiper."""

from dataclasses import dataclass
from enum import StrEnum


class Axis(StrEnum):
    """Swipe axis an event originates from.

    WORD: vertical swipe between words
    MEDIA: horizontal swipe between a word's media
    """

    WORD = "word"
    MEDIA = "media"


@dataclass(frozen=True)
class NavEvent:
    """Slide change reported by a swiper instance.

    Attributes:
        axis: Which axis changed
        index: New index along that axis
        source_word_index: Word slide that owns the swiper instance.
            For WORD events this is the word index the swipe started from.
    """

    axis: Axis
    index: int
    source_word_index: int

    @classmethod
    def word(cls, index: int, source_word_index: int = 0) -> "NavEvent":
        return cls(axis=Axis.WORD, index=index, source_word_index=source_word_index)

    @classmethod
    def media(cls, index: int, source_word_index: int) -> "NavEvent":
        return cls(axis=Axis.MEDIA, index=index, source_word_index=source_word_index)
