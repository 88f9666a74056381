"""Media descriptors attached to a vocabulary word."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaItem:
    """One illustrative image for a word.

    Attributes:
        style_id: Illustration style identifier
        style_name: Human-readable style name
        path: Server-side path of the image
        variation: Variation number within the style
    """

    style_id: str
    style_name: str
    path: str
    variation: int = 0

    @property
    def filename(self) -> str:
        """Last path segment of the image path."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class WordDetail:
    """Full vocabulary entry with its media list."""

    word: str
    slug: str
    meaning_en: str | None = None
    meaning_kr: str | None = None
    images: tuple[MediaItem, ...] = ()

    @property
    def media_count(self) -> int:
        return len(self.images)
