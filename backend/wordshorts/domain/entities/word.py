"""Word entity representing a single vocabulary item."""

from dataclasses import dataclass
from typing import Any, TypedDict


class WordDict(TypedDict):
    """Word data structure for serialization."""

    id: str
    word: str
    slug: str
    meaning_en: str | None
    meaning_kr: str | None


@dataclass(frozen=True)
class Word:
    """Vocabulary word entity.

    Immutable after creation. The id is assigned once when the catalog
    is loaded and identifies the word inside its deck's stage sequences.

    Attributes:
        id: Stable word identifier (e.g. "word-0")
        word: Display text
        slug: URL-safe slug used to build media URLs
        meaning_en: English translation, if any
        meaning_kr: Korean translation, if any
    """

    id: str
    word: str
    slug: str
    meaning_en: str | None = None
    meaning_kr: str | None = None

    def to_dict(self) -> WordDict:
        """Convert word to dictionary for persistence."""
        return {
            "id": self.id,
            "word": self.word,
            "slug": self.slug,
            "meaning_en": self.meaning_en,
            "meaning_kr": self.meaning_kr,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Word":
        """Rebuild a word from its persisted dictionary."""
        return cls(
            id=data["id"],
            word=data["word"],
            slug=data["slug"],
            meaning_en=data.get("meaning_en"),
            meaning_kr=data.get("meaning_kr"),
        )
