"""Port interface for the vocabulary catalog source."""

from typing import Protocol, runtime_checkable

from wordshorts.domain.entities.word import Word
from wordshorts.domain.value_objects.media import WordDetail


class NetworkError(Exception):
    """Catalog fetch failed or returned a non-success status."""

    pass


class CatalogFormatError(NetworkError):
    """Source answered, but the payload could not be parsed."""

    pass


@runtime_checkable
class VocabSource(Protocol):
    """Port for vocabulary catalog operations.

    Abstracts the vocabulary backend (remote HTTP API in production).
    A fetch is a single best-effort request: no retry, no pagination.
    """

    async def fetch_catalog(self) -> list[Word]:
        """Fetch the full word catalog.

        Returns:
            Words in server order, ids assigned by position ("word-0", ...)

        Raises:
            NetworkError: On transport failure, bad status, or any malformed
                item. Partial catalogs are never returned.
        """
        ...

    async def fetch_word_detail(self, word: str) -> WordDetail:
        """Fetch one word with its media descriptors.

        Args:
            word: Display text of the word

        Raises:
            NetworkError: On transport failure, bad status, or bad payload
        """
        ...

    def media_url(self, slug: str, path: str) -> str:
        """Build the public URL of a media file.

        Args:
            slug: Word slug
            path: Media path as returned by the source; only its last
                segment is used
        """
        ...
