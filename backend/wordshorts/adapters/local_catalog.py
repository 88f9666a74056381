"""Local catalog adapter for development and testing.

This adapter bypasses the remote vocabulary API by loading words from an
embedded JSON file. Use CATALOG_ADAPTER=local to enable.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

from wordshorts.adapters.vocab_api import parse_catalog, parse_word_detail
from wordshorts.domain.entities.word import Word
from wordshorts.domain.value_objects.media import WordDetail
from wordshorts.ports.vocab_source import NetworkError


class LocalCatalogAdapter:
    """VocabSource implementation with an embedded word list.

    The payload goes through the same validation as the remote API, so a
    broken data file fails the whole catalog just like a bad response.

    This adapter is useful for:
    - Development without network access
    - E2E testing without the remote API
    - Demo environments
    """

    def __init__(self, media_base: str = "", data: dict[str, Any] | None = None) -> None:
        """Initialize adapter.

        Args:
            media_base: Base URL prepended to media paths
            data: Catalog document; defaults to the embedded data file
        """
        self._media_base = media_base.rstrip("/")
        self._data = data if data is not None else self._load_data()

    def _load_data(self) -> dict[str, Any]:
        """Load the embedded JSON catalog.

        Uses importlib.resources for reliable package data access.
        Falls back to file path if running outside package context.
        """
        try:
            data_path = resources.files("wordshorts.adapters").joinpath("data/vocab.json")
            with data_path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (ModuleNotFoundError, FileNotFoundError, TypeError):
            file_path = Path(__file__).parent / "data" / "vocab.json"
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)

    async def fetch_catalog(self) -> list[Word]:
        """Get the embedded words, without their images."""
        items = [
            {key: value for key, value in entry.items() if key != "images"}
            for entry in self._data.get("words", [])
        ]
        return parse_catalog(items)

    async def fetch_word_detail(self, word: str) -> WordDetail:
        """Get one embedded word with its images."""
        for entry in self._data.get("words", []):
            if entry.get("word") == word:
                return parse_word_detail(entry)
        raise NetworkError(f"Word not found: {word}")

    def media_url(self, slug: str, path: str) -> str:
        filename = path.rstrip("/").rsplit("/", 1)[-1]
        return f"{self._media_base}/images/v3/{slug}/{filename}"

    async def close(self) -> None:
        """No-op cleanup."""
        pass
