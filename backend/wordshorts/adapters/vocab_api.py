"""Remote vocabulary API adapter."""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from wordshorts.domain.entities.word import Word
from wordshorts.domain.value_objects.media import MediaItem, WordDetail
from wordshorts.ports.vocab_source import CatalogFormatError, NetworkError

logger = logging.getLogger(__name__)


class ApiWord(BaseModel):
    """One item of the `GET /api/vocab` list."""

    word: str
    slug: str
    meaning_en: str | None = None
    meaning_kr: str | None = None


class ApiImage(BaseModel):
    """Image descriptor inside a word detail payload."""

    style_id: str | int
    style_name: str = ""
    path: str
    variation: int = 0


class ApiWordDetail(ApiWord):
    """Payload of `GET /api/vocab/{word}`."""

    images: list[ApiImage] = []


_catalog_adapter = TypeAdapter(list[ApiWord])


def to_words(items: list[ApiWord]) -> list[Word]:
    """Map API items to Words with ids assigned by catalog position."""
    return [
        Word(
            id=f"word-{index}",
            word=item.word,
            slug=item.slug,
            meaning_en=item.meaning_en or None,
            meaning_kr=item.meaning_kr or None,
        )
        for index, item in enumerate(items)
    ]


def parse_catalog(payload: Any) -> list[Word]:
    """Validate a catalog payload as a whole.

    Raises:
        CatalogFormatError: If the payload or any single item is malformed
    """
    try:
        items = _catalog_adapter.validate_python(payload)
    except ValidationError as e:
        raise CatalogFormatError(f"Malformed catalog payload: {e.error_count()} error(s)") from e
    return to_words(items)


def parse_word_detail(payload: Any) -> WordDetail:
    """Validate a word detail payload.

    Raises:
        CatalogFormatError: If the payload is malformed
    """
    try:
        item = ApiWordDetail.model_validate(payload)
    except ValidationError as e:
        raise CatalogFormatError(f"Malformed word payload: {e.error_count()} error(s)") from e
    return WordDetail(
        word=item.word,
        slug=item.slug,
        meaning_en=item.meaning_en or None,
        meaning_kr=item.meaning_kr or None,
        images=tuple(
            MediaItem(
                style_id=str(image.style_id),
                style_name=image.style_name,
                path=image.path,
                variation=image.variation,
            )
            for image in item.images
        ),
    )


class VocabApiAdapter:
    """Vocabulary API adapter implementing the VocabSource protocol.

    Single best-effort requests, no retry.
    Uses lazy client initialization for connection reuse.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize adapter.

        Args:
            base_url: API base URL (no trailing slash needed)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy client initialization for connection reuse."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def _get_json(self, path: str) -> Any:
        """GET a JSON resource.

        Raises:
            NetworkError: On transport error or non-success status
            CatalogFormatError: If the body is not JSON
        """
        client = await self._get_client()
        url = f"{self._base_url}{path}"
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"GET {path} returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"GET {path} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise CatalogFormatError(f"GET {path} returned invalid JSON") from e

    async def fetch_catalog(self) -> list[Word]:
        """Fetch the full word catalog from `/api/vocab`."""
        payload = await self._get_json("/api/vocab")
        words = parse_catalog(payload)
        logger.info(f"Fetched catalog with {len(words)} words")
        return words

    async def fetch_word_detail(self, word: str) -> WordDetail:
        """Fetch one word with its images from `/api/vocab/{word}`."""
        payload = await self._get_json(f"/api/vocab/{quote(word, safe='')}")
        return parse_word_detail(payload)

    def media_url(self, slug: str, path: str) -> str:
        """Build `{base}/images/v3/{slug}/{filename}`."""
        filename = path.rstrip("/").rsplit("/", 1)[-1]
        return f"{self._base_url}/images/v3/{slug}/{filename}"

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
