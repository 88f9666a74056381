"""Tests for the remote vocabulary API adapter."""

import httpx
import pytest

from wordshorts.adapters.vocab_api import VocabApiAdapter, parse_catalog
from wordshorts.ports.vocab_source import CatalogFormatError, NetworkError

CATALOG = [
    {"word": "abandon", "slug": "abandon", "meaning_en": "to leave", "meaning_kr": "버리다"},
    {"word": "candid", "slug": "candid", "meaning_en": "frank", "meaning_kr": ""},
]

DETAIL = {
    "word": "abandon",
    "slug": "abandon",
    "meaning_en": "to leave",
    "images": [
        {"style_id": 3, "style_name": "Photo", "path": "v3/abandon/abandon_3_1.webp", "variation": 1},
        {"style_id": "sketch", "path": "v3/abandon/abandon_sketch_2.webp", "variation": 2},
    ],
}


def make_adapter(handler) -> tuple[VocabApiAdapter, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    adapter = VocabApiAdapter("https://vocab.test/", transport=httpx.MockTransport(record))
    return adapter, requests


class TestFetchCatalog:
    """Test GET /api/vocab."""

    @pytest.mark.asyncio
    async def test_assigns_positional_ids(self):
        adapter, requests = make_adapter(lambda _: httpx.Response(200, json=CATALOG))

        words = await adapter.fetch_catalog()
        await adapter.close()

        assert str(requests[0].url) == "https://vocab.test/api/vocab"
        assert [w.id for w in words] == ["word-0", "word-1"]
        assert words[0].meaning_kr == "버리다"
        assert words[1].meaning_kr is None

    @pytest.mark.asyncio
    async def test_error_status_is_network_error(self):
        adapter, _ = make_adapter(lambda _: httpx.Response(500))

        with pytest.raises(NetworkError, match="500"):
            await adapter.fetch_catalog()

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self):
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter, _ = make_adapter(fail)

        with pytest.raises(NetworkError):
            await adapter.fetch_catalog()

    @pytest.mark.asyncio
    async def test_one_malformed_item_fails_whole_catalog(self):
        """Test the catalog is validated as a whole."""
        payload = [*CATALOG, {"word": "orphan"}]
        adapter, _ = make_adapter(lambda _: httpx.Response(200, json=payload))

        with pytest.raises(CatalogFormatError):
            await adapter.fetch_catalog()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        adapter, _ = make_adapter(lambda _: httpx.Response(200, text="<html>"))

        with pytest.raises(CatalogFormatError, match="invalid JSON"):
            await adapter.fetch_catalog()

    def test_non_list_payload(self):
        with pytest.raises(CatalogFormatError):
            parse_catalog({"words": CATALOG})


class TestFetchWordDetail:
    """Test GET /api/vocab/{word}."""

    @pytest.mark.asyncio
    async def test_parses_images(self):
        adapter, requests = make_adapter(lambda _: httpx.Response(200, json=DETAIL))

        detail = await adapter.fetch_word_detail("abandon")

        assert requests[0].url.path == "/api/vocab/abandon"
        assert detail.media_count == 2
        assert detail.images[0].style_id == "3"
        assert detail.images[1].style_name == ""
        assert detail.images[1].filename == "abandon_sketch_2.webp"

    @pytest.mark.asyncio
    async def test_quotes_word_in_path(self):
        adapter, requests = make_adapter(lambda _: httpx.Response(200, json=DETAIL))

        await adapter.fetch_word_detail("give up")

        assert requests[0].url.raw_path == b"/api/vocab/give%20up"

    @pytest.mark.asyncio
    async def test_not_found(self):
        adapter, _ = make_adapter(lambda _: httpx.Response(404))

        with pytest.raises(NetworkError, match="404"):
            await adapter.fetch_word_detail("missing")


def test_media_url_uses_filename():
    adapter = VocabApiAdapter("https://vocab.test/")
    url = adapter.media_url("abandon", "v3/abandon/abandon_3_1.webp")
    assert url == "https://vocab.test/images/v3/abandon/abandon_3_1.webp"
