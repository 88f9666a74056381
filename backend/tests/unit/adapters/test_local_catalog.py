"""Tests for the embedded local catalog adapter."""

import pytest

from wordshorts.adapters.local_catalog import LocalCatalogAdapter
from wordshorts.ports.vocab_source import CatalogFormatError, NetworkError


@pytest.mark.asyncio
async def test_embedded_catalog_loads():
    """Test the packaged data file validates and keeps catalog order."""
    adapter = LocalCatalogAdapter()

    words = await adapter.fetch_catalog()

    assert len(words) == 6
    assert words[0].id == "word-0"
    assert words[0].word == "abandon"
    assert [w.word for w in words] == sorted(w.word for w in words)


@pytest.mark.asyncio
async def test_word_detail_has_images():
    adapter = LocalCatalogAdapter(media_base="https://media.test/")

    detail = await adapter.fetch_word_detail("abandon")

    assert detail.media_count == 2
    assert adapter.media_url(detail.slug, detail.images[0].path) == (
        "https://media.test/images/v3/abandon/abandon_photo_1.webp"
    )


@pytest.mark.asyncio
async def test_word_without_images():
    detail = await LocalCatalogAdapter().fetch_word_detail("diligent")
    assert detail.images == ()


@pytest.mark.asyncio
async def test_unknown_word():
    with pytest.raises(NetworkError, match="Word not found"):
        await LocalCatalogAdapter().fetch_word_detail("zebra")


@pytest.mark.asyncio
async def test_custom_data_is_validated():
    adapter = LocalCatalogAdapter(data={"words": [{"word": "x", "slug": "x"}, {"slug": "y"}]})

    with pytest.raises(CatalogFormatError):
        await adapter.fetch_catalog()
