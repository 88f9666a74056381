"""Vocabulary media API routes."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from wordshorts.api.dependencies import VocabSourceDep
from wordshorts.ports.vocab_source import NetworkError

router = APIRouter(prefix="/api/vocab", tags=["vocab"])


class MediaResponse(BaseModel):
    style_id: str
    style_name: str
    variation: int
    url: str


class WordMediaResponse(BaseModel):
    """Word with resolved media URLs."""

    word: str
    slug: str
    meaning_en: str | None
    meaning_kr: str | None
    images: list[MediaResponse]


@router.get(
    "/{word}",
    response_model=WordMediaResponse,
    responses={404: {"description": "Word not found or source unavailable"}},
)
async def get_word_media(word: str, vocab_source: VocabSourceDep) -> WordMediaResponse:
    """Get a word's images with public URLs."""
    try:
        detail = await vocab_source.fetch_word_detail(word)
    except NetworkError:
        # Surfaced as "not found", the same empty state the client shows
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "WORD_NOT_FOUND",
                    "message": f"Word {word!r} not found",
                }
            },
        ) from None

    return WordMediaResponse(
        word=detail.word,
        slug=detail.slug,
        meaning_en=detail.meaning_en,
        meaning_kr=detail.meaning_kr,
        images=[
            MediaResponse(
                style_id=item.style_id,
                style_name=item.style_name,
                variation=item.variation,
                url=vocab_source.media_url(detail.slug, item.path),
            )
            for item in detail.images
        ],
    )
