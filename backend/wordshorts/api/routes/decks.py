"""Deck management API routes."""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from wordshorts.api.dependencies import DeckStoreDep
from wordshorts.config import get_list_overscan, get_list_row_height
from wordshorts.domain.entities.deck import Deck
from wordshorts.domain.services.deck_store import DeckStore
from wordshorts.domain.services.virtualization import window
from wordshorts.domain.services.word_query import WordOrder, query_deck
from wordshorts.domain.value_objects.deck_stats import DeckStats
from wordshorts.domain.value_objects.stage import Stage
from wordshorts.ports.deck_repository import PersistenceError

router = APIRouter(prefix="/api/decks", tags=["decks"])


# =============================================================================
# Request/Response Models
# =============================================================================


class StatsResponse(BaseModel):
    """Word counts and rounded shares per stage."""

    deck_id: str
    total: int
    unlearned: int
    learning: int
    mastered: int
    unlearned_percent: int
    learning_percent: int
    mastered_percent: int


class DeckSummary(BaseModel):
    """Deck without its word list."""

    id: str
    name: str
    description: str | None
    updated_at: str
    stats: StatsResponse


class DecksResponse(BaseModel):
    """Response for deck listing."""

    decks: list[DeckSummary]
    current_deck_id: str | None
    current_stage: Stage
    is_initialized: bool
    is_loading: bool
    version: int


class WordResponse(BaseModel):
    """One word with its current stage."""

    id: str
    word: str
    slug: str
    meaning_en: str | None
    meaning_kr: str | None
    stage: Stage


class WordsWindowResponse(BaseModel):
    """Rendered window of the filtered word list."""

    start: int
    end: int
    total: int
    words: list[WordResponse]


class SelectDeckRequest(BaseModel):
    deck_id: str


class SelectDeckResponse(BaseModel):
    selected: bool
    current_deck_id: str | None


class SelectStageRequest(BaseModel):
    stage: Stage


class MoveWordsRequest(BaseModel):
    """Request body for moving words between stages."""

    word_ids: list[str] = Field(..., min_length=1)
    stage: Stage


class ShiftWordRequest(BaseModel):
    """Request body for moving a word one stage left or right."""

    word_id: str
    step: int = Field(..., ge=-1, le=1, description="-1=left, 1=right")


# =============================================================================
# Helpers
# =============================================================================


def _stats_response(stats: DeckStats) -> StatsResponse:
    return StatsResponse(**stats.to_dict())


def _summary(deck: Deck) -> DeckSummary:
    return DeckSummary(
        id=deck.id,
        name=deck.name,
        description=deck.description,
        updated_at=deck.updated_at.isoformat(),
        stats=_stats_response(DeckStats.from_deck(deck)),
    )


def _require_current_deck(store: DeckStore) -> Deck:
    deck = store.get_current_deck()
    if deck is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "DECK_NOT_FOUND",
                    "message": "No deck is available",
                }
            },
        )
    return deck


def _storage_unavailable(e: PersistenceError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail={
            "error": {
                "code": "STORAGE_UNAVAILABLE",
                "message": f"Could not save deck: {str(e)}",
            }
        },
    )


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=DecksResponse)
async def list_decks(store: DeckStoreDep) -> DecksResponse:
    """List all decks with their stage counts."""
    return DecksResponse(
        decks=[_summary(deck) for deck in store.decks],
        current_deck_id=store.current_deck_id,
        current_stage=store.current_stage,
        is_initialized=store.is_initialized,
        is_loading=store.is_loading,
        version=store.version,
    )


@router.get(
    "/current",
    response_model=DeckSummary,
    responses={404: {"description": "No deck available"}},
)
async def get_current_deck(store: DeckStoreDep) -> DeckSummary:
    """Get the selected deck."""
    return _summary(_require_current_deck(store))


@router.post("/select", response_model=SelectDeckResponse)
async def select_deck(request: SelectDeckRequest, store: DeckStoreDep) -> SelectDeckResponse:
    """Select the active deck. Unknown ids keep the previous selection."""
    selected = store.select_deck(request.deck_id)
    return SelectDeckResponse(selected=selected, current_deck_id=store.current_deck_id)


@router.put("/current/stage", response_model=DecksResponse)
async def select_stage(request: SelectStageRequest, store: DeckStoreDep) -> DecksResponse:
    """Set the stage used to filter the current word list."""
    store.select_stage(request.stage)
    return await list_decks(store)


@router.get(
    "/current/stats",
    response_model=StatsResponse,
    responses={404: {"description": "No deck available"}},
)
async def get_current_stats(store: DeckStoreDep) -> StatsResponse:
    """Get stage counts of the selected deck."""
    _require_current_deck(store)
    return _stats_response(store.get_deck_stats())


@router.get(
    "/{deck_id}/stats",
    response_model=StatsResponse,
    responses={404: {"description": "Deck not found"}},
)
async def get_deck_stats(deck_id: str, store: DeckStoreDep) -> StatsResponse:
    """Get stage counts of any deck."""
    stats = store.get_deck_stats(deck_id)
    if stats is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "DECK_NOT_FOUND",
                    "message": f"Deck {deck_id} not found",
                }
            },
        )
    return _stats_response(stats)


@router.get(
    "/current/words",
    response_model=WordsWindowResponse,
    responses={404: {"description": "No deck available"}},
)
async def list_words(
    store: DeckStoreDep,
    q: str = "",
    stage: Stage | None = None,
    order: WordOrder = WordOrder.STAGE,
    scroll_offset: float = Query(0.0, ge=0),
    viewport_height: float = Query(800.0, ge=0),
) -> WordsWindowResponse:
    """Get the visible window of the filtered word list.

    Filters by text (word and both translations) and stage, then returns
    only the rows around the scroll position.
    """
    deck = _require_current_deck(store)
    entries = query_deck(deck, query=q, stage=stage, order=order)
    rendered = window(
        entries,
        viewport_size=viewport_height,
        scroll_offset=scroll_offset,
        overscan=get_list_overscan(),
        item_size=get_list_row_height(),
    )
    return WordsWindowResponse(
        start=rendered.start,
        end=rendered.end,
        total=rendered.total,
        words=[
            WordResponse(
                id=entry.word.id,
                word=entry.word.word,
                slug=entry.word.slug,
                meaning_en=entry.word.meaning_en,
                meaning_kr=entry.word.meaning_kr,
                stage=entry.stage,
            )
            for entry in rendered.items
        ],
    )


@router.post(
    "/current/words/move",
    response_model=StatsResponse,
    responses={
        404: {"description": "No deck available"},
        503: {"description": "Storage unavailable"},
    },
)
async def move_words(request: MoveWordsRequest, store: DeckStoreDep) -> StatsResponse:
    """Move words of the selected deck to a stage."""
    _require_current_deck(store)
    try:
        if len(request.word_ids) == 1:
            await store.move_word(request.word_ids[0], request.stage)
        else:
            await store.move_words(request.word_ids, request.stage)
    except PersistenceError as e:
        raise _storage_unavailable(e) from None
    return _stats_response(store.get_deck_stats())


@router.post(
    "/current/words/shift",
    response_model=StatsResponse,
    responses={
        404: {"description": "No deck available"},
        503: {"description": "Storage unavailable"},
    },
)
async def shift_word(request: ShiftWordRequest, store: DeckStoreDep) -> StatsResponse:
    """Move a word one stage left or right."""
    _require_current_deck(store)
    try:
        await store.shift_word(request.word_id, request.step)
    except PersistenceError as e:
        raise _storage_unavailable(e) from None
    return _stats_response(store.get_deck_stats())


@router.post(
    "/{deck_id}/refresh",
    response_model=DeckSummary,
    responses={
        404: {"description": "Deck not found or catalog unavailable"},
        503: {"description": "Storage unavailable"},
    },
)
async def refresh_deck(deck_id: str, store: DeckStoreDep) -> DeckSummary:
    """Reload the deck's catalog. Every word goes back to unlearned."""
    try:
        deck = await store.refresh_deck(deck_id)
    except PersistenceError as e:
        raise _storage_unavailable(e) from None
    if deck is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "DECK_NOT_REFRESHED",
                    "message": f"Deck {deck_id} not found or catalog unavailable",
                }
            },
        )
    return _summary(deck)
