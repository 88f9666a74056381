"""Swipe navigator API routes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from wordshorts.api.dependencies import NavigatorDep
from wordshorts.domain.services.navigator import NavigatorState
from wordshorts.domain.value_objects.nav_event import Axis, NavEvent

router = APIRouter(prefix="/api/navigator", tags=["navigator"])


# =============================================================================
# Request/Response Models
# =============================================================================


class NavEventRequest(BaseModel):
    """Slide change reported by a swiper."""

    axis: Axis
    index: int = Field(..., ge=0)
    source_word_index: int = Field(..., ge=0)


class SlideResponse(BaseModel):
    """Word slide; placeholders have live=false and no media."""

    index: int
    word_id: str
    word: str
    live: bool
    media_urls: list[str]


class PlaybackResponse(BaseModel):
    word_index: int
    media_index: int


class NavigatorResponse(BaseModel):
    """Cursor position plus the slides around it."""

    honored: bool = True
    word_index: int
    media_index: int
    word_count: int
    slides: list[SlideResponse]
    viewed_word_ids: list[str]
    playback: PlaybackResponse | None = None


def _response(state: NavigatorState, honored: bool = True) -> NavigatorResponse:
    playback = None
    if state.playback is not None:
        playback = PlaybackResponse(word_index=state.playback[0], media_index=state.playback[1])
    return NavigatorResponse(
        honored=honored,
        word_index=state.word_index,
        media_index=state.media_index,
        word_count=state.word_count,
        slides=[
            SlideResponse(
                index=slide.index,
                word_id=slide.word.id,
                word=slide.word.word,
                live=slide.live,
                media_urls=list(slide.media_urls),
            )
            for slide in state.slides
        ],
        viewed_word_ids=list(state.viewed_word_ids),
        playback=playback,
    )


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=NavigatorResponse)
async def get_navigator(navigator: NavigatorDep) -> NavigatorResponse:
    """Get the cursor over the current stage's words."""
    return _response(await navigator.sync())


@router.post("/events", response_model=NavigatorResponse)
async def dispatch_event(request: NavEventRequest, navigator: NavigatorDep) -> NavigatorResponse:
    """Apply a swipe on the word or media axis.

    Media events from a slide other than the active one are ignored
    (honored=false). `playback` is set when audio should start.
    """
    event = NavEvent(
        axis=request.axis,
        index=request.index,
        source_word_index=request.source_word_index,
    )
    honored, state = await navigator.dispatch(event)
    return _response(state, honored=honored)
