"""Search, filter and ordering of a deck's words for list views."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from wordshorts.domain.entities.deck import Deck
from wordshorts.domain.entities.word import Word
from wordshorts.domain.value_objects.stage import Stage


class WordOrder(StrEnum):
    """Orderings offered by list views.

    STAGE: stage order, then catalog order inside each stage
    ALPHABETICAL: by display text (checklist and table views)
    """

    STAGE = "stage"
    ALPHABETICAL = "alphabetical"


@dataclass(frozen=True)
class StagedWord:
    """A word paired with the stage it currently occupies."""

    word: Word
    stage: Stage


def staged_words(deck: Deck) -> list[StagedWord]:
    """All words of a deck grouped by stage, catalog order within a stage."""
    buckets: dict[Stage, list[StagedWord]] = {stage: [] for stage in Stage.ordered()}
    stage_by_id = {wid: stage for stage in Stage.ordered() for wid in deck.stage_ids(stage)}
    for word in deck.words:
        stage = stage_by_id.get(word.id)
        if stage is not None:
            buckets[stage].append(StagedWord(word=word, stage=stage))
    return [entry for stage in Stage.ordered() for entry in buckets[stage]]


def matches_query(word: Word, query: str) -> bool:
    """Case-insensitive substring match on text and both translations.

    An empty query matches every word. The query is not trimmed, so
    surrounding spaces take part in the match.
    """
    if not query:
        return True
    needle = query.lower()
    fields = (word.word, word.meaning_en, word.meaning_kr)
    return any(needle in field.lower() for field in fields if field)


def filter_words(
    entries: Iterable[StagedWord],
    query: str = "",
    stage: Stage | None = None,
) -> list[StagedWord]:
    """Keep entries matching both the stage filter and the text query."""
    return [
        entry
        for entry in entries
        if (stage is None or entry.stage == stage) and matches_query(entry.word, query)
    ]


def sort_alphabetically(entries: Iterable[StagedWord]) -> list[StagedWord]:
    """Order entries lexicographically by display text."""
    return sorted(entries, key=lambda entry: entry.word.word)


def query_deck(
    deck: Deck,
    query: str = "",
    stage: Stage | None = None,
    order: WordOrder = WordOrder.STAGE,
) -> list[StagedWord]:
    """Filtered word list of a deck in the requested order."""
    entries = filter_words(staged_words(deck), query=query, stage=stage)
    if order == WordOrder.ALPHABETICAL:
        return sort_alphabetically(entries)
    return entries
