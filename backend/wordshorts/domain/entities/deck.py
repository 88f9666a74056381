"""Deck entity: a word catalog plus its stage partition."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any, Self

from wordshorts.domain.entities.word import Word, WordDict
from wordshorts.domain.value_objects.stage import Stage


class PartitionError(ValueError):
    """Raised when a deck's stage sequences do not partition its catalog."""

    pass


@dataclass(frozen=True)
class Deck:
    """Deck entity.

    Holds an immutable ordered catalog of words and three disjoint ordered
    sequences of word ids, one per stage. Every catalog word sits in exactly
    one stage sequence.

    Decks are never mutated in place. Transitions return a new Deck so a
    store can persist the new record first and swap it in afterwards.

    Attributes:
        id: Deck identifier (persistence key)
        name: Display name
        description: Optional description
        words: Catalog, in server order
        unlearned: Word ids in the UNLEARNED stage
        learning: Word ids in the LEARNING stage
        mastered: Word ids in the MASTERED stage
        created_at: When the deck was first seeded
        updated_at: Last committed mutation
    """

    id: str
    name: str
    words: tuple[Word, ...] = ()
    description: str | None = None
    unlearned: tuple[str, ...] = ()
    learning: tuple[str, ...] = ()
    mastered: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        deck_id: str,
        name: str,
        words: Iterable[Word],
        description: str | None = None,
    ) -> Self:
        """Create a freshly seeded deck with every word UNLEARNED."""
        catalog = tuple(words)
        now = datetime.now(UTC)
        return cls(
            id=deck_id,
            name=name,
            description=description,
            words=catalog,
            unlearned=tuple(w.id for w in catalog),
            created_at=now,
            updated_at=now,
        )

    def stage_ids(self, stage: Stage) -> tuple[str, ...]:
        """Get the ordered word ids of a stage."""
        return getattr(self, stage.value)

    @property
    def word_ids(self) -> frozenset[str]:
        """Ids of every catalog word."""
        return frozenset(w.id for w in self.words)

    def get_word(self, word_id: str) -> Word | None:
        """Look up a catalog word by id."""
        return self._word_index().get(word_id)

    def stage_of(self, word_id: str) -> Stage | None:
        """Get the stage currently holding a word, or None if absent."""
        for stage in Stage.ordered():
            if word_id in self.stage_ids(stage):
                return stage
        return None

    def words_in(self, stage: Stage) -> list[Word]:
        """Resolve a stage's ids to Words, keeping sequence order."""
        index = self._word_index()
        return [index[wid] for wid in self.stage_ids(stage) if wid in index]

    def with_moved(self, word_ids: Iterable[str], target: Stage) -> Self:
        """Return a copy with the given words moved to the end of `target`.

        Ids are removed from all three sequences before being appended, so
        moving a word into the stage it already occupies re-appends it once
        and repeating the same move yields the same partition. Ids that are
        not in the catalog are dropped; duplicates keep the first occurrence.
        """
        catalog_ids = self.word_ids
        moving = [wid for wid in dict.fromkeys(word_ids) if wid in catalog_ids]
        if not moving:
            return self

        removed = set(moving)
        sequences = {
            stage: tuple(wid for wid in self.stage_ids(stage) if wid not in removed)
            for stage in Stage.ordered()
        }
        sequences[target] = sequences[target] + tuple(moving)

        return replace(
            self,
            unlearned=sequences[Stage.UNLEARNED],
            learning=sequences[Stage.LEARNING],
            mastered=sequences[Stage.MASTERED],
            updated_at=datetime.now(UTC),
        )

    def with_catalog(self, words: Iterable[Word]) -> Self:
        """Return a copy with a new catalog and every word reset to UNLEARNED."""
        catalog = tuple(words)
        return replace(
            self,
            words=catalog,
            unlearned=tuple(w.id for w in catalog),
            learning=(),
            mastered=(),
            updated_at=datetime.now(UTC),
        )

    def check_partition(self) -> None:
        """Verify the stage sequences partition the catalog.

        Raises:
            PartitionError: If an id is duplicated, unknown, or missing
        """
        seen: set[str] = set()
        for stage in Stage.ordered():
            for wid in self.stage_ids(stage):
                if wid in seen:
                    raise PartitionError(f"Word {wid!r} appears more than once")
                seen.add(wid)

        catalog_ids = self.word_ids
        unknown = seen - catalog_ids
        if unknown:
            raise PartitionError(f"Unknown word ids in stages: {sorted(unknown)}")
        missing = catalog_ids - seen
        if missing:
            raise PartitionError(f"Catalog words without a stage: {sorted(missing)}")

    def _word_index(self) -> dict[str, Word]:
        return {w.id: w for w in self.words}

    def to_dict(self) -> dict[str, Any]:
        """Convert deck to a JSON-safe document for persistence."""
        words: list[WordDict] = [w.to_dict() for w in self.words]
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "words": words,
            "unlearned": list(self.unlearned),
            "learning": list(self.learning),
            "mastered": list(self.mastered),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Rebuild a deck from its persisted document."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            words=tuple(Word.from_dict(w) for w in data.get("words", [])),
            unlearned=tuple(data.get("unlearned", [])),
            learning=tuple(data.get("learning", [])),
            mastered=tuple(data.get("mastered", [])),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
