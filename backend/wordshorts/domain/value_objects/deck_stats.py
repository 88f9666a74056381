"""Deck statistics value object."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from wordshorts.domain.value_objects.stage import Stage

if TYPE_CHECKING:
    from wordshorts.domain.entities.deck import Deck


def percent_of(count: int, total: int) -> int:
    """Percentage of total, rounded half up. Zero when total is zero."""
    if total <= 0:
        return 0
    return math.floor(count / total * 100 + 0.5)


@dataclass(frozen=True)
class DeckStats:
    """Immutable value object with word counts per stage for a deck.

    Always derived from a deck's current partition, never stored.
    Percentages are rounded independently and may not sum to 100.
    """

    deck_id: str
    total: int
    unlearned: int
    learning: int
    mastered: int

    @classmethod
    def from_deck(cls, deck: "Deck") -> Self:
        """Compute stats from the deck's current stage sequences."""
        return cls(
            deck_id=deck.id,
            total=len(deck.words),
            unlearned=len(deck.unlearned),
            learning=len(deck.learning),
            mastered=len(deck.mastered),
        )

    def count(self, stage: Stage) -> int:
        """Word count of a stage."""
        return getattr(self, stage.value)

    def percent(self, stage: Stage) -> int:
        """Rounded share of a stage in the deck."""
        return percent_of(self.count(stage), self.total)

    @property
    def unlearned_percent(self) -> int:
        return self.percent(Stage.UNLEARNED)

    @property
    def learning_percent(self) -> int:
        return self.percent(Stage.LEARNING)

    @property
    def mastered_percent(self) -> int:
        return self.percent(Stage.MASTERED)

    @property
    def has_words(self) -> bool:
        """Whether the deck has any words at all."""
        return self.total > 0

    def to_dict(self) -> dict[str, int | str]:
        """Flat dictionary with counts and percentages."""
        return {
            "deck_id": self.deck_id,
            "total": self.total,
            "unlearned": self.unlearned,
            "learning": self.learning,
            "mastered": self.mastered,
            "unlearned_percent": self.unlearned_percent,
            "learning_percent": self.learning_percent,
            "mastered_percent": self.mastered_percent,
        }
