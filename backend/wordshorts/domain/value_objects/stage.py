"""Stage value object for word memorization progress."""

from enum import StrEnum


class Stage(StrEnum):
    """Memorization stages, in ascending order.

    State machine (per word):
        UNLEARNED <-> LEARNING <-> MASTERED
            ^___________________________^

    Any stage may move to any other stage, and only through an explicit
    move. There is no terminal stage: mastered words may move back.
    """

    UNLEARNED = "unlearned"
    LEARNING = "learning"
    MASTERED = "mastered"

    @classmethod
    def ordered(cls) -> tuple["Stage", ...]:
        """All stages in ascending order."""
        return (cls.UNLEARNED, cls.LEARNING, cls.MASTERED)

    @property
    def rank(self) -> int:
        """Position of the stage in the ascending order (0-based)."""
        return Stage.ordered().index(self)

    def shifted(self, step: int) -> "Stage | None":
        """Get the stage `step` positions away, or None past either end."""
        position = self.rank + step
        stages = Stage.ordered()
        if 0 <= position < len(stages):
            return stages[position]
        return None

    def next(self) -> "Stage | None":
        """Stage one to the right (None for MASTERED)."""
        return self.shifted(1)

    def previous(self) -> "Stage | None":
        """Stage one to the left (None for UNLEARNED)."""
        return self.shifted(-1)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.rank >= other.rank
