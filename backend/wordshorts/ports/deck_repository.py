"""Port interface for deck persistence."""

from typing import Protocol, runtime_checkable

from wordshorts.domain.entities.deck import Deck


class PersistenceError(Exception):
    """Deck storage read or write failed."""

    pass


@runtime_checkable
class DeckRepository(Protocol):
    """Port for deck storage.

    A single logical table keyed by deck id. Each record is the whole Deck
    document; every write overwrites the full record.
    """

    async def get(self, deck_id: str) -> Deck | None:
        """Get a deck by id, or None if absent."""
        ...

    async def get_all(self) -> list[Deck]:
        """Get every stored deck, oldest first."""
        ...

    async def put(self, deck: Deck) -> None:
        """Insert or overwrite a deck record."""
        ...

    async def delete(self, deck_id: str) -> None:
        """Delete a deck record (no-op if absent)."""
        ...

    async def clear(self) -> None:
        """Delete every deck record."""
        ...
