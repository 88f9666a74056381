"""SQLite-based deck repository.

Stores each deck as one JSON document keyed by deck id.
Uses async-safe operations with threading.
"""

import asyncio
import json
import logging
import sqlite3
from pathlib import Path

from wordshorts.domain.entities.deck import Deck
from wordshorts.ports.deck_repository import PersistenceError

logger = logging.getLogger(__name__)


def decode_deck(document: str) -> Deck:
    """Parse a stored JSON document into a Deck.

    Raises:
        PersistenceError: If the document is malformed or its stages do not
            partition its catalog
    """
    try:
        deck = Deck.from_dict(json.loads(document))
        deck.check_partition()
    except (ValueError, KeyError, TypeError) as e:
        raise PersistenceError(f"Corrupt deck document: {e}") from e
    return deck


class SqliteDeckRepository:
    """SQLite implementation of the DeckRepository port.

    Thread-safe async operations using asyncio.Lock and to_thread.
    Connections are short-lived, one per operation.
    """

    def __init__(self, db_path: str = "decks.db"):
        """Initialize repository.

        Args:
            db_path: Path to SQLite database file

        Call initialize() before first use.
        """
        self._db_path = Path(db_path)
        self._lock = asyncio.Lock()
        self._initialized = False

    async def initialize(self) -> None:
        """Create the schema (async-safe, idempotent)."""
        if self._initialized:
            return
        async with self._lock:
            await self._run(self._init_db)
            self._initialized = True

    def _connect(self) -> sqlite3.Connection:
        """Create SQLite connection with the store's PRAGMAs."""
        conn = sqlite3.connect(self._db_path)
        conn.execute("PRAGMA synchronous=NORMAL")
        conn.execute("PRAGMA temp_store=MEMORY")
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            # WAL mode persists to database file (only needs to be set once)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS decks (
                    id TEXT PRIMARY KEY,
                    document TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """
            )

    async def _run(self, func, *args):
        """Run a blocking operation in a thread, mapping storage errors."""
        try:
            return await asyncio.to_thread(func, *args)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Deck storage failure in {func.__name__}: {e}")
            raise PersistenceError(str(e)) from e

    async def get(self, deck_id: str) -> Deck | None:
        """Get a deck by id."""
        async with self._lock:
            return await self._run(self._get_sync, deck_id)

    def _get_sync(self, deck_id: str) -> Deck | None:
        """Synchronous get implementation."""
        with self._connect() as conn:
            row = conn.execute("SELECT document FROM decks WHERE id = ?", (deck_id,)).fetchone()
        return decode_deck(row[0]) if row else None

    async def get_all(self) -> list[Deck]:
        """Get every deck ordered by creation time."""
        async with self._lock:
            return await self._run(self._get_all_sync)

    def _get_all_sync(self) -> list[Deck]:
        """Synchronous get-all implementation."""
        with self._connect() as conn:
            rows = conn.execute("SELECT document FROM decks ORDER BY created_at ASC").fetchall()
        return [decode_deck(row[0]) for row in rows]

    async def put(self, deck: Deck) -> None:
        """Insert or overwrite the whole deck record."""
        document = json.dumps(deck.to_dict(), ensure_ascii=False)
        async with self._lock:
            await self._run(self._put_sync, deck, document)

    def _put_sync(self, deck: Deck, document: str) -> None:
        """Synchronous upsert implementation."""
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO decks (id, document, created_at, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    document = excluded.document,
                    updated_at = excluded.updated_at
                """,
                (
                    deck.id,
                    document,
                    deck.created_at.isoformat(),
                    deck.updated_at.isoformat(),
                ),
            )

    async def delete(self, deck_id: str) -> None:
        """Delete a deck record."""
        async with self._lock:
            await self._run(self._delete_sync, deck_id)

    def _delete_sync(self, deck_id: str) -> None:
        """Synchronous delete implementation."""
        with self._connect() as conn:
            conn.execute("DELETE FROM decks WHERE id = ?", (deck_id,))

    async def clear(self) -> None:
        """Delete every deck record."""
        async with self._lock:
            await self._run(self._clear_sync)

    def _clear_sync(self) -> None:
        """Synchronous clear implementation."""
        with self._connect() as conn:
            conn.execute("DELETE FROM decks")

    def close(self) -> None:
        """Close the repository.

        No-op since connections are short-lived per operation.
        Provided for API consistency with cleanup code.
        """
        pass


class InMemoryDeckRepository:
    """DeckRepository kept in process memory.

    Records are stored as serialized documents so reads return fresh
    Deck objects, matching the SQLite repository. Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    async def initialize(self) -> None:
        """No schema to create."""
        pass

    async def get(self, deck_id: str) -> Deck | None:
        document = self._documents.get(deck_id)
        return decode_deck(document) if document else None

    async def get_all(self) -> list[Deck]:
        decks = [decode_deck(doc) for doc in self._documents.values()]
        return sorted(decks, key=lambda d: d.created_at)

    async def put(self, deck: Deck) -> None:
        self._documents[deck.id] = json.dumps(deck.to_dict(), ensure_ascii=False)

    async def delete(self, deck_id: str) -> None:
        self._documents.pop(deck_id, None)

    async def clear(self) -> None:
        self._documents.clear()

    def close(self) -> None:
        pass
