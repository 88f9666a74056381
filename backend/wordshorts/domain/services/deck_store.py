"""Deck store service: stage partition state and its transitions."""

import asyncio
import logging
from collections.abc import Callable, Iterable

from wordshorts.domain.entities.deck import Deck
from wordshorts.domain.entities.word import Word
from wordshorts.domain.value_objects.deck_stats import DeckStats
from wordshorts.domain.value_objects.stage import Stage
from wordshorts.ports.deck_repository import DeckRepository, PersistenceError
from wordshorts.ports.vocab_source import NetworkError, VocabSource

logger = logging.getLogger(__name__)

DEFAULT_DECK_ID = "default-deck"

StoreListener = Callable[["DeckStore"], None]


class InitError(Exception):
    """Bootstrap could not load or seed a deck."""

    pass


class DeckStore:
    """Single source of truth for decks and their stage partitions.

    Responsibilities:
    - Seed-or-load bootstrap (seed from the vocab source on first run)
    - Deck and stage selection (stage is a view filter, not a deck property)
    - Stage transitions, persisted before they are committed in memory
    - Derived statistics

    Mutations for one deck are serialized with a per-deck lock. Reads never
    suspend and see either the state before or after a mutation, because
    the committed Deck is swapped in with a single assignment.
    """

    def __init__(
        self,
        vocab_source: VocabSource,
        repository: DeckRepository,
        default_deck_id: str = DEFAULT_DECK_ID,
        default_deck_name: str = "Default",
        default_deck_description: str | None = None,
    ):
        """Initialize deck store.

        Args:
            vocab_source: Port used to fetch the catalog
            repository: Port used to persist decks
            default_deck_id: Id of the deck seeded on first run
            default_deck_name: Name of the seeded deck
            default_deck_description: Description of the seeded deck
        """
        self._vocab_source = vocab_source
        self._repository = repository
        self._default_deck_id = default_deck_id
        self._default_deck_name = default_deck_name
        self._default_deck_description = default_deck_description

        self._decks: dict[str, Deck] = {}
        self._current_deck_id: str | None = None
        self._current_stage = Stage.UNLEARNED
        self._is_loading = False
        self._is_initialized = False
        self._init_error: InitError | None = None
        self._version = 0

        self._bootstrap_lock = asyncio.Lock()
        self._deck_locks: dict[str, asyncio.Lock] = {}
        self._listeners: list[StoreListener] = []

    # --- State ---

    @property
    def decks(self) -> tuple[Deck, ...]:
        return tuple(self._decks.values())

    @property
    def current_deck_id(self) -> str | None:
        return self._current_deck_id

    @property
    def current_stage(self) -> Stage:
        return self._current_stage

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    @property
    def init_error(self) -> InitError | None:
        """Why the last bootstrap left the store deckless, if it did."""
        return self._init_error

    @property
    def version(self) -> int:
        """Bumped on bootstrap completion, commits and selection changes."""
        return self._version

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener called after every version bump.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _bump(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Deck store listener failed")

    # --- Bootstrap ---

    async def bootstrap(self) -> None:
        """Load persisted decks, seeding a default deck on first run.

        Idempotent: returns immediately once initialized. Failures are
        logged and recorded on `init_error`; the store still ends up
        initialized, just without decks.
        """
        async with self._bootstrap_lock:
            if self._is_initialized:
                return

            self._is_loading = True
            try:
                decks = await self._load_or_seed()
            except InitError as e:
                logger.warning(f"Deck bootstrap failed, continuing without decks: {e}")
                self._init_error = e
                decks = []

            self._decks = {deck.id: deck for deck in decks}
            self._current_deck_id = decks[0].id if decks else None
            self._is_loading = False
            self._is_initialized = True
            self._bump()

    async def _load_or_seed(self) -> list[Deck]:
        """Load stored decks or seed the default one.

        Raises:
            InitError: Wrapping any failure on the load or seed path
        """
        try:
            decks = await self._repository.get_all()
            if decks:
                logger.info(f"Loaded {len(decks)} deck(s) from storage")
                return decks

            logger.info("No decks found, fetching catalog...")
            words = await self._vocab_source.fetch_catalog()
            if not words:
                raise InitError("Catalog is empty")

            deck = Deck.create(
                deck_id=self._default_deck_id,
                name=self._default_deck_name,
                words=words,
                description=self._default_deck_description,
            )
            await self._repository.put(deck)
        except InitError:
            raise
        except (NetworkError, PersistenceError) as e:
            raise InitError(str(e)) from e
        except Exception as e:
            logger.exception("Unexpected error while loading or seeding decks")
            raise InitError(f"Unexpected bootstrap failure: {e}") from e

        logger.info(f"Created default deck with {len(words)} words")
        return [deck]

    # --- Selection ---

    def select_deck(self, deck_id: str) -> bool:
        """Select the active deck.

        Unknown ids are rejected and the previous selection is kept.

        Returns:
            True if the selection now points at `deck_id`
        """
        if deck_id not in self._decks:
            logger.warning(f"Ignoring selection of unknown deck {deck_id!r}")
            return False
        if deck_id != self._current_deck_id:
            self._current_deck_id = deck_id
            self._bump()
        return True

    def select_stage(self, stage: Stage) -> None:
        """Set the stage used as the current view filter."""
        stage = Stage(stage)
        if stage != self._current_stage:
            self._current_stage = stage
            self._bump()

    # --- Transitions ---

    async def move_word(self, word_id: str, target: Stage) -> Deck | None:
        """Move one word of the current deck to the end of `target`.

        Returns:
            The committed deck, or None when no deck is selected

        Raises:
            PersistenceError: If the write fails; memory is left unchanged
        """
        return await self.move_words([word_id], target)

    async def move_words(self, word_ids: Iterable[str], target: Stage) -> Deck | None:
        """Move several words of the current deck in one persisted write.

        Returns:
            The committed deck, or None when no deck is selected

        Raises:
            PersistenceError: If the write fails; memory is left unchanged
        """
        deck_id = self._current_deck_id
        if deck_id is None or deck_id not in self._decks:
            return None

        target = Stage(target)
        ids = list(word_ids)
        async with self._lock_for(deck_id):
            deck = self._decks[deck_id]
            unknown = [wid for wid in ids if deck.get_word(wid) is None]
            if unknown:
                logger.debug(f"Skipping word ids not in deck {deck_id}: {unknown}")
            return await self._commit(deck.with_moved(ids, target))

    async def shift_word(self, word_id: str, step: int) -> Deck | None:
        """Move a word `step` stages right (positive) or left (negative).

        No-op at either end of the stage order or for unknown words.
        """
        deck = self.get_current_deck()
        if deck is None:
            return None
        current = deck.stage_of(word_id)
        target = current.shifted(step) if current else None
        if target is None:
            return deck
        return await self.move_word(word_id, target)

    async def refresh_deck(self, deck_id: str) -> Deck | None:
        """Replace a deck's catalog with a fresh fetch.

        Every word of the new catalog starts UNLEARNED; prior stage
        placement is discarded. A failed fetch leaves the deck as it was.

        Returns:
            The committed deck, or None if the deck is unknown or the
            catalog could not be fetched

        Raises:
            PersistenceError: If the write fails; memory is left unchanged
        """
        if deck_id not in self._decks:
            return None

        async with self._lock_for(deck_id):
            self._is_loading = True
            try:
                words = await self._vocab_source.fetch_catalog()
            except NetworkError as e:
                logger.warning(f"Failed to refresh deck {deck_id}: {e}")
                return None
            finally:
                self._is_loading = False

            deck = self._decks[deck_id].with_catalog(words)
            committed = await self._commit(deck)
            logger.info(f"Refreshed deck {deck_id} with {len(words)} words")
            return committed

    async def _commit(self, deck: Deck) -> Deck:
        """Persist a deck, then make it the in-memory state."""
        if self._decks.get(deck.id) is deck:
            return deck
        try:
            await self._repository.put(deck)
        except PersistenceError as e:
            logger.error(f"Failed to persist deck {deck.id}: {e}")
            raise
        self._decks[deck.id] = deck
        self._bump()
        return deck

    def _lock_for(self, deck_id: str) -> asyncio.Lock:
        lock = self._deck_locks.get(deck_id)
        if lock is None:
            lock = self._deck_locks[deck_id] = asyncio.Lock()
        return lock

    # --- Reads ---

    def get_deck(self, deck_id: str) -> Deck | None:
        return self._decks.get(deck_id)

    def get_current_deck(self) -> Deck | None:
        """Get the selected deck, or None if there is none."""
        if self._current_deck_id is None:
            return None
        return self.get_deck(self._current_deck_id)

    def get_current_words(self) -> list[Word]:
        """Words of the current deck in the current stage, in stage order."""
        deck = self.get_current_deck()
        if deck is None:
            return []
        return deck.words_in(self._current_stage)

    def get_stage_of(self, word_id: str) -> Stage | None:
        """Stage holding a word of the current deck."""
        deck = self.get_current_deck()
        return deck.stage_of(word_id) if deck else None

    def get_deck_stats(self, deck_id: str | None = None) -> DeckStats | None:
        """Compute stats for a deck (defaults to the current deck).

        Recomputed on every call from the live partition.
        """
        target_id = deck_id or self._current_deck_id
        if target_id is None:
            return None
        deck = self.get_deck(target_id)
        if deck is None:
            return None
        return DeckStats.from_deck(deck)
