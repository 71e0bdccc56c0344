"""
Public surface of the store.

Every call takes the caller's principal explicitly (whatever identity the
host uses; the bot passes Telegram user ids) and runs under one exclusive
lock, so no operation ever sees another one half done.
"""
import logging
import threading
import time
from dataclasses import replace
from functools import wraps
from typing import Any, Callable

from store.allocator import DEFAULT_ID_LIMIT, IdentifierAllocator
from store.events import EventSink
from store.flashcards import FlashcardStore
from store.records import RecordStore
from store.schema import Flashcard, Record

logger = logging.getLogger(__name__)


def _detached(items):
    """Copies, so callers never hold objects the store keeps mutating."""
    return [replace(item) for item in items]


def _serialized(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class Forge:

    def __init__(
        self,
        id_limit: int = DEFAULT_ID_LIMIT,
        clock: Callable[[], float] = time.time,
        sink: EventSink | None = None,
    ):
        self._lock = threading.RLock()
        self.allocator = IdentifierAllocator(id_limit)
        self.sink = sink if sink is not None else EventSink()
        self.records = RecordStore(self.allocator, self.sink, clock)
        self.flashcards = FlashcardStore(self.records, self.allocator, self.sink, clock)
        self.records.flashcards = self.flashcards
        logger.info(f"Forge store ready (id limit {id_limit})")

    # ── Records ──────────────────────────────────────────────

    @_serialized
    def add_record(self, principal: Any, title: str, description: str) -> int:
        return self.records.add_record(principal, title, description)

    @_serialized
    def update_record(self, principal: Any, record_id: int, title: str, description: str) -> None:
        self.records.update_record(record_id, title, description, principal)

    @_serialized
    def remove_record(self, principal: Any, record_id: int) -> int:
        return self.records.remove_record(record_id, principal)

    @_serialized
    def get_record(self, record_id: int) -> Record:
        return replace(self.records.get_record(record_id))

    @_serialized
    def get_all_records_from_address(self, owner: Any) -> list[Record]:
        return _detached(self.records.get_all_records_from_address(owner))

    @_serialized
    def get_all_records(self) -> list[Record]:
        return _detached(self.records.get_all_records())

    @_serialized
    def record_count(self) -> int:
        return self.records.record_count()

    # ── Flashcards ───────────────────────────────────────────

    @_serialized
    def add_flashcard(self, principal: Any, record_id: int, question: str, answer: str) -> int:
        return self.flashcards.add_flashcard(record_id, question, answer, principal)

    @_serialized
    def update_flashcard(self, principal: Any, flashcard_id: int, question: str, answer: str) -> None:
        self.flashcards.update_flashcard(flashcard_id, question, answer, principal)

    @_serialized
    def remove_flashcard(self, principal: Any, flashcard_id: int) -> None:
        self.flashcards.remove_flashcard(flashcard_id, principal)

    @_serialized
    def get_flashcard(self, flashcard_id: int) -> Flashcard:
        return replace(self.flashcards.get_flashcard(flashcard_id))

    @_serialized
    def get_all_flashcards_from_record(self, record_id: int) -> list[Flashcard]:
        return _detached(self.flashcards.get_all_flashcards_from_record(record_id))

    @_serialized
    def get_all_flashcards_from_address(self, owner: Any) -> list[Flashcard]:
        return _detached(self.flashcards.get_all_flashcards_from_address(owner))

    @_serialized
    def flashcard_count(self) -> int:
        return self.flashcards.flashcard_count()

    # ── Notifications ────────────────────────────────────────

    @_serialized
    def events(self, name: str | None = None) -> list[Any]:
        return self.sink.events(name)

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        with self._lock:
            return self.sink.subscribe(callback)
