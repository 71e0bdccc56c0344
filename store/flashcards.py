import logging
import time
from typing import Any, Callable

from store.allocator import IdentifierAllocator
from store.collection import SecondaryIndex
from store.events import EventSink
from store.owned import OwnedStore
from store.records import RecordStore
from store.schema import Flashcard, FlashcardAdded, FlashcardRemoved, RecordUpdated

logger = logging.getLogger(__name__)


class FlashcardStore(OwnedStore[Flashcard]):
    kind = 'flashcard'

    def __init__(
        self,
        records: RecordStore,
        allocator: IdentifierAllocator,
        sink: EventSink,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(allocator, sink, clock)
        self.records = records
        self.by_record = SecondaryIndex()
        # (record_id, owner) -> True while owner has flashcards under that record
        self._presence: dict[tuple[int, Any], bool] = {}

    def add_flashcard(self, record_id: int, question: str, answer: str, owner: Any) -> int:
        # existence check first so a failed add never burns an id
        self.records.get_record(record_id)

        flashcard_id = self.allocator.next_flashcard_id()
        flashcard = Flashcard(
            owner=owner,
            question=question,
            answer=answer,
            timestamp=self._now(),
            record_id=record_id,
            flashcard_id=flashcard_id,
        )
        self.items.insert(flashcard)
        self.by_owner.append(owner, flashcard_id)
        self.by_record.append(record_id, flashcard_id)
        self._presence[(record_id, owner)] = True

        logger.info(f"Added flashcard {flashcard_id} to record {record_id} for {owner}")
        self.sink.emit(FlashcardAdded(owner, question, answer, flashcard.timestamp, record_id))
        return flashcard_id

    def update_flashcard(self, flashcard_id: int, question: str, answer: str, caller: Any) -> None:
        flashcard = self._owned(flashcard_id, caller, 'update')
        old_question, old_answer = flashcard.question, flashcard.answer

        flashcard.question = question
        flashcard.answer = answer
        flashcard.timestamp = self._now()

        logger.info(f"Updated flashcard {flashcard_id}")
        # flashcard edits are announced with the record-update notification
        self.sink.emit(RecordUpdated(
            flashcard.owner, old_question, old_answer, question, answer, flashcard.timestamp, flashcard_id,
        ))

    def remove_flashcard(self, flashcard_id: int, caller: Any) -> None:
        self._owned(flashcard_id, caller, 'remove')
        self._remove_flashcard(flashcard_id, caller)

    def remove_owned_under(self, record_id: int, owner: Any) -> int:
        """Remove the flashcards `owner` has under a record; others are left alone. Returns the count."""
        removed = 0
        for flashcard_id in self.by_record.ids(record_id):
            if flashcard_id in self.items and self.items.get(flashcard_id).owner == owner:
                self._remove_flashcard(flashcard_id, owner)
                removed += 1
        return removed

    def _remove_flashcard(self, flashcard_id: int, owner: Any) -> None:
        """Removal without the owner check, shared with the record cascade."""
        flashcard = self.items.remove_by_id(flashcard_id)
        record_id = flashcard.record_id

        self.by_owner.remove(owner, flashcard_id)
        self.by_record.remove(record_id, flashcard_id)

        still_present = any(
            self.items.get(other_id).record_id == record_id
            for other_id in self.by_owner.ids(owner)
            if other_id in self.items
        )
        if not still_present:
            self._presence.pop((record_id, owner), None)

        logger.info(f"Removed flashcard {flashcard_id} from record {record_id}")
        self.sink.emit(FlashcardRemoved(owner, flashcard.question, flashcard.timestamp, flashcard_id))

    def get_flashcard(self, flashcard_id: int) -> Flashcard:
        return self.items.get(flashcard_id)

    def get_all_flashcards_from_record(self, record_id: int) -> list[Flashcard]:
        """Flashcards under a live record. Ids that no longer resolve are left out."""
        self.records.get_record(record_id)
        return self._resolve(self.by_record.ids(record_id))

    def get_all_flashcards_from_address(self, owner: Any) -> list[Flashcard]:
        return self._resolve(self.by_owner.ids(owner))

    def has_flashcards(self, record_id: int, owner: Any) -> bool:
        return self._presence.get((record_id, owner), False)

    def flashcard_count(self) -> int:
        return len(self.items)

    def _resolve(self, ids: list[int]) -> list[Flashcard]:
        return [self.items.get(i) for i in ids if i in self.items]
