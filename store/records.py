import logging
from typing import TYPE_CHECKING, Any

from store.owned import OwnedStore
from store.schema import Record, RecordAdded, RecordRemoved, RecordUpdated

if TYPE_CHECKING:
    from store.flashcards import FlashcardStore

logger = logging.getLogger(__name__)


class RecordStore(OwnedStore[Record]):
    kind = 'record'

    # wired by the facade once both stores exist
    flashcards: 'FlashcardStore | None' = None

    def add_record(self, owner: Any, title: str, description: str) -> int:
        record_id = self.allocator.next_record_id()
        record = Record(
            owner=owner,
            title=title,
            description=description,
            timestamp=self._now(),
            record_id=record_id,
        )
        self.items.insert(record)
        self.by_owner.append(owner, record_id)

        logger.info(f"Added record {record_id} for {owner}")
        self.sink.emit(RecordAdded(owner, title, description, record.timestamp, record_id))
        return record_id

    def update_record(self, record_id: int, title: str, description: str, caller: Any) -> None:
        record = self._owned(record_id, caller, 'update')
        old_title, old_description = record.title, record.description

        record.title = title
        record.description = description
        record.timestamp = self._now()

        logger.info(f"Updated record {record_id}")
        self.sink.emit(RecordUpdated(
            record.owner, old_title, old_description, title, description, record.timestamp, record_id,
        ))

    def remove_record(self, record_id: int, caller: Any) -> int:
        """
        Remove a record and the caller's own flashcards under it.

        Flashcards on this record that belong to someone else are left in
        place; they keep pointing at the removed record and stay listed in
        its child index. Returns how many flashcards went with it.
        """
        record = self._owned(record_id, caller, 'remove')

        cascaded = 0
        if self.flashcards is not None:
            cascaded = self.flashcards.remove_owned_under(record_id, caller)

        self.items.remove_by_id(record_id)
        self.by_owner.remove(record.owner, record_id)

        logger.info(f"Removed record {record_id}")
        self.sink.emit(RecordRemoved(
            record.owner, record.title, record.description, record.timestamp, record_id,
        ))
        return cascaded

    def get_record(self, record_id: int) -> Record:
        return self.items.get(record_id)

    def get_all_records_from_address(self, owner: Any) -> list[Record]:
        """One entry per id in the owner's index; ids that no longer resolve give Record.empty()."""
        result = []
        for record_id in self.by_owner.ids(owner):
            if record_id in self.items:
                result.append(self.items.get(record_id))
            else:
                result.append(Record.empty())
        return result

    def get_all_records(self) -> list[Record]:
        return self.items.snapshot()

    def record_count(self) -> int:
        return len(self.items)
