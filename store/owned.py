import time
from typing import Any, Callable, Generic, TypeVar

from store.allocator import IdentifierAllocator
from store.collection import IndexedCollection, SecondaryIndex
from store.errors import Unauthorized
from store.events import EventSink

T = TypeVar('T')


class OwnedStore(Generic[T]):
    """
    Shared plumbing for the record and flashcard stores: one indexed
    collection, an owner -> ids index, and the owner check used by every
    mutating operation.
    """

    kind = 'item'

    def __init__(
        self,
        allocator: IdentifierAllocator,
        sink: EventSink,
        clock: Callable[[], float] = time.time,
    ):
        self.allocator = allocator
        self.sink = sink
        self._clock = clock
        self.items: IndexedCollection[T] = IndexedCollection(key=lambda item: item.id, kind=self.kind)
        self.by_owner = SecondaryIndex()

    def __len__(self) -> int:
        return len(self.items)

    def _now(self) -> int:
        return int(self._clock())

    def _owned(self, item_id: int, caller: Any, action: str) -> T:
        """Fetch an item, failing NotFound if absent and Unauthorized if caller isn't its owner."""
        item = self.items.get(item_id)
        if caller != item.owner:
            raise Unauthorized(f"Only the owner can {action} the {self.kind}")
        return item
