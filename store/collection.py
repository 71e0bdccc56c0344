"""
Storage primitives shared by the record and flashcard stores.

IndexedCollection keeps items in a dense list and finds them through an
id -> index map, so insert, lookup and removal are all O(1). Removal moves
the last item into the freed slot, which means array positions are NOT
stable across removals; only lookups by id are.

SecondaryIndex groups ids under a key (an owner, or a parent record id).
"""
from typing import Callable, Generic, Hashable, TypeVar

from store.errors import NotFound

T = TypeVar('T')


class IndexedCollection(Generic[T]):

    def __init__(self, key: Callable[[T], int], kind: str = 'item'):
        self._key = key
        self._kind = kind
        self._items: list[T] = []
        self._index: dict[int, int] = {}
        self._exists: dict[int, bool] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: int) -> bool:
        return self._exists.get(item_id, False)

    def insert(self, item: T) -> int:
        item_id = self._key(item)
        if item_id in self:
            raise ValueError(f"{self._kind} {item_id} is already stored")

        self._items.append(item)
        index = len(self._items) - 1
        self._index[item_id] = index
        self._exists[item_id] = True
        return index

    def get(self, item_id: int) -> T:
        if item_id not in self:
            raise NotFound(f"{self._kind.capitalize()} {item_id} does not exist")
        return self._items[self._index[item_id]]

    def index_of(self, item_id: int) -> int:
        if item_id not in self:
            raise NotFound(f"{self._kind.capitalize()} {item_id} does not exist")
        return self._index[item_id]

    def remove_by_id(self, item_id: int) -> T:
        index = self.index_of(item_id)
        removed = self._items[index]
        last = len(self._items) - 1

        if index != last:
            moved = self._items[last]
            self._items[index] = moved
            self._index[self._key(moved)] = index

        self._items.pop()
        del self._index[item_id]
        del self._exists[item_id]
        return removed

    def snapshot(self) -> list[T]:
        """Current contents in array order (not creation order)."""
        return list(self._items)


class SecondaryIndex:
    """Ordered lists of ids grouped by key. Removal keeps the order of the remaining ids."""

    def __init__(self):
        self._groups: dict[Hashable, list[int]] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._groups

    def append(self, key: Hashable, item_id: int) -> None:
        self._groups.setdefault(key, []).append(item_id)

    def remove(self, key: Hashable, item_id: int) -> None:
        group = self._groups.get(key)
        if not group:
            return
        # O(n) in the group; a missing id is a no-op
        for i, value in enumerate(group):
            if value == item_id:
                del group[i]
                return

    def ids(self, key: Hashable) -> list[int]:
        return list(self._groups.get(key, ()))

    def discard_key(self, key: Hashable) -> None:
        self._groups.pop(key, None)
