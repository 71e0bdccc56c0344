import logging

from store.errors import CapacityExceeded

logger = logging.getLogger(__name__)

# Identifiers are 256-bit unsigned in the original ledger.
DEFAULT_ID_LIMIT = 2 ** 256 - 1


class IdentifierAllocator:
    """Two independent monotonic counters, one per entity type. The first id issued is 1."""

    def __init__(self, limit: int = DEFAULT_ID_LIMIT):
        if limit < 1:
            raise ValueError(f"id limit must be positive, got {limit}")
        self.limit = limit
        self._last_record_id = 0
        self._last_flashcard_id = 0

    @property
    def last_record_id(self) -> int:
        return self._last_record_id

    @property
    def last_flashcard_id(self) -> int:
        return self._last_flashcard_id

    def next_record_id(self) -> int:
        self._last_record_id = self._advance(self._last_record_id, 'record')
        return self._last_record_id

    def next_flashcard_id(self) -> int:
        self._last_flashcard_id = self._advance(self._last_flashcard_id, 'flashcard')
        return self._last_flashcard_id

    def _advance(self, current: int, kind: str) -> int:
        if current >= self.limit:
            logger.error(f"{kind} id space exhausted at {current}")
            raise CapacityExceeded(f"No {kind} ids left (limit {self.limit})")
        return current + 1
