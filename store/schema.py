from dataclasses import dataclass
from typing import Any

# ======================= RECORDS ==========================

@dataclass
class Record:
    owner: Any
    title: str
    description: str
    timestamp: int
    record_id: int

    @property
    def id(self) -> int:
        return self.record_id

    @classmethod
    def empty(cls) -> 'Record':
        """The default entry returned in place of an id that no longer resolves."""
        return cls(owner=None, title='', description='', timestamp=0, record_id=0)


# ======================= FLASHCARDS =======================

@dataclass
class Flashcard:
    owner: Any
    question: str
    answer: str
    timestamp: int
    record_id: int
    flashcard_id: int

    @property
    def id(self) -> int:
        return self.flashcard_id


# ======================= NOTIFICATIONS ====================

@dataclass(frozen=True)
class RecordAdded:
    owner: Any
    title: str
    description: str
    timestamp: int
    record_id: int

    name = 'RecordAdded'


@dataclass(frozen=True)
class RecordUpdated:
    """
    Emitted for record updates, and also for flashcard updates: in that case
    the title/description fields carry the question/answer and record_id
    carries the flashcard id.
    """
    owner: Any
    old_title: str
    old_description: str
    new_title: str
    new_description: str
    timestamp: int
    record_id: int

    name = 'RecordUpdated'


@dataclass(frozen=True)
class RecordRemoved:
    owner: Any
    title: str
    description: str
    timestamp: int
    record_id: int

    name = 'RecordRemoved'


@dataclass(frozen=True)
class FlashcardAdded:
    owner: Any
    question: str
    answer: str
    timestamp: int
    record_id: int

    name = 'FlashcardAdded'


@dataclass(frozen=True)
class FlashcardRemoved:
    owner: Any
    question: str
    timestamp: int
    flashcard_id: int

    name = 'FlashcardRemoved'
