import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any], None]


class EventSink:
    """Append-only notification log. Observers are called synchronously, in subscription order."""

    def __init__(self):
        self._log: list[Any] = []
        self._subscribers: list[Subscriber] = []

    def __len__(self) -> int:
        return len(self._log)

    def emit(self, event: Any) -> None:
        self._log.append(event)
        logger.debug(f"Emitted {event.name}: {event}")

        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception as e:
                # the mutation already happened; an observer can't undo it
                logger.warning(f"Subscriber {callback!r} failed on {event.name}: {e}", exc_info=e)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register an observer. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def events(self, name: str | None = None) -> list[Any]:
        if name is None:
            return list(self._log)
        return [e for e in self._log if e.name == name]
