"""
External interfaces consumed by the session, plus in-memory implementations.

The host editor / OS adapter provides:
- InputSourceManager : query and set the active keyboard input source
- CursorEventSource  : cursor-move notifications, subscribed only while an
                       override region is active

InMemoryInputSource and CursorEvents are drop-in implementations for tests,
the demo runner and hosts without a real input method.
"""
import logging
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)

CursorHandler = Callable[[int], object]


class InputSourceManager(Protocol):
    """Getter/setter pair selected once by the host (macism, im-select, fcitx, ...)."""

    def get_input_source(self) -> str:
        ...

    def set_input_source(self, source_id: str) -> None:
        ...


class CursorEventSource(Protocol):
    """Cursor-move event stream of one buffer."""

    def subscribe(self, handler: CursorHandler) -> None:
        ...

    def unsubscribe(self, handler: CursorHandler) -> None:
        ...


class InMemoryInputSource:
    """
    Input source manager that keeps the active id in memory.

    Every successful set_input_source() call is appended to `history`, so
    tests can assert how many switches were issued.
    """

    def __init__(self, current: str) -> None:
        self.current = current
        self.history: List[str] = []

    def get_input_source(self) -> str:
        return self.current

    def set_input_source(self, source_id: str) -> None:
        logger.debug("Input source %s → %s", self.current, source_id)
        self.current = source_id
        self.history.append(source_id)


class CursorEvents:
    """Minimal cursor event source: a handler list with emit()."""

    def __init__(self) -> None:
        self._handlers: List[CursorHandler] = []

    def is_subscribed(self, handler: Optional[CursorHandler] = None) -> bool:
        if handler is None:
            return bool(self._handlers)
        return handler in self._handlers

    def subscribe(self, handler: CursorHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: CursorHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, cursor: int) -> None:
        # Handlers may unsubscribe themselves while running.
        for handler in list(self._handlers):
            handler(cursor)
