"""Input and tick events produced by a background reader thread."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from blessed import Terminal

from .key import Key, key_from_keystroke

Reader = Callable[[float], Any]


@dataclass(frozen=True)
class EventConfig:
    """Which key exits the application and how often ticks are sent (seconds)."""

    exit_key: Key = field(default_factory=lambda: Key.ctrl("c"))
    tick_rate: float = 0.25


@dataclass(frozen=True)
class Event:
    """An input event carrying a key, or a tick when ``key`` is None."""

    key: Optional[Key] = None

    @property
    def is_tick(self) -> bool:
        return self.key is None


TICK = Event()


class EventSourceError(Exception):
    """Raised when reading input from the terminal failed."""


@dataclass(frozen=True)
class _Failure:
    error: BaseException


def _terminal_reader() -> Reader:
    terminal = Terminal()

    def read(timeout: float) -> Any:
        return terminal.inkey(timeout=timeout)

    return read


class Events:
    """Reads keys in a thread and queues them along with regular ticks.

    ``reader`` is called with a timeout in seconds and returns a keystroke,
    or an empty value when no key arrived in time.
    """

    def __init__(
        self, config: Optional[EventConfig] = None, reader: Optional[Reader] = None
    ) -> None:
        self.config = config if config is not None else EventConfig()
        self._reader = reader if reader is not None else _terminal_reader()
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="input-events", daemon=True)
        self._thread.start()

    @classmethod
    def from_tick_rate_ms(cls, tick_rate_ms: int, reader: Optional[Reader] = None) -> "Events":
        return cls(EventConfig(tick_rate=tick_rate_ms / 1000), reader)

    def _run(self) -> None:
        try:
            while not self._stop.is_set():
                keystroke = self._reader(self.config.tick_rate)
                if keystroke:
                    self._queue.put(Event(key_from_keystroke(keystroke)))
                self._queue.put(TICK)
        except Exception as error:  # reported to the consumer by next()
            self._queue.put(_Failure(error))

    def next(self, timeout: Optional[float] = None) -> Event:
        """Block for the next event; raise queue.Empty if ``timeout`` runs out."""
        item = self._queue.get(timeout=timeout)
        if isinstance(item, _Failure):
            self._queue.put(item)
            raise EventSourceError("reading input failed") from item.error
        return item

    def close(self) -> None:
        """Stop the reader thread."""
        self._stop.set()
        self._thread.join(timeout=self.config.tick_rate + 1.0)

    def __enter__(self) -> "Events":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()