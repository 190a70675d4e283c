import queue
import threading
import time

import pytest

from sptui.events import TICK, Event, EventConfig, Events, EventSourceError
from sptui.key import Key


def scripted(*strokes, calls=None):
    pending = list(strokes)

    def read(timeout):
        if calls is not None:
            calls.append(timeout)
        if pending:
            return pending.pop(0)
        time.sleep(timeout)
        return ""

    return read


def test_default_config():
    config = EventConfig()
    assert config.exit_key == Key.ctrl("c")
    assert config.tick_rate == 0.25


def test_inputs_are_followed_by_ticks():
    with Events(EventConfig(tick_rate=0.01), scripted("q", "\x03")) as events:
        received = [events.next(timeout=2) for _ in range(4)]
    assert received == [
        Event(Key.character("q")),
        TICK,
        Event(Key.ctrl("c")),
        TICK,
    ]


def test_ticks_without_input():
    with Events(EventConfig(tick_rate=0.01), scripted()) as events:
        received = [events.next(timeout=2) for _ in range(3)]
    assert all(event.is_tick for event in received)


def test_reader_receives_tick_rate():
    calls = []
    with Events.from_tick_rate_ms(20, scripted(calls=calls)) as events:
        events.next(timeout=2)
    assert calls and all(timeout == 0.02 for timeout in calls)


def test_reader_failure_is_reported():
    def broken(timeout):
        raise OSError("terminal gone")

    events = Events(EventConfig(tick_rate=0.01), broken)
    with pytest.raises(EventSourceError) as info:
        events.next(timeout=2)
    assert isinstance(info.value.__cause__, OSError)
    with pytest.raises(EventSourceError):
        events.next(timeout=2)
    events.close()


def test_next_times_out_while_reader_waits():
    gate = threading.Event()

    def blocked(timeout):
        gate.wait(timeout)
        return ""

    events = Events(EventConfig(tick_rate=5.0), blocked)
    with pytest.raises(queue.Empty):
        events.next(timeout=0.05)
    gate.set()
    events.close()
    assert events.next(timeout=2).is_tick


def test_close_stops_reading():
    calls = []
    events = Events(EventConfig(tick_rate=0.01), scripted(calls=calls))
    events.next(timeout=2)
    events.close()
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count