"""Events for the graphics library and the interval timer that produces them.

Event classes are single bits that can be ORed into a mask; each event type
is its class plus a small offset.  The ``CLICK_EVENT`` class matches only
``MOUSE_CLICKED`` events.
"""

from __future__ import annotations

import enum
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, ClassVar

__all__ = [
    "EventClass",
    "EventType",
    "Modifier",
    "KeyCode",
    "GEvent",
    "GWindowEvent",
    "GActionEvent",
    "GMouseEvent",
    "GKeyEvent",
    "GTimerEvent",
    "EventQueue",
    "GTimer",
    "default_queue",
]


class EventClass(enum.IntFlag):
    """Event classes; combine them with ``|`` to form a mask."""

    ACTION_EVENT = 0x010
    KEY_EVENT = 0x020
    TIMER_EVENT = 0x040
    WINDOW_EVENT = 0x080
    MOUSE_EVENT = 0x100
    CLICK_EVENT = 0x200
    ANY_EVENT = 0x3F0


class EventType(enum.IntEnum):
    """Specific event types."""

    WINDOW_CLOSED = 0x080 + 1
    WINDOW_RESIZED = 0x080 + 2
    ACTION_PERFORMED = 0x010 + 1
    MOUSE_CLICKED = 0x100 + 1
    MOUSE_PRESSED = 0x100 + 2
    MOUSE_RELEASED = 0x100 + 3
    MOUSE_MOVED = 0x100 + 4
    MOUSE_DRAGGED = 0x100 + 5
    KEY_PRESSED = 0x020 + 1
    KEY_RELEASED = 0x020 + 2
    KEY_TYPED = 0x020 + 3
    TIMER_TICKED = 0x040 + 1


class Modifier(enum.IntFlag):
    """Modifier bits reported with an event."""

    SHIFT_DOWN = 1 << 0
    CTRL_DOWN = 1 << 1
    META_DOWN = 1 << 2
    ALT_DOWN = 1 << 3
    ALT_GRAPH_DOWN = 1 << 4
    BUTTON1_DOWN = 1 << 5
    BUTTON2_DOWN = 1 << 6
    BUTTON3_DOWN = 1 << 7


class KeyCode(enum.IntEnum):
    """Codes for keys that have no printable character."""

    BACKSPACE_KEY = 8
    TAB_KEY = 9
    ENTER_KEY = 10
    CLEAR_KEY = 12
    ESCAPE_KEY = 27
    PAGE_UP_KEY = 33
    PAGE_DOWN_KEY = 34
    END_KEY = 35
    HOME_KEY = 36
    LEFT_ARROW_KEY = 37
    UP_ARROW_KEY = 38
    RIGHT_ARROW_KEY = 39
    DOWN_ARROW_KEY = 40
    F1_KEY = 112
    F2_KEY = 113
    F3_KEY = 114
    F4_KEY = 115
    F5_KEY = 116
    F6_KEY = 117
    F7_KEY = 118
    F8_KEY = 119
    F9_KEY = 120
    F10_KEY = 121
    F11_KEY = 122
    F12_KEY = 123
    DELETE_KEY = 127
    HELP_KEY = 156


def _now_ms() -> float:
    return time.time() * 1000.0


@dataclass
class GEvent:
    """An event of any type; ``time`` is milliseconds since the epoch."""

    _event_class: ClassVar[EventClass | None] = None

    event_type: EventType
    time: float = field(default_factory=_now_ms, kw_only=True)
    modifiers: Modifier = field(default=Modifier(0), kw_only=True)

    def __post_init__(self) -> None:
        self.event_type = EventType(self.event_type)
        self.modifiers = Modifier(self.modifiers)
        expected = type(self)._event_class
        if expected is not None and self.event_class != expected:
            raise ValueError(
                f"{type(self).__name__} cannot carry event type {self.event_type.name}"
            )

    @property
    def event_class(self) -> EventClass:
        """The class the event's type belongs to."""
        return EventClass(int(self.event_type) & int(EventClass.ANY_EVENT))

    def matches(self, mask: int) -> bool:
        """Return True if the event is selected by ``mask``."""
        mask = int(mask)
        if mask & int(self.event_class):
            return True
        return bool(mask & EventClass.CLICK_EVENT) and (
            self.event_type is EventType.MOUSE_CLICKED
        )


@dataclass
class GWindowEvent(GEvent):
    """A change in a window."""

    _event_class: ClassVar[EventClass | None] = EventClass.WINDOW_EVENT

    window: Any


@dataclass
class GActionEvent(GEvent):
    """Activation of an interactor."""

    _event_class: ClassVar[EventClass | None] = EventClass.ACTION_EVENT

    source: Any
    action_command: str


@dataclass
class GMouseEvent(GEvent):
    """A mouse action at a point in a window."""

    _event_class: ClassVar[EventClass | None] = EventClass.MOUSE_EVENT

    window: Any
    x: float
    y: float


@dataclass
class GKeyEvent(GEvent):
    """A key action in a window.

    ``key_char`` is the typed character after modifiers, or ``"\\0"``
    when the key has no character.
    """

    _event_class: ClassVar[EventClass | None] = EventClass.KEY_EVENT

    window: Any
    key_char: str
    key_code: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.key_char, int):
            self.key_char = chr(self.key_char)
        if len(self.key_char) != 1:
            raise ValueError("key_char must be a single character")


@dataclass
class GTimerEvent(GEvent):
    """A tick from a timer."""

    _event_class: ClassVar[EventClass | None] = EventClass.TIMER_EVENT

    timer: GTimer


class EventQueue:
    """A thread-safe queue of pending events."""

    def __init__(self) -> None:
        self._events: deque[GEvent] = deque()
        self._cond = threading.Condition()

    def post(self, event: GEvent) -> None:
        """Append an event and wake any waiting reader."""
        with self._cond:
            self._events.append(event)
            self._cond.notify_all()

    def _take(self, mask: int) -> GEvent | None:
        while self._events:
            event = self._events.popleft()
            if event.matches(mask):
                return event
        return None

    def get_next_event(self, mask: int = EventClass.ANY_EVENT) -> GEvent | None:
        """Return the first pending event covered by ``mask``, or None.

        Pending events ahead of it that the mask does not cover are discarded.
        """
        with self._cond:
            return self._take(mask)

    def wait_for_event(
        self, mask: int = EventClass.ANY_EVENT, timeout: float | None = None
    ) -> GEvent | None:
        """Block until an event covered by ``mask`` arrives and return it.

        Events not covered by the mask are discarded.  With a timeout in
        seconds, None is returned if it expires first.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while True:
                event = self._take(mask)
                if event is not None:
                    return event
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                self._cond.wait(remaining)

    def wait_for_click(self, timeout: float | None = None) -> GEvent | None:
        """Wait for a mouse click, discarding any other events."""
        return self.wait_for_event(EventClass.CLICK_EVENT, timeout)

    def __len__(self) -> int:
        with self._cond:
            return len(self._events)


default_queue = EventQueue()


class GTimer:
    """An interval timer that posts a timer event every ``delay`` milliseconds."""

    def __init__(self, milliseconds: float, queue: EventQueue | None = None) -> None:
        if milliseconds <= 0:
            raise ValueError("timer delay must be positive")
        self.delay = float(milliseconds)
        self.queue = queue if queue is not None else default_queue
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """True while the timer is generating events."""
        return self._thread is not None and not self._stop_event.is_set()

    def start(self) -> None:
        """Start generating events; starting a running timer does nothing."""
        if self.running:
            return
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._run, args=(stop_event,), daemon=True
        )
        self._thread.start()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.delay / 1000.0):
            self.queue.post(GTimerEvent(EventType.TIMER_TICKED, self))

    def stop(self) -> None:
        """Stop generating events."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> GTimer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"GTimer(delay={self.delay!r}, running={self.running})"