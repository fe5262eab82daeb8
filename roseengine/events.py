"""Window and input events, and dispatching them to typed handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Callable, ClassVar, TypeVar

from roseengine.keycodes import KeyCode


class EventType(Enum):
    """Every kind of event the engine produces."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    KEY_PRESSED = 6
    KEY_RELEASED = 7
    MOUSE_BUTTON_PRESSED = 8
    MOUSE_BUTTON_RELEASED = 9
    MOUSE_MOVED = 10
    MOUSE_SCROLLED = 11


class EventCategory(IntFlag):
    """Categories an event can belong to; an event may be in several."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base of all events. ``handled`` is set once a dispatcher has served it."""

    static_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "Event"
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = False

    @property
    def event_type(self) -> EventType:
        return type(self).static_type

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler if the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], object]) -> bool:
        """Call ``func`` if the event matches ``event_class``; report whether it did."""
        if self.event.event_type != event_class.static_type:
            return False
        func(self.event)  # type: ignore[arg-type]
        self.event.handled = True
        return True


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    static_type = EventType.WINDOW_RESIZE
    name = "WindowResize"
    category_flags = EventCategory.APPLICATION


@dataclass
class WindowCloseEvent(Event):
    static_type = EventType.WINDOW_CLOSE
    name = "WindowCloseEvent"
    category_flags = EventCategory.APPLICATION


@dataclass
class KeyEvent(Event):
    """Common base of keyboard events."""

    key: int

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    @property
    def key_code(self) -> KeyCode | int:
        """The key as a :class:`KeyCode`, or the raw number if it has no name."""
        try:
            return KeyCode(self.key)
        except ValueError:
            return self.key


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int

    static_type = EventType.KEY_PRESSED
    name = "KeyPressedEvent"


@dataclass
class KeyReleasedEvent(KeyEvent):
    static_type = EventType.KEY_RELEASED
    name = "KeyReleasedEvent"


@dataclass
class MouseMovedEvent(Event):
    x: float
    y: float

    static_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class MouseButtonPressedEvent(Event):
    button: int
    action: int
    mods: int

    static_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT