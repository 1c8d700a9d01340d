"""Window, keyboard and mouse events and a type-based dispatcher."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Callable, ClassVar, Optional, Type, TypeVar


class EventType(Enum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15

    @property
    def label(self) -> str:
        """CamelCase name of the event type, e.g. 'WindowResize'."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE_BUTTON = 1 << 3
    MOUSE = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events; concrete classes set event_type and category."""

    event_type: ClassVar[Optional[EventType]] = None
    category: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        event_type = type(self).event_type
        return event_type.label if event_type is not None else type(self).__name__

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(type(self).category & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler registered for its exact type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: Type[E], func: Callable[[E], bool]) -> bool:
        """Call func if the event has event_class's type; return whether it did."""
        wanted = getattr(event_class, "event_type", None)
        if wanted is None or type(self.event).event_type != wanted:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True


# Application events

class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category = EventCategory.APPLICATION


# Key events

class KeyEvent(Event):
    category = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code}({self.repeat_count})"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __init__(self, key_code: int) -> None:
        super().__init__(key_code)
        self.repeat_count = 0

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}({self.repeat_count})"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent:{self.key_code}"


# Mouse events

class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category = EventCategory.INPUT | EventCategory.MOUSE

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"