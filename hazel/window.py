"""Desktop windows that turn native input into engine events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set, Tuple

from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from .gl_renderer_api import OpenGLContext
from .input import Input
from .keycodes import Key, MouseButton
from .log import core_logger
from .renderer import GraphicsContext

EventCallback = Callable[[Event], None]

# Key symbols used by pyglet for keys outside the printable ASCII range.
_SPECIAL_KEYS: Dict[int, Key] = {
    0xFF1B: Key.ESCAPE,
    0xFF0D: Key.ENTER,
    0xFF09: Key.TAB,
    0xFF08: Key.BACKSPACE,
    0xFF63: Key.INSERT,
    0xFFFF: Key.DELETE,
    0xFF53: Key.RIGHT,
    0xFF51: Key.LEFT,
    0xFF54: Key.DOWN,
    0xFF52: Key.UP,
    0xFF55: Key.PAGE_UP,
    0xFF56: Key.PAGE_DOWN,
    0xFF50: Key.HOME,
    0xFF57: Key.END,
    0xFFE5: Key.CAPS_LOCK,
    0xFF14: Key.SCROLL_LOCK,
    0xFF7F: Key.NUM_LOCK,
    0xFF61: Key.PRINT_SCREEN,
    0xFF13: Key.PAUSE,
    0xFFAE: Key.KP_DECIMAL,
    0xFFAF: Key.KP_DIVIDE,
    0xFFAA: Key.KP_MULTIPLY,
    0xFFAD: Key.KP_SUBTRACT,
    0xFFAB: Key.KP_ADD,
    0xFF8D: Key.KP_ENTER,
    0xFFBD: Key.KP_EQUAL,
    0xFFE1: Key.LEFT_SHIFT,
    0xFFE3: Key.LEFT_CONTROL,
    0xFFE9: Key.LEFT_ALT,
    0xFFEB: Key.LEFT_SUPER,
    0xFFE2: Key.RIGHT_SHIFT,
    0xFFE4: Key.RIGHT_CONTROL,
    0xFFEA: Key.RIGHT_ALT,
    0xFFEC: Key.RIGHT_SUPER,
    0xFF67: Key.MENU,
}
_SPECIAL_KEYS.update({0xFFB0 + n: Key[f"KP_{n}"] for n in range(10)})
_SPECIAL_KEYS.update({0xFFBE + n: Key[f"F{n + 1}"] for n in range(25)})

_MOUSE_BUTTONS: Dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    4: MouseButton.RIGHT,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def pyglet_key_to_keycode(symbol: int) -> Optional[Key]:
    """Engine key code for a pyglet key symbol, or None if it has none."""
    if ord("a") <= symbol <= ord("z"):
        return Key(symbol - ord("a") + ord("A"))
    special = _SPECIAL_KEYS.get(symbol)
    if special is not None:
        return special
    try:
        return Key(symbol) if symbol < 128 else None
    except ValueError:
        return None


def pyglet_button_to_mouse_button(button: int) -> Optional[MouseButton]:
    """Engine mouse button for a pyglet button flag, or None if it has none."""
    return _MOUSE_BUTTONS.get(button)


def _ignore(event: Event) -> None:
    """Default callback used until one is set."""


@dataclass
class WindowProps:
    """Title and size a window is created with."""

    title: str = "Hazel Window"
    width: int = 1280
    height: int = 720


class Window(ABC):
    """A desktop window that reports its events through one callback."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending native events and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Client area width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Client area height in pixels."""

    @property
    @abstractmethod
    def native_window(self) -> Any:
        """The platform window object."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Send every event produced by the window to callback."""

    @property
    @abstractmethod
    def vsync(self) -> bool:
        """Whether buffer swaps wait for the display refresh."""

    @vsync.setter
    @abstractmethod
    def vsync(self, enabled: bool) -> None:
        """Turn vertical sync on or off."""

    def close(self) -> None:
        """Release the window."""

    @staticmethod
    def create(props: Optional[WindowProps] = None) -> "Window":
        """Open a window for the current platform."""
        return PygletWindow(props or WindowProps())


class PygletWindow(Window):
    """A window backed by pyglet with an OpenGL context."""

    def __init__(
        self,
        props: Optional[WindowProps] = None,
        native: Optional[Any] = None,
        context: Optional[GraphicsContext] = None,
    ) -> None:
        props = props or WindowProps()
        self._title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._callback: EventCallback = _ignore
        self._pressed_keys: Set[int] = set()
        self._pressed_buttons: Set[int] = set()
        self._cursor: Tuple[float, float] = (0.0, 0.0)

        core_logger().info("Creating window %s (%s, %s)", props.title, props.width, props.height)

        if native is None:
            from pyglet import window as pyglet_window

            native = pyglet_window.Window(
                width=props.width, height=props.height, caption=props.title, resizable=True
            )
        self._native = native
        self._context = context if context is not None else OpenGLContext(native)
        self._context.init()
        self.vsync = True

        native.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_text=self._on_text,
            on_resize=self._on_resize,
            on_close=self._on_close,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_scroll=self._on_mouse_scroll,
        )

    @property
    def title(self) -> str:
        return self._title

    def on_update(self) -> None:
        self._native.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def native_window(self) -> Any:
        return self._native

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._native.set_vsync(bool(enabled))
        self._vsync = bool(enabled)

    def close(self) -> None:
        self._native.close()

    # Native handlers

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        code = pyglet_key_to_keycode(symbol)
        if code is None:
            return False
        repeat = 1 if code in self._pressed_keys else 0
        self._pressed_keys.add(code)
        self._callback(KeyPressedEvent(code, repeat))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        code = pyglet_key_to_keycode(symbol)
        if code is None:
            return False
        self._pressed_keys.discard(code)
        self._callback(KeyReleasedEvent(code))
        return True

    def _on_text(self, text: str) -> None:
        for char in text:
            self._callback(KeyTypedEvent(ord(char)))

    def _on_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        core_logger().warning("%s, %s", width, height)
        self._callback(WindowResizeEvent(width, height))

    def _on_close(self) -> bool:
        self._callback(WindowCloseEvent())
        return True

    def _on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        mapped = pyglet_button_to_mouse_button(button)
        if mapped is not None:
            self._pressed_buttons.add(mapped)
            self._callback(MouseButtonPressedEvent(mapped))

    def _on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        mapped = pyglet_button_to_mouse_button(button)
        if mapped is not None:
            self._pressed_buttons.discard(mapped)
            self._callback(MouseButtonReleasedEvent(mapped))

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        # Engine coordinates start at the top-left corner of the window.
        self._cursor = (float(x), float(self._height - y))
        self._callback(MouseMovedEvent(*self._cursor))

    def _on_mouse_drag(
        self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
    ) -> None:
        self._on_mouse_motion(x, y, dx, dy)

    def _on_mouse_scroll(self, x: float, y: float, scroll_x: float, scroll_y: float) -> None:
        self._callback(MouseScrolledEvent(float(scroll_x), float(scroll_y)))


class PygletInput(Input):
    """Input queries answered from the state a PygletWindow has observed."""

    def __init__(self, window: PygletWindow) -> None:
        self._window = window

    def _is_key_pressed_impl(self, keycode: int) -> bool:
        return keycode in self._window._pressed_keys

    def _is_mouse_button_pressed_impl(self, button: int) -> bool:
        return button in self._window._pressed_buttons

    def _mouse_position_impl(self) -> Tuple[float, float]:
        return self._window._cursor