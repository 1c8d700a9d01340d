import string

import pytest

from hazel.events import (
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
from hazel.input import Input
from hazel.keycodes import Key, MouseButton
from hazel.window import (
    PygletInput,
    PygletWindow,
    WindowProps,
    pyglet_button_to_mouse_button,
    pyglet_key_to_keycode,
)


class FakeNative:
    def __init__(self):
        self.handlers = {}
        self.vsync_calls = []
        self.dispatched = 0
        self.pending = []
        self.closed = False

    def push_handlers(self, **handlers):
        self.handlers.update(handlers)

    def set_vsync(self, enabled):
        self.vsync_calls.append(enabled)

    def dispatch_events(self):
        self.dispatched += 1
        pending, self.pending = self.pending, []
        for name, args in pending:
            self.handlers[name](*args)

    def close(self):
        self.closed = True


class FakeContext:
    def __init__(self):
        self.initialised = 0
        self.swaps = 0

    def init(self):
        self.initialised += 1

    def swap_buffers(self):
        self.swaps += 1


@pytest.fixture
def parts():
    return FakeNative(), FakeContext()


@pytest.fixture
def window(parts):
    native, context = parts
    win = PygletWindow(WindowProps("Test", 200, 100), native=native, context=context)
    events = []
    win.set_event_callback(events.append)
    win.events = events
    return win


@pytest.fixture(autouse=True)
def reset_input():
    yield
    Input.set_instance(None)


def test_window_props_defaults():
    props = WindowProps()
    assert props.title == "Hazel Window"
    assert (props.width, props.height) == (1280, 720)


def test_construction_initialises_context_and_vsync(parts):
    native, context = parts
    win = PygletWindow(WindowProps("Test", 200, 100), native=native, context=context)
    assert context.initialised == 1
    assert win.vsync is True
    assert native.vsync_calls == [True]
    assert (win.width, win.height) == (200, 100)
    assert win.native_window is native
    assert set(native.handlers) >= {"on_key_press", "on_close", "on_resize", "on_text"}


def test_vsync_setter(window):
    window.vsync = False
    assert window.vsync is False
    assert window.native_window.vsync_calls[-1] is False


def test_on_update_polls_and_swaps(window, parts):
    native, context = parts
    native.pending.append(("on_resize", (320, 240)))
    window.on_update()
    assert (window.width, window.height) == (320, 240)
    event = window.events[-1]
    assert isinstance(event, WindowResizeEvent)
    assert (event.width, event.height) == (320, 240)
    window.on_update()
    assert len(window.events) == 1
    assert native.dispatched == 2
    assert context.swaps == 2


def test_key_press_and_repeat(window):
    press = window.native_window.handlers["on_key_press"]
    press(ord("a"), 0)
    press(ord("a"), 0)
    first, second = window.events
    assert isinstance(first, KeyPressedEvent)
    assert first.key_code == Key.A
    assert (first.repeat_count, second.repeat_count) == (0, 1)


def test_key_release(window):
    window.native_window.handlers["on_key_press"](ord("w"), 0)
    window.native_window.handlers["on_key_release"](ord("w"), 0)
    released = window.events[-1]
    assert isinstance(released, KeyReleasedEvent)
    assert released.key_code == Key.W


def test_text_produces_typed_events(window):
    window.native_window.handlers["on_text"]("hi")
    assert all(isinstance(e, KeyTypedEvent) for e in window.events)
    assert [e.key_code for e in window.events] == [ord("h"), ord("i")]


def test_resize_updates_size(window):
    window.native_window.handlers["on_resize"](640, 480)
    event = window.events[-1]
    assert isinstance(event, WindowResizeEvent)
    assert (event.width, event.height) == (640, 480)
    assert (window.width, window.height) == (640, 480)


def test_close_is_reported_and_handled(window):
    result = window.native_window.handlers["on_close"]()
    assert result is True
    assert isinstance(window.events[-1], WindowCloseEvent)


def test_mouse_buttons(window):
    window.native_window.handlers["on_mouse_press"](0, 0, 1, 0)
    window.native_window.handlers["on_mouse_release"](0, 0, 1, 0)
    pressed, released = window.events
    assert isinstance(pressed, MouseButtonPressedEvent)
    assert isinstance(released, MouseButtonReleasedEvent)
    assert pressed.button == MouseButton.LEFT == released.button


def test_mouse_motion_uses_top_left_origin(window):
    window.native_window.handlers["on_mouse_motion"](10, 30, 0, 0)
    event = window.events[-1]
    assert isinstance(event, MouseMovedEvent)
    assert event.x == 10
    assert event.y + 30 == window.height


def test_mouse_scroll(window):
    window.native_window.handlers["on_mouse_scroll"](0, 0, 0.5, -2.0)
    event = window.events[-1]
    assert isinstance(event, MouseScrolledEvent)
    assert (event.x_offset, event.y_offset) == (0.5, -2.0)


def test_input_reflects_window_state(window):
    Input.set_instance(PygletInput(window))
    handlers = window.native_window.handlers
    handlers["on_key_press"](ord("d"), 0)
    handlers["on_mouse_press"](0, 0, 4, 0)
    handlers["on_mouse_motion"](5, 40, 0, 0)
    assert Input.is_key_pressed(Key.D) is True
    assert Input.is_key_pressed(Key.A) is False
    assert Input.is_mouse_button_pressed(MouseButton.RIGHT) is True
    assert Input.mouse_x() == 5
    assert Input.mouse_position() == (Input.mouse_x(), Input.mouse_y())
    handlers["on_key_release"](ord("d"), 0)
    assert Input.is_key_pressed(Key.D) is False


def test_close_closes_native(window):
    window.close()
    assert window.native_window.closed is True


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_letters_map_to_keys(letter):
    assert pyglet_key_to_keycode(ord(letter)) == Key[letter.upper()]


def test_digits_and_punctuation_map_directly():
    assert pyglet_key_to_keycode(ord("5")) == Key.D5
    assert pyglet_key_to_keycode(ord(" ")) == Key.SPACE
    assert pyglet_key_to_keycode(ord("[")) == Key.LEFT_BRACKET


def test_unknown_key_symbol():
    assert pyglet_key_to_keycode(0x12345678) is None


def test_mouse_button_mapping():
    assert pyglet_button_to_mouse_button(1) == MouseButton.LEFT
    assert pyglet_button_to_mouse_button(4) == MouseButton.RIGHT
    assert pyglet_button_to_mouse_button(2) == MouseButton.MIDDLE
    assert pyglet_button_to_mouse_button(64) is None