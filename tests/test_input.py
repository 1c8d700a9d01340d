import pytest

from hazel.input import Input
from hazel.keycodes import Key, MouseButton
from hazel.log import HazelError


class FakeInput(Input):
    def __init__(self):
        self.keys = set()
        self.buttons = set()
        self.position = (0.0, 0.0)

    def _is_key_pressed_impl(self, keycode):
        return keycode in self.keys

    def _is_mouse_button_pressed_impl(self, button):
        return button in self.buttons

    def _mouse_position_impl(self):
        return self.position


@pytest.fixture
def fake_input():
    instance = FakeInput()
    Input.set_instance(instance)
    yield instance
    Input.set_instance(None)


def test_key_pressed(fake_input):
    fake_input.keys.add(Key.W)
    assert Input.is_key_pressed(Key.W) is True
    assert Input.is_key_pressed(Key.S) is False


def test_mouse_button(fake_input):
    fake_input.buttons.add(MouseButton.LEFT)
    assert Input.is_mouse_button_pressed(MouseButton.BUTTON_1) is True
    assert Input.is_mouse_button_pressed(MouseButton.RIGHT) is False


def test_mouse_position(fake_input):
    fake_input.position = (12.5, 40.0)
    assert Input.mouse_position() == (12.5, 40.0)
    assert Input.mouse_x() == 12.5
    assert Input.mouse_y() == 40.0


def test_no_instance_raises():
    Input.set_instance(None)
    with pytest.raises(HazelError):
        Input.is_key_pressed(Key.A)
    with pytest.raises(HazelError):
        Input.mouse_position()