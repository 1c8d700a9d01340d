"""Polling access to keyboard and mouse state through a platform implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple

from .log import core_assert


class Input(ABC):
    """Static input queries; a platform subclass supplies the _impl hooks."""

    _instance: ClassVar[Optional["Input"]] = None

    @abstractmethod
    def _is_key_pressed_impl(self, keycode: int) -> bool:
        """Whether the key with this code is held down."""

    @abstractmethod
    def _is_mouse_button_pressed_impl(self, button: int) -> bool:
        """Whether the mouse button with this code is held down."""

    @abstractmethod
    def _mouse_position_impl(self) -> Tuple[float, float]:
        """The cursor position in window coordinates."""

    def _mouse_x_impl(self) -> float:
        return self._mouse_position_impl()[0]

    def _mouse_y_impl(self) -> float:
        return self._mouse_position_impl()[1]

    @staticmethod
    def set_instance(instance: Optional["Input"]) -> None:
        """Install the platform implementation used by the static queries."""
        Input._instance = instance

    @staticmethod
    def _current() -> "Input":
        instance = Input._instance
        core_assert(instance is not None, "No input implementation is installed!")
        return instance  # type: ignore[return-value]

    @staticmethod
    def is_key_pressed(keycode: int) -> bool:
        return bool(Input._current()._is_key_pressed_impl(keycode))

    @staticmethod
    def is_mouse_button_pressed(button: int) -> bool:
        return bool(Input._current()._is_mouse_button_pressed_impl(button))

    @staticmethod
    def mouse_position() -> Tuple[float, float]:
        x, y = Input._current()._mouse_position_impl()
        return float(x), float(y)

    @staticmethod
    def mouse_x() -> float:
        return float(Input._current()._mouse_x_impl())

    @staticmethod
    def mouse_y() -> float:
        return float(Input._current()._mouse_y_impl())