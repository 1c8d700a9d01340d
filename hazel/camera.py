"""Orthographic camera and a keyboard and mouse driven controller for it.

Matrices are 4x4 numpy arrays in the usual mathematical layout: they act on
column vectors and keep the translation in the last column.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .events import Event, EventDispatcher, MouseScrolledEvent, WindowResizeEvent
from .input import Input
from .keycodes import Key
from .timestep import Timestep

_MIN_ZOOM = 0.5
_MAX_ZOOM = 3.0


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection mapping the given box onto the clip cube [-1, 1]^3."""
    m = np.identity(4, dtype=np.float32)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _translation(position: np.ndarray) -> np.ndarray:
    m = np.identity(4, dtype=np.float32)
    m[:3, 3] = position
    return m


def _rotation_z(degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    m = np.identity(4, dtype=np.float32)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


class OrthographicCamera:
    """A 2D camera with a position and a rotation about the z axis (degrees)."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = np.identity(4, dtype=np.float32)
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3, dtype=np.float32)
        self._rotation = 0.0

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.array(value, dtype=np.float32).reshape(3)
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection

    def _recalculate_view(self) -> None:
        transform = _translation(self._position) @ _rotation_z(self._rotation)
        self._view = np.linalg.inv(transform).astype(np.float32)
        self._view_projection = self._projection @ self._view


class OrthographicCameraController:
    """Moves the camera with WASD, rotates it with Q/E and zooms with the wheel."""

    def __init__(self, aspect_ratio: float, can_rotate: bool = False) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._camera = OrthographicCamera(
            -self._aspect_ratio * self._zoom_level,
            self._aspect_ratio * self._zoom_level,
            -self._zoom_level,
            self._zoom_level,
        )
        self.can_rotate = can_rotate
        self.translation_speed = 5.0
        self.rotation_speed = 180.0
        self._position = np.zeros(3, dtype=np.float32)
        self._rotation = 0.0

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    def on_update(self, ts: Timestep) -> None:
        """Apply keyboard movement and rotation for one frame."""
        step = self.translation_speed * float(ts)
        if Input.is_key_pressed(Key.D):
            self._position[0] += step
        elif Input.is_key_pressed(Key.A):
            self._position[0] -= step

        if Input.is_key_pressed(Key.W):
            self._position[1] += step
        elif Input.is_key_pressed(Key.S):
            self._position[1] -= step

        if self.can_rotate:
            turn = self.rotation_speed * float(ts)
            if Input.is_key_pressed(Key.Q):
                self._rotation += turn
            elif Input.is_key_pressed(Key.E):
                self._rotation -= turn
            self._camera.rotation = self._rotation

        self._camera.position = self._position

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)

    def _update_projection(self) -> None:
        zoom = self._zoom_level
        self._camera.set_projection(
            -self._aspect_ratio * zoom, self._aspect_ratio * zoom, -zoom, zoom
        )

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level -= event.y_offset * 0.25
        if self._zoom_level <= _MIN_ZOOM:
            self._zoom_level = _MIN_ZOOM
        elif self._zoom_level >= _MAX_ZOOM:
            self._zoom_level = _MAX_ZOOM
        self._update_projection()
        return True

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        # A zero height (minimised window) leaves the aspect ratio unchanged.
        if event.height:
            self._aspect_ratio = float(event.width) / float(event.height)
            self._update_projection()
        return True