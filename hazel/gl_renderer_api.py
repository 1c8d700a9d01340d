"""OpenGL implementation of the renderer API and the window graphics context."""

from __future__ import annotations

from itertools import count, takewhile
from typing import Any, Optional, Sequence

from .log import core_logger
from .renderer import GraphicsContext, RendererAPI

GL_BLEND = 0x0BE2
GL_SRC_ALPHA = 0x0302
GL_ONE_MINUS_SRC_ALPHA = 0x0303
GL_COLOR_BUFFER_BIT = 0x4000
GL_DEPTH_BUFFER_BIT = 0x0100
GL_TRIANGLES = 0x0004
GL_UNSIGNED_INT = 0x1405
GL_VENDOR = 0x1F00
GL_RENDERER = 0x1F01
GL_VERSION = 0x1F02


def _resolve_gl(gl: Optional[Any]) -> Any:
    if gl is not None:
        return gl
    from pyglet import gl as pyglet_gl

    return pyglet_gl


def _as_byte(item: Any) -> int:
    if isinstance(item, (bytes, bytearray)):
        return item[0] if item else 0
    return int(item)


def _gl_string(gl: Any, name: int) -> str:
    result = gl.glGetString(name)
    if not result:
        return ""
    if isinstance(result, (bytes, bytearray)):
        return bytes(result).decode("utf-8", "replace")
    if isinstance(result, str):
        return result
    # A pointer to a zero-terminated byte string: read until the terminator.
    raw = bytes(takewhile(bool, (_as_byte(result[i]) for i in count())))
    return raw.decode("utf-8", "replace")


class OpenGLRendererAPI(RendererAPI):
    """Draw operations issued straight to OpenGL."""

    def __init__(self, gl: Optional[Any] = None) -> None:
        self._gl_module = gl

    @property
    def _gl(self) -> Any:
        if self._gl_module is None:
            self._gl_module = _resolve_gl(None)
        return self._gl_module

    def init(self) -> None:
        self._gl.glEnable(GL_BLEND)
        self._gl.glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self._gl.glViewport(x, y, width, height)

    def set_clear_color(self, color: Sequence[float]) -> None:
        r, g, b, a = (float(c) for c in color)
        self._gl.glClearColor(r, g, b, a)

    def clear(self) -> None:
        self._gl.glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: Any) -> None:
        index_count = vertex_array.index_buffer.count
        self._gl.glDrawElements(GL_TRIANGLES, index_count, GL_UNSIGNED_INT, None)


class OpenGLContext(GraphicsContext):
    """The OpenGL context of a window (any object with switch_to() and flip())."""

    def __init__(self, window: Any, gl: Optional[Any] = None) -> None:
        self.window = window
        self._gl_module = gl

    def init(self) -> None:
        """Make the context current and log the driver details."""
        self.window.switch_to()
        gl = _resolve_gl(self._gl_module)
        logger = core_logger()
        logger.info("OpenGL Info:")
        logger.info("  Vendor: %s", _gl_string(gl, GL_VENDOR))
        logger.info("  Renderer: %s", _gl_string(gl, GL_RENDERER))
        logger.info("  Version: %s", _gl_string(gl, GL_VERSION))

    def swap_buffers(self) -> None:
        self.window.flip()