"""Renderer front end: the graphics API switch, render commands and scene submission."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    from .buffer import VertexArray
    from .camera import OrthographicCamera


class GraphicsAPI(Enum):
    """Graphics back ends the renderer can target."""

    NONE = 0
    OPENGL = 1


class RendererAPI(ABC):
    """Low-level drawing operations implemented by a graphics back end."""

    api: ClassVar[GraphicsAPI] = GraphicsAPI.OPENGL

    @abstractmethod
    def init(self) -> None:
        """Prepare global render state."""

    @abstractmethod
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area of the framebuffer that is drawn to."""

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used by clear()."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the colour and depth buffers."""

    @abstractmethod
    def draw_indexed(self, vertex_array: "VertexArray") -> None:
        """Draw the triangles described by the vertex array's index buffer."""

    @staticmethod
    def get_api() -> GraphicsAPI:
        """The graphics back end in use."""
        return RendererAPI.api


class RenderCommand:
    """Static entry points that forward to the active RendererAPI."""

    _renderer_api: ClassVar[Optional[RendererAPI]] = None

    @staticmethod
    def set_renderer_api(renderer_api: Optional[RendererAPI]) -> None:
        """Use renderer_api for all commands; None restores the OpenGL default."""
        RenderCommand._renderer_api = renderer_api

    @staticmethod
    def _backend() -> RendererAPI:
        if RenderCommand._renderer_api is None:
            from .gl_renderer_api import OpenGLRendererAPI

            RenderCommand._renderer_api = OpenGLRendererAPI()
        return RenderCommand._renderer_api

    @staticmethod
    def init() -> None:
        RenderCommand._backend().init()

    @staticmethod
    def set_viewport(x: int, y: int, width: int, height: int) -> None:
        RenderCommand._backend().set_viewport(x, y, width, height)

    @staticmethod
    def set_clear_color(color: Sequence[float]) -> None:
        RenderCommand._backend().set_clear_color(color)

    @staticmethod
    def clear() -> None:
        RenderCommand._backend().clear()

    @staticmethod
    def draw_indexed(vertex_array: "VertexArray") -> None:
        RenderCommand._backend().draw_indexed(vertex_array)


class Renderer:
    """Scene-level rendering: camera set-up and submission of draw calls."""

    _view_projection: ClassVar[np.ndarray] = np.identity(4, dtype=np.float32)

    @staticmethod
    def init() -> None:
        RenderCommand.init()

    @staticmethod
    def on_window_resize(width: int, height: int) -> None:
        RenderCommand.set_viewport(0, 0, width, height)

    @staticmethod
    def begin_scene(camera: "OrthographicCamera") -> None:
        """Remember the camera's view-projection matrix for the following submits."""
        Renderer._view_projection = np.array(
            camera.view_projection_matrix, dtype=np.float32, copy=True
        )

    @staticmethod
    def end_scene() -> None:
        """Finish the current scene."""

    @staticmethod
    def submit(shader: Any, vertex_array: "VertexArray", transform: Any = None) -> None:
        """Bind the shader and geometry, upload the matrices and draw."""
        if transform is None:
            transform = np.identity(4, dtype=np.float32)
        vertex_array.bind()
        shader.bind()
        shader.upload_uniform_mat4("u_ViewProjection", Renderer._view_projection)
        shader.upload_uniform_mat4("u_Transform", np.asarray(transform, dtype=np.float32))
        RenderCommand.draw_indexed(vertex_array)

    @staticmethod
    def get_api() -> GraphicsAPI:
        return RendererAPI.get_api()


class GraphicsContext(ABC):
    """A rendering context bound to a native window."""

    @abstractmethod
    def init(self) -> None:
        """Make the context current and load the graphics functions."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the back buffer."""