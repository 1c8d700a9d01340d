"""OpenGL vertex buffers, index buffers and vertex arrays."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from .buffer import IndexBuffer, ShaderDataType, VertexArray, VertexBuffer
from .log import core_assert

GL_FLOAT = 0x1406
GL_INT = 0x1404
GL_BOOL = 0x8B56
GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893
GL_STATIC_DRAW = 0x88E4

_BASE_TYPES = {
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.BOOL: GL_BOOL,
}


def _resolve_gl(gl: Optional[Any]) -> Any:
    if gl is not None:
        return gl
    from pyglet import gl as pyglet_gl

    return pyglet_gl


def _create_name(gl: Any, func: Callable[..., Any]) -> int:
    name = gl.GLuint(0)
    func(1, name)
    return int(name.value)


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """The OpenGL scalar type that holds the components of data_type."""
    base = _BASE_TYPES.get(data_type)
    core_assert(base is not None, "Unknown ShaderDataType!")
    return base  # type: ignore[return-value]


class OpenGLVertexBuffer(VertexBuffer):
    """Vertex data uploaded once into a static OpenGL array buffer."""

    def __init__(self, vertices: Sequence[float], gl: Optional[Any] = None) -> None:
        super().__init__()
        self._gl = _resolve_gl(gl)
        self.data = np.ascontiguousarray(np.asarray(vertices, dtype=np.float32).ravel())
        self.renderer_id = _create_name(self._gl, self._gl.glCreateBuffers)
        self._gl.glBindBuffer(GL_ARRAY_BUFFER, self.renderer_id)
        self._gl.glBufferData(
            GL_ARRAY_BUFFER, self.data.nbytes, self.data.tobytes(), GL_STATIC_DRAW
        )

    def bind(self) -> None:
        self._gl.glBindBuffer(GL_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindBuffer(GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the GPU buffer."""
        self._gl.glDeleteBuffers(1, self._gl.GLuint(self.renderer_id))


class OpenGLIndexBuffer(IndexBuffer):
    """32-bit indices uploaded into a static OpenGL element buffer."""

    def __init__(self, indices: Sequence[int], gl: Optional[Any] = None) -> None:
        self._gl = _resolve_gl(gl)
        self.data = np.ascontiguousarray(np.asarray(indices, dtype=np.uint32).ravel())
        self.renderer_id = _create_name(self._gl, self._gl.glCreateBuffers)
        self._gl.glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)
        self._gl.glBufferData(
            GL_ELEMENT_ARRAY_BUFFER, self.data.nbytes, self.data.tobytes(), GL_STATIC_DRAW
        )

    def bind(self) -> None:
        self._gl.glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)

    @property
    def count(self) -> int:
        return int(self.data.size)

    def delete(self) -> None:
        """Release the GPU buffer."""
        self._gl.glDeleteBuffers(1, self._gl.GLuint(self.renderer_id))


class OpenGLVertexArray(VertexArray):
    """An OpenGL vertex array object describing attribute layout."""

    def __init__(self, gl: Optional[Any] = None) -> None:
        super().__init__()
        self._gl = _resolve_gl(gl)
        self.renderer_id = _create_name(self._gl, self._gl.glCreateVertexArrays)

    def bind(self) -> None:
        self._gl.glBindVertexArray(self.renderer_id)

    def unbind(self) -> None:
        self._gl.glBindVertexArray(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer and enable one attribute per layout element."""
        layout = vertex_buffer.layout
        core_assert(len(layout) > 0, "Buffer Layouts are not defined!")
        self._gl.glBindVertexArray(self.renderer_id)
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            self._gl.glEnableVertexAttribArray(index)
            self._gl.glVertexAttribPointer(
                index,
                element.component_count(),
                shader_data_type_to_gl_base_type(element.data_type),
                int(bool(element.normalized)),
                layout.stride,
                element.offset,
            )
        self.vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self._gl.glBindVertexArray(self.renderer_id)
        self.index_buffer = index_buffer
        index_buffer.bind()

    def delete(self) -> None:
        """Release the vertex array object."""
        self._gl.glDeleteVertexArrays(1, self._gl.GLuint(self.renderer_id))