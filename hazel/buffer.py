"""Vertex layouts, vertex and index buffers and vertex arrays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

from .log import core_assert
from .renderer import GraphicsAPI, Renderer


class ShaderDataType(Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}

_NO_API = "RendererAPI NONE is not supported"


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of data_type."""
    size = _SIZES.get(data_type)
    core_assert(size is not None, "Unknown ShaderDataType!")
    return size  # type: ignore[return-value]


@dataclass
class BufferElement:
    """One named vertex attribute within a buffer layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False, default=0)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        """Number of scalar components in this attribute."""
        count = _COMPONENTS.get(self.data_type)
        core_assert(count is not None, "Unknown ShaderDataType!")
        return count  # type: ignore[return-value]


class BufferLayout:
    """Ordered attributes of a vertex, with offsets and stride worked out."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements: List[BufferElement] = [replace(element) for element in elements]
        offset = 0
        for element in self._elements:
            element.offset = offset
            offset += element.size
        self.stride = offset

    @property
    def elements(self) -> List[BufferElement]:
        return list(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({self._elements!r})"


class VertexBuffer(ABC):
    """GPU buffer of vertex data described by a layout."""

    def __init__(self) -> None:
        self.layout = BufferLayout()

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any vertex buffer."""

    @staticmethod
    def create(vertices: Sequence[float]) -> "VertexBuffer":
        """Create a vertex buffer for the active graphics API."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_buffer import OpenGLVertexBuffer

        return OpenGLVertexBuffer(vertices)


class IndexBuffer(ABC):
    """GPU buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any index buffer."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of indices in the buffer."""

    @staticmethod
    def create(indices: Sequence[int]) -> "IndexBuffer":
        """Create an index buffer for the active graphics API."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_buffer import OpenGLIndexBuffer

        return OpenGLIndexBuffer(indices)


class VertexArray(ABC):
    """Vertex buffers and one index buffer drawn together."""

    def __init__(self) -> None:
        self.vertex_buffers: List[VertexBuffer] = []
        self.index_buffer: Optional[IndexBuffer] = None

    @abstractmethod
    def bind(self) -> None:
        """Make this vertex array current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any vertex array."""

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer; its layout must not be empty."""
        core_assert(len(vertex_buffer.layout) > 0, "Buffer Layouts are not defined!")
        self.vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self.index_buffer = index_buffer

    @staticmethod
    def create() -> "VertexArray":
        """Create a vertex array for the active graphics API."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_buffer import OpenGLVertexArray

        return OpenGLVertexArray()