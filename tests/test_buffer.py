import pytest

from hazel.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexArray,
    VertexBuffer,
    shader_data_type_size,
)
from hazel.log import HazelError


class FakeVertexBuffer(VertexBuffer):
    def bind(self):
        pass

    def unbind(self):
        pass


class FakeIndexBuffer(IndexBuffer):
    def __init__(self, indices):
        self._indices = list(indices)

    def bind(self):
        pass

    def unbind(self):
        pass

    @property
    def count(self):
        return len(self._indices)


class FakeVertexArray(VertexArray):
    def bind(self):
        pass

    def unbind(self):
        pass


def test_sizes_fixed_by_source():
    assert shader_data_type_size(ShaderDataType.FLOAT) == 4
    assert shader_data_type_size(ShaderDataType.BOOL) == 1
    assert shader_data_type_size(ShaderDataType.MAT4) == 4 * 4 * 4


def test_vector_sizes_scale_with_components():
    for data_type in ShaderDataType:
        if data_type is ShaderDataType.NONE or data_type is ShaderDataType.BOOL:
            continue
        element = BufferElement(data_type, "a")
        assert element.size == 4 * element.component_count()


def test_unknown_type_size_raises():
    with pytest.raises(HazelError):
        shader_data_type_size(ShaderDataType.NONE)


def test_unknown_type_element_raises():
    with pytest.raises(HazelError):
        BufferElement(ShaderDataType.NONE, "a_Bad")


def test_component_counts():
    assert BufferElement(ShaderDataType.FLOAT3, "a").component_count() == 3
    assert BufferElement(ShaderDataType.MAT3, "a").component_count() == 3 * 3
    assert BufferElement(ShaderDataType.BOOL, "a").component_count() == 1


def test_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT2, "a_TextCord"),
        ]
    )
    position, text_coord = layout.elements
    assert position.offset == 0
    assert text_coord.offset == position.size
    assert layout.stride == position.size + text_coord.size
    assert [e.name for e in layout] == ["a_Position", "a_TextCord"]
    assert len(layout) == 2


def test_layout_does_not_change_given_elements():
    first = BufferElement(ShaderDataType.FLOAT4, "a")
    second = BufferElement(ShaderDataType.FLOAT, "b")
    BufferLayout([first, second])
    assert second.offset == 0


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0


def test_normalized_default_false():
    assert BufferElement(ShaderDataType.INT, "i").normalized is False
    assert BufferElement(ShaderDataType.INT, "i", True).normalized is True


def test_add_vertex_buffer_requires_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    array = FakeVertexArray()
    vb = FakeVertexBuffer()
    vb.layout = layout
    with pytest.raises(HazelError):
        array.add_vertex_buffer(vb)
    assert len(array.vertex_buffers) == 0


def test_add_vertex_buffer_and_index_buffer():
    layout = BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position")])
    assert layout.stride == 12
    assert [(e.name, e.offset) for e in layout] == [("a_Position", 0)]

    array = FakeVertexArray()
    vb = FakeVertexBuffer()
    vb.layout = layout
    array.add_vertex_buffer(vb)
    ib = FakeIndexBuffer([0, 1, 2, 2, 3, 0])
    array.set_index_buffer(ib)
    assert array.vertex_buffers == [vb]
    assert array.index_buffer is ib
    assert array.index_buffer.count == 6