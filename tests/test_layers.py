from hazel.events import WindowCloseEvent
from hazel.layers import Layer, LayerStack
from hazel.timestep import Timestep


def _stack_with(*names):
    return [Layer(name) for name in names]


def test_layer_default_name():
    assert Layer().name == "Layer"
    assert Layer("Example").name == "Example"


def test_layer_hooks_return_none():
    layer = Layer()
    results = [
        layer.on_attach(),
        layer.on_detach(),
        layer.on_update(Timestep(0.1)),
        layer.on_imgui_render(),
        layer.on_event(WindowCloseEvent()),
    ]
    assert results == [None] * 5


def test_layers_come_before_overlays():
    l1, l2, o1, o2 = _stack_with("l1", "l2", "o1", "o2")
    stack = LayerStack()
    stack.push_overlay(o1)
    stack.push_layer(l1)
    stack.push_overlay(o2)
    stack.push_layer(l2)
    assert list(stack) == [l1, l2, o1, o2]
    assert len(stack) == 4


def test_reversed_iteration():
    l1, o1 = _stack_with("l1", "o1")
    stack = LayerStack()
    stack.push_layer(l1)
    stack.push_overlay(o1)
    assert list(reversed(stack)) == [o1, l1]


def test_pop_layer_moves_insert_point():
    l1, l2, l3, o1 = _stack_with("l1", "l2", "l3", "o1")
    stack = LayerStack()
    stack.push_layer(l1)
    stack.push_layer(l2)
    stack.push_overlay(o1)
    stack.pop_layer(l1)
    stack.push_layer(l3)
    assert list(stack) == [l2, l3, o1]


def test_pop_overlay():
    l1, o1 = _stack_with("l1", "o1")
    stack = LayerStack()
    stack.push_layer(l1)
    stack.push_overlay(o1)
    stack.pop_overlay(o1)
    assert list(stack) == [l1]


def test_pop_missing_does_nothing():
    l1, stranger = _stack_with("l1", "x")
    stack = LayerStack()
    stack.push_layer(l1)
    stack.pop_layer(stranger)
    stack.pop_overlay(stranger)
    assert list(stack) == [l1]


def test_pop_uses_identity():
    a = Layer("same")
    b = Layer("same")
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_layer(b)
    stack.pop_layer(b)
    assert len(stack) == 1
    assert next(iter(stack)) is a