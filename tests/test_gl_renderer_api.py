import logging

from hazel.gl_renderer_api import (
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_SRC_ALPHA,
    GL_TRIANGLES,
    GL_UNSIGNED_INT,
    GL_VENDOR,
    GL_VERSION,
    OpenGLContext,
    OpenGLRendererAPI,
)


class FakeGL:
    def __init__(self):
        self.calls = []

    def glGetString(self, name):
        return {GL_VENDOR: b"Vendor X", GL_VERSION: b"4.6"}.get(name, b"R")

    def __getattr__(self, name):
        if not name.startswith("gl"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


class FakeWindow:
    def __init__(self):
        self.events = []

    def switch_to(self):
        self.events.append("switch")

    def flip(self):
        self.events.append("flip")


class FakeIndexBuffer:
    count = 6


class FakeVertexArray:
    index_buffer = FakeIndexBuffer()


def test_init_enables_blending():
    gl = FakeGL()
    OpenGLRendererAPI(gl).init()
    assert gl.calls == [
        ("glEnable", (GL_BLEND,)),
        ("glBlendFunc", (GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)),
    ]


def test_viewport_clear_color_and_clear():
    gl = FakeGL()
    api = OpenGLRendererAPI(gl)
    api.set_viewport(0, 0, 1280, 720)
    api.set_clear_color((0.1, 0.1, 0.1, 1.0))
    api.clear()
    assert gl.calls[0] == ("glViewport", (0, 0, 1280, 720))
    assert gl.calls[1] == ("glClearColor", (0.1, 0.1, 0.1, 1.0))
    assert gl.calls[2] == ("glClear", (GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT,))


def test_draw_indexed_uses_index_count():
    gl = FakeGL()
    OpenGLRendererAPI(gl).draw_indexed(FakeVertexArray())
    assert gl.calls == [("glDrawElements", (GL_TRIANGLES, 6, GL_UNSIGNED_INT, None))]


def test_context_init_and_swap(caplog):
    window = FakeWindow()
    context = OpenGLContext(window, gl=FakeGL())
    with caplog.at_level(logging.INFO, logger="HAZEL"):
        context.init()
    context.swap_buffers()
    assert window.events == ["switch", "flip"]
    assert "Vendor X" in caplog.text
    assert "4.6" in caplog.text