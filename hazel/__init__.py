"""A layered 2D rendering engine: events, layers, an orthographic camera and an OpenGL renderer on pyglet."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "buffer",
    "camera",
    "events",
    "gl_buffer",
    "gl_renderer_api",
    "gl_shader",
    "gl_texture",
    "input",
    "keycodes",
    "layers",
    "log",
    "renderer",
    "shader",
    "timestep",
    "window",
]