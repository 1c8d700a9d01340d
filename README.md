# hazel

A small engine for interactive 2D rendering on OpenGL. An application owns a
window and a stack of layers; every frame each layer is updated with the time
that has passed, and every window or input event travels down the stack from
the topmost overlay until some layer marks it handled.

Windows and the OpenGL context come from pyglet, images are read with Pillow
and matrices are numpy arrays.

## Modules

- `hazel.events` – typed events (`WindowResizeEvent`, `WindowCloseEvent`,
  `KeyPressedEvent`, `KeyReleasedEvent`, `KeyTypedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent`, …), `EventType`,
  `EventCategory` flags tested with `Event.is_in_category`, and
  `EventDispatcher`, whose `dispatch(event_class, func)` calls `func` only when
  the event is of that exact type and stores its result in `event.handled`.
- `hazel.layers` – `Layer`, with the hooks `on_attach`, `on_detach`,
  `on_update`, `on_imgui_render` and `on_event`, and `LayerStack`, which keeps
  ordinary layers (`push_layer`) below overlays (`push_overlay`) and can be
  iterated forwards or with `reversed()`.
- `hazel.timestep` – `Timestep`, a frame time in seconds with `seconds`,
  `milliseconds`, `float()` conversion and plain arithmetic.
- `hazel.keycodes` – `Key` and `MouseButton` integer codes.
- `hazel.input` – `Input`, static queries `is_key_pressed`,
  `is_mouse_button_pressed`, `mouse_position`, `mouse_x` and `mouse_y`,
  answered by the implementation installed with `Input.set_instance`.
- `hazel.camera` – `ortho()`, `OrthographicCamera` (position, rotation in
  degrees about z, projection, view and view-projection matrices) and
  `OrthographicCameraController`, which moves with W/A/S/D, rotates with Q/E
  when rotation is enabled, zooms with the mouse wheel between 0.5 and 3.0 and
  follows window resizes.
- `hazel.buffer` – `ShaderDataType`, `BufferElement`, `BufferLayout` (offsets
  and stride worked out from the elements), and the `VertexBuffer`,
  `IndexBuffer` and `VertexArray` interfaces with `create()` factories.
- `hazel.shader` – the `Shader` interface (`from_file`, `from_sources`),
  `ShaderLibrary` (`add`, `load`, `get`, `exists`, `in`), and the `Texture` and
  `Texture2D` interfaces.
- `hazel.renderer` – `GraphicsAPI`, `RendererAPI`, `RenderCommand` (static
  calls forwarded to the active renderer API, OpenGL unless another is set with
  `set_renderer_api`), `Renderer` (`begin_scene`, `submit`, `end_scene`,
  `on_window_resize`) and `GraphicsContext`.
- `hazel.gl_buffer`, `hazel.gl_shader`, `hazel.gl_texture`,
  `hazel.gl_renderer_api` – the OpenGL implementations: `OpenGLVertexBuffer`,
  `OpenGLIndexBuffer`, `OpenGLVertexArray`, `OpenGLShader`, `OpenGLTexture2D`,
  `OpenGLRendererAPI` and `OpenGLContext`.
- `hazel.window` – `WindowProps`, the `Window` interface, `PygletWindow`, which
  turns pyglet input into engine events, and `PygletInput`, which answers
  `Input` queries from what the window has seen.
- `hazel.application` – `Application` and `run_application`.
- `hazel.log` – the `HAZEL` and `APP` loggers (`init_logging`, `core_logger`,
  `client_logger`), `core_assert` and `client_assert`, which log and raise
  `HazelError` when their condition is false.

## Example

```python
from hazel.application import Application, run_application
from hazel.camera import OrthographicCameraController
from hazel.layers import Layer
from hazel.renderer import RenderCommand, Renderer


class ExampleLayer(Layer):
    def __init__(self):
        super().__init__("Example")
        self.camera_controller = OrthographicCameraController(1280 / 720, True)

    def on_update(self, ts):
        self.camera_controller.on_update(ts)
        RenderCommand.set_clear_color((0.1, 0.1, 0.1, 1.0))
        RenderCommand.clear()
        Renderer.begin_scene(self.camera_controller.camera)
        # Renderer.submit(shader, vertex_array, transform) for each object
        Renderer.end_scene()

    def on_event(self, event):
        self.camera_controller.on_event(event)


class SandBox(Application):
    def __init__(self):
        super().__init__()
        self.push_layer(ExampleLayer())


run_application(SandBox)
```

`run_application` sets up logging, builds the application, runs its loop until
the window is closed and then detaches the layers and closes the window.
`Application` can also be used as a context manager, which shuts it down on
exit. Its constructor takes an optional `window` and an optional `clock`
function, so an application can run against any `Window` implementation.

Only one `Application` may exist at a time; creating a second raises
`HazelError`, and `Application.get()` returns the current one. A window resized
to zero width or height marks the application minimised, and layers are not
updated until it is restored.

## Geometry

```python
from hazel.buffer import BufferElement, BufferLayout, IndexBuffer, ShaderDataType, VertexArray, VertexBuffer

vertices = VertexBuffer.create([
    -0.5, -0.5, 0.0, 0.0, 0.0,
     0.5, -0.5, 0.0, 1.0, 0.0,
     0.5,  0.5, 0.0, 1.0, 1.0,
    -0.5,  0.5, 0.0, 0.0, 1.0,
])
vertices.layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "a_Position"),
    BufferElement(ShaderDataType.FLOAT2, "a_TexCoord"),
])
square = VertexArray.create()
square.add_vertex_buffer(vertices)
square.set_index_buffer(IndexBuffer.create([0, 1, 2, 2, 3, 0]))
```

These calls need a current OpenGL context, which an `Application` provides.
A vertex buffer with an empty layout cannot be added to a vertex array.

## Shader files

A shader file holds several stages, each introduced by a `#type` line naming
`vertex`, or `fragment` (also spelled `pixel`):

```glsl
#type vertex
#version 330 core
...
#type fragment
#version 330 core
...
```

The shader takes its name from the file name without directory or extension,
so `ShaderLibrary.load` on `assets/shaders/TextureShader.glsl` registers it as
`TextureShader`; a path without any directory part is rejected. A file that
cannot be read is logged as a warning. Compile and link errors raise
`HazelError`. Uniforms that the program does not have are ignored.

Textures are loaded with `Texture2D.create(path)`; images are flipped
vertically and must have three or four channels.

## What it does not do

- There is no immediate-mode UI. Layers still receive `on_imgui_render` once
  per frame, but nothing draws a settings or debug panel.
- Only the OpenGL back end exists; `GraphicsAPI.NONE` is rejected by every
  `create` factory.
- Each `Renderer.submit` is one draw call; there is no batching.
- The package installs no command; an application is started from Python with
  `run_application`.