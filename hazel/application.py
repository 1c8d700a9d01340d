"""The application object: owns the window and layers and runs the main loop."""

from __future__ import annotations

import time
from typing import Callable, ClassVar, Optional

from .events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from .input import Input
from .layers import Layer, LayerStack
from .log import client_logger, core_assert, core_logger, init_logging
from .renderer import Renderer
from .timestep import Timestep
from .window import PygletInput, PygletWindow, Window


class Application:
    """The single running application; layers are updated each frame."""

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        window: Optional[Window] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        core_assert(
            Application._instance is None,
            "There is only support for one instance of Application class!",
        )
        Application._instance = self

        self._clock = clock or time.perf_counter
        self._layer_stack = LayerStack()
        self._running = True
        self._minimized = False
        self._last_frame_time = 0.0
        self._owns_input = False

        self._window = window if window is not None else Window.create()
        self._window.set_event_callback(self.on_event)
        if isinstance(self._window, PygletWindow):
            Input.set_instance(PygletInput(self._window))
            self._owns_input = True

        Renderer.init()

    @staticmethod
    def get() -> "Application":
        """The running application."""
        core_assert(Application._instance is not None, "No application has been created!")
        return Application._instance  # type: ignore[return-value]

    @property
    def window(self) -> Window:
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    @property
    def minimized(self) -> bool:
        return self._minimized

    def run(self) -> None:
        """Update and render the layers until the window is closed."""
        self._last_frame_time = self._clock()
        while self._running:
            frame_time = self._clock()
            ts = Timestep(frame_time - self._last_frame_time)
            self._last_frame_time = frame_time

            if not self._minimized:
                for layer in self._layer_stack:
                    layer.on_update(ts)

            for layer in self._layer_stack:
                layer.on_imgui_render()

            self._window.on_update()

    def on_event(self, event: Event) -> None:
        """Handle window events, then pass the event down the layers from the top."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resize)

        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self._layer_stack.push_overlay(overlay)
        overlay.on_attach()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def _on_window_resize(self, event: WindowResizeEvent) -> bool:
        if event.width == 0 or event.height == 0:
            self._minimized = True
            return True
        self._minimized = False
        Renderer.on_window_resize(event.width, event.height)
        return True

    def _shutdown(self) -> None:
        for layer in list(self._layer_stack):
            layer.on_detach()
        self._window.close()
        if self._owns_input:
            Input.set_instance(None)
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._shutdown()


def run_application(create_application: Callable[[], Application]) -> None:
    """Set up logging, build the application, run it and shut it down."""
    init_logging()
    core_logger().warning("Initialize log!")
    client_logger().info("App")

    application = create_application()
    try:
        application.run()
    finally:
        application._shutdown()