"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need.

    The default hooks keep simple bookkeeping so that a plain layer can be
    inspected: whether it is attached, the time it has been updated for,
    how many UI frames it has seen and the last event that reached it.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.ui_frames = 0
        self.last_event: Optional[Event] = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto an application."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame with the elapsed time."""
        self.elapsed += float(ts)

    def on_imgui_render(self) -> None:
        """Called once per frame while the UI frame is open."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class LayerStack:
    """Layers kept in order, with overlays always after ordinary layers."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int:
        return next((i for i, item in enumerate(self._layers) if item is layer), -1)

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        index = self._find(layer)
        if index >= 0:
            del self._layers[index]
            self._insert_index = max(0, self._insert_index - 1)

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._find(overlay)
        if index >= 0:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)