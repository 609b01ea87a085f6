"""Layers that receive per-frame updates, and the ordered stack holding them."""

from __future__ import annotations

from typing import Iterator

from .timer import Timer


class Layer:
    """A unit of the application that is attached, updated each frame and detached.

    The base class keeps track of whether it is attached and of the last
    frame time it was given; subclasses add their own behaviour.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timer: Timer | None = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_update(self, timer: Timer) -> None:
        """Called once per frame with the time since the previous frame."""
        self.last_timer = timer

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""
        self.attached = False


class LayerStack:
    """Ordered collection of layers, iterated front to back each frame."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._layer_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._layer_index, layer)
        self._layer_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.insert(self._layer_index, overlay)
        self._layer_index += 1
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove ``layer``; nothing happens if it is not in the stack."""
        self._remove(layer)

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove ``overlay``; nothing happens if it is not in the stack."""
        self._remove(overlay)

    def _remove(self, layer: Layer) -> None:
        position = next((i for i, item in enumerate(self._layers) if item is layer), None)
        if position is None:
            return
        layer.on_detach()
        del self._layers[position]
        self._layer_index -= 1

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)