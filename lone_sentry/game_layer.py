"""The layer that runs the game level."""

from __future__ import annotations

from typing import Any, Callable

from .gameplay import Controls, Level
from .layers import Layer
from .texture import Texture
from .timer import Timer


class GameLayer(Layer):
    """Creates the level on attach; updates and draws it every frame."""

    def __init__(self, renderer: Any, controls: Callable[[], Controls], texture_loader=Texture) -> None:
        super().__init__("GameLayer")
        self._renderer = renderer
        self._controls = controls
        self._texture_loader = texture_loader
        self.level: Level | None = None

    def on_attach(self) -> None:
        self.level = Level(self._texture_loader)
        self.level.init()

    def on_detach(self) -> None:
        self.level = None

    def on_update(self, timer: Timer) -> None:
        if self.level is None:
            raise RuntimeError("game layer is not attached")
        self.level.update(timer, self._controls())
        self.level.render(self._renderer)