"""The player's ship, its missiles and the level that holds them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .timer import Timer

logger = logging.getLogger(__name__)

PLAYER_TEXTURE = "src/Assets/Textures/other player.png"
MISSILE_TEXTURE = "src/Assets/Textures/missile.png"

PLAYER_SPEED = 5.0
MISSILE_SPEED = 5.0
BOUNDARY = 2.5

Position = tuple[float, float, float]


def _position(values: Sequence[float]) -> Position:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


@dataclass(frozen=True)
class Controls:
    """Which inputs are held during a frame."""

    left: bool = False
    right: bool = False
    fire: bool = False


class Missile:
    """A shot that flies straight up at a constant speed."""

    def __init__(self, texture: Any, position: Sequence[float], speed: float = MISSILE_SPEED) -> None:
        self.texture = texture
        self.position = _position(position)
        self.speed = speed

    def update(self, timer: Timer) -> None:
        x, y, z = self.position
        self.position = (x, y + self.speed * timer.delta, z)

    def render(self, renderer: Any) -> None:
        renderer.draw_triangle(self.position, self.texture)


class Player:
    """The ship: moves sideways within the play area and fires missiles."""

    def __init__(
        self,
        texture: Any,
        missile_texture: Any,
        speed: float = PLAYER_SPEED,
        position: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.texture = texture
        self.missile_texture = missile_texture
        self.speed = speed
        self.position = _position(position)
        self.missiles: list[Missile] = []

    def update(self, timer: Timer, controls: Controls) -> None:
        """Move, advance existing missiles, then fire a new one if asked."""
        x, y, z = self.position
        step = self.speed * timer.delta
        if controls.left:
            x -= step
        if controls.right:
            x += step
        x = min(max(x, -BOUNDARY), BOUNDARY)
        self.position = (x, y, z)

        for missile in self.missiles:
            missile.update(timer)

        if controls.fire:
            logger.info("firing weapon")
            self.missiles.append(Missile(self.missile_texture, self.position))

    def render(self, renderer: Any) -> None:
        renderer.draw_triangle(self.position, self.texture)
        for missile in self.missiles:
            missile.render(renderer)


class Level:
    """Loads the level's textures and runs the player each frame."""

    def __init__(
        self,
        texture_loader: Callable[[str], Any],
        *,
        player_texture: str = PLAYER_TEXTURE,
        missile_texture: str = MISSILE_TEXTURE,
    ) -> None:
        self._load = texture_loader
        self.player_texture_path = player_texture
        self.missile_texture_path = missile_texture
        self.player: Player | None = None

    def init(self) -> None:
        """Load the textures and place the player."""
        self.player = Player(
            self._load(self.player_texture_path), self._load(self.missile_texture_path)
        )

    def _require_player(self) -> Player:
        if self.player is None:
            raise RuntimeError("level has not been initialised")
        return self.player

    def update(self, timer: Timer, controls: Controls) -> None:
        self._require_player().update(timer, controls)

    def render(self, renderer: Any) -> None:
        self._require_player().render(renderer)