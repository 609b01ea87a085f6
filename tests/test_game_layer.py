import pytest

from lone_sentry.game_layer import GameLayer
from lone_sentry.gameplay import MISSILE_TEXTURE, PLAYER_TEXTURE, Controls
from lone_sentry.layers import LayerStack
from lone_sentry.timer import Timer


class FakeRenderer:
    def __init__(self):
        self.draws = []

    def draw_triangle(self, position, texture):
        self.draws.append((position, texture))


def _layer(renderer, controls=Controls()):
    loaded = []

    def loader(path):
        loaded.append(path)
        return path

    return GameLayer(renderer, lambda: controls, texture_loader=loader), loaded


def test_update_before_attach_raises():
    layer, _ = _layer(FakeRenderer())
    with pytest.raises(RuntimeError):
        layer.on_update(Timer(0.1))


def test_attach_loads_level_textures():
    layer, loaded = _layer(FakeRenderer())
    stack = LayerStack()
    stack.push_layer(layer)
    assert loaded == [PLAYER_TEXTURE, MISSILE_TEXTURE]
    assert layer.level.player.position == (0.0, 0.0, 0.0)


def test_update_moves_and_renders():
    renderer = FakeRenderer()
    layer, _ = _layer(renderer, Controls(right=True))
    layer.on_attach()
    layer.on_update(Timer(0.1))
    position = layer.level.player.position
    assert position[0] > 0
    assert renderer.draws == [(position, PLAYER_TEXTURE)]


def test_detach_releases_level():
    layer, _ = _layer(FakeRenderer())
    stack = LayerStack()
    stack.push_layer(layer)
    stack.pop_layer(layer)
    assert layer.level is None
    with pytest.raises(RuntimeError):
        layer.on_update(Timer(0.1))