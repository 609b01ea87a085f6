"""The game's main loop and command-line entry point."""

from __future__ import annotations

import argparse
import functools
import sys
import time

from .camera import SCREEN_HEIGHT, SCREEN_WIDTH
from .game_layer import GameLayer
from .gameplay import Controls
from .glcheck import GLErrorChecker
from .graphics import Graphics, WindowError
from .layers import LayerStack
from .renderer import DEFAULT_SHADER, Renderer
from .shader import ShaderCompileError
from .texture import Texture
from .timer import Timer


def run(graphics, renderer, layers, clock) -> int:
    """Run frames until the window should close; return how many ran."""
    current, previous, frames = clock(), 0.0, 0
    while not graphics.should_close():
        renderer.clear()
        timer = Timer(current - previous)
        previous, current = current, clock()
        for layer in layers:
            layer.on_update(timer)
        graphics.swap_and_poll()
        frames += 1
    return frames


class _InputState:
    """Keyboard and mouse state gathered from window events."""

    def __init__(self, window) -> None:
        from pyglet.window import key, mouse

        self._key = key
        self._left_button = mouse.LEFT
        self._keys = key.KeyStateHandler()
        self._buttons: set[int] = set()
        window.push_handlers(self._keys)
        window.push_handlers(
            on_mouse_press=lambda x, y, button, mods: self._buttons.add(button),
            on_mouse_release=lambda x, y, button, mods: self._buttons.discard(button),
        )

    def controls(self) -> Controls:
        return Controls(
            left=bool(self._keys[self._key.A]),
            right=bool(self._keys[self._key.D]),
            fire=self._left_button in self._buttons,
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lone-sentry")
    parser.add_argument("--shader", default=DEFAULT_SHADER)
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    args = parser.parse_args(argv)

    from pyglet import gl

    checker = GLErrorChecker(gl.glGetError, gl.GL_NO_ERROR)
    try:
        with Graphics(checker=checker) as graphics:
            graphics.create_window(args.width, args.height, "2D Engine")
            renderer = Renderer(checker=checker)
            renderer.begin_scene(args.shader)
            inputs = _InputState(graphics.window)
            layers = LayerStack()
            layers.push_layer(
                GameLayer(renderer, inputs.controls, functools.partial(Texture, checker=checker))
            )
            start = time.perf_counter()
            run(graphics, renderer, layers, lambda: time.perf_counter() - start)
    except (WindowError, ShaderCompileError, OSError) as exc:
        print(f"lone-sentry: {exc}", file=sys.stderr)
        return 1
    return 0