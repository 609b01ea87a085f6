"""The game window and the GL state it starts with."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .glcheck import GLErrorChecker

logger = logging.getLogger(__name__)


class WindowError(RuntimeError):
    """Raised when the window cannot be created or is used while closed."""


class _PygletGraphicsGL:
    """Global GL state set once the context exists."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def enable_blending(self) -> None:
        gl = self._gl
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)


def _pyglet_window(width: float, height: float, title: str) -> Any:
    import pyglet

    config = pyglet.gl.Config(
        major_version=4, minor_version=1, forward_compatible=True, double_buffer=True
    )
    try:
        window = pyglet.window.Window(
            width=int(width), height=int(height), caption=title, config=config, vsync=True
        )
    except (pyglet.window.NoSuchConfigException, pyglet.gl.ContextException) as exc:
        raise WindowError(f"failed to initialize window: {exc}") from exc
    logger.info("pyglet version: %s", pyglet.version)
    return window


class Graphics:
    """Creates the window, sets blending up and drives buffer swaps and events.

    ``window_factory(width, height, title)`` returns an object with ``has_exit``,
    ``flip()``, ``dispatch_events()`` and ``close()``.
    """

    def __init__(
        self,
        *,
        window_factory: Callable[[float, float, str], Any] | None = None,
        gl: Any = None,
        checker: GLErrorChecker | None = None,
    ) -> None:
        self._window_factory = window_factory if window_factory is not None else _pyglet_window
        self._gl = gl
        self._checker = checker
        self.window: Any = None
        self.width = 0.0
        self.height = 0.0
        self.title = ""

    def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        if self._checker is None:
            return func(*args)
        return self._checker.call(func, *args)

    def create_window(self, width: float, height: float, title: str) -> Any:
        """Open the window, make its context current and enable alpha blending."""
        if self.window is not None:
            raise WindowError("a window is already open")
        window = self._window_factory(width, height, title)
        if window is None:
            raise WindowError(f"failed to initialize window {title!r}")
        self.window = window
        self.width, self.height, self.title = width, height, title
        if self._gl is None:
            self._gl = _PygletGraphicsGL()
        self._call(self._gl.enable_blending)
        return window

    def should_close(self) -> bool:
        """True once the user has asked to close the window, or if none is open."""
        return self.window is None or bool(self.window.has_exit)

    def swap_and_poll(self) -> None:
        """Show the frame just drawn, then handle pending window events."""
        if self.window is None:
            raise WindowError("no window is open")
        self.window.flip()
        self.window.dispatch_events()

    def close(self) -> None:
        """Close the window; later calls do nothing."""
        if self.window is not None:
            self.window.close()
            self.window = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()