"""Checking the GL error queue around graphics calls."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class GLError(RuntimeError):
    """An error reported by the graphics library after a call."""

    def __init__(self, code: int, description: str) -> None:
        super().__init__(f"[OpenGL Error] ({code}) {description}")
        self.code = code
        self.description = description


class GLErrorChecker:
    """Raises GLError when ``get_error`` reports anything but ``no_error``."""

    def __init__(self, get_error: Callable[[], int], no_error: int = 0) -> None:
        self._get_error = get_error
        self._no_error = no_error

    def drain(self) -> None:
        """Discard every error already queued."""
        while self._get_error() != self._no_error:
            pass

    def check(self, description: str) -> None:
        code = self._get_error()
        if code != self._no_error:
            logger.error("[OpenGL Error] (%s) %s", code, description)
            raise GLError(code, description)

    def call(self, func: Callable[..., Any], *args: Any) -> Any:
        """Call ``func`` on a clean error queue, then check the queue."""
        self.drain()
        result = func(*args)
        name = getattr(func, "__qualname__", None) or repr(func)
        self.check(f"{name}({', '.join(map(repr, args))})")
        return result