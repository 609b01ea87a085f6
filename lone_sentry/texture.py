"""Image textures loaded from disk."""

from __future__ import annotations

from typing import Any

from PIL import Image, ImageOps

from .glcheck import GLErrorChecker

TEXTURE_2D = 0x0DE1
TEXTURE0 = 0x84C0
TEXTURE_MAG_FILTER = 0x2800
TEXTURE_MIN_FILTER = 0x2801
TEXTURE_WRAP_S = 0x2802
TEXTURE_WRAP_T = 0x2803
LINEAR = 0x2601
CLAMP_TO_EDGE = 0x812F
RGBA = 0x1908
UNSIGNED_BYTE = 0x1401


def load_rgba(filepath) -> tuple[int, int, bytes]:
    """Return ``(width, height, pixels)`` as 8-bit RGBA, bottom row first."""
    with Image.open(filepath) as image:
        rgba = ImageOps.flip(image.convert("RGBA"))
    return rgba.width, rgba.height, rgba.tobytes()


class _PygletTextureGL:
    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def gen_texture(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenTextures(1, handle)
        return handle.value

    def bind_texture(self, target: int, texture_id: int) -> None:
        self._gl.glBindTexture(target, texture_id)

    def tex_parameter(self, target: int, name: int, value: int) -> None:
        self._gl.glTexParameteri(target, name, value)

    def tex_image_2d(self, target, level, internal_format, width, height, pixel_format, pixel_type, pixels) -> None:
        self._gl.glTexImage2D(target, level, internal_format, width, height, 0, pixel_format, pixel_type, pixels)

    def active_texture(self, unit: int) -> None:
        self._gl.glActiveTexture(unit)

    def delete_texture(self, texture_id: int) -> None:
        self._gl.glDeleteTextures(1, self._gl.GLuint(texture_id))


class Texture:
    """A 2D RGBA texture with linear filtering and clamped edges."""

    def __init__(self, filepath=None, *, gl: Any = None, checker: GLErrorChecker | None = None) -> None:
        self._gl = gl if gl is not None else _PygletTextureGL()
        self._checker = checker
        self.id = self.width = self.height = 0
        self.filepath = None
        if filepath is not None:
            self.load(filepath)

    def _call(self, func, *args):
        return func(*args) if self._checker is None else self._checker.call(func, *args)

    def load(self, filepath) -> None:
        width, height, pixels = load_rgba(filepath)
        gl = self._gl
        texture_id = self._call(gl.gen_texture)
        self._call(gl.bind_texture, TEXTURE_2D, texture_id)
        for name, value in (
            (TEXTURE_MIN_FILTER, LINEAR),
            (TEXTURE_MAG_FILTER, LINEAR),
            (TEXTURE_WRAP_S, CLAMP_TO_EDGE),
            (TEXTURE_WRAP_T, CLAMP_TO_EDGE),
        ):
            self._call(gl.tex_parameter, TEXTURE_2D, name, value)
        self._call(gl.tex_image_2d, TEXTURE_2D, 0, RGBA, width, height, RGBA, UNSIGNED_BYTE, pixels)
        self._call(gl.bind_texture, TEXTURE_2D, 0)
        self.id, self.width, self.height, self.filepath = texture_id, width, height, filepath

    def bind(self, slot: int = 0) -> None:
        if slot < 0:
            raise ValueError("texture slot must not be negative")
        self._call(self._gl.active_texture, TEXTURE0 + slot)
        self._call(self._gl.bind_texture, TEXTURE_2D, self.id)

    def unbind(self) -> None:
        self._call(self._gl.bind_texture, TEXTURE_2D, 0)

    def delete(self) -> None:
        if self.id:
            self._call(self._gl.delete_texture, self.id)
            self.id = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()