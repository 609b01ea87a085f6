"""Vertex buffers, index buffers and vertex arrays."""

from __future__ import annotations

from typing import Any

import numpy as np

from .glcheck import GLErrorChecker
from .layout import VertexBufferLayout

ARRAY_BUFFER = 0x8892
ELEMENT_ARRAY_BUFFER = 0x8893
STATIC_DRAW = 0x88E4


class _PygletBufferGL:
    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def gen_buffer(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenBuffers(1, handle)
        return handle.value

    def bind_buffer(self, target: int, buffer_id: int) -> None:
        self._gl.glBindBuffer(target, buffer_id)

    def buffer_data(self, target: int, data: bytes, usage: int) -> None:
        self._gl.glBufferData(target, len(data), data, usage)

    def delete_buffer(self, buffer_id: int) -> None:
        self._gl.glDeleteBuffers(1, self._gl.GLuint(buffer_id))

    def gen_vertex_array(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenVertexArrays(1, handle)
        return handle.value

    def bind_vertex_array(self, array_id: int) -> None:
        self._gl.glBindVertexArray(array_id)

    def delete_vertex_array(self, array_id: int) -> None:
        self._gl.glDeleteVertexArrays(1, self._gl.GLuint(array_id))

    def enable_vertex_attrib_array(self, index: int) -> None:
        self._gl.glEnableVertexAttribArray(index)

    def vertex_attrib_pointer(self, index, size, kind, normalized, stride, offset) -> None:
        flag = self._gl.GL_TRUE if normalized else self._gl.GL_FALSE
        self._gl.glVertexAttribPointer(index, size, kind, flag, stride, offset or None)


class _GLObject:
    """Base for GL objects: calls go through the checker; released by ``delete``."""

    id = 0

    def __init__(self, gl: Any, checker: GLErrorChecker | None) -> None:
        self._gl = gl if gl is not None else _PygletBufferGL()
        self._checker = checker

    def _call(self, func, *args):
        return func(*args) if self._checker is None else self._checker.call(func, *args)

    def _release(self, func) -> None:
        if self.id:
            self._call(func, self.id)
            self.id = 0

    def _upload(self, target: int, payload: bytes) -> None:
        self.id = self._call(self._gl.gen_buffer)
        self._call(self._gl.bind_buffer, target, self.id)
        self._call(self._gl.buffer_data, target, payload, STATIC_DRAW)

    def delete(self) -> None:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()


class VertexBuffer(_GLObject):
    """Static vertex data: raw bytes or numbers stored as 32-bit floats."""

    def __init__(self, data: Any, *, gl: Any = None, checker: GLErrorChecker | None = None) -> None:
        super().__init__(gl, checker)
        if isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        else:
            payload = np.asarray(data, dtype=np.float32).tobytes()
        self.size = len(payload)
        self._upload(ARRAY_BUFFER, payload)

    def bind(self) -> None:
        self._call(self._gl.bind_buffer, ARRAY_BUFFER, self.id)

    def unbind(self) -> None:
        self._call(self._gl.bind_buffer, ARRAY_BUFFER, 0)

    def delete(self) -> None:
        self._release(self._gl.delete_buffer)


class IndexBuffer(_GLObject):
    """Element indices stored as 32-bit unsigned integers."""

    def __init__(self, indices, *, gl: Any = None, checker: GLErrorChecker | None = None) -> None:
        super().__init__(gl, checker)
        raw = np.asarray(indices).ravel()
        if raw.size and raw.min() < 0:
            raise ValueError("indices must not be negative")
        self._count = int(raw.size)
        self._upload(ELEMENT_ARRAY_BUFFER, raw.astype(np.uint32).tobytes())

    @property
    def count(self) -> int:
        return self._count

    def bind(self) -> None:
        self._call(self._gl.bind_buffer, ELEMENT_ARRAY_BUFFER, self.id)

    def unbind(self) -> None:
        self._call(self._gl.bind_buffer, ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        self._release(self._gl.delete_buffer)


class VertexArray(_GLObject):
    """Ties buffers and an attribute layout together for drawing."""

    def __init__(self, *, gl: Any = None, checker: GLErrorChecker | None = None) -> None:
        super().__init__(gl, checker)
        self.id = self._call(self._gl.gen_vertex_array)

    def add_buffer(self, vertex_buffer: VertexBuffer, layout: VertexBufferLayout) -> None:
        self.bind()
        vertex_buffer.bind()
        offset = 0
        for index, element in enumerate(layout.elements):
            self._call(self._gl.enable_vertex_attrib_array, index)
            self._call(
                self._gl.vertex_attrib_pointer, index, element.count, int(element.type),
                element.normalized, layout.stride, offset,
            )
            offset += element.size

    def add_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self.bind()
        index_buffer.bind()

    def bind(self) -> None:
        self._call(self._gl.bind_vertex_array, self.id)

    def unbind(self) -> None:
        self._call(self._gl.bind_vertex_array, 0)

    def delete(self) -> None:
        self._release(self._gl.delete_vertex_array)