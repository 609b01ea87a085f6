"""Shader programs with cached uniform locations."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import numpy as np

from .glcheck import GLErrorChecker
from .shader_source import parse_shader

logger = logging.getLogger(__name__)

VERTEX_SHADER = 0x8B31
FRAGMENT_SHADER = 0x8B30
_STAGE_NAMES = {VERTEX_SHADER: "vertex", FRAGMENT_SHADER: "fragment"}


class ShaderCompileError(RuntimeError):
    """A shader stage failed to compile."""

    def __init__(self, stage: str, log: str) -> None:
        super().__init__(f"failed to compile {stage} shader: {log}")
        self.stage = stage
        self.log = log


class _PygletShaderGL:
    """Stage compilation through pyglet; program calls go straight to GL."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader as stages

        self._gl = gl
        self._stages = stages
        # handle -> [kind, source, compiled stage or None, log]
        self._shaders: dict[int, list] = {}
        self._handles = itertools.count(1)

    def create_program(self) -> int:
        return self._gl.glCreateProgram()

    def create_shader(self, kind: int) -> int:
        handle = next(self._handles)
        self._shaders[handle] = [kind, "", None, ""]
        return handle

    def shader_source(self, shader_id: int, source: str) -> None:
        self._shaders[shader_id][1] = source

    def compile_shader(self, shader_id: int) -> None:
        entry = self._shaders[shader_id]
        try:
            entry[2], entry[3] = self._stages.Shader(entry[1], _STAGE_NAMES[entry[0]]), ""
        except self._stages.ShaderException as exc:
            entry[2], entry[3] = None, str(exc)

    def compile_status(self, shader_id: int) -> bool:
        return self._shaders[shader_id][2] is not None

    def shader_info_log(self, shader_id: int) -> str:
        return self._shaders[shader_id][3]

    def delete_shader(self, shader_id: int) -> None:
        entry = self._shaders.pop(shader_id, None)
        if entry is not None and entry[2] is not None:
            entry[2].delete()

    def attach_shader(self, program: int, shader_id: int) -> None:
        self._gl.glAttachShader(program, self._shaders[shader_id][2].id)

    def link_program(self, program: int) -> None:
        self._gl.glLinkProgram(program)

    def validate_program(self, program: int) -> None:
        self._gl.glValidateProgram(program)

    def delete_program(self, program: int) -> None:
        self._gl.glDeleteProgram(program)

    def use_program(self, program: int) -> None:
        self._gl.glUseProgram(program)

    def get_uniform_location(self, program: int, name: str) -> int:
        return self._gl.glGetUniformLocation(program, name.encode())

    def uniform_1i(self, location: int, value: int) -> None:
        self._gl.glUniform1i(location, value)

    def uniform_1f(self, location: int, value: float) -> None:
        self._gl.glUniform1f(location, value)

    def uniform_4f(self, location, v0, v1, v2, v3) -> None:
        self._gl.glUniform4f(location, v0, v1, v2, v3)

    def uniform_matrix_4fv(self, location: int, transpose: bool, values: list[float]) -> None:
        gl = self._gl
        flag = gl.GL_TRUE if transpose else gl.GL_FALSE
        gl.glUniformMatrix4fv(location, 1, flag, (gl.GLfloat * 16)(*values))


class Shader:
    """A vertex and fragment program read from one combined shader file."""

    def __init__(self, filepath=None, *, gl: Any = None, checker: GLErrorChecker | None = None) -> None:
        self._gl = gl if gl is not None else _PygletShaderGL()
        self._checker = checker
        self.id = 0
        self.filepath = None
        self._uniform_locations: dict[str, int] = {}
        if filepath is not None:
            self.load(filepath)

    def _call(self, func, *args):
        return func(*args) if self._checker is None else self._checker.call(func, *args)

    def load(self, filepath) -> None:
        """Parse, compile and link the file, replacing any current program."""
        source = parse_shader(filepath)
        program = self._create_program(source.vertex, source.fragment)
        self.delete()
        self.id = program
        self.filepath = filepath
        self._uniform_locations.clear()

    def _create_program(self, vertex: str, fragment: str) -> int:
        gl = self._gl
        program = self._call(gl.create_program)
        compiled: list[int] = []
        try:
            compiled.append(self._compile(VERTEX_SHADER, vertex))
            compiled.append(self._compile(FRAGMENT_SHADER, fragment))
        except ShaderCompileError:
            for shader_id in compiled:
                self._call(gl.delete_shader, shader_id)
            self._call(gl.delete_program, program)
            raise
        for shader_id in compiled:
            self._call(gl.attach_shader, program, shader_id)
        self._call(gl.link_program, program)
        self._call(gl.validate_program, program)
        for shader_id in compiled:
            self._call(gl.delete_shader, shader_id)
        return program

    def _compile(self, kind: int, source: str) -> int:
        gl = self._gl
        shader_id = self._call(gl.create_shader, kind)
        self._call(gl.shader_source, shader_id, source)
        self._call(gl.compile_shader, shader_id)
        if not self._call(gl.compile_status, shader_id):
            log = self._call(gl.shader_info_log, shader_id)
            self._call(gl.delete_shader, shader_id)
            raise ShaderCompileError(_STAGE_NAMES[kind], log)
        return shader_id

    def bind(self) -> None:
        self._call(self._gl.use_program, self.id)

    def unbind(self) -> None:
        self._call(self._gl.use_program, 0)

    def set_uniform_1i(self, name: str, value: int) -> None:
        self._call(self._gl.uniform_1i, self.uniform_location(name), value)

    def set_uniform_1f(self, name: str, value: float) -> None:
        self._call(self._gl.uniform_1f, self.uniform_location(name), value)

    def set_uniform_4f(self, name: str, v0, v1, v2, v3) -> None:
        self._call(self._gl.uniform_4f, self.uniform_location(name), v0, v1, v2, v3)

    def set_uniform_mat4f(self, name: str, matrix) -> None:
        """Upload a 4x4 ``M @ v`` matrix in column-major order."""
        values = np.asarray(matrix, dtype=np.float32)
        if values.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {values.shape}")
        self._call(
            self._gl.uniform_matrix_4fv, self.uniform_location(name), False,
            values.flatten(order="F").tolist(),
        )

    def uniform_location(self, name: str) -> int:
        """Location of ``name``, or -1 with a warning if it does not exist."""
        if name not in self._uniform_locations:
            location = self._call(self._gl.get_uniform_location, self.id, name)
            if location == -1:
                logger.warning("uniform '%s' doesn't exist", name)
            self._uniform_locations[name] = location
        return self._uniform_locations[name]

    def delete(self) -> None:
        if self.id:
            self._call(self._gl.delete_program, self.id)
            self.id = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()