"""Scene setup and the draw calls the game uses each frame."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from os import PathLike
from typing import Any, Callable, Sequence

import numpy as np

from .buffers import IndexBuffer, VertexArray, VertexBuffer, _PygletBufferGL
from .camera import Camera, ortho, rotate, scale, translate
from .glcheck import GLErrorChecker
from .layout import ElementType, VertexBufferLayout
from .shader import Shader, _PygletShaderGL

logger = logging.getLogger(__name__)

COLOR_BUFFER_BIT = 0x4000
DEPTH_BUFFER_BIT = 0x0100
TRIANGLES = 0x0004
UNSIGNED_INT = 0x1405

DEFAULT_SHADER = "src/Shaders/PLayerTexture.shader"

# x, y, u, v per vertex
TRIANGLE_VERTICES = (
    -0.25, -0.25, 0.0, 0.0,
    0.25, -0.25, 1.0, 0.0,
    0.0, 0.25, 0.5, 1.0,
)
TRIANGLE_INDICES = (0, 1, 2)

SQUARE_VERTICES = (
    -0.25, -0.25, 0.0, 0.0,
    0.25, -0.25, 1.0, 0.0,
    0.25, 0.25, 1.0, 1.0,
    -0.25, 0.25, 0.0, 1.0,
)
SQUARE_INDICES = (0, 1, 2, 2, 3, 0)

SCENE_EXTENT = 2.5
PLAYER_ROW = (0.0, -2.3, 0.0)


class _PygletRendererGL(_PygletBufferGL, _PygletShaderGL):
    """Buffer, shader and drawing calls made through pyglet's GL bindings."""

    def clear(self, mask: int) -> None:
        self._gl.glClear(mask)

    def clear_color(self, red: float, green: float, blue: float, alpha: float) -> None:
        self._gl.glClearColor(red, green, blue, alpha)

    def draw_elements(self, mode: int, count: int, index_type: int) -> None:
        self._gl.glDrawElements(mode, count, index_type, None)


@dataclass
class Mesh:
    """GPU geometry for one shape: its buffers, attribute layout and flat colour."""

    vertex_array: VertexArray
    vertex_buffer: VertexBuffer
    index_buffer: IndexBuffer
    layout: VertexBufferLayout
    color: tuple[float, float, float]


class Renderer:
    """Owns the scene's camera, geometry and shader, and issues draw calls."""

    def __init__(
        self,
        *,
        gl: Any = None,
        checker: GLErrorChecker | None = None,
        camera: Camera | None = None,
    ) -> None:
        self._gl = gl if gl is not None else _PygletRendererGL()
        self._checker = checker
        self.camera = camera if camera is not None else Camera()
        self.triangle: Mesh | None = None
        self.square: Mesh | None = None
        self.shader: Shader | None = None
        logger.info("Initializing Renderer!")

    def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        if self._checker is None:
            return func(*args)
        return self._checker.call(func, *args)

    def _build_mesh(
        self, vertices: Sequence[float], indices: Sequence[int], color: tuple[float, float, float]
    ) -> Mesh:
        vertex_array = VertexArray(gl=self._gl, checker=self._checker)
        vertex_array.bind()
        vertex_buffer = VertexBuffer(vertices, gl=self._gl, checker=self._checker)
        layout = VertexBufferLayout()
        layout.push(ElementType.FLOAT, 2)
        layout.push(ElementType.FLOAT, 2)
        vertex_array.add_buffer(vertex_buffer, layout)
        index_buffer = IndexBuffer(indices, gl=self._gl, checker=self._checker)
        vertex_array.add_index_buffer(index_buffer)
        return Mesh(vertex_array, vertex_buffer, index_buffer, layout, color)

    def begin_scene(self, shader_path: str | PathLike[str] = DEFAULT_SHADER) -> None:
        """Upload the geometry, set up the camera and load the texture shader."""
        logger.info("Preparing Scene!")
        self.triangle = self._build_mesh(TRIANGLE_VERTICES, TRIANGLE_INDICES, (0.0, 0.0, 1.0))
        self.square = self._build_mesh(SQUARE_VERTICES, SQUARE_INDICES, (1.0, 0.0, 0.0))

        self.camera.set_view(np.eye(4, dtype=np.float32))
        self.camera.set_projection(
            ortho(-SCENE_EXTENT, SCENE_EXTENT, -SCENE_EXTENT, SCENE_EXTENT, -1.0, 1.0)
        )
        mvp = self.camera.mvp(translate(PLAYER_ROW))

        shader = Shader(shader_path, gl=self._gl, checker=self._checker)
        shader.bind()
        shader.set_uniform_mat4f("mvp", mvp)
        shader.set_uniform_1i("uTexture", 0)
        self.shader = shader

    def clear(self) -> None:
        """Clear the colour and depth buffers to opaque black."""
        self._call(self._gl.clear, COLOR_BUFFER_BIT | DEPTH_BUFFER_BIT)
        self._call(self._gl.clear_color, 0.0, 0.0, 0.0, 1.0)

    def _scene(self) -> tuple[Shader, Mesh, Mesh]:
        if self.shader is None or self.triangle is None or self.square is None:
            raise RuntimeError("begin_scene() has not been called")
        return self.shader, self.triangle, self.square

    def _draw(self, mesh: Mesh) -> None:
        mesh.vertex_array.bind()
        self._call(self._gl.draw_elements, TRIANGLES, mesh.index_buffer.count, UNSIGNED_INT)

    def draw_triangle(self, position: Sequence[float], texture: Any) -> None:
        """Draw the textured triangle moved to ``position``."""
        shader, triangle, _ = self._scene()
        shader.set_uniform_mat4f("transform", translate(position))
        texture.bind()
        self._draw(triangle)

    def draw_rectangle(self, position: Sequence[float], rotation: float | None = None) -> None:
        """Draw the square at ``position``, halved in size or turned by ``rotation`` degrees."""
        shader, _, square = self._scene()
        transform = translate(position)
        if rotation is None:
            transform = transform @ scale((0.5, 0.5, 0.0))
        else:
            transform = transform @ rotate(math.radians(rotation), (0.0, 0.0, 1.0))
        shader.bind()
        shader.set_uniform_mat4f("transform", transform)
        shader.set_uniform_1i("uTexture", 0)
        self._draw(square)