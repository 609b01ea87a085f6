import numpy as np
import pytest

from lone_sentry.buffers import ARRAY_BUFFER, ELEMENT_ARRAY_BUFFER
from lone_sentry.camera import ortho, translate
from lone_sentry.renderer import (
    COLOR_BUFFER_BIT,
    DEPTH_BUFFER_BIT,
    TRIANGLES,
    UNSIGNED_INT,
    Renderer,
)

SHADER_TEXT = "#shader vertex\nvoid main() {}\n#shader fragment\nvoid main() {}\n"

TRIANGLE = [
    -0.25, -0.25, 0.0, 0.0,
    0.25, -0.25, 1.0, 0.0,
    0.0, 0.25, 0.5, 1.0,
]
SQUARE = [
    -0.25, -0.25, 0.0, 0.0,
    0.25, -0.25, 1.0, 0.0,
    0.25, 0.25, 1.0, 1.0,
    -0.25, 0.25, 0.0, 1.0,
]


class FakeGL:
    def __init__(self):
        self.calls = []
        self.locations = {}
        self._next_id = 0

    def _new_id(self):
        self._next_id += 1
        return self._next_id

    def gen_buffer(self):
        return self._new_id()

    def gen_vertex_array(self):
        return self._new_id()

    def create_program(self):
        return self._new_id()

    def create_shader(self, kind):
        return self._new_id()

    def compile_status(self, shader_id):
        return True

    def shader_info_log(self, shader_id):
        return ""

    def get_uniform_location(self, program, name):
        return self.locations.setdefault(name, len(self.locations))

    def named(self, name):
        return [args for call, args in self.calls if call == name]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


class FakeTexture:
    def __init__(self):
        self.slots = []

    def bind(self, slot=0):
        self.slots.append(slot)


@pytest.fixture
def shader_file(tmp_path):
    path = tmp_path / "texture.shader"
    path.write_text(SHADER_TEXT)
    return path


@pytest.fixture
def scene(shader_file):
    gl = FakeGL()
    renderer = Renderer(gl=gl)
    renderer.begin_scene(shader_file)
    return renderer, gl


def _matrix_uniforms(gl, name):
    location = gl.locations[name]
    return [
        np.array(values, dtype=np.float32).reshape(4, 4, order="F")
        for loc, _, values in gl.named("uniform_matrix_4fv")
        if loc == location
    ]


def test_begin_scene_uploads_vertices(scene):
    _, gl = scene
    uploads = [payload for target, payload, _ in gl.named("buffer_data") if target == ARRAY_BUFFER]
    assert uploads == [
        np.array(TRIANGLE, dtype=np.float32).tobytes(),
        np.array(SQUARE, dtype=np.float32).tobytes(),
    ]


def test_begin_scene_uploads_indices(scene):
    renderer, gl = scene
    uploads = [
        payload for target, payload, _ in gl.named("buffer_data") if target == ELEMENT_ARRAY_BUFFER
    ]
    assert uploads == [
        np.array([0, 1, 2], dtype=np.uint32).tobytes(),
        np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32).tobytes(),
    ]
    assert renderer.triangle.index_buffer.count == 3
    assert renderer.square.index_buffer.count == 6


def test_begin_scene_sets_orthographic_projection(scene):
    renderer, _ = scene
    np.testing.assert_allclose(
        renderer.camera.projection, ortho(-2.5, 2.5, -2.5, 2.5, -1.0, 1.0)
    )


def test_begin_scene_sets_mvp_and_texture_unit(scene):
    renderer, gl = scene
    [mvp] = _matrix_uniforms(gl, "mvp")
    expected = renderer.camera.mvp(translate((0.0, -2.3, 0.0)))
    np.testing.assert_allclose(mvp, expected, rtol=1e-6)
    assert (gl.locations["uTexture"], 0) in gl.named("uniform_1i")


def test_draw_before_scene_raises():
    renderer = Renderer(gl=FakeGL())
    with pytest.raises(RuntimeError):
        renderer.draw_triangle((0.0, 0.0, 0.0), FakeTexture())
    with pytest.raises(RuntimeError):
        renderer.draw_rectangle((0.0, 0.0, 0.0))


def test_draw_triangle_binds_texture_and_draws(scene):
    renderer, gl = scene
    texture = FakeTexture()
    renderer.draw_triangle((1.0, 2.0, 0.0), texture)
    assert texture.slots == [0]
    assert gl.named("draw_elements")[-1] == (TRIANGLES, 3, UNSIGNED_INT)
    transform = _matrix_uniforms(gl, "transform")[-1]
    np.testing.assert_allclose(transform, translate((1.0, 2.0, 0.0)))


def test_draw_rectangle_translates_and_flattens(scene):
    renderer, gl = scene
    renderer.draw_rectangle((1.0, -1.0, 0.5))
    assert gl.named("draw_elements")[-1] == (TRIANGLES, 6, UNSIGNED_INT)
    transform = _matrix_uniforms(gl, "transform")[-1]
    np.testing.assert_allclose(transform[:3, 3], [1.0, -1.0, 0.5])
    assert transform[2, 2] == 0.0


def test_draw_rectangle_rotates(scene):
    renderer, gl = scene
    renderer.draw_rectangle((0.0, 0.0, 0.0), 90.0)
    transform = _matrix_uniforms(gl, "transform")[-1]
    np.testing.assert_allclose(transform @ np.array([1.0, 0.0, 0.0, 1.0]), [0.0, 1.0, 0.0, 1.0], atol=1e-6)


def test_clear_order():
    gl = FakeGL()
    Renderer(gl=gl).clear()
    assert gl.calls == [
        ("clear", (COLOR_BUFFER_BIT | DEPTH_BUFFER_BIT,)),
        ("clear_color", (0.0, 0.0, 0.0, 1.0)),
    ]