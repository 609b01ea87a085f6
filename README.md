# lone_sentry

A small 2D arcade game. You pilot a sentry ship near the bottom of the screen,
slide it left and right, and fire missiles upward. Drawing is done with OpenGL
through pyglet; images are read with Pillow and the transforms are built with
numpy.

## Installing

```
pip install .
```

Install it with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
lone-sentry
```

This opens a 1440×1080 window titled "2D Engine". The size and the shader file
can be changed:

```
lone-sentry --width 800 --height 600 --shader path/to/file.shader
```

- `A` moves the ship left and `D` moves it right, at 5 units per second. The
  ship cannot go past ±2.5 units from the centre.
- While the left mouse button is held, a missile is fired every frame. Each
  missile starts where the ship is and climbs at 5 units per second.
- Close the window to quit.

The game loads its textures and, unless `--shader` is given, its shader from
these paths, relative to the working directory:

- `src/Assets/Textures/other player.png`
- `src/Assets/Textures/missile.png`
- `src/Shaders/PLayerTexture.shader`

If the window cannot be opened, a shader stage fails to compile, or a file
cannot be read, the command prints the error to standard error and exits with
status 1.

### Shader files

A shader file holds both stages. Lines after a line containing `#shader vertex`
are the vertex source and lines after a line containing `#shader fragment` are
the fragment source. A `#shader` line naming neither stage keeps the current
one; a source line before any `#shader` line is an error (`ValueError`).

## What the game does not have

There is nothing to shoot at: no enemies, no collisions, no score and no game
over. Missiles are never removed once fired; they keep climbing past the top
of the screen.

## Using the pieces

These modules need no window and can be used on their own:

- `lone_sentry.timer.Timer` holds a frame's `delta` in seconds; `milliseconds`
  gives it in milliseconds.
- `lone_sentry.camera` has `translate`, `scale`, `rotate` (angle in radians),
  `ortho`, `perspective_fov_lh` and `Camera`, whose `mvp(world)` returns
  `projection @ view @ world` as a 4×4 numpy array.
- `lone_sentry.layers` has `Layer` and `LayerStack`. Pushing a layer calls its
  `on_attach`; popping calls `on_detach`; iterating the stack yields the layers
  in order.
- `lone_sentry.layout.VertexBufferLayout` describes interleaved vertex
  attributes (`ElementType.FLOAT`, `UNSIGNED_INT`, `UNSIGNED_BYTE`) and works
  out their `stride`.
- `lone_sentry.shader_source` has `parse_shader(filepath)` and
  `parse_shader_text(text)`, which return a `ShaderProgramSource` with
  `vertex` and `fragment` text.
- `lone_sentry.texture.load_rgba(filepath)` returns `(width, height, pixels)`
  as 8-bit RGBA, bottom row first.
- `lone_sentry.glcheck.GLErrorChecker` wraps calls so that an error left in the
  GL error queue raises `GLError`.

The game logic lives in `lone_sentry.gameplay` (`Player`, `Missile`, `Level`,
`Controls`). It takes its input as a `Controls` value and draws through any
object with a `draw_triangle(position, texture)` method, so it can be driven
without a keyboard or a window:

```python
from lone_sentry.gameplay import Controls, Level
from lone_sentry.timer import Timer

level = Level(lambda path: path)  # use the path itself as the "texture"
level.init()
level.update(Timer(0.1), Controls(right=True, fire=True))
print(level.player.position)        # (0.5, 0.0, 0.0)
print(len(level.player.missiles))   # 1
```

The GL-backed classes (`VertexBuffer`, `IndexBuffer`, `VertexArray`, `Shader`,
`Texture`, `Renderer`, `Graphics`) take an optional `gl` object and `checker`
keyword; without a `gl` object they call pyglet's OpenGL bindings, which need
an open window. `lone_sentry.app.run(graphics, renderer, layers, clock)` runs
the frame loop and returns how many frames ran.