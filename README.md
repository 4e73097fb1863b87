# guardian_sky

The game logic of a small 3D rail shooter in plain Python, with no rendering
or input device code attached. It covers the maths, the entities and the
scene flow. Every entity advances one frame per `update` call. Input is passed
in as arguments, so the logic can run headless and be tested directly.

## Modules

- `guardian_sky.affine`: immutable `Vector3` and `Matrix4x4` using row-vector
  conventions, where a point is transformed as `v * M`. It provides
  `identity_matrix`, `multiply` (also `m1 @ m2`), `make_rotate_x_matrix`,
  `make_rotate_y_matrix`, `make_rotate_z_matrix`, `make_affine_matrix`,
  `make_perspective_fov_matrix`, `make_orthographic_matrix`,
  `make_viewport_matrix`, `inverse`, `transpose`, `transform` (with the
  perspective divide), `transform_normal`, `multiply_transposed`,
  `subtract_matrices`, `dot`, `length`, `normalize`, `add`, `subtract`,
  `add_scalar` and `scale_vector`. `normalize` raises `ValueError` on a zero
  vector, `inverse` on a singular matrix, and `transform` when the resulting
  `w` is 0.
- `guardian_sky.transform`: `WorldTransform` holds scale, rotation,
  translation and an optional `parent`. Its `update_matrix()` builds the
  world matrix and multiplies it by the parent's. `world_position()` reads the
  translation row. `ViewProjection` holds the camera settings together with
  `mat_view` and `mat_projection`.
- `guardian_sky.lights`: `DirectionalLight`, `PointLight`, `SpotLight`,
  `CircleShadow`, and `LightGroup`, which holds 3 directional lights, 3 point
  lights, 3 spot lights and 1 circle shadow. `set_factor_angle(start, end)`
  stores the cosines of the two angles.
- `guardian_sky.textures`: `TextureManager` hands out handles from a table of
  256 slots. `load` returns the same handle when the same name is loaded again.
  `unload` returns `False` when the handle is out of range. `full_path`
  prefixes `directory_path` unless the name starts with `./`. `HandleBitset`
  tracks which slots are in use. After a reset, the first 192 slots are
  reserved, so the first handle given out is 192.
- `guardian_sky.scenes`: `SceneType`, `ClearScene`, `GameOverScene` and
  `SceneDirector`. The end screens end on the frame space is triggered and
  lead back to the title. While one of them is showing, the director calls
  `reset()` on the game-play scene if it has one.
- `guardian_sky.bullets`: `PlayerBullet`, which dies after 60 frames or on
  collision, and `EnemyBullet`, which dies only on collision.
- `guardian_sky.enemy`: `Enemy` with `Phase.APPROACH` / `Phase.LEAVE`. It fires
  at its `player` every 60 frames while its z is above 20. Each new bullet goes
  to `on_fire`, or to its own `bullets` list when `on_fire` is not set.
- `guardian_sky.player`: `Player`, driven by a `PlayerControls` snapshot. The
  snapshot holds the held key names, the mouse button, the cursor position and
  an optional `JoystickState`. Movement is clamped to ±20 in x and ±18 in y.
  The 3D reticle sits 50 units along the ray under the 2D reticle.
- `guardian_sky.rail_camera`: `RailCamera`, whose view matrix is the inverse of
  its world matrix.
- `guardian_sky.skydome`: `Skydome`, a backdrop scaled by 500.

## Install

```
pip install .
```

## Example

```python
from guardian_sky.affine import Vector3, make_affine_matrix, inverse, transform

world = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(0, 0, 10))
view = inverse(world)
print(transform(Vector3(0, 0, 10), view))  # the origin, in view space
```

```python
from guardian_sky.scenes import SceneDirector, SceneType, ClearScene

director = SceneDirector(title=ClearScene(), game_play=ClearScene(), start=SceneType.CLEAR_GAME)
print(director.update(space_triggered=True))  # SceneType.TITLE
```

## What it does not do

- It draws nothing and opens no window. Models, sprites, lights and textures
  are data only. `TextureManager` records names and paths, and never reads an
  image file.
- It does not read the keyboard, mouse or gamepad. The caller builds
  `PlayerControls` and passes whether space was triggered.
- It has no title scene and no game-play scene of its own. `SceneDirector`
  takes them as arguments. It has no collision checks between entities, and
  no command to start a game.

## Tests

```
pip install .[test]
pytest
```