"""The player's ship: movement, aiming the reticle and firing bullets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from guardian_sky.affine import (
    Vector3,
    inverse,
    make_viewport_matrix,
    multiply,
    normalize,
    transform,
    transform_normal,
)
from guardian_sky.bullets import PlayerBullet
from guardian_sky.textures import TextureManager
from guardian_sky.transform import ViewProjection, WorldTransform

SHRT_MAX = 32767
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720


@dataclass(frozen=True)
class JoystickState:
    """A snapshot of a gamepad: thumbstick axes in -32768..32767 and the right shoulder."""

    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0
    right_shoulder: bool = False


@dataclass(frozen=True)
class PlayerControls:
    """The input seen in one frame.

    ``keys`` holds the names of held keys (LEFT, RIGHT, UP, DOWN, A, D, W, S,
    SPACE); ``cursor`` is the mouse position in client coordinates; ``joystick``
    is None when no gamepad is connected.
    """

    keys: frozenset[str] = frozenset()
    mouse_pressed: bool = False
    cursor: tuple[float, float] = (0.0, 0.0)
    joystick: JoystickState | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", frozenset(key.upper() for key in self.keys))

    def is_pressed(self, *names: str) -> bool:
        return any(name.upper() in self.keys for name in names)


class Player:
    """The ship the player flies, with a 3D reticle placed from a 2D screen position."""

    CHARACTER_SPEED: ClassVar[float] = 0.2
    ROT_SPEED: ClassVar[float] = 0.02
    MOVE_LIMIT_X: ClassVar[float] = 20.0
    MOVE_LIMIT_Y: ClassVar[float] = 18.0
    BULLET_SPEED: ClassVar[float] = 1.0
    RETICLE_DISTANCE: ClassVar[float] = 50.0
    GAMEPAD_RETICLE_SPEED: ClassVar[float] = 10.0
    RETICLE_TEXTURE: ClassVar[str] = "2DReticle.png"

    def __init__(
        self,
        position: Vector3 | None = None,
        texture_handle: int = 0,
        textures: TextureManager | None = None,
    ) -> None:
        self.world_transform = WorldTransform(
            scale=Vector3(2.5, 2.5, 2.5),
            translation=position if position is not None else Vector3(),
        )
        self.world_transform.update_matrix()
        self.texture_handle = texture_handle
        self.textures = textures
        self.reticle_transform = WorldTransform()
        self.reticle_transform.update_matrix()
        self.reticle_position: tuple[float, float] = (0.0, 0.0)
        self.reticle_texture = (
            textures.load(self.RETICLE_TEXTURE) if textures is not None else None
        )
        self.bullets: list[PlayerBullet] = []

    def rotate(self, controls: PlayerControls) -> None:
        """Turn around the Y axis with A and D."""
        rotation = self.world_transform.rotation
        if controls.is_pressed("A"):
            self.world_transform.rotation = replace(rotation, y=rotation.y - self.ROT_SPEED)
        elif controls.is_pressed("D"):
            self.world_transform.rotation = replace(rotation, y=rotation.y + self.ROT_SPEED)

    def _movement(self, controls: PlayerControls) -> Vector3:
        speed = self.CHARACTER_SPEED
        dx = dy = 0.0
        if controls.is_pressed("LEFT", "A"):
            dx -= speed
        elif controls.is_pressed("RIGHT", "D"):
            dx += speed
        if controls.is_pressed("UP", "W"):
            dy += speed
        elif controls.is_pressed("DOWN", "S"):
            dy -= speed
        joystick = controls.joystick
        if joystick is not None:
            dx += joystick.thumb_lx / SHRT_MAX * speed
            dy += joystick.thumb_ly / SHRT_MAX * speed
        return Vector3(dx, dy, 0.0)

    def update(self, view_projection: ViewProjection, controls: PlayerControls) -> None:
        """Run one frame: drop dead bullets, move, aim, fire and move the bullets."""
        self.bullets = [bullet for bullet in self.bullets if not bullet.is_dead]

        moved = self.world_transform.translation + self._movement(controls)
        self.world_transform.translation = Vector3(
            min(max(moved.x, -self.MOVE_LIMIT_X), self.MOVE_LIMIT_X),
            min(max(moved.y, -self.MOVE_LIMIT_Y), self.MOVE_LIMIT_Y),
            moved.z,
        )
        self.world_transform.update_matrix()

        if controls.joystick is None:
            self.aim_with_cursor(view_projection, *controls.cursor)
        else:
            self.aim_with_gamepad(view_projection, controls.joystick)

        self.attack(controls)

        for bullet in self.bullets:
            bullet.update()

    def _fire(self) -> PlayerBullet:
        player_world = self.world_position()
        direction = normalize(self.reticle_transform.world_position() - player_world)
        velocity = transform_normal(
            direction * self.BULLET_SPEED, self.world_transform.mat_world
        )
        bullet = PlayerBullet(player_world, velocity, self.textures)
        self.bullets.append(bullet)
        return bullet

    def attack(self, controls: PlayerControls) -> list[PlayerBullet]:
        """Fire toward the reticle on mouse or space, and again on the right shoulder."""
        fired = []
        if controls.mouse_pressed or controls.is_pressed("SPACE"):
            fired.append(self._fire())
        joystick = controls.joystick
        if joystick is not None and joystick.right_shoulder:
            fired.append(self._fire())
        return fired

    def _place_reticle(self, view_projection: ViewProjection, x: float, y: float) -> None:
        viewport = make_viewport_matrix(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT, 0, 1)
        view_proj_viewport = multiply(
            multiply(view_projection.mat_view, view_projection.mat_projection), viewport
        )
        inverse_vpv = inverse(view_proj_viewport)
        near = transform(Vector3(x, y, 0.0), inverse_vpv)
        far = transform(Vector3(x, y, 1.0), inverse_vpv)
        direction = normalize(far - near)
        self.reticle_transform.translation = near + direction * self.RETICLE_DISTANCE
        self.reticle_transform.update_matrix()

    def aim_with_cursor(self, view_projection: ViewProjection, x: float, y: float) -> None:
        """Put the 2D reticle at the cursor and the 3D reticle along its ray."""
        self.reticle_position = (float(x), float(y))
        self._place_reticle(view_projection, x, y)

    def aim_with_gamepad(
        self, view_projection: ViewProjection, joystick: JoystickState | None
    ) -> None:
        """Move the 2D reticle with the right stick and place the 3D reticle along its ray."""
        x, y = self.reticle_position
        if joystick is not None:
            x += joystick.thumb_rx / SHRT_MAX * self.GAMEPAD_RETICLE_SPEED
            y -= joystick.thumb_ry / SHRT_MAX * self.GAMEPAD_RETICLE_SPEED
            self.reticle_position = (x, y)
        self._place_reticle(view_projection, x, y)

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()

    def on_collision(self) -> None:
        """The player takes no action when hit."""

    def set_parent(self, parent: WorldTransform | None) -> None:
        self.world_transform.parent = parent