"""An enemy that approaches, fires at the player and then leaves."""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Callable, ClassVar, Protocol

from guardian_sky.affine import Vector3, normalize, transform_normal
from guardian_sky.bullets import EnemyBullet
from guardian_sky.textures import TextureManager
from guardian_sky.transform import WorldTransform


class Phase(enum.Enum):
    APPROACH = enum.auto()
    LEAVE = enum.auto()


class Target(Protocol):
    def world_position(self) -> Vector3: ...


class Enemy:
    """Moves along -Z, firing at its target while it is far enough away."""

    FIRE_INTERVAL: ClassVar[int] = 60
    BULLET_SPEED: ClassVar[float] = 0.5
    FIRE_MIN_Z: ClassVar[float] = 20.0

    def __init__(
        self,
        position: Vector3,
        texture_handle: int = 0,
        player: Target | None = None,
        on_fire: Callable[[EnemyBullet], None] | None = None,
        textures: TextureManager | None = None,
    ) -> None:
        self.world_transform = WorldTransform(
            scale=Vector3(3.0, 3.0, 3.0), translation=position
        )
        self.texture_handle = texture_handle
        self.player = player
        self.on_fire = on_fire
        self.textures = textures
        self.phase = Phase.APPROACH
        self.move = Vector3(0.0, 0.0, 0.2)
        self.fire_timer = 0
        self.bullets: list[EnemyBullet] = []
        self.is_dead = False

    def update(self) -> None:
        """Refresh the matrix, handle firing, then run the current phase."""
        self.world_transform.update_matrix()
        self._tick_fire_timer()
        actions = {Phase.APPROACH: self.approach, Phase.LEAVE: self.leave}
        actions[self.phase]()

    def approach(self) -> None:
        t = self.world_transform.translation
        self.world_transform.translation = replace(t, z=t.z - self.move.z)
        if self.world_transform.translation.z < 0.0:
            self.phase = Phase.LEAVE

    def leave(self) -> None:
        self.move = Vector3(0.0, 0.0, 0.2)
        t = self.world_transform.translation
        self.world_transform.translation = Vector3(
            t.x - self.move.x, t.y + self.move.y, t.z - self.move.z
        )

    def _tick_fire_timer(self) -> None:
        self.fire_timer -= 1
        if self.fire_timer <= 0 and self.world_transform.translation.z > self.FIRE_MIN_Z:
            self.fire()
            self.fire_timer = self.FIRE_INTERVAL

    def fire(self) -> EnemyBullet:
        """Shoot a bullet toward the player and hand it to on_fire, or keep it."""
        if self.player is None:
            raise RuntimeError("enemy has no player to aim at")
        direction = normalize(self.player.world_position() - self.world_position())
        velocity = transform_normal(
            direction * self.BULLET_SPEED, self.world_transform.mat_world
        )
        bullet = EnemyBullet(self.world_transform.translation, velocity, self.textures)
        if self.on_fire is not None:
            self.on_fire(bullet)
        else:
            self.bullets.append(bullet)
        return bullet

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()

    def on_collision(self) -> None:
        self.is_dead = True