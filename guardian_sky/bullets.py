"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from typing import ClassVar

from guardian_sky.affine import Vector3
from guardian_sky.textures import TextureManager
from guardian_sky.transform import WorldTransform


class _Bullet:
    """A projectile that travels at a constant velocity until it is marked dead."""

    TEXTURE: ClassVar[str] = ""
    SCALE: ClassVar[Vector3] = Vector3(1.0, 1.0, 1.0)

    def __init__(
        self,
        position: Vector3,
        velocity: Vector3,
        textures: TextureManager | None = None,
    ) -> None:
        self.world_transform = WorldTransform(scale=self.SCALE, translation=position)
        self.world_transform.update_matrix()
        self.velocity = velocity
        self.is_dead = False
        self.texture_handle = textures.load(self.TEXTURE) if textures is not None else None

    def _advance(self) -> None:
        # The matrix is refreshed before moving, so the world position lags one frame.
        self.world_transform.update_matrix()
        self.world_transform.translation = self.world_transform.translation + self.velocity


class PlayerBullet(_Bullet):
    """A player's shot; it expires after a fixed number of frames."""

    TEXTURE: ClassVar[str] = "Blue.png"
    SCALE: ClassVar[Vector3] = Vector3(0.5, 0.5, 0.5)
    LIFE_TIME: ClassVar[int] = 60

    def __init__(
        self,
        position: Vector3,
        velocity: Vector3,
        textures: TextureManager | None = None,
    ) -> None:
        super().__init__(position, velocity, textures)
        self.death_timer = self.LIFE_TIME

    def update(self) -> None:
        """Move one frame and count down the remaining life."""
        self._advance()
        self.death_timer -= 1
        if self.death_timer <= 0:
            self.is_dead = True

    def on_collision(self) -> None:
        self.is_dead = True

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()


class EnemyBullet(_Bullet):
    """An enemy's shot; it only dies through a collision."""

    TEXTURE: ClassVar[str] = "Red.png"

    def update(self) -> None:
        """Move one frame."""
        self._advance()

    def on_collision(self) -> None:
        self.is_dead = True

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()