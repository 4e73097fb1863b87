"""The huge sphere that surrounds the play area."""

from __future__ import annotations

from dataclasses import dataclass, field

from guardian_sky.affine import Vector3
from guardian_sky.transform import WorldTransform


def _dome_transform() -> WorldTransform:
    transform = WorldTransform(scale=Vector3(500.0, 500.0, 500.0))
    transform.update_matrix()
    return transform


@dataclass
class Skydome:
    """A fixed, scaled-up backdrop centred on the origin."""

    world_transform: WorldTransform = field(default_factory=_dome_transform)

    def update(self) -> None:
        self.world_transform.update_matrix()