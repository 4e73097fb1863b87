"""A camera mounted on a world transform whose view is its inverse."""

from __future__ import annotations

from dataclasses import dataclass, field

from guardian_sky.affine import Vector3, inverse, make_affine_matrix
from guardian_sky.transform import ViewProjection, WorldTransform


@dataclass
class RailCamera:
    """Keeps a view matrix that follows its world transform."""

    world_transform: WorldTransform = field(default_factory=WorldTransform)
    view_projection: ViewProjection = field(default_factory=ViewProjection)

    def update(self) -> None:
        """Rebuild the world matrix and set the view matrix to its inverse."""
        wt = self.world_transform
        wt.mat_world = make_affine_matrix(wt.scale, wt.rotation, wt.translation)
        self.view_projection.mat_view = inverse(wt.mat_world)

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()