"""World transforms with parenting, and view/projection parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from guardian_sky.affine import (
    Matrix4x4,
    Vector3,
    identity_matrix,
    make_affine_matrix,
    multiply,
)


@dataclass
class WorldTransform:
    """Local scale, rotation and translation with an optional parent."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    mat_world: Matrix4x4 = field(default_factory=Matrix4x4)
    parent: WorldTransform | None = None

    def update_matrix(self) -> Matrix4x4:
        """Recompute the world matrix from local values and the parent's world matrix."""
        matrix = make_affine_matrix(self.scale, self.rotation, self.translation)
        if self.parent is not None:
            matrix = multiply(matrix, self.parent.mat_world)
        self.mat_world = matrix
        return matrix

    def world_position(self) -> Vector3:
        """Return the translation row of the world matrix."""
        x, y, z, _ = self.mat_world[3]
        return Vector3(x, y, z)


@dataclass
class ViewProjection:
    """Camera placement and projection settings with their matrices."""

    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -50.0))
    fov_angle_y: float = 45.0 * 3.141592654 / 180.0
    aspect_ratio: float = 16 / 9
    near_z: float = 0.1
    far_z: float = 1000.0
    mat_view: Matrix4x4 = field(default_factory=identity_matrix)
    mat_projection: Matrix4x4 = field(default_factory=identity_matrix)

    @property
    def fov_degrees(self) -> float:
        return math.degrees(self.fov_angle_y)