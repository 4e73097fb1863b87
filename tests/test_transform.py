import math

import pytest

from guardian_sky.affine import Vector3, identity_matrix, make_affine_matrix, transform
from guardian_sky.transform import ViewProjection, WorldTransform


def test_world_position_is_zero_before_update():
    wt = WorldTransform(translation=Vector3(1.0, 2.0, 3.0))
    assert wt.world_position() == Vector3()


def test_update_without_parent_uses_local_affine():
    wt = WorldTransform(
        scale=Vector3(2.0, 2.0, 2.0),
        rotation=Vector3(0.1, 0.2, 0.3),
        translation=Vector3(4.0, 5.0, 6.0),
    )
    result = wt.update_matrix()
    assert result == wt.mat_world
    assert wt.mat_world == make_affine_matrix(wt.scale, wt.rotation, wt.translation)
    assert wt.world_position() == Vector3(4.0, 5.0, 6.0)


def test_parent_translation_is_added():
    parent = WorldTransform(translation=Vector3(10.0, 0.0, -5.0))
    parent.update_matrix()
    child = WorldTransform(translation=Vector3(1.0, 2.0, 3.0), parent=parent)
    child.update_matrix()
    assert tuple(child.world_position()) == pytest.approx((11.0, 2.0, -2.0))


def test_child_position_is_local_translation_through_parent_matrix():
    parent = WorldTransform(
        scale=Vector3(2.0, 2.0, 2.0),
        rotation=Vector3(0.0, 0.5, 0.0),
        translation=Vector3(3.0, 1.0, 0.0),
    )
    parent.update_matrix()
    child = WorldTransform(translation=Vector3(0.0, 0.0, 1.0), parent=parent)
    child.update_matrix()
    assert tuple(child.world_position()) == pytest.approx(
        tuple(transform(child.translation, parent.mat_world))
    )


def test_view_projection_instances_are_independent():
    first = ViewProjection()
    second = ViewProjection()
    first.translation = Vector3(1.0, 1.0, 1.0)
    assert second.translation == Vector3(0.0, 0.0, -50.0)
    assert first.mat_view == identity_matrix()
    assert math.isclose(first.fov_degrees, 45.0, rel_tol=1e-8)