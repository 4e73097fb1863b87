import pytest

from guardian_sky.affine import Vector3
from guardian_sky.skydome import Skydome


def test_skydome_scale():
    dome = Skydome()
    assert tuple(dome.world_transform.scale) == pytest.approx((500.0, 500.0, 500.0))


def test_update_builds_scaled_matrix_at_origin():
    dome = Skydome()
    dome.update()
    m = dome.world_transform.mat_world
    assert [m[i][i] for i in range(3)] == pytest.approx([500.0, 500.0, 500.0])
    assert tuple(dome.world_transform.world_position()) == pytest.approx((0.0, 0.0, 0.0))


def test_update_picks_up_moved_translation():
    dome = Skydome()
    dome.world_transform.translation = Vector3(1.0, 2.0, 3.0)
    dome.update()
    assert tuple(dome.world_transform.world_position()) == pytest.approx((1.0, 2.0, 3.0))