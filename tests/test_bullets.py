import pytest

from guardian_sky.affine import Vector3
from guardian_sky.bullets import EnemyBullet, PlayerBullet
from guardian_sky.textures import TextureManager


def _approx(v):
    return pytest.approx(tuple(v))


def test_player_bullet_moves_by_velocity():
    start = Vector3(1.0, 2.0, 3.0)
    velocity = Vector3(0.5, -1.0, 2.0)
    bullet = PlayerBullet(start, velocity)
    bullet.update()
    assert tuple(bullet.world_transform.translation) == _approx(start + velocity)


def test_world_position_lags_one_frame():
    start = Vector3(1.0, 2.0, 3.0)
    velocity = Vector3(0.0, 0.0, 1.0)
    bullet = PlayerBullet(start, velocity)
    bullet.update()
    assert tuple(bullet.world_position()) == _approx(start)
    bullet.update()
    assert tuple(bullet.world_position()) == _approx(start + velocity)


def test_player_bullet_expires_after_life_time():
    bullet = PlayerBullet(Vector3(), Vector3(0.0, 0.0, 1.0))
    for _ in range(PlayerBullet.LIFE_TIME - 1):
        bullet.update()
    assert bullet.is_dead is False
    bullet.update()
    assert bullet.is_dead is True


def test_player_bullet_life_time_is_one_second():
    assert PlayerBullet(Vector3(), Vector3()).death_timer == 60


def test_player_bullet_is_half_size():
    bullet = PlayerBullet(Vector3(), Vector3())
    assert tuple(bullet.world_transform.scale) == _approx((0.5, 0.5, 0.5))


def test_enemy_bullet_does_not_expire_by_time():
    bullet = EnemyBullet(Vector3(), Vector3(0.0, 0.0, -1.0))
    for _ in range(500):
        bullet.update()
    assert bullet.is_dead is False


@pytest.mark.parametrize("cls", [PlayerBullet, EnemyBullet])
def test_collision_marks_dead(cls):
    bullet = cls(Vector3(), Vector3())
    bullet.on_collision()
    assert bullet.is_dead is True


@pytest.mark.parametrize(
    "cls, texture", [(PlayerBullet, "Blue.png"), (EnemyBullet, "Red.png")]
)
def test_bullet_loads_its_texture(cls, texture):
    textures = TextureManager()
    bullet = cls(Vector3(), Vector3(), textures)
    assert textures.name_of(bullet.texture_handle) == texture
    assert cls(Vector3(), Vector3(), textures).texture_handle == bullet.texture_handle


def test_world_position_available_at_creation():
    start = Vector3(4.0, 5.0, 6.0)
    bullet = EnemyBullet(start, Vector3(1.0, 1.0, 1.0))
    assert tuple(bullet.world_position()) == _approx(start)