import pytest

from guardian_sky.affine import Matrix4x4, Vector3, normalize
from guardian_sky.player import JoystickState, Player, PlayerControls
from guardian_sky.textures import TextureManager
from guardian_sky.transform import ViewProjection, WorldTransform

CENTER = (640.0, 360.0)


def _vec(v):
    return (v.x, v.y, v.z)


def test_initial_world_position_matches_given_position():
    player = Player(Vector3(1.0, 2.0, 3.0))
    assert _vec(player.world_position()) == pytest.approx((1.0, 2.0, 3.0))


def test_reticle_texture_is_loaded():
    textures = TextureManager()
    player = Player(textures=textures)
    assert textures.name_of(player.reticle_texture) == "2DReticle.png"


def test_right_key_moves_by_character_speed():
    player = Player()
    player.update(ViewProjection(), PlayerControls(keys=frozenset({"RIGHT"}), cursor=CENTER))
    assert player.world_transform.translation.x == pytest.approx(Player.CHARACTER_SPEED)
    assert player.world_transform.translation.y == pytest.approx(0.0)


def test_down_key_moves_down():
    player = Player()
    player.update(ViewProjection(), PlayerControls(keys=frozenset({"s"}), cursor=CENTER))
    assert player.world_transform.translation.y == pytest.approx(-Player.CHARACTER_SPEED)


def test_movement_is_clamped():
    player = Player(Vector3(100.0, -100.0, 0.0))
    player.update(ViewProjection(), PlayerControls(cursor=CENTER))
    t = player.world_transform.translation
    assert (t.x, t.y) == pytest.approx((Player.MOVE_LIMIT_X, -Player.MOVE_LIMIT_Y))


def test_joystick_left_stick_moves_player():
    player = Player()
    stick = JoystickState(thumb_lx=32767)
    player.update(ViewProjection(), PlayerControls(joystick=stick))
    assert player.world_transform.translation.x == pytest.approx(Player.CHARACTER_SPEED)


def test_rotate_a_has_priority_over_d():
    player = Player()
    player.rotate(PlayerControls(keys=frozenset({"A", "D"})))
    assert player.world_transform.rotation.y == pytest.approx(-Player.ROT_SPEED)
    player.rotate(PlayerControls(keys=frozenset({"D"})))
    player.rotate(PlayerControls(keys=frozenset({"D"})))
    assert player.world_transform.rotation.y == pytest.approx(Player.ROT_SPEED)


def test_cursor_at_screen_center_puts_reticle_straight_ahead():
    player = Player()
    player.aim_with_cursor(ViewProjection(), *CENTER)
    assert player.reticle_position == CENTER
    assert _vec(player.reticle_transform.world_position()) == pytest.approx(
        (0.0, 0.0, Player.RETICLE_DISTANCE)
    )


def test_reticle_is_at_fixed_distance_from_near_point():
    player = Player()
    player.aim_with_cursor(ViewProjection(), 100.0, 500.0)
    near_player = Player()
    near_player.aim_with_cursor(ViewProjection(), 100.0, 500.0)
    t = player.reticle_transform.translation
    assert t.z == pytest.approx(Player.RETICLE_DISTANCE)
    assert _vec(t) == pytest.approx(_vec(near_player.reticle_transform.translation))


def test_gamepad_right_stick_moves_reticle():
    player = Player()
    player.reticle_position = CENTER
    player.aim_with_gamepad(ViewProjection(), JoystickState(thumb_rx=32767, thumb_ry=32767))
    x, y = player.reticle_position
    assert x == pytest.approx(CENTER[0] + Player.GAMEPAD_RETICLE_SPEED)
    assert y == pytest.approx(CENTER[1] - Player.GAMEPAD_RETICLE_SPEED)


def test_gamepad_without_joystick_keeps_reticle_position():
    player = Player()
    player.reticle_position = CENTER
    player.aim_with_gamepad(ViewProjection(), None)
    assert player.reticle_position == CENTER


def test_attack_with_space_fires_toward_reticle():
    player = Player()
    player.aim_with_cursor(ViewProjection(), *CENTER)
    fired = player.attack(PlayerControls(keys=frozenset({"SPACE"})))
    assert len(fired) == 1
    assert player.bullets == fired
    bullet = fired[0]
    assert _vec(normalize(bullet.velocity)) == pytest.approx((0.0, 0.0, 1.0))
    assert _vec(bullet.world_position()) == pytest.approx(_vec(player.world_position()))


def test_attack_with_mouse_and_shoulder_fires_twice():
    player = Player()
    player.aim_with_cursor(ViewProjection(), *CENTER)
    controls = PlayerControls(mouse_pressed=True, joystick=JoystickState(right_shoulder=True))
    assert len(player.attack(controls)) == 2
    assert len(player.bullets) == 2


def test_attack_without_input_fires_nothing():
    player = Player()
    player.aim_with_cursor(ViewProjection(), *CENTER)
    assert player.attack(PlayerControls()) == []
    assert player.bullets == []


def test_update_removes_dead_bullets():
    player = Player()
    player.aim_with_cursor(ViewProjection(), *CENTER)
    (bullet,) = player.attack(PlayerControls(mouse_pressed=True))
    bullet.on_collision()
    player.update(ViewProjection(), PlayerControls(cursor=CENTER))
    assert player.bullets == []


def test_update_moves_new_bullets():
    player = Player()
    player.update(ViewProjection(), PlayerControls(keys=frozenset({"SPACE"}), cursor=CENTER))
    assert len(player.bullets) == 1
    assert player.bullets[0].death_timer == player.bullets[0].LIFE_TIME - 1


def test_set_parent_offsets_world_position():
    parent = WorldTransform(translation=Vector3(10.0, 0.0, 0.0))
    parent.update_matrix()
    player = Player(Vector3(1.0, 0.0, 0.0))
    player.set_parent(parent)
    player.update(ViewProjection(), PlayerControls(cursor=CENTER))
    assert player.world_position().x == pytest.approx(11.0)


def test_singular_view_projection_raises():
    player = Player()
    view = ViewProjection(mat_view=Matrix4x4())
    with pytest.raises(ValueError):
        player.aim_with_cursor(view, *CENTER)