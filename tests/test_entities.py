import pytest

from bomby_explody.components import SCREEN_HEIGHT, SCREEN_WIDTH, MovementConfig, Vec2
from bomby_explody.entities import (
    CHAIN_DELAY,
    DEATH_FADE_SECONDS,
    ENEMY_HEALTH,
    EXPLOSION_SECONDS,
    HIT_FLASH_SECONDS,
    SCREEN_WRAP_MARGIN,
    WHITE,
    apply_movement,
    create_bomb,
    create_enemy,
    create_explosion,
    screen_wrap,
)

WINDOW = Vec2(SCREEN_WIDTH, SCREEN_HEIGHT)
WRAP_SIZE = Vec2(SCREEN_WIDTH + SCREEN_WRAP_MARGIN, SCREEN_HEIGHT + SCREEN_WRAP_MARGIN)


def test_screen_wrap_keeps_inner_points():
    point = Vec2(10.0, -20.0)
    assert screen_wrap(point, WINDOW) == point


def test_screen_wrap_is_periodic_and_bounded():
    point = Vec2(900.0, 500.0)
    a = screen_wrap(point, WINDOW)
    b = screen_wrap(point + WRAP_SIZE, WINDOW)
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)
    assert -WRAP_SIZE.x / 2 <= a.x < WRAP_SIZE.x / 2
    assert -WRAP_SIZE.y / 2 <= a.y < WRAP_SIZE.y / 2


def test_screen_wrap_moves_point_past_edge_to_other_side():
    point = Vec2(WRAP_SIZE.x / 2 + 1.0, 0.0)
    wrapped = screen_wrap(point, WINDOW)
    assert wrapped.x < 0
    assert wrapped.x == pytest.approx(point.x - WRAP_SIZE.x)


def test_apply_movement_travels_speed_times_delta():
    config = MovementConfig(Vec2(0.0, 1.0), 40.0)
    start = Vec2(3.0, 4.0)
    moved = apply_movement(start, config, 0.25)
    assert moved.x == start.x
    assert moved.y > start.y
    assert moved.distance(start) == pytest.approx(config.speed * 0.25)


def test_apply_movement_zero_delta_stays():
    config = MovementConfig(Vec2(1.0, 0.0), 40.0)
    start = Vec2(3.0, 4.0)
    assert apply_movement(start, config, 0.0) == start


def test_create_bomb_starts_off_screen_left():
    target = Vec2(100.0, 50.0)
    bomb = create_bomb(target, 2.75)
    assert bomb.position == Vec2(-SCREEN_WIDTH / 2.0, 0.0)
    assert bomb.target == target
    assert bomb.will_explode is None
    assert bomb.exploding is False
    assert bomb.armed


def test_bomb_fuse_marks_then_explodes():
    bomb = create_bomb(Vec2(0.0, 0.0), 1.0)
    assert bomb.update(0.5) is False
    assert bomb.will_explode is None
    assert bomb.update(0.5) is False
    assert bomb.will_explode is not None
    assert bomb.armed is False
    assert bomb.update(CHAIN_DELAY) is True
    assert bomb.exploding


def test_bomb_moves_toward_target_then_stops():
    target = Vec2(200.0, 100.0)
    bomb = create_bomb(target, 5.0)
    start = bomb.position
    bomb.update(0.1)
    assert bomb.position.distance(target) < start.distance(target)
    bomb.update(0.5)
    assert bomb.target is None
    resting = bomb.position
    bomb.update(0.1)
    assert bomb.position == resting


def test_mark_for_explode_stops_fuse():
    bomb = create_bomb(Vec2(0.0, 0.0), 1.0)
    bomb.mark_for_explode(5.0)
    bomb.update(1.0)
    assert bomb.exploding is False
    assert bomb.fuse.elapsed == 0.0
    assert bomb.will_explode.elapsed == pytest.approx(1.0)


def test_bomb_animation_cycles_through_frames():
    bomb = create_bomb(Vec2(0.0, 0.0), 100.0)
    step = 1.0 / bomb.animation.fps
    indices = []
    for _ in range(bomb.animation.frames):
        bomb.update(step)
        indices.append(bomb.atlas_index)
    assert set(indices) == set(range(bomb.animation.frames))
    assert indices[-1] == bomb.animation.index


def test_create_enemy_speed_from_screen_width():
    enemy = create_enemy(0, Vec2(0.0, 0.0), Vec2(-1.0, 0.0), 0.1)
    assert enemy.movement.speed == pytest.approx(SCREEN_WIDTH * 0.1)
    assert enemy.movement.direction == Vec2(-1.0, 0.0)
    assert enemy.health.current == ENEMY_HEALTH
    assert enemy.moving is True
    assert enemy.color == WHITE


def test_create_enemy_without_movement_raises():
    with pytest.raises(ValueError):
        create_enemy(0, Vec2(0.0, 0.0), Vec2(0.0, 0.0), 0.1)


def test_enemy_walks_along_its_direction():
    enemy = create_enemy(0, Vec2(100.0, 20.0), Vec2(-1.0, 0.0), 0.1)
    enemy.update(0.5, WINDOW)
    assert enemy.position.y == 20.0
    assert enemy.position.x == pytest.approx(100.0 - enemy.movement.speed * 0.5)


def test_damage_flashes_then_recovers():
    enemy = create_enemy(0, Vec2(0.0, 0.0), Vec2(-1.0, 0.0), 0.1)
    enemy.apply_damage(1)
    assert enemy.health.current == ENEMY_HEALTH - 1
    assert enemy.damaged is not None
    assert enemy.dead is None
    assert enemy.update(0.1, WINDOW) is True
    assert enemy.moving is False
    enemy.update(HIT_FLASH_SECONDS, WINDOW)
    assert enemy.damaged is None
    assert enemy.moving is True
    assert enemy.color == WHITE


def test_damage_does_not_restart_running_flash():
    enemy = create_enemy(0, Vec2(0.0, 0.0), Vec2(-1.0, 0.0), 0.1)
    enemy.apply_damage(1)
    enemy.update(0.2, WINDOW)
    flash = enemy.damaged
    enemy.apply_damage(1)
    assert enemy.damaged is flash
    assert enemy.health.current == ENEMY_HEALTH - 2


def test_lethal_damage_fades_then_removes():
    enemy = create_enemy(0, Vec2(0.0, 0.0), Vec2(-1.0, 0.0), 0.1)
    enemy.apply_damage(ENEMY_HEALTH)
    assert enemy.is_dead
    assert enemy.damaged is None
    assert enemy.update(DEATH_FADE_SECONDS / 2, WINDOW) is True
    assert 0.0 < enemy.color[3] < 1.0
    assert enemy.moving is False
    assert enemy.update(DEATH_FADE_SECONDS, WINDOW) is False


def test_explosion_lives_for_its_timer():
    location = Vec2(5.0, 5.0)
    explosion = create_explosion(location)
    assert explosion.position == location
    assert explosion.update(EXPLOSION_SECONDS / 2) is True
    assert explosion.update(EXPLOSION_SECONDS) is False