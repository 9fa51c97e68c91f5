import pytest

from hunter.constants import SPRINT_COOLDOWN_TICKS
from hunter.physics import PhysicsEngine
from hunter.player import InputIntents, Player, StatusEffect
from hunter.terrain import Platform

GROUND = (Platform(0, 550, 2000, 50),)


def grounded_player():
    p = Player(100, 500)
    p.on_ground = True
    return p


def test_defaults():
    p = Player(10, 20)
    assert (p.width, p.height) == (50, 50)
    assert (p.speed, p.sprint_speed) == (5, 8)
    assert p.sprint_meter == p.max_sprint_meter == 100
    assert p.status is StatusEffect.NORMAL


def test_sprint_drains_meter():
    p = Player(0, 0)
    p.handle_sprint(True)
    assert p.is_sprinting
    assert p.sprint_meter == 98


def test_sprint_recharges_when_released_and_caps():
    p = Player(0, 0)
    p.sprint_meter = 99.5
    p.handle_sprint(False)
    assert not p.is_sprinting
    assert p.sprint_meter == 100


def test_exhausting_meter_enters_cooldown_until_scheduler_releases():
    p = Player(0, 0)
    p.sprint_meter = 1
    p.handle_sprint(True)
    assert p.sprint_meter == 0
    assert not p.is_sprinting
    assert p.sprint_cooldown

    # Held sprint during cooldown neither sprints nor recharges.
    p.handle_sprint(True)
    assert not p.is_sprinting and p.sprint_meter == 0

    p.scheduler.advance(SPRINT_COOLDOWN_TICKS - 1)
    assert p.sprint_cooldown
    p.scheduler.advance()
    assert not p.sprint_cooldown


def test_powered_up_halves_drain():
    p = Player(0, 0)
    p.apply_power_up()
    p.handle_sprint(True)
    assert p.sprint_meter == pytest.approx(99)


def test_sick_player_cannot_sprint():
    p = Player(0, 0)
    p.is_sprinting = True
    p.apply_sickness()
    assert not p.is_sprinting
    p.handle_sprint(True)
    assert not p.is_sprinting
    assert p.sprint_meter == 100


def test_sickness_replaces_power_up():
    p = Player(0, 0)
    p.apply_power_up()
    p.apply_sickness()
    assert p.is_sick and not p.is_powered_up
    assert (p.speed, p.sprint_speed) == (3, 5)


def test_power_up_cures_sickness():
    p = Player(0, 0)
    p.apply_sickness()
    p.apply_power_up()
    assert p.is_powered_up and not p.is_sick
    assert (p.speed, p.sprint_speed) == (7, 11)


def test_status_expires_and_restores_speeds():
    p = Player(0, 0)
    p.apply_power_up(duration=3)
    for _ in range(2):
        p.update_status_effects()
    assert p.is_powered_up
    p.update_status_effects()
    assert p.status is StatusEffect.NORMAL
    assert (p.speed, p.sprint_speed) == (5, 8)


def test_update_moves_and_faces_left():
    physics = PhysicsEngine()
    p = grounded_player()
    p.update(physics, GROUND, InputIntents(left=True))
    assert p.direction == -1
    assert p.x == pytest.approx(95)


def test_update_sprinting_uses_sprint_speed():
    physics = PhysicsEngine()
    p = grounded_player()
    p.update(physics, GROUND, InputIntents(right=True, sprint=True))
    assert p.x == pytest.approx(108)
    assert p.sprint_meter == 98


def test_jump_only_from_ground():
    physics = PhysicsEngine()
    p = grounded_player()
    p.update(physics, GROUND, InputIntents(jump=True))
    assert not p.on_ground
    assert p.vy < 0
    vy = p.vy
    p.update(physics, GROUND, InputIntents(jump=True))
    assert p.vy == pytest.approx(vy + 0.5)


def test_standing_player_stays_grounded():
    physics = PhysicsEngine()
    p = Player(100, 480)
    for _ in range(60):
        p.update(physics, GROUND, InputIntents())
    assert p.on_ground
    assert p.vy == 0
    assert p.y == 500


def test_reset_to_clears_motion():
    p = Player(0, 0)
    p.vx, p.vy, p.on_ground = 3, -4, True
    p.reset_to(100, 450)
    assert (p.x, p.y, p.vx, p.vy, p.on_ground) == (100, 450, 0, 0, False)
