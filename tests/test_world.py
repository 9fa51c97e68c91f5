import pytest
from conftest import ConstantRandom, ScriptedRandom

from hunter.level_generator import LevelGenerator
from hunter.player import InputIntents, StatusEffect
from hunter.save_store import SaveStore
from hunter.world import World


def make_world(draws=()):
    gen = LevelGenerator(960, 600, rng=ConstantRandom(0.5))
    world = World(960, 600, rng=ScriptedRandom(draws, value=0.9), generator=gen)
    world.start_new_game()
    return world


def put_on_player(world, species):
    animal = next(a for a in world.level.animals if a.species == species)
    animal.x, animal.y = world.player.x, world.player.y + 10
    return animal


def test_new_game_state():
    world = make_world()
    assert world.running and not world.paused and not world.game_over
    assert world.level_number == 1
    assert world.score == 0
    assert (world.player.x, world.player.y) == (100, 450)


def test_catching_rabbit_scores_and_deactivates():
    world = make_world()
    rabbit = put_on_player(world, "rabbit")
    world.tick()
    assert not rabbit.active
    assert world.score == 10
    assert world.level.collectibles == []


def test_pig_can_make_player_sick():
    world = make_world(draws=[0.1, 0.9, 0.9])
    put_on_player(world, "pig")
    world.tick()
    assert world.score == 20
    assert world.player.status is StatusEffect.SICK


def test_pig_roll_above_chance_leaves_player_healthy():
    world = make_world(draws=[0.5, 0.9, 0.9])
    put_on_player(world, "pig")
    world.tick()
    assert world.player.status is StatusEffect.NORMAL


def test_bone_drop_lands_on_player_and_is_collected():
    world = make_world(draws=[0.2])
    put_on_player(world, "rabbit")
    world.tick()
    # Drop spawns where the rabbit was, overlapping the player, so it is picked up at once.
    assert world.score == 15
    assert world.level.collectibles == []


def test_treat_drop_powers_up_player():
    world = make_world(draws=[0.9, 0.05])
    put_on_player(world, "rabbit")
    world.tick()
    assert world.score == 20
    assert world.player.is_powered_up


def test_uncollected_drop_stays_in_level():
    world = make_world()
    world.level.collectibles.append(world.generator.spawn_collectible(1500, 300, "bone"))
    world.tick()
    assert len(world.level.collectibles) == 1
    assert world.snapshot().collectibles[0].kind == "bone"


def test_score_goal_advances_level():
    world = make_world()
    world.score = 95
    put_on_player(world, "rabbit")
    world.tick()
    assert world.level_number == 2
    assert world.level.width == 6000
    assert (world.player.x, world.player.y) == world.spawn_point
    assert world.camera_x == 0
    assert world.notifications == ["Level 2!"]


def test_reaching_level_end_advances():
    world = make_world()
    world.player.x = world.level.width - 99
    world.tick()
    assert world.level_number == 2
    assert world.score == 0


def test_next_level_clears_status():
    world = make_world()
    world.player.apply_sickness()
    world.next_level()
    assert world.player.status is StatusEffect.NORMAL


def test_falling_out_ends_game_before_level_end_check():
    world = make_world()
    world.player.x = world.level.width
    world.player.y = world.view_height + 200
    world.tick()
    assert world.game_over
    assert not world.running
    assert world.level_number == 1
    tick = world.tick_count
    world.tick()
    assert world.tick_count == tick


def test_animal_fallen_below_level_is_dropped():
    world = make_world()
    animal = world.level.animals[0]
    animal.x, animal.y = world.player.x, world.view_height + 150
    world.tick()
    assert not animal.active
    assert world.score == 0


def test_collectible_fallen_below_level_is_removed():
    world = make_world()
    world.level.collectibles.append(world.generator.spawn_collectible(world.player.x, world.view_height + 150, "bone"))
    world.tick()
    assert world.level.collectibles == []
    assert world.score == 0


def test_pause_freezes_simulation():
    world = make_world()
    world.pause()
    y = world.player.y
    for _ in range(10):
        world.tick(InputIntents(right=True))
    assert world.player.y == y
    assert world.tick_count == 0
    world.resume()
    world.tick()
    assert world.tick_count == 1
    world.toggle_pause()
    assert world.paused


def test_sprint_cooldown_does_not_elapse_while_paused():
    world = make_world()
    world.player.sprint_meter = 1
    world.tick(InputIntents(sprint=True))
    assert world.player.sprint_cooldown
    world.pause()
    for _ in range(500):
        world.tick()
    world.resume()
    for _ in range(118):
        world.tick()
    assert world.player.sprint_cooldown
    world.tick()
    assert not world.player.sprint_cooldown


def test_notification_expires_after_duration():
    world = make_world()
    world.notify("hello", 2)
    world.tick()
    assert "hello" in world.notifications
    world.tick()
    assert "hello" not in world.notifications


def test_camera_clamps_to_level_bounds():
    world = make_world()
    world.player.x = 100000
    for _ in range(500):
        world.update_camera()
    assert world.camera_x == world.level.width - world.view_width
    world.player.x = -500
    for _ in range(500):
        world.update_camera()
    assert world.camera_x == 0


def test_save_and_continue(tmp_path):
    store = SaveStore(str(tmp_path / "save.json"))
    world = make_world()
    world.score = 40
    world.player.x, world.player.y = 321.5, 400
    assert world.save(store)
    assert "Game saved!" in world.notifications

    resumed = make_world()
    assert resumed.continue_game(store)
    assert resumed.score == 40
    assert resumed.level_number == 1
    assert (resumed.player.x, resumed.player.y) == (321.5, 400)


def test_continue_with_corrupt_save_starts_fresh(tmp_path):
    path = tmp_path / "save.json"
    path.write_text("{not json")
    world = make_world()
    world.score = 70
    assert world.continue_game(SaveStore(str(path))) is False
    assert world.running
    assert world.score == 0
    assert world.level_number == 1


def test_continue_with_out_of_range_level_starts_fresh(tmp_path):
    path = tmp_path / "save.json"
    path.write_text('{"score": 5, "level": 1000000000, "playerX": 0, "playerY": 0}')
    world = make_world()
    assert world.continue_game(SaveStore(str(path))) is False
    assert world.level_number == 1
    assert world.score == 0


def test_save_ignored_when_not_running(tmp_path):
    store = SaveStore(str(tmp_path / "save.json"))
    world = make_world()
    world.quit()
    assert world.save(store) is False
    assert not store.exists()


def test_snapshot_reflects_world():
    world = make_world()
    rabbit = world.level.animals[0]
    rabbit.active = False
    snap = world.snapshot()
    assert snap.level_number == 1
    assert snap.points_to_advance == 100
    assert len(snap.animals) == len(world.level.animals) - 1
    assert snap.player.status == "normal"
    assert snap.progress == pytest.approx(0)
