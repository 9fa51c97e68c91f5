import dataclasses
import unittest

from conftest import ConstantRandom

from hunter.level_generator import LevelGenerator
from hunter.snapshot import PlayerView, WorldSnapshot
from hunter.world import World


class TestSnapshot(unittest.TestCase):
    def setUp(self):
        self.world = World(960, 600, rng=ConstantRandom(0.9), generator=LevelGenerator(960, 600, rng=ConstantRandom(0.5)))
        self.world.start_new_game()

    def test_snapshot_is_frozen(self):
        snap = self.world.snapshot()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            snap.score = 99  # type: ignore[misc]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            snap.player.x = 0  # type: ignore[misc]

    def test_snapshot_does_not_track_later_changes(self):
        snap = self.world.snapshot()
        self.world.score = 50
        self.world.level.collectibles.append(self.world.generator.spawn_collectible(10, 10, "bone"))
        self.assertEqual(snap.score, 0)
        self.assertEqual(snap.collectibles, ())

    def test_inactive_collectibles_are_hidden(self):
        bone = self.world.generator.spawn_collectible(10, 10, "bone")
        bone.active = False
        self.world.level.collectibles.append(bone)
        self.assertEqual(self.world.snapshot().collectibles, ())

    def test_player_view_fields(self):
        self.world.player.apply_power_up()
        view = self.world.snapshot().player
        self.assertEqual(view.status, "powered_up")
        self.assertEqual(view.max_sprint_meter, 100)
        self.assertFalse(view.sprint_cooldown)

    def test_progress_caps_at_one(self):
        player = PlayerView(0, 0, 50, 50, 1, "normal", 100, 100, False, False)
        snap = WorldSnapshot(0, 0, 960, 600, 250, 1, 100, 5000, player)
        self.assertEqual(snap.progress, 1.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
