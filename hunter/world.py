"""Per-tick orchestration of one run.

The world owns the active level, the player, the physics engine and the
task scheduler. One call to ``tick`` is one simulation step:

  1. player update from the sampled intents
  2. camera follow
  3. active animals update; any touching the player are caught, any
     fallen below the level are dropped
  4. collectibles update (backwards, so pickups and lost drops can be
     removed in place)
  5. fall-out, level-end and score checks
  6. scheduler poll (sprint cooldown, notification expiry)

While paused (or before a run starts) ``tick`` does nothing, so no time
accrues and nothing is caught up on resume.
"""

from __future__ import annotations

from typing import List

from hunter.constants import (
    BONE_DROP_CHANCE,
    CAMERA_SMOOTHING,
    FALL_OUT_MARGIN,
    LEVEL_END_MARGIN,
    LEVEL_NOTIFICATION_TICKS,
    NOTIFICATION_TICKS,
    PLAYER_SPAWN_ABOVE_FLOOR,
    PLAYER_SPAWN_X,
    TREAT_DROP_CHANCE,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from hunter.entities import Animal, Collectible
from hunter.level_generator import Level, LevelGenerator
from hunter.logger import get_logger
from hunter.physics import PhysicsEngine
from hunter.player import InputIntents, Player
from hunter.rng_service import RandomSource, RNGService
from hunter.save_store import SaveData, SaveStore
from hunter.scheduler import TaskScheduler
from hunter.snapshot import SnapshotService, WorldSnapshot

log = get_logger("world")


class World:
    def __init__(
        self,
        view_width: int = VIEW_WIDTH,
        view_height: int = VIEW_HEIGHT,
        rng: RandomSource | None = None,
        generator: LevelGenerator | None = None,
    ):
        self.view_width = view_width
        self.view_height = view_height
        self.rng = rng if rng is not None else RNGService.get()
        self.generator = generator if generator is not None else LevelGenerator(view_width, view_height, rng=self.rng)
        self.physics = PhysicsEngine()
        self.scheduler = TaskScheduler()

        self.level: Level | None = None
        self.player: Player | None = None
        self.level_number = 1
        self.score = 0
        self.camera_x = 0.0
        self.tick_count = 0
        self.notifications: List[str] = []

        self.running = False
        self.paused = False
        self.game_over = False

    @property
    def spawn_point(self) -> tuple[float, float]:
        return PLAYER_SPAWN_X, self.view_height - PLAYER_SPAWN_ABOVE_FLOOR

    # --- Run lifecycle --------------------------------------------------
    def start_new_game(self) -> None:
        x, y = self.spawn_point
        self._begin_run(score=0, level_number=1, x=x, y=y)

    def continue_game(self, store: SaveStore) -> bool:
        """Resume from ``store``; start fresh when there is no usable save.

        Returns True when a save was restored.
        """
        data = store.load()
        if data is None:
            log.info("No usable save, starting a new game")
            self.start_new_game()
            return False
        self._begin_run(score=data.score, level_number=data.level, x=data.player_x, y=data.player_y)
        return True

    def _begin_run(self, score: int, level_number: int, x: float, y: float) -> None:
        self.scheduler.clear()
        self.notifications.clear()
        self.score = score
        self.level_number = level_number
        self.level = self.generator.generate_level(level_number)
        self.player = Player(x, y, scheduler=self.scheduler)
        self.camera_x = 0.0
        self.tick_count = 0
        self.running = True
        self.paused = False
        self.game_over = False
        log.info("Run started at level", level_number, "score", score)

    def save_payload(self) -> SaveData:
        return SaveData(self.score, self.level_number, self.player.x, self.player.y)

    def save(self, store: SaveStore) -> bool:
        if not self.running:
            return False
        ok = store.save(self.save_payload())
        if ok:
            self.notify("Game saved!")
        return ok

    def pause(self) -> None:
        if not self.running or self.paused:
            return
        self.paused = True
        log.debug("Paused at tick", self.tick_count)

    def resume(self) -> None:
        if not self.running or not self.paused:
            return
        self.paused = False
        log.debug("Resumed at tick", self.tick_count)

    def toggle_pause(self) -> None:
        if self.paused:
            self.resume()
        else:
            self.pause()

    def quit(self) -> None:
        self.running = False
        self.paused = False

    def end_game(self) -> None:
        self.running = False
        self.game_over = True
        log.info("Game over on level", self.level_number, "with score", self.score)

    def next_level(self) -> None:
        self.level_number += 1
        self.level = self.generator.generate_level(self.level_number)
        self.player.reset_to(*self.spawn_point)
        self.player.reset_status_effects()
        self.camera_x = 0.0
        self.scheduler.cancel("notification")
        self.notifications.clear()
        self.notify(f"Level {self.level_number}!", LEVEL_NOTIFICATION_TICKS)

    # --- Notifications --------------------------------------------------
    def notify(self, message: str, duration_ticks: int = NOTIFICATION_TICKS) -> None:
        self.notifications.append(message)
        self.scheduler.schedule(duration_ticks, lambda: self._expire_notification(message), "notification")

    def _expire_notification(self, message: str) -> None:
        if message in self.notifications:
            self.notifications.remove(message)

    # --- Simulation -----------------------------------------------------
    def tick(self, intents: InputIntents = InputIntents()) -> None:
        if not self.running or self.paused:
            return
        self._simulate(intents)
        self.scheduler.advance()
        self.tick_count += 1

    def _simulate(self, intents: InputIntents) -> None:
        level = self.level
        player = self.player
        player.update(self.physics, level.platforms, intents)
        self.update_camera()

        floor = self.view_height + FALL_OUT_MARGIN
        for animal in level.animals:
            if not animal.active:
                continue
            animal.update(self.physics, level.platforms)
            if animal.y > floor:
                # Fell through a gap; never coming back.
                animal.active = False
                log.debug("Lost", animal.species, "below the level")
            elif self.physics.check_entity_collision(player, animal):
                self._catch(animal)

        for i in range(len(level.collectibles) - 1, -1, -1):
            collectible = level.collectibles[i]
            if not collectible.active:
                continue
            collectible.update(self.physics, level.platforms)
            if collectible.y > floor:
                del level.collectibles[i]
            elif self.physics.check_entity_collision(player, collectible):
                self._collect(collectible)
                del level.collectibles[i]

        if player.y > floor:
            self.end_game()
        elif player.x > level.width - LEVEL_END_MARGIN:
            self.next_level()
        elif self.score >= level.points_to_advance:
            self.next_level()

    def _catch(self, animal: Animal) -> None:
        animal.active = False
        self.score += animal.points
        log.debug("Caught", animal.species, "+", animal.points, "->", self.score)
        if animal.sickness_chance and self.rng.random() < animal.sickness_chance:
            self.player.apply_sickness()
        if self.rng.random() < BONE_DROP_CHANCE:
            self.level.collectibles.append(self.generator.spawn_collectible(animal.x, animal.y, "bone"))
        elif self.rng.random() < TREAT_DROP_CHANCE:
            self.level.collectibles.append(self.generator.spawn_collectible(animal.x, animal.y, "treat"))

    def _collect(self, collectible: Collectible) -> None:
        collectible.active = False
        self.score += collectible.points
        log.debug("Picked up", collectible.kind, "+", collectible.points, "->", self.score)
        if collectible.grants_power_up:
            self.player.apply_power_up()

    def update_camera(self) -> None:
        target = self.player.x - self.view_width / 2 + self.player.width / 2
        self.camera_x += (target - self.camera_x) * CAMERA_SMOOTHING
        self.camera_x = max(0.0, min(self.camera_x, self.level.width - self.view_width))

    def snapshot(self) -> WorldSnapshot:
        return SnapshotService.capture(self)


__all__ = ["World"]
