"""Read-only views of the world handed to the renderer.

The renderer never sees live entities; it gets frozen copies captured at
the end of a tick, so drawing cannot mutate the simulation.
"""

from dataclasses import dataclass
from typing import Tuple

from hunter.terrain import Platform


@dataclass(frozen=True)
class EntityView:
    kind: str
    x: float
    y: float
    width: float
    height: float
    direction: int = 1
    rotation: float = 0.0


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    direction: int
    status: str
    sprint_meter: float
    max_sprint_meter: float
    sprint_cooldown: bool
    is_sprinting: bool


@dataclass(frozen=True)
class WorldSnapshot:
    tick: int
    camera_x: float
    view_width: int
    view_height: int
    score: int
    level_number: int
    points_to_advance: int
    level_width: int
    player: PlayerView
    platforms: Tuple[Platform, ...] = ()
    animals: Tuple[EntityView, ...] = ()
    collectibles: Tuple[EntityView, ...] = ()
    notifications: Tuple[str, ...] = ()
    paused: bool = False
    game_over: bool = False

    @property
    def progress(self) -> float:
        if self.points_to_advance <= 0:
            return 1.0
        return min(self.score / self.points_to_advance, 1.0)


class SnapshotService:
    @staticmethod
    def capture(world) -> WorldSnapshot:
        p = world.player
        player = PlayerView(
            x=p.x,
            y=p.y,
            width=p.width,
            height=p.height,
            direction=p.direction,
            status=p.status.value,
            sprint_meter=p.sprint_meter,
            max_sprint_meter=p.max_sprint_meter,
            sprint_cooldown=p.sprint_cooldown,
            is_sprinting=p.is_sprinting,
        )
        level = world.level
        animals = tuple(
            EntityView(a.kind, a.x, a.y, a.width, a.height, direction=a.direction)
            for a in level.animals
            if a.active
        )
        collectibles = tuple(
            EntityView(c.kind, c.x, c.y, c.width, c.height, rotation=c.rotation)
            for c in level.collectibles
            if c.active
        )
        return WorldSnapshot(
            tick=world.tick_count,
            camera_x=world.camera_x,
            view_width=world.view_width,
            view_height=world.view_height,
            score=world.score,
            level_number=world.level_number,
            points_to_advance=level.points_to_advance,
            level_width=level.width,
            player=player,
            platforms=level.platforms,
            animals=animals,
            collectibles=collectibles,
            notifications=tuple(world.notifications),
            paused=world.paused,
            game_over=world.game_over,
        )


__all__ = ["EntityView", "PlayerView", "WorldSnapshot", "SnapshotService"]
