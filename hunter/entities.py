"""World entities: wandering animals and dropped collectibles.

Both variants share one record (position, size, kinematic state, ``active``,
``points``) and are distinguished by a string tag. Static per-tag tuning
lives in the ``SPECIES`` and ``COLLECTIBLES`` tables; per-species movement is
looked up from the behavior registry keyed by the same tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from hunter.behaviors import Behavior, BehaviorRegistry
from hunter.constants import (
    COLLECTIBLE_ROTATION_SPEED,
    COLLECTIBLE_SPAWN_VY,
    FULL_TURN,
)
from hunter.physics import PhysicsEngine
from hunter.rng_service import RandomSource, RNGService
from hunter.terrain import Platform


@dataclass(frozen=True)
class SpeciesDef:
    name: str
    width: int
    height: int
    speed: float
    direction_change_cooldown: int
    points: int
    jump_probability: float = 0.0
    jump_power: float = 0.0
    flying: bool = False
    amplitude: float = 0.0
    frequency: float = 0.0
    climb_speed: float = 0.0
    sickness_chance: float = 0.0


SPECIES: Dict[str, SpeciesDef] = {
    "rabbit": SpeciesDef("rabbit", 40, 30, 3, 120, 10, jump_probability=0.01, jump_power=8),
    "bird": SpeciesDef("bird", 40, 30, 4, 180, 10, flying=True, amplitude=50, frequency=0.02),
    "squirrel": SpeciesDef("squirrel", 35, 35, 3.5, 150, 10, climb_speed=2),
    "pig": SpeciesDef("pig", 50, 40, 2, 200, 20, sickness_chance=1 / 3),
}


@dataclass(frozen=True)
class CollectibleDef:
    name: str
    width: int
    height: int
    points: int
    grants_power_up: bool = False


COLLECTIBLES: Dict[str, CollectibleDef] = {
    "bone": CollectibleDef("bone", 30, 15, 5),
    "treat": CollectibleDef("treat", 25, 25, 10, grants_power_up=True),
}


class Entity:
    def __init__(self, kind: str, x: float, y: float, width: float, height: float, points: int = 0):
        self.kind = kind
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False
        self.flying = False
        self.active = True
        self.points = points

    def update(self, physics: PhysicsEngine, platforms: Sequence[Platform]) -> None:
        physics.step(self, platforms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!r}, x={self.x:.1f}, y={self.y:.1f})"


class Animal(Entity):
    def __init__(self, species: str, x: float, y: float, rng: RandomSource | None = None):
        if species not in SPECIES:
            raise ValueError(f"Unknown species {species!r}")
        spec = SPECIES[species]
        super().__init__(species, x, y, spec.width, spec.height, spec.points)
        self.spec = spec
        self.rng = rng if rng is not None else RNGService.get()
        self.behavior: Behavior = BehaviorRegistry.get(species)
        self.flying = spec.flying
        self.speed = spec.speed
        self.jump_power = spec.jump_power
        self.direction = 1 if self.rng.random() > 0.5 else -1
        self.direction_timer = 0
        # Bird flight path: sinusoid around the spawn height with a random phase.
        self.base_y = y
        self.time = self.rng.random() * 100 if spec.flying else 0.0
        self.climbing = False

    @property
    def species(self) -> str:
        return self.kind

    @property
    def sickness_chance(self) -> float:
        return self.spec.sickness_chance

    def update(self, physics: PhysicsEngine, platforms: Sequence[Platform]) -> None:
        self.behavior.update(self, physics, platforms)


class Collectible(Entity):
    def __init__(self, kind: str, x: float, y: float):
        if kind not in COLLECTIBLES:
            raise ValueError(f"Unknown collectible {kind!r}")
        spec = COLLECTIBLES[kind]
        super().__init__(kind, x, y, spec.width, spec.height, spec.points)
        self.spec = spec
        self.vy = COLLECTIBLE_SPAWN_VY
        self.rotation = 0.0

    @property
    def grants_power_up(self) -> bool:
        return self.spec.grants_power_up

    def update(self, physics: PhysicsEngine, platforms: Sequence[Platform]) -> None:
        physics.step(self, platforms)
        self.rotation += COLLECTIBLE_ROTATION_SPEED
        if self.rotation > FULL_TURN:
            self.rotation -= FULL_TURN


__all__ = [
    "Entity",
    "Animal",
    "Collectible",
    "SpeciesDef",
    "CollectibleDef",
    "SPECIES",
    "COLLECTIBLES",
]
