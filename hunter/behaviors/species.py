"""Movement state machines for each animal species."""

import math
from typing import Any, Sequence

from hunter.behaviors.core import Behavior
from hunter.constants import (
    CLIMB_ALIGN_TOLERANCE,
    CLIMB_EDGE_TOLERANCE,
    CLIMB_REACH,
    EDGE_LOOKAHEAD,
    EDGE_TOP_BAND,
)


def at_platform_edge(entity: Any, direction: int, platforms: Sequence[Any], lookahead: float = EDGE_LOOKAHEAD) -> bool:
    """True unless one platform spans the ``lookahead`` units past the leading edge.

    Only the top band of a platform counts, so a platform far below the
    entity never keeps it from turning around. Adjacent platforms are not
    merged: a seam between two ground segments reads as an edge.
    """
    x, y, w, h = entity.x, entity.y, entity.width, entity.height
    for p in platforms:
        if not (y + h >= p.y and y <= p.y + EDGE_TOP_BAND):
            continue
        if direction > 0:
            lead = x + w
            if p.x <= lead and lead + lookahead <= p.x + p.width:
                return False
        else:
            if p.x <= x - lookahead and x <= p.x + p.width:
                return False
    return True


def advance_direction_timer(animal: Any) -> None:
    animal.direction_timer += 1
    if animal.direction_timer >= animal.spec.direction_change_cooldown:
        animal.direction_timer = 0
        animal.direction = -animal.direction


def bounce_off_world_edge(animal: Any) -> None:
    if animal.x <= 0:
        animal.direction = 1


class GroundWalkerBehavior(Behavior):
    """Walks back and forth along the ground, turning at gaps and timer expiry."""

    jumps = False

    def update(self, animal, physics, platforms):
        advance_direction_timer(animal)
        if self.jumps and animal.on_ground and animal.rng.random() < animal.spec.jump_probability:
            physics.jump(animal)
        animal.vx = animal.direction * animal.speed
        physics.step(animal, platforms)
        bounce_off_world_edge(animal)
        if animal.on_ground and at_platform_edge(animal, animal.direction, platforms):
            animal.direction = -animal.direction


class RabbitBehavior(GroundWalkerBehavior):
    jumps = True


class PigBehavior(GroundWalkerBehavior):
    # Sickness on capture is rolled by the world, not here.
    jumps = False


class BirdBehavior(Behavior):
    """Flies horizontally on a sine wave around its spawn height."""

    def update(self, animal, physics, platforms):
        animal.time += 1
        advance_direction_timer(animal)
        animal.vx = animal.direction * animal.speed
        animal.y = animal.base_y + math.sin(animal.time * animal.spec.frequency) * animal.spec.amplitude
        animal.x += animal.vx
        bounce_off_world_edge(animal)


class SquirrelBehavior(Behavior):
    """Walks like a rabbit but climbs between vertically aligned platforms."""

    def climb_velocity(self, animal, platforms) -> float | None:
        x, y, w, h = animal.x, animal.y, animal.width, animal.height
        speed = animal.spec.climb_speed
        for platform in platforms:
            near_edge = (
                abs(x - platform.x) < CLIMB_EDGE_TOLERANCE
                or abs(x + w - (platform.x + platform.width)) < CLIMB_EDGE_TOLERANCE
            )
            if not near_edge:
                continue
            for other in platforms:
                if other is platform:
                    continue
                aligned = (
                    abs(x - other.x) < CLIMB_ALIGN_TOLERANCE
                    or abs(x + w - (other.x + other.width)) < CLIMB_ALIGN_TOLERANCE
                )
                if not aligned:
                    continue
                if other.y < y and y - other.y < CLIMB_REACH:
                    return -speed
                if other.y > y + h and other.y - (y + h) < CLIMB_REACH:
                    return speed
        return None

    def update(self, animal, physics, platforms):
        advance_direction_timer(animal)
        climb_vy = self.climb_velocity(animal, platforms)
        animal.climbing = climb_vy is not None
        if animal.climbing:
            animal.vx = 0
            animal.vy = climb_vy
            animal.x += animal.vx
            animal.y += animal.vy
        else:
            animal.vx = animal.direction * animal.speed
            physics.step(animal, platforms)
        bounce_off_world_edge(animal)
        if not animal.climbing and animal.on_ground and at_platform_edge(animal, animal.direction, platforms):
            animal.direction = -animal.direction
