"""Kinematics and axis-aligned collision for every body in the world.

Bodies are duck-typed: anything exposing ``x, y, width, height, vx, vy,
on_ground, flying`` can be stepped. Coordinates are floats, top-left origin,
y grows downward.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from hunter.constants import (
    AIR_FRICTION,
    GRAVITY,
    GROUND_FRICTION,
    LANDING_TOLERANCE,
    VELOCITY_SNAP,
)


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


class Body(Box, Protocol):
    vx: float
    vy: float
    on_ground: bool
    flying: bool


class PhysicsEngine:
    def __init__(self, gravity: float = GRAVITY):
        self.gravity = gravity

    def apply_gravity(self, body: Body) -> None:
        if not body.on_ground and not body.flying:
            body.vy += self.gravity

    def update_position(self, body: Body) -> None:
        body.x += body.vx
        body.y += body.vy
        body.vx *= GROUND_FRICTION if body.on_ground else AIR_FRICTION
        if abs(body.vx) < VELOCITY_SNAP:
            body.vx = 0

    def check_ground_collision(self, body: Body, platforms: Iterable[Box]) -> bool:
        """Snap ``body`` onto the first platform it landed on this tick.

        Landing means horizontal overlap, a bottom edge at or below the
        platform top, and a bottom edge that was above ``top + tolerance``
        before this tick's vertical displacement. Platform order breaks ties
        between overlapping platforms.
        """
        body.on_ground = False
        bottom = body.y + body.height
        for platform in platforms:
            if body.x + body.width > platform.x and body.x < platform.x + platform.width:
                top = platform.y
                if bottom >= top and bottom - body.vy < top + LANDING_TOLERANCE:
                    body.y = top - body.height
                    body.vy = 0
                    body.on_ground = True
                    return True
        return False

    @staticmethod
    def check_entity_collision(a: Box, b: Box) -> bool:
        # Touching edges do not count.
        return a.x < b.x + b.width and a.x + a.width > b.x and a.y < b.y + b.height and a.y + a.height > b.y

    @staticmethod
    def is_on_screen(box: Box, view_width: float, view_height: float, camera_x: float) -> bool:
        return (
            box.x + box.width > camera_x
            and box.x < camera_x + view_width
            and box.y + box.height > 0
            and box.y < view_height
        )

    @staticmethod
    def move_horizontal(body, direction: int) -> None:
        speed = body.sprint_speed if getattr(body, "is_sprinting", False) else body.speed
        body.vx = direction * speed

    @staticmethod
    def jump(body) -> None:
        if body.on_ground:
            body.vy = -body.jump_power
            body.on_ground = False

    def step(self, body: Body, platforms: Iterable[Box]) -> None:
        """Shared per-tick pipeline: gravity, integration, ground snap."""
        self.apply_gravity(body)
        self.update_position(body)
        if not body.flying:
            self.check_ground_collision(body, platforms)
