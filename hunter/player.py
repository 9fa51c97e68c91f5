"""The player's dog: movement, sprint meter and timed status effects."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from hunter.constants import (
    MAX_SPRINT_METER,
    PLAYER_JUMP_POWER,
    PLAYER_SIZE,
    PLAYER_SPEED,
    PLAYER_SPRINT_SPEED,
    POWER_UP_TICKS,
    POWERED_UP_DRAIN_FACTOR,
    POWERED_UP_SPEED,
    POWERED_UP_SPRINT_SPEED,
    SICK_SPEED,
    SICK_SPRINT_SPEED,
    SICKNESS_TICKS,
    SPRINT_COOLDOWN_TICKS,
    SPRINT_DRAIN_RATE,
    SPRINT_RECHARGE_RATE,
)
from hunter.logger import get_logger
from hunter.physics import PhysicsEngine
from hunter.scheduler import TaskScheduler
from hunter.terrain import Platform

log = get_logger("player")


class StatusEffect(enum.Enum):
    NORMAL = "normal"
    POWERED_UP = "powered_up"
    SICK = "sick"


@dataclass(frozen=True)
class InputIntents:
    """Held controls, sampled once per tick before the player updates."""

    left: bool = False
    right: bool = False
    jump: bool = False
    sprint: bool = False


_SPEEDS = {
    StatusEffect.NORMAL: (PLAYER_SPEED, PLAYER_SPRINT_SPEED),
    StatusEffect.POWERED_UP: (POWERED_UP_SPEED, POWERED_UP_SPRINT_SPEED),
    StatusEffect.SICK: (SICK_SPEED, SICK_SPRINT_SPEED),
}


class Player:
    def __init__(self, x: float, y: float, scheduler: TaskScheduler | None = None):
        self.x = x
        self.y = y
        self.width, self.height = PLAYER_SIZE
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False
        self.flying = False
        self.direction = 1
        self.jump_power = PLAYER_JUMP_POWER

        self.is_sprinting = False
        self.max_sprint_meter = MAX_SPRINT_METER
        self.sprint_meter: float = MAX_SPRINT_METER
        self.sprint_drain_rate = SPRINT_DRAIN_RATE
        self.sprint_recharge_rate = SPRINT_RECHARGE_RATE
        self.sprint_cooldown = False
        # Cooldown release is a scheduled task; the world advances this scheduler.
        self.scheduler = scheduler if scheduler is not None else TaskScheduler()

        self.status = StatusEffect.NORMAL
        self.status_timer = 0
        self.speed, self.sprint_speed = _SPEEDS[StatusEffect.NORMAL]

    @property
    def is_powered_up(self) -> bool:
        return self.status is StatusEffect.POWERED_UP

    @property
    def is_sick(self) -> bool:
        return self.status is StatusEffect.SICK

    # --- Status effects -------------------------------------------------
    def _enter(self, status: StatusEffect, duration: int) -> None:
        self.status = status
        self.status_timer = duration if status is not StatusEffect.NORMAL else 0
        self.speed, self.sprint_speed = _SPEEDS[status]

    def apply_power_up(self, duration: int = POWER_UP_TICKS) -> None:
        """Boost speeds for ``duration`` ticks. Cures sickness."""
        self._enter(StatusEffect.POWERED_UP, duration)
        log.debug("Powered up for", duration, "ticks")

    def apply_sickness(self, duration: int = SICKNESS_TICKS) -> None:
        """Slow down for ``duration`` ticks. Cancels any power-up."""
        self._enter(StatusEffect.SICK, duration)
        self.is_sprinting = False
        log.debug("Sick for", duration, "ticks")

    def reset_status_effects(self) -> None:
        self._enter(StatusEffect.NORMAL, 0)

    def update_status_effects(self) -> None:
        if self.status is StatusEffect.NORMAL:
            return
        self.status_timer -= 1
        if self.status_timer <= 0:
            log.debug("Status", self.status.value, "expired")
            self.reset_status_effects()

    # --- Sprint ---------------------------------------------------------
    def handle_sprint(self, sprint_held: bool) -> None:
        if self.sprint_cooldown or self.is_sick:
            self.is_sprinting = False
            return

        if sprint_held and self.sprint_meter > 0:
            self.is_sprinting = True
            drain = self.sprint_drain_rate
            if self.is_powered_up:
                drain *= POWERED_UP_DRAIN_FACTOR
            self.sprint_meter -= drain
            if self.sprint_meter <= 0:
                self.sprint_meter = 0
                self.is_sprinting = False
                self.sprint_cooldown = True
                self.scheduler.schedule(SPRINT_COOLDOWN_TICKS, self._end_sprint_cooldown, "sprint_cooldown")
        else:
            self.is_sprinting = False
            if self.sprint_meter < self.max_sprint_meter:
                self.sprint_meter = min(self.max_sprint_meter, self.sprint_meter + self.sprint_recharge_rate)

    def _end_sprint_cooldown(self) -> None:
        self.sprint_cooldown = False

    # --- Tick -----------------------------------------------------------
    def update(self, physics: PhysicsEngine, platforms: Sequence[Platform], intents: InputIntents) -> None:
        self.handle_sprint(intents.sprint)
        self.update_status_effects()

        if intents.left:
            physics.move_horizontal(self, -1)
            self.direction = -1
        elif intents.right:
            physics.move_horizontal(self, 1)
            self.direction = 1

        if intents.jump:
            physics.jump(self)

        physics.step(self, platforms)

    def reset_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False
