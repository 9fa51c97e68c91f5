"""Procedural level construction with per-level difficulty scaling.

``LevelGenerator.generate_level`` is the only way the game obtains terrain
and animals. Layout is stochastic: every draw goes through the injected
random source, so a seeded (or constant) source reproduces a level exactly.

Generation steps:
  1. ``DifficultyParameters.for_level`` derives all knobs from the level
     number alone.
  2. Ground segments are laid left to right with random gaps.
  3. Elevated platforms are scattered above the ground.
  4. Animals are placed per species. Ground walkers need ground under the
     sampled x, squirrels need an elevated platform, birds need nothing.
     Samples without a suitable platform are dropped, so species counts
     are upper bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from hunter.constants import (
    BASE_LEVEL_WIDTH,
    BASE_POINTS_TO_ADVANCE,
    BIRD_GROUND_CLEARANCE,
    BIRD_MIN_Y,
    ELEVATED_CLEARANCE,
    GAP_MIN_WIDTH,
    GROUND_OFFSET,
    GROUND_SEGMENT_HEIGHT,
    GROUND_SEGMENT_MAX_WIDTH,
    GROUND_SEGMENT_MIN_WIDTH,
    LEVEL_WIDTH_STEP,
    MAX_GAP_FREQUENCY,
    MAX_PLATFORM_DENSITY,
    PLATFORM_HEIGHT_VARIATION,
    PLATFORM_MATCH_TOLERANCE,
    PLATFORM_MAX_HEIGHT,
    PLATFORM_MAX_WIDTH,
    PLATFORM_MIN_HEIGHT,
    PLATFORM_MIN_RISE,
    PLATFORM_MIN_WIDTH,
    POINTS_TO_ADVANCE_STEP,
    ROUNDED_PLATFORM_CHANCE,
    SPAWN_MARGIN,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from hunter.entities import SPECIES, Animal, Collectible
from hunter.logger import get_logger
from hunter.rng_service import RandomSource, RNGService
from hunter.terrain import Platform

log = get_logger("levels")

# Generation order matters for reproducibility: it fixes the draw sequence.
SPAWN_ORDER = ("rabbit", "bird", "squirrel", "pig")


@dataclass(frozen=True)
class DifficultyParameters:
    level_width: int
    spawn_rates: Dict[str, float]
    platform_density: float
    gap_frequency: float
    max_gap_width: float
    points_to_advance: int

    @classmethod
    def for_level(cls, level_number: int) -> "DifficultyParameters":
        step = level_number - 1
        return cls(
            level_width=BASE_LEVEL_WIDTH + step * LEVEL_WIDTH_STEP,
            spawn_rates={
                "rabbit": 3 + step * 0.5,
                "bird": 2 + step * 0.5,
                "squirrel": 2 + step * 0.3,
                "pig": 1 + step * 0.2,
            },
            platform_density=min(0.7 + step * 0.05, MAX_PLATFORM_DENSITY),
            gap_frequency=min(0.2 + step * 0.05, MAX_GAP_FREQUENCY),
            max_gap_width=150 + step * 20,
            points_to_advance=BASE_POINTS_TO_ADVANCE + step * POINTS_TO_ADVANCE_STEP,
        )

    def spawn_count(self, species: str) -> int:
        return max(0, math.floor(self.level_width / 1000 * self.spawn_rates[species]))


@dataclass
class Level:
    level_number: int
    platforms: Tuple[Platform, ...]
    animals: List[Animal]
    width: int
    points_to_advance: int
    collectibles: List[Collectible] = field(default_factory=list)

    def active_animals(self) -> List[Animal]:
        return [a for a in self.animals if a.active]


class LevelGenerator:
    def __init__(self, view_width: int = VIEW_WIDTH, view_height: int = VIEW_HEIGHT, rng: RandomSource | None = None):
        self.view_width = view_width
        self.view_height = view_height
        self.ground_height = view_height - GROUND_OFFSET
        self.rng = rng if rng is not None else RNGService.get()

    def generate_level(self, level_number: int) -> Level:
        if level_number < 1:
            raise ValueError(f"Level numbers start at 1, got {level_number}")
        params = DifficultyParameters.for_level(level_number)
        platforms = self.generate_ground(params) + self.generate_elevated(params)
        animals = self.generate_animals(params, platforms)
        log.info(
            f"Level {level_number}: width={params.level_width}",
            f"platforms={len(platforms)} animals={len(animals)}",
            f"goal={params.points_to_advance}",
        )
        return Level(
            level_number=level_number,
            platforms=tuple(platforms),
            animals=animals,
            width=params.level_width,
            points_to_advance=params.points_to_advance,
        )

    # --- Terrain --------------------------------------------------------
    def generate_ground(self, params: DifficultyParameters) -> List[Platform]:
        ground: List[Platform] = []
        x = 0.0
        while x < params.level_width:
            if self.rng.random() < params.gap_frequency:
                x += self.rng.uniform(GAP_MIN_WIDTH, GAP_MIN_WIDTH + params.max_gap_width)
            else:
                width = self.rng.uniform(GROUND_SEGMENT_MIN_WIDTH, GROUND_SEGMENT_MAX_WIDTH)
                ground.append(Platform(x, self.ground_height, width, GROUND_SEGMENT_HEIGHT))
                x += width
        return ground

    def generate_elevated(self, params: DifficultyParameters) -> List[Platform]:
        count = max(0, math.floor(params.level_width / 500 * params.platform_density))
        elevated: List[Platform] = []
        for _ in range(count):
            x = self.rng.uniform(0, params.level_width - PLATFORM_MAX_WIDTH)
            width = self.rng.uniform(PLATFORM_MIN_WIDTH, PLATFORM_MAX_WIDTH)
            height = self.rng.uniform(PLATFORM_MIN_HEIGHT, PLATFORM_MAX_HEIGHT)
            y = self.ground_height - self.rng.uniform(0, PLATFORM_HEIGHT_VARIATION) - PLATFORM_MIN_RISE
            kind = "rounded" if self.rng.random() < ROUNDED_PLATFORM_CHANCE else "normal"
            elevated.append(Platform(x, y, width, height, kind))
        return elevated

    # --- Animals --------------------------------------------------------
    def generate_animals(self, params: DifficultyParameters, platforms: Sequence[Platform]) -> List[Animal]:
        animals: List[Animal] = []
        for species in SPAWN_ORDER:
            placed = 0
            for _ in range(params.spawn_count(species)):
                animal = self._place(species, params, platforms)
                if animal is not None:
                    animals.append(animal)
                    placed += 1
            log.debug(f"{species}: placed {placed}/{params.spawn_count(species)}")
        return animals

    def _place(self, species: str, params: DifficultyParameters, platforms: Sequence[Platform]) -> Animal | None:
        height = SPECIES[species].height
        x = self.rng.uniform(SPAWN_MARGIN, params.level_width - SPAWN_MARGIN)
        if species == "bird":
            y = self.rng.uniform(BIRD_MIN_Y, self.ground_height - BIRD_GROUND_CLEARANCE)
            return Animal(species, x, y, rng=self.rng)
        if species == "squirrel":
            support = self.find_elevated_platform_at(x, platforms)
        else:
            support = self.find_platform_at(x, self.ground_height, platforms)
        if support is None:
            return None
        return Animal(species, x, support.y - height, rng=self.rng)

    def find_platform_at(self, x: float, y: float, platforms: Sequence[Platform]) -> Platform | None:
        """First platform spanning ``x`` whose top is within tolerance of ``y``."""
        for platform in platforms:
            if platform.spans(x) and abs(y - platform.y) <= PLATFORM_MATCH_TOLERANCE:
                return platform
        return None

    def find_elevated_platform_at(self, x: float, platforms: Sequence[Platform]) -> Platform | None:
        """A uniformly chosen platform above ground level spanning ``x``."""
        candidates = [p for p in platforms if p.y < self.ground_height - ELEVATED_CLEARANCE and p.spans(x)]
        if not candidates:
            return None
        return self.rng.choice(candidates)

    # --- Drops ----------------------------------------------------------
    @staticmethod
    def spawn_collectible(x: float, y: float, kind: str) -> Collectible:
        if kind not in ("bone", "treat"):
            log.warn("Unknown collectible kind", repr(kind), "- dropping a bone")
            kind = "bone"
        return Collectible(kind, x, y)


__all__ = ["DifficultyParameters", "Level", "LevelGenerator", "SPAWN_ORDER"]
