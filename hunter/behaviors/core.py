from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence


class Behavior(ABC):
    """Per-species movement, run once per tick while the animal is active."""

    @abstractmethod
    def update(self, animal: Any, physics: Any, platforms: Sequence[Any]) -> None:
        """Advance ``animal`` by one tick.

        Args:
            animal: The ``Animal`` being moved (mutated in place).
            physics: The shared ``PhysicsEngine``.
            platforms: The active level's platforms, in generation order.
        """


class BehaviorRegistry:
    """Dispatch table from species tag to behavior."""

    _behaviors: Dict[str, Behavior] = {}

    @classmethod
    def register(cls, species: str, behavior: Behavior) -> None:
        cls._behaviors[species] = behavior

    @classmethod
    def get(cls, species: str) -> Behavior:
        if species not in cls._behaviors:
            raise ValueError(f"No behavior registered for species {species!r}.")
        return cls._behaviors[species]

    @classmethod
    def species(cls) -> list[str]:
        return sorted(cls._behaviors)
