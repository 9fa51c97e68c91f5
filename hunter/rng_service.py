import random
from typing import Any, Protocol, Sequence

from hunter.logger import get_logger

log = get_logger("rng")


class RandomSource(Protocol):
    """The slice of ``random.Random`` the simulation draws from.

    Level generation and animal behavior only ever call these three methods,
    so tests can pass any object providing them (e.g. a constant source).
    """

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def initialize(cls, seed: int | float | str | bytes | bytearray | None = None) -> None:
        cls._instance = cls(seed)

    @property
    def seed_value(self):
        return self._seed_val

    def seed(self, a: int | float | str | bytes | bytearray | None = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._generator.random()

    def uniform(self, a: float, b: float) -> float:
        """Return a random floating point number N such that a <= N <= b for a <= b."""
        return self._generator.uniform(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from the non-empty sequence seq."""
        return self._generator.choice(seq)

    def get_state(self) -> tuple[Any, ...]:
        return self._generator.getstate()

    def set_state(self, state: tuple[Any, ...]) -> None:
        self._generator.setstate(state)
