from __future__ import annotations

from dataclasses import dataclass

PLATFORM_KINDS = ("normal", "rounded")


@dataclass(frozen=True)
class Platform:
    """Static terrain segment. ``kind`` only changes how it is drawn."""

    x: float
    y: float
    width: float
    height: float
    kind: str = "normal"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Platform needs a positive size, got {self.width}x{self.height}")
        if self.kind not in PLATFORM_KINDS:
            raise ValueError(f"Unknown platform kind {self.kind!r}")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def spans(self, x: float) -> bool:
        return self.x <= x <= self.x + self.width


__all__ = ["Platform", "PLATFORM_KINDS"]
