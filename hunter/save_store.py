"""Save-game persistence.

The whole save payload is four fields: score, level number and the
player's position. Anything unreadable is treated as "no save" so the game
falls back to a fresh run instead of crashing.
"""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from typing import Any, Dict

from hunter.constants import MAX_SAVED_LEVEL
from hunter.logger import get_logger

log = get_logger("save")

DEFAULT_SAVE_FILE = "data/save.json"


def _number(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise TypeError(f"save field {key!r} is not a finite number: {value!r}")
    return value


@dataclass(frozen=True)
class SaveData:
    score: int
    level: int
    player_x: float
    player_y: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level,
            "playerX": self.player_x,
            "playerY": self.player_y,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SaveData":
        if not isinstance(data, dict):
            raise TypeError(f"save payload must be an object, got {type(data).__name__}")
        score = int(_number(data, "score"))
        level = int(_number(data, "level"))
        if score < 0 or not 1 <= level <= MAX_SAVED_LEVEL:
            raise ValueError(f"save payload out of range: score={score} level={level}")
        return cls(score, level, float(_number(data, "playerX")), float(_number(data, "playerY")))


class SaveStore:
    def __init__(self, path: str = DEFAULT_SAVE_FILE):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> SaveData | None:
        if not self.exists():
            return None
        try:
            with open(self.path, "r") as f:
                return SaveData.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            log.warn("Ignoring unreadable save", self.path, e)
            return None

    def save(self, data: SaveData) -> bool:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data.to_dict(), f, indent=4)
        except OSError as e:
            log.error("Error writing save", self.path, e)
            return False
        log.info("Saved level", data.level, "score", data.score)
        return True

    def clear(self) -> None:
        if self.exists():
            os.remove(self.path)


__all__ = ["SaveData", "SaveStore", "DEFAULT_SAVE_FILE"]
