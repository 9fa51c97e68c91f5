import os
import sys
import tempfile
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, hunter)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless test environment; keep the settings file out of the working tree.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("HUNTER_SETTINGS_FILE", str(Path(tempfile.mkdtemp()) / "settings.json"))
os.environ.setdefault("HUNTER_LOG_LEVEL", "WARN")

import pytest


class ConstantRandom:
    """Random source that always draws the same value.

    ``uniform`` returns the interpolation at ``value`` and ``choice`` picks
    the middle element, so layouts are fully predictable.
    """

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value

    def choice(self, seq):
        return seq[len(seq) // 2]


class ScriptedRandom(ConstantRandom):
    """Pops ``random()`` draws from a list, then falls back to a constant."""

    def __init__(self, draws, value: float = 0.5):
        super().__init__(value)
        self.draws = list(draws)

    def random(self) -> float:
        if self.draws:
            return self.draws.pop(0)
        return self.value


@pytest.fixture
def constant_rng():
    return ConstantRandom(0.5)
