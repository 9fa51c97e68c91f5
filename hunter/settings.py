import json
import os

import pygame

from hunter.constants import TICKS_PER_SECOND, VIEW_HEIGHT, VIEW_WIDTH
from hunter.logger import get_logger
from hunter.save_store import DEFAULT_SAVE_FILE

log = get_logger("settings")

MIN_VIEW_WIDTH = 320
MIN_VIEW_HEIGHT = 240


class Settings:
    SETTINGS_FILE = os.environ.get("HUNTER_SETTINGS_FILE", "data/settings.json")

    def __init__(self, path: str | None = None):
        self.path = path or self.SETTINGS_FILE
        # Defaults
        self._view_width = VIEW_WIDTH
        self._view_height = VIEW_HEIGHT
        self._fps = TICKS_PER_SECOND
        self._save_file = DEFAULT_SAVE_FILE
        self._dirty = False
        # Key bindings use pygame key integers so they serialize as plain JSON.
        self.key_bindings = {
            "MenuState": {
                "menu_up": [pygame.K_UP, pygame.K_w],
                "menu_down": [pygame.K_DOWN, pygame.K_s],
                "menu_select": [pygame.K_RETURN, pygame.K_SPACE],
                "quit": [pygame.K_ESCAPE, pygame.K_q],
            },
            "GameState": {
                "left": [pygame.K_LEFT, pygame.K_a],
                "right": [pygame.K_RIGHT, pygame.K_d],
                "jump": [pygame.K_UP, pygame.K_w, pygame.K_SPACE],
                "sprint": [pygame.K_LSHIFT, pygame.K_RSHIFT],
                "pause_toggle": [pygame.K_ESCAPE],
                "save": [pygame.K_F5],
            },
            "PauseState": {
                "pause_close": [pygame.K_ESCAPE, pygame.K_RETURN],
                "save": [pygame.K_F5, pygame.K_s],
                "pause_menu": [pygame.K_q, pygame.K_m],
            },
            "GameOverState": {
                "restart": [pygame.K_RETURN, pygame.K_r],
                "menu": [pygame.K_ESCAPE, pygame.K_m],
            },
        }
        self.load_settings()

    @property
    def view_width(self) -> int:
        return self._view_width

    @view_width.setter
    def view_width(self, value: int) -> None:
        new_val = max(MIN_VIEW_WIDTH, int(value))
        if new_val != self._view_width:
            self._view_width = new_val
            self._dirty = True
            self.flush()

    @property
    def view_height(self) -> int:
        return self._view_height

    @view_height.setter
    def view_height(self, value: int) -> None:
        new_val = max(MIN_VIEW_HEIGHT, int(value))
        if new_val != self._view_height:
            self._view_height = new_val
            self._dirty = True
            self.flush()

    @property
    def fps(self) -> int:
        return self._fps

    @fps.setter
    def fps(self, value: int) -> None:
        new_val = max(1, min(240, int(value)))
        if new_val != self._fps:
            self._fps = new_val
            self._dirty = True
            self.flush()

    @property
    def save_file(self) -> str:
        return self._save_file

    @save_file.setter
    def save_file(self, value: str) -> None:
        if value and value != self._save_file:
            self._save_file = str(value)
            self._dirty = True
            self.flush()

    def load_settings(self):
        """Load settings from the JSON file, regenerating it when missing or corrupt."""
        if os.path.exists(self.path):
            try:
                with open(self.path, "r") as f:
                    data = json.load(f)
                self._view_width = max(MIN_VIEW_WIDTH, int(data.get("view_width", self._view_width)))
                self._view_height = max(MIN_VIEW_HEIGHT, int(data.get("view_height", self._view_height)))
                self._fps = max(1, min(240, int(data.get("fps", self._fps))))
                self._save_file = str(data.get("save_file", self._save_file))

                # Deep merge so bindings missing from the file keep their defaults.
                loaded_bindings = data.get("key_bindings", {})
                for state, binds in loaded_bindings.items():
                    if state in self.key_bindings:
                        for action, keys in binds.items():
                            self.key_bindings[state][action] = [int(k) for k in keys]
            except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError) as e:
                log.warn("Error loading settings; regenerating", e)
                self._dirty = True
                self.flush()
        else:
            self._dirty = True
            self.flush()

    def bindings_for(self, state_name: str) -> dict:
        return self.key_bindings.get(state_name, {})

    def flush(self):
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        data = {
            "view_width": self._view_width,
            "view_height": self._view_height,
            "fps": self._fps,
            "save_file": self._save_file,
            "key_bindings": self.key_bindings,
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=4)
            self._dirty = False
            log.debug("Settings flushed")
        except OSError as e:
            log.error("Error saving settings", e)


settings = Settings()
