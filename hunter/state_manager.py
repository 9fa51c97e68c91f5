"""Stack based application states.

Usage (see ``app.py`` for the runnable loop):

    sm = StateManager()
    sm.set(MenuState(store))
    while running:
        events = pygame.event.get()
        sm.handle_actions(router.process(events, sm.current.name))
        sm.update(dt)
        sm.render(screen)

- Only the top state receives loop callbacks.
- ``PauseState`` is pushed over ``GameState`` so the run is kept intact;
  it freezes the world on enter and thaws it on exit.
- ``MenuState`` is the root between runs; pause-quit and game over both
  come back to it.
- States raise request flags (``request_pause``, ``closed``,
  ``return_to_menu``, ``restart_requested``, ``start_game``,
  ``continue_game``, ``quit_requested``); the loop owner performs the
  transition.
"""

from __future__ import annotations

from typing import List, Sequence

import pygame

from hunter.input_router import InputRouter
from hunter.logger import get_logger
from hunter.save_store import SaveStore
from hunter.world import World

_state_log = get_logger("state")


class State:
    """Base class for an application state. All hooks default to no-ops."""

    name: str = "State"
    manager: "StateManager | None" = None

    # Lifecycle -----------------------------------------------------
    def on_enter(self, previous: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    def on_exit(self, next_state: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    # Main loop hooks -----------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:  # pragma: no cover
        pass

    def update(self, dt: float) -> None:  # pragma: no cover - default no-op
        pass

    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - default no-op
        pass


class StateManager:
    """Stack-based state manager with push/pop and a ``set`` that replaces the stack."""

    def __init__(self) -> None:
        self._stack: List[State] = []
        _state_log.debug("StateManager init (empty stack)")

    @property
    def current(self) -> State | None:
        return self._stack[-1] if self._stack else None

    def stack_size(self) -> int:
        return len(self._stack)

    # Transitions ---------------------------------------------------
    def push(self, state: State) -> None:
        state.manager = self
        prev = self.current
        self._stack.append(state)
        state.on_enter(prev)
        _state_log.debug("push", state.name, "-> stack:", [s.name for s in self._stack])

    def pop(self) -> State | None:
        if not self._stack:
            return None
        top = self._stack.pop()
        top.on_exit(self.current)
        _state_log.debug("pop", top.name, "-> stack:", [s.name for s in self._stack])
        return top

    def set(self, state: State) -> None:
        state.manager = self
        while self._stack:
            popped = self._stack.pop()
            popped.on_exit(None if not self._stack else state)
            _state_log.debug("discard", popped.name)
        self._stack.append(state)
        state.on_enter(None)
        _state_log.debug("set", state.name, "(root)")

    # Loop dispatch -------------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:
        if self.current:
            if actions:
                _state_log.debug("actions ->", self.current.name, actions)
            self.current.handle_actions(actions)

    def update(self, dt: float) -> None:
        if self.current:
            self.current.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        if self.current:
            self.current.render(surface)


class _Drawn(State):
    _renderer = None

    @property
    def renderer(self):
        if self._renderer is None:
            from hunter.renderer import Renderer

            self._renderer = Renderer()
        return self._renderer


class MenuState(_Drawn):
    """Start screen: a new run, or continue when a save file exists."""

    name = "MenuState"
    LABELS = {"start": "Start Game", "continue": "Continue"}

    def __init__(self, store: SaveStore) -> None:
        self.store = store
        self.options = ["start", "continue"] if store.exists() else ["start"]
        self.selected = 0
        self.start_game = False
        self.continue_game = False
        self.quit_requested = False

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "menu_up":
                self.selected = (self.selected - 1) % len(self.options)
            elif act == "menu_down":
                self.selected = (self.selected + 1) % len(self.options)
            elif act == "menu_select":
                if self.options[self.selected] == "continue":
                    self.continue_game = True
                else:
                    self.start_game = True
            elif act == "quit":
                self.quit_requested = True

    def render(self, surface: pygame.Surface) -> None:
        labels = [self.LABELS[o] for o in self.options]
        self.renderer.render_menu(surface, "Dog Hunter", labels, self.selected)


class _WorldView(_Drawn):
    """Shared rendering for states that draw the world."""

    def __init__(self, world: World) -> None:
        self.world = world

    def render(self, surface: pygame.Surface) -> None:
        self.renderer.render(self.world.snapshot(), surface)


class GameState(_WorldView):
    name = "GameState"

    def __init__(self, world: World, router: InputRouter, store: SaveStore) -> None:
        super().__init__(world)
        self.router = router
        self.store = store
        self.request_pause = False

    def on_enter(self, previous: "State | None") -> None:
        self.request_pause = False

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "pause_toggle":
                self.request_pause = True
            elif act == "save":
                self.world.save(self.store)

    def update(self, dt: float) -> None:
        # One simulation step per frame; dt is only used by the frame cap.
        self.world.tick(self.router.intents())


class PauseState(_WorldView):
    name = "PauseState"

    def __init__(self, world: World, router: InputRouter, store: SaveStore) -> None:
        super().__init__(world)
        self.router = router
        self.store = store
        self.closed = False
        self.return_to_menu = False

    def on_enter(self, previous: "State | None") -> None:
        self.world.pause()
        self.router.release_all()

    def on_exit(self, next_state: "State | None") -> None:
        self.world.resume()

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "pause_close":
                self.closed = True
            elif act == "save":
                self.world.save(self.store)
            elif act == "pause_menu":
                self.return_to_menu = True
                self.closed = True


class GameOverState(_WorldView):
    name = "GameOverState"

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.restart_requested = False
        self.return_to_menu = False

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "restart":
                self.restart_requested = True
            elif act == "menu":
                self.return_to_menu = True


__all__ = [
    "State",
    "StateManager",
    "MenuState",
    "GameState",
    "PauseState",
    "GameOverState",
]
