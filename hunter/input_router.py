"""Keyboard routing.

Turns raw pygame events into per-state *actions* and keeps the set of held
movement controls, which is sampled once per tick as ``InputIntents``.

- Rules are functions ``event -> action | None`` checked in declaration
  order; the first match wins for an event.
- Held controls (left, right, jump, sprint) produce the action on key down
  and ``stop_<action>`` on key up. Duplicate actions in one frame collapse,
  keeping the first occurrence.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Set

import pygame

from hunter.player import InputIntents

Action = str
Rule = Callable[[pygame.event.Event], Action | None]

HELD_ACTIONS = ("left", "right", "jump", "sprint")


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _event_rule(event_type: int, action: Action) -> Rule:
    def _r(e: pygame.event.Event):
        return action if e.type == event_type else None

    return _r


class InputRouter:
    """Maps pygame events to semantic actions for the active state."""

    def __init__(self, key_bindings: Dict[str, Dict[str, List[int]]] | None = None) -> None:
        if key_bindings is None:
            from hunter.settings import settings

            key_bindings = settings.key_bindings
        self._rules: Dict[str, List[Rule]] = {}
        self._held: Set[Action] = set()
        self._register_default_rules(key_bindings)
        # Losing window focus mid-run pauses, like pressing the pause key.
        self.register_rules("GameState", [_event_rule(pygame.WINDOWFOCUSLOST, "pause_toggle")])

    def _register_default_rules(self, key_bindings) -> None:
        for state_name, binds in key_bindings.items():
            rules: List[Rule] = []
            for act, keys in binds.items():
                for k in keys:
                    rules.append(_key_rule(k, act, pygame.KEYDOWN))
                    if act in HELD_ACTIONS:
                        rules.append(_key_rule(k, f"stop_{act}", pygame.KEYUP))
            self._rules[state_name] = rules

    def register_rules(self, state_name: str, rules: Iterable[Rule], append: bool = True) -> None:
        lst = self._rules.setdefault(state_name, [])
        if append:
            lst.extend(rules)
        else:
            self._rules[state_name] = list(rules)

    def process(self, events: Iterable[pygame.event.Event], state_name: str) -> List[Action]:
        rules = self._rules.get(state_name, [])
        actions: List[Action] = []
        for e in events:
            for rule in rules:
                a = rule(e)
                if a:
                    self._track_held(a)
                    if a not in actions:
                        actions.append(a)
                    break
        return actions

    def _track_held(self, action: Action) -> None:
        if action in HELD_ACTIONS:
            self._held.add(action)
        elif action.startswith("stop_"):
            self._held.discard(action[len("stop_") :])

    def intents(self) -> InputIntents:
        return InputIntents(
            left="left" in self._held,
            right="right" in self._held,
            jump="jump" in self._held,
            sprint="sprint" in self._held,
        )

    def release_all(self) -> None:
        """Forget held keys (e.g. when a pause overlay swallows the key-up)."""
        self._held.clear()


__all__ = ["InputRouter", "Action", "HELD_ACTIONS"]
