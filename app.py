"""Application entry point.

Opens the window, builds a world and drives the state stack at a fixed
frame rate. Each frame polls events once, routes them to actions for the
top state, advances the simulation one tick and draws.

    python app.py              # start menu (Continue shows when a save exists)
    python app.py --new-game   # skip the menu and start a fresh run
    python app.py --seed 42    # deterministic level generation
"""

from __future__ import annotations

import argparse

import pygame

from hunter.input_router import InputRouter
from hunter.logger import get_logger
from hunter.rng_service import RNGService
from hunter.save_store import SaveStore
from hunter.settings import settings
from hunter.state_manager import GameOverState, GameState, MenuState, PauseState, StateManager
from hunter.world import World

log = get_logger("app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Side-scrolling dog hunting game")
    parser.add_argument("--seed", type=int, default=None, help="seed for level generation")
    parser.add_argument("--new-game", action="store_true", help="skip the menu and start a fresh run")
    parser.add_argument("--save-file", default=None, help="override the save file path")
    return parser


def apply_transitions(sm: StateManager, world: World, router: InputRouter, store: SaveStore) -> bool:
    """Act on the request flags of the top state. Returns False to stop the loop."""
    cur = sm.current
    if isinstance(cur, MenuState):
        if cur.quit_requested:
            return False
        if cur.start_game or cur.continue_game:
            router.release_all()
            if not cur.continue_game:
                world.start_new_game()
            elif world.continue_game(store):
                log.info("Continuing from", store.path)
            sm.set(GameState(world, router, store))
    elif isinstance(cur, GameState):
        if cur.request_pause:
            cur.request_pause = False
            sm.push(PauseState(world, router, store))
        elif world.game_over:
            sm.set(GameOverState(world))
    elif isinstance(cur, PauseState) and cur.closed:
        sm.pop()
        if cur.return_to_menu:
            world.quit()
            sm.set(MenuState(store))
    elif isinstance(cur, GameOverState):
        if cur.return_to_menu:
            sm.set(MenuState(store))
        elif cur.restart_requested:
            router.release_all()
            world.start_new_game()
            sm.set(GameState(world, router, store))
    return True


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    if args.seed is not None:
        RNGService.initialize(args.seed)

    pygame.init()
    pygame.display.set_caption("Dog Hunter")
    screen = pygame.display.set_mode((settings.view_width, settings.view_height))
    clock = pygame.time.Clock()

    store = SaveStore(args.save_file or settings.save_file)
    world = World(settings.view_width, settings.view_height)
    router = InputRouter()
    sm = StateManager()
    if args.new_game:
        world.start_new_game()
        sm.set(GameState(world, router, store))
    else:
        sm.set(MenuState(store))

    running = True
    while running:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                running = False

        current_name = sm.current.name if sm.current else ""
        sm.handle_actions(router.process(events, current_name))
        running = apply_transitions(sm, world, router, store) and running

        dt = clock.tick(settings.fps) / 1000.0
        sm.update(dt)
        sm.render(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
