# main.py
import argparse
from dataclasses import replace
from enum import Enum
import logging
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .controls import Control, ControlState
from .game import GameState, advance, new_game_state, snapshot
from .render import draw_game, draw_game_over

logger = logging.getLogger(__name__)

# Physical key -> logical control
KEY_BINDINGS = {
    pygame.K_LEFT: Control.TURN_LEFT,
    pygame.K_RIGHT: Control.TURN_RIGHT,
    pygame.K_SPACE: Control.TURBO,
}


class HostAction(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    RESTART = "restart"


def handle_key(controls: ControlState, key: int, pressed: bool) -> bool:
    """Latch a bound key into the control state. Returns False for unbound keys."""
    control = KEY_BINDINGS.get(key)
    if control is None:
        return False
    controls.set(control, pressed)
    return True


def handle_events(controls: ControlState, events=None) -> HostAction:
    """Drain pygame events into the control state."""
    action = HostAction.CONTINUE
    for event in (pygame.event.get() if events is None else events):
        if event.type == pygame.QUIT:
            return HostAction.QUIT
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return HostAction.QUIT
            if event.key == pygame.K_r:
                action = HostAction.RESTART
            handle_key(controls, event.key, True)
        elif event.type == pygame.KEYUP:
            handle_key(controls, event.key, False)
    return action


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="omnisnake", description="Free-steering snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--move-interval", type=float, default=CFG.move_interval,
                        help="seconds per movement tick")
    parser.add_argument("--spawn-interval", type=float, default=CFG.spawn_interval,
                        help="seconds between food spawns")
    parser.add_argument("--growth", type=int, default=CFG.growth_per_food,
                        help="segments gained per food item")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return replace(
        CFG,
        seed=args.seed,
        move_interval=args.move_interval,
        spawn_interval=args.spawn_interval,
        growth_per_food=args.growth,
    )


def wait_for_restart(clock: pygame.time.Clock, controls: ControlState) -> bool:
    """Block on the game-over screen. True to restart, False to quit."""
    while True:
        action = handle_events(controls)
        if action is HostAction.QUIT:
            return False
        if action is HostAction.RESTART:
            return True
        clock.tick(30)


def run(cfg: Config, fps: int = 60) -> int:
    """Own the frame loop until the player quits. Returns the last score."""
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Omni Snake")
    clock = pygame.time.Clock()

    controls = ControlState()
    state: GameState = new_game_state(cfg)
    score = 0
    clock.tick(fps)

    try:
        while True:
            # 1) input
            if handle_events(controls) is HostAction.QUIT:
                break

            # 2) update
            dt = clock.tick(fps) / 1000.0
            outcome = advance(state, dt, controls)
            score = outcome.score

            # 3) render
            draw_game(screen, font, outcome.snapshot, cfg.segment_radius, cfg.food_radius)
            if outcome.terminated:
                print(f"Score: {score}")
                draw_game_over(screen, font, score)
                pygame.display.flip()
                if not wait_for_restart(clock, controls):
                    break
                controls = ControlState()
                state = new_game_state(replace(cfg, seed=cfg.seed + 1))
                cfg = state.config
                logger.info("Restarted with seed %d", cfg.seed)
                continue
            pygame.display.flip()
    finally:
        pygame.quit()

    return score


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    logger.info("Starting session: %s", cfg)
    run(cfg, fps=args.fps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
