# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, Iterable, Optional, Tuple

import numpy as np  # type: ignore

from .clock import Scheduler
from .config import ARENA, CFG, START_HEADING, START_POS, ArenaBounds, Config
from .controls import ControlState
from .errors import InvalidStateError
from .food import FoodField
from .geometry import Vector2
from .snake import Snake

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


# ---------- Results ----------
class MoveResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    SELF_COLLISION = "self_collision"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    segments: Tuple[Point, ...]
    food: Tuple[Point, ...]
    score: int


@dataclass(frozen=True)
class TickOutcome:
    terminated: bool
    snapshot: Snapshot
    moved: bool = False
    spawned: bool = False
    eaten: int = 0

    @property
    def score(self) -> int:
        return self.snapshot.score


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: FoodField
    clock: Scheduler
    config: Config
    bounds: ArenaBounds
    rng: Any                       # anything with uniform(low, high)
    pending_growth: int = 0
    score: int = 0
    terminated: bool = False
    ticks: int = 0                 # movement ticks taken


def new_game_state(
    config: Config = CFG,
    bounds: ArenaBounds = ARENA,
    body: Optional[Iterable[Point]] = None,
    heading: Point = START_HEADING,
    rng: Any = None,
) -> GameState:
    """
    Build a fresh session. Without an explicit body the snake spawns at
    START_POS with two segments trailing behind it along the heading.
    """
    head_dir = Vector2.of(heading)
    if body is None:
        snake = Snake.spawn(Vector2.of(START_POS), head_dir, config.segment_radius)
    else:
        snake = Snake(head_dir, [Vector2.of(p) for p in body])

    if rng is None:
        rng = np.random.default_rng(config.seed)

    return GameState(
        snake=snake,
        food=FoodField(),
        clock=Scheduler(config.move_interval, config.spawn_interval),
        config=config,
        bounds=bounds,
        rng=rng,
    )


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        segments=state.snake.positions(),
        food=state.food.positions(),
        score=state.score,
    )


# ---------- Collision & growth ----------
def hits_body(snake: Snake, pos: Vector2, radius: float) -> bool:
    """Linear scan over every segment, head included."""
    r_sq = radius * radius
    for seg in snake.body:
        if seg.distance_sq(pos) < r_sq:
            return True
    return False


def resolve_move(state: GameState, new_head: Vector2) -> Tuple[MoveResult, int]:
    """
    Classify a tentative head and apply its effects.
    Returns (result, food items eaten).
    """
    cfg = state.config
    if hits_body(state.snake, new_head, cfg.segment_radius):
        return MoveResult.SELF_COLLISION, 0

    eaten = state.food.consume_near(new_head, cfg.segment_radius + cfg.food_radius)
    if eaten:
        state.pending_growth += eaten * cfg.growth_per_food
        state.score += eaten
        logger.debug("Ate %d food; score=%d pending_growth=%d", eaten, state.score, state.pending_growth)

    # One segment of deferred growth per tick
    grow = state.pending_growth > 0
    if grow:
        state.pending_growth -= 1
    state.snake.commit(new_head, grow)

    return (MoveResult.ATE if eaten else MoveResult.MOVED), eaten


# ---------- Update ----------
def apply_turn(state: GameState, controls: ControlState, dt: float) -> None:
    direction = controls.turn_direction()
    if direction == 0:
        return
    cfg = state.config
    rate = cfg.turbo_turn_rate if controls.turbo else cfg.turn_rate
    state.snake.turn(direction * rate * dt)


def advance(state: GameState, dt: float, controls: Optional[ControlState] = None) -> TickOutcome:
    """
    Advance the session by dt seconds of wall-clock time.
    - heading rotates first, proportional to dt
    - then at most one movement tick and one food spawn
    - a movement tick that self-collides terminates the session and skips the spawn
    Advancing a terminated session raises InvalidStateError.
    """
    if state.terminated:
        raise InvalidStateError("Session already terminated; start a new game")
    if dt < 0:
        raise ValueError(f"dt must be >= 0, got {dt!r}")

    if controls is not None:
        apply_turn(state, controls, dt)

    move_due, spawn_due = state.clock.tick(dt)

    eaten = 0
    if move_due:
        cfg = state.config
        new_head = state.snake.next_head(cfg.step_length, state.bounds, cfg.segment_radius)
        result, eaten = resolve_move(state, new_head)
        state.ticks += 1
        if result is MoveResult.SELF_COLLISION:
            state.terminated = True
            logger.info("Self-collision after %d ticks; final score %d", state.ticks, state.score)
            return TickOutcome(terminated=True, snapshot=snapshot(state), moved=True)

    if spawn_due:
        state.food.spawn(state.bounds, state.rng)

    return TickOutcome(
        terminated=False,
        snapshot=snapshot(state),
        moved=move_due,
        spawned=spawn_due,
        eaten=eaten,
    )
