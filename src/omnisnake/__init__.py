"""Free-steering snake: simulation core plus a pygame host."""

from .config import ARENA, CFG, ArenaBounds, Config
from .controls import Control, ControlState
from .errors import InvalidStateError
from .game import GameState, Snapshot, TickOutcome, advance, new_game_state, snapshot
from .geometry import Vector2
from .snake import Snake

__all__ = [
    "ARENA", "CFG", "ArenaBounds", "Config",
    "Control", "ControlState",
    "InvalidStateError",
    "GameState", "Snapshot", "TickOutcome", "advance", "new_game_state", "snapshot",
    "Vector2", "Snake",
]
