# clock.py
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Scheduler:
    """
    Two independent countdown timers that turn a variable frame rate into
    fixed-interval movement and spawn ticks.

    Both timers start at 0.0, so the first tick() always fires both.
    At most one move and one spawn fire per call: a long stalled frame
    drops ticks instead of catching up.
    """
    move_interval: float
    spawn_interval: float
    move_timer: float = 0.0
    spawn_timer: float = 0.0

    def tick(self, dt: float) -> Tuple[bool, bool]:
        """Consume dt seconds. Returns (move_due, spawn_due)."""
        self.move_timer -= dt
        self.spawn_timer -= dt

        move_due = self.move_timer <= 0
        if move_due:
            self.move_timer = self.move_interval

        spawn_due = self.spawn_timer <= 0
        if spawn_due:
            self.spawn_timer = self.spawn_interval

        return move_due, spawn_due
