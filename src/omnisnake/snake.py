# snake.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Tuple

from .config import ArenaBounds
from .geometry import Vector2

MIN_SEGMENTS = 3


class Snake:
    """
    Ordered body chain plus heading.

    Attributes:
        heading: unit Vector2, rotated while a turn control is held
        body: deque of Vector2 from head (index 0) to tail (index -1)
    """

    def __init__(self, heading: Vector2, body: Iterable[Vector2]):
        self.heading = heading
        self.body: Deque[Vector2] = deque(body)
        if len(self.body) < MIN_SEGMENTS:
            raise ValueError(
                f"Snake needs at least {MIN_SEGMENTS} segments, got {len(self.body)}"
            )

    @classmethod
    def spawn(cls, head: Vector2, heading: Vector2, segment_radius: float) -> Snake:
        """Head plus two segments trailing behind it, 2 * radius apart."""
        spacing = 2 * segment_radius
        body = [head - heading * (spacing * i) for i in range(MIN_SEGMENTS)]
        return cls(heading, body)

    @property
    def head(self) -> Vector2:
        return self.body[0]

    @property
    def tail(self) -> Vector2:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def turn(self, degrees: float) -> None:
        if degrees:
            self.heading = self.heading.rotated(degrees)

    def next_head(self, step: float, bounds: ArenaBounds, segment_radius: float) -> Vector2:
        """Tentative head one step ahead, wrapped onto the opposite side of the arena."""
        pos = self.head + self.heading * step
        return wrap(pos, self.heading, bounds, segment_radius)

    def commit(self, new_head: Vector2, grow: bool) -> None:
        """Prepend the new head; keep the tail only when growing."""
        if not grow:
            self.body.pop()
        self.body.appendleft(new_head)

    def positions(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(seg.as_tuple() for seg in self.body)


def wrap(pos: Vector2, heading: Vector2, bounds: ArenaBounds, segment_radius: float) -> Vector2:
    """
    Toroidal wrap: crossing a bound while moving towards it re-enters just
    inside the opposite bound.
    """
    x, y = pos.x, pos.y
    if x < bounds.x_min and heading.x < 0:
        x = bounds.x_max - segment_radius
    elif x > bounds.x_max and heading.x > 0:
        x = bounds.x_min + segment_radius
    if y < bounds.y_min and heading.y < 0:
        y = bounds.y_max - segment_radius
    elif y > bounds.y_max and heading.y > 0:
        y = bounds.y_min + segment_radius
    if (x, y) == (pos.x, pos.y):
        return pos
    return Vector2(x, y)
