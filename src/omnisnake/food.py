# food.py
from __future__ import annotations
import logging
from typing import List, Protocol, Tuple

from .config import ArenaBounds
from .geometry import Vector2

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


class FoodField:
    """Unordered set of food items. Positions need not be distinct."""

    def __init__(self, items: List[Vector2] | None = None):
        self.items: List[Vector2] = list(items or [])

    def __len__(self) -> int:
        return len(self.items)

    def spawn(self, bounds: ArenaBounds, rng: UniformSource) -> Vector2:
        """Add one item at a uniformly random position inside the arena."""
        item = Vector2(
            float(rng.uniform(bounds.x_min, bounds.x_max)),
            float(rng.uniform(bounds.y_min, bounds.y_max)),
        )
        self.items.append(item)
        logger.debug("Spawned food at (%.1f, %.1f); %d on field", item.x, item.y, len(self.items))
        return item

    def consume_near(self, pos: Vector2, reach: float) -> int:
        """Remove every item strictly within reach of pos. Returns how many were eaten."""
        reach_sq = reach * reach
        kept = [f for f in self.items if f.distance_sq(pos) >= reach_sq]
        eaten = len(self.items) - len(kept)
        self.items = kept
        return eaten

    def positions(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(f.as_tuple() for f in self.items)
