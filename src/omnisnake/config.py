from dataclasses import dataclass

# ----- Window & arena -----
WIDTH, HEIGHT = 1000, 1000
WALL_MARGIN = 1.0

# ----- Sizes (pixels) -----
SEGMENT_RADIUS = 5.0
FOOD_RADIUS = 5.0

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
HEAD  = (160, 255, 160)
RED   = (255, 0, 0)
TEXT  = (220, 220, 230)

# ----- Spawn -----
START_POS = (WIDTH / 2, HEIGHT / 2)
START_HEADING = (-1.0, 0.0)


@dataclass(frozen=True)
class ArenaBounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def from_window(cls, width: float, height: float, margin: float = WALL_MARGIN) -> "ArenaBounds":
        return cls(margin, width - margin, margin, height - margin)


ARENA = ArenaBounds.from_window(WIDTH, HEIGHT)


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    move_interval: float = 0.05      # seconds per movement tick
    spawn_interval: float = 2.0      # seconds per food spawn
    turn_rate: float = 180.0         # degrees per second
    turbo_turn_rate: float = 360.0
    growth_per_food: int = 3
    segment_radius: float = SEGMENT_RADIUS
    food_radius: float = FOOD_RADIUS

    def __post_init__(self):
        for name in ("move_interval", "spawn_interval", "segment_radius", "food_radius"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.growth_per_food < 0:
            raise ValueError(f"growth_per_food must be >= 0, got {self.growth_per_food!r}")

    @property
    def step_length(self) -> float:
        """Distance the head travels per movement tick."""
        return 2 * self.segment_radius


CFG = Config(seed=0)
