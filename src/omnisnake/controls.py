# controls.py
from dataclasses import dataclass
from enum import Enum


class Control(Enum):
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    TURBO = "turbo"


@dataclass
class ControlState:
    """
    Latched held/released state of the three logical controls.
    Only the current state matters; events are not queued.
    """
    turn_left: bool = False
    turn_right: bool = False
    turbo: bool = False

    def press(self, control: Control) -> None:
        setattr(self, control.value, True)

    def release(self, control: Control) -> None:
        setattr(self, control.value, False)

    def set(self, control: Control, held: bool) -> None:
        setattr(self, control.value, held)

    def turn_direction(self) -> int:
        """-1 for left, +1 for right, 0 for none. Left wins if both are held."""
        if self.turn_left:
            return -1
        if self.turn_right:
            return 1
        return 0
