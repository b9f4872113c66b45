"""Tests for latched input state."""

from omnisnake.controls import Control, ControlState


class TestControlState:
    def test_defaults_released(self):
        """All controls start released."""
        c = ControlState()
        assert (c.turn_left, c.turn_right, c.turbo) == (False, False, False)
        assert c.turn_direction() == 0

    def test_press_and_release(self):
        """press latches a control until release."""
        c = ControlState()
        c.press(Control.TURBO)
        assert c.turbo is True
        c.press(Control.TURBO)
        c.release(Control.TURBO)
        assert c.turbo is False

    def test_turn_direction(self):
        """Left is negative, right is positive."""
        assert ControlState(turn_left=True).turn_direction() == -1
        assert ControlState(turn_right=True).turn_direction() == 1

    def test_left_wins_over_right(self):
        """With both turn controls held, left takes precedence."""
        assert ControlState(turn_left=True, turn_right=True).turn_direction() == -1
