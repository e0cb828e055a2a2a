import math

import pytest

from turtlescene.config import DEFAULT_PEN_COLOR, DEFAULT_PEN_WIDTH
from turtlescene.interpreter.state import TurtleState, normalize_heading


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0.0, 0.0),
        (360.0, 0.0),
        (720.5, 0.5),
        (-90.0, 270.0),
        (-360.0, 0.0),
        (-725.0, 355.0),
        (359.999, 359.999),
        (1e-20, 1e-20),
    ],
)
def test_normalize_heading_values(degrees, expected):
    assert normalize_heading(degrees) == pytest.approx(expected)


@pytest.mark.parametrize("h", [0.0, 45.0, 359.0, -10.0, 1234.5])
@pytest.mark.parametrize("delta", [-1e6, -720.0, -0.001, -1e-15, 0.0, 90.0, 359.5, 1e6 + 0.25])
def test_normalize_range_and_period(h, delta):
    value = normalize_heading(normalize_heading(h) + delta)
    assert 0.0 <= value < 360.0
    shifted = normalize_heading(normalize_heading(h) + delta + 360.0)
    # Same angle modulo 360 (compare on the circle to tolerate wraparound)
    diff = abs(value - shifted)
    assert min(diff, 360.0 - diff) == pytest.approx(0.0, abs=1e-6)


def test_tiny_negative_does_not_round_to_360():
    value = normalize_heading(-1e-15)
    assert 0.0 <= value < 360.0


def test_default_state():
    state = TurtleState()
    assert state.position == (0.0, 0.0)
    assert state.heading == 0.0
    assert state.pen_down is False
    assert state.pen_width == DEFAULT_PEN_WIDTH
    assert state.pen_color == DEFAULT_PEN_COLOR
    assert state.locations == [] and state.rotations == []


def test_stacks_are_lifo():
    state = TurtleState()
    state.position = (1.0, 2.0)
    state.push_location()
    state.position = (3.0, 4.0)
    state.push_location()
    state.position = (9.0, 9.0)
    assert state.pop_location() is True
    assert state.position == (3.0, 4.0)
    assert state.pop_location() is True
    assert state.position == (1.0, 2.0)
    assert state.pop_location() is False
    assert state.position == (1.0, 2.0)


def test_rotation_stack_and_turn():
    state = TurtleState()
    state.turn(-30.0)
    assert state.heading == pytest.approx(330.0)
    state.push_rotation()
    state.set_direction(math.pi)
    assert state.pop_rotation() is True
    assert state.heading == pytest.approx(330.0)
    assert state.pop_rotation() is False
    assert state.heading == pytest.approx(330.0)


def test_states_do_not_share_stacks():
    a, b = TurtleState(), TurtleState()
    a.push_location()
    assert b.locations == []
