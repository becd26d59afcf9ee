"""Tests for fall kinematics."""

from games.ArcheryPop import kinematics


def test_fall_moves_down_by_speed():
    assert kinematics.fall(-80.0, 3) == -77.0


def test_position_after_forty_ticks():
    assert kinematics.position_after(-80.0, 40, 3) == 40.0
    assert kinematics.position_after(-40.0, 40, 3) == 80.0


def test_position_after_ignores_negative_ticks():
    assert kinematics.position_after(10.0, -5, 3) == 10.0


def test_escape_is_strictly_past_floor():
    assert not kinematics.has_escaped(600.0, 600)
    assert kinematics.has_escaped(600.5, 600)
    assert not kinematics.has_escaped(-80.0, 600)
