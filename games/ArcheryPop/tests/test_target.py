"""
Tests for the immutable Target wrapper.
"""

import pytest

from models import Point2D, TargetData, TargetState
from games.ArcheryPop.target import Target


@pytest.fixture
def target():
    return Target(TargetData(target_id=1, position=Point2D(x=100.0, y=-80.0), size=80.0))


# ============================================================================
# Movement
# ============================================================================


class TestTargetMovement:

    def test_fall_returns_new_instance(self, target):
        moved = target.fall(3)
        assert moved is not target
        assert moved.y == -77.0
        assert target.y == -80.0

    def test_fall_keeps_x_and_identity(self, target):
        moved = target.fall(3)
        assert moved.x == 100.0
        assert moved.target_id == 1
        assert moved.size == 80.0

    def test_has_escaped(self, target):
        assert not target.has_escaped(600)
        low = Target(TargetData(target_id=2, position=Point2D(x=0.0, y=601.0), size=80.0))
        assert low.has_escaped(600)


# ============================================================================
# Hit testing
# ============================================================================


class TestTargetContainsPoint:

    def test_inside(self, target):
        assert target.contains_point(140.0, -40.0)

    def test_edges_are_inclusive(self, target):
        assert target.contains_point(100.0, -80.0)
        assert target.contains_point(180.0, 0.0)

    def test_outside(self, target):
        assert not target.contains_point(181.0, -40.0)
        assert not target.contains_point(140.0, 1.0)


# ============================================================================
# State
# ============================================================================


class TestTargetState:

    def test_new_target_is_active(self, target):
        assert target.state == TargetState.ALIVE
        assert target.is_active

    def test_mark_hit(self, target):
        hit = target.mark_hit()
        assert hit.state == TargetState.HIT
        assert not hit.is_active
        assert target.is_active

    def test_mark_escaped(self, target):
        escaped = target.mark_escaped()
        assert escaped.state == TargetState.ESCAPED
        assert not escaped.is_active
