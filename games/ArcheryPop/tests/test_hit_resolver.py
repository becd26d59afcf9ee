"""Tests for hit resolution."""

from models import Point2D, TargetData
from games.ArcheryPop.hit_resolver import resolve_hit
from games.ArcheryPop.target import Target


def make_target(target_id, x, y, size=80.0):
    return Target(TargetData(target_id=target_id, position=Point2D(x=x, y=y), size=size))


def test_miss_on_empty_list():
    assert resolve_hit([], 10.0, 10.0) is None


def test_miss_on_empty_space():
    assert resolve_hit([make_target(1, 0, 0)], 500.0, 500.0) is None


def test_single_hit():
    assert resolve_hit([make_target(1, 0, 0)], 40.0, 40.0).target_id == 1


def test_overlap_newest_wins():
    targets = [make_target(1, 0, 0), make_target(2, 40, 40), make_target(3, 20, 20)]
    assert resolve_hit(targets, 60.0, 60.0).target_id == 3


def test_overlap_is_deterministic():
    targets = [make_target(1, 0, 0), make_target(2, 40, 40)]
    results = {resolve_hit(targets, 60.0, 60.0).target_id for _ in range(10)}
    assert results == {2}


def test_dead_targets_are_skipped():
    targets = [make_target(1, 0, 0), make_target(2, 40, 40).mark_hit()]
    assert resolve_hit(targets, 60.0, 60.0).target_id == 1


def test_boundary_counts_as_hit():
    assert resolve_hit([make_target(1, 0, 0)], 80.0, 80.0) is not None
