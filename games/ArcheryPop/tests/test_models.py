"""
Tests for the Archery Pop pydantic models and SessionConfig validation.
"""

import pytest
from pydantic import ValidationError

from models import (
    EndReason,
    FinalSummary,
    Point2D,
    Rectangle,
    RunState,
    ScoreData,
    SessionConfig,
    SessionSnapshot,
    TargetData,
    TargetState,
    TargetView,
)


# ============================================================================
# Enum Tests
# ============================================================================


class TestEnums:

    def test_run_state_values(self):
        assert [s.value for s in RunState] == ["menu", "playing", "paused", "game_over"]

    def test_target_state_values(self):
        assert TargetState.ALIVE == "alive"
        assert len(TargetState) == 3

    def test_end_reasons(self):
        assert {r.value for r in EndReason} == {"time_up", "lives_exhausted"}


# ============================================================================
# Primitive Tests
# ============================================================================


class TestRectangle:

    def test_edges(self):
        rect = Rectangle(x=10.0, y=20.0, width=80.0, height=80.0)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (10.0, 90.0, 20.0, 100.0)

    def test_dump_has_geometry_and_edges(self):
        rect = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        assert set(rect.model_dump()) == {"x", "y", "width", "height", "left", "right", "top", "bottom"}

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=0, height=10)

    def test_frozen(self):
        rect = Rectangle(x=0, y=0, width=1, height=1)
        with pytest.raises(ValidationError):
            rect.x = 5


# ============================================================================
# Target and Score Tests
# ============================================================================


class TestTargetData:

    def test_bounds_anchor_top_left(self):
        data = TargetData(target_id=1, position=Point2D(x=100.0, y=-80.0), size=80.0)
        bounds = data.get_bounds()
        assert (bounds.left, bounds.top, bounds.right, bounds.bottom) == (100.0, -80.0, 180.0, 0.0)

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValidationError) as exc_info:
            TargetData(target_id=1, position=Point2D(x=0, y=0), size=0)
        assert 'positive' in str(exc_info.value)

    def test_rejects_negative_id(self):
        with pytest.raises(ValidationError):
            TargetData(target_id=-1, position=Point2D(x=0, y=0), size=80)


class TestScoreData:

    def test_rejects_negative_values(self):
        for field_name in ('score', 'lives', 'hits', 'misses', 'escapes'):
            with pytest.raises(ValidationError):
                ScoreData(**{field_name: -1})

    def test_accuracy_without_shots(self):
        assert ScoreData().accuracy == 0.0

    def test_dump_holds_ledger_and_accuracy_only(self):
        dumped = ScoreData(hits=3, misses=1).model_dump()
        assert set(dumped) == {"score", "lives", "hits", "misses", "escapes", "accuracy"}
        assert dumped["accuracy"] == 0.75


# ============================================================================
# Views
# ============================================================================


class TestViews:

    def test_snapshot_defaults(self):
        snap = SessionSnapshot(run_state=RunState.MENU, score=0, lives=3,
                               time_remaining=60, high_score=0)
        assert snap.targets == ()
        assert snap.summary is None

    def test_summary_round_trips_to_json(self):
        summary = FinalSummary(player_name="Robin", score=25, is_new_highscore=True,
                               high_score=25, reason=EndReason.TIME_UP)
        assert summary.model_dump(mode='json')['reason'] == "time_up"

    def test_target_view_frozen(self):
        view = TargetView(x=1, y=2, size=80)
        with pytest.raises(ValidationError):
            view.x = 3


# ============================================================================
# SessionConfig
# ============================================================================


class TestSessionConfig:

    def test_defaults(self):
        config = SessionConfig()
        assert (config.board_width, config.board_height) == (960, 600)
        assert config.target_size == 80
        assert config.fall_speed == 3
        assert (config.min_targets, config.max_targets, config.initial_targets) == (1, 5, 2)
        assert (config.initial_lives, config.initial_time) == (3, 60)
        assert (config.hit_points, config.escape_penalty) == (10, 5)
        assert config.highscore_key == "archerypop_highscore"
        assert config.physics_step_ms is None

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig(min_targets=6, max_targets=5)

    def test_target_wider_than_board_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig(board_width=50, target_size=80)

    def test_non_positive_values_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig(target_size=0)
        with pytest.raises(ValidationError):
            SessionConfig(spawn_interval_ms=0)

    def test_physics_step(self):
        assert SessionConfig(physics_rate=50).physics_step_ms == 20.0
