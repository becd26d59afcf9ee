"""
Archery Pop data models.

These models define the session-level structures: falling targets, the
score/lives ledger, and the read-only views handed to the rendering
collaborator.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict

from ..primitives import Point2D, Rectangle
from .enums import RunState, TargetState, EndReason


class TargetData(BaseModel):
    """Immutable target state data.

    Attributes:
        target_id: Per-session identity, assigned in spawn order
        position: Top-left corner of the bounding square
        size: Edge length of the bounding square (must be positive)
        state: Current state of the target lifecycle

    Examples:
        >>> target = TargetData(
        ...     target_id=1,
        ...     position=Point2D(x=100.0, y=-80.0),
        ...     size=80.0,
        ... )
        >>> target.is_active
        True
        >>> target.get_bounds().bottom
        0.0
    """
    target_id: int = Field(..., ge=0)
    position: Point2D
    size: float
    state: TargetState = TargetState.ALIVE

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: float) -> float:
        """Validate size is positive.

        Raises:
            ValueError: If size is not positive
        """
        if v <= 0:
            raise ValueError(f'Size must be positive, got {v}')
        return v

    @computed_field
    @property
    def is_active(self) -> bool:
        """True while the target is falling and can be hit."""
        return self.state == TargetState.ALIVE

    def get_bounds(self) -> Rectangle:
        """Get the axis-aligned bounding square used for hit testing.

        Returns:
            Rectangle anchored at the target's top-left position
        """
        return Rectangle(
            x=self.position.x,
            y=self.position.y,
            width=self.size,
            height=self.size
        )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"TargetData(id={self.target_id}, pos={self.position}, size={self.size:.1f}, state={self.state.value})"


class ScoreData(BaseModel):
    """Immutable score and lives ledger.

    Attributes:
        score: Points (never negative)
        lives: Remaining lives (never negative)
        hits: Targets struck
        misses: Fire commands that struck nothing
        escapes: Targets that fell past the floor

    Examples:
        >>> ledger = ScoreData(score=30, lives=2, hits=3, misses=1, escapes=1)
        >>> ledger.accuracy
        0.75
    """
    score: int = 0
    lives: int = 0
    hits: int = 0
    misses: int = 0
    escapes: int = 0

    @field_validator('score', 'lives', 'hits', 'misses', 'escapes')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate ledger values are non-negative.

        Raises:
            ValueError: If value is negative
        """
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def accuracy(self) -> float:
        """Hit ratio (0.0 to 1.0), or 0.0 when nothing was fired."""
        shots = self.hits + self.misses
        if shots == 0:
            return 0.0
        return self.hits / shots

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"ScoreData(score={self.score}, lives={self.lives}, hits={self.hits}, "
                f"misses={self.misses}, escapes={self.escapes})")


class TargetView(BaseModel):
    """What the renderer needs to draw one live target."""
    x: float
    y: float
    size: float

    model_config = ConfigDict(frozen=True)


class FinalSummary(BaseModel):
    """End-of-session summary, available only in GAME_OVER.

    Attributes:
        player_name: Name the session was started with
        score: Final score
        is_new_highscore: True when the score beat the stored best
        high_score: Best score after this session was evaluated
        reason: What ended the session
        hits: Targets struck
        misses: Empty shots
        escapes: Targets lost to the floor
        accuracy: hits / (hits + misses)
    """
    player_name: str
    score: int = Field(..., ge=0)
    is_new_highscore: bool
    high_score: int = Field(..., ge=0)
    reason: EndReason
    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    escapes: int = Field(default=0, ge=0)
    accuracy: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)


class SessionSnapshot(BaseModel):
    """Read-only view of a session, pulled by the rendering collaborator.

    Examples:
        >>> snap = SessionSnapshot(run_state=RunState.MENU, score=0, lives=3,
        ...                        time_remaining=60, high_score=0)
        >>> snap.targets
        ()
    """
    run_state: RunState
    player_name: str = ""
    score: int = Field(..., ge=0)
    lives: int = Field(..., ge=0)
    time_remaining: int = Field(..., ge=0)
    high_score: int = Field(..., ge=0)
    targets: Tuple[TargetView, ...] = ()
    summary: Optional[FinalSummary] = None

    model_config = ConfigDict(frozen=True)
