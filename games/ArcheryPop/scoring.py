"""
Score and lives tracking for Archery Pop.

This module implements the ScoreKeeper class which manages the score/lives
ledger using an immutable state pattern. All operations return new
instances rather than modifying existing state.

Examples:
    >>> keeper = ScoreKeeper.fresh(lives=3)
    >>> keeper.record_hit(10).record_escape(5).get_stats().score
    5
"""

from typing import Optional

from models import ScoreData


class ScoreKeeper:
    """Tracks score and lives with immutable state pattern.

    Uses the ScoreData Pydantic model for validated, immutable state. Score
    and lives are clamped at zero, so no sequence of events can drive them
    negative.

    Examples:
        >>> keeper = ScoreKeeper.fresh(lives=1)
        >>> after = keeper.record_escape(5)
        >>> after.get_stats().lives, after.is_out_of_lives
        (0, True)
        >>> keeper.get_stats().lives  # Original unchanged
        1
    """

    def __init__(self, score: Optional[ScoreData] = None):
        self._score = score if score is not None else ScoreData()

    @classmethod
    def fresh(cls, lives: int) -> 'ScoreKeeper':
        """Start a ledger with zero score and a full set of lives."""
        return cls(ScoreData(lives=lives))

    def record_hit(self, points: int) -> 'ScoreKeeper':
        """Record a struck target.

        Args:
            points: Points awarded for the hit

        Returns:
            New ScoreKeeper with score += points and hits += 1
        """
        return self._update(
            score=self._score.score + points,
            hits=self._score.hits + 1,
        )

    def record_miss(self) -> 'ScoreKeeper':
        """Record a shot that struck nothing.

        Misses are counted for statistics only; score and lives are untouched.
        """
        return self._update(misses=self._score.misses + 1)

    def record_escape(self, penalty: int) -> 'ScoreKeeper':
        """Record a target reaching the floor.

        Args:
            penalty: Points deducted

        Returns:
            New ScoreKeeper with score reduced by penalty and one life lost,
            both clamped at zero
        """
        return self._update(
            score=max(0, self._score.score - penalty),
            lives=max(0, self._score.lives - 1),
            escapes=self._score.escapes + 1,
        )

    @property
    def is_out_of_lives(self) -> bool:
        return self._score.lives <= 0

    def get_stats(self) -> ScoreData:
        """Get current ledger (immutable)."""
        return self._score

    def _update(self, **changes) -> 'ScoreKeeper':
        values = self._score.model_dump(include={'score', 'lives', 'hits', 'misses', 'escapes'})
        values.update(changes)
        return ScoreKeeper(ScoreData(**values))

    def __repr__(self) -> str:
        return f"ScoreKeeper({self._score!r})"

    def __str__(self) -> str:
        return str(self._score)
