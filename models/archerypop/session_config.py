"""
Pydantic v2 model for session engine configuration.

Bundles every tuning knob of the session engine (playfield, population
bounds, kinematics, timers, scoring) into one frozen, validated object.
Invalid combinations are rejected at construction, before a session exists.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class SessionConfig(BaseModel):
    """
    Session engine configuration.

    Defaults reproduce the classic Archery Pop rules: a 960x600 board,
    80-unit targets falling 3 units per tick, a spawn every 2 s, 1 to 5
    targets on screen, 3 lives and 60 seconds.

    Examples:
        >>> config = SessionConfig()
        >>> config.max_targets
        5
        >>> SessionConfig(min_targets=6, max_targets=5)  # doctest: +SKIP
        Traceback (most recent call last):
        pydantic_core._pydantic_core.ValidationError: ...
    """
    model_config = {"frozen": True}

    # Playfield
    board_width: float = Field(default=960, gt=0, description="Playfield width in units")
    board_height: float = Field(default=600, gt=0, description="Playfield height in units")

    # Targets
    target_size: float = Field(default=80, gt=0, description="Edge length of a target's bounding square")
    spawn_offset_max: float = Field(
        default=80, ge=0,
        description="Max extra distance above the top edge a target spawns at"
    )
    fall_speed: float = Field(default=3, gt=0, description="Units a target falls per physics tick")

    # Population
    min_targets: int = Field(default=1, ge=0, description="Live targets kept on the board at rest")
    max_targets: int = Field(default=5, ge=1, description="Live target cap")
    initial_targets: int = Field(default=2, ge=0, description="Targets seeded when a session starts")

    # Timers
    spawn_interval_ms: float = Field(default=2000, gt=0, description="Spawner period")
    clock_period_ms: float = Field(default=1000, gt=0, description="Session clock period")
    physics_rate: Optional[float] = Field(
        default=None, gt=0,
        description="Fixed physics ticks per second for tick(dt); None = one tick per frame"
    )

    # Session budget and scoring
    initial_lives: int = Field(default=3, ge=1)
    initial_time: int = Field(default=60, ge=1, description="Session length in seconds")
    hit_points: int = Field(default=10, ge=0)
    escape_penalty: int = Field(default=5, ge=0)

    highscore_key: str = Field(default="archerypop_highscore", min_length=1)

    @model_validator(mode='after')
    def validate_bounds(self) -> 'SessionConfig':
        """Reject configurations the engine cannot honour."""
        if self.min_targets > self.max_targets:
            raise ValueError(
                f"min_targets ({self.min_targets}) must not exceed max_targets ({self.max_targets})"
            )
        if self.target_size > self.board_width:
            raise ValueError(
                f"target_size ({self.target_size}) must fit the board width ({self.board_width})"
            )
        return self

    @property
    def physics_step_ms(self) -> Optional[float]:
        """Milliseconds per fixed physics step, or None when frame-coupled."""
        if self.physics_rate is None:
            return None
        return 1000.0 / self.physics_rate
