"""
Input event model for Archery Pop.

Every device the runner supports is translated into InputEvents before it
reaches the session, so the session never sees raw pygame events.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Point2D


class InputAction(str, Enum):
    """What the player asked for."""
    AIM = "aim"
    FIRE = "fire"
    START = "start"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"
    RESET_HIGHSCORE = "reset_highscore"
    EXIT = "exit"


class InputEvent(BaseModel):
    """Immutable input event.

    Attributes:
        action: Requested action
        position: Playfield point for AIM and FIRE, already clamped to the board
        timestamp: Monotonic time the event was read (seconds)

    Examples:
        >>> event = InputEvent(action=InputAction.FIRE, position=Point2D(x=10, y=20))
        >>> print(event)
        InputEvent(fire @ (10.0, 20.0))
    """
    action: InputAction
    position: Optional[Point2D] = None
    timestamp: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.position is None:
            return f"InputEvent({self.action.value})"
        return f"InputEvent({self.action.value} @ ({self.position.x:.1f}, {self.position.y:.1f}))"
