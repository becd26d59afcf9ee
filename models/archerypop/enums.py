"""
Archery Pop enumerations.

These enums define the run states of a session, the lifecycle of a falling
target, and why a session ended.
"""

from enum import Enum


class RunState(str, Enum):
    """Authoritative state of a session.

    Attributes:
        MENU: No session running; waiting for a player name
        PLAYING: Targets fall, timers run, commands are accepted
        PAUSED: Everything frozen; counters kept
        GAME_OVER: Session ended; pool frozen until the next start
    """
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TargetState(str, Enum):
    """States a target can be in during its lifecycle.

    Attributes:
        ALIVE: Target is falling and can be hit
        HIT: Target was struck by the player
        ESCAPED: Target fell past the bottom edge
    """
    ALIVE = "alive"
    HIT = "hit"
    ESCAPED = "escaped"


class EndReason(str, Enum):
    """Why a session reached GAME_OVER.

    Attributes:
        TIME_UP: The session clock reached zero
        LIVES_EXHAUSTED: An escape took the last life
    """
    TIME_UP = "time_up"
    LIVES_EXHAUSTED = "lives_exhausted"
