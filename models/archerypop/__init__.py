"""
Archery Pop models package.

Enums, session/target data structures and the validated session
configuration.
"""

from .enums import (
    RunState,
    TargetState,
    EndReason,
)

from .models import (
    TargetData,
    ScoreData,
    TargetView,
    FinalSummary,
    SessionSnapshot,
)

from .session_config import SessionConfig

__all__ = [
    # Enums
    "RunState",
    "TargetState",
    "EndReason",
    # Session models
    "TargetData",
    "ScoreData",
    "TargetView",
    "FinalSummary",
    "SessionSnapshot",
    # Configuration
    "SessionConfig",
]
