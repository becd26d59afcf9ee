"""
APS - Archery Pop Session platform.

Provides:
- logging: per-module loggers and structured record sinks
- events: session event kinds and due events
- scheduler: cancelable interval timers pumped by the game loop
- highscore: best-score persistence collaborators
"""

from aps.events import SessionEvent, SessionEventKind
from aps.scheduler import EventScheduler, IntervalTimer
from aps.highscore import (
    HighScoreStore,
    MemoryHighScoreStore,
    JsonHighScoreStore,
    DEFAULT_STORAGE_KEY,
)

__all__ = [
    'SessionEvent',
    'SessionEventKind',
    'EventScheduler',
    'IntervalTimer',
    'HighScoreStore',
    'MemoryHighScoreStore',
    'JsonHighScoreStore',
    'DEFAULT_STORAGE_KEY',
]
