"""
APS Event Types

Defines the events that drive an Archery Pop session:
- SessionEventKind: the three independently-clocked sources of re-entry
- SessionEvent: one due occurrence of a source, as produced by the scheduler

The render/physics frame, the spawner period and the session clock all
mutate the same session. Instead of three callbacks racing each other they
are expressed as events and fed through a single dispatch entry point, one
at a time, in a defined order.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SessionEventKind(str, Enum):
    """Sources of session re-entry.

    Attributes:
        FRAME: Physics tick (one target fall step)
        SPAWN: Spawner period elapsed
        CLOCK: One second of session time elapsed
    """
    FRAME = "frame"
    SPAWN = "spawn"
    CLOCK = "clock"

    @property
    def priority(self) -> int:
        """Ordering among events due at the same instant.

        The clock is evaluated last so a session ending and a spawn landing
        on the same instant resolve deterministically.
        """
        return _PRIORITIES[self]


_PRIORITIES = {
    SessionEventKind.FRAME: 0,
    SessionEventKind.SPAWN: 1,
    SessionEventKind.CLOCK: 2,
}


class SessionEvent(BaseModel):
    """One due occurrence of a session event source.

    Attributes:
        kind: Which source fired
        due_ms: Scheduler time (milliseconds) at which the event became due

    Examples:
        >>> event = SessionEvent(kind=SessionEventKind.CLOCK, due_ms=1000.0)
        >>> event.sort_key
        (1000.0, 2)
    """
    kind: SessionEventKind
    due_ms: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> tuple:
        """Key ordering events by due time, then by kind priority."""
        return (self.due_ms, self.kind.priority)

    def __str__(self) -> str:
        return f"SessionEvent({self.kind.value}@{self.due_ms:.0f}ms)"
