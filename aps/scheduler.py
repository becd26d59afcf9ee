"""
Cooperative interval scheduler for session event sources.

Converts elapsed wall-clock time into an ordered list of due SessionEvents.
Each periodic source is an IntervalTimer handle. Handles are cancelable:
once cancelled a handle never fires again, and a fresh handle must be
allocated to restart the source. No threads are involved; the owner pumps
the scheduler from its own loop.

Usage:
    scheduler = EventScheduler()
    clock = scheduler.schedule_interval(SessionEventKind.CLOCK, 1000)
    for event in scheduler.advance(16.7):
        session.dispatch(event)
    scheduler.cancel(clock)
"""

from dataclasses import dataclass, field
from itertools import count
from typing import Dict, List, Optional

from aps.events import SessionEvent, SessionEventKind
from aps.logging import get_logger

log = get_logger('scheduler')

# Float tolerance so 60 frames of 1/60 s reach a 1000 ms boundary
EPSILON_MS = 1e-6

_handle_ids = count(1)


@dataclass
class IntervalTimer:
    """
    A cancelable periodic timer handle.

    Attributes:
        kind: Event kind emitted each period
        period_ms: Period in milliseconds (must be positive)
        next_due_ms: Scheduler time of the next firing
        handle_id: Process-unique id, handy for logs and equality in tests
        cancelled: True once the handle has been torn down
    """
    kind: SessionEventKind
    period_ms: float
    next_due_ms: float
    handle_id: int = field(default_factory=lambda: next(_handle_ids))
    cancelled: bool = False
    fired: int = 0

    def __post_init__(self):
        if self.period_ms <= 0:
            raise ValueError(f'Timer period must be positive, got {self.period_ms}')

    @property
    def active(self) -> bool:
        return not self.cancelled

    def collect_due(self, now_ms: float) -> List[SessionEvent]:
        """Emit one event per period boundary reached by now_ms."""
        events = []
        while self.active and self.next_due_ms <= now_ms + EPSILON_MS:
            events.append(SessionEvent(kind=self.kind, due_ms=self.next_due_ms))
            self.fired += 1
            self.next_due_ms += self.period_ms
        return events


class EventScheduler:
    """
    Single-threaded scheduler owning a set of IntervalTimer handles.

    Time only moves when advance() is called, which keeps every test
    deterministic and makes pausing trivial: cancelled handles simply stop
    contributing events.

    Examples:
        >>> scheduler = EventScheduler()
        >>> timer = scheduler.schedule_interval(SessionEventKind.CLOCK, 1000)
        >>> [e.kind.value for e in scheduler.advance(2500)]
        ['clock', 'clock']
        >>> scheduler.cancel(timer)
        >>> scheduler.advance(5000)
        []
    """

    def __init__(self, start_ms: float = 0.0):
        self._now_ms = start_ms
        self._timers: Dict[int, IntervalTimer] = {}

    @property
    def now_ms(self) -> float:
        """Current scheduler time in milliseconds."""
        return self._now_ms

    @property
    def active_timers(self) -> List[IntervalTimer]:
        """Handles that are still allocated."""
        return list(self._timers.values())

    def schedule_interval(self, kind: SessionEventKind, period_ms: float) -> IntervalTimer:
        """Allocate a new periodic handle whose first firing is one full period away.

        Args:
            kind: Event kind the handle emits
            period_ms: Period in milliseconds

        Returns:
            The new IntervalTimer handle
        """
        timer = IntervalTimer(
            kind=kind,
            period_ms=period_ms,
            next_due_ms=self._now_ms + period_ms,
        )
        self._timers[timer.handle_id] = timer
        log.debug("Scheduled %s every %.0fms (handle %d)", kind.value, period_ms, timer.handle_id)
        return timer

    def cancel(self, timer: Optional[IntervalTimer]) -> None:
        """Tear down a handle. Cancelling None or a dead handle is a no-op."""
        if timer is None or timer.cancelled:
            return
        timer.cancelled = True
        self._timers.pop(timer.handle_id, None)
        log.debug("Cancelled %s (handle %d)", timer.kind.value, timer.handle_id)

    def cancel_all(self) -> None:
        """Tear down every allocated handle."""
        for timer in list(self._timers.values()):
            self.cancel(timer)

    def advance(self, elapsed_ms: float) -> List[SessionEvent]:
        """Move scheduler time forward and collect due events.

        Args:
            elapsed_ms: Wall-clock milliseconds since the last call (negative
                values are treated as zero)

        Returns:
            Due events ordered by due time, then FRAME < SPAWN < CLOCK
        """
        self._now_ms += max(0.0, elapsed_ms)
        events: List[SessionEvent] = []
        for timer in list(self._timers.values()):
            events.extend(timer.collect_due(self._now_ms))
        events.sort(key=lambda e: e.sort_key)
        return events
