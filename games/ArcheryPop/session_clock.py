"""
Session countdown for Archery Pop.

The clock counts whole seconds. It is decremented once per clock period by
the session (never by the render loop), clamps at zero and reports expiry so
the session can end in the same event.
"""


class SessionClock:
    """Whole-second countdown.

    Examples:
        >>> clock = SessionClock(2)
        >>> clock.tick()
        False
        >>> clock.tick()
        True
        >>> clock.time_remaining
        0
    """

    def __init__(self, initial_time: int):
        self._initial_time = initial_time
        self._time_remaining = initial_time

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def expired(self) -> bool:
        return self._time_remaining <= 0

    def tick(self) -> bool:
        """Consume one second.

        Returns:
            True if the clock has run out
        """
        self._time_remaining = max(0, self._time_remaining - 1)
        return self.expired

    def reset(self) -> None:
        self._time_remaining = self._initial_time


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS for the HUD.

    Examples:
        >>> format_time(60)
        '01:00'
        >>> format_time(7)
        '00:07'
    """
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
