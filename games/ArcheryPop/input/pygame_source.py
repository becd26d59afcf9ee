"""
pygame input source for Archery Pop.

Translates pygame events into InputEvents. Pointer positions are clamped to
the board so the session only ever receives in-bounds coordinates.

Bindings:
    left click  FIRE
    mouse move  AIM
    Space       TOGGLE_PAUSE
    Enter       START
    Q           QUIT (to the menu)
    R           RESET_HIGHSCORE
    Esc, close  EXIT
"""

import time
from typing import List, Optional, Tuple

import pygame

from models import Point2D
from games.ArcheryPop.input.input_event import InputAction, InputEvent

_KEY_ACTIONS = {
    pygame.K_SPACE: InputAction.TOGGLE_PAUSE,
    pygame.K_RETURN: InputAction.START,
    pygame.K_KP_ENTER: InputAction.START,
    pygame.K_q: InputAction.QUIT,
    pygame.K_r: InputAction.RESET_HIGHSCORE,
    pygame.K_ESCAPE: InputAction.EXIT,
}


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class PygameInputSource:
    """
    Collects pygame events as InputEvents.

    Args:
        width: Board width used for clamping
        height: Board height used for clamping

    Examples:
        >>> source = PygameInputSource(960, 600)
        >>> source.clamp_point(-5, 700)
        (0, 600)
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self._event_queue: List[InputEvent] = []
        self._aim: Optional[Tuple[float, float]] = None

    @property
    def aim(self) -> Optional[Tuple[float, float]]:
        """Last clamped pointer position, or None before the pointer moved."""
        return self._aim

    def clamp_point(self, x: float, y: float) -> Tuple[float, float]:
        return clamp(x, 0, self.width), clamp(y, 0, self.height)

    def translate(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Convert one pygame event, or return None if it is not bound."""
        if event.type == pygame.QUIT:
            return self._make(InputAction.EXIT)

        if event.type == pygame.KEYDOWN:
            action = _KEY_ACTIONS.get(event.key)
            return self._make(action) if action is not None else None

        if event.type == pygame.MOUSEMOTION:
            self._aim = self.clamp_point(*event.pos)
            return self._make(InputAction.AIM, self._aim)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._aim = self.clamp_point(*event.pos)
            return self._make(InputAction.FIRE, self._aim)

        return None

    def update(self, dt: float) -> None:
        """Drain the pygame queue into the event queue."""
        for event in pygame.event.get():
            translated = self.translate(event)
            if translated is not None:
                self._event_queue.append(translated)

    def poll_events(self) -> List[InputEvent]:
        """Events collected since the last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def _make(self, action: InputAction, point: Optional[Tuple[float, float]] = None) -> InputEvent:
        position = Point2D(x=point[0], y=point[1]) if point is not None else None
        return InputEvent(action=action, position=position, timestamp=time.monotonic())
