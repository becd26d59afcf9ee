"""
Archery Pop - shoot falling targets before they reach the floor.

A timed single-player session: targets spawn above the board and fall;
hitting one scores, letting one escape costs points and a life.
"""

from games.ArcheryPop.session import ArcheryPopSession
from games.ArcheryPop.session_clock import format_time

__all__ = ['ArcheryPopSession', 'format_time']
