"""
Archery Pop session engine.

ArcheryPopSession is the state machine that owns one play-through: the
target pool, the spawner, the countdown, the score/lives ledger and the
timers that drive them.

States and transitions:
    MENU      --start(name)-->            PLAYING
    GAME_OVER --start(name)-->            PLAYING
    PLAYING   --pause()-->                PAUSED
    PAUSED    --resume()-->               PLAYING
    PLAYING   --clock expiry / no lives-> GAME_OVER
    PAUSED, GAME_OVER --quit()-->         MENU

Every command is safe to call in any state. When its precondition does not
hold it does nothing and returns False; it never raises.

Timing:
    Three sources re-enter the engine: physics frames, the spawner period
    and the one-second clock. They arrive as SessionEvents and go through
    dispatch() one at a time. tick(dt) pumps the internal EventScheduler
    with wall-clock time; events due at the same instant are applied
    FRAME, then SPAWN, then CLOCK. Timer handles are cancelled on pause,
    quit and game over and freshly allocated on start and resume, so time
    spent paused is never replayed.

Usage:
    session = ArcheryPopSession()
    session.start("Robin")
    while running:
        session.tick(dt)
        if clicked:
            session.fire(x, y)
        draw(session.snapshot())
"""

import random
from typing import List, Optional

from aps.events import SessionEvent, SessionEventKind
from aps.highscore import HighScoreStore, MemoryHighScoreStore
from aps.logging import emit_record, get_logger
from aps.scheduler import EventScheduler, IntervalTimer
from models import (
    EndReason,
    FinalSummary,
    RunState,
    ScoreData,
    SessionConfig,
    SessionSnapshot,
    TargetView,
)
from games.ArcheryPop.hit_resolver import resolve_hit
from games.ArcheryPop.scoring import ScoreKeeper
from games.ArcheryPop.session_clock import SessionClock
from games.ArcheryPop.target_pool import Spawner, TargetPool

log = get_logger('session')


class ArcheryPopSession:
    """
    One Archery Pop session.

    Args:
        config: Engine configuration (defaults to the classic rules)
        highscore_store: Best-score collaborator (defaults to in-memory)
        rng: Random source for target placement

    Examples:
        >>> session = ArcheryPopSession(rng=random.Random(1))
        >>> session.start("")
        False
        >>> session.start("Robin")
        True
        >>> session.get_run_state()
        <RunState.PLAYING: 'playing'>
        >>> len(session.get_visible_targets())
        2
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        highscore_store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
    ):
        self._config = config if config is not None else SessionConfig()
        self._store = (highscore_store if highscore_store is not None
                       else MemoryHighScoreStore(key=self._config.highscore_key))

        self._pool = TargetPool(self._config, rng)
        self._spawner = Spawner(self._pool, self._config.spawn_interval_ms)
        self._clock = SessionClock(self._config.initial_time)
        self._scores = ScoreKeeper.fresh(self._config.initial_lives)

        self._scheduler = EventScheduler()

        self._run_state = RunState.MENU
        self._player_name = ""
        self._high_score = self._store.load()
        self._summary: Optional[FinalSummary] = None
        self._physics_ticks = 0

    # =========================================================================
    # Commands
    # =========================================================================

    def start(self, player_name: str) -> bool:
        """Begin a new session from MENU or GAME_OVER.

        Args:
            player_name: Required; blank names are refused

        Returns:
            True if the session started
        """
        if self._run_state not in (RunState.MENU, RunState.GAME_OVER):
            return False
        name = (player_name or "").strip()
        if not name:
            log.debug("Refusing to start without a player name")
            return False

        self._stop_timers()
        self._reset_session()
        self._player_name = name

        for _ in range(self._config.initial_targets):
            self._pool.spawn()
        self._pool.ensure_minimum()

        self._set_state(RunState.PLAYING)
        self._start_timers()
        emit_record('session', {
            'type': 'start',
            'player': name,
            'lives': self._config.initial_lives,
            'time': self._config.initial_time,
        })
        return True

    def pause(self) -> bool:
        """Freeze a running session. Counters are kept."""
        if self._run_state != RunState.PLAYING:
            return False
        self._stop_timers()
        self._set_state(RunState.PAUSED)
        return True

    def resume(self) -> bool:
        """Continue a paused session where it left off."""
        if self._run_state != RunState.PAUSED:
            return False
        self._set_state(RunState.PLAYING)
        self._start_timers()
        return True

    def toggle_pause(self) -> bool:
        """Pause when playing, resume when paused."""
        if self._run_state == RunState.PLAYING:
            return self.pause()
        return self.resume()

    def quit(self) -> bool:
        """Abandon a paused or finished session and return to the menu.

        The score is discarded; nothing is persisted.
        """
        if self._run_state not in (RunState.PAUSED, RunState.GAME_OVER):
            return False
        self._stop_timers()
        self._reset_session()
        self._player_name = ""
        self._set_state(RunState.MENU)
        return True

    def fire(self, x: float, y: float) -> bool:
        """Shoot at a playfield point.

        The topmost live target under the point is struck. Missing costs
        nothing. The population is topped up either way.

        Args:
            x: Aim x, already clamped to the board by the caller
            y: Aim y, already clamped to the board by the caller

        Returns:
            True if a target was struck
        """
        if self._run_state != RunState.PLAYING:
            return False

        struck = resolve_hit(self._pool.targets, x, y)
        if struck is not None:
            self._pool.replace(struck.mark_hit())
            self._scores = self._scores.record_hit(self._config.hit_points)
            log.debug("Hit target %d at (%.0f, %.0f)", struck.target_id, x, y)
        else:
            self._scores = self._scores.record_miss()

        self._pool.ensure_minimum()
        return struck is not None

    def reset_highscore(self) -> bool:
        """Forget the stored best score."""
        self._store.reset()
        self._high_score = 0
        log.info("High score reset")
        return True

    # =========================================================================
    # Time sources
    # =========================================================================

    def tick(self, dt: float) -> None:
        """Advance wall-clock time by one rendered frame.

        Runs every timer that came due during dt and, unless a fixed physics
        rate is configured, exactly one physics step.

        Args:
            dt: Seconds since the previous frame
        """
        if self._run_state != RunState.PLAYING:
            return

        events = self._scheduler.advance(dt * 1000.0)
        if self._config.physics_rate is None:
            events.append(SessionEvent(kind=SessionEventKind.FRAME, due_ms=self._scheduler.now_ms))
            events.sort(key=lambda e: e.sort_key)

        for event in events:
            self.dispatch(event)

    def dispatch(self, event: SessionEvent) -> bool:
        """Apply one session event.

        Events arriving after the session left PLAYING (for example the
        rest of a batch that ended the game) are ignored.

        Returns:
            True if the event was applied
        """
        if self._run_state != RunState.PLAYING:
            return False
        if event.kind == SessionEventKind.FRAME:
            return self.advance()
        if event.kind == SessionEventKind.SPAWN:
            self.spawn_tick()
            return True
        if event.kind == SessionEventKind.CLOCK:
            return self.clock_tick()
        return False

    def advance(self, dt: Optional[float] = None) -> bool:
        """Run one physics tick.

        Each live target falls fall_speed units, newest first. A target past
        the floor escapes and costs the penalty and a life; losing the last
        life ends the session immediately and skips the remaining targets.

        Args:
            dt: Ignored; a tick is a fixed step, see SessionConfig.physics_rate

        Returns:
            True if the tick was applied
        """
        if self._run_state != RunState.PLAYING:
            return False

        self._pool.sweep()
        for target in self._pool.newest_first():
            moved = target.fall(self._config.fall_speed)
            if not moved.has_escaped(self._config.board_height):
                self._pool.replace(moved)
                continue

            self._pool.replace(moved.mark_escaped())
            self._scores = self._scores.record_escape(self._config.escape_penalty)
            log.debug("Target %d escaped, lives=%d",
                      target.target_id, self._scores.get_stats().lives)
            if self._scores.is_out_of_lives:
                self._end(EndReason.LIVES_EXHAUSTED)
                return True

        self._pool.ensure_minimum()
        self._physics_ticks += 1
        return True

    def spawn_tick(self) -> bool:
        """Handle one spawner period.

        Returns:
            True if a target was spawned (False when full or not playing)
        """
        if self._run_state != RunState.PLAYING:
            return False
        spawned = self._spawner.on_period() is not None
        self._pool.ensure_minimum()
        return spawned

    def clock_tick(self) -> bool:
        """Handle one second of session time; ends the session at zero.

        Returns:
            True if the tick was applied
        """
        if self._run_state != RunState.PLAYING:
            return False
        if self._clock.tick():
            self._end(EndReason.TIME_UP)
        return True

    # =========================================================================
    # Read-only surface
    # =========================================================================

    def get_score(self) -> int:
        return self._scores.get_stats().score

    def get_lives(self) -> int:
        return self._scores.get_stats().lives

    def get_time_remaining(self) -> int:
        return self._clock.time_remaining

    def get_visible_targets(self) -> List[TargetView]:
        """Live targets in spawn order."""
        return [TargetView(x=t.x, y=t.y, size=t.size) for t in self._pool.live_targets]

    def get_run_state(self) -> RunState:
        return self._run_state

    def get_final_summary(self) -> Optional[FinalSummary]:
        """Final score and high-score verdict; None unless in GAME_OVER."""
        if self._run_state != RunState.GAME_OVER:
            return None
        return self._summary

    def get_high_score(self) -> int:
        return self._high_score

    def get_stats(self) -> ScoreData:
        return self._scores.get_stats()

    @property
    def player_name(self) -> str:
        return self._player_name

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def pool(self) -> TargetPool:
        return self._pool

    @property
    def active_timers(self) -> List[IntervalTimer]:
        """Timer handles currently allocated (empty unless PLAYING)."""
        return self._scheduler.active_timers

    @property
    def physics_ticks(self) -> int:
        return self._physics_ticks

    def snapshot(self) -> SessionSnapshot:
        """Everything the renderer needs, frozen at this instant."""
        return SessionSnapshot(
            run_state=self._run_state,
            player_name=self._player_name,
            score=self.get_score(),
            lives=self.get_lives(),
            time_remaining=self.get_time_remaining(),
            high_score=self._high_score,
            targets=tuple(self.get_visible_targets()),
            summary=self.get_final_summary(),
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _set_state(self, state: RunState) -> None:
        if state != self._run_state:
            log.info("%s -> %s", self._run_state.value, state.value)
        self._run_state = state

    def _reset_session(self) -> None:
        self._pool.clear()
        self._spawner.reset()
        self._clock.reset()
        self._scores = ScoreKeeper.fresh(self._config.initial_lives)
        self._summary = None
        self._physics_ticks = 0

    def _start_timers(self) -> None:
        """Allocate fresh handles, each a full period away."""
        self._stop_timers()
        self._scheduler.schedule_interval(SessionEventKind.SPAWN, self._spawner.interval_ms)
        self._scheduler.schedule_interval(SessionEventKind.CLOCK, self._config.clock_period_ms)
        step_ms = self._config.physics_step_ms
        if step_ms is not None:
            self._scheduler.schedule_interval(SessionEventKind.FRAME, step_ms)

    def _stop_timers(self) -> None:
        self._scheduler.cancel_all()

    def _end(self, reason: EndReason) -> None:
        """Transition PLAYING -> GAME_OVER and settle the high score."""
        self._stop_timers()

        stats = self._scores.get_stats()
        previous_best = self._store.load()
        is_new_highscore = stats.score > previous_best
        if is_new_highscore:
            self._store.save(stats.score)
            self._high_score = stats.score
        else:
            self._high_score = previous_best

        self._summary = FinalSummary(
            player_name=self._player_name,
            score=stats.score,
            is_new_highscore=is_new_highscore,
            high_score=self._high_score,
            reason=reason,
            hits=stats.hits,
            misses=stats.misses,
            escapes=stats.escapes,
            accuracy=stats.accuracy,
        )
        self._set_state(RunState.GAME_OVER)
        log.info("Game over (%s): %s scored %d", reason.value, self._player_name, stats.score)
        emit_record('session', {'type': 'game_over', **self._summary.model_dump(mode='json')})
