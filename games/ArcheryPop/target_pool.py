"""
Target population management for Archery Pop.

TargetPool owns every target of a session: it assigns identities, enforces
the [min_targets, max_targets] population bounds and drops dead entries.
Spawner is the periodic source that asks the pool for a new target each
spawn interval.

Notes
- Dead targets (hit or escaped) stay in the pool until the next sweep(), so
  nothing is removed from the list while a scan is walking it.
- Identities come from a per-pool counter, reset with the pool.
"""

import random
from typing import List, Optional

from aps.logging import get_logger
from models import SessionConfig, TargetData, Point2D
from games.ArcheryPop.target import Target

log = get_logger('target_pool')


class TargetPool:
    """
    Owns the live targets of one session.

    Args:
        config: Session configuration (board size, target size, bounds)
        rng: Random source for spawn placement (seed it for deterministic tests)

    Examples:
        >>> pool = TargetPool(SessionConfig(), rng=random.Random(7))
        >>> pool.spawn() is not None
        True
        >>> pool.live_count
        1
    """

    def __init__(self, config: SessionConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng if rng is not None else random.Random()
        self._targets: List[Target] = []
        self._next_id = 1

    # ------------------------------- Queries -----------------------------------------

    @property
    def targets(self) -> List[Target]:
        """All targets still held, dead ones included, in spawn order."""
        return list(self._targets)

    @property
    def live_targets(self) -> List[Target]:
        """Live targets in spawn order (oldest first)."""
        return [t for t in self._targets if t.is_active]

    @property
    def live_count(self) -> int:
        return sum(1 for t in self._targets if t.is_active)

    def newest_first(self) -> List[Target]:
        """Live targets, most recently spawned first (topmost first on screen)."""
        return [t for t in reversed(self._targets) if t.is_active]

    # ------------------------------- Mutation ----------------------------------------

    def spawn(self, x: Optional[float] = None, y: Optional[float] = None) -> Optional[Target]:
        """Create one target unless the population is already at its cap.

        Placement defaults to a random x within the board and a y above the
        visible top edge by a random offset, so simultaneous spawns do not
        fall in lockstep.

        Args:
            x: Explicit left edge (random if None)
            y: Explicit top edge (random above the board if None)

        Returns:
            The new Target, or None when the pool is full
        """
        if self.live_count >= self._config.max_targets:
            return None

        size = self._config.target_size
        if x is None:
            x = self._rng.uniform(0, self._config.board_width - size)
        if y is None:
            y = -size - self._rng.uniform(0, self._config.spawn_offset_max)

        target = Target(TargetData(
            target_id=self._next_id,
            position=Point2D(x=x, y=y),
            size=size,
        ))
        self._next_id += 1
        self._targets.append(target)
        log.debug("Spawned target %d at (%.1f, %.1f)", target.target_id, x, y)
        return target

    def ensure_minimum(self) -> int:
        """Spawn until at least min_targets are alive.

        The loop is bounded by the cap, so a pool whose minimum can never be
        reached gives up instead of spinning.

        Returns:
            Number of targets spawned
        """
        spawned = 0
        attempts = self._config.max_targets + 1
        while self.live_count < self._config.min_targets and attempts > 0:
            attempts -= 1
            if self.spawn() is None:
                break
            spawned += 1

        if self.live_count < self._config.min_targets:
            log.warning(
                "Population %d below minimum %d after top-up",
                self.live_count, self._config.min_targets,
            )
        return spawned

    def replace(self, target: Target) -> None:
        """Swap in a new version of a held target (matched by id)."""
        for index, held in enumerate(self._targets):
            if held.target_id == target.target_id:
                self._targets[index] = target
                return
        raise KeyError(f"Target {target.target_id} is not in the pool")

    def sweep(self) -> int:
        """Drop dead targets.

        Returns:
            Number of targets removed
        """
        before = len(self._targets)
        self._targets = [t for t in self._targets if t.is_active]
        return before - len(self._targets)

    def clear(self) -> None:
        """Remove every target and restart identities at 1."""
        self._targets = []
        self._next_id = 1


class Spawner:
    """
    Periodic spawn source.

    The spawner does not keep time itself: its period is driven by a
    wall-clock timer owned by the session, so it neither speeds up nor stalls
    when the frame rate changes.

    Attributes:
        interval_ms: Period between spawn requests
        requests: Spawn requests issued this session
        spawned: Requests that produced a target (the rest hit the cap)
    """

    def __init__(self, pool: TargetPool, interval_ms: float):
        self._pool = pool
        self.interval_ms = interval_ms
        self.requests = 0
        self.spawned = 0

    def on_period(self) -> Optional[Target]:
        """Handle one elapsed spawn period.

        Returns:
            The new Target, or None if the pool was full
        """
        self.requests += 1
        target = self._pool.spawn()
        if target is not None:
            self.spawned += 1
        return target

    def reset(self) -> None:
        self.requests = 0
        self.spawned = 0
