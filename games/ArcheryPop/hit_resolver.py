"""
Hit resolution for Archery Pop.

Decides which target, if any, a shot at an aim point strikes. Later spawns
are drawn on top of earlier ones, so candidates are scanned newest-first and
the first bounding square containing the point wins. At most one target is
struck per shot.
"""

from typing import Optional, Sequence

from games.ArcheryPop.target import Target


def resolve_hit(targets: Sequence[Target], x: float, y: float) -> Optional[Target]:
    """Find the topmost live target under an aim point.

    Args:
        targets: Targets in spawn order (oldest first); dead ones are skipped
        x: Aim x in playfield units
        y: Aim y in playfield units

    Returns:
        The struck target, or None on a miss

    Examples:
        >>> from models import Point2D, TargetData
        >>> a = Target(TargetData(target_id=1, position=Point2D(x=0.0, y=0.0), size=80.0))
        >>> b = Target(TargetData(target_id=2, position=Point2D(x=40.0, y=40.0), size=80.0))
        >>> resolve_hit([a, b], 60.0, 60.0).target_id
        2
        >>> resolve_hit([a, b], 500.0, 500.0) is None
        True
    """
    for target in reversed(targets):
        if target.is_active and target.contains_point(x, y):
            return target
    return None
