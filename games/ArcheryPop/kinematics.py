"""
Archery Pop - Fall kinematics.

Targets fall a fixed distance per physics tick. One tick is one frame of a
fixed-rate renderer, so the speed is expressed in units per tick rather than
units per second. Callers that want frame-rate independence drive ticks at a
fixed rate (see SessionConfig.physics_rate) instead of changing this model.
"""


def fall(y: float, speed: float) -> float:
    """Vertical position after one physics tick.

    Args:
        y: Current top edge of the target
        speed: Units per tick (positive = downward)

    Returns:
        New top edge

    Examples:
        >>> fall(-80.0, 3)
        -77.0
    """
    return y + speed


def position_after(y0: float, ticks: int, speed: float) -> float:
    """Vertical position after a number of physics ticks.

    Examples:
        >>> position_after(-80.0, 40, 3)
        40.0
    """
    return y0 + speed * max(0, ticks)


def has_escaped(y: float, floor: float) -> bool:
    """True once the target's top edge is past the bottom of the board."""
    return y > floor
