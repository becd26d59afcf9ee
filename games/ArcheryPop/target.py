"""
Target class for Archery Pop.

This module provides the Target class which wraps TargetData in an immutable,
functional style. All state updates create new Target instances rather than
mutating existing ones; the TargetPool swaps them in.
"""

from models import TargetData, Point2D, TargetState
from games.ArcheryPop import kinematics


class Target:
    """Immutable falling target.

    Attributes:
        data: The underlying TargetData model (immutable)

    Examples:
        >>> from models import Point2D, TargetData
        >>> target = Target(TargetData(target_id=1, position=Point2D(x=10.0, y=-80.0), size=80.0))
        >>> target.fall(3).y
        -77.0
        >>> target.y  # Original unchanged
        -80.0
    """

    def __init__(self, data: TargetData):
        self._data = data

    @property
    def data(self) -> TargetData:
        return self._data

    @property
    def target_id(self) -> int:
        return self._data.target_id

    @property
    def x(self) -> float:
        return self._data.position.x

    @property
    def y(self) -> float:
        return self._data.position.y

    @property
    def size(self) -> float:
        return self._data.size

    @property
    def state(self) -> TargetState:
        return self._data.state

    @property
    def is_active(self) -> bool:
        """True while the target is falling and can be hit."""
        return self._data.is_active

    def fall(self, speed: float) -> 'Target':
        """Advance one physics tick.

        Args:
            speed: Units per tick

        Returns:
            New Target instance one step lower
        """
        return self._replace(position=Point2D(x=self.x, y=kinematics.fall(self.y, speed)))

    def has_escaped(self, floor: float) -> bool:
        """Check if the target has fallen past the bottom edge.

        Args:
            floor: Playfield height
        """
        return kinematics.has_escaped(self.y, floor)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside the target's bounding square (edges included).

        Examples:
            >>> from models import Point2D, TargetData
            >>> target = Target(TargetData(target_id=1, position=Point2D(x=0.0, y=0.0), size=80.0))
            >>> target.contains_point(80.0, 80.0)
            True
            >>> target.contains_point(80.5, 10.0)
            False
        """
        return self._data.get_bounds().contains_point(Point2D(x=x, y=y))

    def mark_hit(self) -> 'Target':
        """Return a copy in the HIT state."""
        return self._replace(state=TargetState.HIT)

    def mark_escaped(self) -> 'Target':
        """Return a copy in the ESCAPED state."""
        return self._replace(state=TargetState.ESCAPED)

    def _replace(self, **changes) -> 'Target':
        return Target(self._data.model_copy(update=changes))

    def __str__(self) -> str:
        return f"Target({self._data})"

    def __repr__(self) -> str:
        return self.__str__()
