"""Directions and the single-slot direction mailbox."""

import enum
import logging

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Unit steps on the grid; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return _OPPOSITES[self]

    @property
    def label(self):
        """Compact lowercase name for HUD and log output."""
        return self.name.lower()


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class DirectionArbiter:
    """Resolves raw steering requests into the direction used each tick.

    The mailbox is either empty or holds one queued direction. A new valid
    request replaces whatever is queued (latest wins). The last accepted
    request also becomes the rollover direction, committed on ticks that
    find the mailbox empty.
    """

    def __init__(self, initial=Direction.RIGHT):
        self.committed = initial
        self._rollover = initial
        self._queued = None

    @property
    def queued(self):
        """The pending direction, or None when the mailbox is empty."""
        return self._queued

    def request(self, direction):
        """Queue a direction; reversals of the committed one are ignored."""
        if direction is self.committed.opposite:
            logger.debug("Ignoring reversal %s while moving %s", direction.label, self.committed.label)
            return False
        self._queued = direction
        self._rollover = direction
        return True

    def commit(self):
        """Hand the direction for this tick to the engine and empty the mailbox."""
        if self._queued is not None:
            self.committed = self._queued
            self._queued = None
        else:
            self.committed = self._rollover
        return self.committed
