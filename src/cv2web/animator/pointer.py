"""
Pointer state and motion trail.

Event handlers are the only writers (``move``, ``enter``, ``leave``); the
frame tick reads through ``expire`` and ``points``.
"""

import math
from dataclasses import dataclass, field

TRAIL_TTL = 0.15  # Seconds a trail point stays live
IDLE_TIMEOUT = 0.1  # Seconds without motion before the trail is dropped
TRAIL_STEP = 10.0  # Pixels between interpolated samples


@dataclass
class TrailPoint:
    x: float
    y: float
    timestamp: float
    strength: float


@dataclass
class PointerState:
    x: float | None = None
    y: float | None = None
    prev_x: float | None = None
    prev_y: float | None = None
    last_move: float = 0.0

    @property
    def position(self) -> tuple[float, float] | None:
        if self.x is None:
            return None
        return (self.x, self.y)


@dataclass
class PointerTracker:
    """Owns the pointer state and its interpolated trail."""
    state: PointerState = field(default_factory=PointerState)
    trail: list[TrailPoint] = field(default_factory=list)
    hovering: bool = False
    _seeded: bool = False

    def move(self, x: float, y: float, now: float) -> int:
        """
        Record a pointer move.

        The first move only seeds the position. Later moves fill the gap to
        the previous position with samples every ``TRAIL_STEP`` pixels so fast
        motion still leaves a dense trail.

        Returns:
            Number of trail points appended.
        """
        s = self.state
        s.last_move = now

        if not self._seeded:
            s.x = s.prev_x = x
            s.y = s.prev_y = y
            self._seeded = True
            return 0

        s.prev_x, s.prev_y = s.x, s.y
        s.x, s.y = x, y

        vel_x = x - s.prev_x
        vel_y = y - s.prev_y
        speed = math.hypot(vel_x, vel_y)
        steps = max(1, math.ceil(speed / TRAIL_STEP))
        strength = min(speed / TRAIL_STEP, 1.0)

        for i in range(steps):
            t = i / steps
            self.trail.append(TrailPoint(
                x=s.prev_x + vel_x * t,
                y=s.prev_y + vel_y * t,
                timestamp=now,
                strength=strength,
            ))

        self.purge(now)
        return steps

    def enter(self, now: float):
        self.hovering = True
        self.state.last_move = now

    def leave(self):
        # Position is kept; the idle timeout retires the trail
        self.hovering = False

    def purge(self, now: float):
        """Drop trail points that have outlived ``TRAIL_TTL``."""
        self.trail = [p for p in self.trail if now - p.timestamp < TRAIL_TTL]

    def is_idle(self, now: float) -> bool:
        return now - self.state.last_move >= IDLE_TIMEOUT

    def expire(self, now: float) -> list[TrailPoint]:
        """
        Frame-side trail maintenance.

        Clears the whole trail once the pointer has been idle, otherwise
        purges stale points. Returns the points that remain live.
        """
        if self.is_idle(now):
            self.trail = []
        else:
            self.purge(now)
        return self.trail
