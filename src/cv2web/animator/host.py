"""
Hosts supply the animator with a drawing surface, pointer events, a
resize observer and a request-next-frame scheduler.

``SurfaceHost`` is headless and driven by hand (tests, GIF capture);
``PygameHost`` wraps a resizable window and pumps the real event loop.
"""

import time
from typing import Callable, Protocol

import numpy as np
import pygame

EVENT_KINDS = ("move", "enter", "leave")


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...


class ManualScheduler:
    """
    Request-next-frame queue.

    Callbacks requested while a frame is running are deferred to the next
    ``run_frame`` call, so a callback that re-requests itself runs once per
    frame.
    """

    def __init__(self):
        self._pending: dict[int, Callable[[], None]] = {}
        self._next_handle = 1

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self) -> int:
        """Run every callback queued before this call. Returns how many ran."""
        due = self._pending
        self._pending = {}
        for callback in due.values():
            callback()
        return len(due)


class FrameClock:
    """Clock that only moves when told to, for deterministic playback."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class ResizeObservation:
    """Handle returned by ``observe_resize``; ``disconnect`` stops delivery."""

    def __init__(self, host: "SurfaceHost", callback: Callable[[float, float], None]):
        self._host = host
        self.callback = callback

    def disconnect(self):
        if self._host is not None:
            self._host._observers.discard(self)
            self._host = None


class SurfaceHost:
    """Headless host backed by an off-screen ``pygame.Surface``."""

    def __init__(self, width: int, height: int, scheduler: FrameScheduler | None = None):
        self.width = width
        self.height = height
        self.scheduler = scheduler or ManualScheduler()
        self.surface: pygame.Surface | None = self._make_surface(width, height)
        self._listeners: dict[str, list[Callable]] = {kind: [] for kind in EVENT_KINDS}
        self._observers: set[ResizeObservation] = set()

    def _make_surface(self, width: int, height: int) -> pygame.Surface | None:
        if width <= 0 or height <= 0:
            return None
        return pygame.Surface((width, height))

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def add_listener(self, kind: str, handler: Callable):
        self._listeners[kind].append(handler)

    def remove_listener(self, kind: str, handler: Callable):
        if handler in self._listeners[kind]:
            self._listeners[kind].remove(handler)

    @property
    def listener_count(self) -> int:
        return sum(len(handlers) for handlers in self._listeners.values())

    def observe_resize(self, callback: Callable[[float, float], None]) -> ResizeObservation:
        observation = ResizeObservation(self, callback)
        self._observers.add(observation)
        return observation

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def dispatch(self, kind: str, *args):
        for handler in list(self._listeners[kind]):
            handler(*args)

    def resize(self, width: int, height: int):
        """Change the container size and notify observers."""
        self.width = width
        self.height = height
        self.surface = self._make_surface(width, height)
        for observation in list(self._observers):
            observation.callback(width, height)

    def run_frame(self) -> int:
        return self.scheduler.run_frame()


class PygameHost(SurfaceHost):
    """Resizable pygame window; one scheduler frame per display refresh."""

    def __init__(self, width: int, height: int, fps: int = 60, title: str = "cv2web"):
        pygame.init()
        pygame.display.set_caption(title)
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._running = False
        super().__init__(width, height)

    def _make_surface(self, width: int, height: int) -> pygame.Surface | None:
        if width <= 0 or height <= 0:
            return None
        return pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def _pump_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.MOUSEMOTION:
                self.dispatch("move", float(event.pos[0]), float(event.pos[1]))
            elif event.type == pygame.WINDOWENTER:
                self.dispatch("enter")
            elif event.type == pygame.WINDOWLEAVE:
                self.dispatch("leave")
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._running = False

    def run(self, max_seconds: float | None = None):
        """Run until the window closes (or ``max_seconds`` elapse)."""
        self._running = True
        started = time.monotonic()
        try:
            while self._running:
                # Events first, so their state is visible to this frame
                self._pump_events()
                if not self._running:
                    break
                self.run_frame()
                pygame.display.flip()
                self.clock.tick(self.fps)
                if max_seconds is not None and time.monotonic() - started >= max_seconds:
                    break
        finally:
            pygame.quit()


def surface_to_array(surface: pygame.Surface) -> np.ndarray:
    """Convert a pygame surface to an (H, W, 3) uint8 array."""
    # pygame uses (width, height) but numpy expects (height, width)
    arr = pygame.surfarray.array3d(surface)
    return np.transpose(arr, (1, 0, 2))
