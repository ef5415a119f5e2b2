"""
Dot-field animator.

Turns a decoded photo into a halftone field of dots that scatter away from
the pointer's recent path and spring back once it passes:
- Image brightness → dot diameter
- Bright cells → chance of accent color
- Pointer trail → smoothstep repulsion inside a noise-roughened radius
- Pointer proximity → twinkling opacity
"""

import time
from typing import Callable

import numpy as np
import pygame
import pygame.gfxdraw
from PIL import Image

from cv2web.animator.config import DotFieldConfig, parse_color
from cv2web.animator.field import DotField, step
from cv2web.animator.noise import NoiseFn, get_noise
from cv2web.animator.pointer import PointerTracker
from cv2web.animator.sampling import build_field

RESIZE_THRESHOLD = 5  # Pixels; smaller layout jitter is ignored


class DotFieldAnimator:
    """
    Renders a pointer-reactive halftone of an image onto a host surface.

    Lifecycle: ``mount`` samples the image, attaches the pointer listeners
    and the resize observer, then ``start``s the frame loop. ``unmount``
    releases all of it together.
    """

    def __init__(
        self,
        config: DotFieldConfig | None = None,
        noise: NoiseFn | None = None,
        clock: Callable[[], float] = time.monotonic,
        seed: int | None = None,
    ):
        self.cfg = config or DotFieldConfig()
        self.noise = noise or get_noise(self.cfg.noise)
        self.clock = clock
        self.rng = np.random.default_rng(seed)

        self.accent_rgb = parse_color(self.cfg.accent_color)
        self.dot_rgb = parse_color(self.cfg.dot_color)
        self.background_rgb = parse_color(self.cfg.background_color)
        self.clear_rgb = parse_color(self.cfg.clear_color)

        # State
        self.dots = DotField()
        self.pointer = PointerTracker()
        self.cell_size = 0.0
        self.width = 0
        self.height = 0
        self.frame_count = 0
        self.regenerations = 0

        self.host = None
        self.image: Image.Image | None = None
        self._frame_handle: int | None = None
        self._observation = None
        self._handlers = {
            "move": self.handle_move,
            "enter": self.handle_enter,
            "leave": self.handle_leave,
        }

    @property
    def mounted(self) -> bool:
        return self.host is not None

    @property
    def running(self) -> bool:
        return self._frame_handle is not None

    def mount(self, host, image: Image.Image | None) -> bool:
        """
        Attach to ``host`` and start animating ``image``.

        Without a surface or an image there is nothing to draw: the call is
        a no-op and returns False.
        """
        if self.mounted:
            self.unmount()
        if host is None or image is None or getattr(host, "surface", None) is None:
            return False

        self.host = host
        self.image = image
        self.width, self.height = host.size
        self.regenerate()

        for kind, handler in self._handlers.items():
            host.add_listener(kind, handler)
        self._observation = host.observe_resize(self.handle_resize)

        self.start()
        return True

    def unmount(self):
        """Cancel the pending frame and detach every listener and observer."""
        if not self.mounted:
            return
        self.stop()
        for kind, handler in self._handlers.items():
            self.host.remove_listener(kind, handler)
        if self._observation is not None:
            self._observation.disconnect()
            self._observation = None
        self.host = None

    def start(self):
        if not self.mounted or self.running:
            return
        self._frame_handle = self.host.scheduler.request_frame(self._tick)

    def stop(self):
        if self._frame_handle is not None:
            self.host.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def _tick(self):
        self._frame_handle = None
        self.render_frame()
        if self.mounted:
            self._frame_handle = self.host.scheduler.request_frame(self._tick)

    def regenerate(self) -> bool:
        """Resample the image for the current size, replacing every dot."""
        if self.image is None or self.width <= 0 or self.height <= 0:
            return False

        self.dots, self.cell_size = build_field(
            self.image,
            self.width,
            self.height,
            self.cfg.halftone_size,
            self.cfg.contrast,
            self.rng,
            pixel_ratio=self.cfg.pixel_ratio,
            accent_probability=self.cfg.accent_probability,
            size_variation=self.cfg.size_variation,
        )
        self.regenerations += 1

        # Never show the raw photo, only the dots
        surface = self._surface()
        if surface is not None:
            surface.fill(self.clear_rgb)
        return True

    def _surface(self) -> pygame.Surface | None:
        return self.host.surface if self.host is not None else None

    # Event handlers

    def handle_move(self, x: float, y: float):
        self.pointer.move(x, y, self.clock())

    def handle_enter(self):
        self.pointer.enter(self.clock())

    def handle_leave(self):
        self.pointer.leave()

    def handle_resize(self, width: float, height: float) -> bool:
        """Regenerate when the container moved by more than ``RESIZE_THRESHOLD`` px."""
        if width <= 0 or height <= 0:
            return False
        if abs(width - self.width) <= RESIZE_THRESHOLD and abs(height - self.height) <= RESIZE_THRESHOLD:
            return False
        self.width = width
        self.height = height
        return self.regenerate()

    # Frame

    def update(self, now: float | None = None) -> DotField:
        """Advance physics by one frame without drawing."""
        now = self.clock() if now is None else now
        trail = self.pointer.expire(now)
        return step(
            self.dots,
            trail,
            self.pointer.state.position,
            now,
            mouse_radius=self.cfg.mouse_radius,
            repulsion_strength=self.cfg.repulsion_strength,
            return_speed=self.cfg.return_speed,
            noise=self.noise,
        )

    def render_frame(self, now: float | None = None) -> pygame.Surface | None:
        """Repaint the background, advance the field and draw every dot."""
        surface = self._surface()
        if surface is None:
            return None

        surface.fill(self.background_rgb)
        self.update(now)
        self.draw(surface)
        self.frame_count += 1
        return surface

    def draw(self, surface: pygame.Surface):
        dots = self.dots
        true_radii = dots.radii
        radii = np.maximum(1, np.rint(true_radii)).astype(int)
        xs = np.rint(dots.x).astype(int)
        ys = np.rint(dots.y).astype(int)

        # Sub-pixel dots become one pixel whose alpha is the dot's area
        subpixel = true_radii < 1.0
        coverage = np.where(subpixel, np.minimum(1.0, np.pi * true_radii ** 2), 1.0)
        alphas = np.rint(np.clip(dots.opacity, 0.0, 1.0) * coverage * 255).astype(int)

        for x, y, r, alpha, accent, small in zip(
            xs.tolist(), ys.tolist(), radii.tolist(), alphas.tolist(), dots.is_accent.tolist(), subpixel.tolist()
        ):
            rgb = self.accent_rgb if accent else self.dot_rgb
            if alpha <= 0:
                continue
            if small:
                pygame.gfxdraw.pixel(surface, x, y, (*rgb, alpha))
            elif alpha >= 255:
                pygame.draw.circle(surface, rgb, (x, y), r)
            else:
                pygame.gfxdraw.filled_circle(surface, x, y, r, (*rgb, alpha))
