"""
Particle field and per-frame physics for the dot-field animator.

Particles are stored column-wise (one numpy array per attribute) so a frame
is a handful of vectorized passes instead of a Python loop over every dot.
"""

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from cv2web.animator.noise import NoiseFn, value_noise

NOISE_FREQUENCY = 0.02
TRAIL_REACH = 1.5  # Trail points further than this many radii are skipped
MIN_PUSH_DISTANCE = 0.1
FORCE_DAMPING = 0.5
RETURN_SCALE = 0.1
VELOCITY_DAMPING = 0.85


@dataclass
class Particle:
    """Snapshot of a single halftone dot."""
    x: float
    y: float
    base_x: float
    base_y: float
    base_size: float
    brightness: float
    is_accent: bool
    size_multiplier: float
    twinkle_phase: float
    twinkle_speed: float
    vx: float = 0.0
    vy: float = 0.0


def _zeros() -> np.ndarray:
    return np.zeros(0, dtype=np.float64)


@dataclass
class DotField:
    """Column store for every particle on the surface."""
    x: np.ndarray = field(default_factory=_zeros)
    y: np.ndarray = field(default_factory=_zeros)
    base_x: np.ndarray = field(default_factory=_zeros)
    base_y: np.ndarray = field(default_factory=_zeros)
    base_size: np.ndarray = field(default_factory=_zeros)
    brightness: np.ndarray = field(default_factory=_zeros)
    is_accent: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=bool))
    size_multiplier: np.ndarray = field(default_factory=_zeros)
    twinkle_phase: np.ndarray = field(default_factory=_zeros)
    twinkle_speed: np.ndarray = field(default_factory=_zeros)
    vx: np.ndarray = field(default_factory=_zeros)
    vy: np.ndarray = field(default_factory=_zeros)

    # Render state written by ``step``
    opacity: np.ndarray = field(default_factory=_zeros)
    twinkling: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=bool))

    def __post_init__(self):
        n = len(self.base_x)
        if len(self.opacity) != n:
            self.opacity = np.ones(n, dtype=np.float64)
        if len(self.twinkling) != n:
            self.twinkling = np.zeros(n, dtype=bool)

    def __len__(self) -> int:
        return len(self.base_x)

    @property
    def radii(self) -> np.ndarray:
        """Drawn circle radius of every dot."""
        return self.base_size * self.size_multiplier / 2

    def particles(self) -> list[Particle]:
        """Materialize the column store as ``Particle`` records."""
        return [
            Particle(
                x=float(self.x[i]),
                y=float(self.y[i]),
                base_x=float(self.base_x[i]),
                base_y=float(self.base_y[i]),
                base_size=float(self.base_size[i]),
                brightness=float(self.brightness[i]),
                is_accent=bool(self.is_accent[i]),
                size_multiplier=float(self.size_multiplier[i]),
                twinkle_phase=float(self.twinkle_phase[i]),
                twinkle_speed=float(self.twinkle_speed[i]),
                vx=float(self.vx[i]),
                vy=float(self.vy[i]),
            )
            for i in range(len(self))
        ]


def smoothstep_falloff(distance, radius):
    """
    Proximity weight ``d²(3 - 2d)`` with ``d = 1 - distance / radius``.

    Zero at or beyond ``radius``, one at distance zero.
    """
    distance = np.asarray(distance, dtype=np.float64)
    radius = np.asarray(radius, dtype=np.float64)
    safe_radius = np.where(radius > 0, radius, 1.0)
    d = 1.0 - distance / safe_radius
    f = d * d * (3.0 - 2.0 * d)
    return np.where(distance < radius, f, 0.0)


def interaction_radius(dots: DotField, mouse_radius: float, time: float, noise: NoiseFn = value_noise) -> np.ndarray:
    """Noise-perturbed pointer radius (±30%) at every dot's rest position."""
    n = noise(dots.base_x, dots.base_y, NOISE_FREQUENCY, time)
    return mouse_radius * (0.7 + np.asarray(n, dtype=np.float64) * 0.6)


def step(
    dots: DotField,
    trail: Iterable,
    pointer: tuple[float, float] | None,
    time: float,
    mouse_radius: float,
    repulsion_strength: float,
    return_speed: float,
    noise: NoiseFn = value_noise,
) -> DotField:
    """
    Advance the field by one frame.

    Args:
        dots: Particle store, updated in place.
        trail: Live trail points (objects with ``x``, ``y``, ``strength``).
        pointer: Current pointer position, or None if it has never moved.
        time: Animation time in seconds, drives the noise.
        mouse_radius: Base interaction radius.
        repulsion_strength: Force multiplier for trail repulsion.
        return_speed: Spring constant pulling dots back to rest.
        noise: Noise strategy perturbing the radius.

    Returns:
        The same field, with ``opacity`` and ``twinkling`` refreshed.
    """
    n = len(dots)
    if n == 0:
        return dots

    radius = interaction_radius(dots, mouse_radius, time, noise)
    reach = mouse_radius * TRAIL_REACH

    max_falloff = np.zeros(n, dtype=np.float64)
    force_x = np.zeros(n, dtype=np.float64)
    force_y = np.zeros(n, dtype=np.float64)

    for point in trail:
        dx = point.x - dots.x
        dy = point.y - dots.y
        distance = np.hypot(dx, dy)

        falloff = np.where(distance <= reach, smoothstep_falloff(distance, radius), 0.0)
        np.maximum(max_falloff, falloff, out=max_falloff)

        push = (falloff > 0) & (distance > MIN_PUSH_DISTANCE)
        if not push.any():
            continue
        force = repulsion_strength * falloff * point.strength * FORCE_DAMPING
        safe_distance = np.where(push, distance, 1.0)
        force_x -= np.where(push, dx / safe_distance * force, 0.0)
        force_y -= np.where(push, dy / safe_distance * force, 0.0)

    if pointer is not None:
        dx = pointer[0] - dots.x
        dy = pointer[1] - dots.y
        falloff = smoothstep_falloff(np.hypot(dx, dy), radius)
        dots.twinkling = falloff > 0
        np.maximum(max_falloff, falloff, out=max_falloff)
    else:
        dots.twinkling = np.zeros(n, dtype=bool)

    dots.vx += force_x
    dots.vy += force_y
    dots.vx += (dots.base_x - dots.x) * return_speed * RETURN_SCALE
    dots.vy += (dots.base_y - dots.y) * return_speed * RETURN_SCALE
    dots.vx *= VELOCITY_DAMPING
    dots.vy *= VELOCITY_DAMPING
    dots.x += dots.vx
    dots.y += dots.vy

    touched = max_falloff > 0
    dots.twinkle_phase[touched] += dots.twinkle_speed[touched]
    twinkle = np.sin(dots.twinkle_phase) * 0.5 + 0.5
    amount = (0.3 + twinkle * 0.7) * max_falloff
    dots.opacity = np.where(touched, 1.0 - (1.0 - amount) * max_falloff, 1.0)
    return dots
