"""Dot-field animator: halftone portrait that scatters away from the pointer."""

from cv2web.animator.animator import DotFieldAnimator
from cv2web.animator.config import DotFieldConfig
from cv2web.animator.field import DotField, Particle
from cv2web.animator.host import FrameClock, ManualScheduler, SurfaceHost
from cv2web.animator.noise import perlin_noise, value_noise
from cv2web.animator.pointer import PointerTracker, TrailPoint

__all__ = [
    "DotFieldAnimator",
    "DotFieldConfig",
    "DotField",
    "Particle",
    "FrameClock",
    "ManualScheduler",
    "SurfaceHost",
    "perlin_noise",
    "value_noise",
    "PointerTracker",
    "TrailPoint",
]
