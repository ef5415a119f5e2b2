"""
Headless capture: play a scripted pointer path through the animator and
write the frames to an animated GIF.
"""

import math
from pathlib import Path
from typing import Iterator

import numpy as np
from PIL import Image

from cv2web.animator.animator import DotFieldAnimator
from cv2web.animator.host import FrameClock, SurfaceHost, surface_to_array


def pointer_sweep(width: float, height: float, n_frames: int) -> list[tuple[float, float] | None]:
    """
    Pointer positions for a figure-eight pass over the middle of the surface.

    The first and last fifth of the clip have no motion (None) so the dots
    can be seen at rest and settling back.
    """
    lead = n_frames // 5
    active = max(1, n_frames - 2 * lead)
    path: list[tuple[float, float] | None] = [None] * lead
    for i in range(active):
        t = i / active * 2 * math.pi
        x = width / 2 + math.sin(t) * width * 0.35
        y = height / 2 + math.sin(2 * t) * height * 0.25
        path.append((x, y))
    path.extend([None] * (n_frames - len(path)))
    return path


def render_capture(
    animator: DotFieldAnimator,
    host: SurfaceHost,
    clock: FrameClock,
    n_frames: int,
    fps: int = 30,
    progress_callback: callable = None,
) -> Iterator[np.ndarray]:
    """
    Drive ``host`` frame by frame along ``pointer_sweep``.

    Args:
        animator: A mounted animator whose clock is ``clock``.
        host: The headless host the animator is mounted on.
        clock: Manual clock, advanced by one frame interval per frame.
        n_frames: Number of frames to produce.
        fps: Playback rate used to advance the clock.
        progress_callback: Optional callback(current, total).

    Yields:
        (H, W, 3) uint8 frames.
    """
    dt = 1.0 / fps
    host.dispatch("enter")
    for i, position in enumerate(pointer_sweep(host.width, host.height, n_frames)):
        clock.advance(dt)
        if position is not None:
            host.dispatch("move", *position)
        host.run_frame()
        yield surface_to_array(host.surface)

        if progress_callback:
            progress_callback(i + 1, n_frames)
    host.dispatch("leave")


def save_gif(frames: Iterator[np.ndarray], output_path: Path, fps: int = 30) -> Path:
    """Write frames to an animated, looping GIF."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    images = [Image.fromarray(frame) for frame in frames]
    if not images:
        raise ValueError("No frames to write")

    images[0].save(
        output_path,
        save_all=True,
        append_images=images[1:],
        duration=max(1, round(1000 / fps)),
        loop=0,
    )
    return output_path
