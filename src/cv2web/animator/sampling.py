"""
Halftone sampling: turn a decoded image into a field of dots.

The image is cover-fitted onto the surface, rasterized at device
resolution, contrast-adjusted, then sampled once per grid cell.
"""

import math
from dataclasses import dataclass

import numpy as np
from PIL import Image

from cv2web.animator.field import DotField

MIN_CELL_SIZE = 2.0
DOT_FILL = 0.9  # Fraction of the cell a full-white dot covers
MIN_DOT_DIAMETER = 0.5
ACCENT_MIN_BRIGHTNESS = 150
TWINKLE_SPEED_MIN = 0.02
TWINKLE_SPEED_RANGE = 0.03


@dataclass
class CoverFit:
    """Placement of an image scaled to cover a surface."""
    scale: float
    offset_x: float
    offset_y: float
    width: float
    height: float


def cover_fit(image_size: tuple[int, int], surface_size: tuple[float, float]) -> CoverFit:
    """Scale by the larger axis ratio and center, so no edge of the surface is bare."""
    iw, ih = image_size
    sw, sh = surface_size
    scale = max(sw / iw, sh / ih)
    width = iw * scale
    height = ih * scale
    return CoverFit(
        scale=scale,
        offset_x=(sw - width) / 2,
        offset_y=(sh - height) / 2,
        width=width,
        height=height,
    )


def cell_size_for(halftone_size: float, fill_scale: float) -> float:
    return max(MIN_CELL_SIZE, halftone_size * fill_scale)


def apply_contrast(pixels: np.ndarray, contrast: float) -> np.ndarray:
    """
    Stretch every channel around mid-gray.

    ``out = ((in / 255 - 0.5) * contrast + 0.5) * 255``, clamped to [0, 255].
    Contrast 0 flattens the image to mid-gray.
    """
    adjusted = ((pixels.astype(np.float64) / 255.0 - 0.5) * contrast + 0.5) * 255.0
    return np.rint(np.clip(adjusted, 0, 255)).astype(np.uint8)


def rasterize(image: Image.Image, width: float, height: float, pixel_ratio: float = 1.0) -> tuple[np.ndarray, CoverFit]:
    """
    Draw ``image`` cover-fitted onto a black buffer at device resolution.

    Returns:
        Tuple of ((H, W, 3) uint8 buffer, logical-space fit).
    """
    fit = cover_fit(image.size, (width, height))

    dev_w = max(1, int(width * pixel_ratio))
    dev_h = max(1, int(height * pixel_ratio))
    scaled_w = max(1, round(fit.width * pixel_ratio))
    scaled_h = max(1, round(fit.height * pixel_ratio))

    rgb = image.convert("RGB")
    # Nearest-neighbour, the halftone grid does its own averaging by sampling
    scaled = rgb.resize((scaled_w, scaled_h), Image.NEAREST)

    canvas = Image.new("RGB", (dev_w, dev_h), (0, 0, 0))
    canvas.paste(scaled, (round(fit.offset_x * pixel_ratio), round(fit.offset_y * pixel_ratio)))
    return np.asarray(canvas, dtype=np.uint8), fit


def dot_diameter(brightness, cell_size: float):
    return np.asarray(brightness, dtype=np.float64) / 255.0 * cell_size * DOT_FILL


def is_visible_dot(diameter) -> "bool | np.ndarray":
    """Dots at or under ``MIN_DOT_DIAMETER`` are background and get dropped."""
    return np.asarray(diameter) > MIN_DOT_DIAMETER


def grid_centers(length: float, cell_size: float) -> np.ndarray:
    """Cell centers along one axis, covering ``[0, length)``."""
    count = max(0, math.ceil(length / cell_size))
    return np.arange(count, dtype=np.float64) * cell_size + cell_size / 2


def sample_field(
    pixels: np.ndarray,
    width: float,
    height: float,
    cell_size: float,
    rng: np.random.Generator,
    pixel_ratio: float = 1.0,
    accent_probability: float = 0.2,
    size_variation: float = 0.1,
) -> DotField:
    """
    Build a dot field from a contrast-adjusted device-resolution buffer.

    Brightness is the mean of R, G, B at each cell center. Every retained
    dot starts at rest with zero velocity.
    """
    cx = grid_centers(width, cell_size)
    cy = grid_centers(height, cell_size)
    if len(cx) == 0 or len(cy) == 0:
        return DotField()

    dev_h, dev_w = pixels.shape[:2]
    sx = np.clip(np.floor(cx * pixel_ratio).astype(np.int64), 0, dev_w - 1)
    sy = np.clip(np.floor(cy * pixel_ratio).astype(np.int64), 0, dev_h - 1)

    samples = pixels[np.ix_(sy, sx)][..., :3].astype(np.float64)
    brightness = samples.mean(axis=-1)
    diameter = dot_diameter(brightness, cell_size)

    keep = is_visible_dot(diameter)
    grid_x, grid_y = np.meshgrid(cx, cy)
    base_x = grid_x[keep]
    base_y = grid_y[keep]
    brightness = brightness[keep]
    diameter = diameter[keep]
    n = len(base_x)

    size_multiplier = 1.0 + (rng.random(n) - 0.5) * size_variation
    is_accent = (rng.random(n) < accent_probability) & (brightness > ACCENT_MIN_BRIGHTNESS)
    twinkle_phase = rng.random(n) * math.pi * 2
    twinkle_speed = TWINKLE_SPEED_MIN + rng.random(n) * TWINKLE_SPEED_RANGE

    return DotField(
        x=base_x.copy(),
        y=base_y.copy(),
        base_x=base_x,
        base_y=base_y,
        base_size=diameter,
        brightness=brightness,
        is_accent=is_accent,
        size_multiplier=size_multiplier,
        twinkle_phase=twinkle_phase,
        twinkle_speed=twinkle_speed,
        vx=np.zeros(n, dtype=np.float64),
        vy=np.zeros(n, dtype=np.float64),
    )


def build_field(
    image: Image.Image,
    width: float,
    height: float,
    halftone_size: float,
    contrast: float,
    rng: np.random.Generator,
    pixel_ratio: float = 1.0,
    accent_probability: float = 0.2,
    size_variation: float = 0.1,
) -> tuple[DotField, float]:
    """
    Full regeneration pass: rasterize, adjust contrast, sample.

    Returns:
        Tuple of (dot field, cell size in surface pixels).
    """
    pixels, fit = rasterize(image, width, height, pixel_ratio)
    pixels = apply_contrast(pixels, contrast)
    cell = cell_size_for(halftone_size, fit.scale)
    dots = sample_field(
        pixels,
        width,
        height,
        cell,
        rng,
        pixel_ratio=pixel_ratio,
        accent_probability=accent_probability,
        size_variation=size_variation,
    )
    return dots, cell
