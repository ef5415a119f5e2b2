"""
Configuration for the dot-field animator.

Defaults mirror the values the site generator writes into the page when the
resume's ``canvas`` section leaves them out.
"""

from dataclasses import dataclass, fields
from typing import Any


def parse_color(value: str | tuple) -> tuple[int, int, int]:
    """Convert ``#rgb``/``#rrggbb`` strings (or an RGB tuple) to an RGB tuple."""
    if isinstance(value, tuple):
        return tuple(int(c) for c in value[:3])

    text = str(value).strip().lstrip("#")
    if len(text) == 3:
        text = "".join(c * 2 for c in text)
    if len(text) != 6:
        raise ValueError(f"Invalid color: {value!r}")
    try:
        return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
    except ValueError:
        raise ValueError(f"Invalid color: {value!r}") from None


@dataclass
class DotFieldConfig:
    """Configuration for the dot-field animator."""

    width: int = 640
    height: int = 480
    fps: int = 60
    pixel_ratio: float = 1.0

    # Halftone sampling
    halftone_size: float = 0.0001  # Source-image pixels per cell (floored to 2 surface px)
    contrast: float = 1.0
    accent_probability: float = 0.2  # Only bright (> 150) cells are eligible
    size_variation: float = 0.1

    # Interaction
    mouse_radius: float = 100.0
    repulsion_strength: float = 1.5
    return_speed: float = 0.6
    noise: str = "value"  # "value", "perlin"

    # Colors
    accent_color: str = "#CECFC7"
    dot_color: str = "#ffffff"
    background_color: str = "#332D23"  # Repainted every frame
    clear_color: str = "#020202"  # Shown once, right after sampling

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None, **overrides) -> "DotFieldConfig":
        """
        Build a config from a ``canvas`` mapping as written in resume.yaml.

        Keys may be camelCase (``halftoneSize``) or snake_case; unknown keys
        are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (data or {}).items():
            name = _snake_case(key)
            if name in known and value is not None:
                kwargs[name] = value
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)


def _snake_case(key: str) -> str:
    out = []
    for ch in key:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)
