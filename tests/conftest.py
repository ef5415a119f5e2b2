"""Pytest configuration and shared fixtures."""

import os

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest
from PIL import Image

from cv2web.animator.host import FrameClock, SurfaceHost


def constant_noise(value: float = 0.5):
    """Noise strategy returning ``value`` everywhere (radius = mouse_radius at 0.5)."""
    def noise(x, y, frequency=0.02, time=0.0):
        return np.full(np.shape(x), value, dtype=np.float64)
    return noise


@pytest.fixture
def white_image() -> Image.Image:
    """100x100 pure white image."""
    return Image.new("RGB", (100, 100), (255, 255, 255))


@pytest.fixture
def black_image() -> Image.Image:
    """100x100 pure black image (produces no dots)."""
    return Image.new("RGB", (100, 100), (0, 0, 0))


@pytest.fixture
def gray_image() -> Image.Image:
    """100x100 mid-gray image."""
    return Image.new("RGB", (100, 100), (128, 128, 128))


@pytest.fixture
def gradient_image() -> Image.Image:
    """
    Horizontal gradient from black to white.

    Returns:
        200x100 RGB image.
    """
    row = np.linspace(0, 255, 200).astype(np.uint8)
    arr = np.repeat(np.tile(row, (100, 1))[..., None], 3, axis=2)
    return Image.fromarray(arr, mode="RGB")


@pytest.fixture
def clock() -> FrameClock:
    return FrameClock(start=100.0)


@pytest.fixture
def host() -> SurfaceHost:
    """200x100 headless host."""
    return SurfaceHost(200, 100)


@pytest.fixture
def resume() -> dict:
    """Minimal but complete resume document."""
    return {
        "personal": {
            "name": "Ada Lovelace",
            "title": "Analyst <Engines>",
            "photo": "photo.png",
            "links": {
                "github": {"username": "ada", "url": "https://github.com/ada"},
                "linkedin": {"url": "https://linkedin.com/in/ada"},
                "email": {"address": "ada@example.com"},
                "telegram": {"username": "@ada", "url": "https://t.me/ada"},
            },
        },
        "summary": "Wrote the first program & more.",
        "experience": [
            {
                "title": "Analyst",
                "company": "Babbage & Co",
                "period": "1842 - 1843",
                "responsibilities": ["Annotated the engine", "Computed Bernoulli numbers"],
            }
        ],
        "projects": [
            {"title": "Notes", "period": "1843", "span": 2, "description": "  Note G  ", "points": ["Loops"]},
            {"title": "Letters", "period": "1844"},
        ],
        "skills": {
            "technologies": ["Analytical Engine"],
            "platforms": ["Punch cards"],
            "soft": ["Poetry"],
        },
        "education": [{"degree": "Private tutoring", "institution": "Home", "period": "1820s"}],
        "languages": ["English", "French"],
        "canvas": {"halftoneSize": 4, "contrast": 1.5, "accentColor": "#ff0000"},
        "fonts": {"sans": "Inter Tight", "mono": "JetBrains Mono"},
        "colors": {"background": "#101010", "primary": "#abcdef"},
    }
