"""Resume site generator with a pointer-reactive halftone portrait."""

__version__ = "0.1.0"
