"""
Noise strategies used to roughen the pointer's interaction radius.

Every strategy is a pure function ``(x, y, frequency, time) -> [0, 1]`` that
accepts scalars or numpy arrays for ``x`` and ``y``. There is no global seed:
the same inputs always produce the same value.
"""

from typing import Callable

import numpy as np

NoiseFn = Callable[..., "float | np.ndarray"]

_MASK = np.uint64(0xFFFFFFFF)
_PRIME_X = np.uint64(374761393)
_PRIME_Y = np.uint64(668265263)
_PRIME_Z = np.uint64(1440662683)
_MIX = np.uint64(1274126177)


def _lattice(ix: np.ndarray, iy: np.ndarray, iz: np.ndarray) -> np.ndarray:
    """Hash integer lattice coordinates to [0, 1]."""
    ux = np.asarray(ix & 0xFFFFFFFF).astype(np.uint64)
    uy = np.asarray(iy & 0xFFFFFFFF).astype(np.uint64)
    uz = np.asarray(iz & 0xFFFFFFFF).astype(np.uint64)

    # Products stay below 2**63, so the 64-bit arithmetic never wraps
    h = ((ux * _PRIME_X) & _MASK) + ((uy * _PRIME_Y) & _MASK) + ((uz * _PRIME_Z) & _MASK)
    h = h & _MASK
    h = h ^ (h >> np.uint64(13))
    h = (h * _MIX) & _MASK
    h = h ^ (h >> np.uint64(16))
    return np.asarray(h & np.uint64(0xFFFFFF)).astype(np.float64) / float(0xFFFFFF)


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * (3.0 - 2.0 * t)


def value_noise(x, y, frequency: float = 0.02, time: float = 0.0):
    """
    Smoothed value noise over (x, y) drifting through time.

    Positions are scaled by ``frequency`` and time is the third lattice axis,
    so the field evolves continuously. Values are trilinearly interpolated
    between hashed lattice corners with a smoothstep fade.
    """
    px = np.asarray(x, dtype=np.float64) * frequency
    py = np.asarray(y, dtype=np.float64) * frequency
    pz = np.full(np.broadcast(px, py).shape, float(time))

    x0 = np.floor(px)
    y0 = np.floor(py)
    z0 = np.floor(pz)
    tx = _fade(px - x0)
    ty = _fade(py - y0)
    tz = _fade(pz - z0)

    ix = x0.astype(np.int64)
    iy = y0.astype(np.int64)
    iz = z0.astype(np.int64)

    def layer(z):
        c00 = _lattice(ix, iy, z)
        c10 = _lattice(ix + 1, iy, z)
        c01 = _lattice(ix, iy + 1, z)
        c11 = _lattice(ix + 1, iy + 1, z)
        top = c00 + (c10 - c00) * tx
        bottom = c01 + (c11 - c01) * tx
        return top + (bottom - top) * ty

    near = layer(iz)
    far = layer(iz + 1)
    result = near + (far - near) * tz

    if result.ndim == 0:
        return float(result)
    return result


def perlin_noise(x, y, frequency: float = 0.02, time: float = 0.0):
    """Perlin gradient noise from the ``noise`` package, remapped to [0, 1]."""
    import noise

    def sample(sx, sy):
        v = noise.pnoise3(sx * frequency, sy * frequency, time)
        return min(1.0, max(0.0, v * 0.5 + 0.5))

    if np.ndim(x) == 0 and np.ndim(y) == 0:
        return sample(float(x), float(y))
    return np.vectorize(sample, otypes=[np.float64])(x, y)


NOISE_STRATEGIES: dict[str, NoiseFn] = {
    "value": value_noise,
    "perlin": perlin_noise,
}


def get_noise(name: str) -> NoiseFn:
    """Look up a noise strategy by name."""
    try:
        return NOISE_STRATEGIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown noise strategy {name!r} (choose from {', '.join(NOISE_STRATEGIES)})"
        ) from None
