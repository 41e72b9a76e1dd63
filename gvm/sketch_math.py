"""
Host primitives for rhythm-driven sketches.

Provides the clock, noise and interpolation helpers that BeatClock
consumes, plus the small numeric utilities the sample sketches use.
"""

import math
import random
import time
from typing import Optional

from gvm.config import NOISE_SEED, NOISE_OCTAVES, NOISE_FALLOFF

_START = time.monotonic()


def millis() -> float:
    """Milliseconds elapsed since the process started (monotonic)."""
    return (time.monotonic() - _START) * 1000.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation."""
    return a + (b - a) * t


def fract(x: float) -> float:
    """Fractional part, always in [0, 1) for finite x."""
    return x - math.floor(x)


def constrain(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def map_range(value: float, in_low: float, in_high: float, out_low: float, out_high: float) -> float:
    """
    Re-map a value from one range to another (no clamping).

    Example:
        map_range(0.5, 0, 1, -100, 100)  # 0.0
    """
    return out_low + (out_high - out_low) * ((value - in_low) / (in_high - in_low))


# ============================================================================
# Perlin noise
# ============================================================================

PERLIN_YWRAPB = 4
PERLIN_YWRAP = 1 << PERLIN_YWRAPB
PERLIN_ZWRAPB = 8
PERLIN_ZWRAP = 1 << PERLIN_ZWRAPB
PERLIN_SIZE = 4095


def _scaled_cosine(i: float) -> float:
    return 0.5 * (1.0 - math.cos(i * math.pi))


class PerlinNoise:
    """
    Smooth, repeatable 3D lattice noise.

    Same construction as the noise() found in Processing-style sketch
    environments: a 4096-entry random table sampled with cosine
    interpolation and summed over several octaves. Output lies in [0, 1).
    """

    def __init__(self, seed: Optional[int] = None, octaves: int = 4, falloff: float = 0.5):
        self.detail(octaves, falloff)
        self.seed(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Rebuild the lattice table. The same seed always yields the same field."""
        rng = random.Random(seed)
        self._table = [rng.random() for _ in range(PERLIN_SIZE + 1)]

    def detail(self, octaves: int, falloff: float) -> None:
        if octaves < 1:
            raise ValueError("Noise octaves must be at least 1")
        if not 0.0 <= falloff <= 1.0:
            raise ValueError("Noise falloff must be between 0.0 and 1.0")
        self.octaves = int(octaves)
        self.falloff = falloff

    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        table = self._table

        # Field is mirrored around zero
        x, y, z = abs(x), abs(y), abs(z)

        xi, yi, zi = math.floor(x), math.floor(y), math.floor(z)
        xf, yf, zf = x - xi, y - yi, z - zi

        result = 0.0
        amplitude = 0.5

        for _ in range(self.octaves):
            of = xi + (yi << PERLIN_YWRAPB) + (zi << PERLIN_ZWRAPB)

            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = table[of & PERLIN_SIZE]
            n1 += rxf * (table[(of + 1) & PERLIN_SIZE] - n1)
            n2 = table[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n2 += rxf * (table[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n2)
            n1 += ryf * (n2 - n1)

            of += PERLIN_ZWRAP
            n2 = table[of & PERLIN_SIZE]
            n2 += rxf * (table[(of + 1) & PERLIN_SIZE] - n2)
            n3 = table[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n3 += rxf * (table[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n3)
            n2 += ryf * (n3 - n2)

            n1 += _scaled_cosine(zf) * (n2 - n1)

            result += n1 * amplitude
            amplitude *= self.falloff

            # Next octave doubles the frequency
            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            zi <<= 1
            zf *= 2

            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
            if zf >= 1.0:
                zi += 1
                zf -= 1

        return result


# Shared generator used by default
_default_noise = PerlinNoise(seed=NOISE_SEED, octaves=NOISE_OCTAVES, falloff=NOISE_FALLOFF)


def noise(x: float, y: float = 0.0, z: float = 0.0) -> float:
    """Sample the shared noise field."""
    return _default_noise(x, y, z)


def noise_seed(seed: Optional[int]) -> None:
    _default_noise.seed(seed)


def noise_detail(octaves: int, falloff: float = 0.5) -> None:
    _default_noise.detail(octaves, falloff)
