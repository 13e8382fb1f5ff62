"""Scalar math helpers."""

import math

# Fractional powers of two: entry i holds 2 ** (i / 256).
_FRACTIONAL_POWERS = tuple(2.0 ** (i / 256.0) for i in range(256))

_DB_TO_LOG2 = 0.16609640474


def perceptual(db: float) -> float:
    """Convert a perceptual level in decibels into a linear gain."""
    scaled = db * _DB_TO_LOG2
    steps = int(abs(scaled) * 256.0)
    gain = math.ldexp(_FRACTIONAL_POWERS[steps & 255], steps >> 8)
    return 1.0 / gain if scaled < 0.0 else gain


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b`` by ``t``."""
    return a + t * (b - a)