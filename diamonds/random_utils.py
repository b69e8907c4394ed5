"""
Random sampling helpers shared by the shade deriver and layer builders.
One process-wide numpy Generator; call seed() for reproducible output.
"""
import math

import numpy as np

from .schema import HSL

_rng = np.random.default_rng()


def seed(value: int | None = None) -> None:
    """Re-create the shared generator. None reseeds from OS entropy."""
    global _rng
    _rng = np.random.default_rng(value)


def random_int(min_value: float, max_value: float) -> int:
    """Random integer in [ceil(min_value), floor(max_value)], inclusive."""
    low = math.ceil(min_value)
    high = math.floor(max_value)
    if low > high:
        raise ValueError(f"Empty integer range: [{min_value}, {max_value}]")
    return int(_rng.integers(low, high, endpoint=True))


def random_color() -> HSL:
    """Fully opaque color with hue, saturation and luminance drawn uniformly."""
    return HSL(random_int(0, 360), random_int(0, 100), random_int(0, 100), 1)


def random_colors(count: int) -> list[HSL]:
    # counts from JSON/YAML may be floats (3.0); partial counts round up
    return [random_color() for _ in range(math.ceil(count))]


def apply_opacity(color, opacity: float) -> HSL:
    """Copy of color with alpha replaced by opacity."""
    h, s, l, _ = HSL.coerce(color)
    return HSL(h, s, l, opacity)


def clip(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
