"""
Color shades: small random walks on saturation and luminance around a base color.
Hue and alpha are never touched, so shades stay in the same color family.
"""
import math

from .random_utils import clip, random_int
from .schema import HSL


def _perturb(value: float, shade_variance: float) -> float:
    # Difference of two uniform draws: centered on 0, bounded by ±shade_variance
    return clip(value + random_int(0, shade_variance) - random_int(0, shade_variance), 0, 100)


def derive_shade(color, shade_variance: float) -> HSL:
    """
    Args:
        color: Base color (HSL or 4-sequence)
        shade_variance: Maximum deviation from the base saturation/luminance

    Returns:
        New color with saturation and luminance clipped to 0–100
    """
    h, s, l, a = HSL.coerce(color)
    return HSL(h, _perturb(s, shade_variance), _perturb(l, shade_variance), a)


def derive_shades(color, count: int, shade_variance: float) -> list[HSL]:
    """count independent shades of color; count <= 0 gives an empty list, 2.5 gives 3."""
    return [derive_shade(color, shade_variance) for _ in range(math.ceil(count))]
