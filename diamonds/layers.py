"""
Layer builders: turn one color into a gradient or flat-color layer.
Geometry (angle, position, stop) is sampled fresh for every layer.
"""
from .random_utils import apply_opacity, random_color, random_int
from .schema import (
    HSL,
    FlatColor,
    LinearGradient,
    LinearGradientOptions,
    RadialGradient,
    RadialGradientOptions,
)

DEFAULT_OPACITY = 0.3


def build_linear_gradient(
    color,
    opacity: float | None = DEFAULT_OPACITY,
    options: LinearGradientOptions | None = None,
) -> LinearGradient:
    """Linear gradient at a random angle, fading to transparent at a random stop."""
    opts = options or LinearGradientOptions()
    if opacity is None:
        opacity = DEFAULT_OPACITY
    return LinearGradient(
        angle=random_int(opts.angle_min, opts.angle_max),
        color=apply_opacity(color, opacity),
        stop=random_int(opts.stop_min, opts.stop_max),
    )


def build_radial_gradient(
    color,
    opacity: float | None = DEFAULT_OPACITY,
    options: RadialGradientOptions | None = None,
) -> RadialGradient:
    """Circle centered at a random (x%, y%), fading to transparent at a random stop."""
    opts = options or RadialGradientOptions()
    if opacity is None:
        opacity = DEFAULT_OPACITY
    result_color = apply_opacity(color, opacity)
    stop = random_int(opts.stop_min, opts.stop_max)
    return RadialGradient(
        x=random_int(opts.x_min, opts.x_max),
        y=random_int(opts.y_min, opts.y_max),
        color=result_color,
        stop=stop,
    )


def build_flat_color(color=None) -> FlatColor:
    """Flat background layer; a random opaque color when none is given."""
    return FlatColor(color=HSL.coerce(color) if color is not None else random_color())
