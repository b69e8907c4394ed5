"""
CSS serialization of layers: hsla() colors and linear/radial gradients.
"""
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from .errors import UnsupportedLayerError
from .schema import HSL, FlatColor, Layer, LinearGradient, RadialGradient


def _num(value: float) -> str:
    """Integral floats print without a fractional part (50.0 -> 50)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def color_to_text(color) -> str:
    """hsla(h, s%, l%, a) with alpha to two decimals, ties rounded up (0.125 -> 0.13)."""
    h, s, l, a = HSL.coerce(color)
    alpha = Decimal(float(a)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"hsla({_num(h)}, {_num(s)}%, {_num(l)}%, {alpha})"


def layer_to_text(layer: Layer) -> str:
    match layer:
        case LinearGradient(angle=angle, color=color, stop=stop):
            return (
                f"linear-gradient({_num(angle)}deg, "
                f"{color_to_text(color)} {_num(stop)}%, transparent {_num(stop)}%)"
            )
        case RadialGradient(x=x, y=y, color=color, stop=stop):
            return (
                f"radial-gradient(circle at {_num(x)}% {_num(y)}%, "
                f"{color_to_text(color)} {_num(stop)}%, transparent {_num(stop)}%)"
            )
        case FlatColor(color=color):
            return color_to_text(color)
        case _:
            raise UnsupportedLayerError(layer)


def render_css_gradients(layers: Iterable[Layer]) -> list[str]:
    """One CSS string per layer, in order."""
    return [layer_to_text(layer) for layer in layers]


def render_composite(layers: Iterable[Layer]) -> str:
    """Comma-joined value for a CSS background property; empty input gives ''."""
    return ", ".join(render_css_gradients(layers))
