# Diamonds: randomized multi-stop gradient layers, rendered as CSS

from .core import create_diamonds, generate_layers
from .css import color_to_text, layer_to_text, render_composite, render_css_gradients
from .errors import DiamondsError, InvalidInputError, UnsupportedLayerError
from .schema import (
    HSL,
    DiamondOptions,
    FlatColor,
    Layer,
    LinearGradient,
    LinearGradientOptions,
    RadialGradient,
    RadialGradientOptions,
)

__all__ = [
    "generate_layers",
    "create_diamonds",
    "render_composite",
    "render_css_gradients",
    "color_to_text",
    "layer_to_text",
    "DiamondsError",
    "InvalidInputError",
    "UnsupportedLayerError",
    "HSL",
    "DiamondOptions",
    "Layer",
    "LinearGradient",
    "RadialGradient",
    "FlatColor",
    "LinearGradientOptions",
    "RadialGradientOptions",
]
