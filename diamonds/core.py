"""
Diamonds pipeline: options → color set → shades → layers.
Layer positions are fixed by step order; only the values inside are random.
"""
import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidInputError
from .layers import build_flat_color, build_linear_gradient, build_radial_gradient
from .random_utils import random_colors
from .schema import RANDOM_BACKGROUND, DiamondOptions, HSL, Layer
from .shades import derive_shades

logger = logging.getLogger(__name__)


def _as_options(options: DiamondOptions | Mapping[str, Any]) -> DiamondOptions:
    if isinstance(options, DiamondOptions):
        return options
    return DiamondOptions.from_dict(dict(options))


def _build_layer(color: HSL, options: DiamondOptions) -> Layer:
    if options.type == "linear":
        return build_linear_gradient(color, options.opacity, options.linear_gradient_options)
    return build_radial_gradient(color, options.opacity, options.radial_gradient_options)


def generate_layers(options: DiamondOptions | Mapping[str, Any]) -> list[Layer]:
    """
    Generate the layer list for one composite.

    Order: explicit colors, random colors, shades of each (in the same order),
    then the optional flat background last.

    Raises:
        InvalidInputError: neither colors nor random_colors_number given
    """
    opts = _as_options(options)

    # an empty colors list still counts as provided
    if opts.colors is None and not opts.random_colors_number:
        raise InvalidInputError("Please provide colors or random colors number")

    explicit = [HSL.coerce(c) for c in (opts.colors or ())]
    all_colors = explicit + random_colors(opts.random_colors_number or 0)

    all_shades = list(all_colors)
    # shades must be non-zero; shade_variance only has to be set (0 is allowed)
    if opts.shades and opts.shade_variance is not None:
        for color in all_colors:
            all_shades.extend(derive_shades(color, opts.shades, opts.shade_variance))

    layers: list[Layer] = [_build_layer(color, opts) for color in all_shades]

    if opts.background:
        if opts.background == RANDOM_BACKGROUND:
            layers.append(build_flat_color())
        else:
            layers.append(build_flat_color(opts.background))

    logger.debug(
        "generate_layers: type=%s explicit=%d random=%d shaded=%d background=%s",
        opts.type,
        len(explicit),
        len(all_colors) - len(explicit),
        len(all_shades) - len(all_colors),
        bool(opts.background),
    )
    return layers


# Name used by the first releases of the generator
create_diamonds = generate_layers
