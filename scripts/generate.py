#!/usr/bin/env python3
"""
CLI: Generate one diamonds composite and print it.
Usage:
  python scripts/generate.py
  python scripts/generate.py --type radial --random 4 --background random
  python scripts/generate.py --color 200,50,50,1 --shades 3 --shade-variance 15 --seed 7
  python scripts/generate.py --format json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from diamonds import DiamondsError, generate_layers, render_composite, render_css_gradients
from diamonds.config import load_config, options_from_config
from diamonds.random_utils import seed as seed_random

logger = logging.getLogger("diamonds.cli")


def _hsla_arg(value: str) -> list[float]:
    """Parse 'H,S,L,A' into four numbers."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected H,S,L,A, got {value!r}")
    try:
        return [float(p) if "." in p else int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"non-numeric color component in {value!r}") from None


def _background_arg(value: str):
    if value == "random":
        return value
    return _hsla_arg(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate randomized gradient layers (diamonds) and print them as CSS."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--type",
        choices=("linear", "radial"),
        default=None,
        help="Gradient kind for every color layer.",
    )
    parser.add_argument(
        "--color",
        "-c",
        type=_hsla_arg,
        action="append",
        default=None,
        help="Explicit color as H,S,L,A (repeatable).",
    )
    parser.add_argument(
        "--random",
        "-n",
        type=int,
        default=None,
        help="Number of extra random colors.",
    )
    parser.add_argument("--shades", type=int, default=None, help="Shades per color.")
    parser.add_argument(
        "--shade-variance",
        type=float,
        default=None,
        help="Maximum saturation/luminance deviation for shades.",
    )
    parser.add_argument(
        "--background",
        type=_background_arg,
        default=None,
        help="Flat background layer: 'random' or H,S,L,A.",
    )
    parser.add_argument("--opacity", type=float, default=None, help="Gradient color opacity (default: 0.3).")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("css", "list", "json"),
        default=None,
        help="Output: css declaration, one layer per line, or JSON layer data.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser


def _apply_overrides(options: dict, args: argparse.Namespace) -> dict:
    out = dict(options)
    if args.type is not None:
        out["type"] = args.type
    if args.color is not None:
        out["colors"] = args.color
        # explicit colors replace the configured random count unless --random is also given
        if args.random is None:
            out.pop("randomColorsNumber", None)
    if args.random is not None:
        out["randomColorsNumber"] = args.random
    if args.shades is not None:
        out["shades"] = args.shades
    if args.shade_variance is not None:
        out["shadeVariance"] = args.shade_variance
    if args.background is not None:
        out["background"] = args.background
    if args.opacity is not None:
        out["opacity"] = args.opacity
    return out


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else str(config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.seed is not None:
        seed_random(args.seed)

    out_cfg = config.get("output", {})
    fmt = args.format or out_cfg.get("format", "css")
    config["diamonds"] = _apply_overrides(config.get("diamonds") or {}, args)
    options = options_from_config(config)
    logger.debug("options: %s", options)

    try:
        layers = generate_layers(options)
        if fmt == "json":
            text = json.dumps([layer.to_dict() for layer in layers], indent=2)
        elif fmt == "list":
            text = "\n".join(render_css_gradients(layers))
        else:
            text = f"{out_cfg.get('property', 'background')}: {render_composite(layers)};"
    except DiamondsError as e:
        logger.error("generation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
