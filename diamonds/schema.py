"""
Schema for colors, layers and generation options.
Everything here is an immutable value; derivations build new instances.
"""
from dataclasses import dataclass, field
from typing import Any, Literal, Union

RANDOM_BACKGROUND = "random"


@dataclass(frozen=True)
class HSL:
    """
    HSL color with alpha.
    hue 0–360, saturation 0–100, luminance 0–100, alpha 0–1.
    Behaves as a 4-sequence so it unpacks like the tuples callers pass in.
    """

    hue: float
    saturation: float
    luminance: float
    alpha: float = 1

    def __iter__(self):
        return iter((self.hue, self.saturation, self.luminance, self.alpha))

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index):
        return self.to_list()[index]

    def to_list(self) -> list[float]:
        return [self.hue, self.saturation, self.luminance, self.alpha]

    @classmethod
    def coerce(cls, value: Any) -> "HSL":
        """Accept an HSL, or any 4-sequence (h, s, l, a) such as a JSON list."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            raise TypeError(f"Expected an HSL color sequence, got string {value!r}")
        items = list(value)
        if len(items) != 4:
            raise ValueError(f"HSL color needs 4 components (h, s, l, a), got {len(items)}")
        return cls(*items)


@dataclass(frozen=True)
class LinearGradient:
    angle: int
    color: HSL
    stop: int

    @property
    def kind(self) -> str:
        return "LinearGradient"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "angle": self.angle, "color": self.color.to_list(), "stop": self.stop}


@dataclass(frozen=True)
class RadialGradient:
    x: int
    y: int
    color: HSL
    stop: int

    @property
    def kind(self) -> str:
        return "RadialGradient"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "x": self.x, "y": self.y, "color": self.color.to_list(), "stop": self.stop}


@dataclass(frozen=True)
class FlatColor:
    color: HSL

    @property
    def kind(self) -> str:
        return "Color"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "color": self.color.to_list()}


Layer = Union[LinearGradient, RadialGradient, FlatColor]


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key wins; camelCase and snake_case spellings both accepted."""
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class LinearGradientOptions:
    angle_min: float = 1
    angle_max: float = 360
    stop_min: float = 5
    stop_max: float = 95

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "LinearGradientOptions":
        d = data or {}
        return cls(
            angle_min=_pick(d, "angleMin", "angle_min", default=1),
            angle_max=_pick(d, "angleMax", "angle_max", default=360),
            stop_min=_pick(d, "stopMin", "stop_min", "min", default=5),
            stop_max=_pick(d, "stopMax", "stop_max", "max", default=95),
        )


@dataclass(frozen=True)
class RadialGradientOptions:
    x_min: float = 0
    x_max: float = 100
    y_min: float = 0
    y_max: float = 100
    stop_min: float = 5
    stop_max: float = 20

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "RadialGradientOptions":
        d = data or {}
        return cls(
            x_min=_pick(d, "xMin", "x_min", default=0),
            x_max=_pick(d, "xMax", "x_max", default=100),
            y_min=_pick(d, "yMin", "y_min", default=0),
            y_max=_pick(d, "yMax", "y_max", default=100),
            stop_min=_pick(d, "stopMin", "stop_min", "min", default=5),
            stop_max=_pick(d, "stopMax", "stop_max", "max", default=20),
        )


@dataclass(frozen=True)
class DiamondOptions:
    """
    What to generate: color sources, shade expansion, layer geometry, background.
    colors / random_colors_number are both optional, but at least one is required
    by generate_layers.
    """

    type: Literal["linear", "radial"] = "linear"
    colors: tuple[HSL, ...] | None = None
    random_colors_number: int | None = None
    background: HSL | str | None = None  # HSL or "random"
    shades: int | None = None
    shade_variance: float | None = None
    linear_gradient_options: LinearGradientOptions = field(default_factory=LinearGradientOptions)
    radial_gradient_options: RadialGradientOptions = field(default_factory=RadialGradientOptions)
    opacity: float | None = None  # None = builder default (0.3)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiamondOptions":
        """Build from a JSON/YAML-style mapping (camelCase or snake_case keys)."""
        colors = _pick(data, "colors")
        background = _pick(data, "background")
        if background is not None and background != RANDOM_BACKGROUND:
            background = HSL.coerce(background)
        return cls(
            type=_pick(data, "type", default="linear"),
            colors=tuple(HSL.coerce(c) for c in colors) if colors is not None else None,
            random_colors_number=_pick(data, "randomColorsNumber", "random_colors_number"),
            background=background,
            shades=_pick(data, "shades"),
            shade_variance=_pick(data, "shadeVariance", "shade_variance"),
            linear_gradient_options=LinearGradientOptions.from_dict(
                _pick(data, "linearGradientOptions", "linear_gradient_options")
            ),
            radial_gradient_options=RadialGradientOptions.from_dict(
                _pick(data, "radialGradientOptions", "radial_gradient_options")
            ),
            opacity=_pick(data, "opacity"),
        )
