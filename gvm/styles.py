"""
Draw-style presets and orientation-aware shape placement.

Styles are plain data: the host maps a DrawStyle onto its own canvas
calls. Shapes are placed by translate -> rotate -> scale applied to a
unit shape centred at the origin, so a single ellipse/rect outline can
be positioned, sized and rotated in one step.
"""

import math
from dataclasses import dataclass
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from gvm.sketch_math import lerp


# ============================================================================
# Data Structures
# ============================================================================

class Rgba(BaseModel):
    """RGBA color with 0-255 channels."""
    r: int = Field(..., ge=0, le=255, description="Red component (0-255)")
    g: int = Field(..., ge=0, le=255, description="Green component (0-255)")
    b: int = Field(..., ge=0, le=255, description="Blue component (0-255)")
    a: int = Field(255, ge=0, le=255, description="Alpha component (0-255)")

    class Config:
        frozen = True  # Make immutable for hashing

    @classmethod
    def from_hex(cls, value: str) -> "Rgba":
        """Parse '#rrggbb' or '#rrggbbaa'."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value}")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(r=channels[0], g=channels[1], b=channels[2], a=channels[3] if len(channels) == 4 else 255)

    def shifted(self, delta: int, alpha: int) -> "Rgba":
        """Brighten (or darken, for negative delta) every channel, clamped."""
        return Rgba(
            r=_clamp_channel(self.r + delta),
            g=_clamp_channel(self.g + delta),
            b=_clamp_channel(self.b + delta),
            a=alpha,
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


class ColorStop(BaseModel):
    """Single color stop in a gradient."""
    position: float = Field(..., ge=0.0, le=1.0, description="Position along gradient (0.0-1.0)")
    color: Rgba

    class Config:
        frozen = True


StyleMode = Literal["fill", "stroke", "grad"]


class DrawStyle(BaseModel):
    """Resolved drawing style for one shape."""
    mode: StyleMode
    fill: Optional[Rgba] = None
    stroke: Optional[Rgba] = None
    stroke_weight: float = Field(0.0, ge=0.0)

    # Linear gradient in unit-shape coordinates (grad mode only)
    gradient_start: Optional[tuple[float, float]] = None
    gradient_end: Optional[tuple[float, float]] = None
    stops: list[ColorStop] = Field(default_factory=list)


ColorLike = Union[Rgba, str, tuple]

OUTLINE_WEIGHT = 0.01  # thin enough for unit-scaled shapes


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def to_rgba(color: ColorLike) -> Rgba:
    """Accept an Rgba, a hex string, or an (r, g, b[, a]) tuple."""
    if isinstance(color, Rgba):
        return color
    if isinstance(color, str):
        return Rgba.from_hex(color)
    if isinstance(color, (tuple, list)) and len(color) in (3, 4):
        r, g, b = color[:3]
        a = color[3] if len(color) == 4 else 255
        return Rgba(r=r, g=g, b=b, a=a)
    raise ValueError(f"Unsupported color value: {color!r}")


def lerp_color(start: ColorLike, end: ColorLike, t: float) -> Rgba:
    """Interpolate every channel, clamping t to [0, 1]."""
    a, b = to_rgba(start), to_rgba(end)
    t = max(0.0, min(1.0, t))
    return Rgba(
        r=_clamp_channel(round(lerp(a.r, b.r, t))),
        g=_clamp_channel(round(lerp(a.g, b.g, t))),
        b=_clamp_channel(round(lerp(a.b, b.b, t))),
        a=_clamp_channel(round(lerp(a.a, b.a, t))),
    )


# ============================================================================
# Styles
# ============================================================================

def gradient_stops(color: ColorLike) -> list[ColorStop]:
    """
    Four-stop sheen derived from a single base color.

    Stops:
        0.0: base color, translucent (alpha 150)
        0.3: brighter by 50, opaque
        0.6: base color, alpha 220
        1.0: darker by 30, opaque
    """
    base = to_rgba(color)
    return [
        ColorStop(position=0.0, color=base.shifted(0, 150)),
        ColorStop(position=0.3, color=base.shifted(50, 255)),
        ColorStop(position=0.6, color=base.shifted(0, 220)),
        ColorStop(position=1.0, color=base.shifted(-30, 255)),
    ]


def make_style(color: Optional[ColorLike], mode: str = "fill") -> DrawStyle:
    """
    Build a draw style from a base color.

    Modes:
        - fill: solid fill, no outline
        - stroke: no fill, thin outline
        - grad: diagonal linear gradient across the unit shape, no outline

    Raises:
        ValueError: If color is missing or mode is unknown
    """
    if not color:
        raise ValueError("Color must be specified")

    rgba = to_rgba(color)

    if mode == "fill":
        return DrawStyle(mode="fill", fill=rgba)
    if mode == "stroke":
        return DrawStyle(mode="stroke", stroke=rgba, stroke_weight=OUTLINE_WEIGHT)
    if mode == "grad":
        return DrawStyle(
            mode="grad",
            fill=Rgba(r=255, g=255, b=255),
            gradient_start=(-0.5, -0.5),
            gradient_end=(0.5, 0.5),
            stops=gradient_stops(rgba),
        )
    raise ValueError(f"Invalid style mode: {mode}")


# ============================================================================
# Shape placement
# ============================================================================

@dataclass(frozen=True)
class ShapePlacement:
    """Unit shape placed at (x, y), scaled to (w, h), rotated by angle (radians)."""
    kind: Literal["ellipse", "rect"]
    x: float
    y: float
    w: float
    h: float
    angle: float = 0.0

    @property
    def transform(self) -> tuple[float, float, float, float, float, float]:
        """Affine matrix (a, b, c, d, e, f) as used by canvas setTransform."""
        cos_a, sin_a = math.cos(self.angle), math.sin(self.angle)
        return (cos_a * self.w, sin_a * self.w, -sin_a * self.h, cos_a * self.h, self.x, self.y)

    def apply(self, px: float, py: float) -> tuple[float, float]:
        a, b, c, d, e, f = self.transform
        return (a * px + c * py + e, b * px + d * py + f)

    def vertices(self, segments: int = 32) -> list[tuple[float, float]]:
        """Outline points of the placed shape (segments is ignored for rects)."""
        if self.kind == "rect":
            corners = [(-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)]
            return [self.apply(px, py) for px, py in corners]

        if segments < 3:
            raise ValueError("Ellipse needs at least 3 segments")
        step = 2 * math.pi / segments
        return [self.apply(0.5 * math.cos(i * step), 0.5 * math.sin(i * step)) for i in range(segments)]


def _check_numbers(*params) -> None:
    if any(not isinstance(p, (int, float)) or isinstance(p, bool) for p in params):
        raise ValueError("All parameters must be numbers")


def adjusted_ellipse(x: float, y: float, w: float, h: float, angle: float = 0) -> ShapePlacement:
    _check_numbers(x, y, w, h, angle)
    return ShapePlacement("ellipse", x, y, w, h, angle)


def adjusted_rect(x: float, y: float, w: float, h: float, angle: float = 0) -> ShapePlacement:
    _check_numbers(x, y, w, h, angle)
    return ShapePlacement("rect", x, y, w, h, angle)
