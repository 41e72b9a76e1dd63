"""
Built-in draw-style presets.

Presets pair a base color with a style mode. They are defined in code
only; nothing is read from or written to disk.
"""

from typing import Optional

from pydantic import BaseModel, Field
from gvm.styles import DrawStyle, Rgba, StyleMode, make_style


class StylePreset(BaseModel):
    """Named base color + style mode."""
    name: str = Field(..., min_length=1, max_length=50, description="Preset name")
    color: Rgba
    mode: StyleMode = "fill"
    description: str = Field("", max_length=200, description="Optional description")

    def to_style(self) -> DrawStyle:
        return make_style(self.color, self.mode)


# ============================================================================
# Default Presets
# ============================================================================

DEFAULT_PRESETS = {
    "coral": StylePreset(
        name="coral",
        description="Flat coral fill",
        color=Rgba(r=255, g=111, b=97),     # #ff6f61
        mode="fill",
    ),

    "ultra_violet": StylePreset(
        name="ultra_violet",
        description="Thin violet outline",
        color=Rgba(r=107, g=91, b=149),     # #6b5b95
        mode="stroke",
    ),

    "ember": StylePreset(
        name="ember",
        description="Glossy red-orange gradient fill",
        color=Rgba(r=220, g=60, b=30),
        mode="grad",
    ),

    "lagoon": StylePreset(
        name="lagoon",
        description="Glossy teal gradient fill",
        color=Rgba(r=0, g=150, b=170),
        mode="grad",
    ),

    "chalk": StylePreset(
        name="chalk",
        description="Off-white outline for dark backgrounds",
        color=Rgba(r=235, g=235, b=225),
        mode="stroke",
    ),
}


def get_preset(name: str) -> Optional[StylePreset]:
    return DEFAULT_PRESETS.get(name)


def list_preset_names() -> list[str]:
    return sorted(DEFAULT_PRESETS.keys())
