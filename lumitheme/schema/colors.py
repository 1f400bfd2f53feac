# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Color value types.

Three representations form a closed set:
- RGBColor: gamma-encoded sRGB, channels in [0, 1]
- OklabColor: perceptual lightness L plus opponent axes a/b
- OklchColor: polar form of Oklab (L, chroma, hue in radians)

Every type converts to the others through ``to_rgb()``, ``to_oklab()`` and
``to_oklch()``; ``convert()`` does the same by space tag. All types are
immutable (frozen dataclasses).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ColorSpace(Enum):
    """Tag identifying a color representation."""
    RGB = "rgb"
    OKLAB = "oklab"
    OKLCH = "oklch"


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A display color in gamma-encoded sRGB.

    Attributes:
        r, g, b: Channels in [0, 1]
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        """Validate channels are within [0, 1]."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"RGB channel {name} must be 0-1, got {value}")

    @property
    def space(self) -> ColorSpace:
        return ColorSpace.RGB

    def to_uint8(self) -> tuple[int, int, int]:
        """Channels scaled to 0-255 and rounded."""
        return (
            int(round(self.r * 255)),
            int(round(self.g * 255)),
            int(round(self.b * 255)),
        )

    @property
    def hex(self) -> str:
        """Hex color string like "#3941C8"."""
        r, g, b = self.to_uint8()
        return f"#{r:02X}{g:02X}{b:02X}"

    @property
    def rgb_string(self) -> str:
        """Decimal triple like "57, 65, 200"."""
        r, g, b = self.to_uint8()
        return f"{r}, {g}, {b}"

    def to_rgb(self) -> RGBColor:
        return self

    def to_oklab(self) -> OklabColor:
        from lumitheme.engine.colorspace import rgb_to_oklab
        L, a, b = rgb_to_oklab((self.r, self.g, self.b))
        return OklabColor(float(L), float(a), float(b))

    def to_oklch(self) -> OklchColor:
        return self.to_oklab().to_oklch()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBColor:
        """Parse "#RRGGBB" or "RRGGBB"."""
        hex_color = hex_color.lstrip("#")
        if len(hex_color) != 6:
            raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
        return cls(
            r=int(hex_color[0:2], 16) / 255.0,
            g=int(hex_color[2:4], 16) / 255.0,
            b=int(hex_color[4:6], 16) / 255.0,
        )


@dataclass(frozen=True, slots=True)
class OklabColor:
    """
    A color in Oklab space.

    Attributes:
        L: Perceptual lightness (nominally 0.0 = black, 1.0 = white)
        a: Green-red opponent axis
        b: Blue-yellow opponent axis
    """
    L: float
    a: float
    b: float

    @property
    def space(self) -> ColorSpace:
        return ColorSpace.OKLAB

    @property
    def chroma(self) -> float:
        return math.hypot(self.a, self.b)

    def to_rgb(self) -> RGBColor:
        from lumitheme.engine.colorspace import oklab_to_rgb
        r, g, b = oklab_to_rgb((self.L, self.a, self.b))
        return RGBColor(float(r), float(g), float(b))

    def to_oklab(self) -> OklabColor:
        return self

    def to_oklch(self) -> OklchColor:
        return OklchColor(self.L, math.hypot(self.a, self.b), math.atan2(self.b, self.a))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "L": self.L, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> OklabColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], a=data["a"], b=data["b"])


@dataclass(frozen=True, slots=True)
class OklchColor:
    """
    A color in OkLCh space (cylindrical Oklab).

    Attributes:
        L: Lightness, same as Oklab L
        C: Chroma (0.0 = neutral gray, ~0.32 is the sRGB maximum)
        h: Hue angle in radians, as returned by atan2 (wraps at 2π)
    """
    L: float
    C: float
    h: float = 0.0

    def __post_init__(self) -> None:
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")

    @property
    def space(self) -> ColorSpace:
        return ColorSpace.OKLCH

    @property
    def hue_degrees(self) -> float:
        """Hue in degrees, normalized to [0, 360)."""
        return math.degrees(self.h) % 360.0

    def to_rgb(self) -> RGBColor:
        return self.to_oklab().to_rgb()

    def to_oklab(self) -> OklabColor:
        return OklabColor(self.L, self.C * math.cos(self.h), self.C * math.sin(self.h))

    def to_oklch(self) -> OklchColor:
        return self

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"space": self.space.value, "L": self.L, "C": self.C, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> OklchColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], h=data.get("h", 0.0))


Color = Union[RGBColor, OklabColor, OklchColor]

_COLOR_TYPES = {
    ColorSpace.RGB: RGBColor,
    ColorSpace.OKLAB: OklabColor,
    ColorSpace.OKLCH: OklchColor,
}


def convert(color: Color, space: ColorSpace) -> Color:
    """Convert any color to the representation tagged by ``space``."""
    if space == ColorSpace.RGB:
        return color.to_rgb()
    elif space == ColorSpace.OKLAB:
        return color.to_oklab()
    else:
        return color.to_oklch()


def color_from_dict(data: dict) -> Color:
    """Deserialize a color dictionary produced by any ``to_dict()``."""
    space = ColorSpace(data["space"])
    return _COLOR_TYPES[space].from_dict(data)
