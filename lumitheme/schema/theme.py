# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Palette and Theme, the two products of the pipeline.

Design principles:
- Immutable: both types are frozen dataclasses
- Ordered: a Palette is sorted by lightness, a Theme iterates its roles
  in a fixed order
- Serializable: JSON-ready for templates and tooling

Theme roles (16 colors):

    background, foreground        base anchor family
    surface0 .. surface3          lightness steps away from the background
    text, subtext                 near-neutral, high contrast
    primary, accent0 .. accent6   spread around the hue wheel
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from lumitheme.schema.colors import (
    Color,
    ColorSpace,
    OklabColor,
    color_from_dict,
    convert,
)


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"

# Base luminosities below this build a dark theme, the rest a light one.
DARK_THEME_THRESHOLD = 0.65

SURFACE_COUNT = 4
ACCENT_COUNT = 7

ROLE_NAMES: tuple[str, ...] = (
    "background",
    "foreground",
    *(f"surface{i}" for i in range(SURFACE_COUNT)),
    "text",
    "subtext",
    "primary",
    *(f"accent{i}" for i in range(ACCENT_COUNT)),
)


# =============================================================================
# Palette
# =============================================================================


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Representative colors of an image, sorted by lightness.

    Produced by a quantizer. May contain duplicate or near-duplicate
    colors when the source image lacks diversity.

    Attributes:
        colors: Oklab colors, non-decreasing in L
    """
    colors: tuple[OklabColor, ...]

    def __post_init__(self) -> None:
        """Validate palette structure."""
        if not self.colors:
            raise ValueError("Palette cannot be empty")
        lightness = [c.L for c in self.colors]
        if any(b < a for a, b in zip(lightness, lightness[1:])):
            raise ValueError("Palette colors must be sorted by lightness")

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[OklabColor]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> OklabColor:
        return self.colors[index]

    def to_array(self) -> NDArray[np.float64]:
        """Colors as an (N, 3) array of Oklab rows."""
        return np.array([[c.L, c.a, c.b] for c in self.colors], dtype=np.float64)

    @classmethod
    def from_array(cls, lab: NDArray[np.float64]) -> Palette:
        """Build from an (N, 3) array of Oklab rows (already sorted)."""
        lab = np.asarray(lab, dtype=np.float64).reshape(-1, 3)
        return cls(tuple(OklabColor(float(L), float(a), float(b)) for L, a, b in lab))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"colors": [c.to_dict() for c in self.colors]}

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(tuple(OklabColor.from_dict(c) for c in data["colors"]))


# =============================================================================
# Theme
# =============================================================================


@dataclass(frozen=True, slots=True)
class Theme:
    """
    A 16-color UI theme.

    Colors may be in any representation; ``convert()`` returns a copy in a
    single space. The synthesizer produces OkLCh themes, the pipeline hands
    out RGB ones.

    Attributes:
        background: Base color of the UI
        foreground: Slightly offset from background (panels, bars)
        surfaces: Four increasingly offset surface colors
        text: Main text color, near-neutral
        subtext: Secondary text, less contrast than text
        primary: Main accent color
        accents: Seven further accents around the hue wheel
        luminosity: Base luminosity the theme was built for (0-1)
        accent_luminosity: Lightness targeted by the accent search
        accent_chroma: Average chroma used for synthesized accents
        roles: (role name, color) pairs in ROLE_NAMES order, built once
    """
    background: Color
    foreground: Color
    surfaces: tuple[Color, ...]
    text: Color
    subtext: Color
    primary: Color
    accents: tuple[Color, ...]
    luminosity: float
    accent_luminosity: float
    accent_chroma: float
    version: str = field(default=SCHEMA_VERSION)
    roles: tuple[tuple[str, Color], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate theme structure and build the role list."""
        if len(self.surfaces) != SURFACE_COUNT:
            raise ValueError(
                f"Theme requires {SURFACE_COUNT} surfaces, got {len(self.surfaces)}"
            )
        if len(self.accents) != ACCENT_COUNT:
            raise ValueError(
                f"Theme requires {ACCENT_COUNT} accents, got {len(self.accents)}"
            )
        if not 0.0 <= self.luminosity <= 1.0:
            raise ValueError(f"Luminosity must be 0-1, got {self.luminosity}")

        colors = (
            self.background,
            self.foreground,
            *self.surfaces,
            self.text,
            self.subtext,
            self.primary,
            *self.accents,
        )
        object.__setattr__(self, "roles", tuple(zip(ROLE_NAMES, colors)))

    @property
    def is_dark(self) -> bool:
        return self.luminosity < DARK_THEME_THRESHOLD

    @property
    def colors(self) -> tuple[Color, ...]:
        """All 16 colors in role order."""
        return tuple(color for _, color in self.roles)

    @property
    def hue_colors(self) -> tuple[Color, ...]:
        """The hue-bearing colors: primary followed by the accents."""
        return (self.primary, *self.accents)

    def __iter__(self) -> Iterator[tuple[str, Color]]:
        return iter(self.roles)

    def __len__(self) -> int:
        return len(self.roles)

    def get(self, role: str) -> Color:
        """Get a color by role name."""
        for name, color in self.roles:
            if name == role:
                return color
        raise KeyError(f"No role named '{role}'")

    def convert(self, space: ColorSpace) -> Theme:
        """Return a copy of the theme with every color in ``space``."""
        return Theme(
            background=convert(self.background, space),
            foreground=convert(self.foreground, space),
            surfaces=tuple(convert(c, space) for c in self.surfaces),
            text=convert(self.text, space),
            subtext=convert(self.subtext, space),
            primary=convert(self.primary, space),
            accents=tuple(convert(c, space) for c in self.accents),
            luminosity=self.luminosity,
            accent_luminosity=self.accent_luminosity,
            accent_chroma=self.accent_chroma,
            version=self.version,
        )

    def to_rgb(self) -> Theme:
        return self.convert(ColorSpace.RGB)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "version": self.version,
            "luminosity": self.luminosity,
            "accent_luminosity": self.accent_luminosity,
            "accent_chroma": self.accent_chroma,
            "colors": {name: color.to_dict() for name, color in self.roles},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Theme:
        """Deserialize from dictionary."""
        colors = data["colors"]
        missing = [name for name in ROLE_NAMES if name not in colors]
        if missing:
            raise ValueError(f"Theme is missing roles: {', '.join(missing)}")
        c = {name: color_from_dict(colors[name]) for name in ROLE_NAMES}
        return cls(
            background=c["background"],
            foreground=c["foreground"],
            surfaces=tuple(c[f"surface{i}"] for i in range(SURFACE_COUNT)),
            text=c["text"],
            subtext=c["subtext"],
            primary=c["primary"],
            accents=tuple(c[f"accent{i}"] for i in range(ACCENT_COUNT)),
            luminosity=data["luminosity"],
            accent_luminosity=data["accent_luminosity"],
            accent_chroma=data["accent_chroma"],
            version=data.get("version", SCHEMA_VERSION),
        )

    @classmethod
    def from_json(cls, json_str: str) -> Theme:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
