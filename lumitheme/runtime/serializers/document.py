# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Theme document serializer.

Formats a Theme as a standalone document: JSON for tooling and config
generators, or a natural-language summary for humans.
"""

from __future__ import annotations

import json

from lumitheme.runtime.serializers.base import SerializerFormat, describe_color
from lumitheme.runtime.serializers.template import color_data
from lumitheme.schema import Theme


def to_document(
    theme: Theme,
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize a theme for output.

    JSON formats carry the template fields of every role (hex, decimal
    RGB and OkLCh with hue in degrees) plus the accent search parameters.

    Args:
        theme: Theme in any color space.
        format: JSON, JSON_PRETTY or NATURAL.

    Returns:
        Serialized document.

    Example (JSON_PRETTY)::

        {
          "tool": "lumitheme",
          "version": "1.0",
          "mode": "dark",
          "luminosity": 0.2,
          "accent_luminosity": 0.8,
          "accent_chroma": 0.113,
          "colors": {
            "background": {"hex": "#1D1F2B", "rgb": "29, 31, 43", ...},
            ...
          }
        }
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(theme)

    data = _build_document_data(theme)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def _build_document_data(theme: Theme) -> dict:
    return {
        "tool": "lumitheme",
        "version": theme.version,
        "mode": "dark" if theme.is_dark else "light",
        "luminosity": round(theme.luminosity, 3),
        "accent_luminosity": round(theme.accent_luminosity, 3),
        "accent_chroma": round(theme.accent_chroma, 3),
        "colors": {
            name: {
                key: round(value, 3) if isinstance(value, float) else value
                for key, value in color_data(color).items()
            }
            for name, color in theme.roles
        },
    }


def _to_natural(theme: Theme) -> str:
    """Generate natural language representation."""
    mode = "Dark" if theme.is_dark else "Light"
    lines = [
        f"## {mode} theme (luminosity {theme.luminosity:.2f})",
        "",
    ]

    for name, color in theme.roles:
        data = color_data(color)
        desc = describe_color(color)
        lines.append(
            f"- {name}: {data['hex']} {desc} "
            f"(L={data['L']:.2f}, C={data['C']:.2f}, H={data['hue']:.0f}°)"
        )
    lines.append("")
    lines.append(
        f"Accents searched at L={theme.accent_luminosity:.2f} "
        f"with average chroma {theme.accent_chroma:.3f}."
    )
    return "\n".join(lines)
