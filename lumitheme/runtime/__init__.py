# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Lumitheme.

Serialization of Theme data for its consumers:

1. Document -- JSON or natural-language output
2. Template data -- context for config-file templating engines
3. Preview -- colored swatches in the terminal

The delivery layer never modifies theme content.
"""

from lumitheme.runtime.serializers import (
    SerializerFormat,
    closest_hue,
    make_color_lch,
    print_preview,
    to_document,
    to_template_data,
)

__all__ = [
    "to_document",
    "to_template_data",
    "closest_hue",
    "make_color_lch",
    "print_preview",
    "SerializerFormat",
]
