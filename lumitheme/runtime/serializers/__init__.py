# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Serializers for Theme delivery.

Each serializer formats a Theme for a specific consumer. All serializers
preserve the theme exactly -- no modification or inference.
"""

from lumitheme.runtime.serializers.base import SerializerFormat
from lumitheme.runtime.serializers.document import to_document
from lumitheme.runtime.serializers.preview import print_preview
from lumitheme.runtime.serializers.template import (
    closest_hue,
    make_color_lch,
    to_template_data,
)

__all__ = [
    "SerializerFormat",
    "to_document",
    "to_template_data",
    "closest_hue",
    "make_color_lch",
    "print_preview",
]
