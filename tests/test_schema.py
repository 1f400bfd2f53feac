# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import json
import math

import numpy as np
import pytest

from lumitheme.schema import (
    ROLE_NAMES,
    SCHEMA_VERSION,
    ColorSpace,
    OklabColor,
    OklchColor,
    Palette,
    RGBColor,
    Theme,
    color_from_dict,
    convert,
)


def _theme(luminosity=0.2, **overrides):
    gray = OklchColor(0.5, 0.0, 0.0)
    fields = dict(
        background=OklchColor(0.2, 0.02, 1.0),
        foreground=OklchColor(0.225, 0.02, 1.0),
        surfaces=(gray, gray, gray, gray),
        text=OklchColor(0.8, 0.01, 2.0),
        subtext=OklchColor(0.73, 0.01, 2.0),
        primary=OklchColor(0.8, 0.12, 0.5),
        accents=tuple(OklchColor(0.8, 0.1, 0.5 + i * math.pi / 4) for i in range(1, 8)),
        luminosity=luminosity,
        accent_luminosity=0.8,
        accent_chroma=0.1,
    )
    fields.update(overrides)
    return Theme(**fields)


class TestRGBColor:

    def test_valid_color(self):
        c = RGBColor(1.0, 0.5, 0.0)
        assert c.space == ColorSpace.RGB
        assert c.to_uint8() == (255, 128, 0)

    def test_invalid_channel(self):
        with pytest.raises(ValueError, match="RGB channel g"):
            RGBColor(0.5, 1.5, 0.0)

    def test_hex_and_rgb_string(self):
        c = RGBColor(1.0, 0.0, 0.0)
        assert c.hex == "#FF0000"
        assert c.rgb_string == "255, 0, 0"

    def test_hex_rounds_channels(self):
        assert RGBColor(1.0, 0.0, 0.5).hex == "#FF0080"
        assert RGBColor(0.0, 0.0, 0.0).hex == "#000000"

    def test_from_hex(self):
        assert RGBColor.from_hex("#3366CC").hex == "#3366CC"
        assert RGBColor.from_hex("3366cc").hex == "#3366CC"

    def test_from_hex_invalid(self):
        with pytest.raises(ValueError, match="6 hex digits"):
            RGBColor.from_hex("#FFF")

    def test_conversion_roundtrip(self):
        c = RGBColor(0.2, 0.4, 0.6)
        back = c.to_oklch().to_rgb()
        assert back.r == pytest.approx(c.r, abs=1e-6)
        assert back.g == pytest.approx(c.g, abs=1e-6)
        assert back.b == pytest.approx(c.b, abs=1e-6)


class TestOklabColor:

    def test_chroma(self):
        assert OklabColor(0.5, 0.03, 0.04).chroma == pytest.approx(0.05)

    def test_to_oklch(self):
        lch = OklabColor(0.5, 0.0, 0.1).to_oklch()
        assert lch.L == 0.5
        assert lch.C == pytest.approx(0.1)
        assert lch.h == pytest.approx(math.pi / 2)

    def test_to_rgb_is_clipped(self):
        rgb = OklabColor(1.5, 0.0, 0.0).to_rgb()
        assert rgb.hex == "#FFFFFF"


class TestOklchColor:

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            OklchColor(0.5, -0.1, 0.0)

    def test_hue_degrees_normalized(self):
        assert OklchColor(0.5, 0.1, -math.pi / 2).hue_degrees == pytest.approx(270.0)
        assert OklchColor(0.5, 0.1, math.pi).hue_degrees == pytest.approx(180.0)

    def test_to_oklab(self):
        lab = OklchColor(0.6, 0.1, math.pi).to_oklab()
        assert lab.L == 0.6
        assert lab.a == pytest.approx(-0.1)
        assert lab.b == pytest.approx(0.0, abs=1e-12)


class TestConvert:

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_tag_matches(self, space):
        assert convert(RGBColor(0.3, 0.6, 0.9), space).space == space

    def test_same_space_is_identity(self):
        c = OklabColor(0.5, 0.1, 0.0)
        assert convert(c, ColorSpace.OKLAB) is c

    @pytest.mark.parametrize("color", [
        RGBColor(0.1, 0.2, 0.3),
        OklabColor(0.5, -0.05, 0.07),
        OklchColor(0.7, 0.12, 2.5),
    ])
    def test_color_from_dict(self, color):
        assert color_from_dict(color.to_dict()) == color

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            color_from_dict({"space": "hsl", "h": 0})


class TestPalette:

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            Palette(())

    def test_unsorted(self):
        with pytest.raises(ValueError, match="sorted"):
            Palette((OklabColor(0.8, 0, 0), OklabColor(0.2, 0, 0)))

    def test_duplicates_allowed(self):
        c = OklabColor(0.5, 0.0, 0.0)
        palette = Palette((c, c, c))
        assert len(palette) == 3

    def test_array_roundtrip(self):
        lab = np.array([[0.1, 0.0, 0.0], [0.5, 0.1, -0.1], [0.9, 0.0, 0.02]])
        palette = Palette.from_array(lab)
        assert palette[1] == OklabColor(0.5, 0.1, -0.1)
        np.testing.assert_array_equal(palette.to_array(), lab)

    def test_dict_roundtrip(self):
        palette = Palette.from_array([[0.2, 0.0, 0.0], [0.4, 0.1, 0.0]])
        assert Palette.from_dict(palette.to_dict()) == palette


class TestTheme:

    def test_roles_in_order(self):
        theme = _theme()
        assert len(theme) == 16
        assert tuple(name for name, _ in theme) == ROLE_NAMES
        assert theme.roles[0][1] == theme.background
        assert theme.roles[8][1] == theme.primary

    def test_role_names(self):
        assert ROLE_NAMES[:2] == ("background", "foreground")
        assert ROLE_NAMES[-1] == "accent6"
        assert "surface3" in ROLE_NAMES and "subtext" in ROLE_NAMES

    def test_hue_colors(self):
        theme = _theme()
        assert theme.hue_colors[0] == theme.primary
        assert len(theme.hue_colors) == 8

    def test_is_dark(self):
        assert _theme(luminosity=0.2).is_dark
        assert _theme(luminosity=0.64).is_dark
        assert not _theme(luminosity=0.65).is_dark

    def test_get(self):
        theme = _theme()
        assert theme.get("text") == theme.text
        assert theme.get("accent0") == theme.accents[0]

    def test_get_unknown(self):
        with pytest.raises(KeyError):
            _theme().get("sidebar")

    def test_wrong_surface_count(self):
        with pytest.raises(ValueError, match="4 surfaces"):
            _theme(surfaces=(OklchColor(0.5, 0.0),))

    def test_wrong_accent_count(self):
        with pytest.raises(ValueError, match="7 accents"):
            _theme(accents=())

    def test_invalid_luminosity(self):
        with pytest.raises(ValueError, match="Luminosity"):
            _theme(luminosity=1.5)

    def test_convert(self):
        rgb = _theme().convert(ColorSpace.RGB)
        assert all(isinstance(c, RGBColor) for c in rgb.colors)
        assert rgb.luminosity == 0.2
        assert rgb.accent_chroma == 0.1

    def test_frozen(self):
        theme = _theme()
        with pytest.raises(AttributeError):
            theme.luminosity = 0.5

    def test_json_roundtrip(self):
        theme = _theme()
        recovered = Theme.from_json(theme.to_json())
        assert recovered == theme
        assert recovered.version == SCHEMA_VERSION

    def test_to_dict_layout(self):
        data = json.loads(_theme().to_json())
        assert list(data["colors"]) == list(ROLE_NAMES)
        assert data["colors"]["background"]["space"] == "oklch"

    def test_from_dict_missing_role(self):
        data = _theme().to_dict()
        del data["colors"]["accent3"]
        with pytest.raises(ValueError, match="accent3"):
            Theme.from_dict(data)
