"""Tests for built-in style presets."""

import pytest
from gvm.style_presets import StylePreset, DEFAULT_PRESETS, get_preset, list_preset_names
from gvm.styles import Rgba


class TestStylePreset:
    """Tests for StylePreset model."""

    def test_valid_preset(self):
        """Should create valid style preset."""
        preset = StylePreset(name="test", color=Rgba(r=1, g=2, b=3), mode="stroke", description="Test preset")
        assert preset.name == "test"
        assert preset.mode == "stroke"
        assert preset.description == "Test preset"

    def test_name_validation(self):
        """Should validate preset name length."""
        with pytest.raises(ValueError):
            StylePreset(name="", color=Rgba(r=0, g=0, b=0))

        with pytest.raises(ValueError):
            StylePreset(name="x" * 51, color=Rgba(r=0, g=0, b=0))

    def test_invalid_mode(self):
        """Should reject unknown style modes."""
        with pytest.raises(ValueError):
            StylePreset(name="bad", color=Rgba(r=0, g=0, b=0), mode="dashed")

    def test_to_style(self):
        """Should resolve to a draw style of the preset's mode."""
        style = StylePreset(name="g", color=Rgba(r=10, g=20, b=30), mode="grad").to_style()
        assert style.mode == "grad"
        assert len(style.stops) == 4


class TestDefaultPresets:
    """Tests for the built-in catalog."""

    def test_names_match_keys(self):
        """Should key every preset by its own name."""
        for key, preset in DEFAULT_PRESETS.items():
            assert key == preset.name

    def test_all_presets_resolve(self):
        """Should build a style for every preset."""
        for preset in DEFAULT_PRESETS.values():
            assert preset.to_style().mode == preset.mode

    def test_covers_every_mode(self):
        """Should include fill, stroke and gradient presets."""
        assert {p.mode for p in DEFAULT_PRESETS.values()} == {"fill", "stroke", "grad"}

    def test_get_preset(self):
        """Should look up presets by name."""
        assert get_preset("coral").color.as_tuple() == (255, 111, 97, 255)
        assert get_preset("missing") is None

    def test_list_preset_names_sorted(self):
        """Should list names alphabetically."""
        names = list_preset_names()
        assert names == sorted(names)
        assert "ember" in names
