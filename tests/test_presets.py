"""Unit tests for style presets and customization checks.

WHY: The presets are what most callers actually use. A preset whose
defaults fail model validation, or a customization check that lets a bad
colour through, only shows up at render time.

HOW: Every preset is resolved without overrides; overrides are checked
for each parameter type and for keys a preset does not expose.
"""

import pytest

from highlight_captions.errors import InvalidCustomizationError, UnknownPresetError
from highlight_captions.styles.models import CaptionPosition, CaptionStyle
from highlight_captions.styles.presets import (
    PRESETS,
    get_preset,
    list_presets,
    resolve_style,
    validate_customizations,
)


class TestPresetRegistry:

    def test_known_presets(self):
        assert set(PRESETS) == {"classic", "bold_pop", "boxed", "custom"}

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_every_preset_resolves(self, name):
        assert isinstance(resolve_style(name), CaptionStyle)

    def test_classic_matches_model_defaults(self):
        assert resolve_style("classic") == CaptionStyle()

    def test_list_presets(self):
        names = [p["name"] for p in list_presets()]
        assert names == list(PRESETS)
        assert all(p["display_name"] and p["description"] for p in list_presets())

    def test_get_preset_returns_copy(self):
        preset = get_preset("classic")
        preset["defaults"]["fontSize"] = 1
        assert PRESETS["classic"]["defaults"]["fontSize"] == 80

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError, match="Available"):
            get_preset("neon")

    def test_bold_pop_look(self):
        style = resolve_style("bold_pop")
        assert style.uppercase is True
        assert style.position == CaptionPosition.center.value
        assert style.max_words_per_group == 3

    def test_boxed_has_background(self):
        assert resolve_style("boxed").background_opacity > 0


class TestCustomizations:

    def test_valid_overrides_applied(self):
        style = resolve_style("classic", {"fontSize": 100, "textColor": "FF0000", "position": "top"})
        assert style.font_size == 100
        assert style.text_color == "FF0000"
        assert style.position == "top"

    def test_overrides_do_not_leak_into_preset(self):
        resolve_style("classic", {"fontSize": 100})
        assert resolve_style("classic").font_size == 80

    def test_non_customizable_key(self):
        errors = validate_customizations("classic", {"maxGroupDurationMs": 1000})
        assert errors == ["Parameter 'maxGroupDurationMs' is not customizable for preset 'classic'"]

    def test_custom_exposes_everything(self):
        assert validate_customizations("custom", {"maxGroupDurationMs": 1000, "shadowOpacity": 50}) == []

    def test_fractional_word_budget(self):
        style = resolve_style("custom", {"maxWordsPerGroup": 2.5})
        assert style.max_words_per_group == 2.5

    @pytest.mark.parametrize("overrides,fragment", [
        ({"fontSize": 10}, "at least 20"),
        ({"fontSize": 500}, "at most 200"),
        ({"fontSize": "big"}, "must be a number"),
        ({"fontSize": True}, "must be a number"),
        ({"textColor": "#FF0000"}, "valid hex color"),
        ({"textColor": "red"}, "valid hex color"),
        ({"position": "left"}, "one of: top, center, bottom"),
        ({"uppercase": "yes"}, "must be a boolean"),
        ({"fontFamily": "  "}, "non-empty font name"),
    ])
    def test_rejected_values(self, overrides, fragment):
        errors = validate_customizations("classic", overrides)
        assert len(errors) == 1
        assert fragment in errors[0]

    def test_all_errors_reported_together(self):
        with pytest.raises(InvalidCustomizationError) as excinfo:
            resolve_style("classic", {"fontSize": 10, "textColor": "nope"})
        assert len(excinfo.value.errors) == 2
        assert excinfo.value.preset == "classic"
        assert str(excinfo.value).startswith("Invalid customizations: ")

    def test_unknown_preset_with_overrides(self):
        with pytest.raises(UnknownPresetError):
            resolve_style("neon", {"fontSize": 100})
