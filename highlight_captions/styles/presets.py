"""Named caption style presets and customization checks.

WHY: Most users pick a look by name and tweak one or two values (colour,
size, position). Each preset declares which of its fields may be
customized and within what range, so a front end can build controls from
it and the library can reject overrides that would break the look.

HOW: Each preset is a plain dict with display metadata, a 'defaults' dict
in the camelCase keys of CaptionStyle's JSON form, and a 'customizable'
list of parameter descriptors (key, type, label, min/max or options).
resolve_style() validates overrides against the descriptors, merges them
onto a deep copy of the defaults and builds a CaptionStyle.

RULES:
- Presets are frozen constants — never mutate them at runtime
- Override keys use the camelCase JSON names ("fontSize", "textColor")
- Colour overrides must be exactly six hex digits, no "#"
- Every problem is reported at once via InvalidCustomizationError
- "custom" exposes every CaptionStyle field
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, List, Mapping, Optional

from highlight_captions.errors import InvalidCustomizationError, UnknownPresetError
from highlight_captions.styles.models import CaptionStyle

_COLOUR_OVERRIDE_RE = re.compile(r"^[0-9A-Fa-f]{6}$")

_FONT_PARAM: Dict[str, Any] = {"key": "fontFamily", "type": "font", "label": "Font"}
_FONT_SIZE_PARAM: Dict[str, Any] = {"key": "fontSize", "type": "number", "label": "Font size", "min": 20, "max": 200}
_TEXT_COLOR_PARAM: Dict[str, Any] = {"key": "textColor", "type": "color", "label": "Text color"}
_ACTIVE_COLOR_PARAM: Dict[str, Any] = {"key": "activeWordColor", "type": "color", "label": "Highlight color"}
_POSITION_PARAM: Dict[str, Any] = {
    "key": "position", "type": "select", "label": "Position",
    "options": ["top", "center", "bottom"],
}
_OFFSET_PARAM: Dict[str, Any] = {
    "key": "positionOffset", "type": "number", "label": "Vertical offset", "min": -500, "max": 500,
}
_UPPERCASE_PARAM: Dict[str, Any] = {"key": "uppercase", "type": "boolean", "label": "Uppercase"}

PRESET_CLASSIC: Dict[str, Any] = {
    "name": "classic",
    "display_name": "Classic",
    "description": "White words with a black outline; the spoken word turns yellow.",
    "defaults": {
        "fontFamily": "Arial",
        "fontSize": 80,
        "fontWeight": 700,
        "uppercase": False,
        "textColor": "FFFFFF",
        "outlineColor": "000000",
        "outlineWidth": 4,
        "activeWordColor": "FFFF00",
        "activeWordOutlineColor": "000000",
        "activeWordOutlineWidth": 4,
        "activeWordFontSize": 90,
        "position": "bottom",
        "positionOffset": 0,
        "backgroundColor": "000000",
        "backgroundOpacity": 0,
        "shadowColor": "000000",
        "shadowOpacity": 0,
        "activeWordShadowColor": "000000",
        "activeWordShadowOpacity": 0,
        "maxGroupDurationMs": 2500,
        "maxWordsPerGroup": 5,
    },
    "customizable": [
        _FONT_PARAM, _FONT_SIZE_PARAM, _TEXT_COLOR_PARAM, _ACTIVE_COLOR_PARAM,
        _POSITION_PARAM, _OFFSET_PARAM, _UPPERCASE_PARAM,
    ],
}

PRESET_BOLD_POP: Dict[str, Any] = {
    "name": "bold_pop",
    "display_name": "Bold Pop",
    "description": "Heavy uppercase words, centred, with a large green highlight and drop shadow.",
    "defaults": {
        "fontFamily": "Montserrat",
        "fontSize": 90,
        "fontWeight": 900,
        "uppercase": True,
        "textColor": "FFFFFF",
        "outlineColor": "000000",
        "outlineWidth": 6,
        "activeWordColor": "39FF14",
        "activeWordOutlineColor": "000000",
        "activeWordOutlineWidth": 7,
        "activeWordFontSize": 110,
        "position": "center",
        "positionOffset": 0,
        "backgroundColor": "000000",
        "backgroundOpacity": 0,
        "shadowColor": "000000",
        "shadowOpacity": 60,
        "activeWordShadowColor": "000000",
        "activeWordShadowOpacity": 80,
        "maxGroupDurationMs": 1800,
        "maxWordsPerGroup": 3,
    },
    "customizable": [
        _FONT_SIZE_PARAM, _TEXT_COLOR_PARAM, _ACTIVE_COLOR_PARAM, _OFFSET_PARAM,
        {"key": "maxWordsPerGroup", "type": "number", "label": "Words per group", "min": 1, "max": 6},
    ],
}

PRESET_BOXED: Dict[str, Any] = {
    "name": "boxed",
    "display_name": "Boxed",
    "description": "Words on a semi-transparent black box, the spoken word in orange.",
    "defaults": {
        "fontFamily": "Roboto",
        "fontSize": 70,
        "fontWeight": 500,
        "uppercase": False,
        "textColor": "FFFFFF",
        "outlineColor": "000000",
        "outlineWidth": 2,
        "activeWordColor": "FF9900",
        "activeWordOutlineColor": "000000",
        "activeWordOutlineWidth": 2,
        "activeWordFontSize": 70,
        "position": "bottom",
        "positionOffset": 100,
        "backgroundColor": "000000",
        "backgroundOpacity": 60,
        "shadowColor": "000000",
        "shadowOpacity": 0,
        "activeWordShadowColor": "000000",
        "activeWordShadowOpacity": 0,
        "maxGroupDurationMs": 2500,
        "maxWordsPerGroup": 5,
    },
    "customizable": [
        _FONT_PARAM, _FONT_SIZE_PARAM, _TEXT_COLOR_PARAM, _ACTIVE_COLOR_PARAM,
        _POSITION_PARAM, _OFFSET_PARAM,
        {"key": "backgroundColor", "type": "color", "label": "Box color"},
        {"key": "backgroundOpacity", "type": "number", "label": "Box opacity", "min": 0, "max": 100},
    ],
}

PRESET_CUSTOM: Dict[str, Any] = {
    "name": "custom",
    "display_name": "Custom",
    "description": "Classic defaults with every parameter open for customization.",
    "defaults": copy.deepcopy(PRESET_CLASSIC["defaults"]),
    "customizable": [
        _FONT_PARAM,
        _FONT_SIZE_PARAM,
        {"key": "fontWeight", "type": "number", "label": "Font weight", "min": 100, "max": 900},
        _UPPERCASE_PARAM,
        _TEXT_COLOR_PARAM,
        {"key": "outlineColor", "type": "color", "label": "Outline color"},
        {"key": "outlineWidth", "type": "number", "label": "Outline width", "min": 0, "max": 20},
        _ACTIVE_COLOR_PARAM,
        {"key": "activeWordOutlineColor", "type": "color", "label": "Highlight outline color"},
        {"key": "activeWordOutlineWidth", "type": "number", "label": "Highlight outline width", "min": 0, "max": 20},
        {"key": "activeWordFontSize", "type": "number", "label": "Highlight font size", "min": 20, "max": 240},
        _POSITION_PARAM,
        _OFFSET_PARAM,
        {"key": "marginHorizontal", "type": "number", "label": "Side margin", "min": 0, "max": 400},
        {"key": "backgroundColor", "type": "color", "label": "Background color"},
        {"key": "backgroundOpacity", "type": "number", "label": "Background opacity", "min": 0, "max": 100},
        {"key": "shadowColor", "type": "color", "label": "Shadow color"},
        {"key": "shadowOpacity", "type": "number", "label": "Shadow opacity", "min": 0, "max": 100},
        {"key": "activeWordShadowColor", "type": "color", "label": "Highlight shadow color"},
        {"key": "activeWordShadowOpacity", "type": "number", "label": "Highlight shadow opacity", "min": 0, "max": 100},
        {"key": "maxGroupDurationMs", "type": "number", "label": "Max group duration (ms)", "min": 500, "max": 10000},
        {"key": "maxWordsPerGroup", "type": "number", "label": "Words per group", "min": 1, "max": 12},
    ],
}

# Preset lookup by name
PRESETS: Dict[str, Dict[str, Any]] = {
    "classic": PRESET_CLASSIC,
    "bold_pop": PRESET_BOLD_POP,
    "boxed": PRESET_BOXED,
    "custom": PRESET_CUSTOM,
}


def list_presets() -> List[Dict[str, str]]:
    """Name, display name and description of every preset."""
    return [
        {
            "name": preset["name"],
            "display_name": preset["display_name"],
            "description": preset["description"],
        }
        for preset in PRESETS.values()
    ]


def get_preset(name: str) -> Dict[str, Any]:
    """Return a deep copy of the named preset.

    Raises:
        UnknownPresetError: If the name is not registered.
    """
    if name not in PRESETS:
        raise UnknownPresetError(
            "Unknown preset '{}'. Available: {}".format(name, ", ".join(PRESETS.keys()))
        )
    return copy.deepcopy(PRESETS[name])


def _check_value(param: Mapping[str, Any], value: Any) -> Optional[str]:
    key = param["key"]
    kind = param["type"]
    if kind == "number":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return "Parameter '{}' must be a number".format(key)
        if "min" in param and value < param["min"]:
            return "Parameter '{}' must be at least {}".format(key, param["min"])
        if "max" in param and value > param["max"]:
            return "Parameter '{}' must be at most {}".format(key, param["max"])
    elif kind == "color":
        if not isinstance(value, str) or not _COLOUR_OVERRIDE_RE.match(value):
            return "Parameter '{}' must be a valid hex color (6 characters, no # prefix)".format(key)
    elif kind == "select":
        if value not in param.get("options", []):
            return "Parameter '{}' must be one of: {}".format(key, ", ".join(param["options"]))
    elif kind == "boolean":
        if not isinstance(value, bool):
            return "Parameter '{}' must be a boolean".format(key)
    elif kind == "font":
        if not isinstance(value, str) or not value.strip():
            return "Parameter '{}' must be a non-empty font name".format(key)
    return None


def validate_customizations(name: str, customizations: Mapping[str, Any]) -> List[str]:
    """Check overrides against the preset's customizable parameters.

    Returns:
        List of error messages; empty when every override is acceptable.

    Raises:
        UnknownPresetError: If the preset does not exist.
    """
    preset = get_preset(name)
    params = {param["key"]: param for param in preset["customizable"]}
    errors: List[str] = []
    for key, value in customizations.items():
        param = params.get(key)
        if param is None:
            errors.append("Parameter '{}' is not customizable for preset '{}'".format(key, name))
            continue
        problem = _check_value(param, value)
        if problem:
            errors.append(problem)
    return errors


def resolve_style(name: str, customizations: Optional[Mapping[str, Any]] = None) -> CaptionStyle:
    """Build the CaptionStyle for a preset plus optional overrides.

    Args:
        name: Preset name ("classic", "bold_pop", "boxed", "custom").
        customizations: camelCase overrides, validated against the preset.

    Returns:
        A frozen CaptionStyle.

    Raises:
        UnknownPresetError: If the preset does not exist.
        InvalidCustomizationError: If any override is rejected.
    """
    preset = get_preset(name)
    values = preset["defaults"]
    if customizations:
        errors = validate_customizations(name, customizations)
        if errors:
            raise InvalidCustomizationError(errors, preset=name)
        values.update(customizations)
    return CaptionStyle.model_validate(values)
