"""Resolution-dependent layout, colour encoding and word rendering.

WHY: A style is authored once at 1080x1920 but rendered onto videos of any
size, and ASS wants colours in its own reversed-byte hex notation. This
module turns (resolution, CaptionStyle) into the concrete numbers and
strings that the encoder writes, and renders each word's override tags.

HOW: compute_style_parameters() is a deterministic record-to-record
mapping. It converts every colour up front, so a malformed colour fails
before any grouping work. render_word() and render_group_text() use the
precomputed values to build the per-word override blocks.

RULES:
- scale_factor = min(width / 1080, height / 1920)
- Font sizes round half up (not banker's rounding)
- Colours: "RRGGBB" (optional leading "#") → "BBGGRR"; anything else is a
  MalformedColorError
- Alpha = round_half_up((100 - opacity) * 2.55) as two upper-case hex digits
- Border style 4 (opaque box) when background_opacity > 0, otherwise 1
- Vertical margin = max(0, floor(height * anchor) - position_offset),
  anchor 0.9 top, 0.5 center, 0.15 bottom
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from highlight_captions.core.ir import VideoResolution
from highlight_captions.errors import MalformedColorError
from highlight_captions.styles.models import CaptionStyle

REFERENCE_WIDTH = 1080
REFERENCE_HEIGHT = 1920

BORDER_STYLE_OUTLINE = 1
BORDER_STYLE_BOX = 4

_HEX_COLOUR_RE = re.compile(r"^[0-9A-Fa-f]{6}$")

_POSITION_ANCHORS = {
    "top": 0.9,
    "center": 0.5,
    "bottom": 0.15,
}

_ACTIVE_SHADOW_DEPTH = 4
_INACTIVE_SHADOW_DEPTH = 2

TRANSPARENT_BLACK = "&H00000000&"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _fmt_number(value: float) -> str:
    """Format 4.0 as "4" and 2.5 as "2.5" for tag and style values."""
    return "{:g}".format(value)


def hex_to_bgr(hex_colour: str) -> str:
    """Convert "RRGGBB" (or "#RRGGBB") to ASS byte order "BBGGRR".

    Raises:
        MalformedColorError: If the value is not six hex digits.
    """
    if not isinstance(hex_colour, str):
        raise MalformedColorError("Invalid hex color: {!r}".format(hex_colour))
    value = hex_colour.strip()
    if value.startswith("#"):
        value = value[1:]
    if not _HEX_COLOUR_RE.match(value):
        raise MalformedColorError("Invalid hex color: {!r}".format(hex_colour))
    value = value.upper()
    return value[4:6] + value[2:4] + value[0:2]


def opacity_to_alpha(opacity: float) -> str:
    """Convert opacity 0..100 to ASS alpha "00".."FF" (00 is opaque)."""
    if opacity < 0 or opacity > 100:
        raise ValueError("Opacity must be between 0 and 100, got {}".format(opacity))
    return "{:02X}".format(round_half_up((100 - opacity) * 2.55))


def ass_colour(hex_colour: str, opacity: float = 100) -> str:
    """Full style-line colour: "&HAABBGGRR&"."""
    return "&H{}{}&".format(opacity_to_alpha(opacity), hex_to_bgr(hex_colour))


@dataclass(frozen=True)
class WordStyle:
    """Precomputed override-tag values for one word state."""

    font_size: int
    colour_bgr: str
    outline_bgr: str
    outline_width: float
    shadow_tag: str


@dataclass(frozen=True)
class StyleParameters:
    """Everything the encoder and word renderer need, in final units."""

    font_family: str
    font_size: int
    font_weight: int
    bold: bool
    uppercase: bool
    scale_factor: float
    primary_colour: str
    secondary_colour: str
    outline_colour: str
    back_colour: str
    border_style: int
    outline_width: float
    margin_l: int
    margin_r: int
    margin_v: int
    inactive: WordStyle
    active: WordStyle


def _shadow_tag(hex_colour: str, opacity: float, depth: int) -> str:
    # Colour is converted even when the shadow is off so bad input still fails
    bgr = hex_to_bgr(hex_colour)
    if opacity > 0:
        return "\\4c&H{}{}&\\shad{}".format(opacity_to_alpha(opacity), bgr, depth)
    return "\\shad0"


def compute_margins(style: CaptionStyle, resolution: VideoResolution) -> Tuple[int, int, int]:
    """Return (margin_l, margin_r, margin_v) in pixels."""
    anchor = _POSITION_ANCHORS[style.position]
    base_position = int(math.floor(resolution.height * anchor))
    margin_v = max(0, base_position - style.position_offset)
    return style.margin_horizontal, style.margin_horizontal, margin_v


def compute_style_parameters(resolution: VideoResolution, style: CaptionStyle) -> StyleParameters:
    """Derive final style parameters for a target resolution.

    Args:
        resolution: Target video size.
        style: Style authored at 1080x1920.

    Returns:
        Frozen StyleParameters.

    Raises:
        MalformedColorError: If any colour field is not valid hex.
    """
    scale_factor = min(
        resolution.width / REFERENCE_WIDTH,
        resolution.height / REFERENCE_HEIGHT,
    )
    font_size = round_half_up(style.font_size * scale_factor)
    active_font_size = round_half_up(
        style.active_word_font_size * (font_size / style.font_size)
    )

    has_background = style.background_opacity > 0
    background_bgr = hex_to_bgr(style.background_color)
    if has_background:
        back_colour = "&H{}{}&".format(opacity_to_alpha(style.background_opacity), background_bgr)
    else:
        back_colour = TRANSPARENT_BLACK

    margin_l, margin_r, margin_v = compute_margins(style, resolution)

    inactive = WordStyle(
        font_size=font_size,
        colour_bgr=hex_to_bgr(style.text_color),
        outline_bgr=hex_to_bgr(style.outline_color),
        outline_width=style.outline_width,
        shadow_tag=_shadow_tag(style.shadow_color, style.shadow_opacity, _INACTIVE_SHADOW_DEPTH),
    )
    active = WordStyle(
        font_size=active_font_size,
        colour_bgr=hex_to_bgr(style.active_word_color),
        outline_bgr=hex_to_bgr(style.active_word_outline_color),
        outline_width=style.active_word_outline_width,
        shadow_tag=_shadow_tag(
            style.active_word_shadow_color,
            style.active_word_shadow_opacity,
            _ACTIVE_SHADOW_DEPTH,
        ),
    )

    return StyleParameters(
        font_family=style.font_family,
        font_size=font_size,
        font_weight=style.font_weight,
        bold=style.font_weight >= 700,
        uppercase=style.uppercase,
        scale_factor=scale_factor,
        primary_colour=ass_colour(style.text_color),
        secondary_colour=TRANSPARENT_BLACK,
        outline_colour=ass_colour(style.outline_color),
        back_colour=back_colour,
        border_style=BORDER_STYLE_BOX if has_background else BORDER_STYLE_OUTLINE,
        outline_width=style.outline_width,
        margin_l=margin_l,
        margin_r=margin_r,
        margin_v=margin_v,
        inactive=inactive,
        active=active,
    )


def render_word(text: str, params: StyleParameters, active: bool) -> str:
    """Wrap one word in its override block, resetting afterwards.

    Example (inactive, white on black outline, no shadow):
        {\\fs80\\b700\\1c&HFFFFFF&\\3c&H000000&\\bord4\\shad0}hello{\\r}
    """
    word_style = params.active if active else params.inactive
    display_text = text.upper() if params.uppercase else text
    tags = "\\fs{}\\b{}\\1c&H{}&\\3c&H{}&\\bord{}{}".format(
        word_style.font_size,
        params.font_weight,
        word_style.colour_bgr,
        word_style.outline_bgr,
        _fmt_number(word_style.outline_width),
        word_style.shadow_tag,
    )
    return "{" + tags + "}" + display_text + "{\\r}"


def render_group_text(words: Sequence[str], active_index: int, params: StyleParameters) -> str:
    """Render a whole group with the word at active_index highlighted."""
    return " ".join(
        render_word(word, params, index == active_index)
        for index, word in enumerate(words)
    )
