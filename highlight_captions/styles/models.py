"""Pydantic model for a caption style configuration.

WHY: Styles arrive as JSON — built-in presets, user overrides from a file,
or a request body in the surrounding service. Pydantic gives us type
coercion, range checks and a JSON Schema for free, and camelCase aliases
keep preset files in the same shape the front end already sends.

HOW: One frozen BaseModel. Python code uses snake_case attributes; JSON
uses camelCase aliases generated by pydantic's to_camel. Field
descriptions document every knob.

RULES:
- Colours are plain strings here; the layout calculator checks them so a
  bad colour always surfaces as MalformedColorError
- Opacities are percentages 0..100; 0 disables the feature
- max_group_duration_ms / max_words_per_group are grouping limits carried
  with the style because presets tune them per look
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CaptionPosition(str, Enum):
    """Vertical anchor of the caption block."""

    top = "top"
    center = "center"
    bottom = "bottom"


class CaptionStyle(BaseModel):
    """Complete style for word-highlight captions at the reference size.

    Sizes are authored for a 1080x1920 frame and scaled to the target
    resolution by the layout calculator.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
        validate_default=True,
    )

    font_family: str = Field(default="Arial", description="Font family name as installed for libass.")
    font_size: float = Field(default=80, gt=0, description="Inactive word size at 1080x1920.")
    font_weight: int = Field(default=700, ge=100, le=900, description="Font weight 100-900; >= 700 sets the bold flag.")
    uppercase: bool = Field(default=False, description="Render all words in upper case.")

    text_color: str = Field(default="FFFFFF", description="Inactive word colour, hex RRGGBB.")
    outline_color: str = Field(default="000000", description="Inactive word outline colour, hex RRGGBB.")
    outline_width: float = Field(default=4, ge=0, description="Inactive word outline width in pixels.")

    active_word_color: str = Field(default="FFFF00", description="Highlighted word colour, hex RRGGBB.")
    active_word_outline_color: str = Field(default="000000", description="Highlighted word outline colour, hex RRGGBB.")
    active_word_outline_width: float = Field(default=4, ge=0, description="Highlighted word outline width in pixels.")
    active_word_font_size: float = Field(default=90, gt=0, description="Highlighted word size at 1080x1920.")

    position: CaptionPosition = Field(default=CaptionPosition.bottom, description="Vertical anchor: top, center or bottom.")
    position_offset: int = Field(default=0, description="Pixels subtracted from the vertical margin (+ moves down).")
    margin_horizontal: int = Field(default=20, ge=0, description="Left and right margin in pixels.")

    background_color: str = Field(default="000000", description="Line background colour, hex RRGGBB.")
    background_opacity: float = Field(default=0, ge=0, le=100, description="Line background opacity 0-100; 0 disables the box.")

    shadow_color: str = Field(default="000000", description="Inactive word shadow colour, hex RRGGBB.")
    shadow_opacity: float = Field(default=0, ge=0, le=100, description="Inactive word shadow opacity 0-100.")
    active_word_shadow_color: str = Field(default="000000", description="Highlighted word shadow colour, hex RRGGBB.")
    active_word_shadow_opacity: float = Field(default=0, ge=0, le=100, description="Highlighted word shadow opacity 0-100.")

    max_group_duration_ms: int = Field(default=2500, gt=0, description="Longest time span one caption group may cover.")
    max_words_per_group: float = Field(default=5, gt=0, description="Word budget per group (contraction fragments count 0.5).")
