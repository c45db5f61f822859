"""Advanced SubStation Alpha (ASS) script encoder.

WHY: libass (and ffmpeg's subtitles filter) render ASS scripts with
per-word override tags, which is what word-highlight captions need. The
format is line oriented with strict section and field order, so encoding
is kept to one small module with no other concerns.

HOW: build_header() writes the [Script Info], [V4+ Styles] and [Events]
section heads with a single "Default" style row built from
StyleParameters. format_dialogue() writes one Dialogue line per cue.
encode_script() joins them.

RULES:
- Sections in fixed order: Script Info, V4+ Styles, Events
- Exactly one style row, named "Default"
- Dialogue fields: layer 0, start, end, "Default", then name/margins/effect
  reserved as ",0,0,0,", then the rendered text
- Timecodes are H:MM:SS.cc — centiseconds, floored, hours not padded
- Cues are written in the order given (already sorted by start)
- Zero cues raise EmptyInputError; an events-less script is never returned
"""

from __future__ import annotations

from typing import List, Sequence

from highlight_captions.core.ir import CueEvent, VideoResolution
from highlight_captions.errors import EmptyInputError
from highlight_captions.styles.layout import StyleParameters

STYLE_NAME = "Default"

STYLE_FORMAT_FIELDS = (
    "Name", "Fontname", "Fontsize", "PrimaryColour", "SecondaryColour",
    "OutlineColour", "BackColour", "Bold", "Italic", "Underline", "StrikeOut",
    "ScaleX", "ScaleY", "Spacing", "Angle", "BorderStyle", "Outline", "Shadow",
    "Alignment", "MarginL", "MarginR", "MarginV", "Encoding",
)

EVENT_FORMAT_FIELDS = (
    "Layer", "Start", "End", "Style", "Name",
    "MarginL", "MarginR", "MarginV", "Effect", "Text",
)

# Numpad-style alignment: 2 is bottom centre; margins move it.
_ALIGNMENT_BOTTOM_CENTER = 2
_ENCODING_DEFAULT = 1


def ms_to_timecode(ms: int) -> str:
    """Convert milliseconds to an ASS timecode: H:MM:SS.cc.

    Negative values clamp to 0:00:00.00.
    """
    ms = max(0, int(ms))
    hours = ms // 3_600_000
    minutes = (ms % 3_600_000) // 60_000
    seconds = (ms % 60_000) // 1000
    centis = (ms % 1000) // 10
    return "{}:{:02d}:{:02d}.{:02d}".format(hours, minutes, seconds, centis)


def _fmt_number(value: float) -> str:
    return "{:g}".format(value)


def build_style_line(params: StyleParameters) -> str:
    """Return the single "Style: Default,..." row."""
    fields = [
        STYLE_NAME,
        params.font_family,
        str(params.font_size),
        params.primary_colour,
        params.secondary_colour,
        params.outline_colour,
        params.back_colour,
        "1" if params.bold else "0",
        "0", "0", "0",        # italic, underline, strikeout
        "100", "100",         # scale x/y
        "0", "0",             # spacing, angle
        str(params.border_style),
        _fmt_number(params.outline_width),
        "0",                  # shadow depth; per-word tags override it
        str(_ALIGNMENT_BOTTOM_CENTER),
        str(params.margin_l),
        str(params.margin_r),
        str(params.margin_v),
        str(_ENCODING_DEFAULT),
    ]
    return "Style: " + ",".join(fields)


def build_header(resolution: VideoResolution, params: StyleParameters) -> str:
    """Return everything up to and including the [Events] Format line."""
    lines = [
        "[Script Info]",
        "ScriptType: v4.00+",
        "PlayResX: {}".format(resolution.width),
        "PlayResY: {}".format(resolution.height),
        "",
        "[V4+ Styles]",
        "Format: " + ", ".join(STYLE_FORMAT_FIELDS),
        build_style_line(params),
        "",
        "[Events]",
        "Format: " + ", ".join(EVENT_FORMAT_FIELDS),
    ]
    return "\n".join(lines) + "\n"


def format_dialogue(cue: CueEvent) -> str:
    return "Dialogue: 0,{},{},{},,0,0,0,,{}".format(
        ms_to_timecode(cue.start_ms),
        ms_to_timecode(cue.end_ms),
        STYLE_NAME,
        cue.text,
    )


def encode_script(
    cues: Sequence[CueEvent],
    resolution: VideoResolution,
    params: StyleParameters,
) -> str:
    """Serialize the header and every cue into a complete ASS script.

    Args:
        cues: Cue events in start order (see core.timing.repair_overlaps).
        resolution: Script play resolution.
        params: Computed style parameters.

    Returns:
        The script, newline-terminated.

    Raises:
        EmptyInputError: If cues is empty.
    """
    if not cues:
        raise EmptyInputError("Cannot encode a subtitle script with no cue events")

    parts: List[str] = [build_header(resolution, params)]
    for cue in cues:
        parts.append(format_dialogue(cue) + "\n")
    return "".join(parts)
