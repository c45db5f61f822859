"""Subtitle script encoders.

WHY: Serialization is kept apart from grouping and timing so the core
never needs to know the target markup.

RULES:
- ass_script.encode_script() is the encoder used by generate_ass()
"""

from highlight_captions.formatters.ass_script import encode_script, ms_to_timecode

__all__ = ["encode_script", "ms_to_timecode"]
