"""Caption styling: the style model, named presets and resolution layout.

WHY: Style decisions (colours, sizes, margins) are independent of which
words are grouped together, so they live apart from the core pipeline.

HOW: models.py defines CaptionStyle, presets.py resolves a preset name
plus overrides into a CaptionStyle, and layout.py turns a CaptionStyle
and a target resolution into final pixel and colour values.

RULES:
- Colour validation happens in layout.py, before any grouping work
"""
