"""Configuration constants and .env loading for the CLI layer.

WHY: The CLI needs sensible defaults for the target resolution, preset and
log level that operators can override without editing code. Keeping them
in one module makes them easy to find.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values with os.getenv overrides.

RULES:
- The core pipeline never imports this module; limits and resolution are
  always passed in explicitly
- Default resolution is the vertical 1080x1920 that style sizes are
  authored for
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from highlight_captions.styles.layout import REFERENCE_HEIGHT, REFERENCE_WIDTH

load_dotenv()

DEFAULT_PRESET = os.getenv("CAPTIONS_DEFAULT_PRESET", "classic")
DEFAULT_WIDTH = int(os.getenv("CAPTIONS_DEFAULT_WIDTH", str(REFERENCE_WIDTH)))
DEFAULT_HEIGHT = int(os.getenv("CAPTIONS_DEFAULT_HEIGHT", str(REFERENCE_HEIGHT)))
LOG_LEVEL = os.getenv("CAPTIONS_LOG_LEVEL", "WARNING").upper()
