"""Command-line interface for the word-highlight caption generator.

WHY: Operators and scripts need to turn a saved transcription JSON into an
ASS file without writing Python, for example before handing the script
to ffmpeg's subtitles filter. The CLI is a thin wrapper around
generate_ass(); all real work happens in the library.

HOW: argparse reads the input path (or "-" for stdin), an optional output
path, the target resolution, a preset name and an optional JSON file of
style overrides. The token adapter parses the input, resolve_style()
builds the style and generate_ass() renders the script. Status messages
go to stderr; the script goes to the output file or stdout.

RULES:
- Usage:
    python -m highlight_captions words.json captions.ass
    python -m highlight_captions words.json --width 1920 --height 1080
    cat words.json | python -m highlight_captions - captions.ass --preset boxed
    python -m highlight_captions --list-presets
    python -m highlight_captions words.json --preview middle
- Defaults for resolution, preset and log level come from config (.env)
- Exit codes: 0 = success, 1 = input, style or generation error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import jsonschema

from highlight_captions import generate_ass
from highlight_captions.adapters.token_adapter import load_tokens
from highlight_captions.config import DEFAULT_HEIGHT, DEFAULT_PRESET, DEFAULT_WIDTH, LOG_LEVEL
from highlight_captions.core.contractions import merge_contractions
from highlight_captions.core.ir import VideoResolution
from highlight_captions.core.preview import PREVIEW_POSITIONS, find_preview_timestamp
from highlight_captions.errors import CaptionError
from highlight_captions.styles.presets import PRESETS, list_presets, resolve_style

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(1)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _load_overrides(path: Optional[str]) -> Optional[Dict[str, Any]]:
    if not path:
        return None
    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)
    if not isinstance(overrides, dict):
        raise CaptionError("Style overrides must be a JSON object, got {}".format(
            type(overrides).__name__
        ))
    return overrides


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect defaults without running
    the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="highlight_captions",
        description="Render word-level transcription JSON into an ASS subtitle "
                    "script with per-word highlighting.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="Transcription JSON file, or '-' to read stdin.",
    )

    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Where to write the .ass script (default: stdout).",
    )

    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help="Target video width in pixels (default: %(default)s).",
    )

    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help="Target video height in pixels (default: %(default)s).",
    )

    parser.add_argument(
        "--preset",
        default=DEFAULT_PRESET,
        help="Style preset. Available: {} (default: %(default)s).".format(
            ", ".join(PRESETS.keys())
        ),
    )

    parser.add_argument(
        "--style",
        default=None,
        help="JSON file of camelCase style overrides, e.g. {\"textColor\": \"FF0000\"}.",
    )

    parser.add_argument(
        "--preview",
        choices=PREVIEW_POSITIONS,
        default=None,
        help="Print the suggested preview frame time instead of a script.",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List available style presets and exit.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level for library diagnostics (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m highlight_captions`` and the console script.

    Args:
        argv: Command-line arguments (None means sys.argv[1:]; explicit
            lists are for testing).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for preset in list_presets():
            print("{:<10} {}: {}".format(
                preset["name"], preset["display_name"], preset["description"]
            ))
        return

    if not args.input_file:
        parser.error("input_file is required unless --list-presets is given")

    try:
        tokens = load_tokens(_read_input(args.input_file))
    except OSError as e:
        _fail("Could not read input: {}".format(e))
    except json.JSONDecodeError as e:
        _fail("Input is not valid JSON: {}".format(e))
    except jsonschema.ValidationError as e:
        _fail("Input does not look like word-level transcription data: {}".format(e.message))

    if not tokens:
        _fail("No words found in input")

    if args.preview:
        point = find_preview_timestamp(merge_contractions(tokens), args.preview)
        _status(point.reason)
        print("{:.3f}".format(point.timestamp_s))
        return

    resolution = VideoResolution(width=args.width, height=args.height)

    try:
        style = resolve_style(args.preset, _load_overrides(args.style))
        script = generate_ass(tokens, resolution, style)
    except OSError as e:
        _fail("Could not read style overrides: {}".format(e))
    except json.JSONDecodeError as e:
        _fail("Style overrides are not valid JSON: {}".format(e))
    except ValueError as e:
        # CaptionError, pydantic ValidationError
        logger.debug("Caption generation failed", exc_info=True)
        _fail(str(e))

    dialogue_count = script.count("\nDialogue: ")
    if args.output_file:
        with open(args.output_file, "w", encoding="utf-8") as f:
            f.write(script)
        _status("Wrote {} dialogue lines ({} preset, {}x{}) to {}".format(
            dialogue_count, args.preset, args.width, args.height, args.output_file
        ))
    else:
        sys.stdout.write(script)


if __name__ == "__main__":
    main()
