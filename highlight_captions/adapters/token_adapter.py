"""Adapter: transcription JSON to core Token objects.

WHY: Word-level timestamps come from different transcription backends
(whisper.cpp, the OpenAI Whisper API) via the transcription service, and
are stored or posted in a few slightly different shapes. The core only
understands Token, so this adapter normalizes every accepted shape.

HOW: The document is validated against schemas/tokens.schema.json with
jsonschema, then the word list is pulled out of whichever envelope it came
in and each entry becomes a Token.

RULES:
- Accepted documents: a bare list of words, {"captions": [...]}, or
  {"transcription": {"captions": [...]}}
- Timing: startMs/endMs (milliseconds) win over startInSeconds/endInSeconds
- Seconds are converted to milliseconds and rounded to the nearest ms
- A missing or null end stays None; the core synthesizes defaults
- Text is passed through unchanged (no stripping, no case changes)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Optional

import jsonschema

from highlight_captions.core.ir import Token

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "tokens.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the token input JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _seconds_to_ms(value: float) -> int:
    return int(round(value * 1000))


def _word_to_token(word: Mapping[str, Any]) -> Token:
    if "startMs" in word:
        start_ms = int(round(word["startMs"]))
        end_raw = word.get("endMs")
        end_ms = None if end_raw is None else int(round(end_raw))
    else:
        start_ms = _seconds_to_ms(word["startInSeconds"])
        end_raw = word.get("endInSeconds")
        end_ms = None if end_raw is None else _seconds_to_ms(end_raw)
    return Token(
        text=word["text"],
        start_ms=start_ms,
        end_ms=end_ms,
        confidence=word.get("confidence"),
    )


def parse_tokens(data: Any) -> List[Token]:
    """Validate a transcription document and convert its words to Tokens.

    Args:
        data: Parsed JSON (list or dict) in one of the accepted shapes.

    Returns:
        Tokens in document order. Ordering is not checked here; the core
        validates it before grouping.

    Raises:
        jsonschema.ValidationError: If the document matches no accepted shape.
    """
    jsonschema.validate(instance=data, schema=_get_schema())

    # A top-level captions list wins over any "transcription" member
    if isinstance(data, list):
        words = data
    elif "captions" in data:
        words = data["captions"]
    else:
        words = data["transcription"]["captions"]

    return [_word_to_token(word) for word in words]


def load_tokens(raw: str) -> List[Token]:
    """Parse a JSON string and convert it with parse_tokens().

    Raises:
        json.JSONDecodeError: If raw is not JSON.
        jsonschema.ValidationError: If the document shape is not accepted.
    """
    return parse_tokens(json.loads(raw))
