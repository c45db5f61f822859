"""Core grouping and timing modules.

WHY: The core package holds the logic with real invariants — which words
render together and when each highlight starts and ends. It is
format-agnostic: nothing here knows about ASS tags or colours.

HOW: ir.py defines the data structures, lexical.py classifies word shapes,
contractions.py fuses split contractions, validation.py checks ordering,
grouping.py builds groups, timing.py turns groups into cue events and
preview.py picks a representative frame for thumbnails.

RULES:
- Every function is pure; inputs are never mutated
- Grouping limits are explicit parameters, never read from the environment
"""
