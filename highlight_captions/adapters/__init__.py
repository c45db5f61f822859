"""Adapters between external transcription data and the core IR.

WHY: The core consumes Token objects only. Adapters own the knowledge of
how upstream services shape their JSON, keeping the core independent of
any one transcription backend.

RULES:
- token_adapter.parse_tokens() is the single entry point for JSON input
"""
