"""
Prompts Module - prompt templates for the LLM-backed tiers.
"""

from astra.ai.prompts.intent_prompts import (
    CLASSIFY_SYSTEM_PROMPT,
    build_parse_system_prompt,
)

__all__ = [
    "CLASSIFY_SYSTEM_PROMPT",
    "build_parse_system_prompt",
]
