"""
Content generation - the model-backed copywriter.

This module provides:
- ContentGenerator: Generates a validated ContentMatrix with retries
- parse_content: Parse and validate a raw model response
"""

from chuk_mcp_copy.generation.generator import ContentGenerator, extract_json_text, parse_content
from chuk_mcp_copy.generation.prompts import SYSTEM_PROMPT, build_system_prompt, build_user_prompt

__all__ = [
    "ContentGenerator",
    "SYSTEM_PROMPT",
    "build_system_prompt",
    "build_user_prompt",
    "extract_json_text",
    "parse_content",
]
