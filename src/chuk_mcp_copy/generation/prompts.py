"""
Prompts for the copy generator.

The system prompt pins the tone and type vocabulary and the exact JSON
shape the response must have; the user prompt names the entry.
"""

from __future__ import annotations

import json

from chuk_mcp_copy.constants import TONES, TYPES

TONE_GUIDE: dict[str, str] = {
    "neutral": "Clear, direct, professional. No personality flourishes. Default corporate voice.",
    "formal": "Authoritative, precise, institutional. Legal or academic register.",
    "playful": "Warm, friendly, enthusiastic. Uses exclamation marks, casual phrasing.",
    "minimal": "Extremely concise. Fewest possible words. Telegram-style.",
    "witty": "Clever, self-aware, dry humor. Wordplay welcome.",
    "quirky": "Eccentric, unexpected metaphors, personality-heavy. Memorable and unique.",
}

TYPE_GUIDE: dict[str, str] = {
    "title": "Primary heading. 1-4 words. Capitalized appropriately for the tone.",
    "subtitle": "Supporting line. 3-8 words. Adds context to the title.",
    "description": "Full explanation. 1-2 sentences. Informative and complete.",
    "caption": "Supplementary detail. Short phrase or sentence. Metadata-like.",
    "abbreviation": (
        "Shortest possible representation. 1-4 characters (symbol, initials, or very short word)."
    ),
    "emoji": "Single emoji that represents the concept.",
}


def _output_skeleton() -> str:
    skeleton = {tone.full: {type_def.full: "" for type_def in TYPES} for tone in TONES}
    lines = [f'  "{tone}": {json.dumps(entry)}' for tone, entry in skeleton.items()]
    return "{\n" + ",\n".join(lines) + "\n}"


def build_system_prompt() -> str:
    """System prompt describing tones, types and the response shape."""
    tones = "\n".join(f"- **{t.full.capitalize()}**: {TONE_GUIDE[t.full]}" for t in TONES)
    types = "\n".join(f"- **{t.full}**: {TYPE_GUIDE[t.full]}" for t in TYPES)
    total = len(TONES) * len(TYPES)

    return (
        "You are a UX copywriter generating content for a design token system. "
        f"You produce text in {len(TONES)} tones × {len(TYPES)} types = {total} variations.\n\n"
        f"## Tones\n\n{tones}\n\n"
        f"## Types\n\n{types}\n\n"
        "## Output Format\n\n"
        "Return ONLY valid JSON matching this exact structure "
        "(no markdown, no explanation):\n"
        f"{_output_skeleton()}"
    )


def build_user_prompt(
    domain: str,
    name: str,
    neutral_title: str,
    context: str | None = None,
) -> str:
    """User prompt naming the entry to write copy for."""
    prompt = f'Generate content for: "{neutral_title}"\nDomain: {domain}\nEntry name: {name}'
    if context:
        prompt += f"\nAdditional context: {context}"
    return prompt


SYSTEM_PROMPT = build_system_prompt()
