"""
Content model - the 6 x 6 matrix of generated copy.

A ContentMatrix holds one ContentEntry per tone, and each entry holds
one string per text type. All 36 cells must be present and non-empty.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_copy.constants import TONES, TYPES


class ContentEntry(BaseModel):
    """The six text types for a single tone."""

    title: str = Field(..., description="Primary heading, 1-4 words")
    subtitle: str = Field(..., description="Supporting line, 3-8 words")
    description: str = Field(..., description="Full explanation, 1-2 sentences")
    caption: str = Field(..., description="Supplementary detail")
    abbreviation: str = Field(..., description="Shortest representation, 1-4 characters")
    emoji: str = Field(..., description="Single emoji for the concept")

    model_config = {"frozen": True}

    @field_validator("title", "subtitle", "description", "caption", "abbreviation", "emoji")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject empty or whitespace-only cells; text is kept as given."""
        if not v.strip():
            raise ValueError("Content cell must be a non-empty string")
        return v


class ContentMatrix(BaseModel):
    """
    Generated copy for one entry across all tones.

    Field names match the tone registry, so the matrix can be
    validated directly from the generator's JSON payload.
    """

    neutral: ContentEntry
    formal: ContentEntry
    playful: ContentEntry
    minimal: ContentEntry
    witty: ContentEntry
    quirky: ContentEntry

    model_config = {"frozen": True}

    def get(self, tone: str, type_name: str) -> str:
        """
        Get a single cell.

        Args:
            tone: Full tone name (e.g., 'neutral')
            type_name: Full type name (e.g., 'title')

        Returns:
            The text for that cell
        """
        entry: ContentEntry = getattr(self, tone)
        return getattr(entry, type_name)

    def cells(self) -> Iterator[tuple[str, str, str]]:
        """Yield (tone, type, text) for all 36 cells in registry order."""
        for tone in TONES:
            for type_def in TYPES:
                yield tone.full, type_def.full, self.get(tone.full, type_def.full)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to a plain nested dict in registry order."""
        return {
            tone.full: {type_def.full: self.get(tone.full, type_def.full) for type_def in TYPES}
            for tone in TONES
        }


def load_content_file(path: Path) -> ContentMatrix:
    """
    Load a hand-written content matrix from a YAML or JSON file.

    Args:
        path: Path to a .yaml, .yml or .json file

    Returns:
        The validated ContentMatrix
    """
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data: Any = json.load(f)
        else:
            data = yaml.safe_load(f)

    return ContentMatrix.model_validate(data)
