"""
Content Generator - asks the model for a 6 x 6 ContentMatrix.

Responses that are not JSON, or do not fill every tone and type with a
non-empty string, are retried up to a fixed attempt budget. API errors
from the SDK are not retried here.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from anthropic import AsyncAnthropic
from pydantic import ValidationError

from chuk_mcp_copy.constants import (
    DEFAULT_GENERATION_ATTEMPTS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
)
from chuk_mcp_copy.errors import GenerationError
from chuk_mcp_copy.generation.prompts import SYSTEM_PROMPT, build_user_prompt
from chuk_mcp_copy.models.content import ContentMatrix

logger = logging.getLogger(__name__)


def extract_json_text(text: str) -> str:
    """Strip markdown code fences the model sometimes adds anyway."""
    text = text.strip()
    if "```json" in text:
        return text.split("```json")[1].split("```")[0].strip()
    if "```" in text:
        return text.split("```")[1].split("```")[0].strip()
    return text


def parse_content(text: str) -> ContentMatrix:
    """
    Parse and validate a model response.

    Raises:
        json.JSONDecodeError: If the text is not JSON
        pydantic.ValidationError: If any of the 36 cells is missing or empty
    """
    data = json.loads(extract_json_text(text))
    return ContentMatrix.model_validate(data)


class ContentGenerator:
    """
    Generates multi-tone copy with the Anthropic Messages API.

    The API key defaults to the ANTHROPIC_API_KEY environment variable
    and the model to COPY_MODEL, falling back to DEFAULT_MODEL.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_attempts: int = DEFAULT_GENERATION_ATTEMPTS,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: Any | None = None,
    ):
        """
        Initialize the generator.

        Args:
            api_key: Anthropic API key (default: from environment)
            model: Model name (default: COPY_MODEL or DEFAULT_MODEL)
            max_attempts: Attempts before giving up on malformed output
            max_tokens: Response token limit
            client: Optional pre-built AsyncAnthropic-compatible client
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.model = model or os.getenv("COPY_MODEL") or DEFAULT_MODEL
        self.max_attempts = max_attempts
        self.max_tokens = max_tokens
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> Any:
        # Built lazily so the server can start without an API key
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._api_key)
        return self._client

    async def generate(
        self,
        domain: str,
        name: str,
        neutral_title: str,
        context: str | None = None,
    ) -> ContentMatrix:
        """
        Generate copy for one entry.

        Args:
            domain: Dot-separated domain
            name: Entry name
            neutral_title: Plain title the copy is about
            context: Optional extra guidance for the model

        Returns:
            A validated ContentMatrix

        Raises:
            GenerationError: If no attempt produced a valid matrix
        """
        user_prompt = build_user_prompt(domain, name, neutral_title, context)
        last_error: str | None = None

        for attempt in range(1, self.max_attempts + 1):
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": user_prompt}],
            )

            text = next(
                (block.text for block in response.content if getattr(block, "type", None) == "text"),
                None,
            )
            if text is None:
                last_error = "response contained no text block"
                logger.warning(f"Attempt {attempt}/{self.max_attempts} for {domain}.{name}: {last_error}")
                continue

            try:
                content = parse_content(text)
            except json.JSONDecodeError as e:
                last_error = f"invalid JSON: {e}"
            except ValidationError as e:
                last_error = f"invalid content matrix: {e.error_count()} errors"
            else:
                logger.debug(f"Generated content for {domain}.{name} on attempt {attempt}")
                return content

            logger.warning(f"Attempt {attempt}/{self.max_attempts} for {domain}.{name}: {last_error}")

        raise GenerationError(self.max_attempts, last_error)
