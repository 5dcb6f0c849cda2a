"""
Content tools - MCP tools for generating and previewing copy.

Tools for asking the model for a content matrix and previewing the
tokens it would produce.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_copy.generation import ContentGenerator
from chuk_mcp_copy.models.content import ContentMatrix
from chuk_mcp_copy.store import TokenRepository

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_content_tools(
    mcp: ChukMCPServer,
    generator: ContentGenerator,
    repository: TokenRepository,
) -> dict[str, Any]:
    """
    Register content generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        generator: The content generator
        repository: The token repository (used for previews)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def copy_generate_content(
        domain: str,
        name: str,
        neutral_title: str,
        context: str | None = None,
    ) -> str:
        """
        Generate UX copy in 6 tones × 6 text types.

        Asks the model for a title, subtitle, description, caption,
        abbreviation and emoji in each of the neutral, formal, playful,
        minimal, witty and quirky tones. Nothing is written to disk.

        Args:
            domain: Dot-separated content domain (e.g., 'nav', 'legal.copyright')
            name: Entry name within the domain (e.g., 'dashboard')
            neutral_title: Plain title the copy is about (e.g., 'Dashboard')
            context: Optional extra guidance for the copywriter

        Returns:
            JSON string with the content matrix

        Example:
            copy_generate_content(domain="nav", name="dashboard", neutral_title="Dashboard")
        """
        try:
            content = await generator.generate(
                domain=domain,
                name=name,
                neutral_title=neutral_title,
                context=context,
            )
            return json.dumps(
                {
                    "status": "success",
                    "domain": domain,
                    "name": name,
                    "content": content.to_dict(),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to generate content")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_generate_content"] = copy_generate_content

    @mcp.tool  # type: ignore[arg-type]
    async def copy_preview_tokens(
        domain: str,
        name: str,
        content: dict[str, Any],
    ) -> str:
        """
        Preview the tokens a content matrix would produce.

        Builds all 13 files' tokens in memory and returns each file's
        token paths and values. Nothing is written to disk.

        Args:
            domain: Dot-separated content domain
            name: Entry name within the domain
            content: Content matrix as returned by copy_generate_content

        Returns:
            JSON string with per-file tokens and the total count

        Example:
            copy_preview_tokens(domain="nav", name="dashboard", content={...})
        """
        try:
            matrix = ContentMatrix.model_validate(content)
            preview = repository.preview(domain, name, matrix)
            return json.dumps(
                {
                    "status": "success",
                    "files": [
                        {
                            "file": f.file,
                            "layer": f.layer.value,
                            "tokenCount": f.token_count,
                            "tokens": f.tokens,
                        }
                        for f in preview.files
                    ],
                    "totalTokens": preview.total_tokens,
                },
                ensure_ascii=False,
            )
        except ValidationError as e:
            return json.dumps({"status": "error", "message": f"Invalid content matrix: {e}"})
        except Exception as e:
            logger.exception("Failed to preview tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_preview_tokens"] = copy_preview_tokens

    return tools
