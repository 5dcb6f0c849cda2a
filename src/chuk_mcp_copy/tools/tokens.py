"""
Token tools - MCP tools for the token file set.

Tools for applying content entries, listing what is there and checking
reference integrity.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_copy.errors import DuplicateEntryError
from chuk_mcp_copy.models.content import ContentMatrix
from chuk_mcp_copy.store import TokenRepository

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_tools(
    mcp: ChukMCPServer,
    repository: TokenRepository,
) -> dict[str, Any]:
    """
    Register token file tools with the MCP server.

    Args:
        mcp: The MCP server instance
        repository: The token repository

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def copy_apply_tokens(
        domain: str,
        name: str,
        content: dict[str, Any],
        dry_run: bool = False,
    ) -> str:
        """
        Apply a content matrix to all 13 token files.

        Writes 36 Language tokens, 6 tokens to each Type file and 1 token
        to each Tone file. Fails without writing anything if the entry
        already exists.

        Args:
            domain: Dot-separated content domain
            name: Entry name within the domain
            content: Content matrix as returned by copy_generate_content
            dry_run: Check for duplicates and count tokens without writing

        Returns:
            JSON string with filesModified and totalTokens

        Example:
            copy_apply_tokens(domain="nav", name="dashboard", content={...})
        """
        try:
            matrix = ContentMatrix.model_validate(content)
            result = await repository.apply(domain, name, matrix, dry_run=dry_run)
            return json.dumps({"status": "success", "dryRun": dry_run, **result.to_wire()})
        except (DuplicateEntryError, ValidationError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to apply tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_apply_tokens"] = copy_apply_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def copy_check_entry(domain: str, name: str) -> str:
        """
        Check whether a content entry already exists.

        Args:
            domain: Dot-separated content domain
            name: Entry name within the domain

        Returns:
            JSON string with an exists flag

        Example:
            copy_check_entry(domain="nav", name="dashboard")
        """
        try:
            exists = await repository.entry_exists(domain, name)
            return json.dumps({"status": "success", "path": f"{domain}.{name}", "exists": exists})
        except Exception as e:
            logger.exception("Failed to check entry")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_check_entry"] = copy_check_entry

    @mcp.tool  # type: ignore[arg-type]
    async def copy_list_tokens(
        domain: str | None = None,
        tone: str | None = None,
        type: str | None = None,
    ) -> str:
        """
        List Language tokens grouped by entry.

        Args:
            domain: Optional domain to search under (e.g., 'nav')
            tone: Optional tone abbreviation filter (e.g., 'neut', 'witt')
            type: Optional type abbreviation filter (e.g., 'title', 'capt')

        Returns:
            JSON string mapping each domain.name to its tokens

        Example:
            copy_list_tokens(domain="nav", tone="play")
        """
        try:
            entries = await repository.list_entries(domain=domain, tone=tone, type_abbr=type)
            return json.dumps(
                {
                    "status": "success",
                    "entries": {
                        key: [info.model_dump() for info in infos] for key, infos in entries.items()
                    },
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to list tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_list_tokens"] = copy_list_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def copy_validate_tokens() -> str:
        """
        Check reference integrity across the 13 token files.

        Reports references that do not resolve, references that skip a
        layer, and tokens missing a reference key.

        Returns:
            JSON string with validation results

        Example:
            copy_validate_tokens()
        """
        try:
            result = await repository.validate()
            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "tokens_checked": result.tokens_checked,
                    "errors": [
                        {"code": i.code, "message": i.message, "location": i.location}
                        for i in result.errors
                    ],
                    "warnings": [
                        {"code": i.code, "message": i.message, "location": i.location}
                        for i in result.warnings
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to validate tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["copy_validate_tokens"] = copy_validate_tokens

    return tools
