#!/usr/bin/env python3
"""
Async Copy MCP Server using chuk-mcp-server

This server provides MCP tools for generating multi-tone UX copy and
writing it into a three-layer design token file set.

The server provides tools for:
- Generating copy in 6 tones × 6 text types
- Previewing the tokens an entry would produce
- Applying entries to the 13 token files without clobbering existing data
- Listing entries and checking reference integrity
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_copy.generation import ContentGenerator
from chuk_mcp_copy.store import TokenRepository
from chuk_mcp_copy.tools import register_content_tools, register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-copy")

# Paths - token files live in ./tokens unless overridden
BASE_PATH = Path.cwd()
TOKENS_DIR = Path(os.getenv("COPY_TOKENS_DIR", BASE_PATH / "tokens"))

# Create managers
repository = TokenRepository(TOKENS_DIR)
generator = ContentGenerator()

# Register all tools
content_tools = register_content_tools(mcp, generator, repository)
token_tools = register_token_tools(mcp, repository)

# Export tool functions for direct access
copy_generate_content = content_tools["copy_generate_content"]
copy_preview_tokens = content_tools["copy_preview_tokens"]

copy_apply_tokens = token_tools["copy_apply_tokens"]
copy_check_entry = token_tools["copy_check_entry"]
copy_list_tokens = token_tools["copy_list_tokens"]
copy_validate_tokens = token_tools["copy_validate_tokens"]

logger.info("CHUK Copy MCP Server initialized")
logger.info(f"  Tokens dir: {TOKENS_DIR}")
logger.info(f"  Model: {generator.model}")
