"""
MCP tool implementations.

Tools are organized by domain:
- content - Copy generation and token previews
- tokens - Applying, listing and validating token files
"""

from chuk_mcp_copy.tools.content import register_content_tools
from chuk_mcp_copy.tools.tokens import register_token_tools

__all__ = [
    "register_content_tools",
    "register_token_tools",
]
