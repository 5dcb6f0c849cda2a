"""
Pydantic models for the copy token system.

This module provides:
- ContentEntry / ContentMatrix: Generated copy, 6 tones x 6 types
- Token: A design-tool text token
- ApplyResult / PreviewResult: Operation results
"""

from chuk_mcp_copy.models.content import ContentEntry, ContentMatrix, load_content_file
from chuk_mcp_copy.models.token import (
    ApplyResult,
    CodeSyntax,
    FigmaExtensions,
    FileModification,
    PreviewFile,
    PreviewResult,
    Token,
    TokenExtensions,
    TokenInfo,
)

__all__ = [
    "ApplyResult",
    "CodeSyntax",
    "ContentEntry",
    "ContentMatrix",
    "FigmaExtensions",
    "FileModification",
    "PreviewFile",
    "PreviewResult",
    "Token",
    "TokenExtensions",
    "TokenInfo",
    "load_content_file",
]
