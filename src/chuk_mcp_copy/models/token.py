"""
Token models - the design-tool token format and operation results.

Tokens are built as pydantic models and dumped into plain dicts
(using the `$`-prefixed aliases) before they enter a token document.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_copy.constants import TOKEN_TYPE, TokenLayer


class CodeSyntax(BaseModel):
    """Per-platform identifiers for a token."""

    web: str = Field(..., alias="WEB")
    android: str = Field(..., alias="ANDROID")
    ios: str = Field(..., alias="iOS")

    model_config = {"frozen": True, "populate_by_name": True}


class FigmaExtensions(BaseModel):
    """The `$extensions.figma` block of a token."""

    scopes: list[str] = Field(default_factory=list)
    code_syntax: CodeSyntax = Field(..., alias="codeSyntax")
    hidden_from_publishing: bool = Field(..., alias="hiddenFromPublishing")
    reference_key: str | None = Field(None, alias="referenceKey")

    model_config = {"populate_by_name": True}


class TokenExtensions(BaseModel):
    """Wrapper for vendor extensions."""

    figma: FigmaExtensions


class Token(BaseModel):
    """
    A single text token.

    The value is either a literal string (Language layer) or a
    `{dot.path}` reference into the layer below.
    """

    type: str = Field(TOKEN_TYPE, alias="$type")
    value: str = Field(..., alias="$value")
    extensions: TokenExtensions = Field(..., alias="$extensions")

    model_config = {"populate_by_name": True}

    def to_document(self) -> dict[str, Any]:
        """Dump to the JSON document shape, omitting an unset reference key."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FileModification(BaseModel):
    """Tokens added to one file by an apply."""

    file: str
    tokens_added: int

    def to_wire(self) -> dict[str, Any]:
        return {"file": self.file, "tokensAdded": self.tokens_added}


class ApplyResult(BaseModel):
    """Result of applying one content entry."""

    files_modified: list[FileModification] = Field(default_factory=list)
    total_tokens: int = 0
    dry_run: bool = False

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the camelCase keys downstream callers expect."""
        return {
            "filesModified": [f.to_wire() for f in self.files_modified],
            "totalTokens": self.total_tokens,
        }


class PreviewFile(BaseModel):
    """Flattened view of the tokens one file would receive."""

    file: str
    layer: TokenLayer
    token_count: int
    tokens: dict[str, str] = Field(default_factory=dict)


class PreviewResult(BaseModel):
    """Preview of every file an apply would touch."""

    files: list[PreviewFile] = Field(default_factory=list)
    total_tokens: int = 0


class TokenInfo(BaseModel):
    """A Language-layer token found by listing."""

    path: str
    value: str
    tone: str
    type: str
