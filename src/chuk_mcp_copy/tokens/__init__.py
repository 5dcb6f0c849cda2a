"""
Token engine - building, merging and validating token trees.

This module provides:
- TokenMatrixBuilder: Language / Type / Tone trees for one entry
- deep_merge: Additive-only merge into existing documents
- TokenSetValidator: Cross-file reference integrity checks
"""

from chuk_mcp_copy.tokens.builder import (
    TokenMatrixBuilder,
    build_language_tokens,
    build_tone_tokens,
    build_type_tokens,
    random_reference_key,
)
from chuk_mcp_copy.tokens.merge import deep_merge, entry_exists
from chuk_mcp_copy.tokens.validator import (
    TokenSetValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    resolve_reference,
    validate_token_set,
)

__all__ = [
    "TokenMatrixBuilder",
    "TokenSetValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "build_language_tokens",
    "build_tone_tokens",
    "build_type_tokens",
    "deep_merge",
    "entry_exists",
    "random_reference_key",
    "resolve_reference",
    "validate_token_set",
]
