"""
CHUK Copy - multi-tone UX copy as design tokens.

Generated copy (6 tones × 6 text types) is written into a three-layer
token file set: Language files hold the literal text, Type files pick a
text kind and Tone files are the user-facing selector.
"""

from chuk_mcp_copy.constants import LANGUAGE_FILE, TONES, TYPES
from chuk_mcp_copy.models import ApplyResult, ContentEntry, ContentMatrix
from chuk_mcp_copy.store import TokenRepository, TokenStore
from chuk_mcp_copy.tokens import TokenMatrixBuilder, deep_merge

__all__ = [
    "ApplyResult",
    "ContentEntry",
    "ContentMatrix",
    "LANGUAGE_FILE",
    "TONES",
    "TYPES",
    "TokenMatrixBuilder",
    "TokenRepository",
    "TokenStore",
    "deep_merge",
]
