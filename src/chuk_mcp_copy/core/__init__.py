"""
Core primitives - identifiers and paths.

- code_syntax: WEB / ANDROID / iOS identifiers for a token path
- set_nested: Nested-path assembler shared by every layer builder
- iter_tokens / flatten_tokens: Walk leaf tokens in a document
"""

from chuk_mcp_copy.core.code_syntax import android_syntax, code_syntax, ios_syntax, web_syntax
from chuk_mcp_copy.core.paths import (
    count_tokens,
    flatten_tokens,
    get_nested,
    has_path,
    is_token,
    iter_tokens,
    join_path,
    set_nested,
    split_path,
)

__all__ = [
    # Code syntax
    "web_syntax",
    "android_syntax",
    "ios_syntax",
    "code_syntax",
    # Paths
    "split_path",
    "join_path",
    "set_nested",
    "get_nested",
    "has_path",
    "is_token",
    "iter_tokens",
    "count_tokens",
    "flatten_tokens",
]
