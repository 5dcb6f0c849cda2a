"""
Persistence - the token file set on disk.

This module provides:
- TokenStore: JSON read/write for individual token documents
- TokenRepository: Apply, preview and list content entries
"""

from chuk_mcp_copy.store.repository import TokenRepository
from chuk_mcp_copy.store.token_store import TokenStore

__all__ = [
    "TokenRepository",
    "TokenStore",
]
