"""
Path helpers - dot-separated paths over nested token documents.

Domains may span several segments ("legal.copyright"); every builder
nests its leaf value under the domain segments followed by the entry name.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from chuk_mcp_copy.constants import TYPE_MARKER


def split_path(domain: str, name: str | None = None) -> list[str]:
    """Split a domain (and optional name) into path segments."""
    parts = domain.split(".")
    if name is not None:
        parts.append(name)
    return parts


def join_path(*segments: str) -> str:
    return ".".join(segments)


def set_nested(domain: str, name: str, value: Any) -> dict[str, Any]:
    """
    Build a nested dict from a dot-separated domain and an entry name.

    "legal.copyright", "notice", v -> {"legal": {"copyright": {"notice": v}}}

    Segments are treated as opaque strings.

    Args:
        domain: Dot-separated domain
        name: Entry name (deepest key)
        value: Leaf value placed under the name

    Returns:
        A new nested dict rooted at the first domain segment
    """
    result: Any = value
    for key in reversed(split_path(domain, name)):
        result = {key: result}
    return result


def is_token(value: Any) -> bool:
    """A mapping is a leaf token iff it carries the `$type` marker."""
    return isinstance(value, Mapping) and TYPE_MARKER in value


def get_nested(document: Mapping[str, Any], segments: list[str]) -> Any | None:
    """
    Walk a document along path segments.

    Returns the value at the end of the path, or None if any
    segment is missing or an intermediate value is not a mapping.
    """
    current: Any = document
    for segment in segments:
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


def has_path(document: Mapping[str, Any], segments: list[str]) -> bool:
    """True if every segment resolves by containment."""
    current: Any = document
    for segment in segments:
        if not isinstance(current, Mapping) or segment not in current:
            return False
        current = current[segment]
    return True


def iter_tokens(tree: Any, prefix: str = "") -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield (dot.path, token) for every leaf token under a tree."""
    if not isinstance(tree, Mapping):
        return

    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if is_token(value):
            yield path, value
        elif isinstance(value, Mapping):
            yield from iter_tokens(value, path)


def count_tokens(tree: Any) -> int:
    return sum(1 for _ in iter_tokens(tree))


def flatten_tokens(tree: Any, prefix: str = "") -> dict[str, str]:
    """Map each leaf token's path to its `$value`."""
    return {path: str(token.get("$value")) for path, token in iter_tokens(tree, prefix)}
