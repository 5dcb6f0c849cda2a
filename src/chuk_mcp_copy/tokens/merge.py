"""
Merge Engine - additive deep merge of token trees into documents.

Existing values are never overwritten: re-running a build must not
replace content a person or the design tool has since edited.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from chuk_mcp_copy.core.paths import has_path, is_token, split_path


def _is_group(value: Any) -> bool:
    """A nested mapping that is not a leaf token."""
    return isinstance(value, Mapping) and not is_token(value)


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """
    Deep merge source into target, returning a new document.

    - Both sides groups: recurse
    - Key absent from target: insert a copy of the source value
    - Otherwise: keep the target value untouched

    Neither input is mutated.

    Args:
        target: Existing document
        source: Newly built tree

    Returns:
        The merged document
    """
    result = dict(target)

    for key, source_value in source.items():
        target_value = result.get(key)

        if key in result and _is_group(target_value) and _is_group(source_value):
            result[key] = deep_merge(target_value, source_value)
        elif key not in result:
            result[key] = copy.deepcopy(source_value)

    return result


def entry_exists(language_document: Mapping[str, Any], domain: str, name: str) -> bool:
    """True if `domain.name` already resolves in the Language document."""
    return has_path(language_document, split_path(domain, name))
