"""
Code syntax - platform identifiers derived from a token path.

The path is the full dot-separated token path, e.g.
"legal.copyright.neutral.lang--neut--title--copyright":

    WEB:     var(--legal-copyright-neutral-lang--neut--title--copyright)
    ANDROID: legal_copyright_neutral_lang__neut__title__copyright
    iOS:     legalCopyrightNeutralLangNeutTitleCopyright

All functions are pure and total.
"""

from __future__ import annotations

import re

from chuk_mcp_copy.models.token import CodeSyntax

_IOS_SPLIT = re.compile(r"[.-]+")


def web_syntax(path: str) -> str:
    """CSS custom-property reference."""
    return f"var(--{path.replace('.', '-')})"


def android_syntax(path: str) -> str:
    """Resource name: dots and hyphens both become underscores."""
    return path.replace(".", "_").replace("-", "_")


def ios_syntax(path: str) -> str:
    """camelCase identifier split on runs of dots and hyphens."""
    parts = _IOS_SPLIT.split(path)
    return "".join(
        part if i == 0 else part[:1].upper() + part[1:] for i, part in enumerate(parts)
    )


def code_syntax(path: str) -> CodeSyntax:
    """Bundle all three platform identifiers for a token path."""
    return CodeSyntax(
        web=web_syntax(path),
        android=android_syntax(path),
        ios=ios_syntax(path),
    )
