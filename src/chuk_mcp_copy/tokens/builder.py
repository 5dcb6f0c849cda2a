"""
Token Matrix Builder - derives the three token layers for one entry.

Given a domain, an entry name and a 6 x 6 ContentMatrix, the builder
produces cross-referenced trees for:
- Language: 36 literal tokens, grouped by tone
- Type: 6 tokens per Type file, each referencing a Language token
- Tone: 1 token per Tone file, referencing the Type token for that tone

Everything is deterministic except the reference keys on Type and Tone
tokens, which come from an injectable factory.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from typing import Any

from chuk_mcp_copy.constants import (
    KEY_SEPARATOR,
    LANGUAGE_FILE,
    LANGUAGE_PREFIX,
    REFERENCE_KEY_BYTES,
    TEXT_CONTENT_SCOPE,
    TONE_PREFIX,
    TONES,
    TYPE_PREFIX,
    TYPES,
)
from chuk_mcp_copy.core.code_syntax import code_syntax
from chuk_mcp_copy.core.paths import join_path, set_nested
from chuk_mcp_copy.models.content import ContentMatrix
from chuk_mcp_copy.models.token import FigmaExtensions, Token, TokenExtensions
from chuk_mcp_copy.registry import get_tone_by_abbr, get_type_by_abbr

ReferenceKeyFactory = Callable[[], str]


def random_reference_key() -> str:
    """40 hex characters from a cryptographically strong source."""
    return secrets.token_hex(REFERENCE_KEY_BYTES)


def language_key(tone_abbr: str, type_abbr: str, name: str) -> str:
    return KEY_SEPARATOR.join([LANGUAGE_PREFIX, tone_abbr, type_abbr, name])


def type_key(tone_abbr: str, name: str) -> str:
    return KEY_SEPARATOR.join([TYPE_PREFIX, tone_abbr, name])


def tone_key(name: str) -> str:
    return KEY_SEPARATOR.join([TONE_PREFIX, name])


def reference(path: str) -> str:
    """Wrap a token path as a `{path}` reference expression."""
    return f"{{{path}}}"


class TokenMatrixBuilder:
    """
    Builds token trees for the Language, Type and Tone layers.

    Trees are plain nested dicts rooted at the first domain segment,
    ready to be merged into a token document.
    """

    def __init__(self, reference_key_factory: ReferenceKeyFactory | None = None):
        """
        Initialize the builder.

        Args:
            reference_key_factory: Source of reference keys (default: random hex)
        """
        self.reference_key_factory = reference_key_factory or random_reference_key

    def _token(
        self,
        path: str,
        value: str,
        scopes: list[str],
        hidden: bool,
        with_reference_key: bool,
    ) -> dict[str, Any]:
        token = Token(
            value=value,
            extensions=TokenExtensions(
                figma=FigmaExtensions(
                    scopes=scopes,
                    code_syntax=code_syntax(path),
                    hidden_from_publishing=hidden,
                    reference_key=self.reference_key_factory() if with_reference_key else None,
                )
            ),
        )
        return token.to_document()

    def build_language_tokens(
        self,
        domain: str,
        name: str,
        content: ContentMatrix,
    ) -> dict[str, Any]:
        """
        Build Language layer tokens for one entry.

        Structure: {domain...: {name: {tone_full: {lang--<tone>--<type>--<name>: token}}}}

        Args:
            domain: Dot-separated domain
            name: Entry name
            content: The generated copy

        Returns:
            Tree with 36 literal tokens
        """
        name_group: dict[str, dict[str, Any]] = {}

        for tone in TONES:
            tone_tokens: dict[str, Any] = {}

            for type_def in TYPES:
                key = language_key(tone.abbr, type_def.abbr, name)
                path = join_path(domain, name, tone.full, key)
                tone_tokens[key] = self._token(
                    path,
                    content.get(tone.full, type_def.full),
                    scopes=[],
                    hidden=True,
                    with_reference_key=False,
                )

            name_group[tone.full] = tone_tokens

        return set_nested(domain, name, name_group)

    def build_type_tokens(self, domain: str, name: str, type_abbr: str) -> dict[str, Any]:
        """
        Build tokens for a single Type file.

        Structure: {domain...: {name: {type--<tone>--<name>: token}}}
        Each value references the Language token for that tone and type.

        Args:
            domain: Dot-separated domain
            name: Entry name
            type_abbr: Type abbreviation (e.g., 'subt')

        Returns:
            Tree with 6 reference tokens, one per tone

        Raises:
            UnknownTypeError: If type_abbr is not registered
        """
        type_def = get_type_by_abbr(type_abbr)
        tokens: dict[str, Any] = {}

        for tone in TONES:
            key = type_key(tone.abbr, name)
            path = join_path(domain, name, key)
            target = join_path(
                domain, name, tone.full, language_key(tone.abbr, type_def.abbr, name)
            )
            tokens[key] = self._token(
                path,
                reference(target),
                scopes=[],
                hidden=True,
                with_reference_key=True,
            )

        return set_nested(domain, name, tokens)

    def build_tone_tokens(self, domain: str, name: str, tone_abbr: str) -> dict[str, Any]:
        """
        Build the token for a single Tone file.

        Structure: {domain...: {name: {tone--<name>: token}}}
        This is the only layer end users pick in the design tool.

        Args:
            domain: Dot-separated domain
            name: Entry name
            tone_abbr: Tone abbreviation (e.g., 'neut')

        Returns:
            Tree with exactly 1 reference token

        Raises:
            UnknownToneError: If tone_abbr is not registered
        """
        tone = get_tone_by_abbr(tone_abbr)
        key = tone_key(name)
        path = join_path(domain, name, key)
        target = join_path(domain, name, type_key(tone.abbr, name))

        token = self._token(
            path,
            reference(target),
            scopes=[TEXT_CONTENT_SCOPE],
            hidden=False,
            with_reference_key=True,
        )
        return set_nested(domain, name, {key: token})

    def build_all(self, domain: str, name: str, content: ContentMatrix) -> dict[str, dict[str, Any]]:
        """
        Build the trees for all 13 files of one entry.

        Returns:
            Mapping of file name to tree, Language then Type then Tone files
        """
        trees: dict[str, dict[str, Any]] = {
            LANGUAGE_FILE: self.build_language_tokens(domain, name, content)
        }
        for type_def in TYPES:
            trees[type_def.file] = self.build_type_tokens(domain, name, type_def.abbr)
        for tone in TONES:
            trees[tone.file] = self.build_tone_tokens(domain, name, tone.abbr)
        return trees


_default_builder = TokenMatrixBuilder()


def build_language_tokens(domain: str, name: str, content: ContentMatrix) -> dict[str, Any]:
    """Convenience wrapper using random reference keys."""
    return _default_builder.build_language_tokens(domain, name, content)


def build_type_tokens(domain: str, name: str, type_abbr: str) -> dict[str, Any]:
    """Convenience wrapper using random reference keys."""
    return _default_builder.build_type_tokens(domain, name, type_abbr)


def build_tone_tokens(domain: str, name: str, tone_abbr: str) -> dict[str, Any]:
    """Convenience wrapper using random reference keys."""
    return _default_builder.build_tone_tokens(domain, name, tone_abbr)
