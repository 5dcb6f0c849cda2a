"""
Token Set Validator - checks cross-file reference integrity.

Validates:
- Every Tone token references a token present in every Type file
- Every Type token references a token present in the Language file
- References only point one layer down (no layer skipping)
- Type and Tone tokens carry a reference key

The six Type files (and six Tone files) share the same paths; the design
tool picks one file per layer as the active mode. A reference is only
sound if it resolves whichever file of the layer below is active.

Apply keeps the 13 files in lockstep; this catches drift from edits
made outside of it. It reports problems, it does not repair them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_copy.constants import LANGUAGE_FILE, TONES, TYPES, TokenLayer
from chuk_mcp_copy.core.paths import get_nested, is_token, iter_tokens

_REFERENCE = re.compile(r"^\{(?P<path>[^{}]+)\}$")

_LAYER_FILES: dict[TokenLayer, list[str]] = {
    TokenLayer.LANGUAGE: [LANGUAGE_FILE],
    TokenLayer.TYPE: [t.file for t in TYPES],
    TokenLayer.TONE: [t.file for t in TONES],
}

_LAYER_BELOW: dict[TokenLayer, TokenLayer] = {
    TokenLayer.TONE: TokenLayer.TYPE,
    TokenLayer.TYPE: TokenLayer.LANGUAGE,
}


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Reference chain is broken
    WARNING = "warning"  # Usable, but the design tool may lose track
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a token file set."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []
        self.tokens_checked = 0

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


def parse_reference(value: Any) -> str | None:
    """Return the path inside a `{path}` reference, or None for a literal."""
    if not isinstance(value, str):
        return None
    match = _REFERENCE.match(value)
    return match.group("path") if match else None


def layer_of(file: str) -> TokenLayer:
    """Classify a token file name into its layer."""
    for layer, files in _LAYER_FILES.items():
        if file in files:
            return layer
    raise ValueError(f"Not a token file: {file}")


def _token_at(document: Mapping[str, Any] | None, path: str) -> dict[str, Any] | None:
    if document is None:
        return None
    found = get_nested(document, path.split("."))
    return found if is_token(found) else None


def resolve_reference(
    documents: Mapping[str, Mapping[str, Any]],
    token_path: str,
    chain: Sequence[str],
) -> str | None:
    """
    Follow a reference chain down to a literal value.

    The chain names the active file for each layer, top first, e.g.
    [Tone.Witty.tokens.json, Type.Caption.tokens.json, Language.English.tokens.json].

    Args:
        documents: Token documents keyed by file name
        token_path: Dot-separated path of the starting token in chain[0]
        chain: Files to resolve through, one per layer

    Returns:
        The literal value, or None if the chain is broken
    """
    path = token_path
    for file in chain:
        token = _token_at(documents.get(file), path)
        if token is None:
            return None
        value = token.get("$value")
        target = parse_reference(value)
        if target is None:
            return str(value)
        path = target
    return None


class TokenSetValidator:
    """Validates reference integrity across the Type and Tone documents."""

    def validate(self, documents: Mapping[str, Mapping[str, Any]]) -> ValidationResult:
        """
        Validate a token file set.

        Args:
            documents: Token documents keyed by file name

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        for layer in (TokenLayer.TONE, TokenLayer.TYPE):
            for file in _LAYER_FILES[layer]:
                if file in documents:
                    self._validate_document(documents, file, layer, result)

        return result

    def _validate_document(
        self,
        documents: Mapping[str, Mapping[str, Any]],
        file: str,
        layer: TokenLayer,
        result: ValidationResult,
    ) -> None:
        below = _LAYER_BELOW[layer]

        for path, token in iter_tokens(documents[file]):
            result.tokens_checked += 1
            location = f"{file}:{path}"

            figma = token.get("$extensions", {}).get("figma", {})
            if not figma.get("referenceKey"):
                result.add_warning("MISSING_REFERENCE_KEY", "Token has no referenceKey", location)

            target = parse_reference(token.get("$value"))
            if target is None:
                result.add_error(
                    "LITERAL_VALUE",
                    f"Expected a reference into the {below.value} layer",
                    location,
                )
                continue

            missing = [
                other
                for other in _LAYER_FILES[below]
                if _token_at(documents.get(other), target) is None
            ]
            if not missing:
                continue

            skipped = [
                other
                for other in TokenLayer
                if other not in (layer, below)
                and any(_token_at(documents.get(f), target) for f in _LAYER_FILES[other])
            ]
            if skipped:
                result.add_error(
                    "LAYER_SKIP",
                    f"Reference {{{target}}} points into the {skipped[0].value} layer",
                    location,
                )
            else:
                result.add_error(
                    "DANGLING_REFERENCE",
                    f"Reference {{{target}}} does not resolve in {', '.join(missing)}",
                    location,
                )


def validate_token_set(documents: Mapping[str, Mapping[str, Any]]) -> ValidationResult:
    """Convenience function to validate a token file set."""
    return TokenSetValidator().validate(documents)
