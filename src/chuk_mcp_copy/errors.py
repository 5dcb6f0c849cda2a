"""
Exception hierarchy for the copy token system.

Library layers raise these and never swallow them; the MCP tools catch
them at the edge and turn them into JSON error payloads.
"""

from __future__ import annotations

from chuk_mcp_copy.constants import ErrorMessages


class CopyTokensError(Exception):
    """Base class for all copy token errors."""


class DuplicateEntryError(CopyTokensError, ValueError):
    """The (domain, name) entry already exists in the Language document."""

    def __init__(self, domain: str, name: str):
        self.domain = domain
        self.name = name
        super().__init__(ErrorMessages.DUPLICATE_ENTRY.format(path=f"{domain}.{name}"))


class UnknownToneError(CopyTokensError, ValueError):
    """A tone abbreviation does not match the registry."""

    def __init__(self, abbr: str):
        self.abbr = abbr
        super().__init__(ErrorMessages.UNKNOWN_TONE.format(abbr=abbr))


class UnknownTypeError(CopyTokensError, ValueError):
    """A type abbreviation does not match the registry."""

    def __init__(self, abbr: str):
        self.abbr = abbr
        super().__init__(ErrorMessages.UNKNOWN_TYPE.format(abbr=abbr))


class MalformedDocumentError(CopyTokensError):
    """A persisted token document could not be parsed."""

    def __init__(self, file: str, reason: str):
        self.file = file
        self.reason = reason
        super().__init__(ErrorMessages.MALFORMED_DOCUMENT.format(file=file, reason=reason))


class GenerationError(CopyTokensError):
    """Content generation failed after exhausting its attempts."""

    def __init__(self, attempts: int, last_error: str | None = None):
        self.attempts = attempts
        self.last_error = last_error
        message = ErrorMessages.GENERATION_FAILED.format(attempts=attempts)
        if last_error:
            message = f"{message} Last error: {last_error}"
        super().__init__(message)


class EntryResolutionError(CopyTokensError, ValueError):
    """A raw batch name could not be resolved to (domain, name)."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            ErrorMessages.UNRESOLVED_ENTRY.format(raw=raw, suggestion=raw.lower())
        )
