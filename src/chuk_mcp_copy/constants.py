"""
Constants and registries for the copy token system.

No magic strings - tones, types and token files are defined once here
and iterated everywhere else in registry order.
"""

from enum import Enum

from pydantic import BaseModel


class TokenLayer(str, Enum):
    """The three token-file families, from literal text up to the selector."""

    LANGUAGE = "language"  # Literal generated strings
    TYPE = "type"  # Resolves a tone to a text kind
    TONE = "tone"  # User-facing selector


class ToneDefinition(BaseModel):
    """A stylistic voice and the Tone file it owns."""

    full: str
    abbr: str
    file: str

    model_config = {"frozen": True}


class TypeDefinition(BaseModel):
    """A structural text kind and the Type file it owns."""

    full: str
    abbr: str
    file: str

    model_config = {"frozen": True}


TONES: list[ToneDefinition] = [
    ToneDefinition(full="neutral", abbr="neut", file="Tone.Neutral.tokens.json"),
    ToneDefinition(full="formal", abbr="form", file="Tone.Formal.tokens.json"),
    ToneDefinition(full="playful", abbr="play", file="Tone.Playful.tokens.json"),
    ToneDefinition(full="minimal", abbr="mini", file="Tone.Minimal.tokens.json"),
    ToneDefinition(full="witty", abbr="witt", file="Tone.Witty.tokens.json"),
    ToneDefinition(full="quirky", abbr="quirk", file="Tone.Quirky.tokens.json"),
]

TYPES: list[TypeDefinition] = [
    TypeDefinition(full="title", abbr="title", file="Type.Title.tokens.json"),
    TypeDefinition(full="subtitle", abbr="subt", file="Type.Subtitle.tokens.json"),
    TypeDefinition(full="description", abbr="desc", file="Type.Description.tokens.json"),
    TypeDefinition(full="caption", abbr="capt", file="Type.Caption.tokens.json"),
    TypeDefinition(full="abbreviation", abbr="abbr", file="Type.Abbreviation.tokens.json"),
    TypeDefinition(full="emoji", abbr="emoji", file="Type.Emoji.tokens.json"),
]

LANGUAGE_FILE = "Language.English.tokens.json"

# Language first, then Type files, then Tone files
ALL_TOKEN_FILES: list[str] = [LANGUAGE_FILE] + [t.file for t in TYPES] + [t.file for t in TONES]

# Token document vocabulary
TOKEN_TYPE = "text"
TYPE_MARKER = "$type"
TEXT_CONTENT_SCOPE = "TEXT_CONTENT"

# Key prefixes for the token-key grammar
LANGUAGE_PREFIX = "lang"
TYPE_PREFIX = "type"
TONE_PREFIX = "tone"
KEY_SEPARATOR = "--"

# Random bytes per reference key (hex-encoded to twice this length)
REFERENCE_KEY_BYTES = 20

# Generation
DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_MAX_TOKENS = 2048
DEFAULT_GENERATION_ATTEMPTS = 2


class ErrorMessages:
    """Standardized error messages."""

    DUPLICATE_ENTRY = "Content entry '{path}' already exists."
    UNKNOWN_TONE = "Unknown tone abbreviation: '{abbr}'."
    UNKNOWN_TYPE = "Unknown type abbreviation: '{abbr}'."
    MALFORMED_DOCUMENT = "Malformed token document '{file}': {reason}"
    GENERATION_FAILED = "Failed to generate valid content after {attempts} attempts."
    UNRESOLVED_ENTRY = (
        "Cannot resolve '{raw}' without a domain. "
        "Use --domain or dot notation (e.g., 'nav.{suggestion}')."
    )


class SuccessMessages:
    """Standardized success messages."""

    ENTRY_APPLIED = "Wrote {tokens} tokens to {files} files."
    ENTRY_DRY_RUN = "[DRY RUN] Would write {tokens} tokens to {files} files."
