"""
Abbreviation lookups over the tone and type registries.
"""

from chuk_mcp_copy.constants import TONES, TYPES, ToneDefinition, TypeDefinition
from chuk_mcp_copy.errors import UnknownToneError, UnknownTypeError

TONES_BY_ABBR: dict[str, ToneDefinition] = {t.abbr: t for t in TONES}
TYPES_BY_ABBR: dict[str, TypeDefinition] = {t.abbr: t for t in TYPES}


def get_tone_by_abbr(abbr: str) -> ToneDefinition:
    """Look up a tone by abbreviation, raising UnknownToneError if absent."""
    try:
        return TONES_BY_ABBR[abbr]
    except KeyError:
        raise UnknownToneError(abbr) from None


def get_type_by_abbr(abbr: str) -> TypeDefinition:
    """Look up a type by abbreviation, raising UnknownTypeError if absent."""
    try:
        return TYPES_BY_ABBR[abbr]
    except KeyError:
        raise UnknownTypeError(abbr) from None
