"""Bidi mirrored character lookup for text layout."""

from .char_mapper import DELETED_GLYPH, CharMapper, mirror_char
from .mirror_table import (
    MirroredCharTable,
    MirrorEntry,
    MirrorTableError,
    get_table,
    is_mirrored,
    mirror_of,
    validate_pairs,
)
from .mirrored_char_data import MIRRORED_CHARS_COUNT

__all__ = [
    "CharMapper",
    "DELETED_GLYPH",
    "MIRRORED_CHARS_COUNT",
    "MirrorEntry",
    "MirrorTableError",
    "MirroredCharTable",
    "get_table",
    "is_mirrored",
    "mirror_char",
    "mirror_of",
    "validate_pairs",
]
