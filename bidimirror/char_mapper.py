"""Character mapper applied before glyph lookup: control filtering and mirroring."""

from __future__ import annotations

from bisect import bisect_left
from typing import List

from .mirror_table import CodePoint, get_table, to_codepoint

DELETED_GLYPH = 0xFFFF

# ZWNJ (U+200C) and ZWJ (U+200D) stay visible to shaping.
CONTROL_CHARS = (
    0x0009,
    0x000A,
    0x000D,
    0x200E,
    0x200F,
    0x2028,
    0x2029,
    0x202A,
    0x202B,
    0x202C,
    0x202D,
    0x202E,
    0x206A,
    0x206B,
    0x206C,
    0x206D,
    0x206E,
    0x206F,
)


def is_control_char(code: CodePoint) -> bool:
    cp = to_codepoint(code)
    index = bisect_left(CONTROL_CHARS, cp)
    return index < len(CONTROL_CHARS) and CONTROL_CHARS[index] == cp


class CharMapper:
    """
    Map code points the way a layout engine does before looking up glyphs.

    With ``filter_controls`` set, layout controls map to DELETED_GLYPH.
    With ``mirror`` set, mirrored characters map to their counterpart.
    Everything else maps to itself.
    """

    def __init__(self, filter_controls: bool = False, mirror: bool = False) -> None:
        self.filter_controls = filter_controls
        self.mirror = mirror

    def map_char(self, code: CodePoint) -> int:
        cp = to_codepoint(code)
        if self.filter_controls and is_control_char(cp):
            return DELETED_GLYPH
        if self.mirror:
            mirrored = get_table().mirror_of(cp)
            if mirrored is not None:
                return mirrored
        return cp

    def map_text(self, text: str) -> str:
        chars: List[str] = []
        for ch in text:
            cp = self.map_char(ch)
            if cp == DELETED_GLYPH and ord(ch) != DELETED_GLYPH:
                continue
            chars.append(chr(cp))
        return "".join(chars)

    def __repr__(self) -> str:
        return f"CharMapper(filter_controls={self.filter_controls}, mirror={self.mirror})"


def mirror_char(ch: str) -> str:
    mirrored = get_table().mirror_of(ch)
    return ch if mirrored is None else chr(mirrored)
