"""Binary-searchable table of bidi mirrored character pairs."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from .mirrored_char_data import MIRRORED_CHAR_PAIRS, MIRRORED_CHARS_COUNT

MAX_CODEPOINT = 0x10FFFF

CodePoint = Union[int, str]


class MirrorTableError(ValueError):
    """Mirrored character data violates a table invariant."""


@dataclass(frozen=True)
class MirrorEntry:
    source: int
    mirror: int

    @property
    def code(self) -> str:
        return f"U+{self.source:04X}"


def to_codepoint(code: CodePoint) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"Expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"code must be int or str, got {type(code).__name__}")
    return code


def validate_pairs(pairs: Sequence[Tuple[int, int]], count: Optional[int] = None) -> None:
    """
    Check the invariants binary search and mirroring rely on.

    Sources must be in range, unique and strictly ascending, every pair
    (a, b) must have its partner (b, a), and ``count`` (when given) must
    match the number of pairs.
    """
    if count is not None and count != len(pairs):
        raise MirrorTableError(f"Declared count {count} does not match {len(pairs)} entries")
    previous = -1
    forward = {}
    for index, (source, mirror) in enumerate(pairs):
        for value in (source, mirror):
            if not 0 <= value <= MAX_CODEPOINT:
                raise MirrorTableError(f"Entry {index} holds invalid code point {value:#x}")
        if source <= previous:
            raise MirrorTableError(
                f"Entry {index} (U+{source:04X}) is not strictly after U+{previous:04X}"
            )
        previous = source
        forward[source] = mirror
    for source, mirror in forward.items():
        if forward.get(mirror) != source:
            raise MirrorTableError(
                f"U+{source:04X} mirrors to U+{mirror:04X} but U+{mirror:04X} does not mirror back"
            )


class MirroredCharTable:
    """Immutable mapping from a code point to its mirrored code point."""

    def __init__(self, entries: Iterable[MirrorEntry]) -> None:
        self._entries: Tuple[MirrorEntry, ...] = tuple(entries)
        self._sources: Tuple[int, ...] = tuple(entry.source for entry in self._entries)
        self._mirrors: Tuple[int, ...] = tuple(entry.mirror for entry in self._entries)
        self.count = len(self._entries)

    @classmethod
    def from_pairs(
        cls, pairs: Sequence[Tuple[int, int]], count: Optional[int] = None
    ) -> "MirroredCharTable":
        validate_pairs(pairs, count)
        return cls(MirrorEntry(source, mirror) for source, mirror in pairs)

    @property
    def entries(self) -> Tuple[MirrorEntry, ...]:
        return self._entries

    def _index(self, code: CodePoint) -> int:
        cp = to_codepoint(code)
        index = bisect_left(self._sources, cp)
        if index < self.count and self._sources[index] == cp:
            return index
        return -1

    def is_mirrored(self, code: CodePoint) -> bool:
        return self._index(code) >= 0

    def mirror_of(self, code: CodePoint) -> Optional[int]:
        """Return the mirrored code point, or None when ``code`` has no mirror."""
        index = self._index(code)
        if index < 0:
            return None
        return self._mirrors[index]

    def __len__(self) -> int:
        return self.count

    def __contains__(self, code: object) -> bool:
        try:
            return self.is_mirrored(code)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[MirrorEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"MirroredCharTable(count={self.count})"


@lru_cache(maxsize=1)
def get_table() -> MirroredCharTable:
    return MirroredCharTable.from_pairs(MIRRORED_CHAR_PAIRS, MIRRORED_CHARS_COUNT)


def is_mirrored(code: CodePoint) -> bool:
    return get_table().is_mirrored(code)


def mirror_of(code: CodePoint) -> Optional[int]:
    return get_table().mirror_of(code)
