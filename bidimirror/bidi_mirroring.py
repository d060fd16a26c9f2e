"""Parser for the Unicode Character Database file BidiMirroring.txt."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .mirror_table import MirrorTableError

HEADER_RE = re.compile(r"#\s*(BidiMirroring-[0-9.]+\.txt)")


def parse_bidi_mirroring(lines: Iterable[str]) -> List[Tuple[int, int]]:
    """
    Parse ``source; mirror # name`` rows into (source, mirror) pairs sorted by source.

    Comment-only lines are skipped, which also drops the "[BEST FIT]" entries
    the file lists for characters without an exact mirror.
    """
    pairs: List[Tuple[int, int]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = [field.strip() for field in line.split(";")]
        if len(fields) != 2 or not all(fields):
            raise MirrorTableError(f"Line {lineno}: expected 'source; mirror', got {raw.strip()!r}")
        try:
            source, mirror = (int(field, 16) for field in fields)
        except ValueError:
            raise MirrorTableError(f"Line {lineno}: invalid hex code point in {raw.strip()!r}")
        pairs.append((source, mirror))
    pairs.sort()
    return pairs


def unicode_version_from_header(lines: Iterable[str]) -> Optional[str]:
    for line in lines:
        if not line.startswith("#"):
            break
        match = HEADER_RE.match(line)
        if match:
            return match.group(1)
    return None


def read_bidi_mirroring(path: Union[str, Path]) -> Tuple[List[Tuple[int, int]], Optional[str]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Missing {path}. Download it from https://www.unicode.org/Public/UCD/latest/ucd/"
        )
    lines = path.read_text(encoding="utf-8").splitlines()
    return parse_bidi_mirroring(lines), unicode_version_from_header(lines)
