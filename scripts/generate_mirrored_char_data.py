#!/usr/bin/env python3
"""Generate the bidi mirrored character data module (Python + TXT reference)."""
from __future__ import annotations

import os
import sys
import unicodedata as ud
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

ROOT = Path(__file__).resolve().parents[1]
try:
    import bidimirror  # type: ignore  # noqa: F401
except ModuleNotFoundError:
    sys.path.insert(0, str(ROOT))

from bidimirror.bidi_mirroring import read_bidi_mirroring
from bidimirror.mirror_table import validate_pairs

DEFAULT_INPUT = ROOT / "references" / "BidiMirroring.txt"
OUT_PY = ROOT / "bidimirror" / "mirrored_char_data.py"
OUT_TXT = ROOT / "references" / "mirrored_char_table.txt"

PAIRS_PER_LINE = 4


def _name(cp: int) -> str:
    try:
        return ud.name(chr(cp))
    except ValueError:
        return "UNNAMED"


def render_module(pairs: Sequence[Tuple[int, int]], source: str) -> str:
    lines = [
        '"""Bidi mirrored character pairs.',
        "",
        f"Generated by scripts/generate_mirrored_char_data.py from {source}.",
        "Do not edit by hand; regenerate instead.",
        '"""',
        "",
        f'UNICODE_SOURCE = "{source}"',
        "",
        f"MIRRORED_CHARS_COUNT = {len(pairs)}",
        "",
        "MIRRORED_CHAR_PAIRS = (",
    ]
    for start in range(0, len(pairs), PAIRS_PER_LINE):
        chunk = pairs[start : start + PAIRS_PER_LINE]
        row = " ".join(f"(0x{src:04X}, 0x{dst:04X})," for src, dst in chunk)
        lines.append(f"    {row}")
    lines.append(")")
    return "\n".join(lines) + "\n"


def write_module(
    pairs: Sequence[Tuple[int, int]], source: str, out_path: Optional[Path] = None
) -> None:
    out_path = out_path or OUT_PY
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_module(pairs, source), encoding="utf-8")


def write_txt(
    pairs: Sequence[Tuple[int, int]], source: str, out_path: Optional[Path] = None
) -> None:
    out_path = out_path or OUT_TXT
    out_path.parent.mkdir(parents=True, exist_ok=True)
    lines = [
        "Bidi Mirrored Character Table",
        "",
        f"Source: {source}",
        "Characters drawn as their mirror image inside right-to-left runs.",
        "",
        "Columns:",
        "- Code: Unicode code point",
        "- Char: literal character",
        "- Mirror: mirrored code point",
        "- MirrorChar: literal mirrored character",
        "- Name: Unicode name of Code",
        "",
        f"Total entries: {len(pairs)}",
        "",
        "Code\tChar\tMirror\tMirrorChar\tName",
    ]
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(f"{line}\n")
        for src, dst in pairs:
            f.write(f"U+{src:04X}\t{chr(src)}\tU+{dst:04X}\t{chr(dst)}\t{_name(src)}\n")


def resolve_input(argv: List[str]) -> Path:
    if argv:
        return Path(argv[0])
    env_path = os.environ.get("BIDI_MIRRORING_TXT")
    if env_path:
        return Path(env_path)
    return DEFAULT_INPUT


def main(argv: Optional[List[str]] = None) -> None:
    input_path = resolve_input(sys.argv[1:] if argv is None else argv)
    pairs, version = read_bidi_mirroring(input_path)
    validate_pairs(pairs)
    source = version or input_path.name
    write_module(pairs, source)
    write_txt(pairs, source)
    print(f"Wrote {len(pairs)} mirrored pairs from {source} to {OUT_PY} and {OUT_TXT}")


if __name__ == "__main__":
    main()
