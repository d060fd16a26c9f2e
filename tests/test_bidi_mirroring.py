import pytest

from bidimirror import MirrorTableError, validate_pairs
from bidimirror.bidi_mirroring import (
    parse_bidi_mirroring,
    read_bidi_mirroring,
    unicode_version_from_header,
)

SAMPLE = """\
# BidiMirroring-4.1.0.txt
# Date: 2005-03-20
#
# Bidi_Mirroring_Glyph Property
0029; 0028 # RIGHT PARENTHESIS
0028; 0029 # LEFT PARENTHESIS

2264; 2265 # LESS-THAN OR EQUAL TO
2265; 2264 # GREATER-THAN OR EQUAL TO

# The following characters have no appropriate mirroring character.
# 2201; COMPLEMENT
# 2202; PARTIAL DIFFERENTIAL [BEST FIT]
"""


def test_parse_sample_sorted_and_valid():
    pairs = parse_bidi_mirroring(SAMPLE.splitlines())
    assert pairs == [(0x28, 0x29), (0x29, 0x28), (0x2264, 0x2265), (0x2265, 0x2264)]
    validate_pairs(pairs)


def test_header_version():
    assert unicode_version_from_header(SAMPLE.splitlines()) == "BidiMirroring-4.1.0.txt"
    assert unicode_version_from_header(["0028; 0029"]) is None


@pytest.mark.parametrize("line", ["0028 0029", "0028;", "0028; 00ZZ", "0028; 0029; 0030"])
def test_malformed_lines_rejected(line):
    with pytest.raises(MirrorTableError, match="Line 2"):
        parse_bidi_mirroring(["# header", line])


def test_read_file(tmp_path):
    path = tmp_path / "BidiMirroring.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    pairs, version = read_bidi_mirroring(path)
    assert len(pairs) == 4
    assert version == "BidiMirroring-4.1.0.txt"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="BidiMirroring.txt"):
        read_bidi_mirroring(tmp_path / "BidiMirroring.txt")
