import importlib.util
from pathlib import Path

import pytest

from bidimirror import MirrorTableError
from bidimirror.mirrored_char_data import MIRRORED_CHAR_PAIRS, UNICODE_SOURCE

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "generate_mirrored_char_data.py"


def load_script():
    spec = importlib.util.spec_from_file_location("generate_mirrored_char_data", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_render_matches_shipped_module():
    gen = load_script()
    shipped = (ROOT / "bidimirror" / "mirrored_char_data.py").read_text(encoding="utf-8")
    assert gen.render_module(MIRRORED_CHAR_PAIRS, UNICODE_SOURCE) == shipped


def test_main_writes_outputs(tmp_path, monkeypatch):
    gen = load_script()
    source = tmp_path / "BidiMirroring.txt"
    source.write_text(
        "# BidiMirroring-9.9.9.txt\n003C; 003E # LESS-THAN SIGN\n003E; 003C # GREATER-THAN SIGN\n",
        encoding="utf-8",
    )
    out_py = tmp_path / "mirrored_char_data.py"
    out_txt = tmp_path / "mirrored_char_table.txt"
    monkeypatch.setattr(gen, "OUT_PY", out_py)
    monkeypatch.setattr(gen, "OUT_TXT", out_txt)

    gen.main([str(source)])

    namespace = {}
    exec(out_py.read_text(encoding="utf-8"), namespace)
    assert namespace["MIRRORED_CHAR_PAIRS"] == ((0x3C, 0x3E), (0x3E, 0x3C))
    assert namespace["MIRRORED_CHARS_COUNT"] == 2
    assert namespace["UNICODE_SOURCE"] == "BidiMirroring-9.9.9.txt"
    text = out_txt.read_text(encoding="utf-8")
    assert "Total entries: 2" in text
    assert "U+003C\t<\tU+003E\t>\tLESS-THAN SIGN" in text


def test_env_var_selects_input(tmp_path, monkeypatch):
    gen = load_script()
    monkeypatch.setenv("BIDI_MIRRORING_TXT", str(tmp_path / "custom.txt"))
    assert gen.resolve_input([]) == tmp_path / "custom.txt"
    assert gen.resolve_input(["other.txt"]) == Path("other.txt")
    monkeypatch.delenv("BIDI_MIRRORING_TXT")
    assert gen.resolve_input([]) == gen.DEFAULT_INPUT


def test_main_rejects_asymmetric_source(tmp_path):
    gen = load_script()
    source = tmp_path / "BidiMirroring.txt"
    source.write_text("0028; 0029\n0029; 003C\n", encoding="utf-8")
    with pytest.raises(MirrorTableError):
        gen.main([str(source)])
