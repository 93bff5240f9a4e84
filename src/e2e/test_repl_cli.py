import json
from pathlib import Path
import pytest

from swipe_engine.__main__ import main

def _seed(tmp: Path) -> str:
    p = tmp / "words.txt"
    p.write_text("cat\t100\ncar\t90\nbar\t10\n", encoding="utf-8")
    return str(p)

def _feed(monkeypatch, lines):
    it = iter(lines)
    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)

@pytest.mark.e2e
def test_json_mode_prints_one_array_per_trace(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["caaat", ""])
    assert main(["--dict", _seed(tmp_path), "--json", "--limit", "2"]) == 0
    out = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith("[")]
    assert [r["word"] for r in json.loads(out[-1])] == ["cat", "car"]

@pytest.mark.e2e
def test_table_mode_and_eof(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, ["xyz", ":params"])
    assert main(["--dict", _seed(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "(no matches)" in out
    assert '"alpha"' in out

def test_missing_dictionary_exits_with_2(tmp_path: Path, capsys):
    assert main(["--dict", str(tmp_path / "missing.txt")]) == 2
    assert "code -1" in capsys.readouterr().err

def test_invalid_tuning_is_rejected(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--dict", _seed(tmp_path), "--alpha", "2"])

@pytest.mark.e2e
def test_dict_defaults_to_bundled_dictionary(tmp_path: Path, monkeypatch, capsys):
    from swipe_engine import config as CFG
    monkeypatch.setattr(CFG, "BUNDLED_DICTIONARY", Path(_seed(tmp_path)))
    _feed(monkeypatch, ["caaat", ""])
    assert main(["--json", "--limit", "1"]) == 0
    out = [ln for ln in capsys.readouterr().out.splitlines() if ln.startswith("[")]
    assert [r["word"] for r in json.loads(out[-1])] == ["cat"]
