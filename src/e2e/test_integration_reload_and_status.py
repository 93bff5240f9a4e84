from pathlib import Path
import pytest
from swipe_engine.engine import Engine
from swipe_engine.errors import DictionaryEmpty, DictionaryNotFound

def _seed(tmp: Path, name: str, content: str) -> str:
    p = tmp / name
    p.write_text(content, encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_reload_replaces_old_words(tmp_path: Path):
    eng = Engine()
    eng.load(_seed(tmp_path, "a.txt", "cat\t100\ncar\t90\n"))
    assert "cat" in [r.word for r in eng.predict("cat")]
    gen_a = eng.generation

    assert eng.load(_seed(tmp_path, "b.txt", "cot\t50\ncut\t40\n")) == 2
    assert eng.generation > gen_a
    for trace in ("cat", "car", "cot", "caaaar"):
        words = {r.word for r in eng.predict(trace, limit=10)}
        assert not words & {"cat", "car"}
    assert eng.word_count == 2

@pytest.mark.e2e
def test_failed_load_leaves_no_state(tmp_path: Path):
    eng = Engine()
    with pytest.raises(DictionaryNotFound):
        eng.load(str(tmp_path / "missing.txt"))
    assert eng.is_loaded is False
    assert eng.word_count == 0
    assert eng.generation == 0

@pytest.mark.e2e
def test_failed_reload_keeps_previous_dictionary(tmp_path: Path):
    eng = Engine()
    eng.load(_seed(tmp_path, "a.txt", "cat\t100\n"))
    with pytest.raises(DictionaryEmpty):
        eng.load(_seed(tmp_path, "bad.txt", "???\t1\n"))
    assert eng.word_count == 1
    assert [r.word for r in eng.predict("cat")] == ["cat"]

@pytest.mark.e2e
def test_load_text_and_unload():
    eng = Engine()
    assert eng.load_text("hello\t1000\nhello\t1000\nhelp\t800\nhell\t600\n") == 3
    assert any(r.word == "hello" for r in eng.predict("hello", limit=5))
    eng.unload()
    assert eng.is_loaded is False
    assert eng.predict("hello") == []

@pytest.mark.e2e
def test_engines_are_independent():
    a, b = Engine(), Engine()
    a.load_text("cat\t1\n")
    b.load_text("cot\t1\n")
    assert [r.word for r in a.predict("cat")] == ["cat"]
    assert [r.word for r in b.predict("cat")] == ["cot"]
