from types import MappingProxyType

import pytest

from swipe_engine.dictionary import Dictionary
from swipe_engine.models import WordEntry
from swipe_engine.prune import candidates


def _dict(**words):
    return Dictionary(WordEntry(w, f) for w, f in words.items())


def test_dictionary_views_are_read_only():
    d = _dict(cat=1)
    assert isinstance(d.entries, MappingProxyType)
    with pytest.raises(TypeError):
        d.entries["dog"] = WordEntry("dog", 1)  # type: ignore[index]


def test_buckets_are_keyed_by_first_letter_and_canonical_length():
    d = _dict(hello=5, help=4, cat=3)
    assert [e.word for e in d.bucket("h", 4)] == ["hello", "help"]
    assert d.bucket("h", 5) == ()
    assert d.bucket("x", 3) == ()


def test_empty_query_has_no_candidates():
    assert candidates("", _dict(cat=1)) == []


def test_candidates_match_first_letter_and_length_window():
    d = _dict(cat=1, cart=1, carts=1, catastrophe=1, bat=1, ca=1, c=1)
    got = {e.word for e in candidates("cat", d, window=2)}
    assert got == {"cat", "cart", "carts", "ca", "c"}
    assert "bat" not in got
    assert "catastrophe" not in got


def test_zero_window_keeps_exact_length_only():
    d = _dict(cat=1, cart=1, ca=1)
    assert [e.word for e in candidates("cat", d, window=0)] == ["cat"]


def test_collapsed_length_is_used_for_windowing():
    # "balloon" collapses to "balon" (5 letters)
    d = _dict(balloon=1)
    assert [e.word for e in candidates("balon", d, window=0)] == ["balloon"]
