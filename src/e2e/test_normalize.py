import pytest

from swipe_engine.normalize import collapse_runs, normalize


@pytest.mark.parametrize("trace, expected", [
    ("caaat", "cat"),
    ("CaAAt", "cat"),
    ("hello", "helo"),
    ("h-e l!l0o", "helo"),
    ("ssddffgg", "sdfg"),
    ("", ""),
])
def test_normalize_drops_noise_and_collapses_runs(trace, expected):
    assert normalize(trace) == expected


@pytest.mark.parametrize("trace", ["123 !!", "    ", "\t\n", "éàü", "42"])
def test_no_letters_gives_empty_query(trace):
    assert normalize(trace) == ""


@pytest.mark.parametrize("trace", ["caaat", "qwweerrtty", "a a a", "Hello, World", "zzzzz", "ab" * 80])
def test_normalize_is_idempotent(trace):
    once = normalize(trace)
    assert normalize(once) == once


def test_long_traces_are_truncated_to_cap():
    q = normalize("ab" * 100)
    assert len(q) == 64
    assert q == "ab" * 32
    assert normalize("abcdef", max_length=3) == "abc"


def test_collapse_runs_never_leaves_adjacent_duplicates():
    out = collapse_runs("aabbbaaccc")
    assert out == "abac"
    assert all(x != y for x, y in zip(out, out[1:]))
