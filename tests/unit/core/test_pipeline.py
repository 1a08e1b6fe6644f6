"""Unit tests for core/pipeline.py"""

import pytest

from pairdiff.core.models import DiffLineType, DiffResult, DiffStats
from pairdiff.core.pipeline import diff, diff_json
from pairdiff.errors import InvalidInputError


def _summary(result: DiffResult):
    return [(r.type, r.left_content, r.right_content) for r in result.rows]


# --- diff ---

def test_diff_dissimilar_replacement_splits():
    """A one-line replacement below the similarity threshold becomes deleted + added."""
    result = diff("a\nb\nc", "a\nx\nc")
    assert _summary(result) == [
        (DiffLineType.unchanged, "a", "a"),
        (DiffLineType.deleted, "b", None),
        (DiffLineType.added, None, "x"),
        (DiffLineType.unchanged, "c", "c"),
    ]


def test_diff_similar_replacement_is_modified():
    result = diff("foo\nbar", "foo\nbaz")
    assert _summary(result) == [
        (DiffLineType.unchanged, "foo", "foo"),
        (DiffLineType.modified, "bar", "baz"),
    ]
    modified = result.rows[1]
    assert modified.left_changed_ranges == [(2, 3)]
    assert modified.right_changed_ranges == [(2, 3)]
    assert result.stats == DiffStats(modifications=1, unchanged=1)


def test_diff_empty_to_text_is_single_addition():
    result = diff("", "hello")
    assert _summary(result) == [(DiffLineType.added, None, "hello")]
    assert result.stats == DiffStats(additions=1)


def test_diff_text_to_empty_is_single_deletion():
    result = diff("hello", "")
    assert _summary(result) == [(DiffLineType.deleted, "hello", None)]
    assert result.rows[0].left_line_number == 1
    assert result.stats == DiffStats(deletions=1)


def test_diff_empty_to_multiline_text_adds_every_line():
    result = diff("", "a\nb\n")
    assert _summary(result) == [
        (DiffLineType.added, None, "a"),
        (DiffLineType.added, None, "b"),
        (DiffLineType.added, None, ""),
    ]
    assert [r.right_line_number for r in result.rows] == [1, 2, 3]


def test_diff_both_empty_has_no_rows():
    """Two empty texts give zero rows, not one unchanged empty line."""
    result = diff("", "")
    assert result.rows == []
    assert result.stats == DiffStats()
    assert not result.stats.has_changes


@pytest.mark.parametrize("text", ["", "one line", "a\nb\nc\n", "x\r\ny\rz", "\n\n", "ünïcödé\ttabs"])
def test_diff_identical_inputs_are_unchanged(text):
    result = diff(text, text)
    assert all(r.type == DiffLineType.unchanged for r in result.rows)
    assert not result.stats.has_changes


def test_diff_trailing_newline_is_a_line():
    """'a\\n' splits into ['a', ''] so only the added line differs from 'a\\nb\\n'."""
    result = diff("a\n", "a\nb\n")
    assert _summary(result) == [
        (DiffLineType.unchanged, "a", "a"),
        (DiffLineType.added, None, "b"),
        (DiffLineType.unchanged, "", ""),
    ]


def test_diff_universal_newlines():
    """CRLF, CR and LF separate lines the same way."""
    assert _summary(diff("a\r\nb", "a\nb")) == _summary(diff("a\nb", "a\nb"))
    assert diff("a\rb", "a\nb").stats == DiffStats(unchanged=2)


def test_diff_code_sample(left_text, right_text):
    result = diff(left_text, right_text)
    assert [r.type for r in result.rows] == [
        DiffLineType.modified,
        DiffLineType.modified,
        DiffLineType.unchanged,
        DiffLineType.added,
        DiffLineType.unchanged,
        DiffLineType.unchanged,
    ]
    assert result.stats == DiffStats(additions=1, modifications=2, unchanged=3)


@pytest.mark.parametrize("a,b", [
    ("a\nb\nc", "a\nx\nc"),
    ("foo\nbar", "foo\nbaz"),
    ("", "hello"),
    ("first\nsecond", ""),
    ("one\ntwo\nthree", "zero\none\nthree\nfour"),
])
def test_diff_count_symmetry(a, b):
    """Swapping sides swaps additions/deletions and keeps modifications."""
    forward, backward = diff(a, b).stats, diff(b, a).stats
    assert forward.additions == backward.deletions
    assert forward.deletions == backward.additions
    assert forward.modifications == backward.modifications


def test_diff_count_symmetry_code_sample(left_text, right_text):
    forward, backward = diff(left_text, right_text).stats, diff(right_text, left_text).stats
    assert (forward.additions, forward.deletions) == (backward.deletions, backward.additions)
    assert forward.modifications == backward.modifications


def test_diff_is_repeatable():
    """Calls share no state: the same inputs give equal results."""
    assert diff("foo\nbar", "foo\nbaz") == diff("foo\nbar", "foo\nbaz")


# --- diff_json ---

def test_diff_json_ignores_key_order_and_layout():
    result = diff_json('{"b": 1, "a": [1, 2]}', '{\n  "a": [1, 2],\n  "b": 1\n}')
    assert not result.stats.has_changes
    assert result.rows[0].left_content == "{"


def test_diff_json_sample(left_json, right_json):
    result = diff_json(left_json, right_json)
    assert result.stats == DiffStats(additions=1, modifications=2, unchanged=6)
    modified = [r for r in result.rows if r.type == DiffLineType.modified]
    assert (modified[1].left_content, modified[1].right_content) == ('  "version": 1', '  "version": 2')


def test_diff_json_both_blank_is_empty():
    result = diff_json("  ", "\n")
    assert result.rows == []


def test_diff_json_one_blank_side_is_empty_object():
    """A blank side diffs as {}; "{}" vs "{" is similar enough to pair."""
    result = diff_json("", '{"a": 1}')
    assert [r.type for r in result.rows] == [DiffLineType.modified, DiffLineType.added, DiffLineType.added]
    assert result.rows[0].left_content == "{}"


def test_diff_json_invalid_raises():
    with pytest.raises(InvalidInputError, match="Invalid JSON"):
        diff_json('{"a": 1}', '{"a": ')
