import pytest
from utils.text_processing import split_lines, join_lines, collapse_markup_whitespace, normalize_stored_text

def test_split_lines_basic():
    """Test splitting, trimming and dropping blank lines."""
    assert split_lines("  first \n\n\t\nsecond") == ["first", "second"]

def test_split_lines_empty():
    assert split_lines("") == []

def test_join_lines():
    assert join_lines(["a", "b"]) == "a\nb"

def test_collapse_markup_whitespace():
    """Test that source newlines inside markup become single spaces."""
    assert collapse_markup_whitespace("\n    Two\n      words  here \n") == "Two words  here"

@pytest.mark.parametrize("value,expected", [
    ("already text", "already text"),
    (["one", "two"], "one\ntwo"),
    (["one", None, "two"], "one\ntwo"),
    ([], ""),
    (None, ""),
])
def test_normalize_stored_text(value, expected):
    assert normalize_stored_text(value) == expected
