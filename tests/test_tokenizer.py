import pytest
from hypothesis import given, strategies as st

from stacklang.reader.tokenizer import lex, tokenize


@pytest.mark.parametrize(
    "source,expected",
    [
        ("5 3 add", ["5", "3", "add"]),
        ("(hello world) print", ["(hello world)", "print"]),
        ("[1 2 3] reverse", ["[1 2 3]", "reverse"]),
        ("# a comment # 1", ["# a comment #", "1"]),
        ("1\t2\n3\r4　5", ["1", "2", "3", "4", "5"]),
        ("   a    b   ", ["a", "b"]),
        ("[(a b) [c d]] x", ["[(a b) [c d]]", "x"]),
        ("((nested (parens)) here) x", ["((nested (parens)) here)", "x"]),
        ("(a [b) c", ["(a [b)", "c"]),  # brackets inside parentheses are plain text
        ("[a (b ] c) d]", ["[a (b ] c) d]"]),
        ("(line\none)", ["(line one)"]),
    ]
)
def test_lex_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source", ["", "    ", "\n\t\r"])
def test_lex_blank_source_yields_nothing(source):
    assert tokenize(source) == []


def test_hash_inside_string_leaves_comment_mode_on():
    # a single '#' inside a string literal toggles the comment flag for the rest
    assert tokenize("(a#b) c d") == ["(a#b) c d"]


def test_unbalanced_close_paren_stops_splitting():
    assert tokenize(") a b") == [") a b"]


def test_lex_is_lazy():
    tokens = lex("1 2 3")
    assert next(tokens) == "1"
    assert list(tokens) == ["2", "3"]


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=60))
def test_lex_no_crash_and_no_empty_tokens(source):
    try:
        tokens = tokenize(source)
    except Exception as e:
        assert False, f"Tokenizer crashed on {source!r}: {e}"
    assert all(tokens)


@given(st.text(alphabet="ab1. \t\n\r", max_size=40))
def test_plain_text_splits_like_whitespace_split(source):
    assert tokenize(source) == source.split()
