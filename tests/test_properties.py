import pytest

from propcheck.errors import MalformedResourceFailure
from propcheck.properties import decode_resource_bytes, iter_entries


def entries(text):
    return list(iter_entries(text))


def test_separators():
    text = "a=1\nb:2\nc 3\nd\t=\t4\ne  :  5\n"
    assert entries(text) == [("a", "1"), ("b", "2"), ("c", "3"), ("d", "4"), ("e", "5")]


def test_comments_and_blank_lines():
    text = "# comment\n! also a comment\n\n   \n  key = value\n"
    assert entries(text) == [("key", "value")]


def test_empty():
    assert entries("") == []


def test_key_without_value():
    assert entries("lonely\nempty=\n") == [("lonely", ""), ("empty", "")]


def test_continuation_drops_leading_whitespace():
    text = "fruits = apple, \\\n         banana, \\\n         pear\n"
    assert entries(text) == [("fruits", "apple, banana, pear")]


def test_continued_comment_marker_is_content():
    text = "a = x\\\n  #not a comment\n"
    assert entries(text) == [("a", "x#not a comment")]


def test_comment_line_is_not_continued():
    text = "# comment \\\nkey=value\n"
    assert entries(text) == [("key", "value")]


def test_even_backslashes_do_not_continue():
    text = "path=c:\\\\\nnext=1\n"
    assert entries(text) == [("path", "c:\\"), ("next", "1")]


def test_line_endings():
    assert entries("a=1\r\nb=2\rc=3\n") == [("a", "1"), ("b", "2"), ("c", "3")]


def test_escapes():
    text = "tab=a\\tb\nnl=a\\nb\nuni=caf\\u00e9\nplain=\\q\n"
    assert entries(text) == [
        ("tab", "a\tb"),
        ("nl", "a\nb"),
        ("uni", "café"),
        ("plain", "q"),
    ]


def test_escaped_separators_in_key():
    assert entries("a\\=b\\:c\\ d=value\n") == [("a=b:c d", "value")]


def test_surrogate_pair_escape():
    assert entries("smile=\\ud83d\\ude00\n") == [("smile", "\U0001F600")]


def test_truncated_unicode_escape():
    with pytest.raises(MalformedResourceFailure, match="Malformed"):
        entries("key=\\u12\n")


def test_non_hex_unicode_escape():
    with pytest.raises(MalformedResourceFailure) as excinfo:
        entries("ok=1\nkey=\\uzzzz\n")
    assert excinfo.value.line == 2


def test_dangling_continuation():
    with pytest.raises(MalformedResourceFailure, match="continuation"):
        entries("key=value\\")


def test_decode_prefers_utf8():
    assert decode_resource_bytes("é".encode("utf-8")) == "é"


def test_decode_falls_back_to_latin1():
    assert decode_resource_bytes(b"\xe9") == "é"


def test_trailing_escaped_backslash_in_key():
    assert entries("a\\\\\n") == [("a\\", "")]
