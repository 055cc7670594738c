"""
Property-file line decoder.

Turns the text of a ``*.properties`` resource into key/value pairs, one at a
time and in file order. It knows nothing about duplicate keys; the validator
decides what a repeated key means.

Syntax handled:
- natural lines end at ``\\n``, ``\\r`` or ``\\r\\n``
- leading blanks (space, tab, form feed) are skipped on every natural line
- ``#`` / ``!`` comment lines, blank lines
- an odd number of trailing backslashes continues the line
- ``key=value``, ``key:value`` and ``key value`` declarations
- ``\\uXXXX``, ``\\t``, ``\\n``, ``\\r``, ``\\f`` escapes; any other escaped
  character stands for itself
"""

from __future__ import annotations

import re
import string
from typing import Iterator, NamedTuple, Tuple

from .errors import MalformedResourceFailure
from .rules import COMMENT_MARKERS, ISO_8859_1, KEY_TERMINATORS, UTF_8, WHITESPACE

_NEWLINE = re.compile(r"\r\n|\r|\n")

_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertyEntry(NamedTuple):
    key: str
    value: str


def decode_resource_bytes(raw: bytes) -> str:
    """
    Bytes -> text the way resource bundles are read: UTF-8, or ISO-8859-1
    when the bytes are not valid UTF-8.
    """
    try:
        return raw.decode(UTF_8)
    except UnicodeDecodeError:
        return raw.decode(ISO_8859_1)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    pending = None
    start = 0

    for lineno, natural in enumerate(_NEWLINE.split(text), start=1):
        line = natural.lstrip(WHITESPACE)

        if pending is None:
            if not line or line[0] in COMMENT_MARKERS:
                continue
            start = lineno
            head = ""
        else:
            head = pending

        if _continues(line):
            pending = head + line[:-1]
            continue

        pending = None
        yield start, head + line

    if pending is not None:
        raise MalformedResourceFailure("Line continuation at end of resource", start)


def _split(line: str) -> Tuple[str, str]:
    n = len(line)
    i = 0
    escaped = False
    while i < n:
        c = line[i]
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c in KEY_TERMINATORS:
            break
        i += 1

    j = i
    while j < n and line[j] in WHITESPACE:
        j += 1
    if j < n and line[j] in "=:":
        j += 1
    while j < n and line[j] in WHITESPACE:
        j += 1

    return line[:i], line[j:]


def _unescape(raw: str, lineno: int) -> str:
    out = []
    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue

        c = raw[i]
        i += 1

        if c == "u":
            digits = raw[i:i + 4]
            if len(digits) < 4 or any(d not in string.hexdigits for d in digits):
                raise MalformedResourceFailure("Malformed \\uxxxx encoding.", lineno)
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_SIMPLE_ESCAPES.get(c, c))

    text = "".join(out)
    # surrogate pairs from two \\u escapes become one character
    if any("\ud800" <= ch <= "\udfff" for ch in text):
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return text


def iter_entries(text: str) -> Iterator[PropertyEntry]:
    """Yield entries lazily; a malformed line raises only when reached."""
    for lineno, line in _logical_lines(text):
        key, value = _split(line)
        yield PropertyEntry(_unescape(key, lineno), _unescape(value, lineno))
