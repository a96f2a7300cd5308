"""Reader for ``.properties`` message files.

Follows the conventional ``java.util.Properties`` text grammar:

- ``#`` / ``!`` comment lines and blank lines are skipped;
- a line ending in an odd number of backslashes continues on the next one
  (leading whitespace of the continuation is dropped);
- the key ends at the first unescaped ``=``, ``:`` or whitespace, and at most
  one separator is consumed after it;
- ``\\t \\n \\r \\f \\uXXXX`` escapes are decoded, any other escaped
  character stands for itself.

Values keep trailing whitespace here; trimming is the loader's job.
"""

from __future__ import annotations

import os
import re
import string
from pathlib import Path
from typing import Iterator

_NATURAL_LINE_RE = re.compile(r'\r\n|\r|\n')
_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


class PropertiesSyntaxError(ValueError):
    def __init__(self, message: str, lineno: int | None = None):
        super().__init__(f'line {lineno}: {message}' if lineno else message)
        self.lineno = lineno


def _trailing_backslashes(line: str) -> int:
    return len(line) - len(line.rstrip('\\'))


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(lineno, logical_line)`` pairs with continuations joined."""
    parts: list[str] = []
    start = 0
    for lineno, raw in enumerate(_NATURAL_LINE_RE.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)
        if not parts:
            if not line or line[0] in '#!':
                continue
            start = lineno
        if _trailing_backslashes(line) % 2:
            parts.append(line[:-1])
            continue
        parts.append(line)
        yield start, ''.join(parts)
        parts = []
    if parts:
        yield start, ''.join(parts)


def _unescape(s: str, lineno: int) -> str:
    if '\\' not in s:
        return s
    out: list[str] = []
    i, n = 0, len(s)
    while i < n:
        c = s[i]
        i += 1
        if c != '\\':
            out.append(c)
            continue
        if i >= n:
            break
        c = s[i]
        i += 1
        if c == 'u':
            digits = s[i : i + 4]
            if len(digits) < 4 or any(ch not in string.hexdigits for ch in digits):
                raise PropertiesSyntaxError('Malformed \\uxxxx encoding', lineno)
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(c, c))
    result = ''.join(out)
    if any('\ud800' <= ch <= '\udfff' for ch in result):
        # \uD83D\uDE00 style escapes produce surrogate pairs; join them
        result = result.encode('utf-16', 'surrogatepass').decode('utf-16', 'replace')
    return result


def _split(line: str) -> tuple[str, str]:
    n = len(line)
    key_end = value_start = n
    has_separator = False
    escaped = False
    for i, c in enumerate(line):
        if not escaped and c in _SEPARATORS:
            key_end, value_start, has_separator = i, i + 1, True
            break
        if not escaped and c in _WHITESPACE:
            key_end, value_start = i, i + 1
            break
        escaped = (c == '\\') and not escaped
    while value_start < n:
        c = line[value_start]
        if c not in _WHITESPACE:
            if has_separator or c not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1
    return line[:key_end], line[value_start:]


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into an ordered dict; later duplicates win."""
    props: dict[str, str] = {}
    for lineno, line in _logical_lines(text):
        raw_key, raw_value = _split(line)
        props[_unescape(raw_key, lineno)] = _unescape(raw_value, lineno)
    return props


def read_properties_text(path: str | os.PathLike) -> str:
    """Decode a properties file as UTF-8 (a leading BOM is ignored)."""
    return Path(path).read_text(encoding='utf-8-sig')


def load_properties(path: str | os.PathLike) -> dict[str, str]:
    return parse_properties(read_properties_text(path))


__all__ = ['PropertiesSyntaxError', 'parse_properties', 'read_properties_text', 'load_properties']
