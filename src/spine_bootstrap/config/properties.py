"""Reader and writer for flat ``key=value`` properties text.

The format follows ``java.util.Properties``: ``#`` and ``!`` start comments,
keys are separated from values by ``=``, ``:`` or whitespace, a trailing
backslash continues a line, and ``\\uXXXX`` escapes encode non-ASCII text.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Final

_SIMPLE_ESCAPES: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_WHITESPACE: Final[str] = " \t\f"
_SEPARATORS: Final[str] = "=:"


class PropertiesSyntaxError(ValueError):
    """Raised for malformed escapes in properties text."""

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")


def loads(text: str) -> dict[str, str]:
    """Parse properties text; later duplicates replace earlier ones."""

    result: dict[str, str] = {}
    for line_number, logical in _logical_lines(text):
        key, value = _split(logical)
        result[_unescape(key, line_number)] = _unescape(value, line_number)
    return result


def dumps(properties: Mapping[str, str], *, comments: tuple[str, ...] = ()) -> str:
    """Render ``properties`` with keys sorted, one entry per line."""

    lines = [f"# {comment}" for comment in comments]
    for key in sorted(properties):
        lines.append(f"{_escape(key, is_key=True)}={_escape(properties[key], is_key=False)}")
    return "\n".join(lines) + "\n"


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    pending: list[str] = []
    start = 0
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip(_WHITESPACE)
        if not pending:
            if not line or line[0] in "#!":
                continue
            start = number
        if _continues(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]

    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str, line_number: int) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue
        index += 1
        if index >= len(text):
            break
        escaped = text[index]
        if escaped == "u":
            digits = text[index + 1 : index + 5]
            if len(digits) != 4:
                raise PropertiesSyntaxError(line_number, f"malformed \\uXXXX escape: {text!r}")
            try:
                out.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise PropertiesSyntaxError(
                    line_number, f"malformed \\uXXXX escape: {text!r}"
                ) from exc
            index += 5
            continue
        out.append(_SIMPLE_ESCAPES.get(escaped, escaped))
        index += 1
    return "".join(out)


def _escape(text: str, *, is_key: bool) -> str:
    out: list[str] = []
    for position, char in enumerate(text):
        if char == "\\":
            out.append("\\\\")
        elif char == " " and (is_key or position == 0):
            out.append("\\ ")
        elif char in "\t\n\r\f":
            out.append("\\" + {"\t": "t", "\n": "n", "\r": "r", "\f": "f"}[char])
        elif char in "=:#!" and (is_key or position == 0):
            out.append("\\" + char)
        elif not " " <= char <= "~" and ord(char) <= 0xFFFF:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return "".join(out)


__all__ = ["PropertiesSyntaxError", "dumps", "loads"]
