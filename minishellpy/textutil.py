"""Small text helpers: integer parsing, word splitting and line reading."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

_WHITESPACE = " \t\n\v\f\r"
_CHUNK = 4096


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield lines from a readable stream, each keeping its trailing newline.

    Only ``\\n`` ends a line. The last line is yielded without a newline if
    the stream does not end with one. Works with text and binary streams.
    """
    pending = None
    while True:
        chunk = stream.read(_CHUNK)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        start = 0
        while (end := pending.find(newline, start)) != -1:
            yield pending[start : end + 1]
            start = end + 1
        pending = pending[start:]
    if pending:
        yield pending