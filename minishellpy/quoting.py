"""Quote balancing and backslash escapes on raw command lines."""

from __future__ import annotations

ESCAPABLE = frozenset(" |><&;()$\"'\\*?!#~[]{}")


def char_is_escapable(c: str) -> bool:
    """Return True if a backslash before ``c`` makes ``c`` literal."""
    return len(c) == 1 and c in ESCAPABLE


def _unescaped_double_quotes(text: str) -> int:
    return sum(
        1
        for pos, ch in enumerate(text)
        if ch == '"' and (pos == 0 or text[pos - 1] != "\\")
    )


def quotes_balanced(text: str) -> bool:
    """Check that quotes are paired and the line does not end in a backslash.

    Single quotes are only counted when the line holds no double quote, and
    double quotes (those not preceded by a backslash) only when it holds no
    single quote.
    """
    has_single = "'" in text
    has_double = '"' in text
    single_count = text.count("'") if not has_double else 0
    double_count = _unescaped_double_quotes(text) if not has_single else 0
    if single_count % 2 or double_count % 2:
        return False
    return not text.endswith("\\")


def unescape(text: str) -> str:
    """Drop each backslash that precedes an escapable character.

    Raises ValueError when the quotes of ``text`` are not balanced.
    """
    if not quotes_balanced(text):
        raise ValueError(f"unbalanced quotes in {text!r}")
    out: list[str] = []
    chars = iter(enumerate(text))
    for pos, ch in chars:
        following = text[pos + 1 : pos + 2]
        if ch == "\\" and char_is_escapable(following):
            out.append(following)
            next(chars, None)
        else:
            out.append(ch)
    return "".join(out)