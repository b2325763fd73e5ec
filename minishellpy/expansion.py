"""Expansion of $NAME and ${NAME} references inside words."""

from __future__ import annotations

import os
from typing import Mapping

from .tokenizer import SINGLE_QUOTE


def has_dollar(text: str) -> bool:
    """Return True if ``text`` contains a dollar sign."""
    return "$" in text


def dollar_count(text: str) -> int:
    """Count the dollar signs in ``text``."""
    return text.count("$")


def _is_name_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def _reference_end(text: str, i: int) -> tuple[str, int]:
    """Return the variable name at the ``$`` at ``i`` and the index past it."""
    j = i + 2 if text[i + 1 : i + 2] == "{" else i + 1
    start = j
    while j < len(text) and _is_name_char(text[j]):
        j += 1
    name = text[start:j]
    if text[j : j + 1] == "}":
        j += 1
    return name, j


def _strip_backslashes(text: str) -> str:
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            ch = next(chars, "")
        out.append(ch)
    return "".join(out)


def expand_dollar(text: str, quote: int, env: Mapping[str, str] | None = None) -> str:
    """Replace variable references in ``text`` with values from ``env``.

    Words in single quotes and words holding ``$$`` or ``$?`` are returned
    unchanged. If any ``$`` is preceded by a backslash, backslashes are
    removed instead and nothing is expanded. Unknown names expand to "".
    """
    if env is None:
        env = os.environ
    if not has_dollar(text) or quote == SINGLE_QUOTE:
        return text
    if "$$" in text or "$?" in text:
        return text
    if any(ch == "$" and pos > 0 and text[pos - 1] == "\\" for pos, ch in enumerate(text)):
        return _strip_backslashes(text)
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "$" and i + 1 < len(text):
            name, i = _reference_end(text, i)
            out.append(env.get(name, "") if name else "")
            continue
        out.append(text[i])
        i += 1
    return "".join(out)