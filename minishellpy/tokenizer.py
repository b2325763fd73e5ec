"""Splitting of a command line into word, redirection and pipe tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .quoting import char_is_escapable, quotes_balanced

NO_QUOTE = 0
SINGLE_QUOTE = 1
DOUBLE_QUOTE = 2

_WORD_END = " |<>"


class TokenType(Enum):
    WORD = "word"
    REDIRECT = "rdr"
    PIPE = "pipe"


@dataclass
class Token:
    value: str
    type: TokenType
    quote: int = NO_QUOTE


_OPERATORS = (
    (">>", TokenType.REDIRECT),
    ("<<", TokenType.REDIRECT),
    ("|", TokenType.PIPE),
    (">", TokenType.REDIRECT),
    ("<", TokenType.REDIRECT),
)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens.

    Quoted parts become separate word tokens whose ``quote`` is
    SINGLE_QUOTE or DOUBLE_QUOTE; characters right after a closing quote
    join that quoted word.
    """
    tokens: list[Token] = []
    n = len(text)
    i = 0
    while i < n:
        if text[i] == " ":
            i += 1
            continue
        for op, kind in _OPERATORS:
            if text.startswith(op, i):
                tokens.append(Token(op, kind))
                i += len(op)
                break
        else:
            i = _read_word(text, i, tokens)
    return tokens


def _read_word(text: str, i: int, tokens: list[Token]) -> int:
    n = len(text)
    word: list[str] = []
    quote = NO_QUOTE
    while i < n and text[i] not in _WORD_END:
        ch = text[i]
        following = text[i + 1 : i + 2]
        if ch in ("'", '"'):
            if following == ch:
                tokens.append(Token("", TokenType.WORD, quote))
            if word:
                tokens.append(Token("".join(word), TokenType.WORD, quote))
                word = []
            quote = SINGLE_QUOTE if ch == "'" else DOUBLE_QUOTE
            i += 1
            while i < n and text[i] not in (ch, "\\"):
                word.append(text[i])
                i += 1
            if i < n and text[i] == ch:
                i += 1
        elif ch == "\\" and char_is_escapable(following):
            if following == "$":
                word.append(ch)
                i += 1
            else:
                word.append(following)
                i += 2
        else:
            word.append(ch)
            i += 1
    if word:
        tokens.append(Token("".join(word), TokenType.WORD, quote))
    return i


def syntax_ok(tokens: list[Token], text: str) -> bool:
    """Reject a line that starts with a pipe or has unbalanced quotes."""
    if tokens and tokens[0].type is TokenType.PIPE:
        return False
    return quotes_balanced(text)


def has_inner_space(text: str) -> bool:
    """Return True if a space follows the first space of ``text``."""
    first = text.find(" ")
    if first == -1:
        return False
    return " " in text[first + 1 :]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a debugging listing."""
    return "".join(
        f"Eleman : {token.value}\n type : {token.type.value}\n" for token in tokens
    )