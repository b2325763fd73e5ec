"""Grouping of tokens into the commands of a pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .expansion import expand_dollar, has_dollar
from .tokenizer import NO_QUOTE, Token, TokenType


@dataclass
class Command:
    """One stage of a pipeline.

    ``redirections`` holds ``(operator, target)`` pairs in line order and
    ``quote`` the quoting of the last word.
    """

    args: list[str] = field(default_factory=list)
    redirections: list[tuple[str, str]] = field(default_factory=list)
    quote: int = NO_QUOTE

    @property
    def name(self) -> str | None:
        return self.args[0] if self.args else None


def parse(tokens: list[Token], env: Mapping[str, str] | None = None) -> list[Command]:
    """Build the commands of a pipeline, expanding variables in words.

    The token after a redirection operator is taken as its target whatever
    its type. Raises ValueError when an operator has no target.
    """
    commands: list[Command] = []
    stream = iter(tokens)
    current: Command | None = None
    for token in stream:
        if current is None:
            current = Command()
            commands.append(current)
        if token.type is TokenType.PIPE:
            current = None
        elif token.type is TokenType.WORD:
            value = token.value
            if has_dollar(value):
                value = expand_dollar(value, token.quote, env)
            current.args.append(value)
            current.quote = token.quote
        else:
            target = next(stream, None)
            if target is None:
                raise ValueError(f"missing target after {token.value!r}")
            current.redirections.append((token.value, target.value))
    return commands