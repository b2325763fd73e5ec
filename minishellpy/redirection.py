"""Opening of redirection targets and reading of here-documents."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Callable, Iterable

HEREDOC_PROMPT = "> "

_MODES = {">": "w", ">>": "a", "<": "r"}


class RedirectionError(OSError):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, target: str) -> None:
        super().__init__(f"minishell: {target}: open error")
        self.target = target


@dataclass
class Streams:
    """Files that replace standard input and output of a command."""

    stdin: IO[str] | None = None
    stdout: IO[str] | None = None

    def close(self) -> None:
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()

    def __enter__(self) -> Streams:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _opener(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def read_heredoc(delimiter: str, reader: Callable[[str], str | None]) -> str | None:
    """Read lines with ``reader`` until one equals ``delimiter``.

    Returns the collected lines, each ending in a newline, or None when the
    input ends before the delimiter is seen.
    """
    lines: list[str] = []
    while True:
        try:
            line = reader(HEREDOC_PROMPT)
        except EOFError:
            return None
        if line is None:
            return None
        if line == delimiter:
            return "".join(lines)
        lines.append(f"{line}\n")


def open_redirections(redirections: Iterable[tuple[str, str]]) -> Streams:
    """Open the targets of ``>``, ``>>`` and ``<`` in order.

    A later target of the same direction replaces an earlier one; earlier
    output files are still created. Other operators are ignored. Raises
    RedirectionError for the first target that cannot be opened.
    """
    streams = Streams()
    try:
        for operator, target in redirections:
            mode = _MODES.get(operator)
            if mode is None:
                continue
            try:
                handle = open(target, mode, opener=_opener)
            except OSError as exc:
                raise RedirectionError(target) from exc
            if mode == "r":
                if streams.stdin is not None:
                    streams.stdin.close()
                streams.stdin = handle
            else:
                if streams.stdout is not None:
                    streams.stdout.close()
                streams.stdout = handle
    except RedirectionError:
        streams.close()
        raise
    return streams