"""Commands run inside the shell itself."""

from __future__ import annotations

import os
import re
import sys
from typing import TextIO

from .state import ShellState
from .tokenizer import SINGLE_QUOTE, has_inner_space

_SPECIALS = re.compile(r"(\$\$|\$\?)")


class ShellExit(Exception):
    """Raised when the shell should terminate with ``code``."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def _write_word(state: ShellState, word: str, out: TextIO, specials: bool) -> None:
    if not specials:
        out.write(word)
        return
    for piece in _SPECIALS.split(word):
        if piece == "$$":
            out.write(str(os.getpid()))
        elif piece == "$?":
            out.write(str(state.exit_code))
            state.exit_code = 0
        else:
            out.write(piece)


def _echo_no_newline(state: ShellState, words: list[str], out: TextIO) -> None:
    for idx, word in enumerate(words):
        if word.startswith("-n"):
            continue
        _write_word(state, word, out, True)
        if idx + 1 < len(words) and word:
            out.write(" ")


def echo(state: ShellState, command: list[str], quote: int, line: str, out: TextIO) -> None:
    """Print the arguments of ``command``.

    ``$$`` and ``$?`` are replaced unless the words were single-quoted.
    Words are only separated by spaces when ``line`` has more than one space.
    A first argument starting with ``-n`` suppresses the newline.
    """
    words = command[1:]
    if words and words[0].startswith("-n"):
        _echo_no_newline(state, command[2:], out)
        return
    spaced = has_inner_space(line)
    for idx, word in enumerate(words):
        _write_word(state, word, out, quote != SINGLE_QUOTE)
        if idx + 1 < len(words) and word and spaced:
            out.write(" ")
    out.write("\n")


def cd(state: ShellState, args: list[str], out: TextIO) -> None:
    """Change directory, updating PWD and OLDPWD in the shell environment."""
    if len(args) > 2:
        out.write("cd: too meny arguments\n")
        state.exit_code = 1
        return
    if len(args) == 1:
        path = state.env.get("HOME")
        if path is None:
            out.write("cd: HOME not set\n")
            state.exit_code = 1
            return
    elif args[1] == "-":
        path = state.env.get("OLDPWD")
        if path is None:
            out.write("cd: OLDPWD not set\n")
            state.exit_code = 1
            return
        out.write(f"{path}\n")
    else:
        path = args[1]
    previous = state.env.get("PWD")
    try:
        os.chdir(path)
        current = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"cd: {exc.strerror}\n")
        state.exit_code = 1
        return
    if previous is not None:
        state.env["OLDPWD"] = previous
    state.env["PWD"] = current
    state.exit_code = 0


def pwd(state: ShellState, out: TextIO) -> None:
    """Print the working directory."""
    try:
        current = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"pwd: {exc.strerror}\n")
        state.exit_code = 1
        return
    out.write(f"{current}\n")
    state.exit_code = 0


def export(state: ShellState, args: list[str], out: TextIO) -> int:
    """Set a variable from ``NAME=VALUE``, or list the sorted environment.

    A bare ``NAME`` is added with an empty value if it is not already set.
    """
    if len(args) < 2:
        for entry in sorted(f"{key}={value}" for key, value in state.env.items()):
            out.write(f"declare -x {entry}\n")
        return 0
    name, eq, value = args[1].partition("=")
    if eq:
        state.env[name] = value
    else:
        state.env.setdefault(name, "")
    return 0


def unset(state: ShellState, name: str | None, out: TextIO) -> int:
    """Remove ``name`` from the environment; return 1 if it was not there."""
    if name is None:
        out.write("unset: not enough arguments\n")
        return 1
    if name not in state.env:
        sys.stderr.write(f"unset: `{name}`: not found\n")
        return 1
    del state.env[name]
    return 0


def env_builtin(state: ShellState, args: list[str], out: TextIO) -> None:
    """Print the environment, one ``NAME=VALUE`` per line."""
    if len(args) > 1:
        out.write(f"env: {args[1]}: No such file or directory\n")
        return
    for key, value in state.env.items():
        out.write(f"{key}={value}\n")


def check_exit(state: ShellState, line: str | None, out: TextIO) -> None:
    """Raise ShellExit for end of input or a line that is exactly ``exit``.

    On ``exit`` the last exit status is printed first.
    """
    if line is None:
        raise ShellExit(0)
    if line == "exit":
        out.write(f"{state.exit_code}\n")
        state.exit_code = 0
        raise ShellExit(0)