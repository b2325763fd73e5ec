"""The interactive read-and-run loop."""

from __future__ import annotations

import signal
import sys

from .builtins import ShellExit, check_exit
from .executor import dispatch
from .parser import parse
from .state import ShellState
from .tokenizer import syntax_ok, tokenize

PROMPT = "minishell$ "
SYNTAX_ERROR_STATUS = 258


def _syntax_error(state: ShellState) -> None:
    state.exit_code = SYNTAX_ERROR_STATUS
    sys.stdout.write("Syntax Error\n")


def handle_line(state: ShellState, line: str) -> None:
    """Tokenize, parse and run one input line.

    Raises ShellExit when the line asks the shell to stop.
    """
    if not line:
        return
    check_exit(state, line, sys.stdout)
    tokens = tokenize(line)
    if not syntax_ok(tokens, line):
        _syntax_error(state)
        return
    try:
        commands = parse(tokens, state.env)
    except ValueError:
        _syntax_error(state)
        return
    if commands:
        dispatch(state, commands, line)


def main(argv: list[str] | None = None) -> int:
    """Read lines from the terminal and run them until end of input or ``exit``."""
    del argv
    try:
        import readline  # noqa: F401  # line editing and history for input()
    except ImportError:
        pass
    state = ShellState()
    previous_quit = None
    if hasattr(signal, "SIGQUIT"):
        previous_quit = signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    try:
        while True:
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                continue
            except EOFError:
                sys.stdout.write("exit\n")
                return 0
            try:
                handle_line(state, line)
            except ShellExit as exc:
                return exc.code
    finally:
        if previous_quit is not None:
            signal.signal(signal.SIGQUIT, previous_quit)